"""Blueprints Browser - author blueprint lookup and rendering service.

This package provides the retrieval-aggregation-rendering pipeline:
- Blueprint data sources (in-memory fixtures or a remote HTTP service)
- Author summaries (per-blueprint point counts, total points)
- Draw operations for rendering a blueprint as a polyline
"""

__version__ = "0.1.0"
