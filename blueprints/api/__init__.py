"""Blueprints REST API."""
