"""Tests for the renderer."""

import pytest

from blueprints.geometry.schemas import Blueprint, Point
from blueprints.rendering.renderer import render_blueprint, to_draw_ops
from blueprints.rendering.schemas import (
    MARKER_RADIUS,
    BlueprintDrawing,
    LineTo,
    MarkAt,
    MoveTo,
    RenderStyle,
)


def line_of(n: int) -> Blueprint:
    return Blueprint(
        author="a",
        name=f"line{n}",
        points=[Point(x=i * 10, y=i) for i in range(n)],
    )


class TestToDrawOps:

    def test_empty_blueprint_draws_nothing(self, blank):
        assert to_draw_ops(blank) == []

    def test_single_point_is_move_and_marker(self):
        ops = to_draw_ops(line_of(1))
        assert ops == [MoveTo(x=0, y=0), MarkAt(x=0, y=0, radius=3)]

    @pytest.mark.parametrize("n", [1, 2, 4, 11])
    def test_op_counts(self, n):
        ops = to_draw_ops(line_of(n))
        assert sum(isinstance(op, MoveTo) for op in ops) == 1
        assert sum(isinstance(op, LineTo) for op in ops) == n - 1
        assert sum(isinstance(op, MarkAt) for op in ops) == n

    def test_markers_follow_path(self, house):
        ops = to_draw_ops(house)
        first_marker = next(i for i, op in enumerate(ops) if isinstance(op, MarkAt))
        assert all(isinstance(op, (MoveTo, LineTo)) for op in ops[:first_marker])
        assert all(isinstance(op, MarkAt) for op in ops[first_marker:])

    def test_house_sequence(self, house):
        ops = to_draw_ops(house)
        assert ops[:4] == [
            MoveTo(x=150, y=120),
            LineTo(x=215, y=115),
            LineTo(x=340, y=240),
            LineTo(x=15, y=215),
        ]
        assert [(op.x, op.y) for op in ops[4:]] == [(p.x, p.y) for p in house.points]
        assert all(op.radius == MARKER_RADIUS == 3 for op in ops[4:])

    def test_custom_marker_radius(self, gear):
        ops = to_draw_ops(gear, marker_radius=5)
        assert {op.radius for op in ops if isinstance(op, MarkAt)} == {5}

    def test_does_not_mutate_blueprint(self, house):
        before = house.model_copy(deep=True)
        to_draw_ops(house)
        assert house == before


class TestRenderBlueprint:

    def test_bundles_ops_with_default_style(self, gear):
        drawing = render_blueprint(gear)
        assert drawing.author == "johnconnor"
        assert drawing.name == "gear"
        assert drawing.style == RenderStyle()
        assert drawing.style.stroke_color == "#333"
        assert drawing.style.marker_color == "#666"
        assert len(drawing.ops) == 1 + 2 + 3

    def test_ops_serialize_with_discriminator(self, gear):
        data = render_blueprint(gear).model_dump(mode="json")
        assert [op["op"] for op in data["ops"]] == [
            "move_to", "line_to", "line_to", "mark_at", "mark_at", "mark_at",
        ]
        assert BlueprintDrawing.model_validate(data) == render_blueprint(gear)
