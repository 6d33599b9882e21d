"""Tests for the in-memory fixture source."""

import json

import pytest

from blueprints.geometry.schemas import Blueprint, Point
from blueprints.sources.base import BlueprintSource
from blueprints.sources.errors import (
    BlueprintConflictError,
    BlueprintNotFoundError,
    BlueprintValidationError,
)
from blueprints.sources.fixture import FixtureBlueprintSource


class TestLoading:

    def test_satisfies_source_protocol(self, seeded_source):
        assert isinstance(seeded_source, BlueprintSource)

    def test_bundled_definitions_load(self, bundled_source):
        authors = bundled_source.list_authors()
        for author in ["johnconnor", "maryweyland", "john", "maria", "carlos"]:
            assert author in authors

    def test_missing_directory_is_empty(self, tmp_path):
        source = FixtureBlueprintSource(definitions_dir=tmp_path / "missing")
        assert source.count() == 0

    def test_bad_file_is_skipped(self, tmp_path):
        (tmp_path / "bad.json").write_text("{not json")
        (tmp_path / "good.json").write_text(json.dumps(
            [{"author": "ann", "name": "a", "points": [{"x": 1, "y": 1}]}]
        ))
        source = FixtureBlueprintSource(definitions_dir=tmp_path)
        assert source.count() == 1

    def test_duplicate_seed_keeps_first(self, house):
        other = Blueprint(author="johnconnor", name="house", points=[])
        source = FixtureBlueprintSource(blueprints=[house, other])
        assert source.count() == 1


class TestFetch:

    @pytest.mark.asyncio
    async def test_fetch_by_author_in_insertion_order(self, seeded_source):
        blueprints = await seeded_source.fetch_by_author("johnconnor")
        assert [bp.name for bp in blueprints] == ["house", "gear"]

    @pytest.mark.asyncio
    async def test_unknown_author_is_not_found(self, seeded_source):
        with pytest.raises(BlueprintNotFoundError) as exc_info:
            await seeded_source.fetch_by_author("nobody")
        assert exc_info.value.author == "nobody"
        assert exc_info.value.name is None

    @pytest.mark.asyncio
    async def test_fetch_by_author_and_name(self, seeded_source, gear):
        assert await seeded_source.fetch_by_author_and_name("johnconnor", "gear") == gear

    @pytest.mark.asyncio
    async def test_unknown_name_is_not_found(self, seeded_source):
        with pytest.raises(BlueprintNotFoundError):
            await seeded_source.fetch_by_author_and_name("johnconnor", "castle")

    @pytest.mark.asyncio
    async def test_returned_records_are_copies(self, seeded_source):
        bp = await seeded_source.fetch_by_author_and_name("johnconnor", "house")
        bp.points.clear()
        again = await seeded_source.fetch_by_author_and_name("johnconnor", "house")
        assert len(again.points) == 4

    @pytest.mark.asyncio
    async def test_fetch_all(self, seeded_source):
        assert len(await seeded_source.fetch_all()) == 2


class TestCreate:

    @pytest.mark.asyncio
    async def test_create_then_fetch(self, seeded_source):
        new = Blueprint(author="maria", name="tri", points=[Point(x=0, y=0)])
        stored = await seeded_source.create(new)
        assert stored == new
        assert await seeded_source.fetch_by_author("maria") == [new]

    @pytest.mark.asyncio
    async def test_create_existing_is_conflict_and_keeps_record(self, seeded_source, house):
        duplicate = Blueprint(author="johnconnor", name="house", points=[Point(x=1, y=1)])
        with pytest.raises(BlueprintConflictError):
            await seeded_source.create(duplicate)
        assert await seeded_source.fetch_by_author_and_name("johnconnor", "house") == house


class TestUpdate:

    @pytest.mark.asyncio
    async def test_update_round_trip(self, seeded_source):
        replacement = Blueprint(
            author="johnconnor",
            name="house",
            points=[Point(x=9, y=9), Point(x=1, y=1), Point(x=5, y=5)],
        )
        await seeded_source.update("johnconnor", "house", replacement)
        fetched = await seeded_source.fetch_by_author_and_name("johnconnor", "house")
        assert fetched == replacement
        assert [p.x for p in fetched.points] == [9, 1, 5]

    @pytest.mark.asyncio
    async def test_update_missing_is_not_found(self, seeded_source):
        ghost = Blueprint(author="johnconnor", name="ghost", points=[])
        with pytest.raises(BlueprintNotFoundError):
            await seeded_source.update("johnconnor", "ghost", ghost)

    @pytest.mark.asyncio
    async def test_update_key_mismatch_rejected(self, seeded_source, gear):
        with pytest.raises(BlueprintValidationError):
            await seeded_source.update("johnconnor", "house", gear)

    @pytest.mark.asyncio
    async def test_update_key_mismatch_checked_before_loading(self, tmp_path, gear):
        (tmp_path / "jc.json").write_text(json.dumps([gear.model_dump(mode="json")]))
        source = FixtureBlueprintSource(definitions_dir=tmp_path)
        with pytest.raises(BlueprintValidationError):
            await source.update("johnconnor", "house", gear)
        assert source._loaded is False
