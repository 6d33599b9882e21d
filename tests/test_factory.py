"""Tests for data source selection."""

import os
from unittest.mock import patch

import pytest

from blueprints.sources.factory import (
    build_source,
    get_blueprint_source,
    reset_blueprint_source,
    source_from_env,
)
from blueprints.sources.fixture import FixtureBlueprintSource
from blueprints.sources.remote import RemoteBlueprintSource


@pytest.fixture(autouse=True)
def fresh_singleton():
    reset_blueprint_source()
    yield
    reset_blueprint_source()


class TestBuildSource:

    def test_fixture(self):
        assert isinstance(build_source("fixture"), FixtureBlueprintSource)

    def test_remote(self):
        source = build_source("remote", base_url="http://localhost:8001", timeout=5)
        assert isinstance(source, RemoteBlueprintSource)
        assert source.base_url == "http://localhost:8001"

    def test_remote_requires_url(self):
        with pytest.raises(ValueError, match="BLUEPRINTS_API_URL"):
            build_source("remote")

    def test_unknown_kind(self):
        with pytest.raises(ValueError, match="Unknown blueprint source"):
            build_source("postgres")


class TestEnvironment:

    def test_default_is_fixture(self):
        with patch.dict(os.environ, {}, clear=True):
            assert isinstance(source_from_env(), FixtureBlueprintSource)

    def test_remote_from_env(self):
        env = {"BLUEPRINTS_SOURCE": "remote", "BLUEPRINTS_API_URL": "http://svc:8001"}
        with patch.dict(os.environ, env, clear=True):
            source = source_from_env()
        assert isinstance(source, RemoteBlueprintSource)

    def test_definitions_dir_from_env(self, tmp_path):
        with patch.dict(os.environ, {"BLUEPRINTS_DEFINITIONS_DIR": str(tmp_path)}, clear=True):
            source = source_from_env()
        assert source.definitions_dir == tmp_path
        assert source.count() == 0

    def test_singleton_is_reused(self):
        with patch.dict(os.environ, {}, clear=True):
            assert get_blueprint_source() is get_blueprint_source()
