"""
Tests for app/paths.py -- hero table lookup order and packaged data.
"""

import os
import tomllib

import pytest

import app
from app import paths
from engine.hero_repository import HeroRepository


@pytest.fixture(autouse=True)
def _isolated_user_dir(tmp_path, monkeypatch):
    """Point the user data dir at a temp folder and clear the override."""
    user_dir = tmp_path / "user-data"
    user_dir.mkdir()
    monkeypatch.setattr(paths, "get_user_data_dir", lambda: str(user_dir))
    monkeypatch.delenv(paths.DATA_ENV_VAR, raising=False)
    return user_dir


class TestHeroesDataPath:
    def test_defaults_to_bundled_table(self):
        assert paths.get_heroes_data_path() == paths.get_bundled_heroes_path()

    def test_user_copy_wins_over_bundle(self, _isolated_user_dir):
        user_copy = _isolated_user_dir / "heroes.json"
        user_copy.write_text("[]", encoding="utf-8")
        assert paths.get_heroes_data_path() == str(user_copy)

    def test_env_override_wins(self, tmp_path, _isolated_user_dir, monkeypatch):
        (_isolated_user_dir / "heroes.json").write_text("[]", encoding="utf-8")
        override = tmp_path / "custom.json"
        monkeypatch.setenv(paths.DATA_ENV_VAR, str(override))
        assert paths.get_heroes_data_path() == str(override)


class TestBundledTable:
    def test_lives_inside_app_package(self):
        package_dir = os.path.dirname(os.path.abspath(app.__file__))
        bundled = paths.get_bundled_heroes_path()
        assert os.path.commonpath([package_dir, bundled]) == package_dir
        assert bundled == os.path.join(package_dir, "data", "heroes.json")

    def test_exists_and_loads(self):
        bundled = paths.get_bundled_heroes_path()
        assert os.path.isfile(bundled)
        assert len(HeroRepository.from_json_file(bundled)) > 0

    def test_declared_as_package_data(self, project_root):
        with open(os.path.join(project_root, "pyproject.toml"), "rb") as fh:
            config = tomllib.load(fh)
        patterns = config["tool"]["setuptools"]["package-data"]["app"]
        assert "data/*.json" in patterns

    def test_not_frozen_in_tests(self):
        assert not paths.is_frozen()
