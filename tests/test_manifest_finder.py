"""Tests for manifest and lock file lookup."""

from pathlib import Path

import pytest

from manifest import finder
from manifest.finder import ManifestFinder


@pytest.fixture
def project(tmp_path):
    """A package root with an empty qilletni-src directory."""
    (tmp_path / "qilletni-src").mkdir()
    return tmp_path


class TestManifestFinder:
    """Test lookup against an explicit base directory."""

    def test_top_level_manifest_preferred(self, project):
        """Test that a top-level manifest wins over qilletni-src."""
        (project / "qilletni_info.yml").write_text("name: top\n")
        (project / "qilletni-src" / "qilletni_info.yml").write_text("name: nested\n")
        assert ManifestFinder(project).get_manifest() == project / "qilletni_info.yml"

    def test_falls_back_to_src_dir(self, project):
        """Test the qilletni-src fallback when the top-level file is absent."""
        (project / "qilletni-src" / "qilletni_info.yml").write_text("name: nested\n")
        found = ManifestFinder(project).get_manifest()
        assert found == project / "qilletni-src" / "qilletni_info.yml"
        assert ManifestFinder(project).has_manifest()

    def test_fallback_path_returned_even_if_missing(self, project):
        """Test that the src path is returned when neither file exists."""
        found = ManifestFinder(project).get_lockfile()
        assert found == project / "qilletni-src" / "qilletni.lock"
        assert not found.exists()
        assert not ManifestFinder(project).has_manifest()

    def test_no_src_dir(self, tmp_path):
        """Test that the base path is returned when there is no qilletni-src."""
        assert ManifestFinder(tmp_path).get_lockfile() == tmp_path / "qilletni.lock"
        assert not ManifestFinder(str(tmp_path)).has_manifest()

    def test_lockfile_lookup_independent_of_manifest(self, project):
        """Test that each file is resolved on its own."""
        (project / "qilletni_info.yml").write_text("name: top\n")
        (project / "qilletni-src" / "qilletni.lock").write_text("version: 1\n")
        f = ManifestFinder(project)
        assert f.get_manifest() == project / "qilletni_info.yml"
        assert f.get_lockfile() == project / "qilletni-src" / "qilletni.lock"

    def test_has_manifest_reflects_current_state(self, tmp_path):
        """Test that existence is checked at call time."""
        f = ManifestFinder(tmp_path)
        assert not f.has_manifest()
        (tmp_path / "qilletni_info.yml").write_text("name: top\n")
        assert f.has_manifest()


class TestWorkingDirectoryDefaults:
    """Test the module-level helpers that use the working directory."""

    def test_relative_paths(self, project, monkeypatch):
        """Test lookups relative to the current directory."""
        monkeypatch.chdir(project)
        assert finder.get_manifest() == Path("qilletni-src") / "qilletni_info.yml"
        assert not finder.has_manifest()

        (project / "qilletni_info.yml").write_text("name: top\n")
        assert finder.get_manifest() == Path("qilletni_info.yml")
        assert finder.has_manifest()
        assert finder.get_lockfile() == Path("qilletni-src") / "qilletni.lock"
