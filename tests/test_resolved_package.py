"""Tests for the ResolvedPackage record."""

import pytest

from common.exceptions import EmptyFieldError, ValidationError
from manifest.models import ResolvedPackage

URL = "https://registry.example/packages/name/1.0.0"


class TestResolvedPackage:
    """Test validation and derived values."""

    def test_create_valid(self):
        """Test a fully populated package."""
        pkg = ResolvedPackage.create("name", "1.0.0", URL, "sha256-x", {"@bob/json": "^2.0.0"})
        assert pkg.full_identifier == "name@1.0.0"
        assert pkg.dependencies == {"@bob/json": "^2.0.0"}

    def test_scoped_full_identifier(self):
        """Test the identifier of a scoped package."""
        pkg = ResolvedPackage.create("@alice/postgres", "1.0.2", URL, "sha256-abc")
        assert pkg.full_identifier == "@alice/postgres@1.0.2"

    def test_dependencies_default_empty(self):
        """Test that omitted dependencies become an empty mapping."""
        assert ResolvedPackage.create("name", "1.0.0", URL, "sha256-x").dependencies == {}
        assert ResolvedPackage("name", "1.0.0", URL, "sha256-x", None).dependencies == {}

    @pytest.mark.parametrize(
        "args, field_name",
        [
            (("", "1.0.0", URL, "sha256-x"), "name"),
            ((None, "1.0.0", URL, "sha256-x"), "name"),
            (("name", "", URL, "sha256-x"), "version"),
            (("name", "1.0.0", None, "sha256-x"), "resolved"),
            (("name", "1.0.0", URL, ""), "integrity"),
        ],
    )
    def test_empty_field_rejected(self, args, field_name):
        """Test that each required field must be non-empty."""
        with pytest.raises(EmptyFieldError) as exc_info:
            ResolvedPackage.create(*args, {})
        assert exc_info.value.field_name == field_name

    def test_first_empty_field_reported(self):
        """Test that fields are checked in declaration order."""
        with pytest.raises(EmptyFieldError) as exc_info:
            ResolvedPackage.create("", "", "", "")
        assert exc_info.value.field_name == "name"
        assert "name" in str(exc_info.value)

    def test_non_string_field_rejected(self):
        """Test that a non-string field is a validation error."""
        with pytest.raises(ValidationError):
            ResolvedPackage.create("name", 1.0, URL, "sha256-x")

    @pytest.mark.parametrize("deps", [{"b": 2}, {"b": None}, {1: "^1.0.0"}])
    def test_non_string_dependency_rejected(self, deps):
        """Test that dependencies must map names to range strings."""
        with pytest.raises(ValidationError):
            ResolvedPackage.create("name", "1.0.0", URL, "sha256-x", deps)

    def test_immutable_and_isolated(self):
        """Test that the record is frozen and does not alias the caller's mapping."""
        deps = {"a": "1.0.0"}
        pkg = ResolvedPackage.create("name", "1.0.0", URL, "sha256-x", deps)
        deps["b"] = "2.0.0"
        assert pkg.dependencies == {"a": "1.0.0"}
        with pytest.raises(AttributeError):
            pkg.name = "other"  # type: ignore[misc]
        with pytest.raises(TypeError):
            pkg.dependencies["c"] = "~2.0.0"  # type: ignore[index]
        assert dict(pkg.dependencies) == {"a": "1.0.0"}

    def test_hashable(self):
        """Test that packages can be used in sets."""
        a = ResolvedPackage.create("name", "1.0.0", URL, "sha256-x", {"a": "1.0.0"})
        b = ResolvedPackage.create("name", "1.0.0", URL, "sha256-x", {"a": "1.0.0"})
        assert a == b
        assert len({a, b}) == 1
