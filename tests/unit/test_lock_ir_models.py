# tests/unit/test_lock_ir_models.py
"""
Unit tests for the typed lockfile models (src/lock_ir/models.py)
"""

import pytest
from pydantic import TypeAdapter, ValidationError

from lock_ir.models import (
    DirectoryLocal,
    FileRemote,
    GitRemote,
    Lockfile,
    LockfileEntry,
    Package,
    PackageKey,
    PackageKeyName,
    Remote,
    from_packages,
)

# ---------------------------------------------------------------------------
#                                FIXTURES
# ---------------------------------------------------------------------------


def make_key(name: str, spec: str) -> PackageKey:
    parsed = PackageKeyName.parse(name)
    assert parsed is not None
    return PackageKey(name=parsed, version_spec=spec)


@pytest.fixture
def left_pad() -> Package:
    return Package(
        version="1.3.0",
        remote=FileRemote(
            url="https://registry.yarnpkg.com/left-pad/-/left-pad-1.3.0.tgz",
            hash="5b8a3a7765dfe001261dde915589e782f8c94d1e",
        ),
    )


# ---------------------------------------------------------------------------
#                                TESTS
# ---------------------------------------------------------------------------


class TestPackageKeyName:
    def test_simple_name(self) -> None:
        name = PackageKeyName.parse("left-pad")
        assert name == PackageKeyName(name="left-pad")
        assert name is not None and name.scope is None

    def test_scoped_name(self) -> None:
        name = PackageKeyName.parse("@babel/core")
        assert name == PackageKeyName(scope="babel", name="core")
        assert str(name) == "@babel/core"

    @pytest.mark.parametrize("raw", ["", "@babel", "@/core", "@babel/"])
    def test_invalid_names(self, raw: str) -> None:
        assert PackageKeyName.parse(raw) is None

    def test_empty_name_rejected_by_model(self) -> None:
        with pytest.raises(ValidationError):
            PackageKeyName(name="")


class TestPackageKey:
    def test_str_renders_alias(self) -> None:
        assert str(make_key("@types/node", "^20.0.0")) == "@types/node@^20.0.0"

    def test_keys_are_hashable_and_comparable(self) -> None:
        assert {make_key("a", "^1"), make_key("a", "^1")} == {make_key("a", "^1")}


class TestPackage:
    def test_dependency_lists_default_empty(self) -> None:
        pkg = Package(version="1.0.0")
        assert pkg.remote is None
        assert pkg.dependencies == []
        assert pkg.optional_dependencies == []

    def test_package_is_frozen(self, left_pad: Package) -> None:
        with pytest.raises(ValidationError):
            left_pad.version = "2.0.0"

    def test_extra_fields_forbidden(self) -> None:
        with pytest.raises(ValidationError):
            Package(version="1.0.0", integrity="sha512-abc")

    def test_remote_union_is_discriminated(self) -> None:
        remote = TypeAdapter(Remote).validate_python(
            {"type": "git", "repo_url": "https://github.com/a/b", "rev": "abc"}
        )
        assert remote == GitRemote(repo_url="https://github.com/a/b", rev="abc")

    def test_json_round_trip_keeps_remote_kind(self) -> None:
        pkg = Package(version="0.0.0", remote=DirectoryLocal(path="./dir"))
        restored = Package.model_validate_json(pkg.model_dump_json())
        assert isinstance(restored.remote, DirectoryLocal)


class TestLockfile:
    def test_from_packages_and_lookup(self, left_pad: Package) -> None:
        keys = [make_key("left-pad", "^1.0.0"), make_key("left-pad", "^1.3.0")]
        lockfile = from_packages([(keys, left_pad)])

        assert len(lockfile) == 1
        assert lockfile.get(keys[1]) == left_pad
        assert lockfile.get(make_key("left-pad", "^2.0.0")) is None
        assert lockfile.keys() == keys
        assert lockfile.packages == [left_pad]

    def test_alias_in_two_entries_rejected(self, left_pad: Package) -> None:
        key = make_key("left-pad", "^1.0.0")
        with pytest.raises(ValidationError, match="more than one entry"):
            from_packages([([key], left_pad), ([key], Package(version="1.0.0"))])

    def test_entry_requires_a_key(self, left_pad: Package) -> None:
        with pytest.raises(ValidationError):
            LockfileEntry(keys=[], package=left_pad)

    def test_empty_lockfile(self) -> None:
        lockfile = Lockfile()
        assert len(lockfile) == 0
        assert lockfile.keys() == []
