from __future__ import annotations

from lock_ir.models import (
    DirectoryLocal,
    DirectoryLocalSymLinked,
    FileLocal,
    FileRemote,
    FileRemoteNoIntegrity,
    GitRemote,
    PackageKey,
    PackageKeyName,
)
from yarn_to_ir.conversion.errors import MalformedResolved, UnknownRemoteType
from yarn_to_ir.conversion.fields import Nested, Scalar
from yarn_to_ir.conversion.inference import REMOTE_RULES, infer_remote
from yarn_to_ir.conversion.validation import Failure, Success


def key(spec: str) -> PackageKey:
    return PackageKey(name=PackageKeyName(name="pkg"), version_spec=spec)


PLAIN = [key("^1.0.0")]


def test_rule_priority_is_fixed() -> None:
    assert [rule.name for rule in REMOTE_RULES] == [
        "git",
        "file-local",
        "file",
        "directory-local",
        "directory-symlinked",
    ]


class TestWithoutResolved:
    def test_no_locator_is_none_without_error(self) -> None:
        assert infer_remote({}, PLAIN) == Success(None)

    def test_file_alias_gives_directory(self) -> None:
        assert infer_remote({}, [key("file:./dir")]) == Success(
            DirectoryLocal(path="./dir")
        )

    def test_link_alias_gives_symlinked_directory(self) -> None:
        assert infer_remote({}, [key("link:./dir")]) == Success(
            DirectoryLocalSymLinked(path="./dir")
        )

    def test_file_alias_beats_link_alias(self) -> None:
        result = infer_remote({}, [key("link:./b"), key("file:./a")])
        assert result == Success(DirectoryLocal(path="./a"))

    def test_uid_alone_does_not_make_git(self) -> None:
        assert infer_remote({"uid": Scalar("abc")}, PLAIN) == Success(None)


class TestWithResolved:
    def test_git_beats_file(self) -> None:
        fields = {
            "resolved": Scalar("https://codeload.github.com/a/b/tar.gz/abc"),
            "uid": Scalar("abc"),
        }
        assert infer_remote(fields, PLAIN) == Success(
            GitRemote(repo_url="https://codeload.github.com/a/b/tar.gz/abc", rev="abc")
        )

    def test_file_local_beats_directory(self) -> None:
        fields = {"resolved": Scalar("file:../pkg#sha1-abc")}
        assert infer_remote(fields, [key("file:../pkg")]) == Success(
            FileLocal(path="../pkg", hash="sha1-abc")
        )

    def test_git_url_without_revision_falls_back_to_file(self) -> None:
        fields = {"resolved": Scalar("git+https://example.org/a/b.git")}
        assert infer_remote(fields, PLAIN) == Success(
            FileRemoteNoIntegrity(url="git+https://example.org/a/b.git")
        )

    def test_registry_tarball(self) -> None:
        fields = {"resolved": Scalar("https://registry.example/pkg-1.0.0.tgz#abc123")}
        assert infer_remote(fields, PLAIN) == Success(
            FileRemote(url="https://registry.example/pkg-1.0.0.tgz", hash="abc123")
        )

    def test_empty_resolved_falls_back_to_directory(self) -> None:
        fields = {"resolved": Scalar("")}
        assert infer_remote(fields, [key("link:./dir")]) == Success(
            DirectoryLocalSymLinked(path="./dir")
        )

    def test_empty_resolved_without_locator_is_unknown(self) -> None:
        assert infer_remote({"resolved": Scalar("")}, PLAIN) == Failure(
            (UnknownRemoteType(),)
        )

    def test_nested_resolved_counts_as_absent(self) -> None:
        fields = {"resolved": Nested({"url": Scalar("https://host/a.tgz")})}
        assert infer_remote(fields, PLAIN) == Success(None)
        assert infer_remote(fields, [key("file:./dir")]) == Success(
            DirectoryLocal(path="./dir")
        )

    def test_more_than_one_hash_is_reported(self) -> None:
        fields = {"resolved": Scalar("https://host/a.tgz#b#c")}
        assert infer_remote(fields, PLAIN) == Failure(
            (MalformedResolved(value="https://host/a.tgz#b#c"),)
        )
