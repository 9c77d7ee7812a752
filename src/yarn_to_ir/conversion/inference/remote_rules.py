"""Concrete remote inference rules, one class per remote kind."""

from __future__ import annotations

from typing import Callable, Final, Optional, Tuple
from urllib.parse import urlsplit

from lock_ir.models import (
    DirectoryLocal,
    DirectoryLocalSymLinked,
    FileLocal,
    FileLocalNoIntegrity,
    FileRemote,
    FileRemoteNoIntegrity,
    GitRemote,
    Remote,
)

from .base_rule import BaseRule, RemoteContext

GIT_PREFIXES: Final[Tuple[str, ...]] = ("git+", "git://")
HOSTED_GIT_HOSTS: Final[frozenset[str]] = frozenset(
    {"github.com", "gitlab.com", "bitbucket.org"}
)


def split_url_hash(resolved: str) -> Tuple[str, Optional[str]]:
    """
    ``"https://host/a/b#alonghash"`` → ``("https://host/a/b", "alonghash")``.

    An empty hash counts as no hash.

    Raises:
        ValueError: if ``resolved`` contains more than one '#'
    """
    parts = resolved.split("#")
    if len(parts) == 1:
        return parts[0], None
    if len(parts) == 2:
        return parts[0], parts[1] or None
    raise ValueError(f"'#' appears more than once in {resolved!r}")


def strip_prefix(prefix: str, text: str) -> str:
    return text[len(prefix) :] if text.startswith(prefix) else text


def is_hosted_git_repo(url: str) -> bool:
    """True for bare ``https://github.com/owner/repo`` style repository URLs."""
    parts = urlsplit(url)
    if parts.scheme not in ("http", "https") or parts.hostname not in HOSTED_GIT_HOSTS:
        return False
    segments = [seg for seg in parts.path.split("/") if seg]
    return len(segments) == 2 and not parts.query


class GitRule(BaseRule):
    """
    Revision from the ``uid`` field, otherwise from the hash fragment of a
    git URL (``git+…``, ``git://…`` or a bare hosted repository URL).
    """

    name = "git"

    def match(self, context: RemoteContext) -> Optional[Remote]:
        if not context.url:
            return None
        rev = context.uid
        if rev is None and (
            context.url.startswith(GIT_PREFIXES) or is_hosted_git_repo(context.url)
        ):
            rev = context.hash
        if rev is None:
            return None
        return GitRemote(repo_url=strip_prefix("git+", context.url), rev=rev)


class FileLocalRule(BaseRule):
    """``resolved`` fields that are prefixed with ``file:``."""

    name = "file-local"

    def match(self, context: RemoteContext) -> Optional[Remote]:
        if not context.url or not context.url.startswith("file:"):
            return None
        path = strip_prefix("file:", context.url)
        if context.hash is not None:
            return FileLocal(path=path, hash=context.hash)
        return FileLocalNoIntegrity(path=path)


class FileRule(BaseRule):
    """Any other non-empty ``resolved`` URL is a remote tarball."""

    name = "file"

    def match(self, context: RemoteContext) -> Optional[Remote]:
        if not context.url:
            return None
        if context.hash is not None:
            return FileRemote(url=context.url, hash=context.hash)
        return FileRemoteNoIntegrity(url=context.url)


class DirectoryRule(BaseRule):
    """
    Local directory named by the version spec of an alias key, e.g.
    ``"@good-morning/8-am-music@file:./dir"``. The first matching alias wins.
    """

    def __init__(
        self, prefix: str, factory: Callable[[str], Remote], name: str
    ) -> None:
        self._prefix = prefix
        self._factory = factory
        self.name = name

    def match(self, context: RemoteContext) -> Optional[Remote]:
        for key in context.keys:
            if key.version_spec.startswith(self._prefix):
                return self._factory(strip_prefix(self._prefix, key.version_spec))
        return None


DIRECTORY_LOCAL_RULE: Final = DirectoryRule(
    "file:", lambda path: DirectoryLocal(path=path), "directory-local"
)
# https://classic.yarnpkg.com/en/docs/cli/link/
DIRECTORY_SYMLINK_RULE: Final = DirectoryRule(
    "link:", lambda path: DirectoryLocalSymLinked(path=path), "directory-symlinked"
)
