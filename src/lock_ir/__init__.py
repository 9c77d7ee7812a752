"""Typed representation of a converted yarn.lock file."""

from .models import (
    DirectoryLocal,
    DirectoryLocalSymLinked,
    FileLocal,
    FileLocalNoIntegrity,
    FileRemote,
    FileRemoteNoIntegrity,
    GitRemote,
    Lockfile,
    LockfileEntry,
    Package,
    PackageKey,
    PackageKeyName,
    Remote,
    from_packages,
)

__all__ = [
    "PackageKeyName",
    "PackageKey",
    "GitRemote",
    "FileLocal",
    "FileLocalNoIntegrity",
    "FileRemote",
    "FileRemoteNoIntegrity",
    "DirectoryLocal",
    "DirectoryLocalSymLinked",
    "Remote",
    "Package",
    "LockfileEntry",
    "Lockfile",
    "from_packages",
]
