from __future__ import annotations

"""
models.py – typed yarn.lock representation
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Strongly-typed package descriptors produced from the loosely-typed records of
a parsed ``yarn.lock`` file.
"""

from typing import Annotated, Iterable, List, Literal, Optional, Self, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

# ---------------------------------------------------------------------------
# Package keys
# ---------------------------------------------------------------------------


class PackageKeyName(BaseModel):
    """Name part of an alias key, either simple (``lodash``) or scoped."""

    scope: Optional[str] = Field(
        None, description="Scope without the leading '@' (scoped names only)."
    )
    name: str = Field(..., description="Package name inside its scope.")

    model_config = ConfigDict(extra="forbid", frozen=True)

    @field_validator("name")
    @classmethod
    def _not_empty(cls, v: str) -> str:
        if not v:
            raise ValueError("PackageKeyName.name must not be empty")
        return v

    @classmethod
    def parse(cls, raw: str) -> Optional[PackageKeyName]:
        """
        ``"@babel/core"`` → scope ``babel``, name ``core``;
        ``"left-pad"`` → simple name. ``None`` when the text is not a name.
        """
        if not raw:
            return None
        if not raw.startswith("@"):
            return cls(name=raw)
        scope, sep, name = raw[1:].partition("/")
        if not sep or not scope or not name:
            return None
        return cls(scope=scope, name=name)

    def __str__(self) -> str:
        if self.scope is None:
            return self.name
        return f"@{self.scope}/{self.name}"


class PackageKey(BaseModel):
    """One alias (``name@spec``) under which a package entry appears."""

    name: PackageKeyName
    version_spec: str = Field(
        ..., description="npm version specifier, e.g. ``^1.2.0`` or ``file:./dir``."
    )

    model_config = ConfigDict(extra="forbid", frozen=True)

    def __str__(self) -> str:
        return f"{self.name}@{self.version_spec}"


# ---------------------------------------------------------------------------
# Remotes
# ---------------------------------------------------------------------------


class GitRemote(BaseModel):
    """Package checked out from a git repository at a fixed revision."""

    type: Literal["git"] = "git"
    repo_url: str = Field(..., description="Repository URL without 'git+'.")
    rev: str = Field(..., description="Commit hash or other git revision.")

    model_config = ConfigDict(extra="forbid", frozen=True)


class FileLocal(BaseModel):
    """Tarball on the local file system, with integrity hash."""

    type: Literal["file-local"] = "file-local"
    path: str
    hash: str

    model_config = ConfigDict(extra="forbid", frozen=True)


class FileLocalNoIntegrity(BaseModel):
    type: Literal["file-local-no-integrity"] = "file-local-no-integrity"
    path: str

    model_config = ConfigDict(extra="forbid", frozen=True)


class FileRemote(BaseModel):
    """Tarball fetched over the network, with integrity hash."""

    type: Literal["file-remote"] = "file-remote"
    url: str
    hash: str

    model_config = ConfigDict(extra="forbid", frozen=True)


class FileRemoteNoIntegrity(BaseModel):
    type: Literal["file-remote-no-integrity"] = "file-remote-no-integrity"
    url: str

    model_config = ConfigDict(extra="forbid", frozen=True)


class DirectoryLocal(BaseModel):
    """Local directory referenced through a ``file:`` specifier."""

    type: Literal["directory-local"] = "directory-local"
    path: str

    model_config = ConfigDict(extra="forbid", frozen=True)


class DirectoryLocalSymLinked(BaseModel):
    """Local directory symlinked through a ``link:`` specifier."""

    type: Literal["directory-local-symlinked"] = "directory-local-symlinked"
    path: str

    model_config = ConfigDict(extra="forbid", frozen=True)


Remote = Annotated[
    Union[
        GitRemote,
        FileLocal,
        FileLocalNoIntegrity,
        FileRemote,
        FileRemoteNoIntegrity,
        DirectoryLocal,
        DirectoryLocalSymLinked,
    ],
    Field(discriminator="type"),
]

# ---------------------------------------------------------------------------
# Packages and lockfile
# ---------------------------------------------------------------------------


class Package(BaseModel):
    """A fully converted lockfile entry."""

    version: str = Field(..., description="Exact resolved version.")
    remote: Optional[Remote] = Field(
        None,
        description="Where the package comes from; None for plain local entries.",
    )
    dependencies: List[PackageKey] = Field(default_factory=list)
    optional_dependencies: List[PackageKey] = Field(default_factory=list)

    model_config = ConfigDict(extra="forbid", frozen=True)


class LockfileEntry(BaseModel):
    """A package together with every alias key it is known under."""

    keys: List[PackageKey] = Field(..., min_length=1)
    package: Package

    model_config = ConfigDict(extra="forbid", frozen=True)


class Lockfile(BaseModel):
    """Multi-keyed collection of packages: each alias maps to one entry."""

    entries: List[LockfileEntry] = Field(default_factory=list)

    model_config = ConfigDict(extra="forbid", frozen=True)

    # ----- validators --------------------------------------------------------
    @model_validator(mode="after")
    def _aliases_unique(self) -> Self:
        seen: set[PackageKey] = set()
        for entry in self.entries:
            for key in entry.keys:
                if key in seen:
                    raise ValueError(
                        f"Package key '{key}' appears in more than one entry"
                    )
                seen.add(key)
        return self

    # ----- lookups -----------------------------------------------------------
    def get(self, key: PackageKey) -> Optional[Package]:
        for entry in self.entries:
            if key in entry.keys:
                return entry.package
        return None

    def keys(self) -> List[PackageKey]:
        return [key for entry in self.entries for key in entry.keys]

    @property
    def packages(self) -> List[Package]:
        return [entry.package for entry in self.entries]

    def __len__(self) -> int:
        return len(self.entries)


def from_packages(
    keyed: Iterable[Tuple[Iterable[PackageKey], Package]],
) -> Lockfile:
    """
    Press ``(keys, package)`` pairs into a :class:`Lockfile`.

    It is a dumb conversion: dependency cycles are left as they are.
    """
    return Lockfile(
        entries=[
            LockfileEntry(keys=list(keys), package=package)
            for keys, package in keyed
        ]
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
