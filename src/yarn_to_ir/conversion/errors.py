"""Conversion errors reported (never raised) while converting one entry."""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class MissingField(BaseModel):
    """A required field is not present."""

    kind: Literal["missing-field"] = "missing-field"
    name: str

    model_config = ConfigDict(extra="forbid", frozen=True)

    def __str__(self) -> str:
        return f"missing field '{self.name}'"


class WrongType(BaseModel):
    """A field is present but its value has the wrong shape."""

    kind: Literal["wrong-type"] = "wrong-type"
    name: str
    expected_kind: str = Field(..., description="Name of the failing field parser.")

    model_config = ConfigDict(extra="forbid", frozen=True)

    def __str__(self) -> str:
        return f"field '{self.name}' is not a {self.expected_kind}"


class UnknownRemoteType(BaseModel):
    """The remote (git, tarball, directory) could not be determined."""

    kind: Literal["unknown-remote-type"] = "unknown-remote-type"

    model_config = ConfigDict(extra="forbid", frozen=True)

    def __str__(self) -> str:
        return "unknown remote type"


class MalformedResolved(BaseModel):
    """The ``resolved`` URL contains more than one '#'."""

    kind: Literal["malformed-resolved"] = "malformed-resolved"
    value: str

    model_config = ConfigDict(extra="forbid", frozen=True)

    def __str__(self) -> str:
        return f"malformed resolved URL '{self.value}' (more than one '#')"


ConversionError = Annotated[
    Union[MissingField, WrongType, UnknownRemoteType, MalformedResolved],
    Field(discriminator="kind"),
]

__all__ = [
    "MissingField",
    "WrongType",
    "UnknownRemoteType",
    "MalformedResolved",
    "ConversionError",
]
