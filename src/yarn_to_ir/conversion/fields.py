"""
Input shapes handed over by the yarn.lock grammar parser.

A field value is either a ``Scalar`` (plain text) or a ``Nested`` block of
further fields; there is no third shape.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List, Mapping, Tuple, Union

from lock_ir.models import PackageKey, PackageKeyName


@dataclass(frozen=True)
class Scalar:
    value: str


@dataclass(frozen=True)
class Nested:
    fields: Mapping[str, "FieldValue"]


FieldValue = Union[Scalar, Nested]
PackageFields = Mapping[str, FieldValue]


@dataclass(frozen=True)
class PackageRecord:
    """One parsed lockfile entry: its alias keys plus its raw fields."""

    keys: Tuple[PackageKey, ...]
    fields: PackageFields

    @property
    def header(self) -> str:
        """Alias header as written in yarn.lock, e.g. ``a@^1, a@^1.2``."""
        return ", ".join(str(key) for key in self.keys)


# --------------------------------------------------------------------- #
# Builders from plain Python data (JSON / YAML documents)
# --------------------------------------------------------------------- #


def to_field_value(raw: Any) -> FieldValue:
    """
    Turn a plain Python value into a ``FieldValue``.

    Numbers are rejected: an unquoted ``1.10`` has already lost its text.

    Raises:
        ValueError: for numbers, lists, ``None`` and other unsupported shapes
    """
    if isinstance(raw, Mapping):
        return Nested(fields=fields_from_mapping(raw))
    if isinstance(raw, bool):
        return Scalar("true" if raw else "false")
    if isinstance(raw, str):
        return Scalar(raw)
    if isinstance(raw, (int, float)):
        raise ValueError(f"numeric field value {raw!r} must be quoted")
    raise ValueError(f"unsupported field value of type {type(raw).__name__}")


def fields_from_mapping(raw: Mapping[Any, Any]) -> PackageFields:
    return {str(name): to_field_value(value) for name, value in raw.items()}


def parse_alias(alias: str) -> PackageKey:
    """
    Split a ``name@spec`` alias on its last '@' (a leading '@' belongs to
    the scope).

    Raises:
        ValueError: if the alias has no spec or an invalid name
    """
    text = alias.strip().strip('"').strip()
    at = text.rfind("@")
    if at <= 0:
        raise ValueError(f"alias '{alias}' has no version specifier")
    name = PackageKeyName.parse(text[:at])
    if name is None:
        raise ValueError(f"alias '{alias}' has an invalid package name")
    return PackageKey(name=name, version_spec=text[at + 1 :])


def parse_alias_header(header: str) -> Tuple[PackageKey, ...]:
    """Split a comma separated alias header into its package keys."""
    aliases: List[str] = [part for part in header.split(",") if part.strip()]
    if not aliases:
        raise ValueError("empty alias header")
    return tuple(parse_alias(alias) for alias in aliases)


def record_from_mapping(header: str, raw_fields: Any) -> PackageRecord:
    if not isinstance(raw_fields, Mapping):
        raise ValueError(f"entry '{header}' must be a mapping of fields")
    return PackageRecord(
        keys=parse_alias_header(header),
        fields=fields_from_mapping(raw_fields),
    )


def records_from_mapping(document: Mapping[Any, Any]) -> List[PackageRecord]:
    return [
        record_from_mapping(str(header), raw_fields)
        for header, raw_fields in document.items()
    ]
