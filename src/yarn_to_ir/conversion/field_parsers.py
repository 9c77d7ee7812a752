"""Typed decoders for raw field values."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, List, Optional, TypeVar

from lock_ir.models import PackageKey, PackageKeyName

from .fields import FieldValue, Nested, PackageFields, Scalar

T = TypeVar("T")


@dataclass(frozen=True)
class FieldParser(Generic[T]):
    """Something that can parse the value of a field into type ``T``."""

    parse: Callable[[FieldValue], Optional[T]]
    name: str  # used in WrongType errors


def _parse_text(value: FieldValue) -> Optional[str]:
    if isinstance(value, Scalar):
        return value.value
    return None


def _parse_package_key(value: FieldValue) -> Optional[PackageKeyName]:
    text = _parse_text(value)
    if text is None:
        return None
    return PackageKeyName.parse(text)


def _parse_key_list(value: FieldValue) -> Optional[List[PackageKey]]:
    if not isinstance(value, Nested):
        return None
    keys: List[PackageKey] = []
    for raw_name, raw_spec in value.fields.items():
        name = _parse_package_key(Scalar(raw_name))
        version_spec = _parse_text(raw_spec)
        if name is None or version_spec is None:
            return None
        keys.append(PackageKey(name=name, version_spec=version_spec))
    return keys


TEXT: FieldParser[str] = FieldParser(_parse_text, "text")
PACKAGE_KEY: FieldParser[PackageKeyName] = FieldParser(_parse_package_key, "package key")
KEY_LIST: FieldParser[List[PackageKey]] = FieldParser(
    _parse_key_list, "list of package keys"
)


def extract(
    parser: FieldParser[T], field_name: str, fields: PackageFields
) -> Optional[T]:
    """
    Return the decoded field, or ``None`` when it is absent *or* cannot be
    decoded. Use :func:`validation.get_field` to tell the two apart.
    """
    value = fields.get(field_name)
    if value is None:
        return None
    return parser.parse(value)


__all__ = ["FieldParser", "TEXT", "PACKAGE_KEY", "KEY_LIST", "extract"]
