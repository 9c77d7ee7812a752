"""
Accumulating validation.

Independent field checks never short-circuit each other: :func:`collect`
merges every ``Failure`` into one and only yields the combined values when
all checks succeeded.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Generic, List, Mapping, Tuple, TypeVar, Union

from .errors import ConversionError, MissingField, WrongType
from .field_parsers import FieldParser
from .fields import PackageFields

T = TypeVar("T")


@dataclass(frozen=True)
class Success(Generic[T]):
    value: T


@dataclass(frozen=True)
class Failure:
    errors: Tuple[ConversionError, ...]

    def __post_init__(self) -> None:
        if not self.errors:
            raise ValueError("Failure needs at least one error")


Validation = Union[Success[T], Failure]


def fail(error: ConversionError) -> Failure:
    return Failure((error,))


def get_field(
    parser: FieldParser[T], field_name: str, fields: PackageFields
) -> Validation[T]:
    """Parse a required field: absent → MissingField, bad shape → WrongType."""
    value = fields.get(field_name)
    if value is None:
        return fail(MissingField(name=field_name))
    parsed = parser.parse(value)
    if parsed is None:
        return fail(WrongType(name=field_name, expected_kind=parser.name))
    return Success(parsed)


def get_field_opt(
    parser: FieldParser[T], field_name: str, fields: PackageFields, default: T
) -> Validation[T]:
    """Parse an optional field, falling back to ``default`` when absent."""
    if field_name not in fields:
        return Success(default)
    return get_field(parser, field_name, fields)


def collect(facets: Mapping[str, Validation[Any]]) -> Validation[Dict[str, Any]]:
    """
    Combine independent validations keyed by facet name.

    Errors keep the order of ``facets``.
    """
    errors: List[ConversionError] = []
    values: Dict[str, Any] = {}
    for name, result in facets.items():
        if isinstance(result, Failure):
            errors.extend(result.errors)
        else:
            values[name] = result.value
    if errors:
        return Failure(tuple(errors))
    return Success(values)


__all__ = [
    "Success",
    "Failure",
    "Validation",
    "fail",
    "get_field",
    "get_field_opt",
    "collect",
]
