"""Converts one parsed lockfile entry into a typed Package."""

from __future__ import annotations

from typing import Sequence

from lock_ir.models import Package, PackageKey

from ..exceptions import YarnLockConversionError
from .field_parsers import KEY_LIST, TEXT
from .fields import PackageFields
from .inference import infer_remote
from .validation import Failure, Success, Validation, collect, get_field, get_field_opt


def ast_to_package(
    keys: Sequence[PackageKey], fields: PackageFields
) -> Validation[Package]:
    """
    Validate the raw fields of one entry and build its ``Package``.

    Every facet (version, remote, dependencies, optional dependencies) is
    checked independently; a failure carries the errors of all of them.

    Args:
        keys: Non-empty sequence of aliases the entry is listed under
        fields: Raw fields of the entry

    Returns:
        ``Success(Package)`` or ``Failure`` with every error found

    Raises:
        ValueError: If ``keys`` is empty
    """
    keys = tuple(keys)
    if not keys:
        raise ValueError("a package needs at least one package key")

    result = collect(
        {
            "version": get_field(TEXT, "version", fields),
            "remote": infer_remote(fields, keys),
            "dependencies": get_field_opt(KEY_LIST, "dependencies", fields, []),
            "optional_dependencies": get_field_opt(
                KEY_LIST, "optionalDependencies", fields, []
            ),
        }
    )
    if isinstance(result, Failure):
        return result
    return Success(Package(**result.value))


def convert_package(keys: Sequence[PackageKey], fields: PackageFields) -> Package:
    """Like :func:`ast_to_package` but raises ``YarnLockConversionError``."""
    result = ast_to_package(keys, fields)
    if isinstance(result, Failure):
        header = ", ".join(str(key) for key in keys)
        raise YarnLockConversionError({header: result.errors})
    return result.value
