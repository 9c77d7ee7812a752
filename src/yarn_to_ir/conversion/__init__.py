"""
Conversion package

Transforms parsed yarn.lock entries into typed lockfile primitives
without performing any I/O.

Public helpers
--------------
ast_to_package(keys, fields) -> Success[Package] | Failure
    Convert one entry, accumulating every conversion error.
process_records_to_lockfile(records, skip_invalid=False) -> Lockfile
    Convenience wrapper that converts all entries and assembles a
    ready-validated Lockfile.
"""

from __future__ import annotations

from typing import Iterable

from lock_ir.models import Lockfile

from .converter import LockfileConverter
from .fields import PackageRecord
from .package_converter import ast_to_package, convert_package


def process_records_to_lockfile(
    records: Iterable[PackageRecord], *, skip_invalid: bool = False
) -> Lockfile:
    """High-level helper used by the conversion pipeline."""
    converter = LockfileConverter(records, skip_invalid=skip_invalid)
    return converter.convert()


__all__ = [
    "ast_to_package",
    "convert_package",
    "process_records_to_lockfile",
    "LockfileConverter",
]
