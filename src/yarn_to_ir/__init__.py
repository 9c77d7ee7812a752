"""
Package façade – a single import gives users everything they need:


Design
------
* Thin wrapper around ConversionPipeline (keeps public API tiny).
* Re-exports only what external callers should see.
"""

from __future__ import annotations

from lock_ir.models import Lockfile

from .conversion import ast_to_package, convert_package
from .conversion_pipeline import ConversionPipeline, Source
from .exceptions import YarnLockConversionError, YarnLockError, YarnLockLoadError

__all__ = [
    "convert_records_to_lockfile",
    "ast_to_package",
    "convert_package",
    "ConversionPipeline",
    "YarnLockError",
    "YarnLockLoadError",
    "YarnLockConversionError",
]


def convert_records_to_lockfile(
    source: Source,
    *,
    skip_invalid: bool = False,
) -> Lockfile:
    """
    Convenience helper that hides the internal pipeline machinery.

    Parameters
    ----------
    source
        Path/str to a records file, an already-loaded mapping, or a
        sequence of PackageRecords.
    skip_invalid
        Forwarded to ConversionPipeline (default False).
    """
    return ConversionPipeline(source, skip_invalid=skip_invalid).run()
