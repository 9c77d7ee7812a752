"""
ConversionPipeline – high-level orchestration from parsed records to Lockfile.

Responsibilities
----------------
1.   Accept a filesystem path (str/Path), a pre-loaded mapping, or a
     sequence of already-built PackageRecords.
2.   Invoke the I/O layer when a path is given.
3.   Invoke the conversion layer to build a validated Lockfile.
4.   Surface all domain-specific exceptions unchanged so that callers
     can handle them in a single try/except.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, List, Mapping, Sequence, Union

from lock_ir.models import Lockfile

from .conversion import process_records_to_lockfile
from .conversion.fields import PackageRecord, records_from_mapping
from .exceptions import YarnLockError, YarnLockLoadError
from .io.file_loader import FileLoader

logger = logging.getLogger(__name__)

Source = Union[str, Path, Mapping[str, Any], Sequence[PackageRecord]]


class ConversionPipeline:
    """End-to-end converter records → Lockfile."""

    def __init__(self, source: Source, skip_invalid: bool = False) -> None:
        """
        Parameters
        ----------
        source
            Path/str to .yaml, .yml, .json, an in-memory mapping of
            ``alias header → fields``, or a sequence of PackageRecords.
        skip_invalid
            If True, entries that fail conversion are logged and dropped
            instead of aborting the whole load.
        """
        self._records: List[PackageRecord]
        if isinstance(source, (str, Path)):
            logger.debug("Loading records file: %s", source)
            self._records = FileLoader.load(source)
        elif isinstance(source, Mapping):
            logger.debug("Using in-memory records mapping")
            try:
                self._records = records_from_mapping(source)
            except ValueError as exc:
                raise YarnLockLoadError(str(exc)) from exc
        elif isinstance(source, Sequence) and all(
            isinstance(rec, PackageRecord) for rec in source
        ):
            self._records = list(source)
        else:
            raise YarnLockError(
                "ConversionPipeline: source must be Path | str | mapping | "
                "sequence of PackageRecord"
            )

        self._skip_invalid = skip_invalid

    def run(self) -> Lockfile:
        """Return a fully-validated `Lockfile` (raises on failure)."""
        logger.debug("Converting %d record(s)", len(self._records))
        lockfile = process_records_to_lockfile(
            self._records, skip_invalid=self._skip_invalid
        )

        logger.info(
            "Conversion succeeded – %d package(s) under %d key(s)",
            len(lockfile.entries),
            len(lockfile.keys()),
        )
        return lockfile
