"""Main converter that orchestrates records-to-lockfile conversion"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Tuple

from pydantic import ValidationError

from lock_ir.models import Lockfile, Package, PackageKey, from_packages

from ..exceptions import YarnLockConversionError, YarnLockError
from .errors import ConversionError
from .fields import PackageRecord
from .package_converter import ast_to_package
from .validation import Failure


class LockfileConverter:
    """
    Converts every parsed entry of a yarn.lock file and presses the
    resulting packages into a ``Lockfile``.

    In strict mode (the default) all entries are converted first and every
    failure is raised at once; with ``skip_invalid`` failing entries are
    logged and dropped.
    """

    def __init__(
        self, records: Iterable[PackageRecord], *, skip_invalid: bool = False
    ) -> None:
        """
        Initialize the converter with parsed entries.

        Args:
            records: Entries produced by the yarn.lock parser
            skip_invalid: Drop entries that fail instead of raising
        """
        self._records = list(records)
        self._skip_invalid = skip_invalid
        self.logger = logging.getLogger(self.__class__.__name__)

    # ------------------------------------------------------------------ #
    # Public API
    # ------------------------------------------------------------------ #

    def convert(self) -> Lockfile:
        """
        Returns:
            Lockfile: every successfully converted entry

        Raises:
            YarnLockConversionError: If an entry fails and skip_invalid is off
            YarnLockError: If one alias key is listed by two entries
        """
        converted: List[Tuple[Tuple[PackageKey, ...], Package]] = []
        failures: Dict[str, Tuple[ConversionError, ...]] = {}

        for record in self._records:
            result = ast_to_package(record.keys, record.fields)
            if isinstance(result, Failure):
                failures[record.header] = result.errors
                self._log_conversion(record.header, success=False)
                continue
            converted.append((record.keys, result.value))
            self._log_conversion(record.header)

        if failures and not self._skip_invalid:
            raise YarnLockConversionError(failures)

        for header, errors in failures.items():
            self.logger.warning(
                "Skipping %s: %s", header, "; ".join(str(err) for err in errors)
            )

        self.logger.debug(
            "Lockfile conversion completed: %d package(s) converted", len(converted)
        )
        try:
            return from_packages(converted)
        except ValidationError as exc:
            raise YarnLockError(f"Cannot assemble lockfile: {exc}") from exc

    # ------------------------------------------------------------------ #
    # Private helpers
    # ------------------------------------------------------------------ #

    def _log_conversion(self, header: str, success: bool = True) -> None:
        if success:
            self.logger.debug("Converted package: %s", header)
        else:
            self.logger.debug("Failed to convert package: %s", header)
