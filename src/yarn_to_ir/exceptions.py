"""
exceptions.py

Custom, typed exception hierarchy used across the records → lockfile pipeline
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Dict, Mapping, Sequence

if TYPE_CHECKING:
    from .conversion.errors import ConversionError

# --------------------------------------------------------------------------- #
#                              Base hierarchy                                 #
# --------------------------------------------------------------------------- #


class YarnLockError(Exception):
    """
    Root of all yarn.lock-related errors raised by this project.
    """


class YarnLockLoadError(YarnLockError):
    """
    Raised by the I/O layer when a records document cannot be read or parsed.

    Examples
    --------
    * File does not exist / bad extension
    * YAML or JSON syntax error
    * Top-level object is not a mapping
    * An alias header or a field value has an unsupported shape
    """


class YarnLockConversionError(YarnLockError):
    """
    Raised when one or more lockfile entries cannot be converted to a
    typed ``Package``.

    ``failures`` maps the alias header of every offending entry to the
    complete tuple of conversion errors found for it.
    """

    def __init__(
        self,
        failures: Mapping[str, Sequence[ConversionError]],
    ) -> None:
        self.failures: Dict[str, tuple[ConversionError, ...]] = {
            header: tuple(errors) for header, errors in failures.items()
        }
        lines = [
            f"{header}: {'; '.join(str(err) for err in errors)}"
            for header, errors in self.failures.items()
        ]
        super().__init__(
            f"{len(self.failures)} package(s) could not be converted\n"
            + "\n".join(lines)
        )
