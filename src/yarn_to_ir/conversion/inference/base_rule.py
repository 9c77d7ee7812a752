from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional, Tuple

from lock_ir.models import PackageKey, Remote


@dataclass(frozen=True)
class RemoteContext:
    """Everything a remote rule may look at for one package."""

    keys: Tuple[PackageKey, ...]
    url: Optional[str] = None  # "resolved" before the '#'
    hash: Optional[str] = None  # "resolved" after the '#'
    uid: Optional[str] = None


class BaseRule(ABC):
    """Abstract base class for remote inference rules."""

    name: str = "base"

    @abstractmethod
    def match(self, context: RemoteContext) -> Optional[Remote]:
        """Attempt to infer a Remote from the given context."""
        pass
