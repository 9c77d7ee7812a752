"""Concrete Loader that supports local YAML / JSON records documents."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Final, List

from ruamel.yaml import YAML

from ..conversion.fields import PackageRecord, records_from_mapping
from ..exceptions import YarnLockLoadError

logger = logging.getLogger(__name__)

_YAML_EXTS: Final[set[str]] = {".yaml", ".yml"}
_JSON_EXTS: Final[set[str]] = {".json"}

_yaml_parser = YAML(typ="safe")  # safe loader, YAML 1.2


class FileLoader:
    """Read a records document from disk and return its parsed entries."""

    supported_exts: set[str] = _YAML_EXTS | _JSON_EXTS

    @classmethod
    def supports(cls, path: str | Path) -> bool:
        return Path(path).suffix.lower() in cls.supported_exts

    @staticmethod
    def load(path: str | Path) -> List[PackageRecord]:
        file_path = Path(path)

        # validation
        if not file_path.exists():
            logger.error("File not found: %s", file_path)
            raise YarnLockLoadError(f"File not found: {file_path}")

        if not FileLoader.supports(file_path):
            raise YarnLockLoadError(
                f"Unsupported extension '{file_path.suffix}'. "
                f"Supported: {', '.join(sorted(FileLoader.supported_exts))}"
            )

        raw_text = file_path.read_text(encoding="utf-8")

        # parse
        try:
            if file_path.suffix.lower() in _YAML_EXTS:
                data: Any = _yaml_parser.load(raw_text)
            else:  # .json
                data = json.loads(raw_text)
        except Exception as exc:
            raise YarnLockLoadError(
                f"Cannot parse {file_path.name}: {exc}"
            ) from exc

        if not isinstance(data, dict):
            raise YarnLockLoadError("Top-level object must be a mapping")

        try:
            records = records_from_mapping(data)
        except ValueError as exc:
            raise YarnLockLoadError(f"{file_path.name}: {exc}") from exc

        logger.debug("Records file loaded (%d entries)", len(records))
        return records
