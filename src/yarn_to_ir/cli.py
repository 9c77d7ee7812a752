"""
Command-line interface for converting parsed yarn.lock records to a typed lockfile.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import NoReturn, Optional, Sequence

from ruamel.yaml import YAML

from lock_ir.models import Lockfile

from .conversion_pipeline import ConversionPipeline
from .exceptions import YarnLockConversionError, YarnLockError, YarnLockLoadError

EXIT_OK = 0
EXIT_LOAD_ERROR = 1
EXIT_CONVERSION_ERROR = 2
EXIT_OUTPUT_ERROR = 3

_YAML_EXTS = {".yaml", ".yml"}


def configure_logging(debug: bool = False, verbose: bool = False) -> None:
    """Configure application logging.

    Args:
        debug: Enable debug-level logging if True.
        verbose: Enable info-level logging with timestamps if True.
    """
    if debug:
        level = logging.DEBUG
        format_str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    elif verbose:
        level = logging.INFO
        format_str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    else:
        level = logging.WARNING
        format_str = "%(levelname)s: %(message)s"

    logging.basicConfig(
        level=level,
        format=format_str,
        stream=sys.stderr,
        force=True,  # Override existing configuration
    )


def parse_arguments(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="yarn-to-ir",
        description="Convert parsed yarn.lock records into a typed lockfile",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Print the lockfile as JSON
  yarn-to-ir records.yaml

  # Write YAML, dropping entries that cannot be converted
  yarn-to-ir records.json -o lockfile.yaml --skip-invalid
        """,
    )
    parser.add_argument(
        "source",
        type=Path,
        help="Records document (.json, .yaml or .yml)",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        default=None,
        help="Output file (.json, .yaml or .yml); JSON on stdout if omitted",
    )
    parser.add_argument(
        "--skip-invalid",
        action="store_true",
        help="Skip entries that fail conversion instead of aborting",
    )
    parser.add_argument(
        "--debug", action="store_true", help="Enable debug logging for detailed output"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable verbose logging"
    )
    return parser.parse_args(argv)


def write_lockfile(lockfile: Lockfile, output: Optional[Path]) -> None:
    """Serialize ``lockfile`` to ``output`` (JSON or YAML) or to stdout."""
    data = lockfile.model_dump(mode="json")
    if output is None:
        json.dump(data, sys.stdout, indent=2)
        sys.stdout.write("\n")
        return

    output.parent.mkdir(parents=True, exist_ok=True)
    with output.open("w", encoding="utf-8") as fh:
        if output.suffix.lower() in _YAML_EXTS:
            yaml = YAML(typ="safe")
            yaml.default_flow_style = False
            yaml.dump(data, fh)
        else:
            json.dump(data, fh, indent=2)
            fh.write("\n")


def run_conversion(
    source: Path,
    output: Optional[Path] = None,
    skip_invalid: bool = False,
    debug: bool = False,
    verbose: bool = False,
) -> NoReturn:
    """Execute the conversion and exit with the matching status code."""
    configure_logging(debug, verbose)
    logger = logging.getLogger(__name__)

    try:
        lockfile = ConversionPipeline(source, skip_invalid=skip_invalid).run()
    except YarnLockLoadError as e:
        logger.error("Load error: %s", e)
        sys.exit(EXIT_LOAD_ERROR)
    except YarnLockConversionError as e:
        for header, errors in e.failures.items():
            for err in errors:
                logger.error("%s: %s", header, err)
        logger.error("%d package(s) could not be converted", len(e.failures))
        sys.exit(EXIT_CONVERSION_ERROR)
    except YarnLockError as e:
        logger.error("Conversion error: %s", e)
        sys.exit(EXIT_CONVERSION_ERROR)

    try:
        write_lockfile(lockfile, output)
    except OSError as e:
        logger.error("File system error: %s", e)
        sys.exit(EXIT_OUTPUT_ERROR)

    if output is not None:
        logger.info("Lockfile saved to: %s", output.resolve())
    sys.exit(EXIT_OK)


def main(argv: Optional[Sequence[str]] = None) -> NoReturn:
    args = parse_arguments(argv)
    run_conversion(
        args.source, args.output, args.skip_invalid, args.debug, args.verbose
    )


if __name__ == "__main__":
    main()
