"""Command-line interface for validating and normalizing Chemical JSON files."""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from tqdm import tqdm

from ...core.domain.models.molecular_graph import MolecularGraph
from ...handlers.cjson_handler import CjsonFormat
from ...io.cjson_writer import WriterConfig
from ...logging_config import setup_logging

logger = logging.getLogger(__name__)


def find_cjson_files(paths: List[str]) -> List[Path]:
    """
    Expand files and directories into a sorted list of .cjson files.

    Args:
        paths: File or directory paths

    Returns:
        List of file paths; directories are searched recursively
    """
    files: List[Path] = []
    for path in map(Path, paths):
        if path.is_dir():
            files.extend(sorted(path.rglob("*.cjson")))
        else:
            files.append(path)
    return files


def validate_files(files: List[Path]) -> int:
    """Read every file and report diagnostics. Returns the number of failures."""
    failures = 0
    cjson = CjsonFormat()
    for path in tqdm(files, desc="Validating", disable=len(files) < 2):
        molecule = MolecularGraph()
        try:
            ok = cjson.read_file(path, molecule)
        except OSError as e:
            logger.error(f"Could not open {path}: {e}")
            failures += 1
            continue

        if ok:
            tqdm.write(f"{path}: OK ({molecule.atom_count} atoms, {molecule.bond_count} bonds)")
        else:
            failures += 1
            tqdm.write(f"{path}: FAILED")
        for message in cjson.errors:
            tqdm.write(f"  {message}")
    return failures


def normalize_file(input_path: Path, output_path: Path, config: WriterConfig) -> bool:
    """Read a file into a molecule and write it back out with the given layout."""
    cjson = CjsonFormat(config)
    molecule = MolecularGraph()
    if not cjson.read_file(input_path, molecule):
        for message in cjson.errors:
            logger.error(f"{input_path}: {message}")
        return False

    ok = cjson.write_file(molecule, output_path)
    for message in cjson.errors:
        logger.warning(f"{output_path}: {message}")
    if ok:
        logger.info(f"Wrote {output_path}")
    return ok


def setup_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser."""
    parser = argparse.ArgumentParser(description="Validate and normalize Chemical JSON files")
    parser.add_argument("--verbose", action="store_true", help="Show detailed output")
    parser.add_argument("--log-file", type=Path, help="Also write log records to this file")
    subparsers = parser.add_subparsers(dest="command", required=True)

    validate = subparsers.add_parser("validate", help="Check that files can be read")
    validate.add_argument("paths", nargs="+", help="Files or directories containing .cjson files")

    normalize = subparsers.add_parser("normalize", help="Re-emit a file through the molecule model")
    normalize.add_argument("input", type=Path, help="Input .cjson file")
    normalize.add_argument("output", type=Path, help="Output .cjson file")
    normalize.add_argument("--indent", type=int, default=2, help="Spaces per indent level")
    normalize.add_argument("--sort-keys", action="store_true", help="Sort object keys")
    normalize.add_argument(
        "--ascii", action="store_true", help="Escape non-ASCII characters in strings"
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the Chemical JSON CLI."""
    parser = setup_parser()
    args = parser.parse_args(argv)
    setup_logging(args.verbose, args.log_file)

    if args.command == "validate":
        files = find_cjson_files(args.paths)
        if not files:
            logger.error("No .cjson files found")
            return 1
        failures = validate_files(files)
        logger.info(f"Validation complete: {len(files) - failures}/{len(files)} readable")
        return 1 if failures else 0

    if args.indent < 0:
        parser.error("--indent must be >= 0")
    config = WriterConfig(
        indent=" " * args.indent, sort_keys=args.sort_keys, ensure_ascii=args.ascii
    )
    return 0 if normalize_file(args.input, args.output, config) else 1


if __name__ == "__main__":
    sys.exit(main())
