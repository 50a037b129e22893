"""
Command line entry point.

Usage:
    dataminer data/sample.csv --format csv
    dataminer data/sample.pdf.txt --format pdf
    dataminer data/sample.doc.txt --format doc --export rows.csv

The report goes to stdout; diagnostics go to stderr through logging.
"""

import argparse
from pathlib import Path
from typing import List, Optional

from dataminer.ingestion.adapters import create_default_registry
from dataminer.ingestion.pipeline import mine
from dataminer.records import records_to_dataframe
from dataminer.utils.utils import init_logger, load_yaml_config_file

DEFAULT_CONFIG_PATH = Path("config/config.yaml")


def build_parser(formats: List[str]) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dataminer",
        description="Mine a single file and print a row/column report.")
    parser.add_argument("path", type=str,
                        help="Path to the input file.")
    parser.add_argument("--format", dest="format", type=str, default=None,
                        choices=formats,
                        help="Input format (default: mining.default_format "
                             "from the config, else csv).")
    parser.add_argument("--config", type=Path, default=DEFAULT_CONFIG_PATH,
                        help="Path to the YAML configuration file.")
    parser.add_argument("--export", type=Path, default=None,
                        help="Also write the parsed rows to this CSV file.")
    parser.add_argument("--strict", action="store_true",
                        help="Exit with status 1 if the file could not be read.")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    registry = create_default_registry()
    parser = build_parser(registry.supported_formats())
    args = parser.parse_args(argv)

    logger = init_logger(args.config, "dataminer")
    mining_config = load_yaml_config_file(args.config, "mining", logger)

    fmt = args.format or mining_config.get("default_format", "csv")
    encoding = mining_config.get("encoding", "utf-8")
    try:
        adapter = registry.create(fmt, encoding=encoding)
    except ValueError as e:
        parser.error(str(e))

    result = mine(args.path, adapter)

    if result.ok and args.export is not None:
        df = records_to_dataframe(result.dataset)
        df.to_csv(args.export, index=False)
        logger.info(f"Exported {len(df)} row(s) to {args.export}")

    if args.strict and not result.ok:
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
