#!/usr/bin/env python3
"""
KMZ to Shapefile batch converter.

Converts every .kmz under the input folder (recursively) into an ESRI
Shapefile dataset under the output folder, skipping archives recorded in
the output folder's PreviouslyConvertedFiles.txt by earlier runs.

Run:
    python kmz_to_shp.py
    python kmz_to_shp.py --input-folder "/data/GIS KMZs" --output-folder "/data/GIS SHPs"
    KMZ_INPUT_FOLDER=/data/kmz SHP_OUTPUT_FOLDER=/data/shp kmz-to-shp

Exit code is 0 when the run completes, whatever the number of failed files;
a fatal error (ledger unreadable, workspace stuck, ...) propagates.
"""

import argparse
import sys
from typing import List, Optional

from pydantic import ValidationError

from config import get_config
from config.conversion_config import ConversionConfig
from core.conversion_controller import ConversionRunController
from core.models.results import RunSummary
from exceptions import ConfigurationError
from util_logger import LoggerFactory, ComponentType, log_exceptions


logger = LoggerFactory.create_logger(ComponentType.TRIGGER, "kmz_to_shp")

SEPARATOR = "-" * 39


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="kmz-to-shp",
        description="Batch convert KMZ archives to ESRI Shapefiles, skipping files converted by earlier runs."
    )
    parser.add_argument(
        "--input-folder",
        help="Folder scanned recursively for .kmz files (default: KMZ_INPUT_FOLDER or built-in path)"
    )
    parser.add_argument(
        "--output-folder",
        help="Folder for Shapefile outputs, the ledger and error reports (default: SHP_OUTPUT_FOLDER or built-in path)"
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        type=str.upper,
        help="Logger level (default: LOG_LEVEL, or DEBUG when DEBUG_MODE=true)"
    )
    return parser


def resolve_conversion_config(base: ConversionConfig, args: argparse.Namespace) -> ConversionConfig:
    """
    Apply command-line overrides on top of the environment configuration.

    Raises:
        ConfigurationError: If an override fails validation
    """
    overrides = {}
    if args.input_folder:
        overrides["input_folder"] = args.input_folder
    if args.output_folder:
        overrides["output_folder"] = args.output_folder
    if not overrides:
        return base

    try:
        return ConversionConfig(**{**base.model_dump(), **overrides})
    except ValidationError as e:
        raise ConfigurationError(f"Invalid command-line option: {e}") from e


def print_report(summary: RunSummary) -> None:
    """Console summary for the operator."""
    print("Conversions complete")
    print(summary.summary_line)

    if summary.failed_inputs:
        print(SEPARATOR)
        print("The following files failed to convert:")
        print(SEPARATOR)
        for path in summary.failed_inputs:
            print(path)
        if summary.error_report_path:
            print(f"Error report: {summary.error_report_path}")


@log_exceptions(ComponentType.TRIGGER, "kmz_to_shp")
def main(argv: Optional[List[str]] = None, vector_io=None) -> int:
    """
    Entry point.

    Args:
        argv: Command-line arguments (default: sys.argv[1:])
        vector_io: Object implementing both vector capabilities; defaults to
            GeoPandasVectorIO for the configured output driver

    Returns:
        Process exit code
    """
    args = build_parser().parse_args(argv)
    app_config = get_config()

    level = args.log_level or ("DEBUG" if app_config.debug_mode else app_config.log_level)
    LoggerFactory.set_level(level)

    conversion = resolve_conversion_config(app_config.conversion, args)

    if vector_io is None:
        # geopandas/GDAL load lazily so --help stays fast
        from infrastructure.vector_io import GeoPandasVectorIO
        vector_io = GeoPandasVectorIO(output_driver=conversion.output_driver)

    controller = ConversionRunController(conversion, reader=vector_io, writer=vector_io)
    summary = controller.run()

    print_report(summary)
    logger.info(f"Run {summary.run_id} finished: {summary.summary_line}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
