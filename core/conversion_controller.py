# ============================================================================
# CONVERSION RUN CONTROLLER
# ============================================================================
# PURPOSE: Orchestrates one batch run: enumerate archives, skip those in the
#          ledger, extract + convert the rest, record outcomes, persist state
# EXPORTS: ConversionRunController
# DEPENDENCIES: config, core.models, core.logic, infrastructure, services,
#               interfaces, util_logger, exceptions
# ============================================================================
"""
Conversion Run Controller.

All state of a run (ledger, error list, workspace, counters) belongs to one
controller instance; nothing is held in module globals, so several runs can
execute in the same process one after another.

Per archive (strictly sequential):

    in ledger?  -> SKIPPED
    else        -> acquire workspace
                   extract -> open payload -> layer 0 -> derive name
                   -> create <output>/<name>/ -> copy layer as <name>
                   -> release workspace
                   success -> ledger.record()          CONVERTED
                   any error -> error list, log, move on  FAILED

Run exit (always, even after a fatal error):

    persist ledger (only if it was loaded) -> write error report (if any
    failures) -> final workspace purge
"""

import os
import time
import uuid
from datetime import datetime, timezone
from typing import List, Optional

from config.conversion_config import ConversionConfig
from core.logic.calculations import calculate_success_rate, count_pending
from core.logic.naming import derive_output_name
from core.models.enums import ConversionOutcome
from core.models.results import FileConversionResult, RunSummary
from exceptions import (
    ConfigurationError,
    ContractViolationError,
    DatasetReadError,
    DatasetWriteError,
)
from infrastructure.conversion_ledger import ConversionLedger
from infrastructure.error_collector import ErrorCollector
from interfaces.vector_io import IVectorReader, IVectorWriter
from services.archive_extractor import extract_archive
from services.workspace_manager import WorkspaceManager
from util_logger import LoggerFactory, ComponentType


class ConversionRunController:
    """
    Runs one KMZ -> Shapefile batch conversion.

    Usage:
        vector_io = GeoPandasVectorIO(config.output_driver)
        controller = ConversionRunController(config, reader=vector_io, writer=vector_io)
        summary = controller.run()
        print(summary.summary_line)
    """

    def __init__(
        self,
        config: ConversionConfig,
        reader: IVectorReader,
        writer: IVectorWriter,
        workspace: Optional[WorkspaceManager] = None,
        errors: Optional[ErrorCollector] = None,
        run_id: Optional[str] = None
    ):
        if not isinstance(reader, IVectorReader):
            raise ContractViolationError(f"reader must implement IVectorReader, got {type(reader).__name__}")
        if not isinstance(writer, IVectorWriter):
            raise ContractViolationError(f"writer must implement IVectorWriter, got {type(writer).__name__}")

        self.config = config
        self.reader = reader
        self.writer = writer
        self.workspace = workspace if workspace is not None else WorkspaceManager(config.workspace_path)
        self.errors = errors if errors is not None else ErrorCollector(prefix=config.error_report_prefix)
        self.ledger = ConversionLedger()
        self.run_id = run_id or uuid.uuid4().hex[:12]

        self.logger = LoggerFactory.create_with_context(
            ComponentType.CONTROLLER,
            "ConversionRunController",
            run_id=self.run_id
        )

    # ========================================================================
    # RUN
    # ========================================================================

    def run(self) -> RunSummary:
        """
        Convert every archive under the input folder not already converted.

        Returns:
            RunSummary with counters and per-file results

        Raises:
            LedgerError: Ledger could not be read or written
            ErrorReportError: Error report could not be written
            WorkspaceError: Workspace could not be removed at run exit
            ConfigurationError: Input folder does not exist
        """
        summary = RunSummary(
            run_id=self.run_id,
            started_at=datetime.now(timezone.utc),
            ledger_path=self.config.ledger_path
        )
        self.logger.info(
            f"Starting conversion run: {self.config.input_folder} -> {self.config.output_folder}"
        )

        ledger_loaded = False
        try:
            self.ledger = ConversionLedger.load(self.config.ledger_path)
            ledger_loaded = True

            inputs = self.enumerate_inputs()
            summary.total = len(inputs)
            self.logger.info(
                f"Found {summary.total} .{self.config.input_extension} file(s), "
                f"{count_pending(inputs, self.ledger)} not yet converted"
            )

            for position, input_path in enumerate(inputs, start=1):
                summary.add(self.convert_file(input_path, position, summary.total))

            self.logger.info("Conversions complete")
            self.logger.info(
                summary.summary_line,
                extra={'custom_dimensions': {
                    'converted': summary.converted,
                    'skipped': summary.skipped,
                    'failed': summary.failed,
                    'success_rate': round(calculate_success_rate(summary.converted, summary.total), 3)
                }}
            )
        except Exception:
            self.logger.error("Conversion run aborted by fatal error", exc_info=True)
            raise
        finally:
            summary.finished_at = datetime.now(timezone.utc)
            try:
                if ledger_loaded:
                    self.ledger.persist(self.config.ledger_path)
                summary.error_report_path = self.errors.persist(self.config.output_folder)
            finally:
                self.workspace.close()

        return summary

    def enumerate_inputs(self) -> List[str]:
        """
        Find archives under the input folder, recursively.

        Extension match is case-insensitive. Directories and files are walked
        in sorted order; the scratch workspace is not descended into.

        Raises:
            ConfigurationError: If the input folder does not exist
        """
        if not os.path.isdir(self.config.input_folder):
            raise ConfigurationError(f"Input folder not found: {self.config.input_folder}")

        suffix = f".{self.config.input_extension}"
        workspace = os.path.normcase(os.path.abspath(self.workspace.path))
        found: List[str] = []

        for root, dirs, files in os.walk(self.config.input_folder):
            dirs[:] = sorted(
                d for d in dirs
                if os.path.normcase(os.path.abspath(os.path.join(root, d))) != workspace
            )
            for name in sorted(files):
                if name.lower().endswith(suffix):
                    found.append(os.path.join(root, name))

        return found

    # ========================================================================
    # PER FILE
    # ========================================================================

    def convert_file(self, input_path: str, position: int, total: int) -> FileConversionResult:
        """
        Process one archive. Failures are returned, not raised.

        Args:
            input_path: Archive path (ledger identifier)
            position: 1-based position in this run, for progress messages
            total: Number of archives in this run

        Returns:
            FileConversionResult (CONVERTED, SKIPPED or FAILED)

        Raises:
            ContractViolationError: Programming errors are not treated as
                per-file failures
        """
        if self.ledger.contains(input_path):
            self.logger.info(f"Skipping {position} / {total} - Already converted")
            return FileConversionResult.skipped(input_path)

        start = time.monotonic()
        try:
            with self.workspace.acquire() as scratch_dir:
                result = self._convert_archive(input_path, scratch_dir)
        except ContractViolationError:
            raise
        except Exception as e:
            duration_ms = int((time.monotonic() - start) * 1000)
            self.logger.error(f"Failed on {position} / {total}")
            self.logger.error(
                f"Error converting {input_path}: {e}",
                extra={'custom_dimensions': {
                    'input_path': input_path,
                    'error_type': type(e).__name__,
                }}
            )
            self.errors.record(input_path)
            return FileConversionResult.failed(input_path, e, duration_ms)

        self.ledger.record(input_path)
        result = result.model_copy(update={'duration_ms': int((time.monotonic() - start) * 1000)})
        self.logger.info(f"Converted {position} / {total}")
        self.logger.debug(
            f"{input_path} -> {result.output_dir} ({len(result.output_files)} files, {result.duration_ms} ms)"
        )
        return result

    def _convert_archive(self, input_path: str, scratch_dir: str) -> FileConversionResult:
        """Extract, read and write one archive. Any failure propagates."""
        payload_path = extract_archive(input_path, scratch_dir, self.config.payload_extension)

        with self.reader.open(payload_path, read_only=True) as source:
            if source.layer_count == 0:
                raise DatasetReadError(f"{os.path.basename(payload_path)} contains no layers", input_path=input_path)
            layer = source.get_layer(0)

            output_name = derive_output_name(input_path, self.config.name_strip_tokens)
            output_dir = os.path.join(self.config.output_folder, output_name)
            try:
                os.makedirs(output_dir, exist_ok=True)
            except OSError as e:
                raise DatasetWriteError(f"Cannot create output folder {output_dir}: {e}", input_path=input_path) from e

            dataset = self.writer.create_dataset(output_dir, self.config.output_driver)
            output_files = dataset.copy_layer(layer, output_name, self.config.layer_creation_options)

        return FileConversionResult(
            input_path=input_path,
            outcome=ConversionOutcome.CONVERTED,
            output_name=output_name,
            output_dir=output_dir,
            output_files=output_files
        )
