# ============================================================================
# ERROR COLLECTOR
# ============================================================================
# PURPOSE: Archives that failed in the current run, written to a
#          timestamped report at run end
# EXPORTS: ErrorCollector
# DEPENDENCIES: util_logger, exceptions, config.defaults
# ============================================================================
"""
Error Collector.

In-memory list of failed archive paths for one run. Nothing is carried over
between runs; each run with failures writes its own report:

    <output_folder>/ConversionErrors-YYYYMMDD-HHMMSS.txt

one path per line. A run without failures writes nothing.
"""

import os
from datetime import datetime
from typing import Callable, Iterator, List, Optional

from config.defaults import ConversionDefaults
from exceptions import ErrorReportError
from util_logger import LoggerFactory, ComponentType


logger = LoggerFactory.create_logger(ComponentType.REPOSITORY, "ErrorCollector")


class ErrorCollector:
    """
    Failed archive identifiers for the current run, in failure order.
    """

    def __init__(
        self,
        prefix: str = ConversionDefaults.ERROR_REPORT_PREFIX,
        clock: Callable[[], datetime] = datetime.now
    ):
        self.prefix = prefix
        self._clock = clock
        self._failures: List[str] = []

    def record(self, identifier: str) -> None:
        """Append one failure. No de-duplication: one entry per failed attempt."""
        self._failures.append(identifier)

    def report_name(self, when: datetime) -> str:
        stamp = when.strftime(ConversionDefaults.ERROR_REPORT_TIMESTAMP_FORMAT)
        return f"{self.prefix}-{stamp}.txt"

    def persist(self, output_folder: str) -> Optional[str]:
        """
        Write the failures to a new report file.

        Never overwrites an earlier report: if the timestamped name is taken
        (two runs in the same second), -1, -2, ... is appended.

        Args:
            output_folder: Folder the report goes into

        Returns:
            Path of the report, or None when there were no failures

        Raises:
            ErrorReportError: If the report cannot be written
        """
        if not self._failures:
            logger.debug("No conversion errors - no error report written")
            return None

        base_name = self.report_name(self._clock())
        stem, ext = os.path.splitext(base_name)

        try:
            os.makedirs(output_folder, exist_ok=True)
            attempt = 0
            while True:
                name = base_name if attempt == 0 else f"{stem}-{attempt}{ext}"
                path = os.path.join(output_folder, name)
                try:
                    with open(path, 'x', encoding='utf-8', newline='\n') as f:
                        for identifier in self._failures:
                            f.write(f"{identifier}\n")
                    break
                except FileExistsError:
                    attempt += 1
        except OSError as e:
            raise ErrorReportError(f"Failed to write error report in {output_folder}: {e}") from e

        logger.warning(
            f"{len(self._failures)} file(s) failed to convert - report written to {path}",
            extra={'custom_dimensions': {'failed_inputs': list(self._failures)}}
        )
        return path

    @property
    def failures(self) -> List[str]:
        """Failed identifiers in order (copy)."""
        return list(self._failures)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._failures))

    def __len__(self) -> int:
        return len(self._failures)
