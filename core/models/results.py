"""
Conversion Result Data Models.

Represents the outcome of converting one archive and of a whole run.
No business logic beyond simple counting - pure data structures.

Exports:
    FileConversionResult: Result for a single input archive
    RunSummary: Aggregated result of a conversion run
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field, ConfigDict

from .enums import ConversionOutcome


class FileConversionResult(BaseModel):
    """
    Result from processing one input archive.

    Failures carry the reason instead of raising, so the controller can keep
    going with the next archive.
    """

    model_config = ConfigDict(frozen=True)

    input_path: str = Field(..., description="Full path of the input archive (ledger identifier)")
    outcome: ConversionOutcome = Field(..., description="Terminal state for this run")
    output_name: Optional[str] = Field(default=None, description="Derived dataset/layer name")
    output_dir: Optional[str] = Field(default=None, description="Directory the dataset was written to")
    output_files: List[str] = Field(default_factory=list, description="Files written for the dataset")
    error: Optional[str] = Field(default=None, description="Failure reason, 'Type: message'")
    duration_ms: Optional[int] = Field(default=None, description="Wall time spent on this archive")

    @property
    def success(self) -> bool:
        """Check if the archive was converted in this run."""
        return self.outcome == ConversionOutcome.CONVERTED

    @classmethod
    def skipped(cls, input_path: str) -> 'FileConversionResult':
        return cls(input_path=input_path, outcome=ConversionOutcome.SKIPPED)

    @classmethod
    def failed(cls, input_path: str, error: BaseException, duration_ms: Optional[int] = None) -> 'FileConversionResult':
        return cls(
            input_path=input_path,
            outcome=ConversionOutcome.FAILED,
            error=f"{type(error).__name__}: {error}",
            duration_ms=duration_ms
        )


class RunSummary(BaseModel):
    """
    Aggregated result of one conversion run.

    total counts every archive found, including skipped ones; converted only
    counts archives converted by this run.
    """

    run_id: str = Field(..., description="Run identifier used in log context")
    started_at: datetime = Field(..., description="Run start time")
    finished_at: Optional[datetime] = Field(default=None, description="Run end time")
    total: int = Field(default=0, ge=0, description="Archives found under the input folder")
    converted: int = Field(default=0, ge=0, description="Archives converted in this run")
    skipped: int = Field(default=0, ge=0, description="Archives already in the ledger")
    failed: int = Field(default=0, ge=0, description="Archives that failed in this run")
    failed_inputs: List[str] = Field(default_factory=list, description="Failed archive paths, in order")
    results: List[FileConversionResult] = Field(default_factory=list, description="Per-archive results")
    ledger_path: Optional[str] = Field(default=None, description="Ledger file written at run end")
    error_report_path: Optional[str] = Field(default=None, description="Error report written at run end, if any")

    def add(self, result: FileConversionResult) -> None:
        """Fold one per-file result into the counters."""
        self.results.append(result)
        if result.outcome == ConversionOutcome.CONVERTED:
            self.converted += 1
        elif result.outcome == ConversionOutcome.SKIPPED:
            self.skipped += 1
        else:
            self.failed += 1
            self.failed_inputs.append(result.input_path)

    @property
    def attempted(self) -> int:
        """Archives processed so far (converted, skipped or failed)."""
        return len(self.results)

    @property
    def summary_line(self) -> str:
        return f"Successfully converted {self.converted} / {self.total}"
