# ============================================================================
# EXCEPTIONS
# ============================================================================
# PURPOSE: Exception hierarchy separating contract violations, per-file
#          conversion failures and fatal run-state failures
# EXPORTS: ContractViolationError, BusinessLogicError, ConversionError,
#          ExtractionError, DatasetReadError, DatasetWriteError, OutputNameError,
#          WorkspaceError, RunStateError, LedgerError, ErrorReportError,
#          ConfigurationError
# DEPENDENCIES: None (standard library only)
# ============================================================================

"""
Custom Exception Hierarchy

Distinguishes between:
1. Contract Violations (programming bugs that need fixing)
2. Per-file conversion failures (expected, recorded, the batch continues)
3. Run-state failures (ledger/report I/O - fatal to the whole run)
"""


class ContractViolationError(TypeError):
    """
    Raised when component contracts are violated (programming bugs).

    These should NEVER be caught and handled - they indicate bugs
    that need to be fixed in the code.

    Examples:
        - Vector reader asked to open a source for writing
        - Controller handed a reader that does not implement IVectorReader
    """
    pass


class BusinessLogicError(Exception):
    """
    Base class for expected runtime failures.

    Subclasses represent specific categories of failures.
    """
    pass


# ============================================================================
# PER-FILE FAILURES - recorded in the error list, batch continues
# ============================================================================

class ConversionError(BusinessLogicError):
    """
    A single archive could not be converted.

    Attributes:
        input_path: Archive that failed (if known)
    """

    def __init__(self, message: str, input_path: str = None):
        super().__init__(message)
        self.input_path = input_path


class ExtractionError(ConversionError):
    """
    Archive could not be unpacked to exactly one payload file.

    Examples:
        - Not a zip file / corrupted archive
        - Archive contains no .kml
        - Archive contains several .kml files
    """
    pass


class DatasetReadError(ConversionError):
    """
    Extracted payload could not be opened or has no usable layer.
    """
    pass


class DatasetWriteError(ConversionError):
    """
    Output dataset could not be created or the layer copy failed.
    """
    pass


class OutputNameError(ConversionError):
    """
    Output name derived from the archive file name is empty.

    Example:
        "GIS.kmz" reduces to "" once "GIS" is stripped
    """
    pass


# ============================================================================
# WORKSPACE FAILURES
# ============================================================================

class WorkspaceError(BusinessLogicError):
    """
    Scratch workspace could not be purged.

    Logged and tolerated between files; fatal at run exit.
    """
    pass


# ============================================================================
# RUN-STATE FAILURES - fatal, abort the run after cleanup
# ============================================================================

class RunStateError(BusinessLogicError):
    """
    Persisted run state could not be read or written.
    """
    pass


class LedgerError(RunStateError):
    """
    Ledger sidecar file could not be read (other than "not found") or written.
    """
    pass


class ErrorReportError(RunStateError):
    """
    Error report file could not be written.
    """
    pass


class ConfigurationError(Exception):
    """
    System configuration error.

    These are fatal and indicate misconfiguration that prevents the
    converter from operating.

    Examples:
        - Non-numeric or malformed environment variables
        - Required GDAL drivers missing from the installed pyogrio build
    """
    pass
