"""
Configuration Defaults - Single source of truth for all default values.

Organization:
    - ConversionDefaults: Folder locations, sidecar file names, formats
    - AppDefaults: Environment, debug and logging switches

Usage:
    from config.defaults import ConversionDefaults

    # In Pydantic Field definitions:
    ledger_filename: str = Field(default=ConversionDefaults.LEDGER_FILENAME, ...)
"""

import os


# =============================================================================
# CONVERSION DEFAULTS
# =============================================================================

class ConversionDefaults:
    """
    KMZ to Shapefile batch conversion defaults.

    The folder locations are the fixed paths the converter runs against when
    nothing overrides them. Override with KMZ_INPUT_FOLDER / SHP_OUTPUT_FOLDER
    or the --input-folder / --output-folder command-line options.
    """

    # Folders
    INPUT_FOLDER = os.path.join(os.path.expanduser("~"), "Desktop", "GIS KMZs")
    OUTPUT_FOLDER = os.path.join(os.path.expanduser("~"), "Desktop", "GIS SHPs")
    WORKSPACE_SUBFOLDER = "temp"

    # Sidecar files (written to the output folder)
    # DO NOT CHANGE - existing ledgers are looked up by this name
    LEDGER_FILENAME = "PreviouslyConvertedFiles.txt"
    ERROR_REPORT_PREFIX = "ConversionErrors"
    ERROR_REPORT_TIMESTAMP_FORMAT = "%Y%m%d-%H%M%S"

    # Formats
    INPUT_EXTENSION = "kmz"
    PAYLOAD_EXTENSION = "kml"
    OUTPUT_DRIVER = "ESRI Shapefile"

    # Substrings removed from the archive name to build the output name
    NAME_STRIP_TOKENS = ("GIS", "gis")


# =============================================================================
# APPLICATION DEFAULTS
# =============================================================================

class AppDefaults:
    """
    Application-wide defaults.

    Controls debug mode and logging.
    """

    DEBUG_MODE = False
    ENVIRONMENT = "dev"
    LOG_LEVEL = "INFO"
