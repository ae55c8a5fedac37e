"""
Conversion Run Configuration.

Provides configuration for:
    - Input (KMZ) and output (Shapefile) root folders
    - Scratch workspace location
    - Ledger and error report file naming
    - Input/payload extensions and the output driver
    - Output name derivation tokens

Exports:
    ConversionConfig: Pydantic conversion configuration model
"""

import os
from typing import Dict, Tuple

from pydantic import BaseModel, Field, field_validator

from config.defaults import ConversionDefaults


# ============================================================================
# CONVERSION CONFIGURATION
# ============================================================================

class ConversionConfig(BaseModel):
    """
    Batch conversion configuration.

    Folders are stored as absolute paths: ledger entries are the absolute
    paths of the archives found under input_folder.
    """

    input_folder: str = Field(
        default=ConversionDefaults.INPUT_FOLDER,
        description="Root folder scanned recursively for KMZ archives"
    )

    output_folder: str = Field(
        default=ConversionDefaults.OUTPUT_FOLDER,
        description="Root folder for Shapefile outputs, the ledger and error reports"
    )

    workspace_subfolder: str = Field(
        default=ConversionDefaults.WORKSPACE_SUBFOLDER,
        min_length=1,
        description="Scratch folder (under input_folder) archives are extracted into"
    )

    ledger_filename: str = Field(
        default=ConversionDefaults.LEDGER_FILENAME,
        min_length=1,
        description="Ledger of previously converted archives, kept in output_folder"
    )

    error_report_prefix: str = Field(
        default=ConversionDefaults.ERROR_REPORT_PREFIX,
        min_length=1,
        description="Error report file prefix; the run timestamp is appended"
    )

    input_extension: str = Field(
        default=ConversionDefaults.INPUT_EXTENSION,
        description="Extension of the archives to convert",
        examples=["kmz"]
    )

    payload_extension: str = Field(
        default=ConversionDefaults.PAYLOAD_EXTENSION,
        description="Extension of the single document expected inside each archive",
        examples=["kml"]
    )

    output_driver: str = Field(
        default=ConversionDefaults.OUTPUT_DRIVER,
        description="OGR driver used to write the output dataset",
        examples=["ESRI Shapefile", "GPKG"]
    )

    name_strip_tokens: Tuple[str, ...] = Field(
        default=ConversionDefaults.NAME_STRIP_TOKENS,
        description="Substrings removed from the archive name to build the output name"
    )

    layer_creation_options: Dict[str, str] = Field(
        default_factory=dict,
        description="Driver layer creation flags passed when copying the layer",
        examples=[{"ENCODING": "UTF-8"}]
    )

    @field_validator('input_folder', 'output_folder')
    @classmethod
    def make_absolute(cls, v: str) -> str:
        """Expand ~ and make folder paths absolute."""
        if not v or not v.strip():
            raise ValueError("Folder path must not be empty")
        return os.path.abspath(os.path.expanduser(v))

    @field_validator('input_extension', 'payload_extension')
    @classmethod
    def normalize_extension(cls, v: str) -> str:
        """Lower-case, without the leading dot."""
        ext = v.strip().lower().lstrip('.')
        if not ext:
            raise ValueError("Extension must not be empty")
        return ext

    # ========================================================================
    # DERIVED PATHS
    # ========================================================================

    @property
    def workspace_path(self) -> str:
        """Scratch workspace directory (under the input folder)."""
        return os.path.join(self.input_folder, self.workspace_subfolder)

    @property
    def ledger_path(self) -> str:
        """Ledger sidecar file (in the output folder)."""
        return os.path.join(self.output_folder, self.ledger_filename)

    @classmethod
    def from_environment(cls):
        """Load from environment variables."""
        return cls(
            input_folder=os.environ.get("KMZ_INPUT_FOLDER", ConversionDefaults.INPUT_FOLDER),
            output_folder=os.environ.get("SHP_OUTPUT_FOLDER", ConversionDefaults.OUTPUT_FOLDER),
            workspace_subfolder=os.environ.get("KMZ_WORKSPACE_SUBFOLDER", ConversionDefaults.WORKSPACE_SUBFOLDER),
            ledger_filename=os.environ.get("KMZ_LEDGER_FILENAME", ConversionDefaults.LEDGER_FILENAME),
            output_driver=os.environ.get("KMZ_OUTPUT_DRIVER", ConversionDefaults.OUTPUT_DRIVER)
        )
