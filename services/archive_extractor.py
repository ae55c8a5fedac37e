# ============================================================================
# ARCHIVE EXTRACTOR
# ============================================================================
# PURPOSE: Unpack one KMZ (zip) archive into the scratch workspace and locate
#          its single KML payload
# EXPORTS: extract_archive
# DEPENDENCIES: zipfile, util_logger, exceptions
# ============================================================================
"""
Archive Extractor.

A KMZ is a zip archive holding exactly one KML document (plus optional
icons/overlays). extract_archive unpacks everything into the destination
folder, overwriting files already there, and returns the path of the one
payload file found at the top level of that folder.
"""

import os
import zipfile

from exceptions import ExtractionError
from util_logger import LoggerFactory, ComponentType


logger = LoggerFactory.create_logger(ComponentType.SERVICE, "ArchiveExtractor")


def extract_archive(
    archive_path: str,
    dest_dir: str,
    payload_extension: str = "kml"
) -> str:
    """
    Extract an archive and return its single payload file.

    Args:
        archive_path: Zip archive to extract (e.g. a .kmz)
        dest_dir: Folder to extract into; created if missing
        payload_extension: Extension of the payload to find (case-insensitive)

    Returns:
        Path of the extracted payload file

    Raises:
        ExtractionError: If the archive cannot be read or extracted, or if the
            destination folder holds zero or more than one payload file

    Example:
        kml_path = extract_archive("/data/20-006 GIS.kmz", "/data/temp")
    """
    target_ext = f".{payload_extension.lower().lstrip('.')}"

    logger.debug(f"Extracting {archive_path} to {dest_dir}")

    try:
        os.makedirs(dest_dir, exist_ok=True)
        with zipfile.ZipFile(archive_path) as z:
            file_names = z.namelist()
            z.extractall(dest_dir)
    except zipfile.BadZipFile as e:
        raise ExtractionError(f"Not a valid zip archive: {e}", input_path=archive_path) from e
    except (OSError, RuntimeError, zipfile.LargeZipFile) as e:
        # RuntimeError: encrypted members
        raise ExtractionError(f"Error extracting archive: {e}", input_path=archive_path) from e

    logger.debug(f"Extracted files: {file_names}")

    matching_files = sorted(
        name for name in os.listdir(dest_dir)
        if name.lower().endswith(target_ext)
        and os.path.isfile(os.path.join(dest_dir, name))
    )

    if not matching_files:
        raise ExtractionError(
            f"No {target_ext} file found in archive. Available files: {file_names}",
            input_path=archive_path
        )

    if len(matching_files) > 1:
        raise ExtractionError(
            f"Expected exactly one {target_ext} file, found {len(matching_files)}: {matching_files}",
            input_path=archive_path
        )

    payload_path = os.path.join(dest_dir, matching_files[0])
    logger.debug(f"Payload located at {payload_path}")
    return payload_path

