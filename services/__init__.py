"""
Services Package.

Filesystem-level steps of a conversion run.

Exports:
    extract_archive: Unpack a KMZ and locate its KML
    WorkspaceManager: Scratch folder lifecycle
"""

from .archive_extractor import extract_archive
from .workspace_manager import WorkspaceManager

__all__ = [
    'extract_archive',
    'WorkspaceManager',
]
