# ============================================================================
# WORKSPACE MANAGER
# ============================================================================
# PURPOSE: Lifecycle of the single scratch folder archives are extracted into
# EXPORTS: WorkspaceManager
# DEPENDENCIES: shutil, util_logger, exceptions
# ============================================================================
"""
Workspace Manager.

The scratch workspace is one folder reused by every archive of a run. It is
purged by full deletion, never cleaned piecemeal:

    acquire()   purge, hand the path to the caller, purge again on exit
                (failure of the exit purge is logged, not raised - the next
                acquire() retries it)
    close()     final purge at run exit; failure is raised

The folder is not recreated after a purge; extraction creates it.
"""

import os
import shutil
from contextlib import contextmanager
from typing import Iterator

from exceptions import WorkspaceError
from util_logger import LoggerFactory, ComponentType


logger = LoggerFactory.create_logger(ComponentType.SERVICE, "WorkspaceManager")


class WorkspaceManager:
    """
    Owns the scratch folder for one run.

    Usage:
        workspace = WorkspaceManager(config.workspace_path)
        with workspace.acquire() as scratch:
            kml_path = extract_archive(kmz_path, scratch)
            ...
        workspace.close()
    """

    def __init__(self, path: str):
        self.path = path

    def exists(self) -> bool:
        return os.path.lexists(self.path)

    def ensure_clean(self) -> None:
        """
        Delete the workspace folder and everything in it, if present.

        Raises:
            WorkspaceError: If the path is not a real directory or deletion fails
        """
        if not os.path.lexists(self.path):
            return

        if os.path.islink(self.path) or not os.path.isdir(self.path):
            raise WorkspaceError(f"Refusing to delete workspace: {self.path} is not a directory")

        try:
            shutil.rmtree(self.path)
        except OSError as e:
            raise WorkspaceError(f"Failed to delete workspace {self.path}: {e}") from e

        logger.debug(f"Workspace purged: {self.path}")

    def release(self) -> bool:
        """
        Purge after one archive. Never raises.

        Returns:
            True if the workspace is gone, False if the purge failed
        """
        try:
            self.ensure_clean()
            return True
        except WorkspaceError as e:
            logger.warning(f"Workspace cleanup failed, will retry before next archive: {e}")
            return False

    @contextmanager
    def acquire(self) -> Iterator[str]:
        """
        Scoped use of the workspace for one archive.

        Raises:
            WorkspaceError: If leftovers from a previous archive cannot be removed
        """
        self.ensure_clean()
        try:
            yield self.path
        finally:
            self.release()

    def close(self) -> None:
        """
        Final purge at run exit.

        Raises:
            WorkspaceError: If the workspace cannot be removed
        """
        self.ensure_clean()
        logger.debug(f"Workspace closed: {self.path}")
