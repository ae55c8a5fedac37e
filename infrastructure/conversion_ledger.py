# ============================================================================
# CONVERSION LEDGER
# ============================================================================
# PURPOSE: Persisted, ordered set of archives converted by previous runs
# EXPORTS: ConversionLedger
# DEPENDENCIES: util_logger, exceptions
# ============================================================================
"""
Conversion Ledger.

Tracks which input archives have already been converted so a re-run skips
them. Identifiers are the full archive paths exactly as enumerated: no case
folding, no separator normalisation.

File format:
    UTF-8 text, one identifier per line, insertion order.
    Read at run start, fully rewritten at run end.
"""

import os
import tempfile
from typing import Iterable, Iterator, List, Optional, Set

from exceptions import LedgerError
from util_logger import LoggerFactory, ComponentType


logger = LoggerFactory.create_logger(ComponentType.REPOSITORY, "ConversionLedger")


class ConversionLedger:
    """
    Ordered set of previously converted archive identifiers.

    Usage:
        ledger = ConversionLedger.load(config.ledger_path)
        if not ledger.contains(path):
            ...convert...
            ledger.record(path)
        ledger.persist(config.ledger_path)
    """

    def __init__(self, identifiers: Optional[Iterable[str]] = None):
        self._entries: List[str] = []
        self._index: Set[str] = set()
        for identifier in identifiers or ():
            self.record(identifier)

    # ========================================================================
    # LOAD / PERSIST
    # ========================================================================

    @classmethod
    def load(cls, path: str) -> 'ConversionLedger':
        """
        Read a ledger file.

        A missing file means no prior history and yields an empty ledger.
        Blank lines are ignored; repeated lines are kept once.

        Raises:
            LedgerError: Any other read failure. Skip decisions depend on
                the ledger, so the run must not continue without it.
        """
        try:
            with open(path, 'r', encoding='utf-8') as f:
                # Iterating the file splits on \n, \r and \r\n only
                lines = [line.rstrip('\r\n') for line in f]
        except FileNotFoundError:
            logger.info(f"No ledger at {path} - starting with empty history")
            return cls()
        except (OSError, UnicodeDecodeError) as e:
            raise LedgerError(f"Failed to read ledger {path}: {e}") from e

        ledger = cls(line for line in lines if line)
        logger.info(f"Loaded {len(ledger)} previously converted file(s) from {path}")
        return ledger

    def persist(self, path: str) -> None:
        """
        Overwrite the ledger file with the full current set.

        Written to a temporary file in the same folder and swapped in, so an
        interrupted write never leaves a truncated ledger behind.

        Raises:
            LedgerError: If the file cannot be written
        """
        folder = os.path.dirname(path) or '.'
        tmp_path = None
        try:
            os.makedirs(folder, exist_ok=True)
            fd, tmp_path = tempfile.mkstemp(prefix='.ledger-', suffix='.tmp', dir=folder)
            with os.fdopen(fd, 'w', encoding='utf-8', newline='\n') as f:
                for identifier in self._entries:
                    f.write(f"{identifier}\n")
            os.replace(tmp_path, path)
            tmp_path = None
        except OSError as e:
            raise LedgerError(f"Failed to write ledger {path}: {e}") from e
        finally:
            if tmp_path and os.path.exists(tmp_path):
                os.remove(tmp_path)

        logger.info(f"Wrote {len(self)} ledger entr{'y' if len(self) == 1 else 'ies'} to {path}")

    # ========================================================================
    # SET OPERATIONS
    # ========================================================================

    def contains(self, identifier: str) -> bool:
        """Exact string match against recorded identifiers."""
        return identifier in self._index

    def record(self, identifier: str) -> bool:
        """
        Append identifier unless already present.

        Returns:
            True if it was added, False if it was already recorded
        """
        if identifier in self._index:
            return False
        self._entries.append(identifier)
        self._index.add(identifier)
        return True

    @property
    def entries(self) -> List[str]:
        """Identifiers in insertion order (copy)."""
        return list(self._entries)

    def __contains__(self, identifier: str) -> bool:
        return self.contains(identifier)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._entries))

    def __len__(self) -> int:
        return len(self._entries)
