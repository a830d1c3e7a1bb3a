"""Append-only recorder for validated submissions.

(c) Mike Casale 2025.
Licensed under the MIT License.
See LICENSE file for details.
"""

from __future__ import annotations as _annotations

# =============================================================================
# Section 1: Imports
# =============================================================================
# Standard library (alphabetical)
import os
import threading
from contextlib import suppress
from pathlib import Path
from typing import TYPE_CHECKING

# Third-party (alphabetical)
import logfire
from pydantic_core import PydanticSerializationError

# Local imports (core first, then alphabetical)
from ..core.constants import DATA_FILE_MAX_SIZE, DATA_FILE_MODE
from ..core.exceptions import CapacityError, SerializationError, StorageError

if TYPE_CHECKING:
    from ..core.models import Submission

# =============================================================================
# Section 2: Module Exports
# =============================================================================
__all__ = ("Recorder",)

# =============================================================================
# Section 3: Constants
# =============================================================================
_OPEN_FLAGS = os.O_WRONLY | os.O_APPEND | os.O_CREAT


# =============================================================================
# Section 11: Classes
# =============================================================================
class Recorder:
    """Owns exclusive, serialized append access to the submission log.

    Every append runs the size check, the serialization and the write inside
    one held lock, so the log can grow past ``max_size`` by at most one
    record. The lock is process-wide for the instance; cross-process safety
    is limited to what ``O_APPEND`` provides.

    Appends are not transactional: a failure after bytes reached the file is
    reported but not rolled back, and readers of the log must treat the last
    line as possibly truncated.
    """

    def __init__(
        self,
        path: Path | str,
        *,
        max_size: int = DATA_FILE_MAX_SIZE,
        size_guard: bool = True,
        lock: threading.Lock | None = None,
    ) -> None:
        self.path = Path(path)
        self.max_size = max_size
        self.size_guard = size_guard
        self._lock = lock or threading.Lock()

    @property
    def lock(self) -> threading.Lock:
        """The guard serializing all appends."""
        return self._lock

    def append(self, submission: Submission) -> int:
        """Append one submission as a newline-terminated line.

        Returns:
            Number of bytes written.

        Raises:
            StorageError: stat, open, write or close of the log failed.
            CapacityError: the size guard is on and the log is at its ceiling.
            SerializationError: the submission could not be encoded.
        """
        with self._lock, logfire.span("recorder.append", path=str(self.path)) as span:
            if self.size_guard:
                current_size = self._stat_size()
                span.set_attribute("current_size", current_size)
                if current_size >= self.max_size:
                    raise CapacityError(current_size, self.max_size)

            line = self._serialize(submission)
            written = self._write(line)
            span.set_attribute("bytes_written", written)
            return written

    def size(self) -> int:
        """Current size of the log in bytes, zero when it does not exist yet."""
        with self._lock:
            return self._stat_size()

    def _stat_size(self) -> int:
        try:
            return self.path.stat().st_size
        except FileNotFoundError:
            return 0
        except OSError as exc:
            raise StorageError("stat", str(self.path), exc) from exc

    def _serialize(self, submission: Submission) -> bytes:
        try:
            return submission.to_line()
        except (PydanticSerializationError, UnicodeEncodeError) as exc:
            raise SerializationError(str(exc), cause=exc) from exc

    def _write(self, line: bytes) -> int:
        try:
            fd = os.open(self.path, _OPEN_FLAGS, DATA_FILE_MODE)
        except OSError as exc:
            raise StorageError("open", str(self.path), exc) from exc

        try:
            written = os.write(fd, line)
        except OSError as exc:
            # Write error takes precedence over a close error.
            with suppress(OSError):
                os.close(fd)
            raise StorageError("write", str(self.path), exc) from exc

        if written != len(line):
            with suppress(OSError):
                os.close(fd)
            raise StorageError("write", str(self.path), f"short write: {written} of {len(line)} bytes")

        try:
            os.close(fd)
        except OSError as exc:
            raise StorageError("close", str(self.path), exc) from exc
        return written
