"""JSON adapter for StateRepository.

Persists geometry values (Point, Direction, LateralDirection, and any
pydantic-compatible structure built from them) as JSON save-state files.

Value representation:
- Point -> {"x": 1, "y": 2}
- Direction -> "SouthEast"
- LateralDirection -> "East"

Load lifecycle:
1) Check existence, suffix allowlist, symlinks, empty file and size budget
2) Read bytes
3) Validate JSON into the requested type via pydantic TypeAdapter
4) Return the validated value
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, TypeVar

from pydantic import TypeAdapter, ValidationError

from gridkit.geometry.errors import InvalidStateFileError, StateFileTooLargeError

T = TypeVar("T")

# Module-level logger (reused across all calls)
logger = logging.getLogger(__name__)

STATE_FILE_SUFFIXES: tuple[str, ...] = (".json",)


def _check_suffix(path: Path) -> None:
    if path.suffix.lower() not in STATE_FILE_SUFFIXES:
        raise InvalidStateFileError(f"Unsupported file extension: {path.suffix}")


class JsonStateAdapter:
    """Infrastructure adapter for saving and loading geometry values as JSON.

    Parameters
    ----------
    max_bytes: int | None
        Optional size budget for a state file. Larger files are rejected
        with StateFileTooLargeError on both save and load.
    """

    def __init__(self, max_bytes: int | None = None) -> None:
        self.max_bytes = max_bytes

    def save(self, value: Any, file_path: Path | str, value_type: Any = None) -> None:
        """Serialize ``value`` to ``file_path``, creating parent directories.

        ``value_type`` defaults to ``type(value)``; pass it explicitly for
        generic containers such as ``list[Point]``.
        """
        path = Path(file_path)
        _check_suffix(path)

        adapter = TypeAdapter(value_type if value_type is not None else type(value))
        payload = adapter.dump_json(value, indent=2)

        if self.max_bytes is not None and len(payload) > self.max_bytes:
            raise StateFileTooLargeError(
                f"Serialized state {len(payload)}B exceeds budget {self.max_bytes}B"
            )

        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(payload)
        logger.debug("State %s: wrote %d bytes", path.name, len(payload))

    def load(self, file_path: Path | str, value_type: type[T]) -> T:
        """Load ``file_path`` and validate it into ``value_type``.

        Raises:
            FileNotFoundError: If the file does not exist
            InvalidStateFileError: Wrong suffix, symlink, empty file,
                malformed JSON, or schema mismatch
            StateFileTooLargeError: If the file exceeds ``max_bytes``
        """
        path = Path(file_path)

        if not path.exists():
            raise FileNotFoundError(str(path))

        _check_suffix(path)

        try:
            if path.is_symlink():
                raise InvalidStateFileError("Symlinks are not permitted")
            st = path.stat()
            if st.st_size == 0:
                raise InvalidStateFileError("Empty file")
            if self.max_bytes is not None and st.st_size > self.max_bytes:
                logger.warning(
                    "State %s: %dB exceeds budget %dB",
                    path.name,
                    st.st_size,
                    self.max_bytes,
                )
                raise StateFileTooLargeError(
                    f"File size {st.st_size}B exceeds budget {self.max_bytes}B"
                )
        except OSError as e:
            # Log only filename, errno and strerror to avoid leaking absolute paths
            logger.error(
                "Failed to stat %s (errno=%s, strerror=%s)",
                path.name,
                getattr(e, "errno", "unknown"),
                getattr(e, "strerror", "unknown"),
            )
            raise

        try:
            raw = path.read_bytes()
            value = TypeAdapter(value_type).validate_json(raw)
        except PermissionError as e:
            raise PermissionError(path.name) from e
        except ValidationError as e:
            raise InvalidStateFileError(
                f"Invalid state file {path.name}: {e.error_count()} validation error(s)"
            ) from e

        logger.debug("State %s: loaded %d bytes", path.name, len(raw))
        return value
