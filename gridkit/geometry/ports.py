"""Domain Port(s) for the geometry context.

Defines interfaces (Protocols) that external collaborators must implement.
No concrete I/O or randomness here.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Protocol, TypeVar

T = TypeVar("T")


class RandomSource(Protocol):
    """Port for uniform integer sampling.

    ``numpy.random.Generator`` satisfies this protocol as-is.
    """

    def integers(self, low: int, high: int) -> Any:
        """Return an integer drawn uniformly from the half-open range [low, high)."""
        ...


class StateRepository(Protocol):
    """Port for persisting geometry values as part of larger save states.

    Implementations live in infrastructure (e.g., JSON adapter).
    """

    def save(self, value: Any, file_path: Path | str, value_type: Any = None) -> None:
        """Serialize ``value`` to ``file_path``."""
        ...

    def load(self, file_path: Path | str, value_type: type[T]) -> T:
        """Read ``file_path`` and validate it into ``value_type``."""
        ...
