"""Exceptions raised by quadgeo."""
from __future__ import annotations

from typing import Any


class QuadGeoError(Exception):
    """Base class for every error raised while building geometry."""


class UnsupportedUVModeError(QuadGeoError, NotImplementedError):
    """The builder was configured with a UV mode that has no mapping."""

    def __init__(self, mode: Any) -> None:
        self.mode = mode
        name = getattr(mode, "name", mode)
        super().__init__(f"UV mode not supported: {name}")


class DegenerateQuadError(QuadGeoError, ValueError):
    """A quad's geometry cannot produce finite texture coordinates."""

    def __init__(self, quad_index: int, reason: str) -> None:
        self.quad_index = quad_index
        self.reason = reason
        super().__init__(f"Degenerate quad at index {quad_index}: {reason}")
