"""Error taxonomy for the habitat engine."""

from __future__ import annotations


class HabitatError(ValueError):
    """Base class for engine contract violations."""


class InvalidShapeKind(HabitatError):
    def __init__(self, kind: object) -> None:
        super().__init__(f"Unsupported shape kind: {kind!r}")
        self.kind = kind


class InvalidDimension(HabitatError):
    def __init__(self, name: str, value: object) -> None:
        super().__init__(f"Dimension {name} must be > 0 (got {value!r})")
        self.name = name
        self.value = value


class InvalidMissionContext(HabitatError):
    def __init__(self, message: str) -> None:
        super().__init__(message)
