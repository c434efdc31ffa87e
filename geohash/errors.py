from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from geohash.types import Coordinate


class GeohashError(ValueError):
    """Base class for every error raised by the codec."""


class InvalidCoordinateRange(GeohashError):
    """Longitude outside [-180, 180] or latitude outside [-90, 90]."""

    def __init__(self, coordinate: Coordinate):
        super().__init__(f"invalid coordinate range: {coordinate!r}")
        self.coordinate = coordinate


class InvalidHashCharacter(GeohashError):
    """A character outside the base32 alphabet was found while decoding."""

    def __init__(self, character: str):
        super().__init__(f"invalid hash character: {character}")
        self.character = character
