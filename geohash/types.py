from __future__ import annotations

from dataclasses import asdict, dataclass
from enum import Enum


@dataclass(frozen=True)
class Coordinate:
    """A point on the globe: x is longitude, y is latitude."""

    x: float
    y: float


@dataclass(frozen=True)
class Rect:
    """Axis-aligned box between a min and a max corner."""

    min: Coordinate
    max: Coordinate

    @property
    def width(self) -> float:
        return self.max.x - self.min.x

    @property
    def height(self) -> float:
        return self.max.y - self.min.y

    def center(self) -> Coordinate:
        return Coordinate(
            x=(self.min.x + self.max.x) / 2,
            y=(self.min.y + self.max.y) / 2,
        )

    def contains(self, other: Rect) -> bool:
        """True if ``other`` lies inside this box, edges included."""
        return (
            self.min.x <= other.min.x
            and self.min.y <= other.min.y
            and other.max.x <= self.max.x
            and other.max.y <= self.max.y
        )


class Direction(Enum):
    """Compass directions, valued by their (dlat, dlng) sign vector."""

    N = (1, 0)
    NE = (1, 1)
    E = (0, 1)
    SE = (-1, 1)
    S = (-1, 0)
    SW = (-1, -1)
    W = (0, -1)
    NW = (1, -1)

    def to_tuple(self) -> tuple[float, float]:
        dlat, dlng = self.value
        return float(dlat), float(dlng)


@dataclass(frozen=True)
class Neighbors:
    """The eight cells around a geohash, all at the same precision."""

    n: str
    ne: str
    e: str
    se: str
    s: str
    sw: str
    w: str
    nw: str

    def get(self, direction: Direction) -> str:
        return getattr(self, direction.name.lower())

    def to_dict(self) -> dict[str, str]:
        return asdict(self)
