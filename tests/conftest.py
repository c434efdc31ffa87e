"""Shared test fixtures."""

from __future__ import annotations

import pytest

from geohash import Coordinate, Neighbors

# San Luis Obispo, CA
SLO = Coordinate(x=-120.6623, y=35.3003)

SLO_NEIGHBORS = Neighbors(
    n="9q60y60rht",
    ne="9q60y60rhv",
    e="9q60y60rhu",
    se="9q60y60rhg",
    s="9q60y60rhe",
    sw="9q60y60rh7",
    w="9q60y60rhk",
    nw="9q60y60rhm",
)


@pytest.fixture
def slo() -> Coordinate:
    return SLO


@pytest.fixture
def slo_neighbors() -> Neighbors:
    return SLO_NEIGHBORS
