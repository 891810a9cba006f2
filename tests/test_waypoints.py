import math

import numpy as np
import pytest

from solar_nav.core.waypoints import Waypoint, WaypointCatalog
from solar_nav.data.solar_system import WAYPOINT_DEFINITIONS, create_waypoint_catalog

REFERENCE_POINTS = [(0, 0, 0), (3, 0, 3), (5, 0, 5), (7, 0, 7), (9, 0, 9), (12, 0, 12)]


def test_reference_catalog_matches_known_points() -> None:
    catalog = create_waypoint_catalog()
    assert len(catalog) == 6
    assert [wp.coordinates for wp in catalog] == [tuple(map(float, p)) for p in REFERENCE_POINTS]
    assert catalog.waypoints == WAYPOINT_DEFINITIONS


def test_nearest_at_origin_accepts_zero_distance() -> None:
    catalog = WaypointCatalog.from_points(REFERENCE_POINTS)
    nearest = catalog.nearest_to(np.zeros(3))
    assert nearest.coordinates == (0.0, 0.0, 0.0)
    assert catalog.distance_to((0.0, 0.0, 0.0)) == 0.0


def test_nearest_picks_closest_point() -> None:
    catalog = create_waypoint_catalog()
    assert catalog.nearest_to((6.6, 1.0, 7.2)).name == "Earth"
    assert catalog.nearest_to((100.0, 0.0, 100.0)).name == "Jupiter"
    assert catalog.nearest_to((0.0, 10.0, -20.0)).name == "Sun"


def test_tie_goes_to_first_enumerated_waypoint() -> None:
    catalog = WaypointCatalog.from_points([(1, 0, 0), (-1, 0, 0), (0, 0, 1)], names=["A", "B", "C"])
    assert catalog.nearest_to((0.0, 0.0, 0.0)).name == "A"

    reordered = WaypointCatalog.from_points([(-1, 0, 0), (1, 0, 0)], names=["B", "A"])
    assert reordered.nearest_to((0.0, 0.0, 0.0)).name == "B"


def test_distance_to_nearest() -> None:
    catalog = create_waypoint_catalog()
    assert math.isclose(catalog.distance_to((3.0, 4.0, 3.0)), 4.0)


def test_waypoint_position_is_a_fresh_array() -> None:
    waypoint = Waypoint("Mars", (9.0, 0.0, 9.0))
    position = waypoint.position
    position[0] = -1.0
    assert waypoint.position[0] == 9.0


def test_empty_catalog_is_rejected() -> None:
    with pytest.raises(ValueError):
        WaypointCatalog(())
