"""Reference configuration of the simulated solar system."""
from __future__ import annotations

from dataclasses import dataclass

from solar_nav.core.orbits import CentralStar, OrbitingBody
from solar_nav.core.waypoints import Waypoint, WaypointCatalog


@dataclass(frozen=True)
class BodyDefinition:
    key: str
    name: str
    radius: float
    orbital_distance: float
    angular_speed: float
    color: tuple[int, int, int]

    def create(self) -> OrbitingBody:
        return OrbitingBody(
            name=self.name,
            radius=self.radius,
            orbital_distance=self.orbital_distance,
            angular_speed=self.angular_speed,
            color=self.color,
        )


@dataclass(frozen=True)
class StarDefinition:
    name: str
    radius: float
    spin_speed: float
    color: tuple[int, int, int]

    def create(self) -> CentralStar:
        return CentralStar(
            name=self.name,
            radius=self.radius,
            spin_speed=self.spin_speed,
            color=self.color,
        )


SUN_DEFINITION = StarDefinition(name="Sun", radius=2.0, spin_speed=0.014, color=(255, 179, 0))

BODY_DEFINITIONS: tuple[BodyDefinition, ...] = (
    BodyDefinition("mercury", "Mercury", radius=0.4, orbital_distance=3.0, angular_speed=0.03, color=(179, 179, 179)),
    BodyDefinition("venus", "Venus", radius=0.9, orbital_distance=5.0, angular_speed=0.02, color=(230, 179, 128)),
    BodyDefinition("earth", "Earth", radius=1.0, orbital_distance=7.0, angular_speed=0.015, color=(51, 128, 255)),
    BodyDefinition("mars", "Mars", radius=0.8, orbital_distance=9.0, angular_speed=0.012, color=(255, 102, 51)),
    BodyDefinition("jupiter", "Jupiter", radius=1.8, orbital_distance=12.0, angular_speed=0.008, color=(204, 153, 102)),
)

WAYPOINT_DEFINITIONS: tuple[Waypoint, ...] = (
    Waypoint("Sun", (0.0, 0.0, 0.0)),
    Waypoint("Mercury", (3.0, 0.0, 3.0)),
    Waypoint("Venus", (5.0, 0.0, 5.0)),
    Waypoint("Earth", (7.0, 0.0, 7.0)),
    Waypoint("Mars", (9.0, 0.0, 9.0)),
    Waypoint("Jupiter", (12.0, 0.0, 12.0)),
)

BODIES: dict[str, BodyDefinition] = {body.key: body for body in BODY_DEFINITIONS}


def create_bodies(definitions: tuple[BodyDefinition, ...] = BODY_DEFINITIONS) -> list[OrbitingBody]:
    return [definition.create() for definition in definitions]


def create_waypoint_catalog(
    waypoints: tuple[Waypoint, ...] = WAYPOINT_DEFINITIONS,
) -> WaypointCatalog:
    return WaypointCatalog(waypoints)


__all__ = [
    "BODIES",
    "BODY_DEFINITIONS",
    "SUN_DEFINITION",
    "WAYPOINT_DEFINITIONS",
    "BodyDefinition",
    "StarDefinition",
    "create_bodies",
    "create_waypoint_catalog",
]
