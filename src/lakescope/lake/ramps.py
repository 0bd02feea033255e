"""Boat ramp catalogue for Sardis Lake."""

from dataclasses import dataclass, field
from typing import Optional

from lakescope.utils.geo import Point


@dataclass(frozen=True)
class BoatRamp:
    """A public launch ramp.

    Attributes:
        id: Stable slug
        name: Display name
        location: Shore description
        min_elevation: Lowest lake elevation (ft) at which the ramp is usable
        optimal_elevation: Elevation (ft) at which every vessel class can launch
        coordinates: Ramp location
        amenities: Facilities at the ramp
        parking_spaces: Trailer parking count
        phone: Contact number, if staffed
    """

    id: str
    name: str
    location: str
    min_elevation: float
    optimal_elevation: float
    coordinates: Point
    amenities: tuple[str, ...] = field(default_factory=tuple)
    parking_spaces: int = 0
    phone: Optional[str] = None


SARDIS_BOAT_RAMPS = [
    BoatRamp(
        id="potato-hills",
        name="Potato Hills North",
        location="North Shore",
        min_elevation=590,
        optimal_elevation=595,
        coordinates=Point(lat=34.6850, lon=-95.3750),
        amenities=("Parking", "Restrooms", "Fish Cleaning Station", "Camping"),
        parking_spaces=75,
        phone="(918) 567-2523",
    ),
    BoatRamp(
        id="potato-hills-south",
        name="Potato Hills South",
        location="South Shore",
        min_elevation=588,
        optimal_elevation=594,
        coordinates=Point(lat=34.6720, lon=-95.3680),
        amenities=("Parking", "Restrooms", "Picnic Area"),
        parking_spaces=50,
    ),
    BoatRamp(
        id="sardis-cove",
        name="Sardis Cove Marina",
        location="East Shore",
        min_elevation=585,
        optimal_elevation=592,
        coordinates=Point(lat=34.6550, lon=-95.3550),
        amenities=("Full Service Marina", "Fuel Dock", "Boat Rental", "Store", "Restaurant"),
        parking_spaces=120,
        phone="(918) 567-2323",
    ),
    BoatRamp(
        id="billy-creek",
        name="Billy Creek",
        location="West Shore",
        min_elevation=592,
        optimal_elevation=597,
        coordinates=Point(lat=34.6480, lon=-95.4100),
        amenities=("Parking", "Restrooms", "Primitive Camping"),
        parking_spaces=35,
    ),
    BoatRamp(
        id="jackfork",
        name="Jackfork Creek",
        location="Northwest Arm",
        min_elevation=594,
        optimal_elevation=598,
        coordinates=Point(lat=34.6900, lon=-95.4200),
        amenities=("Parking", "Hiking Trails"),
        parking_spaces=25,
    ),
]
