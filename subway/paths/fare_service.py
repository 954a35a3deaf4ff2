from abc import ABC, abstractmethod
from typing import Sequence

from subway.config import Settings
from subway.paths.schemas import Line

class FarePolicy(ABC):
    """Maps the total distance of a path to the fare owed.

    Implementations must be defined for every non-negative distance, never
    return a negative fare and never charge less for a longer distance.
    """

    def calculate_fare(self, distance: int, lines: Sequence[Line] = ()) -> int:
        if distance < 0:
            raise ValueError(f"Distance must not be negative: {distance}")
        return self._calculate(distance, lines)

    @abstractmethod
    def _calculate(self, distance: int, lines: Sequence[Line]) -> int:
        ...


class FlatFarePolicy(FarePolicy):
    """Same fare for every trip"""

    def __init__(self, fare: int):
        if fare < 0:
            raise ValueError(f"Fare must not be negative: {fare}")
        self.fare = fare

    def _calculate(self, distance: int, lines: Sequence[Line]) -> int:
        return self.fare


class DistanceFarePolicy(FarePolicy):
    """Base fare plus a surcharge per started distance unit.

    Up to ``base_distance`` the base fare applies. Between ``base_distance``
    and ``middle_distance_limit`` every started ``middle_unit`` adds
    ``extra_fare_per_unit``; beyond the limit every started ``long_unit``
    does.
    """

    def __init__(
        self,
        base_fare: int = 1250,
        base_distance: int = 10,
        middle_distance_limit: int = 50,
        middle_unit: int = 5,
        long_unit: int = 8,
        extra_fare_per_unit: int = 100
    ):
        if base_fare < 0 or extra_fare_per_unit < 0:
            raise ValueError("Fares must not be negative")
        if middle_unit <= 0 or long_unit <= 0:
            raise ValueError("Distance units must be positive")
        if middle_distance_limit < base_distance:
            raise ValueError("Middle distance limit must not be below the base distance")

        self.base_fare = base_fare
        self.base_distance = base_distance
        self.middle_distance_limit = middle_distance_limit
        self.middle_unit = middle_unit
        self.long_unit = long_unit
        self.extra_fare_per_unit = extra_fare_per_unit

    def _calculate(self, distance: int, lines: Sequence[Line]) -> int:
        middle_distance = min(distance, self.middle_distance_limit) - self.base_distance
        long_distance = distance - self.middle_distance_limit

        fare = self.base_fare
        if middle_distance > 0:
            fare += self._started_units(middle_distance, self.middle_unit) * self.extra_fare_per_unit
        if long_distance > 0:
            fare += self._started_units(long_distance, self.long_unit) * self.extra_fare_per_unit
        return fare

    @staticmethod
    def _started_units(distance: int, unit: int) -> int:
        return (distance + unit - 1) // unit


class LineSurchargeFarePolicy(FarePolicy):
    """Wraps another policy and adds the highest extra fare of the lines used"""

    def __init__(self, base_policy: FarePolicy):
        self.base_policy = base_policy

    def _calculate(self, distance: int, lines: Sequence[Line]) -> int:
        surcharge = max((line.extra_fare for line in lines), default=0)
        return self.base_policy.calculate_fare(distance, lines) + surcharge


def create_fare_policy(name: str, settings: Settings) -> FarePolicy:
    """Build the fare policy selected by configuration"""
    if name == "flat":
        return FlatFarePolicy(settings.FLAT_FARE)

    distance_policy = DistanceFarePolicy(
        base_fare=settings.BASE_FARE,
        base_distance=settings.BASE_FARE_DISTANCE,
        middle_distance_limit=settings.MIDDLE_FARE_DISTANCE_LIMIT,
        middle_unit=settings.MIDDLE_FARE_UNIT,
        long_unit=settings.LONG_FARE_UNIT,
        extra_fare_per_unit=settings.EXTRA_FARE_PER_UNIT
    )
    if name == "distance":
        return distance_policy
    if name == "line_surcharge":
        return LineSurchargeFarePolicy(distance_policy)

    raise ValueError(f"Unknown fare policy: {name}")
