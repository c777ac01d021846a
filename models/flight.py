"""Flight data model."""

import logging
import re
from typing import FrozenSet, Optional, Set, TYPE_CHECKING

from models.exceptions import CapacityExceededError, InvalidArgumentError

if TYPE_CHECKING:
    from models.passenger import Passenger

logger = logging.getLogger(__name__)

FLIGHT_NUMBER_PATTERN = re.compile(r"[A-Z]{2}[0-9]{3,4}")


def is_valid_flight_number(flight_number: object) -> bool:
    """Check if flight_number is two upper case letters and 3-4 digits."""
    return (
        isinstance(flight_number, str)
        and FLIGHT_NUMBER_PATTERN.fullmatch(flight_number) is not None
    )


class Flight:
    """
    Represents a flight with a bounded passenger roster.

    The roster is the canonical membership record. Each passenger on it
    holds a back-reference to this flight, which add_passenger and
    remove_passenger keep in step. Membership is by object identity.

    Attributes:
        flight_number: Airline flight number (e.g., "AB123")
        seats: Total capacity; zero or negative capacities accept nobody
    """

    def __init__(self, flight_number: str, seats: int):
        if not is_valid_flight_number(flight_number):
            raise InvalidArgumentError("Invalid flight number")
        self._flight_number = flight_number
        self._seats = seats
        self._passengers: Set['Passenger'] = set()

    @property
    def flight_number(self) -> str:
        """Airline flight number."""
        return self._flight_number

    @property
    def seats(self) -> int:
        """Total number of seats."""
        return self._seats

    @property
    def passengers(self) -> FrozenSet['Passenger']:
        """Snapshot of the current roster."""
        return frozenset(self._passengers)

    @property
    def number_of_passengers(self) -> int:
        """Number of passengers currently booked (not remaining seats)."""
        return len(self._passengers)

    @property
    def available_seats(self) -> int:
        """Seats still free."""
        return max(self._seats - len(self._passengers), 0)

    @property
    def is_full(self) -> bool:
        """True if no further passenger can be added."""
        return len(self._passengers) >= self._seats

    def check_capacity(self) -> None:
        """
        Ensure there is room for one more passenger.

        Raises:
            CapacityExceededError: If the roster already fills every seat
        """
        if self.is_full:
            logger.warning(
                f"Flight {self._flight_number} is full "
                f"({self.number_of_passengers}/{self._seats})"
            )
            raise CapacityExceededError(self._flight_number, self._seats)

    def add_passenger(self, passenger: 'Passenger') -> bool:
        """
        Add a passenger to the roster.

        Capacity is checked before anything changes. The passenger's
        back-reference is pointed at this flight even if it was already on
        the roster; moving a passenger off another flight first is the
        caller's job (see Passenger.join_flight).

        Args:
            passenger: Passenger to book

        Returns:
            True if the passenger was newly added, False if already present

        Raises:
            CapacityExceededError: If the flight has no free seat
        """
        self.check_capacity()

        passenger.set_flight(self)
        if passenger in self._passengers:
            logger.debug(f"{passenger!r} already on {self._flight_number}")
            return False

        self._passengers.add(passenger)
        logger.debug(
            f"Added {passenger!r} to {self._flight_number} "
            f"({self.number_of_passengers}/{self._seats})"
        )
        return True

    def remove_passenger(self, passenger: 'Passenger') -> bool:
        """
        Remove a passenger from the roster.

        The passenger's back-reference is always cleared, so removing an
        absent passenger is safe.

        Returns:
            True if the passenger was on the roster, False otherwise
        """
        passenger.set_flight(None)
        if passenger not in self._passengers:
            return False

        self._passengers.discard(passenger)
        logger.debug(f"Removed {passenger!r} from {self._flight_number}")
        return True

    def __contains__(self, passenger: object) -> bool:
        return passenger in self._passengers

    def __repr__(self) -> str:
        return (
            f"Flight({self._flight_number}: "
            f"{self.number_of_passengers}/{self._seats} seats)"
        )


def flight_number_of(flight: Optional[Flight]) -> Optional[str]:
    """Flight number of flight, or None when unbooked."""
    return flight.flight_number if flight is not None else None
