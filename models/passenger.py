"""Passenger data model."""

import logging
from enum import Enum
from typing import Optional, TYPE_CHECKING

from models.country_codes import is_valid_country_code
from models.exceptions import InvalidArgumentError, OperationFailedError
from models.flight import flight_number_of

if TYPE_CHECKING:
    from models.flight import Flight

logger = logging.getLogger(__name__)


class TransferMode(Enum):
    """How Passenger.join_flight sequences a transfer."""
    # Check the destination's capacity before leaving the current flight;
    # the back-reference is only set once the destination accepts.
    ATOMIC = "atomic"
    # Remove, rebind, add. A full destination leaves the back-reference
    # pointing at it although its roster does not list the passenger.
    LEGACY = "legacy"


class Passenger:
    """
    Represents a passenger who can be booked on at most one flight.

    Attributes:
        identifier: Caller-supplied passenger identifier (not checked)
        name: Passenger name
        country_code: ISO 3166-1 alpha-2 country code
        flight: Flight currently holding this passenger, or None. This is a
            non-owning back-reference; the flight's roster is authoritative.
    """

    def __init__(self, identifier: str, name: str, country_code: str):
        if not is_valid_country_code(country_code):
            raise InvalidArgumentError("Invalid country code")

        self._identifier = identifier
        self._name = name
        self._country_code = country_code
        self._flight: Optional['Flight'] = None

    @property
    def identifier(self) -> str:
        """Passenger identifier."""
        return self._identifier

    @property
    def name(self) -> str:
        """Passenger name."""
        return self._name

    @property
    def country_code(self) -> str:
        """ISO alpha-2 country code."""
        return self._country_code

    @property
    def flight(self) -> Optional['Flight']:
        """Flight this passenger is booked on, or None."""
        return self._flight

    @property
    def is_booked(self) -> bool:
        """True if the passenger holds a flight."""
        return self._flight is not None

    def set_flight(self, flight: Optional['Flight']) -> None:
        """
        Point the back-reference at flight without touching any roster.

        Flight.add_passenger and Flight.remove_passenger call this. Use
        join_flight to move a passenger between flights.
        """
        self._flight = flight

    def join_flight(
        self,
        flight: Optional['Flight'],
        mode: TransferMode = TransferMode.ATOMIC
    ) -> None:
        """
        Move this passenger onto flight, leaving any current flight.

        Passing None leaves the current flight and keeps the passenger
        unbooked.

        In ATOMIC mode a full destination is detected before the passenger
        leaves its current flight, so a failed transfer changes nothing.
        Rejoining the current flight always succeeds since its seat is
        vacated first. LEGACY mode keeps the older remove, rebind, add
        sequence, including its inconsistent state when the add fails.

        Args:
            flight: Destination flight, or None
            mode: Transfer sequencing

        Raises:
            CapacityExceededError: If the destination is full
            OperationFailedError: If a roster disagrees with the
                back-reference during the transfer
        """
        previous = self._flight

        if mode is TransferMode.ATOMIC and flight is not None and flight is not previous:
            flight.check_capacity()

        if previous is not None:
            if not previous.remove_passenger(self):
                raise OperationFailedError("Cannot remove passenger")

        if mode is TransferMode.LEGACY:
            self.set_flight(flight)

        if flight is not None:
            if not flight.add_passenger(self):
                raise OperationFailedError("Cannot add passenger")

        logger.info(
            f"{self._identifier}: {flight_number_of(previous)} -> "
            f"{flight_number_of(flight)}"
        )

    def leave_flight(self) -> None:
        """Leave the current flight, if any."""
        self.join_flight(None)

    def __str__(self) -> str:
        return (
            f"Passenger {self._name} with identifier: {self._identifier} "
            f"from {self._country_code}"
        )

    def __repr__(self) -> str:
        return f"Passenger({self._identifier}: {self._name}, {self._country_code})"
