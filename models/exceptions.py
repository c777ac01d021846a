"""Errors raised by the roster models."""

from typing import Optional


class RosterError(Exception):
    """Base class for flight roster errors."""


class InvalidArgumentError(RosterError, ValueError):
    """Raised when a flight number or country code is malformed."""


class CapacityExceededError(RosterError):
    """
    Raised when adding a passenger would exceed a flight's seats.

    Attributes:
        flight_number: Number of the full flight
        seats: Capacity of the full flight
    """

    def __init__(self, flight_number: str, seats: Optional[int] = None):
        super().__init__(f"Not enough seats for flight {flight_number}")
        self.flight_number = flight_number
        self.seats = seats


class OperationFailedError(RosterError, RuntimeError):
    """Raised when a roster and a back-reference disagree during a transfer."""
