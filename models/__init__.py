"""Core data models for the flight roster."""

from models.exceptions import (
    RosterError,
    InvalidArgumentError,
    CapacityExceededError,
    OperationFailedError,
)
from models.country_codes import ISO_COUNTRY_CODES, is_valid_country_code
from models.flight import Flight, is_valid_flight_number
from models.passenger import Passenger, TransferMode
from models.network import RosterNetwork

__all__ = [
    "RosterError",
    "InvalidArgumentError",
    "CapacityExceededError",
    "OperationFailedError",
    "ISO_COUNTRY_CODES",
    "is_valid_country_code",
    "Flight",
    "is_valid_flight_number",
    "Passenger",
    "TransferMode",
    "RosterNetwork",
]
