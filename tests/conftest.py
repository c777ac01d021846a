"""Pytest fixtures for flight roster tests."""

import pytest
import sys
from pathlib import Path

# Add parent to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from models import Flight, Passenger
from data.generators.sample_roster import generate_sample_roster


@pytest.fixture
def two_seat_flights():
    """Two empty flights with two seats each."""
    return Flight("AB123", 2), Flight("CD456", 2)


@pytest.fixture
def maria():
    """Unbooked passenger P001."""
    return Passenger("P001", "Maria Diaz", "US")


@pytest.fixture
def juan():
    """Unbooked passenger P002."""
    return Passenger("P002", "Juan Perez", "US")


@pytest.fixture
def sample_roster():
    """Full sample roster instance."""
    return generate_sample_roster()
