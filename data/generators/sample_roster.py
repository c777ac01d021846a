"""Sample roster dataset generator.

Creates a three-flight, six-passenger instance. Capacities are small so a
demo run can fill a flight and exercise a rejected transfer.
"""

from typing import List, Tuple

from models import Flight, Passenger


def generate_sample_roster() -> Tuple[List[Flight], List[Passenger]]:
    """
    Generate the sample roster instance.

    Returns:
        Tuple of (flights, passengers), all passengers unbooked

    Dataset Details:
        - AB123 (2 seats), CD456 (3 seats), EF7890 (1 seat)
        - 6 passengers from 5 countries
    """
    flights = [
        Flight("AB123", 2),
        Flight("CD456", 3),
        Flight("EF7890", 1),
    ]

    passengers = [
        Passenger("P001", "Maria Diaz", "ES"),
        Passenger("P002", "Juan Perez", "MX"),
        Passenger("P003", "John Doe", "US"),
        Passenger("P004", "Aiko Tanaka", "JP"),
        Passenger("P005", "Lena Fischer", "DE"),
        Passenger("P006", "Tomas Silva", "PT"),
    ]

    return flights, passengers


def print_instance_summary(
    flights: List[Flight],
    passengers: List[Passenger]
) -> None:
    """Print a summary of the flights and their current rosters."""
    print("=" * 60)
    print("FLIGHT ROSTER")
    print("=" * 60)
    print(f"Flights: {len(flights)}")
    print(f"Passengers: {len(passengers)}")
    print()

    for flight in flights:
        print(
            f"  {flight.flight_number}: "
            f"{flight.number_of_passengers}/{flight.seats} seats"
        )
        for passenger in sorted(flight.passengers, key=lambda p: p.identifier):
            print(f"    {passenger}")

    unbooked = [p for p in passengers if p.flight is None]
    if unbooked:
        print()
        print("Unbooked:")
        for passenger in unbooked:
            print(f"    {passenger}")

    print("=" * 60)
