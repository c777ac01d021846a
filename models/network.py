"""Bipartite flight/passenger network for roster verification."""

from typing import Dict, Iterable, List, Optional, Any
import networkx as nx

from models.flight import Flight, flight_number_of
from models.passenger import Passenger

FLIGHT_NODE = "flight"
PASSENGER_NODE = "passenger"


class RosterNetwork:
    """
    Bipartite graph of flights and passengers.

    Flight nodes are joined to the passengers on their roster. Each edge
    records whether the passenger's back-reference points at that flight,
    and each passenger node records the flight its back-reference names.
    The graph is a snapshot: rebuild it after further bookings.

    Passengers found on a roster but missing from the passengers argument
    are added too.
    """

    def __init__(
        self,
        flights: Iterable[Flight],
        passengers: Iterable[Passenger] = ()
    ):
        self.flights: List[Flight] = list(flights)
        self.passengers: List[Passenger] = list(passengers)

        self.graph = nx.Graph()
        self._build_network()

    def _build_network(self) -> None:
        """Add flight and passenger nodes, then one edge per booking."""
        for flight in self.flights:
            self.graph.add_node(flight, **self._flight_features(flight))

        for passenger in self.passengers:
            self._add_passenger(passenger)

        for flight in self.flights:
            for passenger in flight.passengers:
                if passenger not in self.graph:
                    self.passengers.append(passenger)
                    self._add_passenger(passenger)
                self.graph.add_edge(
                    flight,
                    passenger,
                    back_reference=passenger.flight is flight
                )

    def _add_passenger(self, passenger: Passenger) -> None:
        self.graph.add_node(passenger, **self._passenger_features(passenger))

    def _flight_features(self, flight: Flight) -> dict:
        return {
            "kind": FLIGHT_NODE,
            "bipartite": 0,
            "flight_number": flight.flight_number,
            "seats": flight.seats,
        }

    def _passenger_features(self, passenger: Passenger) -> dict:
        return {
            "kind": PASSENGER_NODE,
            "bipartite": 1,
            "identifier": passenger.identifier,
            "country_code": passenger.country_code,
            "booked_on": flight_number_of(passenger.flight),
        }

    def get_manifest(self, flight: Flight) -> List[Passenger]:
        """Passengers on flight's roster, sorted by identifier."""
        if flight not in self.graph:
            return []
        return sorted(self.graph.neighbors(flight), key=lambda p: p.identifier)

    def get_flight_of(self, passenger: Passenger) -> Optional[Flight]:
        """Flight whose roster lists passenger, or None."""
        if passenger not in self.graph:
            return None
        flights = list(self.graph.neighbors(passenger))
        return flights[0] if len(flights) == 1 else None

    def get_unbooked(self) -> List[Passenger]:
        """Passengers on no roster and with no back-reference."""
        return [
            p for p in self.passengers
            if self.graph.degree(p) == 0 and p.flight is None
        ]

    def verify_consistency(self) -> Dict[str, bool]:
        """
        Verify the flight/passenger invariants.

        Returns dict of check_name -> satisfied
        """
        return {
            "back_references_match": all(
                data["back_reference"]
                for _, _, data in self.graph.edges(data=True)
            ),
            "single_flight_per_passenger": all(
                self.graph.degree(p) <= 1 for p in self.passengers
            ),
            "capacity_respected": all(
                self.graph.degree(f) <= max(f.seats, 0) for f in self.flights
            ),
            "dangling_back_references_absent": all(
                p in p.flight for p in self.passengers if p.flight is not None
            ),
        }

    @property
    def is_consistent(self) -> bool:
        """True if every check in verify_consistency passes."""
        return all(self.verify_consistency().values())

    def to_dict(self) -> Dict[str, Any]:
        """Serialize flights, manifests and checks to a dictionary."""
        return {
            "flights": [
                {
                    "flight_number": f.flight_number,
                    "seats": f.seats,
                    "passengers": [p.identifier for p in self.get_manifest(f)],
                }
                for f in self.flights
            ],
            "unbooked": [p.identifier for p in self.get_unbooked()],
            "checks": self.verify_consistency(),
        }

    @property
    def num_nodes(self) -> int:
        """Number of nodes in the network."""
        return self.graph.number_of_nodes()

    @property
    def num_edges(self) -> int:
        """Number of bookings in the network."""
        return self.graph.number_of_edges()

    def __repr__(self) -> str:
        return (
            f"RosterNetwork(flights={len(self.flights)}, "
            f"passengers={len(self.passengers)}, bookings={self.num_edges})"
        )
