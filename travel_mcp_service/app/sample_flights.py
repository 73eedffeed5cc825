"""자연어 질의(`/ask`)에서 보여주는 샘플 항공편 표예요. 프로세스 내내 읽기 전용이에요."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(slots=True, frozen=True)
class SampleFlight:
    id: int
    flight_number: str
    origin: str
    destination: str
    departure: str
    arrival: str
    status: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "flightNumber": self.flight_number,
            "from": self.origin,
            "to": self.destination,
            "departure": self.departure,
            "arrival": self.arrival,
            "status": self.status,
        }


SAMPLE_FLIGHTS: tuple[SampleFlight, ...] = (
    SampleFlight(1, "AI101", "DEL", "BOM", "08:00", "10:00", "On Time"),
    SampleFlight(2, "6E456", "BOM", "BLR", "14:30", "16:15", "Delayed"),
    SampleFlight(3, "UK789", "BLR", "DEL", "18:00", "20:30", "On Time"),
)


def list_sample_flights(*, status: str | None = None) -> list[dict[str, Any]]:
    return [flight.to_dict() for flight in SAMPLE_FLIGHTS if status is None or flight.status == status]
