"""Route resolution: origin/destination to bus rides.

Only the first route is considered. Every leg and step of it is
scanned and bus transit steps are kept in step order.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, List, Mapping

from ..domain.errors import DirectionsError
from ..domain.models import TransitResult
from ..ports.directions import DirectionsPort

NOT_AVAILABLE = "N/A"

_EMPTY_STATUSES = frozenset({"ZERO_RESULTS"})


def _text(value: Any) -> str:
    if isinstance(value, Mapping):
        value = value.get("text")
    if value is None or value == "":
        return NOT_AVAILABLE
    return str(value)


def _is_bus_step(step: Mapping[str, Any]) -> bool:
    if step.get("travel_mode") != "TRANSIT":
        return False
    details = step.get("transit_details") or {}
    vehicle = (details.get("line") or {}).get("vehicle") or {}
    return vehicle.get("type") == "BUS"


def _to_result(step: Mapping[str, Any], leg: Mapping[str, Any]) -> TransitResult:
    details = step.get("transit_details") or {}
    line = details.get("line") or {}
    stops = details.get("num_stops")
    return TransitResult(
        bus_number=_text(line.get("short_name")),
        from_stop=_text((details.get("departure_stop") or {}).get("name")),
        to_stop=_text((details.get("arrival_stop") or {}).get("name")),
        departure_time=_text(details.get("departure_time")),
        duration=_text(leg.get("duration")),
        stops=stops if isinstance(stops, int) else 0,
    )


def extract_bus_steps(response: Mapping[str, Any]) -> List[TransitResult]:
    """Collect the bus rides of the first route in a directions response.

    Args:
        response: Decoded directions response.

    Returns:
        One TransitResult per bus transit step, in step order. Empty
        when there are no routes.
    """
    routes = response.get("routes") or []
    if not routes:
        return []

    results: List[TransitResult] = []
    for leg in routes[0].get("legs") or []:
        for step in leg.get("steps") or []:
            if _is_bus_step(step):
                results.append(_to_result(step, leg))
    return results


@dataclass
class RouteResolver:
    """Resolves bus rides between two places.

    Attributes:
        directions: Directions service adapter
        raise_on_failure: Raise DirectionsError instead of returning an
            empty list when the request fails
    """

    directions: DirectionsPort
    raise_on_failure: bool = False

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def resolve(self, origin: str, destination: str) -> List[TransitResult]:
        """Find bus rides from ``origin`` to ``destination``.

        Returns:
            Bus rides of the first route; empty on zero routes and, unless
            ``raise_on_failure`` is set, on any failure.

        Raises:
            DirectionsError: Only when ``raise_on_failure`` is set.
        """
        try:
            response = self.directions.directions(origin, destination)
            status = str(response.get("status", ""))
            if status in _EMPTY_STATUSES:
                self._logger.info(
                    "No routes found",
                    extra={"origin": origin, "destination": destination},
                )
                return []
            if status != "OK":
                raise DirectionsError(
                    f"Directions returned status {status or 'UNKNOWN'}",
                    status=status,
                )
        except DirectionsError as e:
            self._logger.warning(
                "Directions lookup failed",
                extra={
                    "origin": origin,
                    "destination": destination,
                    "status": e.status,
                    "error": str(e),
                },
            )
            if self.raise_on_failure:
                raise
            return []

        results = extract_bus_steps(response)
        self._logger.info(
            "Bus rides resolved",
            extra={
                "origin": origin,
                "destination": destination,
                "rides": len(results),
            },
        )
        return results
