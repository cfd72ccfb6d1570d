"""Google Directions adapter restricted to bus transit.

Builds the transit request (bus only, metric units, regional bias,
departure now) and returns the decoded JSON. Filtering of the step
list is the RouteResolver's job, not this adapter's.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict

import requests

from ...config import DirectionsConfig, get_config
from ...domain.errors import DirectionsError


@dataclass
class GoogleDirectionsAdapter:
    """DirectionsPort implementation over the Directions web service.

    Attributes:
        config: Directions configuration
        session: HTTP session (injectable for tests)
    """

    config: DirectionsConfig = field(default_factory=lambda: get_config().directions)
    session: requests.Session = field(default_factory=requests.Session, repr=False)

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def build_params(self, origin: str, destination: str) -> Dict[str, str]:
        """Query parameters for one bus transit request."""
        params = {
            "origin": origin,
            "destination": destination,
            "mode": "transit",
            "transit_mode": self.config.transit_mode,
            "units": self.config.units,
            "region": self.config.region,
            "departure_time": self.config.departure_time,
        }
        if self.config.api_key:
            params["key"] = self.config.api_key
        return params

    def directions(self, origin: str, destination: str) -> Dict[str, Any]:
        """Request bus directions between two free-text places.

        Raises:
            DirectionsError: On transport failure, HTTP error or an
                undecodable body.
        """
        self._logger.info(
            "Requesting bus directions",
            extra={"origin": origin, "destination": destination},
        )

        try:
            response = self.session.get(
                self.config.endpoint,
                params=self.build_params(origin, destination),
                timeout=self.config.timeout_seconds,
            )
        except requests.RequestException as e:
            raise DirectionsError("Directions request failed", cause=e)

        if not response.ok:
            raise DirectionsError(
                f"Directions request failed with HTTP {response.status_code}",
                status=str(response.status_code),
            )

        try:
            body = response.json()
        except ValueError as e:
            raise DirectionsError(
                "Directions response is not valid JSON",
                status=str(response.status_code),
                cause=e,
            )

        if not isinstance(body, dict):
            raise DirectionsError("Directions response is not an object")

        return body
