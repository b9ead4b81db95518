"""Client for the game server's HTTP API."""

from __future__ import annotations

import json
import urllib.error
import urllib.request
from dataclasses import dataclass

from eldoria.dtos import UIConfigDTO


class APIError(Exception):
    """Raised when an API request fails or its answer cannot be decoded."""


@dataclass
class APIClient:
    """Makes requests to the server rooted at ``base_url``."""

    base_url: str
    timeout: float | None = None

    def fetch_ui_config(self) -> UIConfigDTO:
        """Fetch the UI configuration from the server."""
        url = f"{self.base_url}/ui/config"
        try:
            with urllib.request.urlopen(url, timeout=self.timeout) as resp:
                status = resp.status
                try:
                    body = resp.read()
                except OSError as exc:
                    raise APIError(f"error reading response body: {exc}") from exc
        except urllib.error.HTTPError as exc:
            exc.close()
            raise APIError(f"received non-OK status code: {exc.code}") from None
        except (urllib.error.URLError, OSError, ValueError) as exc:
            raise APIError(f"error making request to UI config endpoint: {exc}") from exc

        if status != 200:
            raise APIError(f"received non-OK status code: {status}")

        try:
            return UIConfigDTO.from_dict(json.loads(body))
        except ValueError as exc:
            raise APIError(f"error unmarshaling response into UIConfigDTO: {exc}") from exc