"""Holiday info API client with bounded timeouts and retry."""

from __future__ import annotations

import time
from datetime import date
from typing import Any, Dict, Optional

import requests

from workday_cli import __version__
from workday_cli.core.constants import DEFAULT_TIMEOUT_SECONDS, HOLIDAY_API_BASE


class HolidayAPIError(RuntimeError):
    """Raised when the holiday service cannot be reached or answers with an error."""


class HolidayResponseError(HolidayAPIError):
    """Raised when the holiday service answers with an unexpected payload."""


class HolidayAPI:
    """Thin wrapper around the timor.tech holiday REST API."""

    def __init__(
        self,
        base_url: str = HOLIDAY_API_BASE,
        connect_timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
        read_timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
        max_retries: int = 1,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.connect_timeout_seconds = connect_timeout_seconds
        self.read_timeout_seconds = read_timeout_seconds
        self.max_retries = max(1, max_retries)

    @property
    def _headers(self) -> Dict[str, str]:
        return {
            "User-Agent": f"workday-cli/{__version__}",
            "Accept": "application/json",
        }

    @property
    def _timeout(self) -> tuple:
        return (self.connect_timeout_seconds, self.read_timeout_seconds)

    def _request(self, method: str, path: str) -> Dict[str, Any]:
        url = f"{self.base_url}{path}"
        last_error: Optional[Exception] = None

        for attempt in range(1, self.max_retries + 1):
            try:
                response = requests.request(
                    method=method,
                    url=url,
                    headers=self._headers,
                    timeout=self._timeout,
                )
                if response.status_code in (429, 500, 502, 503, 504):
                    raise requests.HTTPError(response.text, response=response)
                response.raise_for_status()
                try:
                    payload = response.json()
                except ValueError as exc:
                    raise HolidayResponseError(f"Invalid JSON from {method} {path}: {exc}") from exc
            except (requests.RequestException, OSError) as exc:
                # OSError covers sockets closed underneath the session.
                last_error = exc
                if attempt >= self.max_retries:
                    break
                time.sleep(min(2**attempt, 8))
                continue

            if not isinstance(payload, dict):
                raise HolidayResponseError(f"Expected a JSON object from {method} {path}")
            return payload

        raise HolidayAPIError(f"API request failed for {method} {path}: {last_error}")

    def get(self, path: str) -> Dict[str, Any]:
        return self._request("GET", path)

    def get_day_info(self, day: date) -> Dict[str, Any]:
        return self.get(f"/info/{day.isoformat()}")
