"""
dashboard/api_client.py

HTTP client the dashboard uses to talk to the vendor analytics backend.
"""

from __future__ import annotations

import logging
from typing import Any

import requests

from app.config import DashboardSettings

logger = logging.getLogger(__name__)


class DashboardAPIError(RuntimeError):
    """
    Raised when the backend cannot be reached or answers with an error.
    """

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class VendorDashboardClient:
    """
    Thin JSON client for the analytics and simulation endpoints.
    """

    def __init__(
        self,
        settings: DashboardSettings,
        session: requests.Session | None = None,
    ) -> None:
        self._base_url = settings.api_base_url.rstrip("/")
        self._timeout_seconds = settings.request_timeout_seconds
        self._session = session or requests.Session()

    def fetch_analytics(self, vendor_id: str) -> dict[str, Any]:
        """
        Fetch metrics, earnings and insights for *vendor_id*.
        """

        return self._request_json(method="GET", path=f"/vendor/analytics/{vendor_id}")

    def submit_update(self, vendor_id: str, form: dict[str, Any]) -> dict[str, Any]:
        """
        Post a simulation update. Empty form values are not sent.
        """

        payload = {key: value for key, value in form.items() if value not in (None, "")}
        return self._request_json(method="POST", path=f"/vendor/update/{vendor_id}", json=payload)

    def _request_json(
        self,
        *,
        method: str,
        path: str,
        json: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        url = f"{self._base_url}{path}"
        try:
            response = self._session.request(
                method=method,
                url=url,
                json=json,
                timeout=self._timeout_seconds,
            )
            response.raise_for_status()
        except requests.HTTPError as exc:
            status_code = exc.response.status_code if exc.response is not None else None
            logger.error("Dashboard request failed status=%s url=%s error=%s", status_code, url, exc)
            raise DashboardAPIError(f"Backend returned HTTP {status_code}.", status_code=status_code) from exc
        except (requests.Timeout, requests.ConnectionError) as exc:
            logger.error("Dashboard request could not reach backend url=%s error=%s", url, exc)
            raise DashboardAPIError("Backend is unreachable.") from exc

        try:
            payload = response.json()
        except ValueError as exc:
            raise DashboardAPIError("Backend response was not valid JSON.") from exc
        if not isinstance(payload, dict):
            raise DashboardAPIError("Backend response was not a JSON object.")
        return payload
