"""JSON-over-HTTP client for the generic text-generation endpoint."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

import requests

logger = logging.getLogger(__name__)


@dataclass
class HttpClient:
    base_url: str
    api_key: Optional[str] = None
    bearer_token: Optional[str] = None
    timeout_seconds: int = 30
    extra_headers: Dict[str, str] = field(default_factory=dict)

    def headers(self) -> Dict[str, str]:
        result = {"Content-Type": "application/json", "Accept": "application/json"}
        if self.api_key:
            result["X-API-Key"] = self.api_key
        if self.bearer_token:
            result["Authorization"] = f"Bearer {self.bearer_token}"
        result.update(self.extra_headers)
        return result

    def url_for(self, path: str = "") -> str:
        if path.startswith(("http://", "https://")):
            return path
        path = path.strip("/")
        root = self.base_url.rstrip("/")
        return f"{root}/{path}" if path else root

    def post(self, path: str = "", body: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """
        POST a JSON body and return the decoded JSON object.

        Raises:
            requests.HTTPError: Status >= 400
            requests.RequestException: Connection failures and timeouts
        """
        url = self.url_for(path)
        resp = requests.post(url, json=body or {}, headers=self.headers(), timeout=self.timeout_seconds)
        logger.debug("POST %s -> %s", url, resp.status_code)
        return self.decode(resp)

    @staticmethod
    def decode(resp: requests.Response) -> Dict[str, Any]:
        try:
            data = resp.json()
        except ValueError:
            data = {"raw": resp.text}

        if resp.status_code >= 400:
            error = data.get("error") if isinstance(data, dict) else None
            if isinstance(error, dict):
                message = error.get("message") or f"HTTP {resp.status_code}"
            else:
                message = error or resp.text or f"HTTP {resp.status_code}"
            raise requests.HTTPError(str(message), response=resp)

        if not isinstance(data, dict):
            return {"data": data}
        return data
