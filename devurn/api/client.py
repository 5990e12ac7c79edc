from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict

import requests

from ..core.errors import DevUrnError, error_for_kind
from ..core.types import ErrorKind


@dataclass
class DevUrnHttpClient:
    base_url: str
    timeout: float = 10.0
    session: requests.Session = field(default_factory=requests.Session)

    def subtypes(self) -> list[Dict[str, str]]:
        return self._request("GET", "/v1/subtypes")["subtypes"]

    def detect(self, raw: str) -> str | None:
        return self._request("POST", "/v1/detect", {"input": raw}).get("detected_subtype")

    def validate(self, subtype: str, raw: str) -> Dict[str, Any]:
        return self._request("POST", "/v1/validate", {"subtype": subtype, "input": raw})

    def generate(self, subtype: str, raw: str) -> str:
        data = self._request("POST", "/v1/generate", {"subtype": subtype, "input": raw})
        return str(data["urn"])

    def breakdown(self, urn: str) -> Dict[str, str]:
        return self._request("POST", "/v1/breakdown", {"urn": urn})

    def _request(
        self, method: str, path: str, payload: Dict[str, str] | None = None
    ) -> Dict[str, Any]:
        url = f"{self.base_url.rstrip('/')}{path}"
        try:
            response = self.session.request(method, url, json=payload, timeout=self.timeout)
            if response.status_code == 400:
                raise _decode_rejection(response)
            response.raise_for_status()
            return response.json()
        except requests.Timeout as exc:  # pragma: no cover - network conditions
            raise RuntimeError(f"Timed out waiting for DEV URN API at {url}") from exc
        except requests.RequestException as exc:
            raise RuntimeError(f"Failed to call DEV URN API: {exc}") from exc


def _decode_rejection(response: requests.Response) -> DevUrnError:
    try:
        detail = response.json().get("detail", {})
    except ValueError:
        detail = {}
    if not isinstance(detail, dict):
        detail = {"message": str(detail)}
    message = str(detail.get("message") or "Request rejected")
    try:
        kind = ErrorKind(detail.get("error"))
    except ValueError:
        kind = ErrorKind.INVALID_FORMAT
    return error_for_kind(kind, message, detail)


__all__ = ["DevUrnHttpClient"]
