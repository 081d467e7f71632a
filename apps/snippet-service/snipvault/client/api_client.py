"""HTTP client for the snippet service API."""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

import requests

from snipvault.db import schemas
from snipvault.errors import InternalError, error_for_status

logger = logging.getLogger(__name__)

_DEFAULT_TIMEOUT = 10.0


@dataclass
class ClientConfig:
    base_url: str = "http://localhost:8000"
    user: Optional[str] = None
    email: Optional[str] = None
    timeout: float = _DEFAULT_TIMEOUT
    extra_headers: Dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_env(cls) -> "ClientConfig":
        raw_timeout = os.getenv("SNIPVAULT_TIMEOUT")
        try:
            timeout = float(raw_timeout) if raw_timeout else _DEFAULT_TIMEOUT
        except ValueError:
            logger.warning("Invalid SNIPVAULT_TIMEOUT '%s'; using %s", raw_timeout, _DEFAULT_TIMEOUT)
            timeout = _DEFAULT_TIMEOUT
        return cls(
            base_url=os.getenv("SNIPVAULT_API_URL", "http://localhost:8000"),
            user=os.getenv("SNIPVAULT_USER"),
            email=os.getenv("SNIPVAULT_EMAIL"),
            timeout=timeout,
        )

    def identity_headers(self) -> Dict[str, str]:
        headers = dict(self.extra_headers)
        if self.email:
            headers["X-Auth-Request-Email"] = self.email
        if self.user:
            headers["X-Auth-Request-User"] = self.user
        return headers


class SnippetApiClient:
    """Thin wrapper over the snippet endpoints.

    Non-2xx responses raise the matching `snipvault.errors` class with the
    server's `detail` message; transport failures raise InternalError.
    """

    def __init__(self, config: Optional[ClientConfig] = None, session: Optional[requests.Session] = None) -> None:
        self.config = config or ClientConfig.from_env()
        self.base_url = self.config.base_url.rstrip('/')
        self.session = session or requests.Session()
        self.session.headers.update(self.config.identity_headers())

    def _request(self, method: str, path: str, payload: Optional[Dict[str, Any]] = None) -> Any:
        url = f"{self.base_url}{path}"
        try:
            response = self.session.request(method, url, json=payload, timeout=self.config.timeout)
        except requests.RequestException as exc:
            logger.error("snippet_api_unreachable: %s %s: %s", method, url, exc)
            raise InternalError("Snippet service unreachable") from exc

        if not response.ok:
            try:
                body = response.json()
            except ValueError:
                body = None
            detail = body.get("detail") if isinstance(body, dict) else None
            logger.info("snippet_api_error: %s %s -> %s", method, path, response.status_code)
            raise error_for_status(response.status_code, detail if isinstance(detail, str) else None)
        return response.json()

    def list_snippets(self) -> List[schemas.Snippet]:
        data = self._request("GET", "/api/dashboard")
        return [schemas.Snippet.model_validate(item) for item in data]

    def get_snippet(self, snippet_id: int) -> schemas.Snippet:
        return schemas.Snippet.model_validate(self._request("GET", f"/api/new/{snippet_id}"))

    def create_snippet(self, heading: str, code: str, language: str, tags: Optional[List[str]] = None) -> schemas.Snippet:
        payload = {"heading": heading, "code": code, "language": language, "tags": list(tags or [])}
        return schemas.Snippet.model_validate(self._request("POST", "/api/new", payload))

    def update_snippet(self, snippet_id: int, **changes: str) -> schemas.Snippet:
        return schemas.Snippet.model_validate(self._request("PUT", f"/api/new/{snippet_id}", changes))

    def delete_snippet(self, snippet_id: int) -> str:
        data = self._request("DELETE", f"/api/new/{snippet_id}")
        return data.get("message", "")

    def list_tags(self) -> List[schemas.TagUsage]:
        return [schemas.TagUsage.model_validate(item) for item in self._request("GET", "/api/tags")]
