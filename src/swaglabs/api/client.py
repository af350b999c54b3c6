"""HTTP client for the API suite.

Thin wrapper around httpx for the JSON placeholder service used to
demonstrate request/response checks next to the browser scenarios.
"""

from __future__ import annotations

from typing import Any

import httpx
import structlog

logger = structlog.get_logger()

API_BASE_URL = "https://jsonplaceholder.typicode.com"
API_TIMEOUT = 10.0


class JsonPlaceholderClient:
    """Sync client; use as a context manager so the connection pool is closed."""

    def __init__(
        self,
        base_url: str = API_BASE_URL,
        timeout: float = API_TIMEOUT,
    ):
        self.base_url = base_url
        self._client = httpx.Client(
            base_url=base_url,
            timeout=timeout,
            headers={"Accept": "application/json"},
            event_hooks={"response": [self._log_response]},
        )

    def __enter__(self) -> "JsonPlaceholderClient":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def close(self) -> None:
        self._client.close()

    @staticmethod
    def _log_response(response: httpx.Response) -> None:
        # elapsed is only set once the body has been read
        response.read()
        logger.debug(
            "api_response",
            method=response.request.method,
            path=response.request.url.path,
            status=response.status_code,
            elapsed_ms=round(response.elapsed.total_seconds() * 1000, 1),
        )

    # -------------------------------------------------------------------------
    # Generic requests
    # -------------------------------------------------------------------------

    def get(
        self,
        path: str,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        return self._client.get(path, params=params, headers=headers)

    def request(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        return self._client.request(method, path, **kwargs)

    # -------------------------------------------------------------------------
    # Posts
    # -------------------------------------------------------------------------

    def get_post(self, post_id: int) -> httpx.Response:
        return self.get(f"/posts/{post_id}")

    def list_posts(self, **params: Any) -> httpx.Response:
        """List posts, e.g. list_posts(userId=1, _limit=5)."""
        return self.get("/posts", params=params or None)

    def create_post(self, title: str, body: str, user_id: int) -> httpx.Response:
        return self._client.post("/posts", json={"title": title, "body": body, "userId": user_id})

    def update_post(self, post_id: int, title: str, body: str, user_id: int) -> httpx.Response:
        return self._client.put(
            f"/posts/{post_id}",
            json={"id": post_id, "title": title, "body": body, "userId": user_id},
        )

    def delete_post(self, post_id: int) -> httpx.Response:
        return self._client.delete(f"/posts/{post_id}")

    # -------------------------------------------------------------------------
    # Users
    # -------------------------------------------------------------------------

    def get_user(self, user_id: int) -> httpx.Response:
        return self.get(f"/users/{user_id}")
