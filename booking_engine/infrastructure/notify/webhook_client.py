from __future__ import annotations

import logging
from typing import Any

import httpx


class WebhookClient:
    def __init__(self, url: str, timeout: float = 10.0, token: str | None = None) -> None:
        self._url = url
        self._token = token
        self._client = httpx.Client(timeout=timeout)
        self._logger = logging.getLogger(__name__)

    def post_event(self, event: str, payload: dict[str, Any]) -> None:
        headers = {"Authorization": f"Bearer {self._token}"} if self._token else {}
        resp = self._client.post(self._url, json={"event": event, "data": payload}, headers=headers)
        if resp.status_code >= 400:
            self._logger.error(
                "Notification webhook failed",
                extra={
                    "status": resp.status_code,
                    "reason": resp.text[:200],
                    "event": event,
                },
            )
            resp.raise_for_status()
