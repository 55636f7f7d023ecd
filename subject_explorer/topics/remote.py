"""
Remote Topic Service client.

Speaks the HTTP surface exposed by `subject_explorer.app.main`, so a
NavigationController can drive a Topic Service running in another process.
"""

import logging
from typing import List, Optional
from urllib.parse import quote

import httpx
from pydantic import ValidationError

from ..services.exceptions import TopicServiceError, UnknownSessionError
from .interface import SessionStart, Submenu, TopicService

logger = logging.getLogger(__name__)


class RemoteTopicService(TopicService):
    def __init__(
        self,
        base_url: str,
        timeout: float = 20.0,
        client: Optional[httpx.AsyncClient] = None,
    ):
        # An injected client is owned by the caller and is not closed by aclose()
        self._owns_client = client is None
        self.client = client or httpx.AsyncClient(base_url=base_url, timeout=timeout)

    async def start_session(self, topic: str) -> SessionStart:
        data = await self._post("/sessions", {"topic": topic})
        try:
            return SessionStart.model_validate(data)
        except ValidationError as e:
            raise TopicServiceError(f"Malformed start_session response: {e}") from e

    async def select_item(self, session_id: str, item: str) -> List[str]:
        path = f"/sessions/{quote(session_id, safe='')}/selections"
        data = await self._post(path, {"item": item})
        try:
            return Submenu.model_validate(data).menu
        except ValidationError as e:
            raise TopicServiceError(f"Malformed select_item response: {e}") from e

    async def _post(self, path: str, payload: dict) -> dict:
        try:
            response = await self.client.post(path, json=payload)
            response.raise_for_status()
            return response.json()
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            if status == 404:
                raise UnknownSessionError(f"Topic Service returned 404 for {path}") from e
            raise TopicServiceError(f"Topic Service returned {status} for {path}") from e
        except (httpx.HTTPError, ValueError) as e:
            logger.error(f"Topic Service request to {path} failed: {e}")
            raise TopicServiceError(f"Topic Service request to {path} failed") from e

    async def aclose(self):
        if self._owns_client:
            await self.client.aclose()

    async def __aenter__(self) -> "RemoteTopicService":
        return self

    async def __aexit__(self, *exc_info):
        await self.aclose()
