import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, List

import httpx

from querybridge.core.errors import UpstreamError

logger = logging.getLogger(__name__)

GOOGLE_PLATFORM = "google"


class SearchClient(ABC):
    @abstractmethod
    async def search(self, client: httpx.AsyncClient, query: str) -> List[Dict[str, Any]]:
        ...


class GoogleSearchProvider(SearchClient):
    """Google Custom Search JSON API."""

    def __init__(self, api_key: str, cse_id: str, api_url: str):
        self.api_key = api_key
        self.cse_id = cse_id
        self.api_url = api_url

    async def search(self, client: httpx.AsyncClient, query: str) -> List[Dict[str, Any]]:
        params = {
            "key": self.api_key,
            "cx": self.cse_id,
            "q": query,
        }
        try:
            resp = await client.get(self.api_url, params=params)
        except httpx.HTTPError as e:
            logger.error(f"[google] request error: {e}")
            raise UpstreamError("Google search failed") from e

        if not resp.is_success:
            logger.error(f"[google] request failed with status {resp.status_code}: {resp.text[:300]}")
            raise UpstreamError("Google search failed")

        try:
            data = resp.json()
        except ValueError as e:
            logger.error(f"[google] invalid JSON in response: {e}")
            raise UpstreamError("Google search failed") from e

        items = data.get("items") if isinstance(data, dict) else None
        return [_map_item(item) for item in items or []]


def _map_item(item: Any) -> Dict[str, Any]:
    # malformed entries keep their slot so results stay 1:1 with items
    if not isinstance(item, dict):
        return {"title": None, "link": None, "snippet": None}
    return {
        "title": item.get("title"),
        "link": item.get("link"),
        "snippet": item.get("snippet"),
    }
