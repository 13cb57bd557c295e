import logging
from typing import Mapping, Union

import httpx

from querybridge.config import Settings
from querybridge.core.errors import InvalidRequestError, UpstreamError
from querybridge.core.providers.chat import ChatProvider, ProviderConfig
from querybridge.core.providers.search import GOOGLE_PLATFORM, GoogleSearchProvider
from querybridge.models.schemas import MessageResponse, SearchRequest, SearchResult, SearchResults

logger = logging.getLogger(__name__)


async def search_google(settings: Settings, client: httpx.AsyncClient, query: str) -> SearchResults:
    if not settings.google_api_key or not settings.google_cse_id:
        raise UpstreamError("Google API keys missing")
    provider = GoogleSearchProvider(
        api_key=settings.google_api_key,
        cse_id=settings.google_cse_id,
        api_url=settings.google_api_url,
    )
    items = await provider.search(client, query)
    return SearchResults(results=[SearchResult(**item) for item in items])


async def ask_chat(
    platform: str,
    settings: Settings,
    chat_configs: Mapping[str, ProviderConfig],
    client: httpx.AsyncClient,
    query: str,
) -> MessageResponse:
    config = chat_configs.get(platform)
    if config is None:
        raise InvalidRequestError("Invalid platform")
    api_key = settings.api_key_for(platform)
    if not api_key:
        raise UpstreamError("API key missing")
    message = await ChatProvider(config, api_key).complete(client, query)
    return MessageResponse(message=message)


async def dispatch(
    req: SearchRequest,
    settings: Settings,
    chat_configs: Mapping[str, ProviderConfig],
    client: httpx.AsyncClient,
) -> Union[SearchResults, MessageResponse]:
    """Validate the request and route it to the provider named by `platform`."""
    platform = req.platform or ""
    query = req.query or ""
    if not platform or not query:
        raise InvalidRequestError("Platform and query are required")

    platform = platform.lower()
    logger.info(f"[search] platform={platform} query_len={len(query)}")

    if platform == GOOGLE_PLATFORM:
        return await search_google(settings, client, query)
    return await ask_chat(platform, settings, chat_configs, client, query)
