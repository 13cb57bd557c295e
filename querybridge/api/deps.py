from typing import AsyncIterator, Mapping, Optional

import httpx
from fastapi import Depends, Request

from querybridge.config import Settings, get_settings
from querybridge.core.providers.chat import ProviderConfig


def get_chat_configs(request: Request) -> Mapping[str, ProviderConfig]:
    return request.app.state.chat_configs


def build_http_client(
    settings: Settings,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> httpx.AsyncClient:
    """Outbound client; redirects are followed so relays in front of a provider work."""
    kwargs = {}
    if settings.upstream_timeout is not None:
        kwargs["timeout"] = settings.upstream_timeout
    if transport is not None:
        kwargs["transport"] = transport
    return httpx.AsyncClient(follow_redirects=True, **kwargs)


async def get_http_client(settings: Settings = Depends(get_settings)) -> AsyncIterator[httpx.AsyncClient]:
    """One outbound client per request, closed when the response is sent."""
    async with build_http_client(settings) as client:
        yield client
