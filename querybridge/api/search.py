from typing import Mapping, Optional, Union

import httpx
from fastapi import APIRouter, Depends

from querybridge.api.deps import get_chat_configs, get_http_client
from querybridge.config import Settings, get_settings
from querybridge.core.providers.chat import ProviderConfig
from querybridge.core.services.search_service import dispatch
from querybridge.models.schemas import MessageResponse, SearchRequest, SearchResults

router = APIRouter()


@router.post("/search", response_model=Union[SearchResults, MessageResponse])
async def search(
    req: Optional[SearchRequest] = None,
    settings: Settings = Depends(get_settings),
    chat_configs: Mapping[str, ProviderConfig] = Depends(get_chat_configs),
    client: httpx.AsyncClient = Depends(get_http_client),
):
    return await dispatch(req or SearchRequest(), settings, chat_configs, client)
