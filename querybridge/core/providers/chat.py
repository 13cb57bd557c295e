"""
Chat-completion providers.

Each supported platform gets one frozen ProviderConfig describing where to
POST, how to authenticate and how to read the reply. The registry is built
once at startup and is read-only afterwards.
"""
import logging
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Any, Callable, Dict, Mapping, Optional

import httpx

from querybridge.config import Settings
from querybridge.core.errors import UpstreamError

logger = logging.getLogger(__name__)

# Upstream error bodies are cut to this many chars before reaching the caller
MAX_ERROR_TEXT = 300


class AuthMode(str, Enum):
    QUERY_PARAM = "query_param"
    BEARER = "bearer"
    NONE = "none"


class ReplyFormat(str, Enum):
    CHOICES = "choices"
    CANDIDATES = "candidates"


@dataclass(frozen=True)
class ProviderConfig:
    name: str
    url: str
    auth_mode: AuthMode
    reply_format: ReplyFormat
    body_template: Callable[[str], Dict[str, Any]]


def _chat_messages_body(model: str) -> Callable[[str], Dict[str, Any]]:
    def build(query: str) -> Dict[str, Any]:
        return {"model": model, "messages": [{"role": "user", "content": query}]}
    return build


def _gemini_body(query: str) -> Dict[str, Any]:
    return {"contents": [{"parts": [{"text": query}]}]}


def _extract_choices(data: Any) -> Optional[str]:
    """choices[0].message.content"""
    try:
        text = data["choices"][0]["message"]["content"]
    except (KeyError, IndexError, TypeError):
        return None
    return text if isinstance(text, str) else None


def _extract_candidates(data: Any) -> Optional[str]:
    """candidates[0].content.parts[0].text"""
    try:
        text = data["candidates"][0]["content"]["parts"][0]["text"]
    except (KeyError, IndexError, TypeError):
        return None
    return text if isinstance(text, str) else None


_EXTRACTORS = {
    ReplyFormat.CHOICES: _extract_choices,
    ReplyFormat.CANDIDATES: _extract_candidates,
}


def extract_reply(reply_format: ReplyFormat, data: Any) -> Optional[str]:
    """Reply text for the given format, or None when the path is missing or empty."""
    return _EXTRACTORS[reply_format](data) or None


def build_chat_configs(settings: Settings) -> Mapping[str, ProviderConfig]:
    """Build the platform -> ProviderConfig registry from settings."""
    configs = {
        "chatgpt": ProviderConfig(
            name="chatgpt",
            url=settings.chatgpt_api_url,
            auth_mode=AuthMode.BEARER,
            reply_format=ReplyFormat.CHOICES,
            body_template=_chat_messages_body(settings.chatgpt_model),
        ),
        "deepseek": ProviderConfig(
            name="deepseek",
            url=settings.deepseek_api_url,
            auth_mode=AuthMode.BEARER,
            reply_format=ReplyFormat.CHOICES,
            body_template=_chat_messages_body(settings.deepseek_model),
        ),
        "gemini": ProviderConfig(
            name="gemini",
            url=settings.gemini_api_url,
            auth_mode=AuthMode.QUERY_PARAM,
            reply_format=ReplyFormat.CANDIDATES,
            body_template=_gemini_body,
        ),
        "mistral": ProviderConfig(
            name="mistral",
            url=settings.mistral_api_url,
            auth_mode=AuthMode.BEARER,
            reply_format=ReplyFormat.CHOICES,
            body_template=_chat_messages_body(settings.mistral_model),
        ),
    }
    return MappingProxyType(configs)


class ChatProvider:
    def __init__(self, config: ProviderConfig, api_key: str):
        self.config = config
        self.api_key = api_key

    def _params(self) -> Dict[str, str]:
        if self.config.auth_mode is AuthMode.QUERY_PARAM:
            return {"key": self.api_key}
        return {}

    def _headers(self) -> Dict[str, str]:
        headers = {"Content-Type": "application/json"}
        if self.config.auth_mode is AuthMode.BEARER:
            headers["Authorization"] = f"Bearer {self.api_key}"
        return headers

    def _fail(self, detail: str) -> UpstreamError:
        return UpstreamError(f"API request failed for {self.config.name}: {detail}")

    async def complete(self, client: httpx.AsyncClient, query: str) -> str:
        """POST the query and return the reply text."""
        name = self.config.name
        try:
            resp = await client.post(
                self.config.url,
                params=self._params(),
                headers=self._headers(),
                json=self.config.body_template(query),
            )
        except httpx.HTTPError as e:
            logger.error(f"[{name}] request error: {e}")
            raise self._fail(str(e) or e.__class__.__name__) from e

        if not resp.is_success:
            error_text = resp.text[:MAX_ERROR_TEXT]
            logger.error(f"[{name}] request failed with status {resp.status_code}: {error_text}")
            raise self._fail(f"API request failed with status {resp.status_code}: {error_text}")

        try:
            data = resp.json()
        except ValueError as e:
            logger.error(f"[{name}] invalid JSON in response: {e}")
            raise self._fail("Invalid JSON in response") from e

        logger.debug(f"[{name}] response: {data}")
        message = extract_reply(self.config.reply_format, data)
        if not message:
            logger.warning(f"[{name}] no reply text at the {self.config.reply_format.value} path")
            raise self._fail("No valid response from API")
        return message
