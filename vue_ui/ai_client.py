"""
Thin wrapper around an OpenAI-compatible chat API (OpenRouter by default), used
by the LLM-backed tools.
"""

import json
import logging
import re
from typing import Any, Dict, List, Optional

from openai import APIError, AsyncOpenAI

from vue_ui.config import AppSettings
from vue_ui.errors import AINotConfiguredError, AIProviderError

logger = logging.getLogger(__name__)

_JSON_FENCE_RE = re.compile(r"```(?:json)?\s*(\{.*?\})\s*```", re.DOTALL | re.IGNORECASE)
_VUE_FENCE_RE = re.compile(r"```vue\s*\n(.*?)```", re.DOTALL | re.IGNORECASE)


def build_ai_client(settings: AppSettings) -> AsyncOpenAI:
    if not settings.ai_enabled:
        raise AINotConfiguredError(
            "AI provider is not configured; set OPENROUTER_API_KEY and OPENROUTER_MODEL_ID"
        )
    return AsyncOpenAI(
        api_key=settings.ai_api_key,
        base_url=settings.ai_base_url,
        timeout=settings.ai_timeout_seconds,
        max_retries=settings.ai_max_retries,
    )


def extract_json_object(text: str) -> Dict[str, Any]:
    """Parses the first JSON object in a model reply (fenced or bare)."""
    match = _JSON_FENCE_RE.search(text)
    candidate = match.group(1) if match else None
    if candidate is None:
        start = text.find("{")
        end = text.rfind("}")
        if 0 <= start < end:
            candidate = text[start:end + 1]
    if candidate is None:
        raise AIProviderError("Could not locate a JSON object in the AI provider response")
    try:
        data = json.loads(candidate)
    except json.JSONDecodeError as e:
        raise AIProviderError(f"AI provider returned malformed JSON: {e}") from e
    if isinstance(data, list) and data and isinstance(data[0], dict):
        data = data[0]
    if not isinstance(data, dict):
        raise AIProviderError("AI provider response is not a JSON object")
    return data


def extract_vue_code(text: str) -> str:
    """Code of the first ```vue block, or the whole reply when there is none."""
    match = _VUE_FENCE_RE.search(text)
    if match:
        return match.group(1).strip()
    return text.strip()


class ChatModel:
    def __init__(self, client: AsyncOpenAI, model: str):
        self.client = client
        self.model = model

    @classmethod
    def from_settings(cls, settings: AppSettings) -> "ChatModel":
        return cls(build_ai_client(settings), settings.ai_model or "")

    async def generate_text(
        self,
        system: str,
        messages: List[Dict[str, str]],
        max_tokens: int = 2000,
        temperature: Optional[float] = 0.2,
    ) -> str:
        request_messages = [{"role": "system", "content": system}, *messages]
        try:
            response = await self.client.chat.completions.create(
                model=self.model,
                messages=request_messages,  # type: ignore[arg-type]
                max_tokens=max_tokens,
                temperature=temperature,
            )
        except APIError as e:
            logger.error("AI provider call failed: %s", e)
            raise AIProviderError(f"AI provider call failed: {e}") from e
        if not response.choices:
            raise AIProviderError("AI provider returned no choices")
        content = (response.choices[0].message.content or "").strip()
        if not content:
            raise AIProviderError("AI provider returned an empty response")
        return content
