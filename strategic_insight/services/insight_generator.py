"""
Insight Generator - adapter around the external text-generation service
Supports any provider LiteLLM can reach (Gemini by default)
"""

import logging
from dataclasses import dataclass
from typing import Any, List, Optional, Union

import litellm
from litellm import acompletion

from strategic_insight.config import Settings
from strategic_insight.core.exceptions import GenerationError
from strategic_insight.utils.retry import retry_on_api_error

# Configure litellm to automatically drop unsupported parameters
litellm.drop_params = True

logger = logging.getLogger(__name__)

# Returned when the provider answers without any candidate output
NO_INSIGHT_MESSAGE = "No insight generated by AI."


@dataclass(frozen=True)
class TextPart:
    """Textual piece of a reply"""
    text: str


@dataclass(frozen=True)
class UnsupportedPart:
    """Reply piece of a kind we do not render (images, tool calls, ...)"""
    kind: str


ReplyPart = Union[TextPart, UnsupportedPart]


def _field(item: Any, name: str) -> Any:
    """Read a field from a dict or an attribute-style response object"""
    if isinstance(item, dict):
        return item.get(name)
    return getattr(item, name, None)


def to_reply_parts(content: Any) -> List[ReplyPart]:
    """
    Normalize message content into reply parts

    Content is either a plain string or a list of typed parts
    ({"type": "text", "text": ...}). Unknown part types become
    UnsupportedPart so they are dropped explicitly rather than rendered.
    """
    if content is None:
        return []
    if isinstance(content, str):
        return [TextPart(text=content)] if content else []

    parts: List[ReplyPart] = []
    for item in content:
        kind = _field(item, "type")
        if kind == "text":
            parts.append(TextPart(text=_field(item, "text") or ""))
        else:
            parts.append(UnsupportedPart(kind=str(kind)))
    return parts


def extract_reply(response: Any) -> str:
    """
    Reply text from a completion response

    Only the first choice is used; its text parts are joined in order.

    Returns:
        Reply text, or NO_INSIGHT_MESSAGE when there is no candidate output
    """
    choices = _field(response, "choices") or []
    if not choices:
        return NO_INSIGHT_MESSAGE

    message = _field(choices[0], "message")
    parts = to_reply_parts(_field(message, "content") if message is not None else None)
    if not parts:
        return NO_INSIGHT_MESSAGE

    for part in parts:
        if isinstance(part, UnsupportedPart):
            logger.debug(f"Skipping unsupported reply part: {part.kind}")

    return "".join(part.text for part in parts if isinstance(part, TextPart))


class InsightGenerator:
    """
    Single-prompt text generation via LiteLLM

    Every call has a timeout; transient provider errors are retried
    with exponential backoff before giving up.
    """

    def __init__(
        self,
        model: str,
        api_key: Optional[str] = None,
        api_base: Optional[str] = None,
        timeout: int = 60,
        temperature: Optional[float] = None,
        max_attempts: int = 3,
        backoff_multiplier: float = 1.0,
        exp_base: int = 2,
    ):
        self.model = model
        self.api_key = api_key
        self.api_base = api_base
        self.timeout = timeout
        self.temperature = temperature
        self._complete = retry_on_api_error(
            max_attempts=max_attempts,
            multiplier=backoff_multiplier,
            exp_base=exp_base
        )(self._complete_once)

    @classmethod
    def from_settings(cls, settings: Settings) -> "InsightGenerator":
        """Build from settings; fails if no API key is configured"""
        return cls(
            model=settings.llm_model_string,
            api_key=settings.require_llm_api_key(),
            api_base=settings.LLM_API_BASE or None,
            timeout=settings.LLM_TIMEOUT,
            temperature=settings.CHAT_TEMPERATURE,
            max_attempts=settings.RETRY_MAX_ATTEMPTS,
            backoff_multiplier=settings.RETRY_BACKOFF_MULTIPLIER,
            exp_base=settings.RETRY_EXPONENTIAL_BASE,
        )

    async def _complete_once(self, prompt: str):
        kwargs = {
            "model": self.model,
            "messages": [{"role": "user", "content": prompt}],
            "timeout": self.timeout,
        }
        if self.api_key:
            kwargs["api_key"] = self.api_key
        if self.api_base:
            kwargs["api_base"] = self.api_base
        if self.temperature is not None:
            kwargs["temperature"] = self.temperature

        return await acompletion(**kwargs)

    async def generate(self, prompt: str) -> str:
        """
        Generate a reply for a prompt

        Args:
            prompt: Complete prompt text

        Returns:
            Reply text (NO_INSIGHT_MESSAGE if the model produced nothing)

        Raises:
            GenerationError: Provider call failed after retries
        """
        logger.info(f"Generating insight with {self.model} ({len(prompt)} prompt chars)")
        try:
            response = await self._complete(prompt)
        except Exception as e:
            logger.error(f"LLM call failed: {e}")
            raise GenerationError(f"LLM API call failed: {e}") from e

        return extract_reply(response)
