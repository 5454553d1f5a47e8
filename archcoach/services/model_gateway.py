"""
Claude model gateway.
The only component that talks to the upstream language model.
"""

import logging
from dataclasses import dataclass
from typing import Tuple

import anthropic

from archcoach.config import Settings, get_settings
from archcoach.errors import ConfigurationError, UpstreamError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Completion:
    """Reply text and token usage of one model call."""
    text: str
    input_tokens: int = 0
    output_tokens: int = 0


class ModelGateway:
    """
    Sends a single prompt to Claude and returns the reply text.

    No retries are attempted and the SDK's default timeout applies. One
    instance is shared by all requests, so nothing per call is kept on it.
    """

    def __init__(self, settings: Settings = None, client: anthropic.AsyncAnthropic = None):
        """
        Initialize the Anthropic client.

        Raises:
            ConfigurationError: If no API key is configured
        """
        settings = settings or get_settings()
        if client is None:
            if not settings.anthropic_api_key:
                raise ConfigurationError("ANTHROPIC_API_KEY must be set")
            client = anthropic.AsyncAnthropic(api_key=settings.anthropic_api_key, max_retries=0)
        self.client = client
        self.model = settings.model_name
        self.max_tokens = settings.model_max_tokens

    @staticmethod
    def _read_usage(message) -> Tuple[int, int]:
        """
        Read token usage from an API response.

        Args:
            message: Anthropic API response message

        Returns:
            Tuple of (input_tokens, output_tokens)
        """
        usage = getattr(message, "usage", None)
        if usage is None:
            return (0, 0)
        input_tokens = getattr(usage, "input_tokens", 0)
        output_tokens = getattr(usage, "output_tokens", 0)
        logger.info(f"AI usage: input={input_tokens}, output={output_tokens}")
        return (input_tokens, output_tokens)

    async def complete(self, prompt: str) -> Completion:
        """
        Send a prompt and return the first text block with its token usage.

        Args:
            prompt: Fully assembled prompt text

        Returns:
            Completion for this call

        Raises:
            UpstreamError: On non-success status, transport failure or an empty reply
        """
        try:
            message = await self.client.messages.create(
                model=self.model,
                max_tokens=self.max_tokens,
                messages=[{"role": "user", "content": prompt}],
            )
        except anthropic.APIStatusError as e:
            logger.error(f"Claude API error: status={e.status_code} body={e.message}")
            raise UpstreamError(f"Claude API error: {e.status_code}", status_code=e.status_code) from e
        except anthropic.APIError as e:
            # Connection errors and timeouts
            logger.error(f"Claude API transport error: {e}")
            raise UpstreamError(f"Claude API transport error: {e}") from e

        input_tokens, output_tokens = self._read_usage(message)

        for block in getattr(message, "content", None) or []:
            text = getattr(block, "text", None)
            if text is not None:
                return Completion(text, input_tokens, output_tokens)

        raise UpstreamError("Claude response contained no text")

    async def generate(self, prompt: str) -> str:
        """Send a prompt and return only the reply text."""
        completion = await self.complete(prompt)
        return completion.text
