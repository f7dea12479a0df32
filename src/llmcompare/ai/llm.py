"""LLM interaction and streaming management.

This module wraps the OpenAI client used for the comparison request and
exposes the streamed response as a lazy sequence of text deltas.
"""

import logging
import sys
from typing import Any, Dict, Iterator, Optional, TextIO

from openai import OpenAI

from ..core.exceptions import (
    InitializationError,
    NotInitializedError,
    StreamInterruptedError,
    StreamSetupError,
)
from ..core.models import Conversation

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "gpt-4o-mini"


class LLMClient:
    """Manages the provider connection and streaming chat completions."""

    def __init__(self, client: Optional[Any] = None):
        """Create a client handle.

        Args:
            client: Optional pre-built OpenAI-compatible client. It is kept
                by ``initialize``; when omitted, one is built from the API key.
        """
        self.client = client

    @property
    def is_initialized(self) -> bool:
        return self.client is not None

    def initialize(self, api_key: Optional[str]) -> "LLMClient":
        """Bind the handle to an OpenAI connection for ``api_key``.

        Only emptiness is checked here; the provider validates the key on
        first use. A client passed to the constructor is kept as is.

        Raises:
            InitializationError: if the key is empty or missing.
        """
        if not api_key:
            raise InitializationError("Failed to initiate OpenAI Client")
        if self.client is None:
            self.client = OpenAI(api_key=api_key)
        return self

    def create_completion(self, conversation: Conversation, model: str = DEFAULT_MODEL,
                          temperature: Optional[float] = None) -> Any:
        """Open a streaming chat completion.

        Raises:
            NotInitializedError: if ``initialize`` has not succeeded.
            StreamSetupError: if the provider rejects the request.
        """
        if not self.is_initialized:
            raise NotInitializedError("OpenAI not initialized")

        params: Dict[str, Any] = {
            "messages": conversation.to_openai_messages(),
            "model": model,
            "stream": True,
        }
        if temperature is not None:
            params["temperature"] = temperature

        try:
            return self.client.chat.completions.create(**params)
        except Exception as e:
            logger.error(f"Streaming request failed: {e}")
            raise StreamSetupError("Error in stream") from e

    def stream_deltas(self, conversation: Conversation, model: str = DEFAULT_MODEL,
                      temperature: Optional[float] = None) -> Iterator[str]:
        """Yield non-empty content deltas of the first choice, in arrival order.

        Raises:
            StreamSetupError: if the request cannot be opened.
            StreamInterruptedError: if reading the opened stream fails.
        """
        stream = self.create_completion(conversation, model, temperature)
        try:
            for chunk in stream:
                if not chunk.choices:
                    continue
                delta = chunk.choices[0].delta
                content = getattr(delta, "content", None) if delta is not None else None
                if content:
                    yield content
        except Exception as e:
            logger.error(f"Stream interrupted: {e}")
            raise StreamInterruptedError("Error in stream") from e

    def send_with_stream(self, conversation: Conversation, model: str = DEFAULT_MODEL,
                         temperature: Optional[float] = None,
                         out: Optional[TextIO] = None) -> str:
        """Stream a completion to ``out`` and return the full text.

        Args:
            conversation: Messages to send
            model: Model name
            temperature: Sampling temperature; omitted from the request when None
            out: Stream deltas are written to (defaults to stdout)

        Returns:
            The concatenation of every delta
        """
        if out is None:
            out = sys.stdout
        message = ""
        for delta in self.stream_deltas(conversation, model, temperature):
            out.write(delta)
            out.flush()
            message += delta
        return message
