# farmllm — prompt templating and LLM client helpers
# Copyright (C) 2024-2026 Dr Horst Herb
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU Affero General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU Affero General Public License for more details.
#
# You should have received a copy of the GNU Affero General Public License
# along with this program.  If not, see <https://www.gnu.org/licenses/>.

"""Base class for providers that expose an OpenAI-compatible chat API.

Subclasses set class-level constants for provider metadata, base URL,
API key env var and default model.  The ``openai`` Python SDK handles
the HTTP calls; its exceptions are re-raised as :mod:`farmllm.errors`
types so callers never need to import the SDK.

Usage::

    class MyProvider(OpenAICompatibleProvider):
        PROVIDER_NAME = "myprovider"
        DISPLAY_NAME = "My Provider"
        API_KEY_ENV_VAR = "MY_API_KEY"
        DEFAULT_BASE_URL = "https://api.myprovider.ai/v1"
        DEFAULT_MODEL = "my-model"
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterator
from typing import Any

import openai

from farmllm.errors import (
    APIError,
    AuthenticationError,
    LLMError,
    RateLimitError,
    RequestTimeoutError,
)
from farmllm.llm.data_types import LLMMessage, LLMResponse
from farmllm.llm.providers.base import BaseProvider

logger = logging.getLogger(__name__)


def _translate_error(exc: openai.OpenAIError) -> LLMError:
    # APITimeoutError subclasses APIConnectionError, so check it first
    if isinstance(exc, openai.APITimeoutError):
        return RequestTimeoutError(str(exc))
    if isinstance(exc, (openai.AuthenticationError, openai.PermissionDeniedError)):
        return AuthenticationError(str(exc))
    if isinstance(exc, openai.RateLimitError):
        return RateLimitError(str(exc))
    return APIError(str(exc))


class OpenAICompatibleProvider(BaseProvider):
    """Base for providers that support the OpenAI chat completions API."""

    # --- Subclass MUST override these ---
    API_KEY_ENV_VAR: str = ""
    DEFAULT_BASE_URL: str = ""
    DEFAULT_MODEL: str = ""

    def __init__(
        self,
        api_key: str | None = None,
        base_url: str | None = None,
        organization: str | None = None,
    ) -> None:
        resolved_key = api_key or os.environ.get(self.API_KEY_ENV_VAR, "")
        resolved_url = base_url or self.DEFAULT_BASE_URL
        super().__init__(api_key=resolved_key or None, base_url=resolved_url)
        self._organization = organization

    # --- Properties ---

    @property
    def requires_api_key(self) -> bool:
        return True

    @property
    def api_key_env_var(self) -> str:
        return self.API_KEY_ENV_VAR

    @property
    def default_base_url(self) -> str:
        return self.DEFAULT_BASE_URL

    @property
    def default_model(self) -> str:
        return self.DEFAULT_MODEL

    # --- Client ---

    def _get_client(self) -> Any:
        if self._client is None:
            self._client = openai.OpenAI(
                api_key=self._api_key or "unused",
                base_url=self._base_url,
                organization=self._organization,
            )
        return self._client

    def _request_kwargs(
        self,
        messages: list[LLMMessage],
        model: str,
        temperature: float,
        max_tokens: int,
        top_p: float | None,
    ) -> dict[str, object]:
        request_kwargs: dict[str, object] = {
            "model": model,
            "messages": [msg.to_dict() for msg in messages],
            "max_tokens": max_tokens,
            "temperature": temperature,
        }
        if top_p is not None:
            request_kwargs["top_p"] = top_p
        return request_kwargs

    # --- Chat ---

    def chat(
        self,
        messages: list[LLMMessage],
        model: str | None = None,
        temperature: float = 0.7,
        max_tokens: int = 1000,
        **kwargs: object,
    ) -> LLMResponse:
        model = model or self.default_model
        client = self._get_client()
        top_p: float | None = kwargs.get("top_p")  # type: ignore[assignment]

        try:
            response = client.chat.completions.create(
                **self._request_kwargs(messages, model, temperature, max_tokens, top_p)
            )
        except openai.OpenAIError as e:
            raise _translate_error(e) from e

        if not response.choices:
            raise APIError(f"{self.DISPLAY_NAME} returned no choices")
        choice = response.choices[0]

        return LLMResponse(
            content=choice.message.content or "",
            model=getattr(response, "model", None) or model,
            input_tokens=response.usage.prompt_tokens if response.usage else 0,
            output_tokens=response.usage.completion_tokens if response.usage else 0,
            stop_reason=choice.finish_reason,
        )

    def stream_chat(
        self,
        messages: list[LLMMessage],
        model: str | None = None,
        temperature: float = 0.7,
        max_tokens: int = 1000,
        **kwargs: object,
    ) -> Iterator[str]:
        """Yield content deltas as they arrive; empty deltas are skipped."""
        model = model or self.default_model
        client = self._get_client()
        top_p: float | None = kwargs.get("top_p")  # type: ignore[assignment]

        try:
            stream = client.chat.completions.create(
                stream=True,
                **self._request_kwargs(messages, model, temperature, max_tokens, top_p),
            )
            for chunk in stream:
                if not chunk.choices:
                    continue
                content = chunk.choices[0].delta.content
                if content:
                    yield content
        except openai.OpenAIError as e:
            raise _translate_error(e) from e

    # --- Connection test ---

    def test_connection(self) -> tuple[bool, str]:
        try:
            client = self._get_client()
            result = client.models.list()
            data = result.data if hasattr(result, "data") else []
            return True, f"Connected. {len(data)} models available."
        except Exception as e:
            logger.warning("Connection test for %s failed: %s", self.DISPLAY_NAME, e)
            return False, f"Connection failed: {e}"
