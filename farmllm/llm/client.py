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

"""Unified LLM client with provider routing.

Routes requests to the appropriate provider based on model strings of
the form ``"provider:model_name"`` (e.g. ``"openai:gpt-4o-mini"``).  A
bare model name goes to the default provider.

Usage::

    from farmllm.llm import LLMClient, LLMMessage

    client = LLMClient(openai_api_key="sk-...")
    resp = client.chat(
        messages=[LLMMessage(role="user", content="Name three cover crops.")],
        model="openai:gpt-4o-mini",
    )
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import Optional

from farmllm.env import get_env_var
from farmllm.llm.config import DEFAULT_MAX_TOKENS, DEFAULT_TEMPERATURE
from farmllm.llm.data_types import LLMMessage, LLMResponse
from farmllm.llm.providers import BaseProvider, get_provider, list_providers

logger = logging.getLogger(__name__)

DEFAULT_PROVIDER = "openai"


class LLMClient:
    """Unified LLM client that delegates to provider implementations.

    Provider instances are created on first use and reused afterwards.
    """

    def __init__(
        self,
        default_provider: Optional[str] = None,
        openai_api_key: Optional[str] = None,
        openai_base_url: Optional[str] = None,
        openai_organization: Optional[str] = None,
    ) -> None:
        self.default_provider = (
            default_provider or get_env_var("LLM_PROVIDER", DEFAULT_PROVIDER)
        )
        self._provider_config: dict[str, dict[str, object]] = {
            "openai": {
                "api_key": openai_api_key,
                "base_url": openai_base_url,
                "organization": openai_organization,
            },
        }
        self._providers: dict[str, BaseProvider] = {}

    def _get_provider(self, name: str) -> BaseProvider:
        if name not in self._providers:
            config = self._provider_config.get(name, {})
            self._providers[name] = get_provider(name, **config)
        return self._providers[name]

    def _parse_model_string(self, model: Optional[str]) -> tuple[str, str]:
        if model and ":" in model:
            provider, model_name = model.split(":", 1)
            return provider.lower(), model_name
        provider = self.default_provider
        model_name = model or self._get_provider(provider).default_model
        return provider, model_name

    def chat(
        self,
        messages: list[LLMMessage],
        model: Optional[str] = None,
        temperature: float = DEFAULT_TEMPERATURE,
        max_tokens: int = DEFAULT_MAX_TOKENS,
        **kwargs: object,
    ) -> LLMResponse:
        """Send a chat request, routing to the appropriate provider.

        Extra *kwargs* (e.g. ``top_p``) are forwarded to the provider.
        """
        provider_name, model_name = self._parse_model_string(model)
        logger.debug("Chat request: provider=%s, model=%s", provider_name, model_name)

        provider = self._get_provider(provider_name)
        response = provider.chat(
            messages=messages,
            model=model_name,
            temperature=temperature,
            max_tokens=max_tokens,
            **kwargs,
        )
        logger.debug(
            "Chat response: model=%s, in=%d, out=%d, stop=%s",
            response.model, response.input_tokens, response.output_tokens,
            response.stop_reason,
        )
        return response

    def stream_chat(
        self,
        messages: list[LLMMessage],
        model: Optional[str] = None,
        temperature: float = DEFAULT_TEMPERATURE,
        max_tokens: int = DEFAULT_MAX_TOKENS,
        **kwargs: object,
    ) -> Iterator[str]:
        """Stream a chat response as text chunks."""
        provider_name, model_name = self._parse_model_string(model)
        logger.debug("Stream request: provider=%s, model=%s", provider_name, model_name)

        provider = self._get_provider(provider_name)
        return provider.stream_chat(
            messages=messages,
            model=model_name,
            temperature=temperature,
            max_tokens=max_tokens,
            **kwargs,
        )

    def test_connection(self, provider: Optional[str] = None) -> dict[str, tuple[bool, str]]:
        """Test connectivity to one or all registered providers."""
        names = [provider] if provider else list_providers()
        results: dict[str, tuple[bool, str]] = {}
        for name in names:
            try:
                results[name] = self._get_provider(name).test_connection()
            except Exception as e:
                results[name] = (False, str(e))
        return results
