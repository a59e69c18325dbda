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

"""Single-turn text generation on top of :class:`LLMClient`.

These helpers pair a prompt (plain or compiled from a
:class:`~farmllm.prompts.PromptTemplate`) with an optional system
message and send it as ``[system?, user]``.

Usage::

    from farmllm.llm import generate_from_template
    from farmllm.prompts import PromptPatterns

    tmpl = PromptPatterns.zero_shot("List three soil nutrients")
    response = generate_from_template(tmpl, {})
    print(response.content)
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from typing import Any

from farmllm.env import get_env_var
from farmllm.llm.client import LLMClient
from farmllm.llm.config import (
    DEFAULT_OPENAI_MODEL,
    OpenAIConfig,
    initialize_openai_config,
    validate_generation_params,
)
from farmllm.llm.data_types import LLMResponse, build_messages
from farmllm.prompts import PromptTemplate, compile_template

logger = logging.getLogger(__name__)


def _resolve(
    config: OpenAIConfig | None, client: LLMClient | None,
) -> tuple[OpenAIConfig, LLMClient]:
    if client is None:
        # a client is built from config, so config must carry credentials
        config = config or initialize_openai_config()
        client = LLMClient(
            default_provider=config.provider,
            openai_api_key=config.api_key,
            openai_base_url=config.base_url,
            openai_organization=config.organization,
        )
    elif config is None:
        config = OpenAIConfig(model=get_env_var("LLM_MODEL", DEFAULT_OPENAI_MODEL))
    return config, client


def generate_text(
    prompt: str,
    *,
    system_message: str | None = None,
    config: OpenAIConfig | None = None,
    client: LLMClient | None = None,
) -> LLMResponse:
    """Send *prompt* (and *system_message*, if any) and return the response.

    Without *client*, one is built from *config*, which defaults to
    :func:`~farmllm.llm.config.initialize_openai_config` and therefore
    needs an API key in the environment.
    """
    config, client = _resolve(config, client)
    validate_generation_params(config.temperature, config.max_tokens)
    return client.chat(
        build_messages(prompt, system_message),
        model=f"{config.provider}:{config.model}",
        temperature=config.temperature,
        max_tokens=config.max_tokens,
    )


def stream_text(
    prompt: str,
    *,
    system_message: str | None = None,
    config: OpenAIConfig | None = None,
    client: LLMClient | None = None,
) -> Iterator[str]:
    """Like :func:`generate_text` but yields the response in chunks."""
    config, client = _resolve(config, client)
    validate_generation_params(config.temperature, config.max_tokens)
    return client.stream_chat(
        build_messages(prompt, system_message),
        model=f"{config.provider}:{config.model}",
        temperature=config.temperature,
        max_tokens=config.max_tokens,
    )


def _template_config(
    template: PromptTemplate, config: OpenAIConfig | None, client: LLMClient | None,
) -> tuple[OpenAIConfig, LLMClient]:
    config, client = _resolve(config, client)
    return config.with_overrides(
        temperature=template.temperature,
        max_tokens=template.max_tokens,
    ), client


def generate_from_template(
    template: PromptTemplate,
    bindings: Mapping[str, Any] | None = None,
    *,
    config: OpenAIConfig | None = None,
    client: LLMClient | None = None,
    strict: bool = False,
) -> LLMResponse:
    """Compile *template* with *bindings* and send it.

    The template's ``system_message`` is sent as the system prompt, and
    its ``temperature``/``max_tokens`` take precedence over *config*.

    Raises:
        TemplateValidationError: A required variable is missing; nothing
            is sent in that case.
    """
    prompt = compile_template(template, bindings, strict=strict)
    config, client = _template_config(template, config, client)
    logger.debug("Sending compiled template (%d chars)", len(prompt))
    return generate_text(
        prompt,
        system_message=template.system_message,
        config=config,
        client=client,
    )


def stream_from_template(
    template: PromptTemplate,
    bindings: Mapping[str, Any] | None = None,
    *,
    config: OpenAIConfig | None = None,
    client: LLMClient | None = None,
    strict: bool = False,
) -> Iterator[str]:
    """Streaming counterpart of :func:`generate_from_template`."""
    prompt = compile_template(template, bindings, strict=strict)
    config, client = _template_config(template, config, client)
    return stream_text(
        prompt,
        system_message=template.system_message,
        config=config,
        client=client,
    )
