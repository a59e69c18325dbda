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

"""OpenAI request configuration.

Explicit keyword arguments win over environment variables, which win
over the defaults below.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace

from farmllm.env import get_env_var
from farmllm.errors import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_OPENAI_MODEL = "gpt-4"
DEFAULT_TEMPERATURE = 0.7
DEFAULT_MAX_TOKENS = 1000

TEMPERATURE_RANGE = (0.0, 1.0)
MAX_TOKENS_RANGE = (1, 100_000)


@dataclass(frozen=True)
class OpenAIConfig:
    """Settings for an OpenAI chat completion request.

    Attributes:
        api_key: OpenAI API key.
        model: Chat model name.
        temperature: Sampling temperature, 0 to 1.
        max_tokens: Completion budget, 1 to 100000.
        organization: Optional OpenAI organisation ID.
        base_url: Optional API base URL (OpenAI-compatible servers).
    """

    api_key: str | None = None
    model: str = DEFAULT_OPENAI_MODEL
    temperature: float = DEFAULT_TEMPERATURE
    max_tokens: int = DEFAULT_MAX_TOKENS
    organization: str | None = None
    base_url: str | None = None
    provider: str = "openai"

    def with_overrides(self, **overrides: object) -> OpenAIConfig:
        """Return a copy with the non-``None`` *overrides* applied."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **changes) if changes else self


def validate_generation_params(temperature: float, max_tokens: int) -> None:
    """Raise :class:`ConfigurationError` if either parameter is out of range."""
    lo, hi = TEMPERATURE_RANGE
    if not lo <= temperature <= hi:
        raise ConfigurationError(f"Temperature must be between {lo:g} and {hi:g}")

    lo, hi = MAX_TOKENS_RANGE
    if not lo <= max_tokens <= hi:
        raise ConfigurationError(f"Max tokens must be between {lo} and {hi}")


def validate_openai_config(config: OpenAIConfig) -> OpenAIConfig:
    """Check ranges and credentials; return *config* unchanged."""
    if not config.api_key:
        raise ConfigurationError(
            "OpenAI API key is required (pass api_key or set OPENAI_API_KEY)"
        )
    if not config.model:
        raise ConfigurationError("Model name must not be empty")
    validate_generation_params(config.temperature, config.max_tokens)
    return config


def initialize_openai_config(
    api_key: str | None = None,
    model: str | None = None,
    temperature: float | None = None,
    max_tokens: int | None = None,
    organization: str | None = None,
    base_url: str | None = None,
) -> OpenAIConfig:
    """Build a validated :class:`OpenAIConfig` from arguments and environment.

    Raises :class:`~farmllm.errors.ConfigurationError` if no API key can
    be found or a generation parameter is out of range.
    """
    config = OpenAIConfig(
        api_key=api_key or get_env_var("OPENAI_API_KEY") or get_env_var("LLM_API_KEY"),
        model=model or get_env_var("LLM_MODEL", DEFAULT_OPENAI_MODEL),
        temperature=DEFAULT_TEMPERATURE if temperature is None else temperature,
        max_tokens=DEFAULT_MAX_TOKENS if max_tokens is None else max_tokens,
        organization=organization or get_env_var("OPENAI_ORG_ID"),
        base_url=base_url or get_env_var("OPENAI_BASE_URL"),
    )
    logger.debug(
        "OpenAI config: model=%s, temperature=%s, max_tokens=%s",
        config.model, config.temperature, config.max_tokens,
    )
    return validate_openai_config(config)
