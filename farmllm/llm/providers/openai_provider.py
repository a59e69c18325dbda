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

"""OpenAI provider — GPT models via the OpenAI API."""

from __future__ import annotations

from farmllm.env import get_env_var
from farmllm.llm.config import DEFAULT_OPENAI_MODEL, OpenAIConfig
from farmllm.llm.providers.openai_compat import OpenAICompatibleProvider


class OpenAIProvider(OpenAICompatibleProvider):
    """OpenAI GPT models."""

    PROVIDER_NAME = "openai"
    DISPLAY_NAME = "OpenAI"

    API_KEY_ENV_VAR = "OPENAI_API_KEY"
    DEFAULT_BASE_URL = "https://api.openai.com/v1"
    DEFAULT_MODEL = DEFAULT_OPENAI_MODEL

    def __init__(
        self,
        api_key: str | None = None,
        base_url: str | None = None,
        organization: str | None = None,
    ) -> None:
        super().__init__(
            api_key=api_key,
            base_url=base_url or get_env_var("OPENAI_BASE_URL"),
            organization=organization or get_env_var("OPENAI_ORG_ID"),
        )

    @classmethod
    def from_config(cls, config: OpenAIConfig) -> OpenAIProvider:
        return cls(
            api_key=config.api_key,
            base_url=config.base_url,
            organization=config.organization,
        )
