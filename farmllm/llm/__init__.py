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

"""LLM abstraction layer — sends compiled prompts to a chat model.

Usage::

    from farmllm.llm import LLMClient, LLMMessage

    client = LLMClient()
    response = client.chat(
        messages=[LLMMessage(role="user", content="Hello")],
        model="openai:gpt-4o-mini",
    )
"""

from farmllm.llm.client import LLMClient
from farmllm.llm.config import OpenAIConfig, initialize_openai_config
from farmllm.llm.data_types import LLMMessage, LLMResponse, build_messages
from farmllm.llm.generation import (
    generate_from_template,
    generate_text,
    stream_from_template,
    stream_text,
)

__all__ = [
    "LLMClient",
    "LLMMessage",
    "LLMResponse",
    "OpenAIConfig",
    "build_messages",
    "generate_from_template",
    "generate_text",
    "initialize_openai_config",
    "stream_from_template",
    "stream_text",
]
