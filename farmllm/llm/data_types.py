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

"""Request and response types for chat completion calls."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

Role = Literal["system", "user", "assistant"]


@dataclass
class LLMMessage:
    """A role-tagged message in a chat request."""

    role: Role
    content: str

    def to_dict(self) -> dict[str, str]:
        return {"role": self.role, "content": self.content}


@dataclass
class LLMResponse:
    """Result of a chat completion.

    Attributes:
        content: Generated text.
        model: Model that produced it.
        input_tokens: Prompt tokens consumed.
        output_tokens: Completion tokens generated.
        total_tokens: ``input_tokens + output_tokens`` unless given.
        stop_reason: Provider's finish reason, if reported.
    """

    content: str
    model: str = ""
    input_tokens: int = 0
    output_tokens: int = 0
    total_tokens: int = 0
    stop_reason: str | None = None

    def __post_init__(self) -> None:
        if self.total_tokens == 0:
            self.total_tokens = self.input_tokens + self.output_tokens


def build_messages(prompt: str, system_message: str | None = None) -> list[LLMMessage]:
    """Return ``[system?, user]`` messages for a single-turn request."""
    messages: list[LLMMessage] = []
    if system_message:
        messages.append(LLMMessage(role="system", content=system_message))
    messages.append(LLMMessage(role="user", content=prompt))
    return messages
