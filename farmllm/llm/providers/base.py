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

"""Abstract base class for LLM providers.

A provider turns a list of :class:`~farmllm.llm.data_types.LLMMessage`
into a completion.  Concrete providers wrap a vendor SDK and translate
its exceptions into :mod:`farmllm.errors` types.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterator
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from farmllm.llm.data_types import LLMMessage, LLMResponse


class BaseProvider(ABC):
    """Abstract base class for LLM providers.

    Class attributes to override:
        PROVIDER_NAME – short identifier (e.g. ``"openai"``).
        DISPLAY_NAME  – human-readable label.
    """

    PROVIDER_NAME: str
    DISPLAY_NAME: str

    def __init__(
        self,
        api_key: str | None = None,
        base_url: str | None = None,
    ) -> None:
        self._api_key = api_key
        self._base_url = base_url or self.default_base_url
        self._client: object = None

    @property
    @abstractmethod
    def requires_api_key(self) -> bool: ...

    @property
    @abstractmethod
    def default_base_url(self) -> str: ...

    @property
    @abstractmethod
    def default_model(self) -> str: ...

    @abstractmethod
    def chat(
        self,
        messages: list[LLMMessage],
        model: str | None = None,
        temperature: float = 0.7,
        max_tokens: int = 1000,
        **kwargs: object,
    ) -> LLMResponse: ...

    @abstractmethod
    def stream_chat(
        self,
        messages: list[LLMMessage],
        model: str | None = None,
        temperature: float = 0.7,
        max_tokens: int = 1000,
        **kwargs: object,
    ) -> Iterator[str]: ...

    @abstractmethod
    def test_connection(self) -> tuple[bool, str]: ...
