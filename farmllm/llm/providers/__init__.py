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

"""LLM provider registry.

Providers are registered by name and instantiated on request.  New
providers can be added at runtime via :func:`register_provider`.
"""

from __future__ import annotations

from typing import Type

from farmllm.errors import ConfigurationError
from farmllm.llm.providers.base import BaseProvider
from farmllm.llm.providers.openai_compat import OpenAICompatibleProvider
from farmllm.llm.providers.openai_provider import OpenAIProvider

__all__ = [
    "BaseProvider",
    "OpenAICompatibleProvider",
    "OpenAIProvider",
    "get_provider",
    "list_providers",
    "register_provider",
]

# Registry: provider name → class
_REGISTRY: dict[str, Type[BaseProvider]] = {
    OpenAIProvider.PROVIDER_NAME: OpenAIProvider,
}


def register_provider(name: str, cls: Type[BaseProvider]) -> None:
    """Register a provider class under *name*."""
    _REGISTRY[name] = cls


def list_providers() -> list[str]:
    """Return names of all registered providers."""
    return list(_REGISTRY.keys())


def get_provider(name: str, **kwargs: object) -> BaseProvider:
    """Instantiate and return a provider by name.

    Raises :class:`~farmllm.errors.ConfigurationError` if *name* is not
    registered.
    """
    cls = _REGISTRY.get(name)
    if cls is None:
        raise ConfigurationError(
            f"Unknown provider {name!r}. Available: {list(_REGISTRY.keys())}"
        )
    return cls(**kwargs)
