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

"""Environment variables read by the LLM layer.

``OPENAI_API_KEY``, ``OPENAI_ORG_ID`` and ``OPENAI_BASE_URL`` configure
the OpenAI provider; ``LLM_PROVIDER``, ``LLM_API_KEY`` and ``LLM_MODEL``
are provider-neutral fallbacks.  An empty value counts as unset.
"""

from __future__ import annotations

import os

from farmllm.errors import ConfigurationError


def get_env_var(name: str, default: str | None = None) -> str | None:
    """Return the value of *name*, or *default* when unset or empty."""
    return os.environ.get(name) or default


def has_env_var(name: str) -> bool:
    return bool(os.environ.get(name))


def require_env_var(name: str, message: str | None = None) -> str:
    """Return the value of *name* or raise :class:`ConfigurationError`."""
    value = os.environ.get(name)
    if not value:
        raise ConfigurationError(
            message or f"Required environment variable {name} is not set"
        )
    return value
