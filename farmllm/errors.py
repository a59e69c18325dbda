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

"""Exception hierarchy shared by the prompt engine and the LLM layer.

Everything derives from :class:`LLMError` so callers can catch the whole
family at once.  Provider-level errors are raised by the LLM providers
when translating SDK exceptions; template errors are raised by
:mod:`farmllm.prompts`.
"""

from __future__ import annotations


class LLMError(Exception):
    """Base class for all farmllm errors."""


class ConfigurationError(LLMError, ValueError):
    """Provider configuration is missing or invalid."""


class AuthenticationError(LLMError):
    """The provider rejected the supplied credentials."""


class RateLimitError(LLMError):
    """The provider's rate limit was exceeded."""


class RequestTimeoutError(LLMError):
    """A request to the provider timed out."""


class APIError(LLMError):
    """Any other failure reported by the provider API."""


class ValidationError(LLMError):
    """Input failed validation before any request was made."""


class TemplateValidationError(ValidationError):
    """Required template variables were neither bound nor defaulted.

    Attributes:
        variables: Names of the missing variables, in declaration order.
    """

    def __init__(self, message: str, variables: list[str]) -> None:
        super().__init__(message)
        self.variables = list(variables)


class VariableSchemaError(ValidationError):
    """A template variable declaration is malformed.

    Attributes:
        field: The declaration key that failed the check.
    """

    def __init__(self, message: str, field: str) -> None:
        super().__init__(message)
        self.field = field
