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

"""farmllm — prompt templates and a thin OpenAI chat wrapper.

The prompt engine lives in :mod:`farmllm.prompts`; sending prompts to a
model is handled by :mod:`farmllm.llm`.
"""

from farmllm.errors import (
    APIError,
    AuthenticationError,
    ConfigurationError,
    LLMError,
    RateLimitError,
    RequestTimeoutError,
    TemplateValidationError,
    ValidationError,
    VariableSchemaError,
)
from farmllm.prompts import (
    PromptPatterns,
    PromptTemplate,
    TemplateVariable,
    compile_template,
    create_template,
)

__version__ = "0.1.0"

__all__ = [
    "APIError",
    "AuthenticationError",
    "ConfigurationError",
    "LLMError",
    "PromptPatterns",
    "PromptTemplate",
    "RateLimitError",
    "RequestTimeoutError",
    "TemplateValidationError",
    "TemplateVariable",
    "ValidationError",
    "VariableSchemaError",
    "compile_template",
    "create_template",
]
