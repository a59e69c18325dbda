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

"""Prompt templates with ``{{name}}`` placeholders.

Usage::

    from farmllm.prompts import PromptPatterns, compile_template, create_template

    tmpl = create_template(
        "Summarise {{topic}} in {{n}} bullet points.",
        [{"name": "topic"}, {"name": "n", "default_value": 3}],
        system_message="You are a concise technical writer.",
    )
    prompt = compile_template(tmpl, {"topic": "crop rotation"})

    cot = PromptPatterns.chain_of_thought("Solve: 2 + 2")
    prompt = compile_template(cot, {"steps": "...", "answer": "4"})
"""

from farmllm.errors import TemplateValidationError, VariableSchemaError
from farmllm.prompts.compiler import (
    compile_template,
    missing_variables,
    placeholders,
    validate_template,
)
from farmllm.prompts.models import (
    PromptTemplate,
    TemplateVariable,
    create_template,
    validate_variable,
)
from farmllm.prompts.patterns import PromptPatterns, format_examples

__all__ = [
    "PromptPatterns",
    "PromptTemplate",
    "TemplateValidationError",
    "TemplateVariable",
    "VariableSchemaError",
    "compile_template",
    "create_template",
    "format_examples",
    "missing_variables",
    "placeholders",
    "validate_template",
    "validate_variable",
]
