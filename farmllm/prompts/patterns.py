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

"""Ready-made prompt templates for common prompting strategies."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from farmllm.prompts.models import PromptTemplate, TemplateVariable

ZERO_SHOT_SYSTEM_MESSAGE = (
    "You are a helpful assistant that completes tasks accurately."
)
FEW_SHOT_SYSTEM_MESSAGE = "You are a helpful assistant that learns from examples."
CHAIN_OF_THOUGHT_SYSTEM_MESSAGE = (
    "You are a helpful assistant that explains your reasoning step by step."
)


def _example_field(example: Any, key: str) -> Any:
    if isinstance(example, Mapping):
        return example[key]
    return getattr(example, key)


def format_examples(examples: Iterable[Any]) -> str:
    """Render examples as ``Input: ...\\nOutput: ...`` blocks separated by a blank line.

    Each example is a mapping or object with ``input`` and ``output``.
    """
    return "\n\n".join(
        f"Input: {_example_field(e, 'input')}\nOutput: {_example_field(e, 'output')}"
        for e in examples
    )


class PromptPatterns:
    """Factories for zero-shot, few-shot and chain-of-thought templates.

    The caller's arguments become variable defaults, so the returned
    template compiles with empty bindings and can still be overridden.
    """

    @staticmethod
    def zero_shot(task: str) -> PromptTemplate:
        return PromptTemplate(
            template="Complete the following task: {{task}}",
            variables=(
                TemplateVariable(
                    name="task",
                    description="Task to complete",
                    default_value=task,
                ),
            ),
            system_message=ZERO_SHOT_SYSTEM_MESSAGE,
        )

    @staticmethod
    def few_shot(task: str, examples: Iterable[Any]) -> PromptTemplate:
        return PromptTemplate(
            template=(
                "Here are some examples:\n"
                "{{examples}}\n"
                "\n"
                "Now complete the following task: {{task}}"
            ),
            variables=(
                TemplateVariable(
                    name="examples",
                    description="Examples formatted as input -> output pairs",
                    default_value=format_examples(examples),
                ),
                TemplateVariable(
                    name="task",
                    description="Task to complete",
                    default_value=task,
                ),
            ),
            system_message=FEW_SHOT_SYSTEM_MESSAGE,
        )

    @staticmethod
    def chain_of_thought(task: str) -> PromptTemplate:
        # steps and answer have no default; callers must bind both
        return PromptTemplate(
            template=(
                "Let's solve this step by step:\n"
                "1. First, understand the task: {{task}}\n"
                "2. {{steps}}\n"
                "3. Therefore, the final answer is: {{answer}}"
            ),
            variables=(
                TemplateVariable(
                    name="task",
                    description="Task to solve",
                    default_value=task,
                ),
                TemplateVariable(
                    name="steps",
                    description="Step-by-step reasoning process",
                ),
                TemplateVariable(
                    name="answer",
                    description="Final answer based on reasoning",
                ),
            ),
            system_message=CHAIN_OF_THOUGHT_SYSTEM_MESSAGE,
        )
