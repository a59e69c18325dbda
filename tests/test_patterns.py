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

"""Tests for the built-in prompt patterns."""

from __future__ import annotations

from types import SimpleNamespace

import pytest

from farmllm.prompts import (
    PromptPatterns,
    TemplateValidationError,
    compile_template,
    format_examples,
)

EXAMPLES = [
    {"input": "Hello", "output": "Greeting"},
    {"input": "Goodbye", "output": "Farewell"},
]


class TestZeroShot:
    def test_structure(self):
        tmpl = PromptPatterns.zero_shot("Classify this text")
        assert tmpl.system_message
        assert tmpl.variable_names == ["task"]
        assert tmpl.variables[0].required is True

    def test_compile_with_binding(self):
        tmpl = PromptPatterns.zero_shot("Classify this text")
        result = compile_template(tmpl, {"task": "Classify this text"})
        assert result == "Complete the following task: Classify this text"

    def test_compile_with_defaults_only(self):
        tmpl = PromptPatterns.zero_shot("Classify this text")
        assert compile_template(tmpl, {}) == "Complete the following task: Classify this text"

    def test_binding_overrides_argument(self):
        tmpl = PromptPatterns.zero_shot("original")
        assert compile_template(tmpl, {"task": "other"}).endswith(": other")


class TestFewShot:
    def test_structure(self):
        tmpl = PromptPatterns.few_shot("Classify: Hi", EXAMPLES)
        assert tmpl.system_message
        assert tmpl.variable_names == ["examples", "task"]

    def test_compile_with_examples(self):
        tmpl = PromptPatterns.few_shot("Classify: Hi", EXAMPLES)
        result = compile_template(
            tmpl, {"task": "Classify: Hi", "examples": format_examples(EXAMPLES)},
        )
        assert "Here are some examples:" in result
        assert "Input: Hello\nOutput: Greeting" in result
        assert "Input: Goodbye\nOutput: Farewell" in result
        assert "Now complete the following task: Classify: Hi" in result

    def test_compile_with_defaults_only(self):
        tmpl = PromptPatterns.few_shot("Classify: Hi", EXAMPLES)
        assert compile_template(tmpl, {}) == (
            "Here are some examples:\n"
            "Input: Hello\nOutput: Greeting\n"
            "\n"
            "Input: Goodbye\nOutput: Farewell\n"
            "\n"
            "Now complete the following task: Classify: Hi"
        )

    def test_format_examples_accepts_objects(self):
        examples = [SimpleNamespace(input="a", output="b")]
        assert format_examples(examples) == "Input: a\nOutput: b"

    def test_no_examples_requires_binding(self):
        tmpl = PromptPatterns.few_shot("task", [])
        with pytest.raises(TemplateValidationError) as exc_info:
            compile_template(tmpl, {})
        assert exc_info.value.variables == ["examples"]


class TestChainOfThought:
    def test_structure(self):
        tmpl = PromptPatterns.chain_of_thought("Solve: 2 + 2")
        assert tmpl.system_message
        assert tmpl.variable_names == ["task", "steps", "answer"]

    def test_compile(self):
        tmpl = PromptPatterns.chain_of_thought("Solve: 2 + 2")
        result = compile_template(
            tmpl,
            {
                "task": "Solve: 2 + 2",
                "steps": "Let me break this down:\n1. We have two numbers: 2 and 2",
                "answer": "4",
            },
        )
        assert "Let's solve this step by step:" in result
        assert "First, understand the task: Solve: 2 + 2" in result
        assert "Let me break this down:" in result
        assert "Therefore, the final answer is: 4" in result

    def test_steps_and_answer_required(self):
        tmpl = PromptPatterns.chain_of_thought("Solve: 2 + 2")
        with pytest.raises(TemplateValidationError) as exc_info:
            compile_template(tmpl, {})
        assert exc_info.value.variables == ["steps", "answer"]
