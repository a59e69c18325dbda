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

"""Tests for farmllm.prompts models, validation and compilation."""

from __future__ import annotations

import dataclasses

import pytest

from farmllm.errors import ValidationError
from farmllm.prompts import (
    PromptTemplate,
    TemplateValidationError,
    TemplateVariable,
    VariableSchemaError,
    compile_template,
    create_template,
    missing_variables,
    placeholders,
    validate_template,
    validate_variable,
)


def _hello(**var_kwargs) -> PromptTemplate:
    return PromptTemplate(
        template="Hello {{name}}!",
        variables=[TemplateVariable(name="name", **var_kwargs)],
    )


class TestValidation:
    def test_missing_required_raises(self):
        with pytest.raises(TemplateValidationError) as exc_info:
            compile_template(_hello(), {})
        assert exc_info.value.variables == ["name"]
        assert exc_info.value.args[0] == "Missing required variables"

    def test_bound_value_compiles(self):
        assert compile_template(_hello(), {"name": "World"}) == "Hello World!"

    def test_default_value_used(self):
        assert compile_template(_hello(default_value="World"), {}) == "Hello World!"

    def test_binding_overrides_default(self):
        tmpl = _hello(default_value="World")
        assert compile_template(tmpl, {"name": "Alice"}) == "Hello Alice!"

    def test_none_bindings_treated_as_empty(self):
        assert compile_template(_hello(default_value="World"), None) == "Hello World!"

    def test_missing_names_in_declaration_order(self):
        tmpl = PromptTemplate(
            template="{{a}} {{b}} {{c}}",
            variables=[
                TemplateVariable(name="c"),
                TemplateVariable(name="a"),
                TemplateVariable(name="b", default_value="x"),
            ],
        )
        with pytest.raises(TemplateValidationError) as exc_info:
            compile_template(tmpl, {})
        assert exc_info.value.variables == ["c", "a"]

    def test_optional_variable_not_reported(self):
        tmpl = _hello(required=False)
        assert missing_variables(tmpl, {}) == []
        # unresolved optional placeholder stays literal
        assert compile_template(tmpl, {}) == "Hello {{name}}!"

    def test_validate_template_does_not_raise_when_satisfied(self):
        validate_template(_hello(), {"name": "x"})

    def test_is_a_validation_error(self):
        with pytest.raises(ValidationError):
            compile_template(_hello(), {})


class TestFalsyBindings:
    @pytest.mark.parametrize("value", ["", 0, False])
    def test_loose_mode_treats_falsy_as_missing(self, value):
        with pytest.raises(TemplateValidationError):
            compile_template(_hello(), {"name": value})

    @pytest.mark.parametrize("value, rendered", [("", ""), (0, "0"), (False, "False")])
    def test_strict_mode_accepts_falsy(self, value, rendered):
        result = compile_template(_hello(), {"name": value}, strict=True)
        assert result == f"Hello {rendered}!"

    def test_falsy_binding_with_default_uses_binding(self):
        # validation passes thanks to the default, but the bound value wins
        assert compile_template(_hello(default_value="World"), {"name": ""}) == "Hello !"

    def test_falsy_default_counts_as_no_default_in_loose_mode(self):
        tmpl = _hello(default_value="")
        assert missing_variables(tmpl, {}) == ["name"]
        assert missing_variables(tmpl, {}, strict=True) == []

    def test_strict_mode_still_requires_a_value(self):
        assert missing_variables(_hello(), {"name": None}, strict=True) == ["name"]


class TestCompilation:
    def test_duplicate_name_first_declaration_wins(self):
        tmpl = create_template("{{x}}", [
            {"name": "x", "default_value": "first"},
            {"name": "x", "default_value": "second"},
        ])
        assert compile_template(tmpl, {}) == "first"

    def test_replaces_all_variables(self):
        tmpl = PromptTemplate(
            template="{{greeting}} {{name}}! How is the {{time}}?",
            variables=[
                TemplateVariable(name="greeting"),
                TemplateVariable(name="name"),
                TemplateVariable(name="time"),
            ],
        )
        result = compile_template(
            tmpl, {"greeting": "Hello", "name": "World", "time": "morning"},
        )
        assert result == "Hello World! How is the morning?"

    def test_repeated_placeholders(self):
        tmpl = PromptTemplate(
            template="{{name}}, {{name}}! Your name is {{name}}.",
            variables=[TemplateVariable(name="name")],
        )
        first = compile_template(tmpl, {"name": "Alice"})
        assert first == "Alice, Alice! Your name is Alice."
        assert compile_template(tmpl, {"name": "Alice"}) == first

    def test_undeclared_placeholder_left_literal(self):
        tmpl = PromptTemplate(
            template="{{known}} and {{unknown}}",
            variables=[TemplateVariable(name="known")],
        )
        assert compile_template(tmpl, {"known": "a", "unknown": "b"}) == "a and {{unknown}}"

    def test_values_are_stringified(self):
        tmpl = PromptTemplate(
            template="n={{n}} x={{x}}",
            variables=[TemplateVariable(name="n"), TemplateVariable(name="x")],
        )
        assert compile_template(tmpl, {"n": 3, "x": 1.5}) == "n=3 x=1.5"

    def test_regex_characters_in_name_and_value(self):
        tmpl = PromptTemplate(
            template="cost: {{a.b}}",
            variables=[TemplateVariable(name="a.b")],
        )
        assert compile_template(tmpl, {"a.b": r"$1 \d+"}) == r"cost: $1 \d+"

    def test_spaced_placeholder_is_not_matched(self):
        tmpl = PromptTemplate(
            template="{{ name }}",
            variables=[TemplateVariable(name="name")],
        )
        assert compile_template(tmpl, {"name": "x"}) == "{{ name }}"

    def test_no_declared_placeholders_remain(self):
        tmpl = create_template(
            "{{a}}-{{b}}-{{a}}",
            [{"name": "a"}, {"name": "b", "default_value": "B"}],
        )
        result = compile_template(tmpl, {"a": "A"})
        for name in tmpl.variable_names:
            assert "{{" + name + "}}" not in result

    def test_template_is_not_mutated(self):
        tmpl = _hello()
        compile_template(tmpl, {"name": "World"})
        assert tmpl.template == "Hello {{name}}!"


class TestModels:
    def test_variables_stored_as_tuple(self):
        tmpl = _hello()
        assert isinstance(tmpl.variables, tuple)

    def test_frozen(self):
        tmpl = _hello()
        with pytest.raises(dataclasses.FrozenInstanceError):
            tmpl.template = "changed"  # type: ignore[misc]

    def test_structural_equality(self):
        assert _hello(default_value="x") == _hello(default_value="x")

    def test_variable_defaults(self):
        var = TemplateVariable(name="x")
        assert var.required is True
        assert var.default_value is None
        assert var.description is None


class TestValidateVariable:
    def test_mapping_defaults(self):
        var = validate_variable({"name": "topic"})
        assert var == TemplateVariable(name="topic", required=True)

    def test_camel_case_default_alias(self):
        var = validate_variable({"name": "object", "defaultValue": "fence"})
        assert var.default_value == "fence"

    def test_unknown_keys_ignored(self):
        var = validate_variable({"name": "x", "colour": "blue"})
        assert var.name == "x"

    def test_non_string_name(self):
        with pytest.raises(VariableSchemaError) as exc_info:
            validate_variable({"name": 123, "required": True})
        assert exc_info.value.field == "name"

    def test_missing_name(self):
        with pytest.raises(VariableSchemaError, match="name is required"):
            validate_variable({"required": True})

    def test_empty_name(self):
        with pytest.raises(VariableSchemaError):
            validate_variable({"name": ""})

    def test_non_bool_required(self):
        with pytest.raises(VariableSchemaError) as exc_info:
            validate_variable({"name": "x", "required": "yes"})
        assert exc_info.value.field == "required"

    def test_non_string_description(self):
        with pytest.raises(VariableSchemaError) as exc_info:
            validate_variable({"name": "x", "description": 5})
        assert exc_info.value.field == "description"

    def test_rejects_non_mapping(self):
        with pytest.raises(VariableSchemaError):
            validate_variable(["name", "x"])  # type: ignore[arg-type]

    def test_revalidates_dataclass(self):
        with pytest.raises(VariableSchemaError):
            validate_variable(TemplateVariable(name=42))  # type: ignore[arg-type]


class TestCreateTemplate:
    def test_custom_template(self):
        tmpl = create_template(
            "The {{color}} {{animal}} jumps over the {{object}}",
            [
                {"name": "color", "required": True},
                {"name": "animal", "required": True},
                {"name": "object", "required": True, "default_value": "fence"},
            ],
            "You are a creative writing assistant.",
        )
        assert tmpl.system_message == "You are a creative writing assistant."
        assert len(tmpl.variables) == 3

        result = compile_template(tmpl, {"color": "brown", "animal": "fox"})
        assert result == "The brown fox jumps over the fence"

    def test_invalid_schema_raises(self):
        with pytest.raises(VariableSchemaError):
            create_template("Hello {{name}}!", [{"name": 123, "required": True}])

    def test_variables_default_to_empty(self):
        tmpl = create_template("static text")
        assert tmpl.variables == ()
        assert tmpl.system_message is None
        assert compile_template(tmpl, {}) == "static text"

    def test_generation_params(self):
        tmpl = create_template("x", temperature=0.2, max_tokens=64)
        assert tmpl.temperature == 0.2
        assert tmpl.max_tokens == 64


class TestPlaceholders:
    def test_first_seen_order_without_duplicates(self):
        assert placeholders("{{b}} {{a}} {{b}}") == ["b", "a"]

    def test_no_placeholders(self):
        assert placeholders("plain") == []
