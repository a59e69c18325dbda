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

"""Value types for prompt templates.

A :class:`PromptTemplate` is a template string with ``{{name}}``
placeholders plus an ordered tuple of :class:`TemplateVariable`
declarations.  Both are frozen dataclasses: templates are built once and
then compiled any number of times without being mutated.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any, Union

from farmllm.errors import VariableSchemaError


@dataclass(frozen=True)
class TemplateVariable:
    """One substitution slot in a template.

    Attributes:
        name: Placeholder name, matched as ``{{name}}``.
        description: Human-readable documentation only.
        required: Whether compilation fails when no value is available.
        default_value: Fallback used when the caller binds nothing.
    """

    name: str
    description: str | None = None
    required: bool = True
    default_value: Any = None


@dataclass(frozen=True)
class PromptTemplate:
    """A compilable prompt.

    Attributes:
        template: Template body containing ``{{name}}`` placeholders.
        variables: Declared variables, in substitution order.
        system_message: Out-of-band instruction sent with the prompt.
        temperature: Sampling temperature forwarded to the LLM call.
        max_tokens: Completion budget forwarded to the LLM call.
    """

    template: str
    variables: tuple[TemplateVariable, ...] = field(default_factory=tuple)
    system_message: str | None = None
    temperature: float | None = None
    max_tokens: int | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.variables, tuple):
            object.__setattr__(self, "variables", tuple(self.variables))

    @property
    def variable_names(self) -> list[str]:
        return [v.name for v in self.variables]


VariableDecl = Union[TemplateVariable, Mapping[str, Any]]

_DEFAULT_KEYS = ("default_value", "defaultValue")


def validate_variable(decl: VariableDecl) -> TemplateVariable:
    """Check a variable declaration and return it as a :class:`TemplateVariable`.

    Accepts either a :class:`TemplateVariable` or a mapping with the keys
    ``name``, ``description``, ``required`` and ``default_value`` (the
    camelCase ``defaultValue`` is accepted as an alias).  Unknown keys
    are ignored.

    Raises :class:`~farmllm.errors.VariableSchemaError` when ``name`` is
    missing or not a non-empty string, ``description`` is not a string,
    or ``required`` is not a bool.
    """
    if isinstance(decl, TemplateVariable):
        data: Mapping[str, Any] = {
            "name": decl.name,
            "description": decl.description,
            "required": decl.required,
            "default_value": decl.default_value,
        }
    elif isinstance(decl, Mapping):
        data = decl
    else:
        raise VariableSchemaError(
            f"Variable declaration must be a mapping, got {type(decl).__name__}",
            field="<declaration>",
        )

    if "name" not in data:
        raise VariableSchemaError("Variable name is required", field="name")
    name = data["name"]
    if not isinstance(name, str):
        raise VariableSchemaError(
            f"Variable name must be a string, got {type(name).__name__}",
            field="name",
        )
    if not name:
        raise VariableSchemaError("Variable name must not be empty", field="name")

    description = data.get("description")
    if description is not None and not isinstance(description, str):
        raise VariableSchemaError(
            f"Description of {name!r} must be a string", field="description",
        )

    required = data.get("required")
    if required is None:
        required = True
    elif not isinstance(required, bool):
        raise VariableSchemaError(
            f"'required' flag of {name!r} must be a bool", field="required",
        )

    default_value = None
    for key in _DEFAULT_KEYS:
        if data.get(key) is not None:
            default_value = data[key]
            break

    return TemplateVariable(
        name=name,
        description=description,
        required=required,
        default_value=default_value,
    )


def create_template(
    template: str,
    variables: Iterable[VariableDecl] | None = None,
    system_message: str | None = None,
    *,
    temperature: float | None = None,
    max_tokens: int | None = None,
) -> PromptTemplate:
    """Build a custom :class:`PromptTemplate`.

    Every declaration goes through :func:`validate_variable`, so a
    malformed one fails here rather than at compile time.
    """
    return PromptTemplate(
        template=template,
        variables=tuple(validate_variable(v) for v in (variables or ())),
        system_message=system_message,
        temperature=temperature,
        max_tokens=max_tokens,
    )
