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

"""Validation and placeholder substitution for :class:`PromptTemplate`.

Two rules decide whether a required variable is *missing*:

* **loose** (default) — missing unless the binding is truthy or the
  variable has a truthy default.  An explicitly bound ``""``, ``0`` or
  ``False`` therefore counts as absent.  This matches the behaviour
  existing prompt callers rely on.
* **strict** — missing only when the key is unbound (or bound to
  ``None``) and there is no default.

Substitution is literal: every ``{{name}}`` token of a declared variable
is replaced with ``str(value)``.  Undeclared placeholders stay as-is.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from typing import Any

from farmllm.errors import TemplateValidationError
from farmllm.prompts.models import PromptTemplate, TemplateVariable

logger = logging.getLogger(__name__)

MISSING_VARIABLES_MESSAGE = "Missing required variables"

_PLACEHOLDER_RE = re.compile(r"\{\{([^{}]+)\}\}")


def _placeholder(name: str) -> str:
    return "{{" + name + "}}"


def _is_missing(
    variable: TemplateVariable, bindings: Mapping[str, Any], strict: bool,
) -> bool:
    if not variable.required:
        return False
    if strict:
        return bindings.get(variable.name) is None and variable.default_value is None
    return not bindings.get(variable.name) and not variable.default_value


def missing_variables(
    template: PromptTemplate,
    bindings: Mapping[str, Any] | None = None,
    strict: bool = False,
) -> list[str]:
    """Return the names of required variables that have no usable value."""
    bindings = bindings or {}
    return [
        v.name for v in template.variables if _is_missing(v, bindings, strict)
    ]


def validate_template(
    template: PromptTemplate,
    bindings: Mapping[str, Any] | None = None,
    strict: bool = False,
) -> None:
    """Raise :class:`TemplateValidationError` if any required variable is missing."""
    missing = missing_variables(template, bindings, strict=strict)
    if missing:
        raise TemplateValidationError(MISSING_VARIABLES_MESSAGE, missing)


def compile_template(
    template: PromptTemplate,
    bindings: Mapping[str, Any] | None = None,
    strict: bool = False,
) -> str:
    """Validate *bindings* against *template* and return the compiled prompt.

    The value used for each variable is the binding when it is not
    ``None``, otherwise the variable's default.  Variables with neither
    leave their placeholder untouched.

    Raises:
        TemplateValidationError: A required variable is missing.
    """
    bindings = bindings or {}
    validate_template(template, bindings, strict=strict)

    result = template.template
    for variable in template.variables:
        value = bindings.get(variable.name)
        if value is None:
            value = variable.default_value
        if value is not None:
            result = result.replace(_placeholder(variable.name), str(value))

    logger.debug(
        "Compiled template (%d variables, %d chars)",
        len(template.variables), len(result),
    )
    return result


def placeholders(template: str) -> list[str]:
    """List the distinct ``{{name}}`` placeholders in *template*, first-seen order."""
    return list(dict.fromkeys(_PLACEHOLDER_RE.findall(template)))
