# Licensed to the Apache Software Foundation (ASF) under one
# or more contributor license agreements.  See the NOTICE file
# distributed with this work for additional information
# regarding copyright ownership.  The ASF licenses this file
# to you under the Apache License, Version 2.0 (the
# "License"); you may not use this file except in compliance
# with the License.  You may obtain a copy of the License at
#
#   http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing,
# software distributed under the License is distributed on an
# "AS IS" BASIS, WITHOUT WARRANTIES OR CONDITIONS OF ANY
# KIND, either express or implied.  See the License for the
# specific language governing permissions and limitations
# under the License.

"""Call block directives that render form fields from a token list.

A template writes

    {% call input_field() %}owner,First Name,first_name,text{% endcall %}
    {% call select_field() %}pet,Type,type,types{% endcall %}

The body is split on commas into the form name, the label, the field name,
and either the input type or the name of the attribute holding the select
candidates. A body with fewer than four tokens raises IndexError, and nothing
recovers from it: the page render fails.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Sequence
from typing import TYPE_CHECKING, Any, Final

import jinja2

import petclinic.binding as binding
import petclinic.fields as fields
import petclinic.form as form
import petclinic.log as log

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable, Mapping

    import markupsafe

FORMS_ATTRIBUTE: Final = "form"


@dataclasses.dataclass(frozen=True)
class Directive:
    target: str
    label: str
    name: str
    # The input type, or the attribute naming the select candidates
    argument: str


def candidates(attributes: Mapping[str, Any], key: str) -> list[str]:
    values = attributes.get(key)
    if isinstance(values, str | bytes) or (not isinstance(values, Sequence)):
        raise TypeError(f"Expected a list of candidates under {key!r}, got {type(values).__name__}")
    return [str(value) for value in values]


def forms(attributes: Mapping[str, Any]) -> form.FormContexts:
    contexts = attributes.get(FORMS_ATTRIBUTE)
    if isinstance(contexts, form.FormContexts):
        return contexts
    # Rendered outside of template.render, so the cache lives for this call only
    return form.FormContexts(attributes)


@jinja2.pass_context
async def input_field(context: jinja2.runtime.Context, caller: Callable[[], Awaitable[str]]) -> markupsafe.Markup:
    directive = parse(await caller())
    target = forms(context)[directive.target].target
    field = fields.input_field(
        directive.label,
        directive.name,
        raw_value(target, directive.name),
        directive.argument,
        binding.resolve(context, directive.target, directive.name),
    )
    log.debug("Rendering input %s.%s", directive.target, directive.name)
    return await field.render(context.environment)


def parse(body: str) -> Directive:
    tokens = [token.strip() for token in str(body).split(",")]
    return Directive(target=tokens[0], label=tokens[1], name=tokens[2], argument=tokens[3])


def raw_value(target: Any, name: str) -> str | None:
    if target is None:
        return None
    if isinstance(target, dict):
        value = target.get(name)
    else:
        value = getattr(target, name, None)
    if value is None:
        return None
    return str(value)


@jinja2.pass_context
async def select_field(context: jinja2.runtime.Context, caller: Callable[[], Awaitable[str]]) -> markupsafe.Markup:
    directive = parse(await caller())
    target = forms(context)[directive.target].target
    field = fields.select_field(
        directive.label,
        directive.name,
        raw_value(target, directive.name),
        candidates(context, directive.argument),
        binding.resolve(context, directive.target, directive.name),
    )
    log.debug("Rendering select %s.%s", directive.target, directive.name)
    return await field.render(context.environment)


def register(environment: jinja2.Environment) -> None:
    environment.globals["input_field"] = input_field
    environment.globals["select_field"] = select_field
