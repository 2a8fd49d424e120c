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

from __future__ import annotations

import dataclasses
from typing import TYPE_CHECKING, ClassVar, Final

import markupsafe

if TYPE_CHECKING:
    from collections.abc import Iterable

    import jinja2

    import petclinic.binding as binding

DATE_TYPE: Final = "date"


@dataclasses.dataclass(frozen=True)
class Option:
    value: str
    selected: bool


@dataclasses.dataclass(frozen=True)
class Field:
    TEMPLATE: ClassVar[str]

    label: str
    name: str
    valid: bool = True
    value: str = ""
    errors: tuple[str, ...] = ()

    async def render(self, environment: jinja2.Environment) -> markupsafe.Markup:
        """Render the fixed sub-template of this field, with the field as its only input."""
        template = environment.get_template(self.TEMPLATE)
        return markupsafe.Markup(await template.render_async(field=self))


@dataclasses.dataclass(frozen=True)
class InputField(Field):
    TEMPLATE: ClassVar[str] = "fragments/input_field.html"

    date: bool = False


@dataclasses.dataclass(frozen=True)
class SelectField(Field):
    TEMPLATE: ClassVar[str] = "fragments/select_field.html"

    options: tuple[Option, ...] = ()


def input_field(
    label: str, name: str, raw_value: str | None, type_tag: str, status: binding.FieldStatus | None
) -> InputField:
    valid, value, errors = _resolve(raw_value, status)
    return InputField(
        label=label,
        name=name,
        valid=valid,
        value=value,
        errors=errors,
        date=(type_tag == DATE_TYPE),
    )


def options(candidates: Iterable[str], current: str) -> tuple[Option, ...]:
    # Exact string equality, neither trimmed nor case folded
    return tuple(Option(value=candidate, selected=(candidate == current)) for candidate in candidates)


def select_field(
    label: str,
    name: str,
    raw_value: str | None,
    candidates: Iterable[str],
    status: binding.FieldStatus | None,
) -> SelectField:
    valid, value, errors = _resolve(raw_value, status)
    return SelectField(
        label=label,
        name=name,
        valid=valid,
        value=value,
        errors=errors,
        options=options(candidates, value),
    )


def _resolve(raw_value: str | None, status: binding.FieldStatus | None) -> tuple[bool, str, tuple[str, ...]]:
    if status is None:
        return True, raw_value or "", ()
    # A submitted value replaces the bound one even when it is empty
    return (not status.invalid), status.submitted_value or "", tuple(status.error_messages)
