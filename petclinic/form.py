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
import datetime
from typing import TYPE_CHECKING, Annotated, Any, Final

import pydantic
import pydantic.functional_validators as functional_validators
import quart

import petclinic.binding as binding
import petclinic.log as log
import petclinic.models.schema as schema

if TYPE_CHECKING:
    from collections.abc import Mapping

BLANK_MESSAGE: Final = "must not be blank"
REQUIRED_MESSAGE: Final = "required"
TELEPHONE_DIGITS: Final = 10
TELEPHONE_MESSAGE: Final = f"numeric value out of bounds (<{TELEPHONE_DIGITS} digits>.<0 digits> expected)"


class Form(schema.Form):
    pass


@dataclasses.dataclass(frozen=True)
class FormContext:
    name: str
    target: Any


class FormContexts:
    """Lazily built form contexts for a single page render.

    Looking up a name pairs it with the attribute of the same name the first
    time, and returns that same context on every later lookup. Templates reach
    it as form.owner or form["owner"].
    """

    def __init__(self, attributes: Mapping[str, Any]) -> None:
        self._attributes = attributes
        self._contexts: dict[str, FormContext] = {}

    def __contains__(self, name: object) -> bool:
        # Every name resolves, possibly to a context without a target
        return isinstance(name, str)

    def __getitem__(self, name: str) -> FormContext:
        context = self._contexts.get(name)
        if context is None:
            context = FormContext(name, self._attributes.get(name))
            self._contexts[name] = context
        return context

    def __len__(self) -> int:
        return len(self._contexts)


def bind(
    name: str, model_cls: type[Form], data: Mapping[str, Any], context: dict[str, Any] | None = None
) -> binding.BindingResult:
    try:
        validated = validate(model_cls, data, context)
    except pydantic.ValidationError as e:
        result = binding.from_validation_error(name, e, data)
        log.debug("Form %s rejected with %d error(s)", name, e.error_count())
        return result
    return binding.BindingResult(name, target=validated, submitted=data)


def label(description: str, *, default: Any = "") -> Any:
    return pydantic.Field(default, description=description)


async def quart_request() -> dict[str, Any]:
    form_data = await quart.request.form

    combined_data: dict[str, Any] = {}
    for key in form_data.keys():
        # Some things expect single values, and some expect lists
        values = form_data.getlist(key)
        if len(values) == 1:
            combined_data[key] = values[0]
        else:
            combined_data[key] = values
    return combined_data


def to_date(v: Any) -> datetime.date:
    if isinstance(v, datetime.date):
        return v
    if (v is None) or (isinstance(v, str) and (not v.strip())):
        raise ValueError(REQUIRED_MESSAGE)
    try:
        return datetime.date.fromisoformat(str(v).strip())
    except ValueError:
        raise ValueError(f"invalid date: {v!r}")


def to_not_blank(v: Any) -> str:
    if (v is None) or (not str(v).strip()):
        raise ValueError(BLANK_MESSAGE)
    return str(v).strip()


def to_required(v: Any) -> str:
    if (v is None) or (not str(v).strip()):
        raise ValueError(REQUIRED_MESSAGE)
    return str(v).strip()


def to_telephone(v: Any) -> str:
    text = to_not_blank(v)
    if (not text.isdigit()) or (len(text) > TELEPHONE_DIGITS):
        raise ValueError(TELEPHONE_MESSAGE)
    return text


# Validator types come before the function that uses them
# We must not use the "type" keyword here, otherwise Pydantic complains

Date = Annotated[
    datetime.date,
    functional_validators.BeforeValidator(to_date),
]

NotBlank = Annotated[
    str,
    functional_validators.BeforeValidator(to_not_blank),
]

Required = Annotated[
    str,
    functional_validators.BeforeValidator(to_required),
]

Telephone = Annotated[
    str,
    functional_validators.BeforeValidator(to_telephone),
]


def validate(model_cls: Any, data: Mapping[str, Any], context: dict[str, Any] | None = None) -> Any:
    # Since pydantic.TypeAdapter accepts Any, we do the same
    return pydantic.TypeAdapter(model_cls).validate_python(dict(data), context=context)
