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

"""Validation outcomes of submitted forms, and their per field status."""

from __future__ import annotations

import dataclasses
from typing import TYPE_CHECKING, Any, Final

if TYPE_CHECKING:
    from collections.abc import Mapping

    import pydantic

MODEL_KEY_PREFIX: Final[str] = "petclinic.binding.BindingResult."


@dataclasses.dataclass(frozen=True)
class FieldStatus:
    invalid: bool
    error_messages: tuple[str, ...] = ()
    submitted_value: str | None = None


class BindingResult:
    """The outcome of binding submitted data to the form called name.

    The target is the validated form model, or None when validation failed
    before a model could be built. Field errors keep the order in which they
    were reported.
    """

    def __init__(self, name: str, target: Any = None, submitted: Mapping[str, Any] | None = None) -> None:
        self.name = name
        self.target = target
        self.submitted: dict[str, Any] = dict(submitted or {})
        self.field_errors_by_name: dict[str, list[str]] = {}
        self.global_errors: list[str] = []

    def __repr__(self) -> str:
        return f"BindingResult({self.name!r}, errors={self.field_errors_by_name!r}, global={self.global_errors!r})"

    @property
    def has_errors(self) -> bool:
        return bool(self.field_errors_by_name) or bool(self.global_errors)

    def error_messages(self) -> list[str]:
        messages = list(self.global_errors)
        for errors in self.field_errors_by_name.values():
            messages.extend(errors)
        return messages

    def field_errors(self, field: str) -> list[str]:
        return list(self.field_errors_by_name.get(field, []))

    def field_value(self, field: str) -> str | None:
        # Submitted text takes precedence over the bound target
        if field in self.submitted:
            return _as_text(self.submitted[field])
        if self.target is not None:
            return _as_text(getattr(self.target, field, None))
        return None

    def has_field_errors(self, field: str) -> bool:
        return field in self.field_errors_by_name

    def reject(self, message: str) -> None:
        self.global_errors.append(message)

    def reject_value(self, field: str, message: str) -> None:
        self.field_errors_by_name.setdefault(field, []).append(message)

    def status(self, field: str) -> FieldStatus:
        return FieldStatus(
            invalid=self.has_field_errors(field),
            error_messages=tuple(self.field_errors(field)),
            submitted_value=self.field_value(field),
        )


def from_validation_error(name: str, error: pydantic.ValidationError, submitted: Mapping[str, Any]) -> BindingResult:
    result = BindingResult(name, submitted=submitted)
    for detail in error.errors():
        message = _message(detail["msg"])
        loc = detail["loc"]
        if loc and isinstance(loc[0], str):
            result.reject_value(loc[0], message)
        else:
            # Raised by a model validator rather than by a field
            result.reject(message)
    return result


def key(form_name: str) -> str:
    return MODEL_KEY_PREFIX + form_name


def resolve(attributes: Mapping[str, Any], form_name: str, field_name: str) -> FieldStatus | None:
    """Return the status of one field, or None if the form was not validated."""
    result = attributes.get(key(form_name))
    if result is None:
        return None
    if not isinstance(result, BindingResult):
        raise TypeError(f"Expected a BindingResult under {key(form_name)!r}, got {type(result).__name__}")
    return result.status(field_name)


def _as_text(value: Any) -> str | None:
    if value is None:
        return None
    if isinstance(value, list):
        # Multiple values for one field name, of which only the first is shown
        return _as_text(value[0]) if value else None
    return str(value)


def _message(msg: str) -> str:
    return msg.replace("Value error, ", "").replace("Assertion failed, ", "")
