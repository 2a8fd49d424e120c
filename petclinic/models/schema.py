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

from collections.abc import Callable
from typing import Any

import pydantic

# For convenience
Field = pydantic.Field


class Record(pydantic.BaseModel):
    """Mutable domain record, validated on assignment."""

    model_config = pydantic.ConfigDict(extra="forbid", strict=False, validate_assignment=True)


class Frozen(pydantic.BaseModel):
    model_config = pydantic.ConfigDict(extra="forbid", strict=True, frozen=True)


class Form(pydantic.BaseModel):
    model_config = pydantic.ConfigDict(
        extra="ignore",
        strict=False,
        validate_assignment=True,
        validate_default=True,
        str_strip_whitespace=True,
    )

    csrf_token: str | None = None


def factory(cls: Callable[[], Any]) -> Any:
    """Helper to create a Pydantic FieldInfo object with only a default factory."""
    return Field(default_factory=cls)
