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

from typing import TYPE_CHECKING, Any

import jinja2
import quart

import petclinic.log as log

if TYPE_CHECKING:
    from collections.abc import Callable

def as_url(func: Callable, **kwargs: Any) -> str:
    """Return the URL for a route function."""
    if isinstance(func, jinja2.runtime.Undefined):
        log.error("Undefined route in the calling template")
        raise RuntimeError("Undefined route")
    try:
        endpoint = func.__annotations__["endpoint"]
    except (AttributeError, KeyError) as e:
        raise RuntimeError(f"Cannot find the endpoint of {func} (type: {type(func)})") from e
    return quart.url_for(endpoint, **kwargs)

