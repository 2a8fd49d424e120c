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

import time
from collections.abc import Awaitable, Callable
from types import ModuleType
from typing import Any

import quart
import quart.app

import petclinic.log as log
import petclinic.web as web

_BLUEPRINT_NAME = "get_blueprint"
_BLUEPRINT = quart.Blueprint(_BLUEPRINT_NAME, __name__)
_routes: list[str] = []


def register(app: quart.app.Quart) -> tuple[ModuleType, list[str]]:
    import petclinic.get as get

    app.register_blueprint(_BLUEPRINT)
    return get, _routes


def public(path: str) -> Callable[[Callable[..., Awaitable[Any]]], web.RouteFunction[Any]]:
    def decorator(func: Callable[..., Awaitable[Any]]) -> web.RouteFunction[Any]:
        async def wrapper(*args: Any, **kwargs: Any) -> Any:
            start_time_ns = time.perf_counter_ns()
            response = await func(*args, **kwargs)
            total_ms = (time.perf_counter_ns() - start_time_ns) // 1_000_000
            log.performance("%s %s %s %s", "GET", path, func.__name__, total_ms)
            return response

        endpoint = func.__module__.replace(".", "_") + "_" + func.__name__
        wrapper.__name__ = func.__name__
        wrapper.__doc__ = func.__doc__
        wrapper.__annotations__["endpoint"] = _BLUEPRINT_NAME + "." + endpoint

        _BLUEPRINT.add_url_rule(path, endpoint=endpoint, view_func=wrapper, methods=["GET"])

        module_name = func.__module__.split(".")[-1]
        _routes.append(f"get.{module_name}.{func.__name__}")

        return wrapper

    return decorator
