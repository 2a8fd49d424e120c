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

from typing import TYPE_CHECKING, Any, Protocol, TypeVar

import quart

import petclinic.util as util

if TYPE_CHECKING:
    from collections.abc import Awaitable

    import werkzeug.wrappers.response as response

    type WerkzeugResponse = response.Response


R = TypeVar("R", covariant=True)


class WebException(Exception):
    """An error to show to the user with an HTTP status code."""

    def __init__(self, message: str, errorcode: int = 500) -> None:
        super().__init__(message)
        self.errorcode = errorcode


class NotFound(WebException):
    def __init__(self, message: str) -> None:
        super().__init__(message, errorcode=404)


class RouteFunction(Protocol[R]):
    """Protocol for @get.public and @post.public decorated functions."""

    __name__: str
    __doc__: str | None

    def __call__(self, *args: Any, **kwargs: Any) -> Awaitable[R]: ...


async def redirect[R](
    route: RouteFunction[R], success: str | None = None, error: str | None = None, **kwargs: Any
) -> WerkzeugResponse:
    """Redirect to a route with a success or error message."""
    if success is not None:
        await quart.flash(success, "success")
    elif error is not None:
        await quart.flash(error, "error")
    return quart.redirect(util.as_url(route, **kwargs))
