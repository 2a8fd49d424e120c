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

import markupsafe
import quart
import quart_wtf.utils as utils

import petclinic.directive as directive
import petclinic.form as form
import petclinic.page as page

if TYPE_CHECKING:
    import htpy
    import quart.app


async def blank(title: str, content: str | htpy.Element, active: str = "home") -> str:
    """Render pre-built content inside the layout."""
    attributes = {"content": markupsafe.Markup(content), "heading": title}
    blank_page = page.Page("blank.html", active=active, attributes=attributes)
    return await render(blank_page)


def context(rendered: page.Page) -> dict[str, Any]:
    """A fresh template context for one render of the page."""
    values: dict[str, Any] = dict(rendered.attributes)
    values["page"] = rendered
    values["menus"] = rendered.menus()
    values["title"] = values.get("heading", rendered.title)
    values[directive.FORMS_ATTRIBUTE] = form.FormContexts(values)
    return values


def register(app: quart.app.Quart) -> None:
    directive.register(app.jinja_env)
    app.jinja_env.globals["csrf_token"] = utils.generate_csrf


async def render(rendered: page.Page) -> str:
    return await quart.render_template(rendered.template_name, **context(rendered))
