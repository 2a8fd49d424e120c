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

from typing import TYPE_CHECKING, Final

import petclinic.form as form
import petclinic.page as page
import petclinic.template as template

if TYPE_CHECKING:
    import petclinic.binding as binding
    import petclinic.models.clinic as clinic

FORM_NAME: Final = "visit"


class VisitForm(form.Form):
    date: form.Date = form.label("Date")
    description: form.NotBlank = form.label("Description")


async def render_form(
    owner: clinic.Owner, pet: clinic.Pet, visit: clinic.Visit, result: binding.BindingResult | None = None
) -> str:
    attributes = {"owner": owner, "pet": pet, FORM_NAME: visit}
    results = [] if (result is None) else [result]
    form_page = page.Page("visits/form.html", active="owners", attributes=attributes, results=results)
    return await template.render(form_page)
