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

FORM_NAME: Final = "owner"
NOT_FOUND_MESSAGE: Final = "not found"


class OwnerForm(form.Form):
    first_name: form.NotBlank = form.label("First Name")
    last_name: form.NotBlank = form.label("Last Name")
    address: form.NotBlank = form.label("Address")
    city: form.NotBlank = form.label("City")
    telephone: form.Telephone = form.label("Telephone")

    def apply(self, owner: clinic.Owner) -> clinic.Owner:
        owner.first_name = self.first_name
        owner.last_name = self.last_name
        owner.address = self.address
        owner.city = self.city
        owner.telephone = self.telephone
        return owner


class FindOwnerForm(form.Form):
    last_name: str = form.label("Last Name")


async def render_find(search: FindOwnerForm, result: binding.BindingResult | None = None) -> str:
    results = [] if (result is None) else [result]
    find_page = page.Page("owners/find.html", active="owners", attributes={FORM_NAME: search}, results=results)
    return await template.render(find_page)


async def render_form(owner: clinic.Owner, result: binding.BindingResult | None = None) -> str:
    """Render the owner form, redisplaying rejected input when there is a result."""
    results = [] if (result is None) else [result]
    form_page = page.Page("owners/form.html", active="owners", attributes={FORM_NAME: owner}, results=results)
    return await template.render(form_page)
