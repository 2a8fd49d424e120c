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

import datetime
from typing import TYPE_CHECKING, Final

import pydantic

import petclinic.form as form
import petclinic.page as page
import petclinic.storage as storage
import petclinic.template as template
import petclinic.web as web

if TYPE_CHECKING:
    import petclinic.binding as binding
    import petclinic.models.clinic as clinic

DUPLICATE_MESSAGE: Final = "already exists"
FORM_NAME: Final = "pet"
INVALID_DATE_MESSAGE: Final = "invalid date"
TYPES_ATTRIBUTE: Final = "types"


class PetForm(form.Form):
    name: form.Required = form.label("Name")
    birth_date: form.Date = form.label("Birth Date")
    type: form.Required = form.label("Type")

    @pydantic.field_validator("birth_date")
    @classmethod
    def not_in_future(cls, value: datetime.date) -> datetime.date:
        if value > datetime.date.today():
            raise ValueError(INVALID_DATE_MESSAGE)
        return value


def of_owner(owner: clinic.Owner, pet_id: int) -> clinic.Pet:
    pet = owner.pet(pet_id)
    if pet is None:
        raise web.NotFound(f"Pet {pet_id} of owner {owner.id} not found")
    return pet


async def render_form(owner: clinic.Owner, pet: clinic.Pet, result: binding.BindingResult | None = None) -> str:
    types = [pet_type.name for pet_type in await storage.get().pet_types()]
    attributes = {"owner": owner, FORM_NAME: pet, TYPES_ATTRIBUTE: types}
    results = [] if (result is None) else [result]
    form_page = page.Page("pets/form.html", active="owners", attributes=attributes, results=results)
    return await template.render(form_page)
