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

import petclinic.blueprints.post as post
import petclinic.form as form
import petclinic.get as get
import petclinic.log as log
import petclinic.models.clinic as clinic
import petclinic.shared as shared
import petclinic.storage as storage
import petclinic.web as web

if TYPE_CHECKING:
    import petclinic.binding as binding


@post.public("/owners/<int:owner_id>/pets/<int:pet_id>/edit")
async def edit(owner_id: int, pet_id: int) -> str | web.WerkzeugResponse:
    owner = await storage.get().owner(owner_id)
    pet = shared.pets.of_owner(owner, pet_id)
    result, pet_type = await _bind(owner, await form.quart_request(), pet_id)
    if result.has_errors:
        return await shared.pets.render_form(owner, pet, result)

    pet.name = result.target.name
    pet.birth_date = result.target.birth_date
    pet.type = pet_type
    await storage.get().save(owner)
    return await web.redirect(get.owners.details, success="Pet details has been edited", owner_id=owner.id)


@post.public("/owners/<int:owner_id>/pets/new")
async def new(owner_id: int) -> str | web.WerkzeugResponse:
    owner = await storage.get().owner(owner_id)
    result, pet_type = await _bind(owner, await form.quart_request(), None)
    if result.has_errors:
        return await shared.pets.render_form(owner, clinic.Pet(), result)

    owner.add_pet(clinic.Pet(name=result.target.name, birth_date=result.target.birth_date, type=pet_type))
    await storage.get().save(owner)
    return await web.redirect(get.owners.details, success="New Pet has been Added", owner_id=owner.id)


async def _bind(
    owner: clinic.Owner, data: dict[str, Any], pet_id: int | None
) -> tuple[binding.BindingResult, clinic.PetType | None]:
    """Bind the pet form, then check the name against the other pets and the type against the known types."""
    result = form.bind(shared.pets.FORM_NAME, shared.pets.PetForm, data)

    name = (result.field_value("name") or "").strip()
    if name and (not result.has_field_errors("name")):
        existing = owner.pet_named(name, ignore_new=True)
        if (existing is not None) and (existing.id != pet_id):
            result.reject_value("name", shared.pets.DUPLICATE_MESSAGE)

    pet_type = None
    if not result.has_field_errors("type"):
        pet_type = await storage.get().pet_type((result.field_value("type") or "").strip())
        if pet_type is None:
            log.warning("Unknown pet type %r for owner %s", result.field_value("type"), owner.id)
            result.reject_value("type", form.REQUIRED_MESSAGE)
    return result, pet_type
