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

import petclinic.blueprints.post as post
import petclinic.form as form
import petclinic.get as get
import petclinic.models.clinic as clinic
import petclinic.shared as shared
import petclinic.storage as storage
import petclinic.web as web


@post.public("/owners/<int:owner_id>/pets/<int:pet_id>/visits/new")
async def new(owner_id: int, pet_id: int) -> str | web.WerkzeugResponse:
    owner = await storage.get().owner(owner_id)
    pet = shared.pets.of_owner(owner, pet_id)
    result = form.bind(shared.visits.FORM_NAME, shared.visits.VisitForm, await form.quart_request())
    if result.has_errors:
        return await shared.visits.render_form(owner, pet, clinic.Visit(), result)

    owner.add_visit(pet_id, clinic.Visit(date=result.target.date, description=result.target.description))
    await storage.get().save(owner)
    return await web.redirect(get.owners.details, success="Your visit has been booked", owner_id=owner.id)
