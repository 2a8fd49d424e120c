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


@post.public("/owners/<int:owner_id>/edit")
async def edit(owner_id: int) -> str | web.WerkzeugResponse:
    owner = await storage.get().owner(owner_id)
    result = form.bind(shared.owners.FORM_NAME, shared.owners.OwnerForm, await form.quart_request())
    if result.has_errors:
        return await shared.owners.render_form(owner, result)

    result.target.apply(owner)
    await storage.get().save(owner)
    return await web.redirect(get.owners.details, success="Owner Values Updated", owner_id=owner.id)


@post.public("/owners/new")
async def new() -> str | web.WerkzeugResponse:
    result = form.bind(shared.owners.FORM_NAME, shared.owners.OwnerForm, await form.quart_request())
    if result.has_errors:
        return await shared.owners.render_form(clinic.Owner(), result)

    owner = result.target.apply(clinic.Owner())
    await storage.get().save(owner)
    return await web.redirect(get.owners.details, success="New Owner Created", owner_id=owner.id)
