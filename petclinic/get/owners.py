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

import quart

import petclinic.binding as binding
import petclinic.blueprints.get as get
import petclinic.form as form
import petclinic.get.pets as pets
import petclinic.get.visits as visits
import petclinic.htm as htm
import petclinic.models.clinic as clinic
import petclinic.shared as shared
import petclinic.storage as storage
import petclinic.template as template
import petclinic.util as util
import petclinic.web as web


@get.public("/owners/<int:owner_id>")
async def details(owner_id: int) -> str:
    owner = await storage.get().owner(owner_id)

    page = htm.Block()
    page.h2["Owner Information"]
    page.append(
        htm.definition_table(
            [
                ("Name", owner.full_name),
                ("Address", owner.address),
                ("City", owner.city),
                ("Telephone", owner.telephone),
            ]
        )
    )
    page.a(".btn.btn-primary.me-2", href=util.as_url(edit, owner_id=owner.id))["Edit Owner"]
    page.a(".btn.btn-primary", href=util.as_url(pets.new, owner_id=owner.id))["Add New Pet"]

    page.h2(".mt-4")["Pets and Visits"]
    rows = [_pet_row(owner, pet) for pet in owner.sorted_pets()]
    page.table(".table.table-striped")[htm.tbody[rows]]
    return await template.blank("Owner Information", content=page.collect(), active="owners")


@get.public("/owners/<int:owner_id>/edit")
async def edit(owner_id: int) -> str:
    owner = await storage.get().owner(owner_id)
    return await shared.owners.render_form(owner)


@get.public("/owners/find")
async def find() -> str:
    return await shared.owners.render_find(shared.owners.FindOwnerForm())


@get.public("/owners")
async def listing() -> str | web.WerkzeugResponse:
    """Search owners by the start of their last name, listing all of them for a blank search."""
    search = form.validate(shared.owners.FindOwnerForm, {"last_name": quart.request.args.get("last_name", "")})
    page_number = quart.request.args.get("page", 1, type=int)
    size = quart.current_app.config["PAGE_SIZE"]
    found = await storage.get().owners_by_last_name(search.last_name, page=page_number, size=size)

    if found.total == 0:
        result = binding.BindingResult(shared.owners.FORM_NAME, target=search)
        result.reject_value("last_name", shared.owners.NOT_FOUND_MESSAGE)
        return await shared.owners.render_find(search, result)
    if found.total == 1:
        return quart.redirect(util.as_url(details, owner_id=found.items[0].id))
    return await _render_listing(search.last_name, found)


@get.public("/owners/new")
async def new() -> str:
    return await shared.owners.render_form(clinic.Owner())


def _pet_row(owner: clinic.Owner, pet: clinic.Pet) -> htm.Element:
    visit_rows = [htm.tr[htm.td[str(visit.date)], htm.td[visit.description]] for visit in pet.sorted_visits()]
    visit_table = htm.table(".table.table-sm")[
        htm.thead[htm.tr[htm.th["Visit Date"], htm.th["Description"]]],
        htm.tbody[visit_rows],
        htm.tr[
            htm.td[htm.a(href=util.as_url(pets.edit, owner_id=owner.id, pet_id=pet.id))["Edit Pet"]],
            htm.td[htm.a(href=util.as_url(visits.new, owner_id=owner.id, pet_id=pet.id))["Add Visit"]],
        ],
    ]
    facts = htm.definition_table(
        [
            ("Name", pet.name),
            ("Birth Date", pet.birth_date or ""),
            ("Type", pet.type or ""),
        ],
        classes=".table.table-borderless",
    )
    return htm.tr[htm.td[facts], htm.td[visit_table]]


async def _render_listing(last_name: str, found: storage.Paged) -> str:
    page = htm.Block()
    page.h2["Owners"]
    rows = [
        htm.tr[
            htm.td[htm.a(href=util.as_url(details, owner_id=owner.id))[owner.full_name]],
            htm.td[owner.address],
            htm.td[owner.city],
            htm.td[owner.telephone],
            htm.td[", ".join(pet.name for pet in owner.sorted_pets())],
        ]
        for owner in found.items
    ]
    page.table(".table.table-striped")[
        htm.thead[htm.tr[htm.th["Name"], htm.th["Address"], htm.th["City"], htm.th["Telephone"], htm.th["Pets"]]],
        htm.tbody[rows],
    ]
    if found.total_pages > 1:
        page.append(
            htm.pagination(
                found.page,
                found.total_pages,
                lambda number: util.as_url(listing, last_name=last_name, page=number),
            )
        )
    return await template.blank("Owners", content=page.collect(), active="owners")

