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

import dataclasses
import datetime
import itertools
import math
from typing import TYPE_CHECKING, Final

import quart

import petclinic.log as log
import petclinic.models.clinic as clinic
import petclinic.web as web

if TYPE_CHECKING:
    import quart.app

EXTENSION: Final = "clinic"


@dataclasses.dataclass
class Paged:
    items: list[clinic.Owner]
    page: int
    size: int
    total: int

    @property
    def total_pages(self) -> int:
        return max(1, math.ceil(self.total / self.size))


class Clinic:
    """Owners, their pets and visits, held in memory for the life of the app."""

    def __init__(self) -> None:
        self._owners: dict[int, clinic.Owner] = {}
        self._types: list[clinic.PetType] = []
        self._owner_ids = itertools.count(1)
        self._pet_ids = itertools.count(1)
        self._visit_ids = itertools.count(1)

    def add_pet_type(self, name: str) -> clinic.PetType:
        pet_type = clinic.PetType(id=len(self._types) + 1, name=name)
        self._types.append(pet_type)
        return pet_type

    async def owner(self, owner_id: int) -> clinic.Owner:
        owner = self._owners.get(owner_id)
        if owner is None:
            raise web.NotFound(f"Owner {owner_id} not found")
        return owner

    async def owners_by_last_name(self, last_name: str, page: int = 1, size: int = 5) -> Paged:
        """Owners whose last name starts with last_name, a page at a time."""
        matching = [o for o in self._owners.values() if o.last_name.startswith(last_name)]
        matching.sort(key=lambda o: (o.last_name, o.first_name, o.id or 0))
        page = max(page, 1)
        start = (page - 1) * size
        return Paged(items=matching[start : start + size], page=page, size=size, total=len(matching))

    async def pet_type(self, name: str) -> clinic.PetType | None:
        for pet_type in self._types:
            if pet_type.name == name:
                return pet_type
        return None

    async def pet_types(self) -> list[clinic.PetType]:
        return sorted(self._types, key=lambda t: t.name)

    async def save(self, owner: clinic.Owner) -> clinic.Owner:
        created = owner.is_new
        self._store(owner)
        if created:
            log.info("Created owner %s", owner.id)
        else:
            log.info("Updated owner %s", owner.id)
        return owner

    def _store(self, owner: clinic.Owner) -> None:
        if owner.id is None:
            owner.id = next(self._owner_ids)
        for pet in owner.pets:
            if pet.is_new:
                pet.id = next(self._pet_ids)
            for visit in pet.visits:
                if visit.is_new:
                    visit.id = next(self._visit_ids)
        self._owners[owner.id] = owner


def get() -> Clinic:
    return quart.current_app.extensions[EXTENSION]


def init(app: quart.app.Quart, seed: bool = True) -> Clinic:
    store = Clinic()
    if seed:
        _seed(store)
    app.extensions[EXTENSION] = store
    return store


def _seed(store: Clinic) -> None:
    types = {name: store.add_pet_type(name) for name in ("cat", "dog", "lizard", "snake", "bird", "hamster")}

    owners = [
        ("George", "Franklin", "110 W. Liberty St.", "Madison", "6085551023"),
        ("Betty", "Davis", "638 Cardinal Ave.", "Sun Prairie", "6085551749"),
        ("Eduardo", "Rodriquez", "2693 Commerce St.", "McFarland", "6085558763"),
        ("Harold", "Davis", "563 Friendly St.", "Windsor", "6085553198"),
        ("Peter", "McTavish", "2387 S. Fair Way", "Madison", "6085552765"),
        ("Jean", "Coleman", "105 N. Lake St.", "Monona", "6085552654"),
        ("Jeff", "Black", "1450 Oak Blvd.", "Monona", "6085555387"),
        ("Maria", "Escobito", "345 Maple St.", "Madison", "6085557683"),
        ("David", "Schroeder", "2749 Blackhawk Trail", "Madison", "6085559435"),
        ("Carlos", "Estaban", "2335 Independence La.", "Waunakee", "6085555487"),
    ]
    # Owner number, name, birth date, type
    pets = [
        (1, "Leo", "2010-09-07", "cat"),
        (2, "Basil", "2012-08-06", "hamster"),
        (3, "Rosy", "2011-04-17", "dog"),
        (3, "Jewel", "2010-03-07", "dog"),
        (4, "Iggy", "2010-11-30", "lizard"),
        (5, "George", "2010-01-20", "snake"),
        (6, "Samantha", "2012-09-04", "cat"),
        (6, "Max", "2012-09-04", "cat"),
        (7, "Lucky", "2011-08-06", "bird"),
        (8, "Mulligan", "2007-02-24", "dog"),
        (9, "Freddy", "2010-03-09", "bird"),
        (10, "Lucky", "2010-06-24", "dog"),
        (10, "Sly", "2012-06-08", "cat"),
    ]
    # Pet number, date, description
    visits = [
        (7, "2013-01-01", "rabies shot"),
        (8, "2013-01-02", "rabies shot"),
        (8, "2013-01-03", "neutered"),
        (7, "2013-01-04", "spayed"),
    ]

    records = [
        clinic.Owner(first_name=first, last_name=last, address=address, city=city, telephone=telephone)
        for first, last, address, city, telephone in owners
    ]
    pet_records: list[clinic.Pet] = []
    for owner_number, name, birth_date, type_name in pets:
        pet = clinic.Pet(name=name, birth_date=datetime.date.fromisoformat(birth_date), type=types[type_name])
        records[owner_number - 1].add_pet(pet)
        pet_records.append(pet)
    for pet_number, date, description in visits:
        visit = clinic.Visit(date=datetime.date.fromisoformat(date), description=description)
        pet_records[pet_number - 1].add_visit(visit)

    for record in records:
        # Stored in order, so owners and pets are numbered as listed above
        store._store(record)
        log.debug("Seeded owner %s %s", record.id, record.full_name)
