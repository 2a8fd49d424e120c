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

import petclinic.models.schema as schema


class PetType(schema.Frozen):
    id: int
    name: str

    def __str__(self) -> str:
        return self.name


class Visit(schema.Record):
    id: int | None = None
    date: datetime.date = schema.factory(datetime.date.today)
    description: str = ""

    @property
    def is_new(self) -> bool:
        return self.id is None


class Pet(schema.Record):
    id: int | None = None
    name: str = ""
    birth_date: datetime.date | None = None
    type: PetType | None = None
    visits: list[Visit] = schema.factory(list)

    @property
    def is_new(self) -> bool:
        return self.id is None

    def add_visit(self, visit: Visit) -> None:
        self.visits.append(visit)

    def sorted_visits(self) -> list[Visit]:
        return sorted(self.visits, key=lambda v: v.date)


class Owner(schema.Record):
    id: int | None = None
    first_name: str = ""
    last_name: str = ""
    address: str = ""
    city: str = ""
    telephone: str = ""
    pets: list[Pet] = schema.factory(list)

    @property
    def is_new(self) -> bool:
        return self.id is None

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    def add_pet(self, pet: Pet) -> None:
        if pet.is_new and all(p is not pet for p in self.pets):
            self.pets.append(pet)

    def add_visit(self, pet_id: int, visit: Visit) -> None:
        pet = self.pet(pet_id)
        if pet is None:
            raise ValueError(f"Owner {self.id} has no pet with id {pet_id}")
        pet.add_visit(visit)

    def pet(self, pet_id: int) -> Pet | None:
        for pet in self.pets:
            if (not pet.is_new) and (pet.id == pet_id):
                return pet
        return None

    def pet_named(self, name: str, ignore_new: bool = False) -> Pet | None:
        """Return the pet with this name, compared case insensitively."""
        wanted = name.lower()
        for pet in self.pets:
            if ignore_new and pet.is_new:
                continue
            if pet.name.lower() == wanted:
                return pet
        return None

    def sorted_pets(self) -> list[Pet]:
        return sorted(self.pets, key=lambda p: p.name)
