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

from typing import TYPE_CHECKING, Any, Final, NamedTuple

import petclinic.binding as binding
import petclinic.config as config

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

DEFAULT_TITLE: Final = "PetClinic"


class Menu(NamedTuple):
    name: str
    path: str
    title: str
    glyph: str


class MenuItem(NamedTuple):
    menu: Menu
    active: bool


class Page:
    """A page to render, with its attributes and the validation status of its forms."""

    def __init__(
        self,
        template_name: str,
        active: str = "home",
        attributes: dict[str, Any] | None = None,
        results: Iterable[binding.BindingResult] = (),
    ) -> None:
        self.template_name = template_name
        self.active = active
        self.attributes: dict[str, Any] = dict(attributes or {})
        for result in results:
            self.attributes[binding.key(result.name)] = result
        self._status: dict[str, binding.BindingResult] = {}
        self.configure()

    def activate(self, name: str) -> None:
        self.active = name

    def configure(self) -> None:
        for key, value in self.attributes.items():
            if key.startswith(binding.MODEL_KEY_PREFIX) and isinstance(value, binding.BindingResult):
                name = key.removeprefix(binding.MODEL_KEY_PREFIX)
                self._status[name] = value

    def errors(self, name: str) -> list[str]:
        result = self.status(name)
        if result is None:
            return []
        return list(result.global_errors)

    def menus(self) -> list[MenuItem]:
        if not _MENUS:
            return []
        selected = menu(self.active)
        return [MenuItem(m, m is selected) for m in all_menus()]

    def status(self, name: str) -> binding.BindingResult | None:
        return self._status.get(name)

    @property
    def title(self) -> str:
        return menu(self.active).title if all_menus() else DEFAULT_TITLE


def all_menus() -> Sequence[Menu]:
    return _MENUS


def menu(name: str) -> Menu:
    """Return the menu with this name, or the first menu if there is none."""
    wanted = name.lower()
    for m in _MENUS:
        if m.name.lower() == wanted:
            return m
    return _MENUS[0]


def _load_menus() -> tuple[Menu, ...]:
    return tuple(Menu(*entry) for entry in config.AppConfig.MENUS)


_MENUS: Final = _load_menus()
