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

import htpy

from . import log

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence


type Element = htpy.Element

a = htpy.a
div = htpy.div
h2 = htpy.h2
li = htpy.li
nav = htpy.nav
span = htpy.span
table = htpy.table
tbody = htpy.tbody
td = htpy.td
th = htpy.th
thead = htpy.thead
tr = htpy.tr
ul = htpy.ul


class BlockElementGetable:
    def __init__(self, block: Block, element: Element):
        self.block = block
        self.element = element

    def __getitem__(self, *items: Element | str | tuple[Element | str, ...]) -> Element:
        element = self.element[*items]
        for i in range(len(self.block.elements) - 1, -1, -1):
            if self.block.elements[i] is self.element:
                self.block.elements[i] = element
                return element
        self.block.append(element)
        return element


class BlockElementCallable:
    def __init__(self, block: Block, constructor: Callable[..., Element]):
        self.block = block
        self.constructor = constructor

    def __call__(self, *args, **kwargs) -> BlockElementGetable:
        element = self.constructor(*args, **kwargs)
        self.block.append(element)
        return BlockElementGetable(self.block, element)

    def __getitem__(self, *items: Any) -> Element:
        element = self.constructor()[*items]
        self.block.append(element)
        return element


class Block:
    """Accumulates sibling elements, to be collected into one element later."""

    __match_args__ = ("elements",)

    def __init__(self, element: Element | None = None, *elements: Element, classes: str | None = None):
        # Calling an htpy element replaces its attributes, so they are applied once in collect
        self.element = element
        self.classes = classes
        self.elements: list[Element | str] = list(elements)

    def __repr__(self) -> str:
        return f"{self.element!r}[*{self.elements!r}]"

    def append(self, eob: Block | Element | str) -> None:
        match eob:
            case Block():
                self.elements.append(eob.collect(depth=2))
            case _:
                self.elements.append(eob)

    def collect(self, depth: int = 1) -> Element:
        src = log.caller_name(depth=depth)
        element = div if (self.element is None) else self.element
        if self.classes:
            return element(self.classes, data_src=src)[*self.elements]
        return element(data_src=src)[*self.elements]

    @property
    def a(self) -> BlockElementCallable:
        return BlockElementCallable(self, a)

    @property
    def h2(self) -> BlockElementCallable:
        return BlockElementCallable(self, h2)

    @property
    def table(self) -> BlockElementCallable:
        return BlockElementCallable(self, table)


def definition_table(rows: Sequence[tuple[str, Any]], classes: str = ".table.table-striped") -> Element:
    """A two column table of labelled values."""
    return table(classes)[tbody[*(tr[th[label], td[str(value)]] for label, value in rows)]]


def pagination(current: int, total_pages: int, url: Callable[[int], str]) -> Element:
    """Page links for a paginated listing, with the current page unlinked."""
    items: list[Element] = []
    for number in range(1, total_pages + 1):
        if number == current:
            items.append(li(".page-item.active")[span(".page-link")[str(number)]])
        else:
            items.append(li(".page-item")[a(".page-link", href=url(number))[str(number)]])
    return nav(aria_label="Pagination")[ul(".pagination")[*items]]
