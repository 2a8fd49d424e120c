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

import jinja2
import pytest

import petclinic.binding as binding
import petclinic.fields as fields


def test_input_field_without_status_is_valid():
    field = fields.input_field("First Name", "first_name", "George", "text", None)

    assert field.valid
    assert field.value == "George"
    assert field.errors == ()
    assert not field.date


def test_input_field_without_value_is_empty():
    field = fields.input_field("First Name", "first_name", None, "text", None)

    assert field.value == ""


def test_input_field_date_type():
    assert fields.input_field("Birth Date", "birth_date", "2010-09-07", "date", None).date
    assert not fields.input_field("Birth Date", "birth_date", "2010-09-07", "Date", None).date


def test_input_field_rejected_value_is_redisplayed():
    status = binding.FieldStatus(invalid=True, error_messages=("must not be blank",), submitted_value="")
    field = fields.input_field("City", "city", "Madison", "text", status)

    assert not field.valid
    assert field.value == ""
    assert field.errors == ("must not be blank",)


def test_input_field_status_replaces_bound_value():
    status = binding.FieldStatus(invalid=False, submitted_value="Monona")
    field = fields.input_field("City", "city", "Madison", "text", status)

    assert field.valid
    assert field.value == "Monona"
    assert field.errors == ()


def test_input_field_status_without_submitted_value():
    status = binding.FieldStatus(invalid=False)
    field = fields.input_field("City", "city", "Madison", "text", status)

    assert field.value == ""


def test_input_field_keeps_error_order():
    status = binding.FieldStatus(invalid=True, error_messages=("first", "second"), submitted_value="x")
    field = fields.input_field("Telephone", "telephone", None, "text", status)

    assert field.errors == ("first", "second")


def test_projection_is_pure():
    status = binding.FieldStatus(invalid=True, error_messages=("required",), submitted_value="dragon")
    first = fields.select_field("Type", "type", "cat", ["cat", "dog"], status)
    second = fields.select_field("Type", "type", "cat", ["cat", "dog"], status)

    assert first == second
    assert first is not second


def test_options_keep_order_and_match_exactly():
    options = fields.options(["dog", "cat", "Cat", " cat"], "cat")

    assert [option.value for option in options] == ["dog", "cat", "Cat", " cat"]
    assert [option.selected for option in options] == [False, True, False, False]


def test_options_select_the_matching_candidate():
    options = fields.options(["cat", "dog", "bird"], "dog")

    assert [option.selected for option in options] == [False, True, False]


def test_options_select_every_duplicate():
    options = fields.options(["dog", "cat", "dog"], "dog")

    assert [option.selected for option in options] == [True, False, True]
    assert sum(option.selected for option in options) == 2


def test_options_without_current_value_select_nothing():
    options = fields.options(["cat", "dog"], "")

    assert not any(option.selected for option in options)


def test_options_empty_candidate_matches_empty_value():
    options = fields.options(["", "cat"], "")

    assert [option.selected for option in options] == [True, False]


def test_select_field_selects_bound_value():
    field = fields.select_field("Type", "type", "dog", ["bird", "cat", "dog"], None)

    assert field.valid
    assert field.value == "dog"
    assert [option.value for option in field.options if option.selected] == ["dog"]


def test_select_field_selects_submitted_value():
    status = binding.FieldStatus(invalid=False, submitted_value="bird")
    field = fields.select_field("Type", "type", "dog", ["bird", "cat", "dog"], status)

    assert [option.value for option in field.options if option.selected] == ["bird"]


def test_select_field_with_unknown_submitted_value():
    status = binding.FieldStatus(invalid=True, error_messages=("required",), submitted_value="dragon")
    field = fields.select_field("Type", "type", "dog", ["bird", "cat", "dog"], status)

    assert not field.valid
    assert field.value == "dragon"
    assert not any(option.selected for option in field.options)


def test_fields_are_immutable():
    field = fields.input_field("City", "city", "Madison", "text", None)

    with pytest.raises(AttributeError):
        field.value = "Monona"  # type: ignore[misc]


@pytest.mark.asyncio
async def test_render_input_field(environment: jinja2.Environment):
    status = binding.FieldStatus(invalid=True, error_messages=("must not be blank",), submitted_value="")
    html = await fields.input_field("City", "city", "Madison", "text", status).render(environment)

    assert 'name="city"' in html
    assert 'type="text"' in html
    assert "is-invalid" in html
    assert "must not be blank" in html
    assert "Madison" not in html


@pytest.mark.asyncio
async def test_render_date_input_field(environment: jinja2.Environment):
    html = await fields.input_field("Birth Date", "birth_date", "2010-09-07", "date", None).render(environment)

    assert 'type="date"' in html
    assert 'value="2010-09-07"' in html
    assert "is-invalid" not in html


@pytest.mark.asyncio
async def test_render_escapes_value(environment: jinja2.Environment):
    html = await fields.input_field("City", "city", '<b>"Madison"</b>', "text", None).render(environment)

    assert "<b>" not in html
    assert "&lt;b&gt;" in html


@pytest.mark.asyncio
async def test_render_select_field(environment: jinja2.Environment):
    html = await fields.select_field("Type", "type", "dog", ["cat", "dog"], None).render(environment)

    assert '<option value="cat">' in html
    assert '<option value="dog" selected>' in html
    assert '<option value="">' in html
    assert "invalid-feedback" not in html


@pytest.mark.asyncio
async def test_render_select_field_without_value(environment: jinja2.Environment):
    html = await fields.select_field("Type", "type", None, ["bird", "cat", "dog"], None).render(environment)

    assert '<option value="" selected></option>' in html
    assert '<option value="bird">' in html
    assert html.count(" selected>") == 1
