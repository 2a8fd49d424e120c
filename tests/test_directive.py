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
import petclinic.directive as directive
import petclinic.form as form
import petclinic.models.clinic as clinic

INPUT = "{% call input_field() %}owner, First Name ,first_name,text{% endcall %}"
SELECT = "{% call select_field() %}pet,Type,type,types{% endcall %}"


def test_parse():
    assert directive.parse(" owner, First Name ,first_name , text ") == directive.Directive(
        target="owner", label="First Name", name="first_name", argument="text"
    )


def test_parse_ignores_extra_tokens():
    assert directive.parse("pet,Type,type,types,more").argument == "types"


def test_parse_short_body():
    with pytest.raises(IndexError):
        directive.parse("owner,First Name,first_name")


def test_raw_value():
    owner = clinic.Owner(first_name="George")

    assert directive.raw_value(owner, "first_name") == "George"
    assert directive.raw_value(owner, "nickname") is None
    assert directive.raw_value({"first_name": 3}, "first_name") == "3"
    assert directive.raw_value(None, "first_name") is None


def test_candidates():
    assert directive.candidates({"types": ("cat", "dog")}, "types") == ["cat", "dog"]
    with pytest.raises(TypeError):
        directive.candidates({"types": "cat"}, "types")
    with pytest.raises(TypeError):
        directive.candidates({}, "types")


def test_forms_reuses_render_cache():
    contexts = form.FormContexts({})

    assert directive.forms({directive.FORMS_ATTRIBUTE: contexts}) is contexts
    assert isinstance(directive.forms({}), form.FormContexts)


@pytest.mark.asyncio
async def test_input_field_from_target(environment: jinja2.Environment):
    html = await environment.from_string(INPUT).render_async(owner=clinic.Owner(first_name="George"))

    assert "First Name" in html
    assert 'name="first_name"' in html
    assert 'value="George"' in html
    assert "is-invalid" not in html


@pytest.mark.asyncio
async def test_input_field_from_result(environment: jinja2.Environment):
    result = binding.BindingResult("owner", submitted={"first_name": ""})
    result.reject_value("first_name", "must not be blank")
    attributes = {"owner": clinic.Owner(first_name="George"), binding.key("owner"): result}

    html = await environment.from_string(INPUT).render_async(attributes)

    assert 'value=""' in html
    assert "is-invalid" in html
    assert "must not be blank" in html


@pytest.mark.asyncio
async def test_input_field_without_target(environment: jinja2.Environment):
    html = await environment.from_string(INPUT).render_async()

    assert 'value=""' in html


@pytest.mark.asyncio
async def test_select_field(environment: jinja2.Environment):
    pet = clinic.Pet(name="Leo", type=clinic.PetType(id=1, name="cat"))

    html = await environment.from_string(SELECT).render_async(pet=pet, types=["bird", "cat", "dog"])

    assert '<option value="cat" selected>' in html
    assert '<option value="dog">' in html


@pytest.mark.asyncio
async def test_select_field_without_candidates(environment: jinja2.Environment):
    with pytest.raises(TypeError):
        await environment.from_string(SELECT).render_async(pet=clinic.Pet())


@pytest.mark.asyncio
async def test_short_directive_fails_render(environment: jinja2.Environment):
    template = environment.from_string("{% call input_field() %}owner,First Name{% endcall %}")

    with pytest.raises(IndexError):
        await template.render_async(owner=clinic.Owner())


@pytest.mark.asyncio
async def test_directives_share_form_contexts(environment: jinja2.Environment):
    contexts = form.FormContexts({"owner": clinic.Owner(first_name="George", last_name="Franklin")})
    source = INPUT + "{% call input_field() %}owner,Last Name,last_name,text{% endcall %}"

    html = await environment.from_string(source).render_async(owner=clinic.Owner(), form=contexts)

    assert 'value="George"' in html
    assert 'value="Franklin"' in html
    assert len(contexts) == 1
