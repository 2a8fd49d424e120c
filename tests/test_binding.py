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

import pydantic
import pytest

import petclinic.binding as binding
import petclinic.models.clinic as clinic


class Sample(pydantic.BaseModel):
    name: str
    count: int

    @pydantic.model_validator(mode="after")
    def check_count(self) -> "Sample":
        if self.count < 0:
            raise ValueError("count must not be negative")
        return self


def test_resolve_without_result():
    assert binding.resolve({}, "owner", "first_name") is None
    assert binding.resolve({"owner": clinic.Owner()}, "owner", "first_name") is None


def test_resolve_wrong_type():
    with pytest.raises(TypeError):
        binding.resolve({binding.key("owner"): "not a result"}, "owner", "first_name")


def test_resolve_rejected_field():
    result = binding.BindingResult("owner", submitted={"first_name": "", "city": "Madison"})
    result.reject_value("first_name", "must not be blank")

    status = binding.resolve({binding.key("owner"): result}, "owner", "first_name")

    assert status == binding.FieldStatus(invalid=True, error_messages=("must not be blank",), submitted_value="")


def test_resolve_accepted_field():
    result = binding.BindingResult("owner", submitted={"first_name": "", "city": "Madison"})
    result.reject_value("first_name", "must not be blank")

    status = binding.resolve({binding.key("owner"): result}, "owner", "city")

    assert status == binding.FieldStatus(invalid=False, error_messages=(), submitted_value="Madison")


def test_resolve_other_form():
    result = binding.BindingResult("owner")
    assert binding.resolve({binding.key("owner"): result}, "pet", "name") is None


def test_key_uses_prefix():
    assert binding.key("pet") == binding.MODEL_KEY_PREFIX + "pet"


def test_field_value_prefers_submitted():
    target = clinic.Owner(first_name="George", city="Madison")
    result = binding.BindingResult("owner", target=target, submitted={"first_name": "Jorge"})

    assert result.field_value("first_name") == "Jorge"
    assert result.field_value("city") == "Madison"
    assert result.field_value("nickname") is None


def test_field_value_of_repeated_field():
    result = binding.BindingResult("pet", submitted={"type": ["cat", "dog"], "name": []})

    assert result.field_value("type") == "cat"
    assert result.field_value("name") is None


def test_errors_keep_order():
    result = binding.BindingResult("owner")
    result.reject_value("telephone", "first")
    result.reject_value("telephone", "second")
    result.reject("global")

    assert result.has_errors
    assert result.field_errors("telephone") == ["first", "second"]
    assert result.error_messages() == ["global", "first", "second"]
    assert result.field_errors("city") == []


def test_result_without_errors():
    result = binding.BindingResult("owner")

    assert not result.has_errors
    assert not result.has_field_errors("city")
    assert result.error_messages() == []


def test_from_validation_error():
    submitted = {"name": "Leo", "count": "many"}
    with pytest.raises(pydantic.ValidationError) as exc_info:
        Sample.model_validate(submitted)

    result = binding.from_validation_error("sample", exc_info.value, submitted)

    assert result.name == "sample"
    assert result.target is None
    assert result.has_field_errors("count")
    assert not result.has_field_errors("name")
    assert result.field_value("count") == "many"
    assert result.global_errors == []


def test_from_validation_error_of_model():
    submitted = {"name": "Leo", "count": "-1"}
    with pytest.raises(pydantic.ValidationError) as exc_info:
        Sample.model_validate(submitted)

    result = binding.from_validation_error("sample", exc_info.value, submitted)

    assert result.global_errors == ["count must not be negative"]
    assert result.field_errors_by_name == {}
