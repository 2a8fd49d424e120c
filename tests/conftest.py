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

import os
import pathlib

import jinja2
import pytest
import quart.app

os.environ.setdefault("TESTING", "true")

import petclinic.config as config  # noqa: E402
import petclinic.directive as directive  # noqa: E402
import petclinic.server as server  # noqa: E402

TEMPLATES = pathlib.Path(__file__).parent.parent / "petclinic" / "templates"


@pytest.fixture
def app() -> quart.app.Quart:
    return server.create_app(config.TestingConfig)


@pytest.fixture
def client(app: quart.app.Quart):
    return app.test_client()


@pytest.fixture
def environment() -> jinja2.Environment:
    env = jinja2.Environment(loader=jinja2.FileSystemLoader(TEMPLATES), enable_async=True, autoescape=True)
    directive.register(env)
    return env
