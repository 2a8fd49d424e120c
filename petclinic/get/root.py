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

import petclinic.blueprints.get as get
import petclinic.page as page
import petclinic.template as template


@get.public("/")
async def welcome() -> str:
    return await template.render(page.Page("welcome.html", active="home"))


@get.public("/oups")
async def oups() -> str:
    """Fail on purpose, to show the error page."""
    raise RuntimeError("Expected: route used to showcase what happens when an exception is thrown")
