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

import logging
import pathlib

import pytest

import petclinic.log as log


class Checker:
    def name(self) -> str:
        return log.caller_name(depth=0)


def test_caller_name_of_function():
    assert log.caller_name(depth=0) == f"{__name__}.test_caller_name_of_function"


def test_caller_name_of_method():
    assert Checker().name() == f"{__name__}.Checker.name"


def test_events_use_caller_logger(caplog: pytest.LogCaptureFixture):
    with caplog.at_level(logging.INFO):
        log.info("Saved owner %s", 1)

    assert caplog.records[-1].name == f"{__name__}.test_events_use_caller_logger"
    assert caplog.records[-1].getMessage() == "Saved owner 1"
    assert caplog.records[-1].funcName == "test_events_use_caller_logger"


def test_performance_disabled():
    log.performance_init(None)
    log.performance("%s %s", "GET", "/")

    assert log.PERFORMANCE is None


def test_performance_enabled(tmp_path: pathlib.Path):
    path = tmp_path / "performance.log"
    log.performance_init(str(path))
    try:
        assert log.PERFORMANCE is not None
        assert not log.PERFORMANCE.propagate
    finally:
        log.performance_init(None)
