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

import enum
import os
from typing import Final

import decouple


class Mode(enum.Enum):
    Debug = "Debug"
    Production = "Production"
    Testing = "Testing"


_global_mode: Mode | None = None


class AppConfig:
    PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
    SECRET_KEY = decouple.config("SECRET_KEY", default="petclinic-development-key")
    DEBUG = False
    TESTING = False
    TEMPLATES_AUTO_RELOAD = False
    WTF_CSRF_ENABLED = True

    # Owners shown per page of search results
    PAGE_SIZE: int = decouple.config("PAGE_SIZE", default=5, cast=int)
    # Route timings are only written when this is set
    PERFORMANCE_LOG_FILE: str | None = decouple.config("PERFORMANCE_LOG_FILE", default=None)

    # Name, path, title, glyph
    MENUS: tuple[tuple[str, str, str, str], ...] = (
        ("home", "/", "Home", "home"),
        ("owners", "/owners/find", "Find owners", "search"),
        ("error", "/oups", "Error", "exclamation-triangle"),
    )


class ProductionConfig(AppConfig): ...


class DebugConfig(AppConfig):
    DEBUG = True
    TEMPLATES_AUTO_RELOAD = True


class TestingConfig(AppConfig):
    TESTING = True
    WTF_CSRF_ENABLED = False
    PERFORMANCE_LOG_FILE = None


_CONFIG_DICT: Final = {
    Mode.Debug: DebugConfig,
    Mode.Production: ProductionConfig,
    Mode.Testing: TestingConfig,
}


def get() -> type[AppConfig]:
    try:
        return _CONFIG_DICT[get_mode()]
    except KeyError:
        exit("Error: Invalid <mode>. Expected values [Debug, Production, Testing].")


def get_mode() -> Mode:
    global _global_mode

    if _global_mode is None:
        if decouple.config("TESTING", default=False, cast=bool):
            _global_mode = Mode.Testing
        elif decouple.config("PRODUCTION", default=False, cast=bool):
            _global_mode = Mode.Production
        else:
            _global_mode = Mode.Debug

    return _global_mode
