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

"""server.py"""

import traceback
from typing import Any

import quart
import quart.app
import quart_wtf
import werkzeug.exceptions as exceptions

import petclinic.blueprints as blueprints
import petclinic.config as config
import petclinic.log as log
import petclinic.page as page
import petclinic.storage as storage
import petclinic.template as template
import petclinic.web as web

app: quart.app.Quart | None = None


def app_create_base(app_config: type[config.AppConfig]) -> quart.app.Quart:
    """Create the base Quart application."""
    app = quart.Quart(__name__)
    app.config.from_object(app_config)
    return app


def app_setup_context(app: quart.app.Quart) -> None:
    """Setup application context processor."""

    @app.context_processor
    async def app_wide() -> dict[str, Any]:
        import petclinic.get as get
        import petclinic.util as util

        return {
            "as_url": util.as_url,
            "routes": get,
        }


def app_setup_errors(app: quart.app.Quart) -> None:
    """Render errors with their own pages."""

    @app.errorhandler(Exception)
    async def handle_any_exception(error: Exception) -> Any:
        # Required to give to the error.html template
        tb = traceback.format_exc()
        log.exception("Unhandled exception")
        return await _error_page("error.html", str(error), tb, 500), 500

    @app.errorhandler(exceptions.HTTPException)
    async def handle_http_exception(error: exceptions.HTTPException) -> Any:
        code = error.code or 500
        return await _error_page("error.html", error.description or str(error), "", code), code

    @app.errorhandler(web.WebException)
    async def handle_web_exception(error: web.WebException) -> Any:
        return await _error_page("error.html", str(error), "", error.errorcode), error.errorcode

    @app.errorhandler(404)
    async def handle_not_found(error: Exception) -> Any:
        return await _error_page("notfound.html", "404 Not Found", "", 404), 404


def app_setup_logging(app: quart.app.Quart, config_mode: config.Mode, app_config: type[config.AppConfig]) -> None:
    """Setup application logging."""
    log.configure(config_mode)
    log.performance_init(app_config.PERFORMANCE_LOG_FILE)

    # Only log in the worker process
    @app.before_serving
    async def log_debug_info() -> None:
        if config_mode == config.Mode.Debug:
            app.logger.info(f"DEBUG        = {config_mode == config.Mode.Debug}")
            app.logger.info(f"ENVIRONMENT  = {config_mode.value}")
            app.logger.info(f"PAGE_SIZE    = {app_config.PAGE_SIZE}")


def create_app(app_config: type[config.AppConfig], seed: bool = True) -> quart.app.Quart:
    """Create and configure the application."""
    config_mode = config.get_mode()
    app = app_create_base(app_config)

    quart_wtf.CSRFProtect(app)
    storage.init(app, seed=seed)
    blueprints.register(app)
    template.register(app)
    app_setup_context(app)
    app_setup_errors(app)
    app_setup_logging(app, config_mode, app_config)
    return app


def main() -> None:
    """Quart debug server"""
    global app
    if app is None:
        app = create_app(config.get())
    app.run(port=8080)


async def _error_page(template_name: str, error: str, tb: str, status_code: int) -> str:
    attributes = {"error": error, "traceback": tb, "status_code": status_code}
    return await template.render(page.Page(template_name, active="error", attributes=attributes))


if __name__ == "__main__":
    main()
else:
    app = create_app(config.get())
