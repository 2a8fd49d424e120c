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

import inspect
import logging
import logging.handlers
import queue
from typing import TYPE_CHECKING, Any, Final

import rich.logging as rich_logging

if TYPE_CHECKING:
    import petclinic.config as config

PACKAGE: Final = "petclinic"
PERFORMANCE: logging.Logger | None = None


def caller_name(depth: int = 1) -> str:
    frame = inspect.currentframe()
    for _ in range(depth + 1):
        if frame is None:
            break
        frame = frame.f_back

    if frame is None:
        return __name__

    module = frame.f_globals.get("__name__", "<unknown>")
    func = frame.f_code.co_name
    if func == "<module>":
        return module

    cls_name = None
    if "self" in frame.f_locals:
        cls_name = frame.f_locals["self"].__class__.__name__
    elif ("cls" in frame.f_locals) and isinstance(frame.f_locals["cls"], type):
        cls_name = frame.f_locals["cls"].__name__

    if cls_name:
        return f"{module}.{cls_name}.{func}"
    return f"{module}.{func}"


def configure(mode: config.Mode) -> None:
    """Send all records through rich, with the package at DEBUG in debug mode."""
    import petclinic.config as config

    logging.basicConfig(
        format="[%(asctime)s.%(msecs)03d  ] [%(process)d] %(message)s",
        level=logging.INFO,
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=[rich_logging.RichHandler(rich_tracebacks=True, show_time=False)],
    )
    if mode == config.Mode.Debug:
        logging.getLogger(PACKAGE).setLevel(logging.DEBUG)


def debug(msg: str, *args: Any, **kwargs: Any) -> None:
    _event(logging.DEBUG, msg, *args, **kwargs)


def error(msg: str, *args: Any, **kwargs: Any) -> None:
    _event(logging.ERROR, msg, *args, **kwargs)


def exception(msg: str, *args: Any, **kwargs: Any) -> None:
    kwargs.setdefault("exc_info", True)
    _event(logging.ERROR, msg, *args, **kwargs)


def info(msg: str, *args: Any, **kwargs: Any) -> None:
    _event(logging.INFO, msg, *args, **kwargs)


def performance(msg: str, *args: Any, **kwargs: Any) -> None:
    if PERFORMANCE is not None:
        PERFORMANCE.info(msg, *args, **kwargs)


def performance_init(path: str | None) -> None:
    global PERFORMANCE
    if path is None:
        PERFORMANCE = None
        return
    PERFORMANCE = _performance_logger(path)


def warning(msg: str, *args: Any, **kwargs: Any) -> None:
    _event(logging.WARNING, msg, *args, **kwargs)


def _event(level: int, msg: str, *args: Any, stacklevel: int = 3, **kwargs: Any) -> None:
    # Frame 1 is _event, 2 is the log.* helper, 3 is whoever called it
    logger = logging.getLogger(caller_name(depth=2))
    logger.log(level, msg, *args, stacklevel=stacklevel, **kwargs)


def _performance_logger(path: str) -> logging.Logger:
    class MicrosecondsFormatter(logging.Formatter):
        default_msec_format = "%s.%03d"

    performance: Final = logging.getLogger(f"{PACKAGE}.performance")
    handler: Final = logging.FileHandler(path, encoding="utf-8")
    handler.setFormatter(MicrosecondsFormatter("%(asctime)s - %(message)s"))
    records: queue.Queue[logging.LogRecord] = queue.Queue(-1)
    listener = logging.handlers.QueueListener(records, handler)
    listener.start()
    performance.addHandler(logging.handlers.QueueHandler(records))
    performance.setLevel(logging.INFO)
    # Otherwise timings also reach the terminal
    performance.propagate = False
    return performance
