#!/usr/bin/env python

# SPDX-FileCopyrightText: 2025 Weibo, Inc.
#
# SPDX-License-Identifier: Apache-2.0

# -*- coding: utf-8 -*-

"""
Common logging module, configures and provides logging functionality for the application.

Supports automatic request_id injection into log messages via ContextVar, so
all lines written while one agent run is consumed share the same id.
"""

import logging
import os
import sys

from shared.telemetry.context import get_request_id


class RequestIdFilter(logging.Filter):
    """
    A logging filter that adds request_id to log records.

    The id is read from the ContextVar set by shared.telemetry.context.set_request_id().
    """

    def filter(self, record: logging.LogRecord) -> bool:
        request_id = get_request_id()
        record.request_id = request_id if request_id else "-"
        return True


class NonBlockingStreamHandler(logging.StreamHandler):
    """
    Stream handler that drops a record instead of raising when the stream would block
    """

    def emit(self, record):
        try:
            super().emit(record)
        except BlockingIOError:
            pass


def setup_logger(
    name,
    level=logging.INFO,
    format="%(asctime)s - [%(request_id)s] - [%(name)s] - %(levelname)s - %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
    stream=None,
):
    """
    Configure and return a logger instance

    If environment variable LOG_LEVEL is set to DEBUG, force log level to DEBUG.

    Args:
        name: Logger name
        level: Logging level, default is INFO
        format: Log message format, default includes logger name and request_id
        datefmt: Date format for timestamps
        stream: Output stream, default is stderr so stdout stays free for event consumers

    Returns:
        logging.Logger: Configured logger instance
    """
    env_log_level = os.environ.get("LOG_LEVEL")
    if env_log_level and env_log_level.upper() == "DEBUG":
        level = logging.DEBUG

    logger = logging.getLogger(name)

    # Logger already configured, just update level
    if logger.handlers:
        logger.setLevel(level)
        return logger

    logger.setLevel(level)
    logger.propagate = False

    handler = NonBlockingStreamHandler(stream or sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(format, datefmt))
    handler.addFilter(RequestIdFilter())
    logger.addHandler(handler)

    return logger
