#!/usr/bin/env python

# SPDX-FileCopyrightText: 2025 Weibo, Inc.
#
# SPDX-License-Identifier: Apache-2.0

# -*- coding: utf-8 -*-

from flight_finder.agents.flight_price.container_mode_strategy import (
    ContainerModeStrategy,
)
from flight_finder.agents.flight_price.events import (
    AgentEvent,
    DoneEvent,
    EventType,
    ResultEvent,
    TextEvent,
    ToolEvent,
    UsageEvent,
)
from flight_finder.agents.flight_price.local_mode_strategy import LocalModeStrategy
from flight_finder.agents.flight_price.mode_strategy import (
    DeploymentMode,
    ExecutionModeStrategy,
    ModeStrategyFactory,
    resolve_deployment_mode,
)
from flight_finder.agents.flight_price.options import (
    build_chrome_devtools_args,
    build_mcp_server_config,
    get_options,
)
from flight_finder.agents.flight_price.response_processor import (
    events_from_message,
    stream_agent,
)
from flight_finder.agents.flight_price.tools import ALLOWED_TOOLS, get_allowed_tools

__all__ = [
    "ALLOWED_TOOLS",
    "AgentEvent",
    "ContainerModeStrategy",
    "DeploymentMode",
    "DoneEvent",
    "EventType",
    "ExecutionModeStrategy",
    "LocalModeStrategy",
    "ModeStrategyFactory",
    "ResultEvent",
    "TextEvent",
    "ToolEvent",
    "UsageEvent",
    "build_chrome_devtools_args",
    "build_mcp_server_config",
    "events_from_message",
    "get_allowed_tools",
    "get_options",
    "resolve_deployment_mode",
    "stream_agent",
]
