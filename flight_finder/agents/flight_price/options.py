#!/usr/bin/env python

# SPDX-FileCopyrightText: 2025 Weibo, Inc.
#
# SPDX-License-Identifier: Apache-2.0

# -*- coding: utf-8 -*-

"""
Claude Agent SDK options for the flight price finder agent.

Builds the chrome-devtools MCP server launch config and the per-run
ClaudeAgentOptions. Everything is built fresh on each call.
"""

import os
from typing import List, Optional

from claude_agent_sdk import ClaudeAgentOptions
from claude_agent_sdk.types import McpStdioServerConfig

from flight_finder.agents.flight_price.mode_strategy import ModeStrategyFactory
from flight_finder.agents.flight_price.tools import MCP_SERVER_NAME, get_allowed_tools
from flight_finder.config import config
from shared.logger import setup_logger
from shared.prompts import FLIGHT_SEARCH_SYSTEM_PROMPT

logger = setup_logger("flight_price_options")

BASE_CHROME_DEVTOOLS_ARGS = (
    "-y",
    config.CHROME_DEVTOOLS_MCP_PACKAGE,
    "--headless",
    "--isolated",
    "--no-category-emulation",
    "--no-category-performance",
    "--no-category-network",
)


def build_chrome_devtools_args(mode: Optional[str] = None) -> List[str]:
    """
    Build the chrome-devtools MCP server arguments.

    Args:
        mode: "container" or "local"; resolved from CHROME_PATH when omitted

    Returns:
        List of npx arguments
    """
    strategy = ModeStrategyFactory.create(mode)
    return strategy.build_chrome_args(BASE_CHROME_DEVTOOLS_ARGS)


def build_mcp_server_config(mode: Optional[str] = None) -> McpStdioServerConfig:
    """Build the stdio launch config for the chrome-devtools MCP server."""
    return {
        "type": "stdio",
        "command": config.MCP_LAUNCHER_COMMAND,
        "args": build_chrome_devtools_args(mode),
    }


def get_options(standalone: bool = False, mode: Optional[str] = None) -> ClaudeAgentOptions:
    """
    Build the options for one agent run.

    Args:
        standalone: Register the chrome-devtools MCP server in the options.
                    Hosts that register the server themselves leave this off.
        mode: Deployment mode for the MCP server, only used when standalone

    Returns:
        ClaudeAgentOptions instance
    """
    options = {
        "env": dict(os.environ),
        "system_prompt": FLIGHT_SEARCH_SYSTEM_PROMPT,
        "model": config.DEFAULT_MODEL,
        "allowed_tools": get_allowed_tools(),
        "max_turns": config.MAX_TURNS,
    }
    if standalone:
        mcp_server = build_mcp_server_config(mode)
        logger.info(f"Registering MCP server '{MCP_SERVER_NAME}': {mcp_server['args']}")
        options["mcp_servers"] = {MCP_SERVER_NAME: mcp_server}

    return ClaudeAgentOptions(**options)
