# SPDX-FileCopyrightText: 2025 Weibo, Inc.
#
# SPDX-License-Identifier: Apache-2.0

# coding: utf-8
"""
Global configuration for the flight price finder agent.
"""

from flight_finder.config.env_reader import get_env

# Model and turn budget are fixed for every run
DEFAULT_MODEL = "haiku"
MAX_TURNS = 50

# chrome-devtools MCP server launch
MCP_LAUNCHER_COMMAND = "npx"
CHROME_DEVTOOLS_MCP_PACKAGE = "chrome-devtools-mcp@latest"

# CHROME_PATH equal to this value selects the container variant
CONTAINER_CHROME_PATH = "/usr/bin/chromium"


def get_chrome_path() -> str:
    """Get the Chrome executable path configured for this process, or ""."""
    return get_env("CHROME_PATH", "") or ""
