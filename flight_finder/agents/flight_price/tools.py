#!/usr/bin/env python

# SPDX-FileCopyrightText: 2025 Weibo, Inc.
#
# SPDX-License-Identifier: Apache-2.0

# -*- coding: utf-8 -*-

"""
Browser tools the flight price finder agent is allowed to call.

The SDK exposes MCP tools as mcp__<server>__<tool>; only the names listed here
are passed in allowed_tools.
"""

from typing import List

MCP_SERVER_NAME = "chrome-devtools"

BROWSER_CAPABILITIES = (
    "click",
    "fill",
    "fill_form",
    "hover",
    "press_key",
    "navigate_page",
    "new_page",
    "list_pages",
    "select_page",
    "close_page",
    "wait_for",
    "take_screenshot",
    "take_snapshot",
)

ALLOWED_TOOLS = tuple(
    f"mcp__{MCP_SERVER_NAME}__{capability}" for capability in BROWSER_CAPABILITIES
)


def get_allowed_tools() -> List[str]:
    """Return a copy of the allow-list in its fixed order."""
    return list(ALLOWED_TOOLS)
