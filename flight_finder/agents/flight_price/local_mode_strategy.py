#!/usr/bin/env python

# SPDX-FileCopyrightText: 2025 Weibo, Inc.
#
# SPDX-License-Identifier: Apache-2.0

# -*- coding: utf-8 -*-

"""
Local Mode Strategy for the chrome-devtools MCP server.

The MCP server finds the locally installed Chrome itself.
"""

from typing import List, Sequence

from flight_finder.agents.flight_price.mode_strategy import (
    DeploymentMode,
    ExecutionModeStrategy,
)


class LocalModeStrategy(ExecutionModeStrategy):
    """Strategy for a locally installed browser."""

    mode = DeploymentMode.LOCAL

    def build_chrome_args(self, base_args: Sequence[str]) -> List[str]:
        return list(base_args)
