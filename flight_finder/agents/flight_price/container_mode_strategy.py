#!/usr/bin/env python

# SPDX-FileCopyrightText: 2025 Weibo, Inc.
#
# SPDX-License-Identifier: Apache-2.0

# -*- coding: utf-8 -*-

"""
Container Mode Strategy for the chrome-devtools MCP server.

Containers ship Chromium at a fixed path and cannot use the Chrome sandbox,
so the binary is passed explicitly and sandboxing, /dev/shm and the GPU are
disabled.
"""

from typing import List, Sequence

from flight_finder.agents.flight_price.mode_strategy import (
    DeploymentMode,
    ExecutionModeStrategy,
)
from flight_finder.config import config

CONTAINER_CHROME_FLAGS = (
    "--no-sandbox",
    "--disable-setuid-sandbox",
    "--disable-dev-shm-usage",
    "--disable-gpu",
)


class ContainerModeStrategy(ExecutionModeStrategy):
    """Strategy for browsers running inside a container."""

    mode = DeploymentMode.CONTAINER

    def build_chrome_args(self, base_args: Sequence[str]) -> List[str]:
        """Append the executable path and the sandbox-disabling Chrome flags.

        Returns:
            base_args + --executable-path + one --chrome-arg per flag
        """
        return [
            *base_args,
            f"--executable-path={config.CONTAINER_CHROME_PATH}",
            *(f"--chrome-arg={flag}" for flag in CONTAINER_CHROME_FLAGS),
        ]
