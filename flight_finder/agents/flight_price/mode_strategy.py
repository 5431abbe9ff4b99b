#!/usr/bin/env python

# SPDX-FileCopyrightText: 2025 Weibo, Inc.
#
# SPDX-License-Identifier: Apache-2.0

# -*- coding: utf-8 -*-

"""
Deployment Mode Strategy Pattern for the chrome-devtools MCP server.

The browser runs either inside a container (explicit Chromium binary, sandbox
disabled) or locally (the MCP server discovers Chrome on its own). Each
strategy appends its mode-specific launch arguments to the shared base
arguments.
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import List, Optional, Sequence

from flight_finder.config import config
from shared.logger import setup_logger

logger = setup_logger("mode_strategy")


class DeploymentMode(str, Enum):
    """Where the browser for the MCP server runs."""

    CONTAINER = "container"
    LOCAL = "local"


def resolve_deployment_mode(chrome_path: Optional[str] = None) -> DeploymentMode:
    """Resolve the deployment mode from a Chrome executable path.

    Args:
        chrome_path: Chrome path to check. If not specified, uses
                     config.get_chrome_path().

    Returns:
        DeploymentMode.CONTAINER on an exact match with the container
        Chromium path, DeploymentMode.LOCAL otherwise
    """
    if chrome_path is None:
        chrome_path = config.get_chrome_path()

    if chrome_path == config.CONTAINER_CHROME_PATH:
        return DeploymentMode.CONTAINER
    return DeploymentMode.LOCAL


class ExecutionModeStrategy(ABC):
    """Abstract base class for deployment mode strategies."""

    mode: DeploymentMode

    @abstractmethod
    def build_chrome_args(self, base_args: Sequence[str]) -> List[str]:
        """Build the MCP server arguments for this mode.

        Args:
            base_args: Arguments shared by every mode

        Returns:
            A new list starting with base_args
        """
        pass


class ModeStrategyFactory:
    """Factory for creating deployment mode strategies."""

    @classmethod
    def create(cls, mode: Optional[str] = None) -> ExecutionModeStrategy:
        """Create a deployment mode strategy.

        Args:
            mode: "container" or "local". If not specified, the mode is
                  resolved from the configured Chrome path.

        Returns:
            ExecutionModeStrategy instance for the mode
        """
        if mode is None:
            mode = resolve_deployment_mode()

        if mode == DeploymentMode.CONTAINER:
            from flight_finder.agents.flight_price.container_mode_strategy import (
                ContainerModeStrategy,
            )

            logger.debug("Creating ContainerModeStrategy for container deployment")
            return ContainerModeStrategy()
        else:
            from flight_finder.agents.flight_price.local_mode_strategy import (
                LocalModeStrategy,
            )

            logger.debug("Creating LocalModeStrategy for local deployment")
            return LocalModeStrategy()
