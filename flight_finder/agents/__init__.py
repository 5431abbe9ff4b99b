# SPDX-FileCopyrightText: 2025 Weibo, Inc.
#
# SPDX-License-Identifier: Apache-2.0

# -*- coding: utf-8 -*-
"""
Agent package initialization
"""

from flight_finder.agents.flight_price import get_options, stream_agent

__all__ = ["get_options", "stream_agent"]
