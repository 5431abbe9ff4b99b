# SPDX-FileCopyrightText: 2025 Weibo, Inc.
#
# SPDX-License-Identifier: Apache-2.0

"""Shared prompt templates module."""

from .flight_search import FLIGHT_SEARCH_SYSTEM_PROMPT

__all__ = [
    "FLIGHT_SEARCH_SYSTEM_PROMPT",
]
