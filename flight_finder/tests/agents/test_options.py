# SPDX-FileCopyrightText: 2025 Weibo, Inc.
#
# SPDX-License-Identifier: Apache-2.0

"""
Tests for the chrome-devtools MCP launch config and the run options.
"""

import os
from unittest.mock import patch

from claude_agent_sdk import ClaudeAgentOptions

from flight_finder.agents.flight_price.options import (
    BASE_CHROME_DEVTOOLS_ARGS,
    build_chrome_devtools_args,
    build_mcp_server_config,
    get_options,
)
from shared.prompts import FLIGHT_SEARCH_SYSTEM_PROMPT

EXPECTED_BASE_ARGS = [
    "-y",
    "chrome-devtools-mcp@latest",
    "--headless",
    "--isolated",
    "--no-category-emulation",
    "--no-category-performance",
    "--no-category-network",
]

EXPECTED_CONTAINER_EXTRA_ARGS = [
    "--executable-path=/usr/bin/chromium",
    "--chrome-arg=--no-sandbox",
    "--chrome-arg=--disable-setuid-sandbox",
    "--chrome-arg=--disable-dev-shm-usage",
    "--chrome-arg=--disable-gpu",
]


class TestBuildChromeDevtoolsArgs:
    """Tests for build_chrome_devtools_args."""

    def test_base_args(self):
        assert list(BASE_CHROME_DEVTOOLS_ARGS) == EXPECTED_BASE_ARGS

    def test_local_mode_uses_base_args_only(self):
        assert build_chrome_devtools_args("local") == EXPECTED_BASE_ARGS

    def test_container_mode_appends_sandbox_args(self):
        assert (
            build_chrome_devtools_args("container")
            == EXPECTED_BASE_ARGS + EXPECTED_CONTAINER_EXTRA_ARGS
        )

    def test_container_chrome_path_env_selects_container(self):
        with patch.dict(os.environ, {"CHROME_PATH": "/usr/bin/chromium"}):
            args = build_chrome_devtools_args()
        assert args == EXPECTED_BASE_ARGS + EXPECTED_CONTAINER_EXTRA_ARGS

    def test_other_chrome_path_env_selects_local(self):
        with patch.dict(os.environ, {"CHROME_PATH": "/opt/google/chrome/chrome"}):
            args = build_chrome_devtools_args()
        assert args == EXPECTED_BASE_ARGS

    def test_absent_chrome_path_selects_local(self, tmp_path):
        with patch.dict(
            os.environ, {"FLIGHT_FINDER_CONFIG_DIR": str(tmp_path)}, clear=True
        ):
            args = build_chrome_devtools_args()
        assert args == EXPECTED_BASE_ARGS

    def test_each_call_returns_a_new_list(self):
        first = build_chrome_devtools_args("local")
        first.append("--extra")
        assert build_chrome_devtools_args("local") == EXPECTED_BASE_ARGS


class TestBuildMcpServerConfig:
    """Tests for build_mcp_server_config."""

    def test_stdio_npx_config(self):
        assert build_mcp_server_config("local") == {
            "type": "stdio",
            "command": "npx",
            "args": EXPECTED_BASE_ARGS,
        }

    def test_container_config(self):
        server = build_mcp_server_config("container")
        assert server["args"][-5:] == EXPECTED_CONTAINER_EXTRA_ARGS


class TestGetOptions:
    """Tests for get_options."""

    def test_fixed_run_configuration(self):
        options = get_options()

        assert isinstance(options, ClaudeAgentOptions)
        assert options.model == "haiku"
        assert options.max_turns == 50
        assert options.system_prompt == FLIGHT_SEARCH_SYSTEM_PROMPT
        assert len(options.allowed_tools) == 13

    def test_not_standalone_registers_no_mcp_servers(self):
        options = get_options(standalone=False)
        assert not options.mcp_servers

    def test_standalone_registers_chrome_devtools_server(self):
        options = get_options(standalone=True, mode="container")

        assert list(options.mcp_servers) == ["chrome-devtools"]
        server = options.mcp_servers["chrome-devtools"]
        assert server["command"] == "npx"
        assert server["args"] == EXPECTED_BASE_ARGS + EXPECTED_CONTAINER_EXTRA_ARGS

    def test_env_is_a_copy_of_process_environment(self):
        with patch.dict(os.environ, {"FLIGHT_TEST_MARKER": "before"}):
            options = get_options()
            os.environ["FLIGHT_TEST_MARKER"] = "after"

            assert options.env["FLIGHT_TEST_MARKER"] == "before"
            assert options.env is not os.environ

    def test_allowed_tools_are_not_shared_between_runs(self):
        first = get_options()
        first.allowed_tools.append("mcp__chrome-devtools__evaluate_script")

        assert len(get_options().allowed_tools) == 13
