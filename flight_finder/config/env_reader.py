# SPDX-FileCopyrightText: 2025 Weibo, Inc.
#
# SPDX-License-Identifier: Apache-2.0

"""
Environment variable reader with file-based fallback.

The reading priority is:
1. Environment variable (os.environ)
2. File at {config_dir}/{key.lower()}
3. Default value
"""

import os
from typing import Optional

from shared.logger import setup_logger

logger = setup_logger(__name__)

DEFAULT_CONFIG_DIR = os.path.join("~", ".flight_finder", "config")


def get_config_dir() -> str:
    """Get the configuration directory path."""
    return os.path.expanduser(os.getenv("FLIGHT_FINDER_CONFIG_DIR", DEFAULT_CONFIG_DIR))


def get_env(key: str, default: Optional[str] = None) -> Optional[str]:
    """
    Get configuration value with file-based fallback.

    Args:
        key: Configuration key (e.g., "CHROME_PATH")
        default: Default value if not found

    Returns:
        Configuration value or default
    """
    value = os.environ.get(key)
    if value is not None:
        return value

    file_path = os.path.join(get_config_dir(), key.lower())
    if os.path.exists(file_path):
        try:
            with open(file_path, "r") as f:
                content = f.read().strip()
                if content:
                    logger.debug(f"Read config '{key}' from file: {file_path}")
                    return content
        except OSError as e:
            logger.warning(f"Failed to read config file {file_path}: {e}")

    return default

