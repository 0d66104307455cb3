# remindbot - Discord Reminder Bot
# Copyright (c) 2025-2026 Slash Daemon slashdaemon@protonmail.com
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU Affero General Public License as published by
# the Free Software Foundation, version 3 of the License.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the
# GNU Affero General Public License for more details.
#
# You should have received a copy of the GNU Affero General Public License
# along with this program. If not, see <https://www.gnu.org/licenses/>.
#
# Commercial licensing: [slashdaemon@protonmail.com]

"""
Bot Configuration

Runtime settings read from environment variables (and a .env file, loaded
by the entry point before this runs).
"""

import logging
import os
from dataclasses import dataclass
from typing import Optional

logger = logging.getLogger("remindbot.config")

DEFAULT_PREFIX = "!"


@dataclass
class BotConfig:
    """Configuration for the Discord bot."""

    token: Optional[str] = None
    application_id: Optional[int] = None

    # Per-server prefix overrides
    prefix_file: str = "prefixes.json"
    default_prefix: str = DEFAULT_PREFIX

    @classmethod
    def from_env(cls) -> "BotConfig":
        """Create config from environment variables with defaults."""
        return cls(
            token=os.getenv("DISCORD_BOT_TOKEN") or None,
            application_id=_parse_application_id(os.getenv("DISCORD_APPLICATION_ID")),
            prefix_file=os.getenv("PREFIX_FILE", "prefixes.json"),
        )


def _parse_application_id(raw: Optional[str]) -> Optional[int]:
    if not raw:
        return None
    try:
        return int(raw.strip())
    except ValueError:
        logger.warning(f"Ignoring non-numeric DISCORD_APPLICATION_ID: {raw!r}")
        return None
