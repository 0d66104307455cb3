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

"""Tests for environment configuration."""

import sys
from pathlib import Path
from unittest.mock import patch

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from config import BotConfig


class TestBotConfig:

    def test_default_config(self):
        config = BotConfig()
        assert config.token is None
        assert config.application_id is None
        assert config.prefix_file == "prefixes.json"
        assert config.default_prefix == "!"

    def test_config_from_env_default(self):
        with patch.dict("os.environ", {}, clear=True):
            config = BotConfig.from_env()
            assert config.token is None
            assert config.application_id is None
            assert config.prefix_file == "prefixes.json"

    def test_config_from_env_custom_values(self):
        with patch.dict("os.environ", {
            "DISCORD_BOT_TOKEN": "abc.def",
            "DISCORD_APPLICATION_ID": "123456789012345678",
            "PREFIX_FILE": "/data/prefixes.json",
        }, clear=True):
            config = BotConfig.from_env()
            assert config.token == "abc.def"
            assert config.application_id == 123456789012345678
            assert config.prefix_file == "/data/prefixes.json"

    def test_non_numeric_application_id_ignored(self):
        with patch.dict("os.environ", {"DISCORD_APPLICATION_ID": "my-app"}, clear=True):
            assert BotConfig.from_env().application_id is None

    def test_empty_token_treated_as_missing(self):
        with patch.dict("os.environ", {"DISCORD_BOT_TOKEN": ""}, clear=True):
            assert BotConfig.from_env().token is None
