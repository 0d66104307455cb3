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

"""Tests for the /remind and /help slash commands."""

import sys
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from commands.reminder_commands import USAGE_HINT, ReminderCommands
from conftest import make_forbidden, make_user
from prefixes import PrefixStore
from reminders import ReminderState


def make_interaction(guild_id=555):
    interaction = MagicMock()
    interaction.user = make_user()
    interaction.guild_id = guild_id
    interaction.response.send_message = AsyncMock()
    interaction.followup.send = AsyncMock()
    return interaction


@pytest.fixture
def store(tmp_path):
    return PrefixStore(tmp_path / "prefixes.json")


@pytest.fixture
def cog(scheduler, store):
    return ReminderCommands(MagicMock(), scheduler, store)


class TestRemind:

    @pytest.mark.asyncio
    async def test_schedules_and_acknowledges_ephemerally(self, cog, scheduler, clock):
        interaction = make_interaction()

        await cog.remind.callback(cog, interaction, "5 sleep")

        interaction.response.send_message.assert_awaited_once_with(
            "✅ Reminder set for 5 minute(s).", ephemeral=True
        )
        (reminder,) = scheduler.scheduled
        await reminder.task
        assert clock.sleeps == [300]
        interaction.user.send.assert_awaited_once_with("⏰ Reminder: sleep")

    @pytest.mark.asyncio
    @pytest.mark.parametrize("text", ["", "sleep", "0 sleep", "-1 sleep", "5", "5   "])
    async def test_invalid_input(self, cog, scheduler, text):
        interaction = make_interaction()

        await cog.remind.callback(cog, interaction, text)

        interaction.response.send_message.assert_awaited_once_with(
            USAGE_HINT, ephemeral=True
        )
        assert scheduler.pending == 0
        assert scheduler.scheduled == []

    @pytest.mark.asyncio
    @pytest.mark.skipif(
        not hasattr(sys, "get_int_max_str_digits"),
        reason="interpreter has no integer string conversion limit",
    )
    async def test_too_many_digits_gets_usage_hint(self, cog, scheduler):
        interaction = make_interaction()

        await cog.remind.callback(cog, interaction, "9" * 5000 + " sleep")

        interaction.response.send_message.assert_awaited_once_with(
            USAGE_HINT, ephemeral=True
        )
        assert scheduler.scheduled == []

    @pytest.mark.asyncio
    async def test_dm_failure_sends_no_reply(self, cog, scheduler):
        interaction = make_interaction()
        interaction.user.send.side_effect = make_forbidden()

        await cog.remind.callback(cog, interaction, "5 sleep")
        (reminder,) = scheduler.scheduled
        state = await reminder.task

        assert state == ReminderState.DELIVERY_FAILED
        assert interaction.response.send_message.await_count == 1
        interaction.followup.send.assert_not_awaited()


class TestHelp:

    @pytest.mark.asyncio
    async def test_help_is_ephemeral_and_lists_both_surfaces(self, cog, store):
        store.set(555, "$")
        interaction = make_interaction(guild_id=555)

        await cog.show_help.callback(cog, interaction)

        args, kwargs = interaction.response.send_message.await_args
        assert kwargs == {"ephemeral": True}
        assert "`/help`" in args[0]
        assert "`$rm <time> <message>`" in args[0]
        assert args[0].index("/remind") < args[0].index("$rm")

    @pytest.mark.asyncio
    async def test_help_in_dm_uses_default_prefix(self, cog):
        interaction = make_interaction(guild_id=None)

        await cog.show_help.callback(cog, interaction)

        assert "`!setprefix <prefix>`" in interaction.response.send_message.await_args.args[0]
