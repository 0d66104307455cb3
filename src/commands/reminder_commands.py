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
Reminder Slash Commands

/remind and /help. Responses are ephemeral.
"""

import logging

import discord
from discord import app_commands
from discord.ext import commands

from commands.help_text import build_help_text
from errors import ValidationError
from prefixes import PrefixStore
from reminders import ReminderScheduler, parse_reminder_input

logger = logging.getLogger("remindbot.commands.reminder")

USAGE_HINT = "❌ Incorrect usage! Try: `/remind 5 sleep`"


class ReminderCommands(commands.Cog):
    """
    Slash commands for reminders.

    Commands:
    - /remind <input> - Set a reminder, e.g. "5 sleep"
    - /help - List available commands
    """

    def __init__(
        self,
        bot: commands.Bot,
        scheduler: ReminderScheduler,
        prefix_store: PrefixStore,
    ):
        self.bot = bot
        self.scheduler = scheduler
        self.prefix_store = prefix_store

    @app_commands.command(name="remind", description="Set a reminder")
    @app_commands.rename(text="input")
    @app_commands.describe(
        text="Time in minutes followed by the reminder message (e.g., '5 sleep')"
    )
    async def remind(self, interaction: discord.Interaction, text: str):
        """Schedule a DM reminder for the invoking user."""
        try:
            delay_minutes, message = parse_reminder_input(text)
            # The interaction token expires long before most reminders fire,
            # so delivery failures are only logged here.
            reminder = self.scheduler.schedule(delay_minutes, message, interaction.user)
        except ValidationError as e:
            logger.debug(f"Rejected /remind from {interaction.user.id}: {e}")
            await interaction.response.send_message(USAGE_HINT, ephemeral=True)
            return

        await interaction.response.send_message(reminder.acknowledgement, ephemeral=True)

    @app_commands.command(name="help", description="Show available commands")
    async def show_help(self, interaction: discord.Interaction):
        """List both command surfaces."""
        prefix = self.prefix_store.resolve(interaction.guild_id)
        await interaction.response.send_message(
            build_help_text(prefix, slash_first=True), ephemeral=True
        )
