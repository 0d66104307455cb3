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
Prefix Commands

Text commands triggered by the server's configured prefix (default "!"):
ping, rm, help and setprefix.
"""

import logging

from discord.ext import commands

from commands.help_text import build_help_text
from errors import AuthorizationError, PersistError, ValidationError
from prefixes import PrefixStore
from reminders import ReminderScheduler, parse_reminder_input

logger = logging.getLogger("remindbot.commands.prefix")

DM_FAILED_NOTICE = "I couldn't send you a DM. Make sure your DMs are enabled."
NOT_ADMIN_NOTICE = "❌ You need administrator permissions to change the prefix."
GUILD_ONLY_NOTICE = "❌ The prefix can only be changed inside a server."


async def ensure_guild_admin(ctx: commands.Context) -> bool:
    """Check that the invoker is an administrator of the current server."""
    if ctx.guild is None:
        raise AuthorizationError(GUILD_ONLY_NOTICE)
    permissions = getattr(ctx.author, "guild_permissions", None)
    if permissions is None or not permissions.administrator:
        raise AuthorizationError(NOT_ADMIN_NOTICE)
    return True


class PrefixCommands(commands.Cog):
    """
    Text commands.

    Commands:
    - <prefix>ping - Reply "pong"
    - <prefix>rm <minutes> <message> - Set a reminder
    - <prefix>help - List available commands
    - <prefix>setprefix <prefix> - Change this server's prefix (admins only)
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

    @commands.command(name="ping")
    async def ping(self, ctx: commands.Context):
        """Reply "pong"."""
        await ctx.reply("pong")

    @commands.command(name="rm")
    async def remind(self, ctx: commands.Context, *, text: str = ""):
        """Schedule a DM reminder; reports back here if the DM fails."""
        prefix = ctx.clean_prefix
        try:
            delay_minutes, message = parse_reminder_input(text)
        except ValidationError as e:
            if e.field == "delay":
                await ctx.reply(
                    f"Please specify a valid time in minutes. Example: `{prefix}rm 5 Take a break!`"
                )
            else:
                await ctx.reply(
                    f"Please provide a reminder message. Example: `{prefix}rm 10 Stretch your legs!`"
                )
            return

        async def notify_failure(error):
            await ctx.reply(DM_FAILED_NOTICE)

        reminder = self.scheduler.schedule(
            delay_minutes, message, ctx.author, on_failure=notify_failure
        )
        await ctx.reply(reminder.acknowledgement)

    @commands.command(name="help")
    async def show_help(self, ctx: commands.Context):
        prefix = self.prefix_store.resolve(ctx.guild.id if ctx.guild else None)
        await ctx.reply(build_help_text(prefix, slash_first=False))

    @commands.command(name="setprefix")
    @commands.check(ensure_guild_admin)
    async def setprefix(self, ctx: commands.Context, *, text: str = ""):
        """Change this server's prefix. Only the first word is used."""
        parts = text.split()
        if not parts:
            await ctx.reply(
                f"Please provide a new prefix. Example: `{ctx.clean_prefix}setprefix ?`"
            )
            return

        new_prefix = parts[0]
        self.prefix_store.set(ctx.guild.id, new_prefix)
        logger.info(f"User {ctx.author.id} changed prefix of guild {ctx.guild.id}")
        await ctx.reply(f"✅ Prefix changed to **{new_prefix}**")

    async def cog_command_error(self, ctx: commands.Context, error: commands.CommandError):
        """Report permission and persistence failures to the invoker."""
        if isinstance(error, AuthorizationError):
            await ctx.reply(str(error))
            return

        original = getattr(error, "original", error)
        if isinstance(original, PersistError):
            await ctx.reply("❌ Couldn't save the new prefix. Please try again later.")
            return

        logger.error(
            f"Error in command {ctx.command}: {original}",
            exc_info=(type(original), original, original.__traceback__),
        )
