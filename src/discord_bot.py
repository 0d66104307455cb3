"""
remindbot Discord Bot

Maintains the Discord connection and wires the reminder scheduler and the
per-server prefix store into the slash and prefix command surfaces.
"""

import asyncio
import os
from typing import Optional

import discord
from discord.ext import commands
from dotenv import load_dotenv

from commands.prefix_commands import PrefixCommands
from commands.reminder_commands import ReminderCommands
from config import BotConfig
from errors import PrefixStoreError, RegistrationError
from prefixes import PrefixStore
from reminders import ReminderScheduler

load_dotenv()

import logging

# Configure logging
logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger("remindbot")


def resolve_command_prefix(bot: "DiscordBot", message: discord.Message) -> str:
    """Return the text command prefix for the message's server."""
    guild_id = message.guild.id if message.guild else None
    return bot.prefix_store.resolve(guild_id)


class DiscordBot(commands.Bot):
    """Discord bot offering DM reminders through slash and prefix commands."""

    def __init__(
        self,
        config: BotConfig,
        prefix_store: Optional[PrefixStore] = None,
        scheduler: Optional[ReminderScheduler] = None,
    ):
        intents = discord.Intents.default()
        intents.message_content = True
        intents.guilds = True
        intents.messages = True
        intents.dm_messages = True

        super().__init__(
            command_prefix=resolve_command_prefix,
            intents=intents,
            help_command=None,
            application_id=config.application_id,
        )

        self.config = config
        if prefix_store is None:
            prefix_store = PrefixStore(
                config.prefix_file, default_prefix=config.default_prefix
            )
        self.prefix_store = prefix_store
        self.reminder_scheduler = scheduler if scheduler is not None else ReminderScheduler()

    async def setup_hook(self):
        """Called when the bot is starting up."""
        await self.add_cog(
            ReminderCommands(self, self.reminder_scheduler, self.prefix_store)
        )
        await self.add_cog(
            PrefixCommands(self, self.reminder_scheduler, self.prefix_store)
        )

        try:
            await self.register_slash_commands()
        except RegistrationError as e:
            # Prefix commands keep working without slash commands
            logger.error(f"❌ Failed to register slash commands: {e}")

    async def register_slash_commands(self) -> int:
        """
        Sync the slash command tree with Discord globally.

        Returns:
            Number of commands registered

        Raises:
            RegistrationError: If Discord rejected the sync or the
                application ID is unknown
        """
        try:
            synced = await self.tree.sync()
        except discord.DiscordException as e:
            raise RegistrationError(str(e) or type(e).__name__) from e

        logger.info(f"✅ Registered {len(synced)} slash command(s) globally")
        return len(synced)

    async def on_ready(self):
        """Called when the bot has connected to Discord."""
        logger.info(f"✅ Logged in as {self.user} (ID: {self.user.id})")
        logger.info(f"Connected to {len(self.guilds)} guild(s)")

    async def on_message(self, message: discord.Message):
        """Route prefix commands, ignoring other bots."""
        if message.author.bot:
            return

        await self.process_commands(message)

    async def on_command_error(
        self, ctx: commands.Context, error: commands.CommandError
    ):
        """Log command errors not handled by a cog."""
        if isinstance(error, commands.CommandNotFound):
            return
        if ctx.cog and ctx.cog.has_error_handler():
            return

        original = getattr(error, "original", error)
        logger.error(
            f"Error in command {ctx.command}: {original}",
            exc_info=(type(original), original, original.__traceback__),
        )

    async def close(self):
        """Discard pending reminders on shutdown."""
        await self.reminder_scheduler.shutdown()
        await super().close()


async def main():
    """Run the bot."""
    config = BotConfig.from_env()
    logger.info(f"Setup: DISCORD_BOT_TOKEN={'set' if config.token else 'missing'}")
    logger.info(
        f"Setup: DISCORD_APPLICATION_ID={'set' if config.application_id else 'missing'}"
    )
    logger.info(f"Setup: PREFIX_FILE={config.prefix_file}")

    if not config.token:
        logger.error("DISCORD_BOT_TOKEN environment variable not set")
        logger.error("Please set it in your .env file")
        return

    prefix_store = PrefixStore(config.prefix_file, default_prefix=config.default_prefix)
    try:
        prefix_store.load()
    except PrefixStoreError as e:
        logger.error(f"Cannot start: {e}")
        raise

    bot = DiscordBot(config, prefix_store=prefix_store)
    async with bot:
        await bot.start(config.token)


def run():
    """Console script entry point."""
    asyncio.run(main())


if __name__ == "__main__":
    run()
