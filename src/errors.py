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
Error types shared by the reminder and prefix components.
"""

from typing import Optional

from discord.ext import commands


class BotError(Exception):
    """Base class for errors raised by remindbot components."""

    pass


class ValidationError(BotError):
    """Raised when user input is malformed.

    ``field`` names the offending input ("delay", "message" or "prefix") so
    each command surface can pick its own usage hint.
    """

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.field = field


class DeliveryError(BotError):
    """Raised when a reminder could not be delivered by direct message."""

    def __init__(self, recipient_id: Optional[int], original: Exception):
        super().__init__(f"Failed to send DM to {recipient_id}: {original}")
        self.recipient_id = recipient_id
        self.original = original


class PrefixStoreError(BotError):
    """Raised when the persisted prefix file cannot be read."""

    pass


class PersistError(PrefixStoreError):
    """Raised when the prefix file cannot be written."""

    pass


class RegistrationError(BotError):
    """Raised when slash commands could not be registered with Discord."""

    pass


class AuthorizationError(commands.CheckFailure):
    """Raised when a user lacks permission to run a command."""

    pass
