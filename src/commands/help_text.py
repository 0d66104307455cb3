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
Help text listing both command surfaces.
"""


def build_help_text(prefix: str, slash_first: bool = True) -> str:
    """
    Build the command list shown by /help and the prefix help command.

    Args:
        prefix: Text command prefix in effect where help was requested
        slash_first: List slash commands before prefix commands
    """
    slash_lines = (
        "🔹 `/remind <time> <message>` - Set a reminder (e.g., `/remind 5 sleep`)\n"
        "🔹 `/help` - Show this help message"
    )
    prefix_lines = (
        f"🔹 `{prefix}rm <time> <message>` - Set a reminder (e.g., `{prefix}rm 5 sleep`)\n"
        f"🔹 `{prefix}ping` - Check that the bot is responding\n"
        f"🔹 `{prefix}setprefix <prefix>` - Change this server's prefix (admins only)\n"
        f"🔹 `{prefix}help` - Show this help message"
    )

    if slash_first:
        return (
            "**📜 Available Commands:**\n"
            f"{slash_lines}\n\n"
            "**Prefix Commands:**\n"
            f"{prefix_lines}"
        )
    return (
        "**📜 Available Commands:**\n"
        f"{prefix_lines}\n\n"
        "**Slash Commands:**\n"
        f"{slash_lines}"
    )
