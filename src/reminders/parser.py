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
Reminder Input Parser

Parses "<minutes> <message>" text shared by the /remind and rm commands.
"""

from errors import ValidationError


def parse_reminder_input(text: str) -> tuple[int, str]:
    """
    Split reminder input into a delay and a message.

    Args:
        text: Raw input such as "5 take a break"

    Returns:
        Tuple of (delay_minutes, message)

    Raises:
        ValidationError: With field "delay" for a missing, non-numeric or
            non-positive delay, or field "message" for an empty message
    """
    parts = (text or "").strip().split(maxsplit=1)
    if not parts:
        raise ValidationError("Missing reminder time", field="delay")

    raw_delay = parts[0]
    if not raw_delay.isdecimal():
        raise ValidationError(f"Invalid reminder time: {raw_delay!r}", field="delay")

    try:
        delay_minutes = int(raw_delay)
    except ValueError:
        # Longer than the interpreter's integer string conversion limit
        raise ValidationError("Reminder time has too many digits", field="delay")
    if delay_minutes <= 0:
        raise ValidationError("Reminder time must be at least 1 minute", field="delay")

    message = parts[1].strip() if len(parts) > 1 else ""
    if not message:
        raise ValidationError("Missing reminder message", field="message")

    return delay_minutes, message
