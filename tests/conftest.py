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

"""Shared fixtures: simulated clock and Discord doubles."""

import sys
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import discord
import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from reminders import ReminderScheduler


class FakeClock:
    """Simulated clock whose sleep advances time instantly."""

    def __init__(self):
        self.now = 0.0
        self.sleeps: list[float] = []

    async def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self.now += seconds


class RecordingScheduler(ReminderScheduler):
    """ReminderScheduler that keeps every reminder it schedules."""

    def __init__(self, clock: FakeClock):
        super().__init__(sleep=clock.sleep)
        self.scheduled = []

    def schedule(self, *args, **kwargs):
        reminder = super().schedule(*args, **kwargs)
        self.scheduled.append(reminder)
        return reminder


def make_forbidden() -> discord.Forbidden:
    """Build the error Discord raises when a user has DMs disabled."""
    response = MagicMock(status=403, reason="Forbidden")
    return discord.Forbidden(response, "Cannot send messages to this user")


def make_user(user_id: int = 1001) -> MagicMock:
    user = MagicMock()
    user.id = user_id
    user.bot = False
    user.send = AsyncMock()
    return user


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def scheduler(clock):
    return RecordingScheduler(clock)
