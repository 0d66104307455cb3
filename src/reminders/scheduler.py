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
Reminder Scheduler Module

Arms one-shot delayed direct-message reminders on the bot's event loop.
Reminders live only in memory: they are lost if the process exits before
they fire, and they cannot be cancelled once scheduled.
"""

import asyncio
import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Awaitable, Callable, Optional

from errors import DeliveryError, ValidationError

logger = logging.getLogger("remindbot.reminders.scheduler")

SECONDS_PER_MINUTE = 60

# Longest single wait; longer delays are slept in steps of this size
MAX_SLEEP_SECONDS = 24 * 60 * 60

FailureCallback = Callable[[DeliveryError], Awaitable[Any]]


class ReminderState(str, Enum):
    """Lifecycle of a single reminder."""

    REQUESTED = "requested"
    SCHEDULED = "scheduled"
    DELIVERED = "delivered"
    DELIVERY_FAILED = "delivery_failed"


@dataclass
class ReminderRequest:
    """A validated reminder waiting to be delivered."""

    delay_minutes: int
    message: str
    recipient: Any  # anything with an async send(), usually discord.User
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def delay_seconds(self) -> int:
        return self.delay_minutes * SECONDS_PER_MINUTE

    @property
    def recipient_id(self) -> Optional[int]:
        return getattr(self.recipient, "id", None)


@dataclass
class ScheduledReminder:
    """Handle returned by ReminderScheduler.schedule()."""

    request: ReminderRequest
    state: ReminderState = ReminderState.REQUESTED
    task: Optional[asyncio.Task] = None
    error: Optional[DeliveryError] = None

    @property
    def acknowledgement(self) -> str:
        return format_acknowledgement(self.request.delay_minutes)


def format_acknowledgement(delay_minutes: int) -> str:
    return f"✅ Reminder set for {delay_minutes} minute(s)."


def format_reminder(message: str) -> str:
    return f"⏰ Reminder: {message}"


class ReminderScheduler:
    """
    Schedules reminders as asyncio tasks.

    Each reminder sleeps for its delay, then tries once to DM the
    recipient. A failed DM is logged and handed to the optional
    on_failure callback; it is never retried.
    """

    def __init__(self, sleep: Callable[[float], Awaitable[Any]] = asyncio.sleep):
        """
        Initialize the reminder scheduler.

        Args:
            sleep: Coroutine function used to wait out the delay
        """
        self._sleep = sleep
        self._tasks: set[asyncio.Task] = set()

    @property
    def pending(self) -> int:
        """Number of reminders armed but not yet fired."""
        return len(self._tasks)

    def schedule(
        self,
        delay_minutes: int,
        message: str,
        recipient: Any,
        on_failure: Optional[FailureCallback] = None,
    ) -> ScheduledReminder:
        """
        Validate and arm a reminder. Must be called from a running event loop.

        Args:
            delay_minutes: Positive whole number of minutes to wait
            message: Reminder text
            recipient: User to DM when the reminder fires
            on_failure: Awaited with a DeliveryError if the DM fails

        Returns:
            ScheduledReminder in the SCHEDULED state

        Raises:
            ValidationError: If the delay or message is invalid
        """
        if isinstance(delay_minutes, bool) or not isinstance(delay_minutes, int):
            raise ValidationError(
                f"Reminder time must be a whole number of minutes, got {delay_minutes!r}",
                field="delay",
            )
        if delay_minutes <= 0:
            raise ValidationError("Reminder time must be at least 1 minute", field="delay")
        if not message or not message.strip():
            raise ValidationError("Reminder message must not be empty", field="message")

        reminder = ScheduledReminder(
            request=ReminderRequest(
                delay_minutes=delay_minutes,
                message=message,
                recipient=recipient,
            )
        )
        task = asyncio.create_task(self._run(reminder, on_failure))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)

        reminder.task = task
        reminder.state = ReminderState.SCHEDULED
        logger.info(
            f"Scheduled reminder for user {reminder.request.recipient_id} "
            f"in {delay_minutes} minute(s)"
        )
        return reminder

    async def shutdown(self) -> None:
        """Discard all pending reminders."""
        tasks = list(self._tasks)
        if not tasks:
            return
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)
        logger.info(f"Discarded {len(tasks)} pending reminder(s) on shutdown")

    async def _run(
        self, reminder: ScheduledReminder, on_failure: Optional[FailureCallback]
    ) -> ReminderState:
        request = reminder.request
        remaining = request.delay_seconds
        while remaining > 0:
            step = min(remaining, MAX_SLEEP_SECONDS)
            await self._sleep(step)
            remaining -= step

        try:
            await request.recipient.send(format_reminder(request.message))
        except Exception as e:
            reminder.state = ReminderState.DELIVERY_FAILED
            reminder.error = DeliveryError(request.recipient_id, e)
            logger.warning(f"Failed to send DM: {reminder.error}")
            if on_failure is not None:
                try:
                    await on_failure(reminder.error)
                except Exception as notify_error:
                    logger.error(
                        f"Failed to report delivery failure to user {request.recipient_id}: "
                        f"{notify_error}",
                        exc_info=True,
                    )
            return reminder.state

        reminder.state = ReminderState.DELIVERED
        logger.info(f"Delivered reminder to user {request.recipient_id}")
        return reminder.state
