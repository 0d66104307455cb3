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
Prefix Store Module

In-memory mapping of server ID to command prefix, backed by a JSON file.
The file is read once by load() and rewritten in full on every set().
"""

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Optional, Union

from config import DEFAULT_PREFIX
from errors import PersistError, PrefixStoreError, ValidationError

logger = logging.getLogger("remindbot.prefixes.store")

ServerId = Union[int, str]


class PrefixStore:
    """
    Per-server command prefixes.

    Servers without an entry use the default prefix, as do direct messages
    (no server). Authorization is the caller's responsibility.
    """

    def __init__(self, path: Union[str, Path], default_prefix: str = DEFAULT_PREFIX):
        """
        Initialize the prefix store.

        Args:
            path: Location of the JSON prefix file
            default_prefix: Prefix used when a server has no override
        """
        self.path = Path(path)
        self.default_prefix = default_prefix
        self._prefixes: dict[str, str] = {}

    def load(self) -> None:
        """
        Read the persisted mapping.

        A missing file means no overrides. A file that exists but does not
        hold a JSON object raises PrefixStoreError.
        """
        if not self.path.exists():
            logger.info(f"No prefix file at {self.path}, using defaults")
            self._prefixes = {}
            return

        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            raise PrefixStoreError(f"Could not read prefix file {self.path}: {e}") from e

        if not isinstance(data, dict):
            raise PrefixStoreError(
                f"Prefix file {self.path} must contain a JSON object, got {type(data).__name__}"
            )

        self._prefixes = {
            str(server_id): str(prefix) for server_id, prefix in data.items() if prefix
        }
        logger.info(f"Loaded {len(self._prefixes)} server prefix(es) from {self.path}")

    def resolve(self, server_id: Optional[ServerId]) -> str:
        """Return the prefix for a server, or the default."""
        if server_id is None:
            return self.default_prefix
        return self._prefixes.get(str(server_id), self.default_prefix)

    def set(self, server_id: ServerId, new_prefix: str) -> None:
        """
        Set a server's prefix and persist the full mapping.

        Args:
            server_id: Discord guild ID
            new_prefix: Any non-empty string, stored verbatim

        Raises:
            ValidationError: If the prefix is empty or there is no server
            PersistError: If the file could not be written
        """
        if server_id is None:
            raise ValidationError("Prefixes can only be set for a server", field="server")
        if not new_prefix or not new_prefix.strip():
            raise ValidationError("Prefix must not be empty", field="prefix")

        updated = dict(self._prefixes)
        updated[str(server_id)] = new_prefix
        self._write(updated)
        self._prefixes = updated
        logger.info(f"Prefix for server {server_id} set to {new_prefix!r}")

    def as_dict(self) -> dict[str, str]:
        """Return a copy of the current mapping."""
        return dict(self._prefixes)

    def __contains__(self, server_id: object) -> bool:
        return str(server_id) in self._prefixes

    def __len__(self) -> int:
        return len(self._prefixes)

    def _write(self, prefixes: dict[str, str]) -> None:
        """Replace the prefix file with the given mapping."""
        payload = json.dumps(prefixes, indent=2, ensure_ascii=False)
        directory = self.path.parent
        try:
            directory.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                prefix=f".{self.path.name}.", suffix=".tmp", dir=directory
            )
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    f.write(payload)
                os.replace(tmp_name, self.path)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except OSError as e:
            logger.error(f"Failed to write prefix file {self.path}: {e}", exc_info=True)
            raise PersistError(f"Could not save prefix file {self.path}: {e}") from e
