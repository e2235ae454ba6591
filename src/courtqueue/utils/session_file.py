"""Reading and writing session files (JSON)."""

# Court Queue
# Copyright (C) 2025  Court Queue developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Union

from courtqueue.exceptions import CourtQueueException, FileLoadException
from courtqueue.models import MatchRecord, Participant, QueueConfig
from courtqueue.utils import setup_logger

logger = setup_logger(__name__)


@dataclass
class SessionData:
    """Everything needed to generate a queue for one session.

    Attributes
    ----------
    participants : list of Participant
        Active participants, in file order.
    matches : list of MatchRecord
        Completed, playing and queued matches, oldest first.
    config : QueueConfig
        Queue settings; defaults when the file has no ``config`` section.
    """

    participants: List[Participant] = field(default_factory=list)
    matches: List[MatchRecord] = field(default_factory=list)
    config: QueueConfig = field(default_factory=QueueConfig)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "config": self.config.to_dict(),
            "participants": [p.to_dict() for p in self.participants],
            "matches": [m.to_dict() for m in self.matches],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SessionData":
        return cls(
            participants=[Participant.from_dict(p) for p in data.get("participants", [])],
            matches=[MatchRecord.from_dict(m) for m in data.get("matches", [])],
            config=QueueConfig.from_dict(data.get("config", {})),
        )


def load_session(path: Union[str, Path]) -> SessionData:
    """Load a session file.

    Raises:
        FileLoadException: If the file is missing, not JSON or malformed
    """
    path = Path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except OSError as e:
        raise FileLoadException(f"Cannot read session file {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise FileLoadException(f"Session file {path} is not valid JSON: {e}") from e

    if not isinstance(data, dict):
        raise FileLoadException(f"Session file {path} must contain a JSON object")

    try:
        session = SessionData.from_dict(data)
    except (KeyError, TypeError, ValueError, CourtQueueException) as e:
        raise FileLoadException(f"Malformed session file {path}: {e}") from e

    logger.info(
        f"Loaded {len(session.participants)} participants and "
        f"{len(session.matches)} matches from {path}"
    )
    return session


def save_session(session: SessionData, path: Union[str, Path]) -> None:
    """Write a session file (pretty-printed JSON)."""
    path = Path(path)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(session.to_dict(), f, indent=2)
    logger.info(f"Saved session to {path}")
