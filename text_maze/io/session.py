import os
import time
import logging
from dataclasses import dataclass
from datetime import datetime
from typing import List, Optional

from text_maze.config import SAVE_INTERVAL_SECS, SESSIONS_DIR
from text_maze.core.buffer import RenderedBuffer
from text_maze.core.errors import SessionFormatError
from text_maze.core.navigator import Cursor

logger = logging.getLogger(__name__)


@dataclass
class Session:
    buffer: RenderedBuffer
    cursor: Cursor
    session_id: str


class SessionStore:
    """
    Saved games, one plain text file per session.
    Format:
    - first line: "<cursor col> <cursor row>"
    - rest: the rendered maze, byte for byte
    """

    def __init__(self, directory: str = SESSIONS_DIR, interval: float = SAVE_INTERVAL_SECS):
        self.directory = directory
        self.interval = interval
        self._last_save: Optional[float] = None

    @staticmethod
    def new_session_id(now: datetime = None) -> str:
        t = now or datetime.now()
        return f"{t.year:02d}-{t.month:02d}-{t.day:02d} {t.hour:02d}H.{t.minute:02d}M.{t.second:02d}S"

    def path_for(self, session_id: str) -> str:
        return os.path.join(self.directory, session_id)

    def save(self, session: Session, force: bool = False) -> bool:
        """Writes the session. Returns False if skipped by the save throttle."""
        now = time.monotonic()
        if not force and self._last_save is not None and now - self._last_save < self.interval:
            logger.debug(f"Skipping save of {session.session_id}: last save {now - self._last_save:.1f}s ago")
            return False

        os.makedirs(self.directory, exist_ok=True)
        path = self.path_for(session.session_id)
        with open(path, "w", encoding="utf-8", newline="") as f:
            f.write(f"{session.cursor.col} {session.cursor.row}\n")
            f.write(session.buffer.text)

        self._last_save = now
        logger.info(f"Saved session to {path}")
        return True

    def load(self, session_id: str) -> Session:
        path = self.path_for(session_id)
        with open(path, "r", encoding="utf-8", newline="") as f:
            header = f.readline()
            data = f.read()

        fields = header.split()
        if len(fields) != 2:
            raise SessionFormatError(f"{path}: expected cursor coordinates, got {header.strip()!r}")
        try:
            col, row = int(fields[0]), int(fields[1])
        except ValueError:
            raise SessionFormatError(f"{path}: wrong cursor coordinates {header.strip()!r}") from None

        buffer = RenderedBuffer.from_text(data)
        logger.info(f"Loaded session {session_id} ({buffer.width}x{buffer.height}) at ({col}, {row})")
        return Session(buffer=buffer, cursor=Cursor(col, row), session_id=session_id)

    def list_sessions(self) -> List[str]:
        if not os.path.isdir(self.directory):
            logger.debug(f"No saved sessions: folder {self.directory} does not exist")
            return []
        return sorted(
            name for name in os.listdir(self.directory)
            if os.path.isfile(os.path.join(self.directory, name))
        )
