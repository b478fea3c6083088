import json
import logging
from datetime import datetime
from pathlib import Path
from typing import List, Optional
from pydantic import BaseModel, Field, ValidationError

from .models import HighScoreEntry


logger = logging.getLogger(__name__)


class HighScoreTable(BaseModel):
    """
    Best round scores, highest first, capped at `limit` entries.

    Attributes:
        entries: Recorded scores, sorted descending
        limit: Number of entries kept
    """

    entries: List[HighScoreEntry] = Field(default_factory=list)
    limit: int = Field(default=10, ge=1)

    @classmethod
    def load(cls, path: str | Path, limit: int = 10) -> "HighScoreTable":
        """
        Load a table from a JSON file.

        A missing or unreadable file gives an empty table.
        """
        path = Path(path)
        if not path.is_file():
            return cls(limit=limit)

        try:
            with open(path, encoding="utf-8") as f:
                data = json.load(f)
            entries = [HighScoreEntry(**entry) for entry in data]
        except (OSError, UnicodeDecodeError, json.JSONDecodeError, TypeError, ValidationError) as e:
            logger.warning("Ignoring unreadable high-score file %s: %s", path, e)
            return cls(limit=limit)

        table = cls(entries=entries, limit=limit)
        table._sort_and_trim()
        return table

    def record(self, score: int, name: Optional[str] = None, when: Optional[datetime] = None) -> bool:
        """
        Add a finished round's score.

        Args:
            score: The round's final score
            name: Optional player name
            when: Time of the round (defaults to now)

        Returns:
            True if the score is in the table afterwards; zero scores are never recorded
        """
        if score <= 0:
            return False

        when = when or datetime.now()
        entry = HighScoreEntry(
            score=score,
            date=when.strftime("%d %b"),
            timestamp=int(when.timestamp() * 1000),
            name=name,
        )
        self.entries.append(entry)
        self._sort_and_trim()
        return any(kept is entry for kept in self.entries)

    def best(self) -> Optional[HighScoreEntry]:
        return self.entries[0] if self.entries else None

    def save(self, path: str | Path) -> None:
        """
        Save the table to a JSON file.

        Args:
            path: Path to save the table
        """
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, "w", encoding="utf-8") as f:
            json.dump([entry.model_dump() for entry in self.entries], f, indent=2, ensure_ascii=False)

    def _sort_and_trim(self) -> None:
        # Stable sort keeps earlier entries ahead on ties
        self.entries.sort(key=lambda entry: entry.score, reverse=True)
        del self.entries[self.limit:]
