"""Read-only starting quarterback table.

The table is built once from the JSON snapshot written by
``fetch_qb_data.py`` and handed to whatever needs it. Nothing here keeps
module-level state.
"""

import logging
import random
from pathlib import Path
from typing import Iterator, List, Optional, Tuple

from .constants import HEADSHOT_URL_TEMPLATE
from .divisions import shuffle
from .models import Quarterback
from .schemas import QBDataFile
from .utils import load_json

logger = logging.getLogger('nflquiz.quarterbacks')


class QBTable:
    """Immutable lookup table of starting quarterbacks."""

    def __init__(self, qbs: Tuple[Quarterback, ...], last_updated: str):
        self._qbs = tuple(qbs)
        self.last_updated = last_updated

    @classmethod
    def from_snapshot(cls, snapshot: QBDataFile) -> 'QBTable':
        qbs = tuple(
            Quarterback(name=entry.name, athlete_id=entry.athleteId, team_abbr=entry.teamAbbr)
            for entry in snapshot.qbs
        )
        return cls(qbs, snapshot.lastUpdated)

    @classmethod
    def from_file(cls, path: Path | str) -> 'QBTable':
        """
        Load the table from a qb_data.json snapshot.

        Raises:
            FileNotFoundError: If the snapshot doesn't exist
            ValueError: If the snapshot has an invalid structure
        """
        snapshot = load_json(path, schema=QBDataFile)
        table = cls.from_snapshot(snapshot)
        logger.info(f'Loaded {len(table)} QBs from {path} (updated {table.last_updated})')
        return table

    @property
    def qbs(self) -> Tuple[Quarterback, ...]:
        """Quarterbacks in snapshot order."""
        return self._qbs

    def __len__(self) -> int:
        return len(self._qbs)

    def __iter__(self) -> Iterator[Quarterback]:
        return iter(self._qbs)

    def all_qbs(self, rng: Optional[random.Random] = None) -> List[Quarterback]:
        """
        Return a freshly shuffled copy of every quarterback.

        Each call reshuffles. Callers that need a stable order for a session
        should call this once and keep the result.
        """
        return shuffle(self._qbs, rng)

    def team_for(self, qb_name: str) -> Optional[str]:
        """Team abbreviation a QB starts for, or None if unknown."""
        qb = self.qb_by_name(qb_name)
        return qb.team_abbr if qb else None

    def qb_by_name(self, name: str) -> Optional[Quarterback]:
        for qb in self._qbs:
            if qb.name == name:
                return qb
        return None

    def qb_by_team(self, team_abbr: str) -> Optional[Quarterback]:
        for qb in self._qbs:
            if qb.team_abbr == team_abbr:
                return qb
        return None


def get_headshot_url(athlete_id: str) -> str:
    """ESPN headshot URL for an athlete id."""
    return HEADSHOT_URL_TEMPLATE.format(athlete_id=athlete_id)
