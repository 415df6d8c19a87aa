"""Starting QB collection from ESPN's public API."""

import logging
import time
from datetime import date
from typing import Mapping, Optional

import requests

from .constants import ESPN_DEPTH_CHART_URL, ESPN_TEAM_IDS, TOTAL_TEAMS
from .schemas import QBDataFile, QBEntry

logger = logging.getLogger('nflquiz.fetcher')


class ESPNQBFetcher:
    """Fetches each team's depth chart and resolves its starting QB."""

    def __init__(
        self,
        season: int,
        delay: float = 0.1,
        max_retries: int = 3,
        timeout: float = 30,
        session: Optional[requests.Session] = None,
    ):
        self.season = season
        self.delay = delay
        self.max_retries = max_retries
        self.timeout = timeout
        self.session = session or requests.Session()

    def _get_json(self, url: str) -> dict:
        """
        GET a URL and decode JSON, retrying transient failures.

        Client errors other than 429 are raised straight away.
        """
        for attempt in range(self.max_retries):
            try:
                response = self.session.get(url, timeout=self.timeout)
                response.raise_for_status()
                return response.json()
            except requests.HTTPError as e:
                status = e.response.status_code if e.response is not None else None
                if status is not None and status < 500 and status != 429:
                    raise
                error = e
            except (requests.ConnectionError, requests.Timeout) as e:
                error = e

            if attempt < self.max_retries - 1:
                logger.warning(f'Attempt {attempt + 1}/{self.max_retries} failed for {url}: {error}')
                self._backoff(attempt)
            else:
                logger.error(f'All {self.max_retries} attempts failed for {url}: {error}')
                raise error

    def _backoff(self, attempt: int) -> None:
        if self.delay > 0:
            time.sleep(self.delay * (2 ** attempt))

    def fetch_depth_chart(self, team_id: int) -> dict:
        url = ESPN_DEPTH_CHART_URL.format(season=self.season, team_id=team_id)
        return self._get_json(url)

    def fetch_athlete(self, athlete_ref: str) -> dict:
        return self._get_json(athlete_ref)

    @staticmethod
    def find_qb_position(depth_chart: dict) -> Optional[dict]:
        """First formation in the depth chart that lists a QB."""
        for item in depth_chart.get('items') or []:
            qb_position = (item.get('positions') or {}).get('qb')
            if qb_position:
                return qb_position
        return None

    @staticmethod
    def pick_starter(athletes: list[dict]) -> dict:
        """
        Pick the rank 1 athlete, or the first one listed.

        This is an approximation: a malformed rank can surface a backup.
        """
        for athlete in athletes:
            if athlete.get('rank') == 1:
                return athlete
        return athletes[0]

    def get_starting_qb(self, team_abbr: str, team_id: int) -> Optional[QBEntry]:
        """
        Resolve a team's starting QB.

        Errors are logged and the team is skipped.

        Returns:
            QBEntry, or None if no starter could be resolved
        """
        try:
            depth_chart = self.fetch_depth_chart(team_id)

            qb_position = self.find_qb_position(depth_chart)
            athletes = (qb_position or {}).get('athletes') or []
            if not athletes or not (athletes[0].get('athlete') or {}).get('$ref'):
                logger.warning(f'No QB found for {team_abbr}')
                return None

            starter = self.pick_starter(athletes)
            athlete_ref = (starter.get('athlete') or {}).get('$ref')
            if not athlete_ref:
                logger.warning(f'Starter for {team_abbr} has no athlete reference')
                return None

            athlete = self.fetch_athlete(athlete_ref)
            return QBEntry(
                name=athlete.get('displayName') or athlete.get('fullName') or '',
                athleteId=str(athlete.get('id')),
                teamAbbr=team_abbr,
            )
        except (requests.RequestException, ValueError) as e:
            logger.error(f'Error fetching QB for {team_abbr}: {e}')
            return None

    def fetch_all(self, team_ids: Mapping[str, int] = ESPN_TEAM_IDS) -> QBDataFile:
        """
        Fetch starting QBs for every team.

        Teams whose starter can't be resolved are left out.

        Returns:
            QBDataFile snapshot dated today
        """
        logger.info(f'Fetching starting QB data from ESPN for {self.season}...')

        qbs = []
        for abbr, team_id in team_ids.items():
            logger.info(f'Fetching {abbr.upper()}...')
            qb = self.get_starting_qb(abbr, team_id)
            if qb:
                qbs.append(qb)
                logger.info(f'{qb.name} (ID: {qb.athleteId})')
            else:
                logger.info('NOT FOUND')
            if self.delay > 0:
                time.sleep(self.delay)

        logger.info(f'Fetched {len(qbs)}/{TOTAL_TEAMS} QBs')
        return QBDataFile(lastUpdated=date.today().isoformat(), qbs=qbs)
