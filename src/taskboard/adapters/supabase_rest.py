"""Hosted backend adapter - read-only REST client for tasks and projects."""

import logging

import requests

from taskboard.config import Config, load_config
from taskboard.core.tasks import Project, Task

from .common import StoreError, parse_rows

logger = logging.getLogger(__name__)

REST_PATH = "/rest/v1"
TIMEOUT = 10


class SupabaseAdapter:
    """
    Supabase REST adapter.

    Implements TaskRepository protocol. Reads the `tasks` and `projects`
    tables through the auto-generated REST endpoint; row-level security on the
    backend decides which rows the key can see. No business logic - just I/O.
    """

    def __init__(self, url: str | None = None, key: str | None = None, config: Config | None = None):
        if url is None or key is None:
            config = config or load_config()
            url = url or config.supabase_url
            key = key or config.supabase_key
        self.url = url.rstrip("/")
        self.key = key
        self._session = requests.Session()

    def _get_table(self, table: str) -> list[dict]:
        """Fetch every visible row of a table."""
        try:
            resp = self._session.get(
                f"{self.url}{REST_PATH}/{table}",
                params={"select": "*"},
                headers={
                    "apikey": self.key,
                    "Authorization": f"Bearer {self.key}",
                },
                timeout=TIMEOUT,
            )
        except requests.RequestException as e:
            raise StoreError(f"Could not reach task store: {e}") from e

        if resp.status_code != 200:
            raise StoreError(f"Fetching {table} failed ({resp.status_code}): {resp.text}")

        try:
            rows = resp.json()
        except ValueError as e:
            raise StoreError(f"Invalid JSON from {table} endpoint") from e

        logger.debug(f"Fetched {len(rows) if isinstance(rows, list) else '?'} {table} rows")
        return rows

    def fetch_tasks(self) -> list[Task]:
        """Fetch all tasks."""
        return parse_rows(self._get_table("tasks"), Task.from_row, "task")

    def fetch_projects(self) -> list[Project]:
        """Fetch all projects."""
        return parse_rows(self._get_table("projects"), Project.from_row, "project")
