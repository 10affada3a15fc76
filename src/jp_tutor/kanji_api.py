"""Client for the kanji lookup service with a local response cache."""
import logging
import sqlite3

import requests

from jp_tutor.cache import get_cached, set_cached
from jp_tutor.db import init_db
from jp_tutor.errors import CatalogUnavailable, EntryLookupFailed
from jp_tutor.models import CatalogEntry
from jp_tutor.settings import Settings, get_settings

logger = logging.getLogger(__name__)


def entry_from_api(data: dict, character: str = "") -> CatalogEntry:
    """Build a catalog entry from a ``/kanji/{character}`` response."""
    return CatalogEntry(
        character=data.get("kanji") or character,
        meanings=list(data.get("meanings") or []),
        on_readings=list(data.get("on_readings") or []),
        kun_readings=list(data.get("kun_readings") or []),
        name_readings=list(data.get("name_readings") or []),
        grade=data.get("grade"),
        jlpt=data.get("jlpt"),
    )


class KanjiClient:
    """Fetches kanji lists and per-character entries, caching raw responses."""

    def __init__(
        self,
        settings: Settings | None = None,
        base_url: str | None = None,
        cache_path: str | None = None,
        session: requests.Session | None = None,
    ):
        if settings is None:
            settings = get_settings()
        self.base_url = (base_url or settings.kanji_api_base).rstrip("/")
        self.timeout = settings.http_timeout
        self.ttl = settings.cache_ttl_hours * 60 * 60
        self.session = session or requests.Session()

        if cache_path is None and settings.cache_enabled:
            cache_path = settings.cache_path
        self.cache_path = cache_path
        if self.cache_path:
            try:
                init_db(self.cache_path)
            except (OSError, sqlite3.Error) as e:
                logger.warning("Cache disabled, could not open %s: %s", self.cache_path, e)
                self.cache_path = None

    def _get_json(self, path: str):
        response = self.session.get(f"{self.base_url}{path}", timeout=self.timeout)
        if not response.ok:
            raise requests.HTTPError(f"{response.status_code} for {path}", response=response)
        return response.json()

    def _cached_get(self, cache_key: str, path: str):
        if self.cache_path:
            cached = get_cached(self.cache_path, cache_key, ttl=self.ttl)
            if cached is not None:
                logger.debug("Cache hit for %s", cache_key)
                return cached
        logger.debug("Cache miss for %s, fetching from API", cache_key)
        data = self._get_json(path)
        if self.cache_path:
            set_cached(self.cache_path, cache_key, data)
        return data

    def _fetch_list(self, cache_key: str, path: str, label: str) -> list[str]:
        try:
            data = self._cached_get(cache_key, path)
        except (requests.RequestException, ValueError) as e:
            raise CatalogUnavailable(f"Failed to fetch {label} kanji list: {e}") from e
        if not isinstance(data, list):
            raise CatalogUnavailable(f"Unexpected response for {label} kanji list")
        return [str(c) for c in data]

    def fetch_kanji(self, character: str) -> CatalogEntry:
        try:
            data = self._cached_get(f"kanji_{character}", f"/kanji/{character}")
        except (requests.RequestException, ValueError) as e:
            raise EntryLookupFailed(character, str(e)) from e
        if not isinstance(data, dict):
            raise EntryLookupFailed(character, "unexpected response")
        return entry_from_api(data, character)

    def fetch_kanji_list(self, grade: int | None = None) -> list[str]:
        """Kanji for a school grade, or the joyo list when no grade is given."""
        if grade:
            return self._fetch_list(f"kanji_list_grade_{grade}", f"/kanji/grade-{grade}", f"grade {grade}")
        return self._fetch_list("kanji_list_joyo", "/kanji/joyo", "joyo")

    def fetch_jlpt_list(self, jlpt_level: int) -> list[str]:
        return self._fetch_list(f"kanji_list_jlpt_{jlpt_level}", f"/kanji/jlpt-{jlpt_level}", f"JLPT N{jlpt_level}")

    def fetch_all_list(self) -> list[str]:
        return self._fetch_list("kanji_list_all", "/kanji/all", "all")
