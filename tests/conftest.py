import pytest

from jp_tutor.errors import CatalogUnavailable, EntryLookupFailed
from jp_tutor.models import CatalogEntry


@pytest.fixture
def tmp_db(tmp_path):
    """Provide a temporary SQLite database path for tests."""
    db_path = str(tmp_path / "test_cache.db")
    return db_path


class FakeKanjiClient:
    """In-memory stand-in for KanjiClient."""

    def __init__(self, entries=(), lists=None, failing=(), list_error=False):
        self.entries = {e.character: e for e in entries}
        self.lists = lists or {}
        self.failing = set(failing)
        self.list_error = list_error
        self.lookups = []

    def _list(self, key):
        if self.list_error or key not in self.lists:
            raise CatalogUnavailable(f"no list {key}")
        return list(self.lists[key])

    def fetch_kanji(self, character):
        self.lookups.append(character)
        if character in self.failing or character not in self.entries:
            raise EntryLookupFailed(character)
        return self.entries[character]

    def fetch_kanji_list(self, grade=None):
        return self._list(f"grade-{grade}" if grade else "joyo")

    def fetch_jlpt_list(self, jlpt_level):
        return self._list(f"jlpt-{jlpt_level}")

    def fetch_all_list(self):
        return self._list("all")


NEKO = CatalogEntry("猫", meanings=["cat", "feline"], name_readings=["ねこ"], on_readings=["ビョウ"])
INU = CatalogEntry("犬", meanings=["dog"], on_readings=["ケン"], kun_readings=["いぬ"])
MIZU = CatalogEntry("水", meanings=["water"], on_readings=["スイ"], kun_readings=["みず"])
NO_READING = CatalogEntry("々", meanings=["repetition mark"])


@pytest.fixture
def fake_client():
    return FakeKanjiClient(
        entries=[NEKO, INU, MIZU, NO_READING],
        lists={"jlpt-5": ["猫", "犬", "水"], "grade-1": ["犬", "水"], "all": ["猫", "犬", "水", "々"]},
    )
