"""Character catalogs for each quiz configuration, with embedded fallbacks."""
import logging
from concurrent.futures import ThreadPoolExecutor, as_completed

from jp_tutor.errors import CatalogUnavailable, EntryLookupFailed
from jp_tutor.kana import kana_entries
from jp_tutor.models import CatalogEntry, QuizConfig, QuizType

logger = logging.getLogger(__name__)

DEFAULT_FETCH_WORKERS = 16

FALLBACK_KANJI = (
    CatalogEntry("猫", meanings=["cat"], name_readings=["ねこ"]),
    CatalogEntry("犬", meanings=["dog"], name_readings=["いぬ"]),
    CatalogEntry("水", meanings=["water"], on_readings=["スイ"], name_readings=["みず"]),
    CatalogEntry("火", meanings=["fire"], on_readings=["カ"], name_readings=["ひ"]),
    CatalogEntry("木", meanings=["tree"], on_readings=["ボク", "モク"], name_readings=["き"]),
    CatalogEntry("人", meanings=["person"], on_readings=["ジン", "ニン"], name_readings=["ひと"]),
    CatalogEntry("大", meanings=["big"], on_readings=["ダイ", "タイ"], name_readings=["おお"]),
    CatalogEntry("小", meanings=["small"], on_readings=["ショウ"], name_readings=["ちい", "こ"]),
    CatalogEntry("日", meanings=["day"], on_readings=["ニチ", "ジツ"], name_readings=["ひ", "か"]),
    CatalogEntry("月", meanings=["month"], on_readings=["ゲツ", "ガツ"], name_readings=["つき"]),
)

JLPT_FALLBACK = {
    5: "一二三四五六七八九十人日月火水木金土大小",
    4: "会同事自社発者地業方新場手数現全表戦経最",
    3: "政議民連対部合市内相定回選米実関決全表戦",
    2: "認調域担額技術専門備財政管制効率益格差層",
    1: "憲法律令規則条項款号附改正廃止施行適用",
}


def placeholder_entry(character: str) -> CatalogEntry:
    return CatalogEntry(character, meanings=["Unknown"], placeholder=True)


def fallback_entries(config: QuizConfig) -> list[CatalogEntry]:
    """Embedded kanji used when the service cannot produce a list."""
    if config.jlpt_level in JLPT_FALLBACK:
        chars = dict.fromkeys(JLPT_FALLBACK[config.jlpt_level])
        return [CatalogEntry(c) for c in chars]
    return [CatalogEntry(e.character, meanings=list(e.meanings), on_readings=list(e.on_readings),
                         name_readings=list(e.name_readings)) for e in FALLBACK_KANJI]


def load_all_kanji(client, workers: int = DEFAULT_FETCH_WORKERS) -> list[CatalogEntry]:
    """Every kanji the service knows that has a meaning and a usable reading.

    Entries are fetched concurrently. A character whose lookup fails is left
    out without affecting the others.
    """
    characters = list(dict.fromkeys(client.fetch_all_list()))
    logger.info("Fetched %d kanji, loading entries", len(characters))
    found: dict[str, CatalogEntry] = {}
    failed = 0
    with ThreadPoolExecutor(max_workers=max(1, workers)) as pool:
        futures = {pool.submit(client.fetch_kanji, c): c for c in characters}
        for future in as_completed(futures):
            try:
                entry = future.result()
            except EntryLookupFailed:
                failed += 1
                continue
            if entry.is_quizzable:
                found[futures[future]] = entry
    logger.info(
        "Found %d kanji with readings and meanings out of %d (%d lookups failed)",
        len(found), len(characters), failed,
    )
    return [found[c] for c in characters if c in found]


def _load_kanji(config: QuizConfig, client, workers: int) -> list[CatalogEntry]:
    if config.jlpt_level:
        chars = client.fetch_jlpt_list(config.jlpt_level)
    elif config.kanji_grade:
        chars = client.fetch_kanji_list(config.kanji_grade)
    else:
        try:
            entries = load_all_kanji(client, workers)
        except CatalogUnavailable as e:
            logger.warning("All-kanji load failed (%s), using JLPT N5", e)
            chars = client.fetch_jlpt_list(5)
        else:
            if not entries:
                raise CatalogUnavailable("No kanji with complete readings were found")
            return entries
    if not chars:
        raise CatalogUnavailable("No kanji found for the specified criteria")
    return [CatalogEntry(c) for c in dict.fromkeys(chars)]


def load_catalog(config: QuizConfig, client=None, workers: int = DEFAULT_FETCH_WORKERS) -> list[CatalogEntry]:
    """Catalog entries for a quiz configuration.

    Kana tables are static. Kanji lists come from the service; level and grade
    lists hold bare characters whose details are fetched on demand. When the
    service fails the embedded fallback list is returned.
    """
    if config.quiz_type != QuizType.KANJI:
        return kana_entries(config.quiz_type)
    if client is None:
        logger.warning("No kanji client configured, using fallback kanji")
        return fallback_entries(config)
    try:
        return _load_kanji(config, client, workers)
    except CatalogUnavailable as e:
        logger.warning("Error initializing kanji: %s", e)
        return fallback_entries(config)


class Catalog:
    """Entries for one loaded configuration, filling in kanji details lazily."""

    def __init__(self, config: QuizConfig, entries, client=None):
        self.config = config
        self.client = client
        self._entries = {e.character: e for e in entries}

    @property
    def characters(self) -> list[str]:
        return list(self._entries)

    def _needs_details(self, entry: CatalogEntry) -> bool:
        return (
            self.config.quiz_type == QuizType.KANJI
            and not entry.placeholder
            and not (entry.meanings or entry.on_readings or entry.kun_readings or entry.name_readings)
        )

    def entry(self, character: str) -> CatalogEntry:
        entry = self._entries[character]
        if not self._needs_details(entry):
            return entry
        if self.client is None:
            return placeholder_entry(character)
        try:
            entry = self.client.fetch_kanji(character)
        except EntryLookupFailed as e:
            logger.error("%s", e)
            return placeholder_entry(character)
        self._entries[character] = entry
        return entry
