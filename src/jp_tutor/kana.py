"""Static hiragana and katakana tables and kana to romaji conversion."""
from jp_tutor.models import CatalogEntry, QuizType

HIRAGANA_TABLE = (
    ("あ", "a"), ("い", "i"), ("う", "u"), ("え", "e"), ("お", "o"),
    ("か", "ka"), ("き", "ki"), ("く", "ku"), ("け", "ke"), ("こ", "ko"),
    ("さ", "sa"), ("し", "shi"), ("す", "su"), ("せ", "se"), ("そ", "so"),
    ("た", "ta"), ("ち", "chi"), ("つ", "tsu"), ("て", "te"), ("と", "to"),
    ("な", "na"), ("に", "ni"), ("ぬ", "nu"), ("ね", "ne"), ("の", "no"),
    ("は", "ha"), ("ひ", "hi"), ("ふ", "fu"), ("へ", "he"), ("ほ", "ho"),
    ("ま", "ma"), ("み", "mi"), ("む", "mu"), ("め", "me"), ("も", "mo"),
    ("や", "ya"), ("ゆ", "yu"), ("よ", "yo"),
    ("ら", "ra"), ("り", "ri"), ("る", "ru"), ("れ", "re"), ("ろ", "ro"),
    ("わ", "wa"), ("を", "wo"), ("ん", "n"),
    # dakuten / handakuten
    ("が", "ga"), ("ぎ", "gi"), ("ぐ", "gu"), ("げ", "ge"), ("ご", "go"),
    ("ざ", "za"), ("じ", "ji"), ("ず", "zu"), ("ぜ", "ze"), ("ぞ", "zo"),
    ("だ", "da"), ("ぢ", "di"), ("づ", "du"), ("で", "de"), ("ど", "do"),
    ("ば", "ba"), ("び", "bi"), ("ぶ", "bu"), ("べ", "be"), ("ぼ", "bo"),
    ("ぱ", "pa"), ("ぴ", "pi"), ("ぷ", "pu"), ("ぺ", "pe"), ("ぽ", "po"),
    # yoon
    ("きゃ", "kya"), ("きゅ", "kyu"), ("きょ", "kyo"),
    ("しゃ", "sha"), ("しゅ", "shu"), ("しょ", "sho"),
    ("ちゃ", "cha"), ("ちゅ", "chu"), ("ちょ", "cho"),
    ("にゃ", "nya"), ("にゅ", "nyu"), ("にょ", "nyo"),
    ("ひゃ", "hya"), ("ひゅ", "hyu"), ("ひょ", "hyo"),
    ("みゃ", "mya"), ("みゅ", "myu"), ("みょ", "myo"),
    ("りゃ", "rya"), ("りゅ", "ryu"), ("りょ", "ryo"),
    ("ぎゃ", "gya"), ("ぎゅ", "gyu"), ("ぎょ", "gyo"),
    ("じゃ", "ja"), ("じゅ", "ju"), ("じょ", "jo"),
    ("びゃ", "bya"), ("びゅ", "byu"), ("びょ", "byo"),
    ("ぴゃ", "pya"), ("ぴゅ", "pyu"), ("ぴょ", "pyo"),
)

# Katakana sits 0x60 code points above hiragana.
KATAKANA_OFFSET = 0x60


def _to_katakana(text: str) -> str:
    return "".join(chr(ord(ch) + KATAKANA_OFFSET) for ch in text)


KATAKANA_TABLE = tuple((_to_katakana(kana), romaji) for kana, romaji in HIRAGANA_TABLE)

SOKUON = ("っ", "ッ")

_ROMAJI_BY_KANA = dict(HIRAGANA_TABLE + KATAKANA_TABLE)
_MAX_KANA_LEN = max(len(k) for k in _ROMAJI_BY_KANA)


def kana_entries(quiz_type: QuizType) -> list[CatalogEntry]:
    """Catalog entries for the hiragana or katakana table."""
    if quiz_type == QuizType.HIRAGANA:
        table = HIRAGANA_TABLE
    elif quiz_type == QuizType.KATAKANA:
        table = KATAKANA_TABLE
    else:
        raise ValueError(f"{quiz_type} is not a kana quiz type")
    return [CatalogEntry(character=kana, romaji=romaji) for kana, romaji in table]


def get_kana_reading(character: str) -> str | None:
    return _ROMAJI_BY_KANA.get(character)


def _match(text: str, pos: int) -> tuple[str, int] | None:
    for size in range(_MAX_KANA_LEN, 0, -1):
        romaji = _ROMAJI_BY_KANA.get(text[pos:pos + size])
        if romaji is not None:
            return romaji, size
    return None


def to_romaji(reading: str) -> str:
    """Convert a kana reading to romaji, longest kana cluster first.

    Small tsu doubles the following consonant. Okurigana dots are dropped
    and characters outside the tables are kept as-is.
    """
    out = []
    pos = 0
    text = reading.replace(".", "")
    while pos < len(text):
        if text[pos] in SOKUON:
            nxt = _match(text, pos + 1)
            if nxt is not None and nxt[0][0] not in "aiueon":
                out.append("t" if nxt[0].startswith("ch") else nxt[0][0])
            pos += 1
            continue
        found = _match(text, pos)
        if found is None:
            out.append(text[pos])
            pos += 1
        else:
            out.append(found[0])
            pos += found[1]
    return "".join(out)
