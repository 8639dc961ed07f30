"""Time-based hexagram casting (梅花易数 time method).

Trigrams are numbered in early-heaven order and written as three line bits
from the top line down; a hexagram's ``binary`` is the upper trigram's bits
followed by the lower trigram's, so character ``6 - n`` holds line ``n``.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from datetime import datetime
from typing import Final, Mapping

from ..errors import InvalidInputError

LOG = logging.getLogger(__name__)

DEFAULT_USER_FACTOR: Final[int] = 12
LINE_COUNT: Final[int] = 6


@dataclass(frozen=True)
class Trigram:
    number: int
    name: str
    nature: str
    binary: str


TRIGRAMS: Final[tuple[Trigram, ...]] = (
    Trigram(1, "乾", "天", "111"),
    Trigram(2, "兑", "泽", "011"),
    Trigram(3, "离", "火", "101"),
    Trigram(4, "震", "雷", "001"),
    Trigram(5, "巽", "风", "110"),
    Trigram(6, "坎", "水", "010"),
    Trigram(7, "艮", "山", "100"),
    Trigram(8, "坤", "地", "000"),
)

_TRIGRAMS_BY_NAME: Final[Mapping[str, Trigram]] = {t.name: t for t in TRIGRAMS}

HEXAGRAM_NAMES: Final[tuple[str, ...]] = (
    "乾", "坤", "屯", "蒙", "需", "讼", "师", "比",
    "小畜", "履", "泰", "否", "同人", "大有", "谦", "豫",
    "随", "蛊", "临", "观", "噬嗑", "贲", "剥", "复",
    "无妄", "大畜", "颐", "大过", "坎", "离", "咸", "恒",
    "遁", "大壮", "晋", "明夷", "家人", "睽", "蹇", "解",
    "损", "益", "夬", "姤", "萃", "升", "困", "井",
    "革", "鼎", "震", "艮", "渐", "归妹", "丰", "旅",
    "巽", "兑", "涣", "节", "中孚", "小过", "既济", "未济",
)

# King Wen number by lower trigram (rows) and upper trigram (columns).
_KING_WEN_COLUMNS: Final[tuple[str, ...]] = ("乾", "震", "坎", "艮", "坤", "巽", "离", "兑")
_KING_WEN_ROWS: Final[Mapping[str, tuple[int, ...]]] = {
    "乾": (1, 34, 5, 26, 11, 9, 14, 43),
    "震": (25, 51, 3, 27, 24, 42, 21, 17),
    "坎": (6, 40, 29, 4, 7, 59, 64, 47),
    "艮": (33, 62, 39, 52, 15, 53, 56, 31),
    "坤": (12, 16, 8, 23, 2, 20, 35, 45),
    "巽": (44, 32, 48, 18, 46, 57, 50, 28),
    "离": (13, 55, 63, 22, 36, 37, 30, 49),
    "兑": (10, 54, 60, 41, 19, 61, 38, 58),
}


@dataclass(frozen=True)
class Hexagram:
    number: int
    name: str
    upper: Trigram
    lower: Trigram

    @property
    def binary(self) -> str:
        return self.upper.binary + self.lower.binary

    @property
    def symbol(self) -> str:
        return chr(0x4DC0 + self.number - 1)

    def line_is_yang(self, line: int) -> bool:
        return self.binary[LINE_COUNT - _check_line(line)] == "1"


@dataclass(frozen=True)
class HexagramReading:
    cast_at: datetime
    user_factor: int
    primary: Hexagram
    changing_line: int
    changed: Hexagram


def _build_hexagrams() -> dict[int, Hexagram]:
    hexagrams: dict[int, Hexagram] = {}
    for lower_name, row in _KING_WEN_ROWS.items():
        for upper_name, number in zip(_KING_WEN_COLUMNS, row):
            hexagrams[number] = Hexagram(
                number=number,
                name=HEXAGRAM_NAMES[number - 1],
                upper=_TRIGRAMS_BY_NAME[upper_name],
                lower=_TRIGRAMS_BY_NAME[lower_name],
            )
    return hexagrams


HEXAGRAMS: Final[Mapping[int, Hexagram]] = _build_hexagrams()
_HEXAGRAMS_BY_BINARY: Final[Mapping[str, Hexagram]] = {h.binary: h for h in HEXAGRAMS.values()}
_HEXAGRAMS_BY_PAIR: Final[Mapping[tuple[int, int], Hexagram]] = {
    (h.upper.number, h.lower.number): h for h in HEXAGRAMS.values()
}


def _check_line(line: int) -> int:
    if not 1 <= line <= LINE_COUNT:
        raise InvalidInputError(f"line must be 1-{LINE_COUNT}, got {line}", field="line")
    return line


def trigram_for_number(number: int) -> Trigram:
    if not 1 <= number <= len(TRIGRAMS):
        raise InvalidInputError(f"trigram number must be 1-8, got {number}", field="trigram")
    return TRIGRAMS[number - 1]


def hexagram_by_number(number: int) -> Hexagram:
    try:
        return HEXAGRAMS[number]
    except KeyError:
        raise InvalidInputError(
            f"hexagram number must be 1-64, got {number}", field="number"
        ) from None


def hexagram_for_trigrams(upper: int, lower: int) -> Hexagram:
    """Return the hexagram with early-heaven trigram numbers ``upper`` over ``lower``."""

    trigram_for_number(upper)
    trigram_for_number(lower)
    return _HEXAGRAMS_BY_PAIR[(upper, lower)]


def hexagram_by_binary(binary: str) -> Hexagram:
    hexagram = _HEXAGRAMS_BY_BINARY.get(binary)
    if hexagram is None:
        raise InvalidInputError(f"not a six-line pattern: {binary!r}", field="binary")
    return hexagram


def changed_hexagram(hexagram: Hexagram, line: int) -> Hexagram:
    """Flip ``line`` (1 = bottom) and return the resulting hexagram."""

    index = LINE_COUNT - _check_line(line)
    bits = list(hexagram.binary)
    bits[index] = "0" if bits[index] == "1" else "1"
    return _HEXAGRAMS_BY_BINARY["".join(bits)]


def user_factor(user_id: str | int | None) -> int:
    """Digits of the last five characters of ``user_id``, or 12 when there are none.

    A falsy id (``None``, ``""`` or ``0``) counts as absent.
    """

    if not user_id:
        return DEFAULT_USER_FACTOR
    digits = re.sub(r"[^0-9]", "", str(user_id)[-5:])
    return int(digits) if digits else DEFAULT_USER_FACTOR


def cast_hexagram(moment: datetime, user_id: str | int | None = None) -> HexagramReading:
    """Cast a hexagram from the clock reading ``moment``."""

    if not isinstance(moment, datetime):
        raise InvalidInputError("moment must be a datetime", field="moment")
    factor = user_factor(user_id)
    date_sum = moment.year + moment.month + moment.day
    time_sum = date_sum + moment.hour + moment.minute
    upper = (date_sum + factor) % 8 or 8
    lower = (time_sum + factor) % 8 or 8
    line = (time_sum + factor) % LINE_COUNT + 1

    primary = hexagram_for_trigrams(upper, lower)
    changed = changed_hexagram(primary, line)
    LOG.debug("Cast %s -> %s (line %s) at %s", primary.name, changed.name, line, moment)
    return HexagramReading(
        cast_at=moment,
        user_factor=factor,
        primary=primary,
        changing_line=line,
        changed=changed,
    )


__all__ = [
    "TRIGRAMS",
    "HEXAGRAMS",
    "HEXAGRAM_NAMES",
    "Trigram",
    "Hexagram",
    "HexagramReading",
    "trigram_for_number",
    "hexagram_by_number",
    "hexagram_for_trigrams",
    "hexagram_by_binary",
    "changed_hexagram",
    "user_factor",
    "cast_hexagram",
]
