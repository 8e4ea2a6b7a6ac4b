"""Fuzzy filtering of selector entries and the selection cursor over the matches."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import TypeVar

T = TypeVar("T")

_SCORE_MATCH = 16
_SCORE_GAP_START = -3
_SCORE_GAP_EXTENSION = -1
_BONUS_BOUNDARY = 8
_BONUS_NON_WORD = 8
_BONUS_CAMEL = 7
_BONUS_CONSECUTIVE = 4
_BONUS_FIRST_CHAR_MULTIPLIER = 2


class _CharClass(Enum):
    NON_WORD = "non_word"
    LOWER = "lower"
    UPPER = "upper"
    NUMBER = "number"


def _char_class(c: str) -> _CharClass:
    if c.islower():
        return _CharClass.LOWER
    if c.isupper():
        return _CharClass.UPPER
    if c.isdigit():
        return _CharClass.NUMBER
    if c.isalpha():
        return _CharClass.LOWER
    return _CharClass.NON_WORD


def _bonus(prev: _CharClass, current: _CharClass) -> int:
    if prev is _CharClass.NON_WORD and current is not _CharClass.NON_WORD:
        return _BONUS_BOUNDARY
    if (prev is _CharClass.LOWER and current is _CharClass.UPPER) or (
        prev is not _CharClass.NUMBER and current is _CharClass.NUMBER
    ):
        return _BONUS_CAMEL
    if current is _CharClass.NON_WORD:
        return _BONUS_NON_WORD
    return 0


def fuzzy_score(text: str, pattern: str) -> int | None:
    """Score ``pattern`` as a subsequence of ``text``; None when it does not match.

    Matching ignores case unless the pattern holds an upper-case letter.
    Matches at word starts and runs of consecutive characters score higher.
    """
    if not pattern:
        return 0

    case_sensitive = any(c.isupper() for c in pattern)
    haystack = text if case_sensitive else text.lower()
    needle = pattern if case_sensitive else pattern.lower()

    classes = [_char_class(c) for c in text]
    bonuses = [
        _bonus(classes[j - 1] if j > 0 else _CharClass.NON_WORD, cls)
        for j, cls in enumerate(classes)
    ]

    # row maps a text position to (score, bonus carried by the consecutive run)
    previous: dict[int, tuple[int, int]] = {}
    for i, pc in enumerate(needle):
        current: dict[int, tuple[int, int]] = {}
        for j, tc in enumerate(haystack):
            if tc != pc:
                continue
            bonus = bonuses[j]
            if i == 0:
                current[j] = (_SCORE_MATCH + bonus * _BONUS_FIRST_CHAR_MULTIPLIER, bonus)
                continue

            best: tuple[int, int] | None = None
            if j - 1 in previous:
                prev_score, carried = previous[j - 1]
                run_bonus = max(bonus, carried, _BONUS_CONSECUTIVE)
                best = (prev_score + _SCORE_MATCH + run_bonus, run_bonus)
            for k, (prev_score, _) in previous.items():
                if k >= j - 1:
                    continue
                gap = _SCORE_GAP_START + (j - k - 2) * _SCORE_GAP_EXTENSION
                candidate = prev_score + _SCORE_MATCH + bonus + gap
                if best is None or candidate > best[0]:
                    best = (candidate, bonus)
            if best is not None:
                current[j] = best
        if not current:
            return None
        previous = current

    return max(score for score, _ in previous.values())


def filtered_indexes_by_query(
    items: Sequence[T], query: str, identifier_of: Callable[[T], str]
) -> list[int]:
    """Indexes of items matching ``query``, best score first; all items for an empty query."""
    if not query:
        return list(range(len(items)))

    scored = [
        (index, score)
        for index, item in enumerate(items)
        if (score := fuzzy_score(identifier_of(item), query)) is not None
    ]
    scored.sort(key=lambda entry: entry[1], reverse=True)
    return [index for index, _ in scored]


def selected_item_index(filtered_indexes: Sequence[int], selected_index: int) -> int | None:
    """The item index under the cursor, or None when the cursor is past the matches."""
    if 0 <= selected_index < len(filtered_indexes):
        return filtered_indexes[selected_index]
    return None


@dataclass
class FilterState:
    """Search query, matching item indexes and the cursor over them."""

    item_count: int
    page_scroll_size: int
    indexes: list[int] = field(init=False)
    selected_index: int = field(init=False, default=0)
    query: str = field(init=False, default="")

    def __post_init__(self) -> None:
        self.indexes = list(range(self.item_count))

    def refresh(self, items: Sequence[T], identifier_of: Callable[[T], str]) -> None:
        """Re-run the query over ``items`` and reset the cursor."""
        self.indexes = filtered_indexes_by_query(items, self.query, identifier_of)
        self.item_count = len(items)
        self.selected_index = 0

    def has_query(self) -> bool:
        return bool(self.query)

    def move_selection_by(self, delta: int) -> None:
        """Move the cursor, clamped to the matches."""
        if not self.indexes or delta == 0:
            return
        target = self.selected_index + delta
        self.selected_index = min(max(target, 0), len(self.indexes) - 1)

    def move_up(self) -> None:
        self.move_selection_by(-1)

    def move_down(self) -> None:
        self.move_selection_by(1)

    def page_up(self) -> None:
        self.move_selection_by(-self.page_scroll_size)

    def page_down(self) -> None:
        self.move_selection_by(self.page_scroll_size)

    def select_first(self) -> None:
        self.selected_index = 0

    def select_last(self) -> None:
        if self.indexes:
            self.selected_index = len(self.indexes) - 1

    def home(self) -> None:
        self.select_first()

    def end(self) -> None:
        self.select_last()

    def add_char(self, c: str) -> None:
        self.query += c

    def remove_char(self) -> None:
        self.query = self.query[:-1]

    def clear_search(self) -> None:
        self.query = ""

    def selected_item_index(self) -> int | None:
        return selected_item_index(self.indexes, self.selected_index)