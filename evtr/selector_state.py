"""State and command handling of the device selector screen."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum

from evtr.filter import FilterState


class SelectorMode(Enum):
    """Whether the selector is browsing devices or showing help."""

    BROWSING = "browsing"
    HELP = "help"

    def is_browsing(self) -> bool:
        return self is SelectorMode.BROWSING


class CommandKind(Enum):
    """Actions the selector understands."""

    EXIT = "exit"
    BACK = "back"
    TOGGLE_HELP = "toggle_help"
    REFRESH = "refresh"
    SELECT = "select"
    CLEAR_SEARCH = "clear_search"
    DELETE_CHAR = "delete_char"
    ADD_CHAR = "add_char"
    MOVE_UP = "move_up"
    MOVE_DOWN = "move_down"
    PAGE_UP = "page_up"
    PAGE_DOWN = "page_down"
    HOME = "home"
    END = "end"
    NONE = "none"


@dataclass(frozen=True)
class SelectorCommand:
    """A selector action; ``char`` is set for ADD_CHAR only."""

    kind: CommandKind
    char: str | None = None

    @classmethod
    def add_char(cls, c: str) -> SelectorCommand:
        return cls(CommandKind.ADD_CHAR, c)


class SelectorTransition(Enum):
    """What the selector loop should do after a command."""

    STAY = "stay"
    EXIT = "exit"
    REFRESH_DEVICES = "refresh_devices"
    OPEN_SELECTION = "open_selection"


def _identity(label: str) -> str:
    return label


class SelectorState:
    """Search filter, error message and mode of the selector."""

    def __init__(
        self,
        identifiers: Sequence[str],
        error_message: str | None,
        page_scroll_size: int,
    ) -> None:
        self.filter = FilterState(len(identifiers), page_scroll_size)
        self.error_message = error_message
        self.mode = SelectorMode.BROWSING

    def apply_discovery(self, identifiers: Sequence[str], error_message: str | None) -> None:
        """Re-filter a fresh device list and show its discovery error, if any."""
        self._refresh_filter(identifiers)
        self.error_message = error_message

    def reduce(
        self, command: SelectorCommand, identifiers: Sequence[str]
    ) -> SelectorTransition:
        """Apply ``command`` and say what should happen next."""
        if self.mode.is_browsing():
            self.error_message = None

        kind = command.kind
        if kind is CommandKind.EXIT:
            return SelectorTransition.EXIT
        if kind is CommandKind.BACK:
            return self._back_transition(identifiers)
        if kind is CommandKind.REFRESH:
            return SelectorTransition.REFRESH_DEVICES
        if kind is CommandKind.SELECT:
            return self._select_transition(len(identifiers))

        if kind is CommandKind.TOGGLE_HELP:
            self.mode = (
                SelectorMode.HELP if self.mode is SelectorMode.BROWSING else SelectorMode.BROWSING
            )
        elif kind is CommandKind.CLEAR_SEARCH:
            self._clear_search(identifiers)
        elif kind is CommandKind.DELETE_CHAR:
            self.filter.remove_char()
            self._refresh_filter(identifiers)
        elif kind is CommandKind.ADD_CHAR:
            if command.char:
                self.filter.add_char(command.char)
            self._refresh_filter(identifiers)
        elif kind is CommandKind.MOVE_UP:
            self.filter.move_up()
        elif kind is CommandKind.MOVE_DOWN:
            self.filter.move_down()
        elif kind is CommandKind.PAGE_UP:
            self.filter.page_up()
        elif kind is CommandKind.PAGE_DOWN:
            self.filter.page_down()
        elif kind is CommandKind.HOME:
            self.filter.home()
        elif kind is CommandKind.END:
            self.filter.end()
        return SelectorTransition.STAY

    def search_query(self) -> str:
        return self.filter.query

    def filtered_indexes(self) -> list[int]:
        return self.filter.indexes

    def selected_filtered_index(self) -> int:
        return self.filter.selected_index

    def selected_device_index(self) -> int | None:
        return self.filter.selected_item_index()

    def _refresh_filter(self, identifiers: Sequence[str]) -> None:
        self.filter.refresh(identifiers, _identity)

    def _clear_search(self, identifiers: Sequence[str]) -> None:
        self.filter.clear_search()
        self._refresh_filter(identifiers)

    def _back_transition(self, identifiers: Sequence[str]) -> SelectorTransition:
        if self.filter.has_query():
            self._clear_search(identifiers)
            return SelectorTransition.STAY
        return SelectorTransition.EXIT

    def _select_transition(self, device_count: int) -> SelectorTransition:
        if not self.filter.indexes:
            return SelectorTransition.REFRESH_DEVICES
        index = self.filter.selected_item_index()
        if index is not None and index < device_count:
            return SelectorTransition.OPEN_SELECTION
        return SelectorTransition.STAY


def empty_state_message(search_query: str) -> str:
    """Text shown when the device list is empty."""
    if not search_query:
        return "No readable input devices. Press Enter or Ctrl-R to refresh."
    return "No devices match the current search."