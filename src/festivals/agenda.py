"""Agenda — festivals grouped by the month they start in.

Each month present in the agenda holds at least one festival.  Months are
kept in calendar order and the festivals of a month are kept ordered by name,
ignoring case.  Festivals are only ever added, never removed or replaced.

An ``Agenda`` is not safe for concurrent mutation: ``add()`` reads and writes
the month's list in separate steps, so an owner shared between threads must
serialize access to it.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from festivals.config import MONTH_NOT_FOUND
from festivals.models import Festival, Month, Style


class Agenda:
    """In-memory festival catalog keyed by ``Month``."""

    def __init__(self) -> None:
        self._months: dict[Month, list[Festival]] = {}

    @classmethod
    def from_festivals(cls, festivals: Iterable[Festival]) -> Agenda:
        agenda = cls()
        for festival in festivals:
            agenda.add(festival)
        return agenda

    # -- mutation ------------------------------------------------------------

    def add(self, festival: Festival) -> None:
        """Insert *festival* into its month, keeping the month ordered by name.

        A new month gets a one-element list.  Otherwise the festival goes
        right after every festival whose name is equal or lesser ignoring
        case, so equal names keep the order they were added in.
        """
        month = festival.month
        festivals = self._months.get(month)
        if festivals is None:
            self._months[month] = [festival]
            return
        festivals.insert(_insertion_index(festivals, festival), festival)

    # -- reads ---------------------------------------------------------------

    def render(self) -> str:
        parts: list[str] = []
        for month, festivals in self._sorted_items():
            parts.append(f"{month}:\n")
            for festival in festivals:
                parts.append(f"{festival}\n")
            parts.append("\n")
        return "".join(parts)

    def count_in_month(self, month: Month) -> int:
        """Number of festivals in *month*, or ``MONTH_NOT_FOUND`` (-1) when the
        month has no entry.  Zero is never returned for an absent month."""
        festivals = self._months.get(month)
        return len(festivals) if festivals is not None else MONTH_NOT_FOUND

    def festivals_in(self, month: Month) -> list[Festival] | None:
        festivals = self._months.get(month)
        return list(festivals) if festivals is not None else None

    def months(self) -> list[Month]:
        return sorted(self._months)

    def group_by_style(self) -> dict[Style, list[str]]:
        """Map each style to the sorted, de-duplicated names of its festivals.

        A festival tagged with several styles is listed under each of them.
        Styles come out in ``Style`` order; names in plain string order.
        """
        by_style: dict[Style, set[str]] = {}
        for festival in self:
            for style in festival.styles:
                by_style.setdefault(style, set()).add(festival.name)
        return {style: sorted(by_style[style]) for style in sorted(by_style)}

    def __str__(self) -> str:
        return self.render()

    def __len__(self) -> int:
        return sum(len(festivals) for festivals in self._months.values())

    def __iter__(self) -> Iterator[Festival]:
        for _, festivals in self._sorted_items():
            yield from festivals

    def _sorted_items(self) -> list[tuple[Month, list[Festival]]]:
        return sorted(self._months.items(), key=lambda item: item[0])


def _insertion_index(festivals: list[Festival], festival: Festival) -> int:
    name = _fold_case(festival.name)
    index = 0
    for existing in festivals:
        if _fold_case(existing.name) > name:
            break
        index += 1
    return index


def _fold_case(name: str) -> str:
    """Fold *name* one character at a time: upper case, then lower case.

    Each character maps to exactly one character, so names compare
    position by position.  Characters whose upper case expands (``ß``) are
    left as they are; a lower case that expands (``İ``) keeps its first
    character.
    """
    folded = []
    for char in name:
        upper = char.upper()
        if len(upper) != 1:
            upper = char
        folded.append(upper.lower()[0])
    return "".join(folded)
