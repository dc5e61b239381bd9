"""
ir.py - Model izlaza kompozitora (grid)

Srednji sloj izmedju parsiranih zapisa i izlaznih generatora.
LessonRecord-i su sirovi podaci iz parsiranja, a GridModel sadrzi
razrijesene celije (cas x dan) sa zapisima koji ih zauzimaju.

Kompozitor (compiler.py) pravi GridModel.
Generatori (generators/) citaju iz GridModel-a.
"""
from dataclasses import dataclass
from typing import Dict, List, Tuple

from .models import FilterState, LessonPeriod, LessonRecord


@dataclass(frozen=True)
class CellEntry:
    """Jedan predmet u celiji sa oznakama termina koji pokrivaju celiju."""
    record: LessonRecord
    label: str          # oznake spojene sa ", "


@dataclass(frozen=True)
class GridCell:
    day_code: int
    lesson_number: int
    entries: Tuple[CellEntry, ...]

    @property
    def records(self) -> List[LessonRecord]:
        return [e.record for e in self.entries]

    @property
    def is_empty(self):
        return not self.entries


@dataclass(frozen=True)
class GridRow:
    """Jedan red grida: cas i celije za prikazane dane (istim redom)."""
    period: LessonPeriod
    cells: Tuple[GridCell, ...]

    @property
    def lesson_number(self):
        return self.period.lesson_number


@dataclass(frozen=True)
class GridModel:
    """Korijenski objekat izlaza kompozitora.

    days su kodovi prikazanih kolona (svih 7 ili samo danasnji dan),
    rows su prikazani redovi (bez praznih ako je ukljucen taj filter)."""
    filters: FilterState
    days: Tuple[int, ...]
    rows: Tuple[GridRow, ...]

    def cell(self, lesson_number, day_code) -> GridCell:
        """Celija za (cas, dan). KeyError ako red ili kolona nisu prikazani."""
        for row in self.rows:
            if row.lesson_number == lesson_number:
                for cell in row.cells:
                    if cell.day_code == day_code:
                        return cell
        raise KeyError((lesson_number, day_code))

    def as_mapping(self) -> Dict[Tuple[int, int], List[LessonRecord]]:
        """{(cas, dan): [LessonRecord, ...]} za sve prikazane celije."""
        return {
            (cell.lesson_number, cell.day_code): cell.records
            for row in self.rows
            for cell in row.cells
        }

    @property
    def is_empty(self):
        return all(cell.is_empty for row in self.rows for cell in row.cells)
