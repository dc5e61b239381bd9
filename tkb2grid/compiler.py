"""
compiler.py - Kompozitor grida (LessonRecord-i -> GridModel)

Rasporedjuje parsirane zapise na sedmicni grid (cas x dan) u skladu
sa filterima prikaza.

Koraci:
    1. Filtriranje zapisa po sedmici (ako je ukljucen prikaz po sedmici)
    2. Indeksiranje zapisa po kodu dana
    3. Izbor kolona (svi dani ili samo danasnji)
    4. Izbor redova (svi casovi ili samo zauzeti)
    5. Popunjavanje celija, redoslijed zapisa se cuva
"""
from functools import lru_cache
from typing import Dict, List, Optional, Sequence

from .ir import CellEntry, GridCell, GridModel, GridRow
from .models import DAY_CODES, FilterState, LessonPeriod, LessonRecord
from .periods import LESSON_TIMES
from .utils import today_day_code


class GridCompositor:
    """Kompajlira listu LessonRecord-a u GridModel.

    Cista funkcija svojih ulaza: isti zapisi, redovi, filteri i
    danasnji dan uvijek daju isti GridModel."""

    def __init__(self, records: Sequence[LessonRecord],
                 rows: Sequence[LessonPeriod] = LESSON_TIMES,
                 filters: Optional[FilterState] = None,
                 today: Optional[int] = None):
        self.records = list(records)
        self.rows = list(rows)
        self.filters = filters or FilterState()
        self.today = today if today is not None else today_day_code()

    def compose(self) -> GridModel:
        """Glavna metoda: gradi GridModel."""
        active = self._active_records()
        by_day = self._index_by_day(active)
        days = self._visible_days()

        grid_rows = []
        for period in self.rows:
            if self.filters.only_occupied_rows and not self._row_occupied(period, active):
                continue
            cells = tuple(
                self._build_cell(period.lesson_number, day, by_day.get(day, []))
                for day in days
            )
            grid_rows.append(GridRow(period, cells))

        return GridModel(self.filters, days, tuple(grid_rows))

    # ------------------------------------------------------------------
    # Pomocne metode
    # ------------------------------------------------------------------

    def _active_records(self) -> List[LessonRecord]:
        """Zapisi aktivni u izabranoj sedmici (ili svi, bez prikaza po sedmici)."""
        if not self.filters.week_mode:
            return self.records
        week = self.filters.selected_week
        return [r for r in self.records if r.is_active_in(week)]

    def _index_by_day(self, records) -> Dict[int, List[LessonRecord]]:
        """{kod_dana: [zapisi sa barem jednim terminom tog dana]}, redom unosa."""
        index = {}
        for record in records:
            for day in dict.fromkeys(t.day_code for t in record.time_slots):
                index.setdefault(day, []).append(record)
        return index

    def _visible_days(self):
        if self.filters.only_today:
            return (self.today,)
        return DAY_CODES

    def _row_occupied(self, period, records):
        """Red je zauzet ako ga pokriva bilo koji termin bilo kojeg dana.
        Filter 'samo danas' se ovdje ne primjenjuje."""
        return any(r.spans_lesson(period.lesson_number) for r in records)

    def _build_cell(self, lesson_number, day, candidates):
        entries = []
        for record in candidates:
            slots = record.slots_at(day, lesson_number)
            if slots:
                entries.append(CellEntry(record, ", ".join(t.label for t in slots)))
        return GridCell(day, lesson_number, tuple(entries))


@lru_cache(maxsize=32)
def _compose_cached(records, rows, filters, today):
    return GridCompositor(records, rows, filters, today).compose()


def compose_grid(records, rows=LESSON_TIMES, filters=None, today=None) -> GridModel:
    """Memoizirani ulaz u kompozitor.

    today je kod danasnjeg dana (2..8); ako nije dat, racuna se iz
    sistemskog datuma. Kes kljuc je tacan ulaz, pa promjena bilo kojeg
    zapisa ili filtera daje novi izracun."""
    if today is None:
        today = today_day_code()
    return _compose_cached(tuple(records), tuple(rows), filters or FilterState(), today)
