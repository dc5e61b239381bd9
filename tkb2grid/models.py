"""
models.py - Modeli podataka za parsirani raspored

Definise zapise koji nastaju parsiranjem jedne linije tabele rasporeda
(LessonRecord sa TimeSlot i WeekRange listama) i ulazne vrijednosti
za kompozitor grida (LessonPeriod, FilterState).

Svi modeli su nepromjenjivi (frozen): jedini nacin da se raspored
promijeni je dodavanje nove linije u sirovi tekst i ponovno parsiranje.
"""
from dataclasses import dataclass
from datetime import time
from typing import Tuple


# ---------------------------------------------------------------------------
# Kodovi dana (konvencija portala: 2 = ponedjeljak ... 8 = nedjelja)
# ---------------------------------------------------------------------------
MONDAY = 2
SUNDAY = 8
DAY_CODES = tuple(range(MONDAY, SUNDAY + 1))

FIRST_LESSON = 1
LAST_LESSON = 14


def day_label(day_code):
    """Naziv kolone za kod dana: 'Thứ 2' ... 'Thứ 7', 'Chủ nhật'."""
    if day_code == SUNDAY:
        return "Chủ nhật"
    return f"Thứ {day_code}"


# ---------------------------------------------------------------------------
# Zapis jednog predmeta
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class TimeSlot:
    """Jedan termin: dan, raspon casova (ukljucivo) i oznaka (prostorija)."""
    day_code: int       # 2..8
    lesson_start: int   # 1..14
    lesson_end: int     # 1..14, >= lesson_start
    label: str          # npr. "F308"

    def covers(self, day_code, lesson_number):
        return (self.day_code == day_code
                and self.lesson_start <= lesson_number <= self.lesson_end)


@dataclass(frozen=True)
class WeekRange:
    """Ukljucivi raspon sedmica u kojima je predmet aktivan."""
    start: int          # >= 1
    end: int            # >= start

    def contains(self, week):
        return self.start <= week <= self.end


@dataclass(frozen=True)
class LessonRecord:
    """Jedan red tabele rasporeda nakon parsiranja.

    Ima barem jedan TimeSlot i barem jedan WeekRange, inace se ne kreira."""
    id: str
    name: str
    instructor: str
    time_slots: Tuple[TimeSlot, ...]
    week_ranges: Tuple[WeekRange, ...]

    def __post_init__(self):
        # tuple, da bi zapis bio hashable (kljuc kesa u compose_grid)
        object.__setattr__(self, "time_slots", tuple(self.time_slots))
        object.__setattr__(self, "week_ranges", tuple(self.week_ranges))

    def is_active_in(self, week):
        """Da li je predmet aktivan u datoj sedmici."""
        return any(wr.contains(week) for wr in self.week_ranges)

    def slots_at(self, day_code, lesson_number):
        """Svi termini koji pokrivaju celiju (dan, cas), u redoslijedu unosa."""
        return [t for t in self.time_slots if t.covers(day_code, lesson_number)]

    def occupies(self, day_code, lesson_number):
        return any(t.covers(day_code, lesson_number) for t in self.time_slots)

    def spans_lesson(self, lesson_number):
        """Da li bilo koji termin (bilo kojeg dana) pokriva dati cas."""
        return any(t.lesson_start <= lesson_number <= t.lesson_end
                   for t in self.time_slots)


# ---------------------------------------------------------------------------
# Ulazi za kompozitor
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class LessonPeriod:
    """Jedan red tabele casova (tiết) sa satnicom."""
    lesson_number: int
    start: str          # "7:00"
    end: str            # "7:50"

    @property
    def start_time(self) -> time:
        hour, minute = self.start.split(":")
        return time(int(hour), int(minute))

    @property
    def end_time(self) -> time:
        hour, minute = self.end.split(":")
        return time(int(hour), int(minute))

    @property
    def label(self):
        return f"Tiết {self.lesson_number}"

    @property
    def time_range(self):
        return f"{self.start} - {self.end}"


@dataclass(frozen=True)
class FilterState:
    """Filteri prikaza. Svi su nezavisni jedan od drugog."""
    week_mode: bool = False
    selected_week: int = 1
    only_today: bool = False
    only_occupied_rows: bool = False
