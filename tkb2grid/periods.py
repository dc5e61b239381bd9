"""
periods.py - Tabela casova (tiết) sa satnicom

Fiksna referentna tabela od 14 casova. Kompozitor je ne racuna nego
samo cita: svaki red grida odgovara jednom LessonPeriod-u.
"""
from .models import LessonPeriod

LESSON_TIMES = (
    LessonPeriod(1, "7:00", "7:50"),
    LessonPeriod(2, "8:00", "8:50"),
    LessonPeriod(3, "9:00", "9:50"),
    LessonPeriod(4, "10:00", "10:50"),
    LessonPeriod(5, "11:00", "11:50"),
    LessonPeriod(6, "12:30", "13:20"),
    LessonPeriod(7, "13:30", "14:20"),
    LessonPeriod(8, "14:30", "15:20"),
    LessonPeriod(9, "15:30", "16:20"),
    LessonPeriod(10, "16:30", "17:20"),
    LessonPeriod(11, "17:30", "18:15"),
    LessonPeriod(12, "18:15", "19:00"),
    LessonPeriod(13, "19:10", "19:55"),
    LessonPeriod(14, "19:55", "20:40"),
)

_BY_NUMBER = {p.lesson_number: p for p in LESSON_TIMES}


def period_for(lesson_number):
    """Vraca LessonPeriod za redni broj casa. KeyError ako ne postoji."""
    return _BY_NUMBER[lesson_number]
