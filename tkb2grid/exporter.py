"""
exporter.py - Eksport zapisa nazad u format tabele portala

Generise linije u istom formatu koji parser cita:
    - format_time_slots / format_week_ranges: mini-gramatike kolona 7 i 8
    - format_line: cijela linija za jedan LessonRecord
    - custom_lesson_line: linija za rucno dodan predmet (forma "Thêm lịch")
    - append_line: dodavanje linije na postojeci sirovi tekst

Sve sto ovdje nastane mora proci kroz parse_line bez gubitka podataka.
"""
from .models import MONDAY, SUNDAY, day_label
from .parser import LineRejected, parse_line_strict

# Placeholder vrijednosti koje forma upisuje u kolone bez znacenja
CUSTOM_ORDINAL = "99"
CUSTOM_CODE = "1234567.1234.12.34"
CUSTOM_CREDITS = "3"

# Podrazumijevane vrijednosti forme za custom predmet
CUSTOM_DEFAULTS = {
    'day': 2,
    'start': 1,
    'end': 10,
    'week_from': 1,
    'week_to': 2,
}


def format_time_slots(slots):
    """(TimeSlot, ...) -> 'Thứ 2,1-3,F308;Thứ 5,6-7,F201'"""
    return ";".join(
        f"{day_label(t.day_code)},{t.lesson_start}-{t.lesson_end},{t.label}"
        for t in slots
    )


def format_week_ranges(ranges):
    """(WeekRange, ...) -> '1-8,10,12-17' (jedna sedmica bez crtice)."""
    parts = []
    for wr in ranges:
        if wr.start == wr.end:
            parts.append(str(wr.start))
        else:
            parts.append(f"{wr.start}-{wr.end}")
    return ",".join(parts)


def _build_line(ordinal, code, name, credits, instructor, schedule, weeks):
    fields = [ordinal, code, name, credits, "", "", instructor, schedule, weeks]
    return "\t".join(str(f) for f in fields)


def format_line(record, ordinal=CUSTOM_ORDINAL, code=CUSTOM_CODE):
    """Serijalizuje LessonRecord u jednu liniju tabele.
    ID se ne cuva (izvodi se iz linije pri ponovnom parsiranju)."""
    return _build_line(
        ordinal, code, record.name, CUSTOM_CREDITS, record.instructor,
        format_time_slots(record.time_slots),
        format_week_ranges(record.week_ranges),
    )


def custom_lesson_line(name, instructor, room,
                       day=CUSTOM_DEFAULTS['day'],
                       start=CUSTOM_DEFAULTS['start'],
                       end=CUSTOM_DEFAULTS['end'],
                       week_from=CUSTOM_DEFAULTS['week_from'],
                       week_to=CUSTOM_DEFAULTS['week_to']):
    """Linija za rucno dodan predmet.

    Naziv, nastavnik i prostorija su obavezni (forma ne dozvoljava
    prazna polja). Dan se uvijek pise kao broj ('Thứ 8' za nedjelju).
    Gotova linija mora proci parse_line_strict, inace ValueError."""
    missing = [label for label, value in
               (("naziv", name), ("nastavnik", instructor), ("prostorija", room))
               if not value or not str(value).strip()]
    if missing:
        raise ValueError(f"Obavezna polja su prazna: {', '.join(missing)}")
    if not MONDAY <= int(day) <= SUNDAY:
        raise ValueError(f"Dan mora biti izmedju {MONDAY} i {SUNDAY}, dobijeno {day}")
    bad = [label for label, value in
           (("naziv", name), ("nastavnik", instructor), ("prostorija", room))
           if any(ch in str(value) for ch in "\t\r\n")]
    if bad:
        raise ValueError(f"Tab i novi red nisu dozvoljeni: {', '.join(bad)}")
    if ";" in room:
        raise ValueError("Prostorija ne smije sadrzavati ';'")

    schedule = f"Thứ {int(day)},{int(start)}-{int(end)},{room.strip()}"
    weeks = f"{int(week_from)}-{int(week_to)}"
    line = _build_line(
        CUSTOM_ORDINAL, CUSTOM_CODE, name.strip(), CUSTOM_CREDITS,
        instructor.strip(), schedule, weeks,
    )

    # Casovi 1..14, start <= end, sedmice >= 1, od <= do
    try:
        parse_line_strict(line)
    except LineRejected as e:
        raise ValueError(f"Neispravan predmet: {e.reason}") from e
    return line


def append_line(text, line):
    """Dodaje liniju na kraj sirovog teksta (novi red izmedju)."""
    if not text:
        return line
    return text + "\n" + line
