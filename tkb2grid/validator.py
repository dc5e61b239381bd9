"""
validator.py - Dijagnostika zalijepljenog teksta

Razdvaja linije koje su postale zapisi od onih koje su odbacene i
za svaku odbacenu liniju daje razlog. Parser sam nikad ne prijavljuje
greske (odbacivanje je tiho), pa se ovo koristi samo za izvjestaj
(tkb.py --check).
"""
from .parser import LineRejected, parse_line_strict
from .utils import split_lines


def validate_text(text):
    """Validira svaku nepraznu liniju teksta.

    Vraca:
        (valid, invalid) - valid je lista LessonRecord-ova (isto sto i
        build_lesson_set), invalid je lista (broj_linije, linija, razlog)
        trojki. Brojevi linija pocinju od 1.
    """
    valid = []
    invalid = []

    for line_number, line in enumerate(split_lines(text), start=1):
        if not line.strip():
            continue
        try:
            valid.append(parse_line_strict(line))
        except LineRejected as e:
            invalid.append((line_number, line, e.reason))

    return valid, invalid
