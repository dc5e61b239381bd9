#!/usr/bin/env python3
"""
tkb.py - Parser tabele rasporeda (thời khoá biểu) u grid prikaz

Ovaj fajl je glavni ulazni punkt za rad sa rasporedima.
Cita tabelu kopiranu sa studentskog portala (kolone odvojene tabom),
parsira je u zapise i rasporedjuje ih na sedmicni grid (cas x dan).

Hijerarhija konfiguracije:
    1. CLI argumenti (najjaci prioritet)
    2. Fajl stanja (--state), snima se nakon svake promjene
    3. Podrazumijevane vrijednosti iz tkb2grid.state.AppState (fallback)
"""

import argparse
import json
import logging
import signal
import sys

from tkb2grid.compiler import compose_grid
from tkb2grid.exporter import CUSTOM_DEFAULTS, append_line, custom_lesson_line
from tkb2grid.generators import (
    GridGenerator,
    JSONScheduleGenerator,
    MarkdownReportGenerator,
    TextGridGenerator,
)
from tkb2grid.models import MONDAY, SUNDAY, day_label
from tkb2grid.state import AppState
from tkb2grid.utils import build_share_url, strip_share_param
from tkb2grid.validator import validate_text

logger = logging.getLogger("tkb")

# Omogucava cist izlaz pri pipe-anju (npr. | head, | grep)
if hasattr(signal, "SIGPIPE"):
    signal.signal(signal.SIGPIPE, signal.SIG_DFL)


def setup_logging(verbose=False, log_path=None):
    """Konfigurise root logger: poruke na stderr, opcionalno i u fajl."""
    root = logging.getLogger()
    root.setLevel(logging.DEBUG if verbose else logging.INFO)
    if root.hasHandlers():
        root.handlers.clear()

    ch = logging.StreamHandler(sys.stderr)
    ch.setFormatter(logging.Formatter('%(message)s'))
    root.addHandler(ch)

    if log_path:
        fh = logging.FileHandler(log_path, encoding='utf-8')
        fh.setFormatter(logging.Formatter('%(asctime)s [%(levelname)s] %(message)s'))
        root.addHandler(fh)
    return root


def build_arg_parser():
    parser = argparse.ArgumentParser(
        description="Parser tabele rasporeda sa portala u sedmicni grid "
                    "(HTML/Markdown/JSON/tekst)."
    )

    # Ulaz
    parser.add_argument("-i", "--input",
                        help="Fajl sa kopiranom tabelom ('-' za stdin)")
    parser.add_argument("--share-url",
                        help="URL sa 'data' parametrom (dijeljeni raspored)")
    parser.add_argument("--state",
                        help="JSON fajl stanja (ucitava se pri startu, snima nakon promjena)")
    parser.add_argument("--reset", action="store_true",
                        help="Vrati tekst i sva podesavanja na pocetne vrijednosti")

    # Filteri prikaza
    parser.add_argument("--week", type=int,
                        help="Prikazi samo izabranu sedmicu (ukljucuje prikaz po sedmici)")
    parser.add_argument("--by-week", action=argparse.BooleanOptionalAction, default=None,
                        help="Prikaz po sedmici")
    parser.add_argument("--only-today", action=argparse.BooleanOptionalAction, default=None,
                        help="Samo kolona danasnjeg dana")
    parser.add_argument("--only-occupied", action=argparse.BooleanOptionalAction, default=None,
                        help="Samo redovi (casovi) u kojima ima nastave")
    parser.add_argument("--today", type=int, choices=range(MONDAY, SUNDAY + 1),
                        help="Kod danasnjeg dana (2-8), umjesto sistemskog datuma")

    # Custom predmet
    parser.add_argument("--add", nargs=3, metavar=("NAZIV", "NASTAVNIK", "PROSTORIJA"),
                        help="Dodaj rucno unesen predmet")
    parser.add_argument("--day", type=int, default=CUSTOM_DEFAULTS['day'],
                        help="Dan za --add (2-8, default: 2)")
    parser.add_argument("--start", type=int, default=CUSTOM_DEFAULTS['start'],
                        help="Pocetni cas za --add (default: 1)")
    parser.add_argument("--end", type=int, default=CUSTOM_DEFAULTS['end'],
                        help="Zavrsni cas za --add (default: 10)")
    parser.add_argument("--week-from", type=int, default=CUSTOM_DEFAULTS['week_from'],
                        help="Prva sedmica za --add (default: 1)")
    parser.add_argument("--week-to", type=int, default=CUSTOM_DEFAULTS['week_to'],
                        help="Zadnja sedmica za --add (default: 2)")

    # Izlazni formati
    parser.add_argument("-g", "--grid", help="Direktorij za grid HTML")
    parser.add_argument("-m", "--md", help="Putanja za Markdown izvjestaj")
    parser.add_argument("-j", "--json", help="Putanja za JSON izlaz")
    parser.add_argument("-s", "--stdout", action="store_true",
                        help="Ispisi JSON na standardni izlaz (stdout)")
    parser.add_argument("-t", "--text", action="store_true",
                        help="Ispisi grid kao tekst tabelu na stdout")
    parser.add_argument("-a", "--dump", action="store_true",
                        help="Ispisi parsirane zapise na stdout (debug/inspekcija)")
    parser.add_argument("--link", metavar="BASE_URL",
                        help="Ispisi link za dijeljenje rasporeda")
    parser.add_argument("--check", action="store_true",
                        help="Prijavi linije koje nisu prepoznate kao predmeti")

    # Logovanje
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Detaljno logovanje (ukljucuje razloge odbacivanja linija)")
    parser.add_argument("--log-file", help="Dodatno loguj u fajl")
    return parser


def main(argv=None):
    parser = build_arg_parser()
    args = parser.parse_args(argv)
    setup_logging(args.verbose, args.log_file)

    # Provjera da je specificiran barem jedan izlaz ili promjena stanja
    has_output = any([args.grid, args.md, args.json, args.stdout, args.text,
                      args.dump, args.link, args.check])
    changes_state = bool(args.state) and any([
        args.reset, args.add, args.input, args.share_url, args.week is not None,
        args.by_week is not None, args.only_today is not None,
        args.only_occupied is not None,
    ])
    if not has_output and not changes_state:
        parser.print_help(sys.stderr)
        print("\nGreska: nije specificiran izlaz."
              " Koristite -g, -m, -j, -s, -t, -a, --link ili --check.", file=sys.stderr)
        return 1

    # -------------------------------------------------------------------
    # 1. Ucitavanje stanja
    # -------------------------------------------------------------------
    state = AppState.load(args.state)
    if args.reset:
        state.reset()
        logger.info("Stanje vraceno na pocetne vrijednosti.")

    # -------------------------------------------------------------------
    # 2. Sirovi tekst (fajl/stdin ili share link zamjenjuju postojeci)
    # -------------------------------------------------------------------
    if args.input:
        text = _read_input(args.input)
        if text is None:
            return 1
        state.update(raw_text=text)

    if args.share_url:
        text, cleaned_url = strip_share_param(args.share_url)
        if text is None:
            logger.warning("URL ne sadrzi validan 'data' parametar. Ignorisem.")
        else:
            state.update(raw_text=text)
            logger.info(f"Raspored ucitan iz linka. Cist URL: {cleaned_url}")

    # -------------------------------------------------------------------
    # 3. Custom predmet
    # -------------------------------------------------------------------
    if args.add:
        name, instructor, room = args.add
        try:
            line = custom_lesson_line(name, instructor, room, day=args.day,
                                      start=args.start, end=args.end,
                                      week_from=args.week_from, week_to=args.week_to)
        except ValueError as e:
            parser.error(str(e))
        state.update(raw_text=append_line(state.raw_text, line))
        logger.info(f"Dodan predmet: {name.strip()} ({day_label(args.day)})")

    # -------------------------------------------------------------------
    # 4. Filteri (CLI > stanje)
    # -------------------------------------------------------------------
    changes = {}
    if args.week is not None:
        changes['week'] = args.week
        changes['week_mode'] = True
    if args.by_week is not None:
        changes['week_mode'] = args.by_week
    if args.only_today is not None:
        changes['only_today'] = args.only_today
    if args.only_occupied is not None:
        changes['only_occupied_rows'] = args.only_occupied
    if changes:
        try:
            state.update(**changes)
        except ValueError as e:
            parser.error(str(e))

    # -------------------------------------------------------------------
    # 5. Parsiranje i kompozicija
    # -------------------------------------------------------------------
    lessons = state.lessons()
    filters = state.filters()
    model = compose_grid(lessons, filters=filters, today=args.today)

    week_desc = f"sedmica {filters.selected_week}" if filters.week_mode else "sve sedmice"
    logger.info(f"Ucitano predmeta: {len(lessons)} ({week_desc})")

    if args.check:
        _report_invalid(state.raw_text)

    if args.dump:
        _print_lessons(lessons)

    # -------------------------------------------------------------------
    # 6. Generisanje izlaza
    # -------------------------------------------------------------------

    # JSON
    if args.json or args.stdout:
        output_data = JSONScheduleGenerator(model, lessons).generate()

        if args.json:
            with open(args.json, 'w', encoding='utf-8') as f:
                json.dump(output_data, f, indent=4, ensure_ascii=False)
            logger.info(f"Generisan JSON: {args.json}")

        if args.stdout:
            print(json.dumps(output_data, indent=4, ensure_ascii=False))

    # Markdown
    if args.md:
        md_gen = MarkdownReportGenerator(lessons)
        with open(args.md, 'w', encoding='utf-8') as f:
            f.write(md_gen.generate())
        logger.info(f"Generisan Markdown: {args.md}")

    # Grid HTML
    if args.grid:
        path = GridGenerator(model, args.grid).generate()
        logger.info(f"Generisan grid HTML: {path}")

    # Tekst grid
    if args.text:
        print(TextGridGenerator(model).generate())

    # Link za dijeljenje
    if args.link:
        print(build_share_url(args.link, state.raw_text))

    return 0


# ---------------------------------------------------------------------------
# Pomocne funkcije
# ---------------------------------------------------------------------------

def _read_input(path):
    """Cita ulazni tekst iz fajla ili stdin-a. Vraca None ako fajl ne postoji."""
    if path == "-":
        return sys.stdin.read()
    try:
        with open(path, 'r', encoding='utf-8') as f:
            return f.read()
    except FileNotFoundError:
        logger.error(f"Greska: Ulazni fajl '{path}' nije pronadjen.")
        return None


def _report_invalid(text):
    """Loguje linije koje nisu prepoznate kao predmeti."""
    valid, invalid = validate_text(text)
    for line_number, line, reason in invalid:
        logger.warning(f"Linija {line_number}: {reason}")
        logger.debug(f"   {line!r}")
    logger.info(f"Prepoznato linija: {len(valid)}, preskoceno: {len(invalid)}")


def _print_lessons(lessons):
    """Ispisuje parsirane zapise na stdout.
    Koristi se sa -a/--dump flagom za debug i inspekciju."""
    print("=== ZAPISI ===")
    for record in lessons:
        print(f"{record.id}: {record.name} / {record.instructor or '-'}")
        for t in record.time_slots:
            print(f"   {t}")
        for wr in record.week_ranges:
            print(f"   {wr}")
    print("==============")


if __name__ == "__main__":
    sys.exit(main())
