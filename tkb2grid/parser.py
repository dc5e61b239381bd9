"""
parser.py - Sintaksna analiza linija rasporeda

Jedna linija kopirane tabele sa portala (kolone odvojene tabom) se
pretvara u LessonRecord. Kolone 7 i 8 imaju vlastite mini-gramatike
koje se tokeniziraju Lexer-om i parsiraju klasom Parser:

    raspored:  descriptor (';' descriptor)*
               descriptor = ('Thứ' (N | 'Chủ nhật') | 'Chủ nhật') ',' S '-' E ',' oznaka
    sedmice:   range (',' range)*
               range = F '-' T | N

Linija koja nije validan red (zaglavlje, prazna linija, pogresan format)
se tiho odbacuje: parse_line vraca None, build_lesson_set je preskace.
Razlog odbacivanja je dostupan kroz parse_line_strict (LineRejected).
"""
import logging
import unicodedata
import zlib

from .lexer import Lexer
from .models import (
    FIRST_LESSON,
    LAST_LESSON,
    MONDAY,
    SUNDAY,
    LessonRecord,
    TimeSlot,
    WeekRange,
)
from .utils import split_lines

logger = logging.getLogger(__name__)

# Minimalan broj kolona u redu tabele
FIELD_COUNT = 9

# Pozicije kolona (0-indeksirano)
FIELD_ORDINAL = 0
FIELD_CODE = 1
FIELD_NAME = 2
FIELD_INSTRUCTOR = 6
FIELD_SCHEDULE = 7
FIELD_WEEKS = 8


class LineRejected(ValueError):
    """Linija nije validan red rasporeda. Jedini oporavljivi uslov u parseru."""
    def __init__(self, reason):
        super().__init__(reason)
        self.reason = reason


class Parser:
    """Parser za izraze rasporeda i sedmica.

    Koristi peek/consume mehanizam za citanje tokena (kao i svaki
    rekurzivni parser), a expect() za mjesta gdje je token obavezan."""

    def __init__(self, text):
        lexer = Lexer(text)
        self.text = lexer.text
        self.tokens = lexer.tokens
        self.pos = 0

    def peek(self, offset=0):
        """Vraca token na trenutnoj poziciji + offset, bez pomjeranja."""
        idx = self.pos + offset
        return self.tokens[idx] if idx < len(self.tokens) else None

    def consume(self, expected=None):
        """Konzumira sljedeci token. Ako je dat expected tip, vraca None
        ako se ne poklapa (bez pomjeranja pozicije)."""
        token = self.peek()
        if not token:
            return None
        if expected and token.type != expected:
            return None
        self.pos += 1
        return token

    def expect(self, expected, what):
        """Kao consume(), ali odbacuje liniju ako token nije ocekivanog tipa."""
        token = self.consume(expected)
        if token is None:
            found = self.peek()
            found_desc = repr(found.value) if found else "kraj izraza"
            raise LineRejected(f"ocekivano {what}, pronadjeno {found_desc}")
        return token

    def _number(self, what):
        return int(self.expect('NUMBER', what).value)

    # ------------------------------------------------------------------
    # Raspored
    # ------------------------------------------------------------------

    def parse_schedule(self):
        """Parsira cijeli izraz rasporeda i vraca tuple TimeSlot-ova."""
        slots = []
        while self.peek():
            # Prazan segment (npr. zavrsni ';')
            if self.consume('SEMI'):
                continue
            slots.append(self._parse_slot())

        if not slots:
            raise LineRejected("prazan izraz rasporeda")
        return tuple(slots)

    def _parse_slot(self):
        """Format: Thứ {D},{S}-{E},{oznaka}"""
        day = self._parse_day()
        self.expect('COMMA', "',' nakon dana")
        start = self._number("pocetni cas")
        self.expect('DASH', "'-' izmedju casova")
        end = self._number("zavrsni cas")
        comma = self.expect('COMMA', "',' ispred oznake")
        label = self._parse_label(comma)

        if not (FIRST_LESSON <= start <= end <= LAST_LESSON):
            raise LineRejected(f"neispravan raspon casova {start}-{end}")
        return TimeSlot(day, start, end, label)

    def _parse_day(self):
        """Dan: 'Thứ 2'..'Thứ 8', 'Thứ CN', 'Chủ nhật' ili 'CN'."""
        if self.consume('THU'):
            if self.consume('SUNDAY'):
                return SUNDAY
            day = self._number("broj dana")
            if not MONDAY <= day <= SUNDAY:
                raise LineRejected(f"neispravan dan {day}")
            return day

        if self.consume('SUNDAY'):
            return SUNDAY

        found = self.peek()
        raise LineRejected(f"ocekivano 'Thứ', pronadjeno {found.value!r}")

    def _parse_label(self, comma):
        """Oznaka je slobodan tekst (moze sadrzavati zareze) do ';' ili kraja.
        Uzima se direktno iz izvornog teksta, ne iz tokena."""
        end_pos = len(self.text)
        while self.peek():
            if self.peek().type == 'SEMI':
                end_pos = self.peek().pos
                break
            self.pos += 1
        return self.text[comma.end:end_pos].strip()

    # ------------------------------------------------------------------
    # Sedmice
    # ------------------------------------------------------------------

    def parse_weeks(self):
        """Parsira izraz sedmica i vraca tuple WeekRange-ova."""
        ranges = []
        while self.peek():
            if self.consume('COMMA'):
                continue
            ranges.append(self._parse_week_range())
            nxt = self.peek()
            if nxt and nxt.type != 'COMMA':
                raise LineRejected(f"neocekivan token {nxt.value!r} u sedmicama")

        if not ranges:
            raise LineRejected("prazan izraz sedmica")
        return tuple(ranges)

    def _parse_week_range(self):
        """Format: {F}-{T} ili samo {N} (skraceno za N-N)."""
        first = self._number("broj sedmice")
        last = first
        if self.consume('DASH'):
            last = self._number("zavrsna sedmica")

        if first < 1 or first > last:
            raise LineRejected(f"neispravan raspon sedmica {first}-{last}")
        return WeekRange(first, last)


# ---------------------------------------------------------------------------
# Javni API
# ---------------------------------------------------------------------------

def parse_schedule(expr):
    """'Thứ 2,1-3,F308;Thứ 5,6-7,F201' -> (TimeSlot, TimeSlot)"""
    return Parser(expr).parse_schedule()


def parse_weeks(expr):
    """'1-8,10-17' -> (WeekRange(1, 8), WeekRange(10, 17))"""
    return Parser(expr).parse_weeks()


def record_id(ordinal, code, raw):
    """Stabilan ID zapisa: redni broj, sifra sekcije i checksum linije.
    Checksum razdvaja custom unose koji svi imaju isti redni broj i sifru."""
    checksum = zlib.crc32(raw.encode('utf-8')) & 0xffffffff
    return f"{ordinal}-{code}-{checksum:08x}"


def parse_line_strict(raw):
    """Parsira jednu liniju tabele. Baca LineRejected sa razlogom ako
    linija nije validan red rasporeda."""
    if raw is None or not raw.strip():
        raise LineRejected("prazna linija")

    line = unicodedata.normalize('NFC', raw.rstrip('\r\n'))
    fields = line.split('\t')
    if len(fields) < FIELD_COUNT:
        raise LineRejected(
            f"premalo kolona: {len(fields)} (potrebno {FIELD_COUNT})"
        )

    time_slots = parse_schedule(fields[FIELD_SCHEDULE])
    week_ranges = parse_weeks(fields[FIELD_WEEKS])

    ordinal = fields[FIELD_ORDINAL].strip()
    code = fields[FIELD_CODE].strip()
    return LessonRecord(
        id=record_id(ordinal, code, line),
        name=fields[FIELD_NAME].strip(),
        instructor=fields[FIELD_INSTRUCTOR].strip(),
        time_slots=time_slots,
        week_ranges=week_ranges,
    )


def parse_line(raw):
    """Parsira jednu liniju. Vraca LessonRecord ili None ako linija
    nije red rasporeda (odbacivanje nije greska)."""
    try:
        return parse_line_strict(raw)
    except LineRejected as e:
        logger.debug(f"Preskacem liniju ({e.reason}): {raw!r}")
        return None


def build_lesson_set(text):
    """Parsira cijeli zalijepljeni tekst i vraca listu LessonRecord-ova
    u redoslijedu linija. Linije koje nisu validne se preskacu."""
    lessons = []
    for line in split_lines(text):
        if not line:
            continue
        record = parse_line(line)
        if record:
            lessons.append(record)
    return lessons
