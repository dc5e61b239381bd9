"""
lexer.py - Leksicka analiza izraza rasporeda i sedmica

Pretvara sadrzaj kolone 'Thời khóa biểu' (npr. "Thứ 2,1-3,F308;Thứ 5,6-7,F201")
i kolone sedmica (npr. "1-8,10-17") u niz tokena koristeci regularne izraze.
Tokeni se koriste kao ulaz za Parser.

Pravila su definisana kao lista (naziv, regex) parova.
Redoslijed pravila je bitan - kljucne rijeci moraju biti ispred TEXT-a.

Svaki token pamti poziciju u izvornom tekstu, jer je oznaka termina
(prostorija) slobodan tekst koji se uzima direktno iz izvora.
"""
import re
import unicodedata


class Token:
    """Jedan token sa tipom, vrijednoscu i pozicijom u izvornom tekstu."""
    def __init__(self, type, value, pos, end):
        self.type = type
        self.value = value
        self.pos = pos
        self.end = end

    def __repr__(self):
        return f"Token({self.type}, {self.value!r}, pos={self.pos})"


class Lexer:
    """Leksicki analizator za izraze rasporeda i sedmica.

    Ulaz se normalizuje u NFC, pa dekomponovani vijetnamski tekst daje
    iste tokene. Whitespace se odbacuje, sve ostalo postaje token.
    Kljucne rijeci se matchuju case-insensitive i sa ili bez dijakritika."""

    # Pravila tokenizacije (redoslijed je bitan!)
    RULES = [
        # Kljucne rijeci za dan ("Thứ 2", "Chủ nhật", "CN")
        ('THU',      r'\bth[ứu](?![^\W\d_])'),
        ('SUNDAY',   r'\bch[ủu]\s*nh[ậa]t\b|\bcn\b'),

        # Literali
        ('NUMBER',   r'[0-9]+'),

        # Strukturni delimiteri
        ('DASH',     r'[-–]'),
        ('COMMA',    r','),
        ('SEMI',     r';'),

        # Whitespace i sve ostalo (slobodan tekst oznake)
        ('SKIP',     r'\s+'),
        ('TEXT',     r'[^\s,;\-–]+'),
    ]

    _regex = re.compile(
        '|'.join(f'(?P<{name}>{pattern})' for name, pattern in RULES),
        re.IGNORECASE,
    )

    def __init__(self, text):
        """Tokenizira ulazni tekst."""
        self.text = unicodedata.normalize('NFC', text)
        self.tokens = []

        for mo in self._regex.finditer(self.text):
            kind = mo.lastgroup
            if kind != 'SKIP':
                self.tokens.append(Token(kind, mo.group(), mo.start(), mo.end()))
