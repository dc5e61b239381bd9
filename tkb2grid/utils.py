"""
utils.py - Pomocne funkcije za tkb2grid modul

Sadrzi:
    - split_lines: normalizacija krajeva linija i podjela teksta
    - color_for: deterministicka boja pozadine za naziv predmeta
    - today_day_code: kod danasnjeg dana po konvenciji portala (2..8)
    - encode/decode/build/strip share link: prenos sirovog teksta kroz URL
"""
import base64
import binascii
from datetime import date
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

# Naziv query parametra koji nosi sirovi tekst rasporeda
SHARE_PARAM = "data"


# ---------------------------------------------------------------------------
# Tekst
# ---------------------------------------------------------------------------

def split_lines(text):
    """Dijeli tekst na linije. Prihvata \\n, \\r\\n i samostalni \\r."""
    if not text:
        return []
    return text.replace("\r\n", "\n").replace("\r", "\n").split("\n")


# ---------------------------------------------------------------------------
# Boja predmeta
# ---------------------------------------------------------------------------

def color_for(name):
    """Boja pozadine kartice predmeta.

    Nijansa je suma kodova karaktera (UTF-16 jedinica, kao u browseru)
    modulo 360; zasicenost, svjetlina i alfa su fiksni. Razliciti nazivi
    mogu dobiti istu boju, to je prihvatljivo."""
    units = (name or "").encode("utf-16-le")
    hue = sum(
        int.from_bytes(units[i:i + 2], "little") for i in range(0, len(units), 2)
    ) % 360
    return f"hsl({hue}, 70%, 50%, 0.15)"


# ---------------------------------------------------------------------------
# Danasnji dan
# ---------------------------------------------------------------------------

def today_day_code(today=None):
    """Kod dana za dati datum (default: danas). Ponedjeljak = 2, nedjelja = 8."""
    today = today or date.today()
    return today.isoweekday() + 1


# ---------------------------------------------------------------------------
# Share link (sirovi tekst u URL-u)
# ---------------------------------------------------------------------------

def encode_share_param(text):
    """Sirovi tekst -> standardni Base64 UTF-8 bajtova."""
    return base64.b64encode(text.encode("utf-8")).decode("ascii")


def decode_share_param(value):
    """Inverz encode_share_param. Prihvata i URL-safe alfabet i
    nedostajuci padding. Vraca None ako vrijednost nije validna."""
    if not value:
        return None
    cleaned = value.strip().replace("-", "+").replace("_", "/").replace(" ", "+")
    cleaned += "=" * (-len(cleaned) % 4)
    try:
        return base64.b64decode(cleaned, validate=True).decode("utf-8")
    except (binascii.Error, UnicodeDecodeError):
        return None


def build_share_url(base_url, text):
    """Dodaje ?data=<base64> na URL, zadrzavajuci ostale parametre."""
    parts = urlsplit(base_url)
    query = [(k, v) for k, v in parse_qsl(parts.query, keep_blank_values=True)
             if k != SHARE_PARAM]
    query.append((SHARE_PARAM, encode_share_param(text)))
    return urlunsplit(parts._replace(query=urlencode(query)))


def strip_share_param(url):
    """Izvlaci sirovi tekst iz 'data' parametra i uklanja ga iz URL-a.

    Vraca (tekst ili None, URL bez parametra). Ostatak query stringa
    se zadrzava samo ako nije prazan."""
    parts = urlsplit(url)
    query = parse_qsl(parts.query, keep_blank_values=True)

    text = None
    remaining = []
    for key, value in query:
        if key == SHARE_PARAM:
            if text is None:
                text = decode_share_param(value)
        else:
            remaining.append((key, value))

    cleaned = urlunsplit(parts._replace(query=urlencode(remaining)))
    return text, cleaned
