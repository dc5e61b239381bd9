"""
state.py - Stanje aplikacije (sirovi tekst + filteri) sa perzistencijom

Jedino sto se trajno cuva je sirovi tekst i podesavanja prikaza;
parsirani zapisi se uvijek izvode iz teksta i nikad se ne snimaju.

Zivotni ciklus:
    1. AppState.load(path) pri startu (nema fajla -> podrazumijevane vrijednosti)
    2. update(**promjene) snima stanje nakon svake promjene
    3. reset() vraca sve na podrazumijevane vrijednosti

JSON kljucevi su isti kao u web verziji (data, byWeek, week, ...).
"""
import json
import logging
import os
from dataclasses import dataclass
from typing import Optional

from .compiler import compose_grid
from .models import FilterState
from .parser import build_lesson_set

logger = logging.getLogger(__name__)

THEMES = ("system", "dark", "light")

# atribut -> JSON kljuc
STORAGE_KEYS = {
    'raw_text': 'data',
    'week_mode': 'byWeek',
    'week': 'week',
    'only_occupied_rows': 'showOnlyAvailable',
    'only_today': 'onlyToday',
    'auto_fit': 'autoFit',
    'hide_panel': 'hidePanel',
    'theme': 'mode',
}


@dataclass
class AppState:
    """Stanje koje web verzija drzi u localStorage-u."""
    raw_text: str = ""
    week_mode: bool = False
    week: int = 1
    only_occupied_rows: bool = False
    only_today: bool = False
    auto_fit: bool = False
    hide_panel: bool = False
    theme: str = "system"

    # Putanja za snimanje (None = stanje se ne snima)
    path: Optional[str] = None

    # ------------------------------------------------------------------
    # Ucitavanje / snimanje
    # ------------------------------------------------------------------

    @classmethod
    def load(cls, path):
        """Ucitava stanje iz JSON fajla. Greske se loguju, nikad ne prekidaju."""
        state = cls(path=path)
        if not path or not os.path.exists(path):
            return state

        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning(f"Ne mogu ucitati stanje iz '{path}': {e}. "
                           "Koristim podrazumijevane vrijednosti.")
            return state

        if not isinstance(data, dict):
            logger.warning(f"Neispravan format stanja u '{path}'. "
                           "Koristim podrazumijevane vrijednosti.")
            return state

        for attr, key in STORAGE_KEYS.items():
            if key not in data:
                continue
            if _is_valid(attr, data[key]):
                setattr(state, attr, data[key])
            else:
                logger.warning(f"Ignorisem neispravnu vrijednost za {key}: {data[key]!r}")
        return state

    def save(self):
        """Snima stanje u JSON fajl (ako je putanja postavljena)."""
        if not self.path:
            return
        try:
            directory = os.path.dirname(self.path)
            if directory and not os.path.exists(directory):
                os.makedirs(directory)
            with open(self.path, 'w', encoding='utf-8') as f:
                json.dump(self.to_dict(), f, indent=4, ensure_ascii=False)
        except OSError as e:
            logger.warning(f"Ne mogu snimiti stanje u '{self.path}': {e}")

    def to_dict(self):
        return {key: getattr(self, attr) for attr, key in STORAGE_KEYS.items()}

    # ------------------------------------------------------------------
    # Promjene
    # ------------------------------------------------------------------

    def update(self, **changes):
        """Primjenjuje promjene i snima stanje. Nepoznat atribut je greska."""
        for attr, value in changes.items():
            if attr not in STORAGE_KEYS:
                raise AttributeError(f"Nepoznato podesavanje: {attr}")
            if not _is_valid(attr, value):
                raise ValueError(f"Neispravna vrijednost za {attr}: {value!r}")
            setattr(self, attr, value)
        self.save()

    def reset(self):
        """Vraca sva podesavanja i tekst na podrazumijevane vrijednosti."""
        defaults = AppState()
        for attr in STORAGE_KEYS:
            setattr(self, attr, getattr(defaults, attr))
        self.save()

    # ------------------------------------------------------------------
    # Izvedene vrijednosti
    # ------------------------------------------------------------------

    def filters(self) -> FilterState:
        return FilterState(
            week_mode=self.week_mode,
            selected_week=self.week,
            only_today=self.only_today,
            only_occupied_rows=self.only_occupied_rows,
        )

    def lessons(self):
        """Parsirani zapisi (uvijek ponovo izvedeni iz sirovog teksta)."""
        return build_lesson_set(self.raw_text)

    def grid(self, today=None):
        return compose_grid(self.lessons(), filters=self.filters(), today=today)


def _is_valid(attr, value):
    """Provjerava tip vrijednosti prema podrazumijevanoj vrijednosti atributa."""
    default = getattr(AppState, attr)
    if isinstance(default, bool):
        return isinstance(value, bool)
    if isinstance(default, int):
        return isinstance(value, int) and not isinstance(value, bool) and value >= 1
    if attr == 'theme':
        return value in THEMES
    return isinstance(value, str)
