"""
generators - Izlazni generatori za raspored

Dostupni generatori:
    GridGenerator           - Tradicionalni grid (tabelarni) HTML format
    MarkdownReportGenerator - Markdown izvjestaj po predmetima
    JSONScheduleGenerator   - JSON (zapisi + celije grida)
    TextGridGenerator       - Grid za terminal (tabulate)
"""
from .grid_gen import GridGenerator
from .json_gen import JSONScheduleGenerator
from .md_gen import MarkdownReportGenerator
from .text_gen import TextGridGenerator
