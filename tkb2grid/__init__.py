"""
tkb2grid - Parser tabele rasporeda (thời khoá biểu) sa studentskog portala

Pipeline:  zalijepljeni tekst -> Lexer/Parser (po liniji) -> LessonRecord-i
           -> GridCompositor (+ filteri) -> GridModel -> Generatori

Parsiranje i kompozicija su ciste funkcije bez I/O; stanje (sirovi tekst
i filteri) drzi i snima state.py, a konfiguraciju daje pozivatelj (tkb.py).
"""
