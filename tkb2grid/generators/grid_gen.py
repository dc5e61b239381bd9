"""
grid_gen.py - Grid (tabelarni) HTML generator za raspored

Generise tradicionalni grid prikaz rasporeda: redovi su casovi (tiết),
kolone su dani, a celije sadrze kartice predmeta.

Matricu ne racuna sam: cita je iz GridModel-a koji je napravio kompozitor,
pa filteri (sedmica, samo danas, samo zauzeti redovi) vaze i ovdje.
"""
import os
from html import escape

from ..models import day_label
from ..utils import color_for


class GridGenerator:
    """Generator za tabelarni grid prikaz rasporeda.

    Pristup:
        1. Zaglavlje sa danima iz modela
        2. Jedan red po casu (satnica u prvoj koloni)
        3. Jedna kartica po predmetu u celiji
    """

    def __init__(self, model, output_dir, title=None):
        self.model = model
        self.output_dir = os.path.normpath(output_dir)
        self.title = title or "Thời khoá biểu"

    @property
    def filename(self):
        filters = self.model.filters
        if filters.week_mode:
            return f"tkb_tuan_{filters.selected_week}.html"
        return "tkb.html"

    def generate(self):
        """Generise grid HTML fajl i vraca putanju do njega."""
        if not os.path.exists(self.output_dir):
            os.makedirs(self.output_dir)

        html = self._generate_html_header()
        html += self._generate_table()
        html += self._generate_html_footer()

        path = os.path.join(self.output_dir, self.filename)
        with open(path, "w", encoding="utf-8") as f:
            f.write(html)
        return path

    # ------------------------------------------------------------------
    # Tabela
    # ------------------------------------------------------------------

    def _generate_table(self):
        html = '<table>\n<thead>\n'

        # Zaglavlje sa danima
        html += '<tr><th class="time-cell"> </th>'
        for day in self.model.days:
            html += f'<th>{escape(day_label(day))}</th>'
        html += '</tr>\n</thead>\n<tbody>\n'

        # Redovi za svaki cas
        for row in self.model.rows:
            html += '<tr>'
            html += (
                f'<td class="time-cell">'
                f'<small>{escape(row.period.label)}</small><br>'
                f'{escape(row.period.time_range)}</td>'
            )
            for cell in row.cells:
                html += f'<td class="event-cell">{self._generate_cell(cell)}</td>'
            html += '</tr>\n'

        html += '</tbody></table>\n'
        return html

    def _generate_cell(self, cell):
        content = ""
        for entry in cell.entries:
            record = entry.record
            content += f'''<div class="card" style="background-color: {color_for(record.name)}">
                <span class="card-name">{escape(record.name)}</span>
                <span class="card-instructor">{escape(record.instructor)}</span>
                <span class="card-label">{escape(entry.label)}</span>
            </div>'''
        return content

    # ------------------------------------------------------------------
    # HTML template (header/footer)
    # ------------------------------------------------------------------

    def _generate_html_header(self):
        """Generise HTML zaglavlje sa stilovima."""
        title = escape(self.title)
        subtitle = ""
        if self.model.filters.week_mode:
            subtitle = f" - Tuần {self.model.filters.selected_week}"
        return f"""<!DOCTYPE html>
<html>
<head>
    <meta charset="UTF-8">
    <title>{title}{subtitle}</title>
    <style>
        @page {{ size: A4 landscape; margin: 10mm; }}

        * {{ box-sizing: border-box; }}

        body {{
            font-family: 'Inter', 'Segoe UI', Tahoma, sans-serif;
            margin: 0; padding: 15px;
            background-color: #f5f7fa; color: #333;
        }}

        h1 {{ margin: 0 0 10px 0; font-size: 1.5em; font-weight: 600; }}

        table {{
            width: 100%; border-collapse: collapse;
            background: white; table-layout: fixed;
        }}

        th {{
            padding: 8px; text-align: center;
            font-weight: 600; font-size: 0.9em;
            border: 1px solid #e0e0e0;
        }}

        td {{
            padding: 4px; border: 1px solid #e0e0e0;
            vertical-align: top; font-size: 0.85em;
        }}

        .time-cell {{ text-align: center; width: 90px; color: #555; }}

        .card {{
            display: flex; flex-direction: column; gap: 1px;
            border-radius: 4px; padding: 4px 6px; margin-bottom: 3px;
        }}
        .card-name {{ font-weight: 600; }}
        .card-instructor {{ color: #555; font-size: 0.9em; }}
        .card-label {{ color: #777; font-size: 0.85em; }}

        @media print {{
            body {{ background: white; padding: 0; }}
        }}
    </style>
</head>
<body>
    <h1>{title}{subtitle}</h1>
"""

    def _generate_html_footer(self):
        """Generise HTML footer."""
        return "</body></html>"
