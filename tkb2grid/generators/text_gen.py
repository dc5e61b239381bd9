from tabulate import tabulate

from ..models import day_label


class TextGridGenerator:
    """Sedmicni grid za terminal (redovi = casovi, kolone = dani)."""

    def __init__(self, model, tablefmt="grid"):
        self.model = model
        self.tablefmt = tablefmt

    def generate(self):
        headers = ["Tiết"] + [day_label(d) for d in self.model.days]

        table_data = []
        for row in self.model.rows:
            line = [f"{row.lesson_number}\n{row.period.time_range}"]
            for cell in row.cells:
                # Jedan predmet = naziv + oznaka, vise predmeta jedan ispod drugog
                line.append("\n".join(
                    f"{e.record.name}\n({e.label})" if e.label else e.record.name
                    for e in cell.entries
                ))
            table_data.append(line)

        return tabulate(table_data, headers=headers, tablefmt=self.tablefmt,
                        stralign="center")
