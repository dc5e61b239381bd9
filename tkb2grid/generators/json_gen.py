from ..models import day_label


class JSONScheduleGenerator:
    """Pretvara zapise i GridModel u strukturu spremnu za json.dump."""

    def __init__(self, model, lessons):
        self.model = model
        self.lessons = lessons

    def generate(self):
        filters = self.model.filters
        return {
            "meta": {
                "week_mode": filters.week_mode,
                "week": filters.selected_week,
                "only_today": filters.only_today,
                "only_occupied_rows": filters.only_occupied_rows,
                "days": [{"code": d, "label": day_label(d)} for d in self.model.days],
            },
            "lessons": [self._lesson(r) for r in self.lessons],
            "grid": [self._row(row) for row in self.model.rows],
        }

    def _lesson(self, record):
        return {
            "id": record.id,
            "name": record.name,
            "instructor": record.instructor,
            "time_slots": [
                {
                    "day": t.day_code,
                    "start": t.lesson_start,
                    "end": t.lesson_end,
                    "label": t.label,
                }
                for t in record.time_slots
            ],
            "weeks": [{"from": wr.start, "to": wr.end} for wr in record.week_ranges],
        }

    def _row(self, row):
        return {
            "lesson": row.lesson_number,
            "start": row.period.start,
            "end": row.period.end,
            "cells": {
                str(cell.day_code): [
                    {"id": e.record.id, "name": e.record.name, "label": e.label}
                    for e in cell.entries
                ]
                for cell in row.cells
            },
        }
