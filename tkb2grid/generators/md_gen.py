from ..exporter import format_week_ranges
from ..models import day_label


class MarkdownReportGenerator:
    def __init__(self, lessons, title="Thời khoá biểu"):
        self.lessons = lessons
        self.title = title

    def generate(self):
        report = f"# {self.title}\n\n"
        if not self.lessons:
            report += "_Không có môn học._\n"
            return report

        for record in self.lessons:
            instructor = record.instructor or "Chưa có"

            report += f"### {record.name}\n"
            report += f"- **Giảng viên**: {instructor}\n"
            report += "- **Lịch học**:\n"
            for t in record.time_slots:
                label = f" ({t.label})" if t.label else ""
                report += (f"  - {day_label(t.day_code)}, "
                           f"tiết {t.lesson_start}-{t.lesson_end}{label}\n")
            report += f"- **Tuần**: `{format_week_ranges(record.week_ranges)}`\n\n"
        return report
