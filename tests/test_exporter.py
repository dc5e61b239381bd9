import pytest

from conftest import record
from tkb2grid.exporter import (
    append_line,
    custom_lesson_line,
    format_line,
    format_time_slots,
    format_week_ranges,
)
from tkb2grid.models import TimeSlot, WeekRange
from tkb2grid.parser import build_lesson_set, parse_line


def test_custom_lesson_line_exact_format():
    line = custom_lesson_line("Yoga", "Cô Lan", "Sân A", day=4, start=2, end=3,
                              week_from=5, week_to=9)
    assert line == "99\t1234567.1234.12.34\tYoga\t3\t\t\tCô Lan\tThứ 4,2-3,Sân A\t5-9"


def test_custom_lesson_line_defaults():
    line = custom_lesson_line("Yoga", "Cô Lan", "P1")
    assert line.endswith("\tThứ 2,1-10,P1\t1-2")


def test_custom_lesson_line_parses():
    r = parse_line(custom_lesson_line("Bơi", "Thầy Hùng", "Hồ bơi", day=8, start=1, end=2))
    assert r.name == "Bơi"
    assert r.instructor == "Thầy Hùng"
    assert r.time_slots == (TimeSlot(8, 1, 2, "Hồ bơi"),)
    assert r.week_ranges == (WeekRange(1, 2),)


@pytest.mark.parametrize("name, instructor, room", [
    ("", "GV", "P1"),
    ("Môn", "  ", "P1"),
    ("Môn", "GV", ""),
])
def test_custom_lesson_requires_fields(name, instructor, room):
    with pytest.raises(ValueError):
        custom_lesson_line(name, instructor, room)


@pytest.mark.parametrize("day", [1, 9])
def test_custom_lesson_day_range(day):
    with pytest.raises(ValueError):
        custom_lesson_line("Môn", "GV", "P1", day=day)


@pytest.mark.parametrize("kwargs", [
    {"start": 5, "end": 2},
    {"start": 0, "end": 2},
    {"start": 1, "end": 15},
    {"week_from": 9, "week_to": 3},
    {"week_from": 0, "week_to": 3},
])
def test_custom_lesson_rejects_ranges_parser_would_drop(kwargs):
    with pytest.raises(ValueError):
        custom_lesson_line("Yoga", "Cô Lan", "P1", **kwargs)


@pytest.mark.parametrize("name, instructor, room", [
    ("Yoga", "Cô Lan", "P1;P2"),
    ("Yo\tga", "Cô Lan", "P1"),
    ("Yoga", "Cô\nLan", "P1"),
    ("Yoga", "Cô Lan", "P1\r"),
])
def test_custom_lesson_rejects_structural_characters(name, instructor, room):
    with pytest.raises(ValueError):
        custom_lesson_line(name, instructor, room)


def test_custom_lesson_at_range_bounds_parses():
    line = custom_lesson_line("Yoga", "Cô Lan", "P1, khu B", start=1, end=14,
                              week_from=3, week_to=3)
    r = parse_line(line)
    assert r.time_slots == (TimeSlot(2, 1, 14, "P1, khu B"),)
    assert r.week_ranges == (WeekRange(3, 3),)


def test_append_line():
    assert append_line("", "x") == "x"
    assert append_line("a\nb", "c") == "a\nb\nc"


def test_append_then_rebuild_adds_one_record():
    text = "1\tX.1\tAlgebra\t3\t\t\tDr. A\tThứ 2,1-2,R101\t1-3"
    new_text = append_line(text, custom_lesson_line("Yoga", "Cô Lan", "P1"))

    lessons = build_lesson_set(new_text)

    assert [r.name for r in lessons] == ["Algebra", "Yoga"]


def test_format_time_slots():
    slots = (TimeSlot(2, 1, 3, "F308"), TimeSlot(8, 6, 7, "Sân, khu B"))
    assert format_time_slots(slots) == "Thứ 2,1-3,F308;Chủ nhật,6-7,Sân, khu B"


def test_format_week_ranges_uses_shorthand_for_single_week():
    assert format_week_ranges((WeekRange(1, 8), WeekRange(10, 10))) == "1-8,10"


def test_format_line_round_trip():
    original = record(name="Lập trình", instructor="Nguyễn Văn A",
                      schedule="Thứ 2,1-3,F308;Chủ nhật,6-7,Sân, khu B;Thứ 5,9-9,",
                      weeks="1-8,10,12-17")

    reparsed = parse_line(format_line(original))

    assert reparsed.name == original.name
    assert reparsed.instructor == original.instructor
    assert reparsed.time_slots == original.time_slots
    assert reparsed.week_ranges == original.week_ranges
