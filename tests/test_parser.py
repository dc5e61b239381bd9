import pytest

from conftest import ALGEBRA_LINE, HEADER_LINE, PORTAL_TEXT, line
from tkb2grid.models import TimeSlot, WeekRange
from tkb2grid.parser import (
    LineRejected,
    build_lesson_set,
    parse_line,
    parse_line_strict,
    parse_schedule,
    parse_weeks,
)


# ---------------------------------------------------------------------------
# Linija
# ---------------------------------------------------------------------------

def test_parse_line_end_to_end():
    record = parse_line(ALGEBRA_LINE)

    assert record.name == "Algebra"
    assert record.instructor == "Dr. A"
    assert record.time_slots == (TimeSlot(2, 1, 2, "R101"),)
    assert record.week_ranges == (WeekRange(1, 3),)


@pytest.mark.parametrize("count", range(1, 9))
def test_fewer_than_nine_fields_is_rejected(count):
    fields = ALGEBRA_LINE.split("\t")
    assert parse_line("\t".join(fields[:count])) is None


def test_extra_fields_are_ignored():
    record = parse_line(ALGEBRA_LINE + "\tghi chú\t")
    assert record is not None
    assert record.name == "Algebra"


@pytest.mark.parametrize("raw", ["", "   ", "\t", "\r\n", None])
def test_blank_line_is_rejected(raw):
    assert parse_line(raw) is None


def test_header_line_is_rejected():
    assert parse_line(HEADER_LINE) is None


def test_strict_parse_reports_reason():
    with pytest.raises(LineRejected) as exc:
        parse_line_strict("1\tX.1\tAlgebra")
    assert "kolona" in exc.value.reason


def test_rejection_is_a_value_error():
    assert issubclass(LineRejected, ValueError)


def test_fields_are_stripped_and_empty_instructor_allowed():
    record = parse_line(line(name="  Toán  ", instructor=""))
    assert record.name == "Toán"
    assert record.instructor == ""


def test_trailing_carriage_return():
    assert parse_line(ALGEBRA_LINE + "\r").week_ranges == (WeekRange(1, 3),)


def test_id_is_deterministic():
    assert parse_line(ALGEBRA_LINE).id == parse_line(ALGEBRA_LINE).id
    assert parse_line(ALGEBRA_LINE).id.startswith("1-X.1-")


def test_id_differs_for_custom_lines_with_same_placeholders():
    a = parse_line(line(name="A", ordinal="99", code="1234567.1234.12.34"))
    b = parse_line(line(name="B", ordinal="99", code="1234567.1234.12.34"))
    assert a.id != b.id


# ---------------------------------------------------------------------------
# Raspored (kolona 7)
# ---------------------------------------------------------------------------

def test_multiple_descriptors_keep_order():
    slots = parse_schedule("Thứ 5,6-7,F201;Thứ 2,1-3,F308")
    assert slots == (TimeSlot(5, 6, 7, "F201"), TimeSlot(2, 1, 3, "F308"))


def test_label_may_contain_commas():
    slots = parse_schedule("Thứ 2,1-2,R101, Lab A;Thứ 4,3-4,B")
    assert [t.label for t in slots] == ["R101, Lab A", "B"]


def test_label_may_contain_dashes_and_keywords():
    (slot,) = parse_schedule("Thứ 3,1-2,Khu CN - Thứ tầng 2")
    assert slot.label == "Khu CN - Thứ tầng 2"


def test_empty_label_is_allowed():
    assert parse_schedule("Thứ 2,1-2,") == (TimeSlot(2, 1, 2, ""),)


def test_spaces_around_delimiters():
    assert parse_schedule(" Thứ 2 , 1 - 2 , R101 ") == (TimeSlot(2, 1, 2, "R101"),)


def test_trailing_semicolon_is_skipped():
    assert len(parse_schedule("Thứ 2,1-2,R;")) == 1


@pytest.mark.parametrize("expr", [
    "Thứ 8,1-2,S",
    "Thứ CN,1-2,S",
    "Thứ Chủ nhật,1-2,S",
    "Chủ nhật,1-2,S",
    "Chủ Nhật,1-2,S",
    "CN,1-2,S",
    "chu nhat,1-2,S",
])
def test_sunday_is_day_code_eight(expr):
    (slot,) = parse_schedule(expr)
    assert slot.day_code == 8


@pytest.mark.parametrize("expr", [
    "",
    ";",
    "Thứ 1,1-2,R",            # dan van opsega
    "Thứ 9,1-2,R",
    "Thứ 2,3-1,R",            # kraj prije pocetka
    "Thứ 2,0-2,R",
    "Thứ 2,1-15,R",
    "Thứ 2,1-2",              # nema zareza ispred oznake
    "Thứ 2,a-2,R",
    "Thứ 2;1-2,R",
    "Thứ ,1-2,R",
    "2,1-2,R",
    "Thứ 2,1-2,R;Thứ 3,1,R",  # drugi termin neispravan
])
def test_malformed_schedule_is_rejected(expr):
    with pytest.raises(LineRejected):
        parse_schedule(expr)


def test_malformed_schedule_rejects_whole_line():
    assert parse_line(line(schedule="Thứ 2,1-2,R;Thứ x,1-2,R")) is None


# ---------------------------------------------------------------------------
# Sedmice (kolona 8)
# ---------------------------------------------------------------------------

def test_week_ranges_and_single_weeks():
    assert parse_weeks("1-8,10,12-17") == (
        WeekRange(1, 8), WeekRange(10, 10), WeekRange(12, 17),
    )


def test_trailing_comma_in_weeks_is_skipped():
    assert parse_weeks("1-3,") == (WeekRange(1, 3),)


@pytest.mark.parametrize("expr", ["", ",", "3-1", "0-2", "0", "1-x", "1-2-3", "1 2", "Tuần 1"])
def test_malformed_weeks_are_rejected(expr):
    with pytest.raises(LineRejected):
        parse_weeks(expr)


def test_malformed_weeks_reject_whole_line():
    assert parse_line(line(weeks="5-1")) is None


# ---------------------------------------------------------------------------
# Cijeli tekst
# ---------------------------------------------------------------------------

def test_build_lesson_set_skips_header_and_blank_lines():
    lessons = build_lesson_set(PORTAL_TEXT)
    assert [r.name for r in lessons] == [
        "Lập trình Python", "Cơ sở dữ liệu", "Giáo dục thể chất",
    ]


def test_build_lesson_set_handles_line_endings():
    lf = PORTAL_TEXT.replace("\r\n", "\n")
    assert build_lesson_set(lf) == build_lesson_set(PORTAL_TEXT)


def test_build_lesson_set_is_deterministic():
    assert build_lesson_set(PORTAL_TEXT) == build_lesson_set(PORTAL_TEXT)


def test_appending_a_line_keeps_existing_records():
    before = build_lesson_set(PORTAL_TEXT)
    new_line = line(name="Tiếng Anh", schedule="Thứ 6,8-9,E1", weeks="2-4")

    after = build_lesson_set(PORTAL_TEXT + "\n" + new_line)

    assert after[:len(before)] == before
    assert after[len(before):] == [parse_line(new_line)]


def test_garbage_never_raises():
    text = "\x00\t\t\t\t\t\t\t\t\n;;;\n-,-,-\n\t" * 5
    assert build_lesson_set(text) == []


def test_empty_text():
    assert build_lesson_set("") == []
