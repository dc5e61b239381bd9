import logging

import pytest

from tkb2grid.parser import parse_line

# Red tabele kako ga portal daje (kolone odvojene tabom)
ALGEBRA_LINE = "1\tX.1\tAlgebra\t3\t\t\tDr. A\tThứ 2,1-2,R101\t1-3"

HEADER_LINE = ("TT\tMã lớp học phần\tTên lớp học phần\tSố TC\tLớp học phần\t"
               "Ghi chú\tGiảng viên\tThời khóa biểu\tTuần học")

PORTAL_TEXT = "\r\n".join([
    HEADER_LINE,
    "1\t1023010.2410.22.11\tLập trình Python\t3\t\t\tNguyễn Văn A\t"
    "Thứ 2,1-3,F308;Thứ 5,6-7,F201\t1-8,10-17",
    "2\t1023020.2410.22.12\tCơ sở dữ liệu\t3\t\t\tTrần Thị B\tThứ 3,4-5,H102\t1-15",
    "",
    "3\t1023030.2410.22.13\tGiáo dục thể chất\t1\t\t\t\tChủ nhật,1-2,Sân\t5",
])


def line(name="Môn", instructor="GV", schedule="Thứ 2,1-2,R", weeks="1-15",
         ordinal="1", code="X.1"):
    return "\t".join([ordinal, code, name, "3", "", "", instructor, schedule, weeks])


def record(*args, **kwargs):
    parsed = parse_line(line(*args, **kwargs))
    assert parsed is not None
    return parsed


@pytest.fixture(autouse=True)
def restore_root_logger():
    """CLI mijenja handlere root logger-a; vrati ih nakon testa."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
