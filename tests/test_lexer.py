import unicodedata

import pytest

from tkb2grid.lexer import Lexer


def types(text):
    return [t.type for t in Lexer(text).tokens]


def test_schedule_descriptor_tokens():
    assert types("Thứ 2,1-3,F308") == [
        'THU', 'NUMBER', 'COMMA', 'NUMBER', 'DASH', 'NUMBER', 'COMMA', 'TEXT',
    ]


def test_whitespace_is_skipped():
    assert types(" Thứ  2 , 1 - 3 ,F308 ") == types("Thứ 2,1-3,F308")


@pytest.mark.parametrize("text", ["Chủ nhật", "Chủ Nhật", "CHỦ NHẬT", "chu nhat", "CN", "cn"])
def test_sunday_spellings(text):
    assert types(text) == ['SUNDAY']


def test_thu_without_space_before_number():
    assert types("Thứ2") == ['THU', 'NUMBER']


def test_decomposed_unicode_is_normalized():
    decomposed = unicodedata.normalize('NFD', "Thứ 2")
    assert decomposed != "Thứ 2"
    assert types(decomposed) == ['THU', 'NUMBER']


def test_word_starting_with_th_is_text():
    assert types("Thời khóa biểu") == ['TEXT', 'TEXT', 'TEXT']


def test_token_positions_point_into_source():
    text = "Thứ 2,1-3,F308"
    lexer = Lexer(text)
    last = lexer.tokens[-1]
    assert last.value == "F308"
    assert lexer.text[last.pos:last.end] == "F308"
    assert last.pos == text.index("F308")


def test_week_expression_tokens():
    assert types("1-8,10") == ['NUMBER', 'DASH', 'NUMBER', 'COMMA', 'NUMBER']


def test_semicolon_and_en_dash():
    assert types("1–2;") == ['NUMBER', 'DASH', 'NUMBER', 'SEMI']
