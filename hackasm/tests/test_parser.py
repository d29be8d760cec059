# hackasm/tests/test_parser.py
import pytest
from hackasm.hack_parser import clean_line, classify_line, is_instruction, parse_address, parse_compute


@pytest.mark.parametrize("raw", ["", "\n", "\r\n", "   \r\n", "// comment only\r\n", "    // indented comment"])
def test_blank_and_comment_lines(raw):
    assert classify_line(raw) is None

def test_clean_line_strips_trailing_comment():
    assert clean_line("D=M-D       // n-i\r\n") == "D=M-D"

def test_label_line():
    parsed = classify_line("(LOOP_BEG)\r\n", 4)
    assert parsed["type"] == "label"
    assert parsed["label"] == "LOOP_BEG"
    assert parsed["line_num"] == 4
    assert not is_instruction(parsed)

def test_label_name_stops_at_first_paren():
    assert classify_line("(A)B)")["label"] == "A"

def test_malformed_label_line():
    assert classify_line("(OPEN")["type"] == "malformed_label"

def test_address_line():
    parsed = classify_line("@sum\r\n")
    assert parsed["type"] == "a_instruction"
    assert parsed["operand"] == "sum"
    assert parsed["original_text"] == "@sum"
    assert is_instruction(parsed)

def test_compute_line():
    parsed = classify_line("  MD=M+1 // bump\n")
    assert parsed["type"] == "c_instruction"
    assert parsed["body"] == "MD=M+1"
    assert is_instruction(parsed)

def test_parse_address_literal_and_symbol():
    assert parse_address("0") == ("literal", 0)
    assert parse_address("16384") == ("literal", 16384)
    assert parse_address("sum") == ("symbol", "sum")
    assert parse_address("1abc") == ("symbol", "1abc")

@pytest.mark.parametrize("body, expected", [
    ("D=A", ("D", "A", None)),
    ("0;JMP", (None, "0", "JMP")),
    ("AMD=D|M;JLE", ("AMD", "D|M", "JLE")),
    ("D;", (None, "D", "")),
    ("=D", ("", "D", None)),
    ("0;J=MP", (None, "0", "J=MP")),
    ("D;JGT trailing", (None, "D", "JGT")),
    ("X", (None, "X", None)),
])
def test_parse_compute(body, expected):
    assert parse_compute(body) == expected
