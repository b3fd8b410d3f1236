import string

import pytest

from core.services import codecs


def test_reverse_by_code_point():
    assert codecs.reverse("abc") == "cba"
    assert codecs.reverse("añb") == "bña"


@pytest.mark.parametrize("text", ["", "a", "Hello, World!", "ñandú 🙂"])
def test_reverse_twice_is_identity(text):
    assert codecs.reverse(codecs.reverse(text)) == text


def test_case_order_matters():
    text = "MiXeD Case"
    assert codecs.lowercase(codecs.capitalize(text)) == "mixed case"
    assert codecs.capitalize(codecs.lowercase(text)) == "MIXED CASE"


def test_to_binary_hi():
    assert codecs.to_binary("Hi") == "01001000 01101001"


def test_to_binary_empty():
    assert codecs.to_binary("") == ""


def test_to_binary_uses_utf8_bytes():
    assert codecs.to_binary("é") == "11000011 10101001"


def test_binary_round_trip_printable_ascii():
    text = string.printable.strip()
    assert codecs.from_binary(codecs.to_binary(text)).text == text


def test_from_binary_maps_each_byte_to_one_character():
    result = codecs.from_binary("11111111 01000001")

    assert result.text == "\u00ffA"
    assert result.skipped == []


def test_from_binary_does_not_join_utf8_sequences():
    # "é" is two UTF-8 bytes; each comes back as its own character.
    assert codecs.from_binary(codecs.to_binary("é")).text == "\u00c3\u00a9"


def test_from_binary_drops_invalid_tokens():
    result = codecs.from_binary("01001000 999 01101001")

    assert result.text == "Hi"
    assert result.skipped == ["999"]


@pytest.mark.parametrize("token", ["100000000", "0b101", "1_0", "-1", "abc", "2"])
def test_from_binary_rejects_non_byte_tokens(token):
    assert codecs.parse_binary_token(token) is None


@pytest.mark.parametrize(
    "token, value",
    [("0", 0), ("1", 1), ("+1", 1), ("11111111", 255), ("000001000001", 65)],
)
def test_parse_binary_token_accepts_bytes(token, value):
    assert codecs.parse_binary_token(token) == value


def test_from_binary_splits_on_any_whitespace():
    assert codecs.from_binary("01001000\n\t01101001  ").text == "Hi"


def test_to_morse_sos(sample_table):
    assert codecs.to_morse("sos", sample_table) == "... --- ..."


def test_to_morse_space_and_unknown(sample_table):
    assert codecs.to_morse("hi z!", sample_table) == ".... .. / ? ?"


def test_to_morse_only_literal_space_is_separator(sample_table):
    assert codecs.to_morse("a\ta", sample_table) == ".- ? .-"


def test_from_morse_decodes_known_codes(sample_table):
    assert codecs.from_morse("... --- ...", sample_table) == "S O S"


def test_from_morse_separator_and_unknown_emit_nothing(sample_table):
    assert codecs.from_morse(".... .. / ----- ..", sample_table) == "H I I"


def test_from_morse_emits_every_key_sharing_a_code():
    from core.domain.code_table import CodeTable

    table = CodeTable({"A": ".-", "B": "-...", "Z": ".-"})

    assert codecs.from_morse(".- -...", table) == "A Z B"


def test_morse_round_trip_restores_uppercase(sample_table):
    text = "hats oath"
    decoded = codecs.from_morse(codecs.to_morse(text, sample_table), sample_table)

    assert decoded.split(" ") == [c for c in text.upper() if c != " "]
