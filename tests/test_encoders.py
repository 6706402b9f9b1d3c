import pytest

from lzfamily.decoders import decode_lz77, decode_lz78, decode_lzss
from lzfamily.encoders import encode_lz77, encode_lz78, encode_lzss, encode_lzw
from lzfamily.errors import LZError


def _codes(rows):
    return [row.rsplit("|", 1)[1].replace("'", "") for row in rows]


@pytest.mark.parametrize(
    "call",
    [
        lambda: encode_lz77("", 8, 4),
        lambda: encode_lzss("", 8, 4),
        lambda: encode_lz78(""),
        lambda: encode_lzw(""),
    ],
)
def test_empty_text_is_rejected(call):
    with pytest.raises(LZError, match="empty string"):
        call()


def test_lz77_header_and_footer():
    rows = encode_lz77("abracadabra", 8, 4)
    assert rows[0] == "Dictionary | Buffer | Code LZ77"
    assert rows[-1].endswith("| |")


@pytest.mark.parametrize("text", ["ababc", "aaaab", "abracadabraz", "mississippiq"])
@pytest.mark.parametrize("dict_size,buffer_size", [(8, 4), (4, 3), (16, 6)])
def test_lz77_round_trip(text, dict_size, buffer_size):
    rows = encode_lz77(text, dict_size, buffer_size)
    codes = _codes(rows[1:-1])
    assert decode_lz77(codes, dict_size).text == text


@pytest.mark.parametrize("dict_size,buffer_size", [(3, 2), (5, 4), (8, 8)])
def test_lz77_window_and_buffer_limits(dict_size, buffer_size):
    rows = encode_lz77("abcabcabcabcxyzxyz", dict_size, buffer_size)
    for row in rows[1:]:
        window, buffer, _ = row.split("|")
        assert len(window) <= dict_size
        assert len(buffer) <= buffer_size


def test_lz77_match_reaching_end_uses_eos():
    rows = encode_lz77("abab", 8, 4)
    assert rows[-2].endswith("'eos'>")


def test_lz77_single_character():
    assert encode_lz77("a", 4, 4) == [
        "Dictionary | Buffer | Code LZ77",
        "|a|<0,0,'a'>",
        "a| |",
    ]


def test_lzss_header_and_footer():
    rows = encode_lzss("abracadabra", 8, 4)
    assert rows[0] == "Dictionary | Buffer | Code LZSS"
    assert rows[-1].endswith("| |")


@pytest.mark.parametrize("text", ["abab", "abracadabra", "aaaaaaaa", "0,1,0,1", "x"])
@pytest.mark.parametrize("dict_size,buffer_size", [(8, 4), (3, 2), (12, 5)])
def test_lzss_round_trip(text, dict_size, buffer_size):
    rows = encode_lzss(text, dict_size, buffer_size)
    codes = _codes(rows[1:-1])
    assert decode_lzss(codes, dict_size).text == text


def test_lzss_codes_are_literal_or_reference():
    rows = encode_lzss("abcabcabc", 6, 3)
    for code in _codes(rows[1:-1]):
        assert code.startswith("0,") or code.startswith("1,<")


@pytest.mark.parametrize("text", ["abac", "abababc", "abcd"])
def test_lz78_round_trip(text):
    rows = encode_lz78(text)
    assert rows[:2] == ["# | Dictionary | Code LZ78", "0| | --"]
    assert decode_lz78(_codes(rows[2:])).text == text


def test_lz78_rows_are_numbered_in_order():
    rows = encode_lz78("abababababc")
    numbers = [int(row.split("|")[0]) for row in rows[2:]]
    assert numbers == list(range(1, len(numbers) + 1))


def test_lz78_trailing_phrase_uses_eos():
    rows = encode_lz78("aa")
    assert rows[-1].endswith("<1,'eos'>")


def test_lzw_single_character_gives_only_header():
    assert encode_lzw("a") == ["# | Dictionary | Code LZW", "0-255|ASCII|--"]


def test_lzw_rows_are_numbered_from_256():
    rows = encode_lzw("abababababcbcbc")
    numbers = [int(row.split("|")[0]) for row in rows[2:]]
    assert numbers == list(range(256, 256 + len(numbers)))


def test_lzw_two_character_phrases_name_first_symbol():
    rows = encode_lzw("abcabcabcd")
    for row in rows[2:]:
        _, phrase, code = row.split("|")
        if len(phrase) == 2:
            assert code == f"ASCII index of '{phrase[0]}'"


def test_lzw_trailing_match():
    rows = encode_lzw("aaaa")
    assert rows[-1] == "258| |257"