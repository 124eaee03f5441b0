import pytest

from sskv.codec import CodecError, decode_value, encode_value


@pytest.mark.parametrize(
    "value",
    [
        None,
        True,
        False,
        0,
        1,
        -1,
        123,
        -55,
        2**64,
        -(2**70),
        1.5,
        -0.25,
        "",
        "world",
        "héllo ✓",
        b"",
        b"\x00\xff raw",
        [1, "a", None],
        (1, (2, 3), [4]),
        {"a": 1, "b": [True, False], (1, 2): {"n": None}},
    ],
)
def test_round_trip(value):
    assert decode_value(encode_value(value)) == value


def test_bool_stays_bool():
    assert decode_value(encode_value(True)) is True
    assert decode_value(encode_value(1)) is not True
    assert decode_value(encode_value(1)) == 1


def test_list_and_tuple_are_distinguished():
    assert repr(decode_value(encode_value([1, 2]))) == "[1, 2]"
    assert repr(decode_value(encode_value((1, 2)))) == "(1, 2)"


def test_bytearray_decodes_as_bytes():
    assert decode_value(encode_value(bytearray(b"abc"))) == b"abc"


def test_distinct_values_encode_differently():
    encodings = {encode_value(v) for v in (0, False, None, "", b"", [], ())}
    assert len(encodings) == 7


def test_unsupported_type_rejected():
    with pytest.raises(TypeError):
        encode_value(object())


def test_empty_input_rejected():
    with pytest.raises(CodecError):
        decode_value(b"")


def test_truncated_input_rejected():
    data = encode_value("a longer string")
    with pytest.raises(CodecError):
        decode_value(data[:-1])


def test_trailing_bytes_rejected():
    with pytest.raises(CodecError):
        decode_value(encode_value(5) + b"\x00")


def test_unknown_tag_rejected():
    with pytest.raises(CodecError):
        decode_value(b"\xff")


def test_codec_error_is_value_error():
    with pytest.raises(ValueError):
        decode_value(b"\xff")