import pytest

from cursus.minitalk.protocol import BitDecoder, encode_byte, encode_message


def _decode(bits):
    decoder = BitDecoder()
    out = []
    for bit in bits:
        value = decoder.feed(bit)
        if value is not None:
            out.append(value)
    return bytes(out)


def test_encode_byte_is_msb_first():
    assert encode_byte(ord("A")) == [0, 1, 0, 0, 0, 0, 0, 1]


def test_encode_byte_extremes():
    assert encode_byte(0) == [0] * 8
    assert encode_byte(255) == [1] * 8


@pytest.mark.parametrize("value", [-1, 256])
def test_encode_byte_out_of_range(value):
    with pytest.raises(ValueError):
        encode_byte(value)


def test_message_ends_with_nul_byte():
    bits = encode_message("hi")
    assert len(bits) == 8 * 3
    assert bits[-8:] == [0] * 8


def test_round_trip_text():
    assert _decode(encode_message("hello world")) == b"hello world\0"


def test_round_trip_utf8():
    message = "héllo ✯"
    assert _decode(encode_message(message)) == message.encode("utf-8") + b"\0"


def test_round_trip_every_byte():
    data = bytes(range(1, 256))
    assert _decode(encode_message(data)) == data + b"\0"


def test_message_with_nul_rejected():
    with pytest.raises(ValueError):
        encode_message(b"a\0b")


def test_decoder_returns_none_until_full_byte():
    decoder = BitDecoder()
    results = [decoder.feed(bit) for bit in encode_byte(ord("z"))]
    assert results[:7] == [None] * 7
    assert results[7] == ord("z")


def test_decoder_rejects_bad_bit():
    with pytest.raises(ValueError):
        BitDecoder().feed(2)