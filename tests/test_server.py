from minitalk.protocol import Decoder, message_to_bits
from minitalk.server import format_message


def test_format_message_layout():
    assert format_message("hi") == "\033[33mmessage :\033[35mhi\n\033[0m"


def test_format_message_bytes_and_text_agree():
    assert format_message("héllo".encode("utf-8")) == format_message("héllo")


def test_format_message_empty():
    assert format_message(b"") == "\033[33mmessage :\033[35m\n\033[0m"


def test_format_message_invalid_utf8_replaced():
    assert "\ufffd" in format_message(b"a\xffb")


def test_decoded_message_formats_as_sent():
    decoder = Decoder()
    received = [m for m in (decoder.feed(9, b) for b in message_to_bits("salut")) if m is not None]
    assert [format_message(m) for m in received] == [format_message("salut")]