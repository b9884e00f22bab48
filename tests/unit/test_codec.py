import binascii

import pytest

from base64fix.codec import STD_CODEC, URL_CODEC, StdlibCodec


def test_codecs_require_padding() -> None:
    assert STD_CODEC.decode(b"YWJjZGU=") == b"abcde"
    with pytest.raises(binascii.Error):
        STD_CODEC.decode(b"YWJjZGU")


def test_url_codec_translates_altchars() -> None:
    assert URL_CODEC.decode_string("-_8=") == b"\xfb\xff"
    assert URL_CODEC.decode(bytearray(b"-_8=")) == b"\xfb\xff"


def test_std_codec_rejects_foreign_characters() -> None:
    with pytest.raises(binascii.Error):
        STD_CODEC.decode_string("-_8=")


def test_codec_is_hashable_value() -> None:
    assert StdlibCodec(name="url", altchars=b"-_") == URL_CODEC
    assert hash(StdlibCodec(name="std")) == hash(STD_CODEC)


@pytest.mark.parametrize("source", ["+/8=", "-/8=", "+_8="])
def test_url_codec_rejects_standard_altchars(source: str) -> None:
    with pytest.raises(binascii.Error):
        URL_CODEC.decode_string(source)
    with pytest.raises(binascii.Error):
        URL_CODEC.decode(source.encode("ascii"))
    with pytest.raises(binascii.Error):
        URL_CODEC.decode(memoryview(source.encode("ascii")))


def test_std_codec_still_accepts_standard_altchars() -> None:
    assert STD_CODEC.decode(b"+/8=") == b"\xfb\xff"
