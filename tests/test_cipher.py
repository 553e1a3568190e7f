import string

import pytest

from monosub.cipher import Cipher
from monosub.keygen import keyword_mapping
from monosub.mapping import FormatError, parse_mapping

XY = "a=x\nb=y\n"


def test_encrypt_decrypt_example():
    c = Cipher.from_text(XY)
    assert c.encrypt("aabbc") == "xxyyc"
    assert c.decrypt("xxyyc") == "aabbc"


def test_apply_direction():
    c = Cipher.from_text(XY)
    assert c.apply("ab") == "xy"
    assert c.apply("xy", decrypt=True) == "ab"


def test_empty_text():
    c = Cipher.from_text(XY)
    assert c.encrypt("") == ""
    assert c.decrypt("") == ""


def test_unmapped_characters_pass_through():
    c = Cipher.from_text(XY)
    # 'x' is only an image, 'a' only a source
    assert c.encrypt("x z 1\n") == "x z 1\n"
    assert c.decrypt("a z 1\n") == "a z 1\n"


def test_bijection_on_every_pair():
    table = parse_mapping("a=q\nb=w\nc=e\n1=!")
    c = Cipher(table)
    for k, v in table:
        assert c.decrypt(c.encrypt(k)) == k
        assert c.encrypt(c.decrypt(v)) == v


@pytest.mark.parametrize("text", [
    "",
    "Hello, World!",
    "THE QUICK BROWN FOX JUMPS OVER THE LAZY DOG",
    "line one\nline two\ttabbed",
    "ünïcødé 漢字",
])
def test_length_preserved(text):
    c = Cipher.from_text("a=b\nb=c\nc=a\nH=ж")
    assert len(c.encrypt(text)) == len(text)
    assert len(c.decrypt(text)) == len(text)


@pytest.mark.parametrize("text", [
    "attack at dawn",
    "THE QUICK BROWN FOX JUMPS OVER THE LAZY DOG 0123456789",
    string.printable,
])
def test_round_trip_over_permutation(text):
    c = Cipher(keyword_mapping("ZEBRAS"))
    assert c.decrypt(c.encrypt(text)) == text
    assert c.encrypt(c.decrypt(text)) == text


def test_encrypt_is_position_preserving():
    c = Cipher.from_text("a=1\nb=2\nc=3")
    assert c.encrypt("cab-bac") == "312-213"


def test_from_text_propagates_format_error():
    with pytest.raises(FormatError):
        Cipher.from_text("a=b\na=c")


def test_from_file(tmp_path):
    path = tmp_path / "alphabet.txt"
    path.write_text(XY, encoding="utf-8")
    c = Cipher.from_file(str(path))
    assert c.encrypt("abc") == "xyc"


def test_strict_from_text():
    with pytest.raises(FormatError):
        Cipher.from_text("ab=cd", strict=True)
    assert Cipher.from_text("ab=cd").encrypt("ab") == "cb"
