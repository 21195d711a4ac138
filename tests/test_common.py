import pytest

from affinecracker.classical.common import (
    ALPHABET_SIZE,
    COPRIME_KEYS,
    Direction,
    decrypt_text,
    encrypt_text,
    is_coprime,
    mod,
    modinv,
    parse_int,
    split_two,
    transform,
)


def test_mod_is_never_negative():
    assert mod(-53, 26) == 25
    assert mod(-1, 26) == 25
    assert mod(-27, 26) == 25
    assert mod(52, 26) == 0
    assert mod(7, 26) == 7


def test_mod_rejects_non_positive_modulus():
    with pytest.raises(ValueError):
        mod(3, 0)


def test_modinv_known_values():
    assert modinv(3, 26) == 9
    assert modinv(5, 26) == 21
    assert modinv(25, 26) == 25
    # reduced first
    assert modinv(29, 26) == 9
    assert modinv(-1, 26) == 25


def test_modinv_fails_for_non_coprime():
    with pytest.raises(ValueError):
        modinv(13, 26)
    with pytest.raises(ValueError):
        modinv(0, 26)


def test_coprime_set_matches_gcd():
    from math import gcd

    expected = [k for k in range(1, ALPHABET_SIZE) if gcd(k, ALPHABET_SIZE) == 1]
    assert list(COPRIME_KEYS) == expected
    for k in range(-5, 40):
        assert is_coprime(k) == (k in expected)


def test_caesar_example():
    assert encrypt_text("Hello, World!", 1, 3) == "Khoor, Zruog!"
    assert decrypt_text("Khoor, Zruog!", 1, 3) == "Hello, World!"


def test_affine_example():
    ct = encrypt_text("attack", 5, 8)
    assert ct == "izzisg"
    assert decrypt_text(ct, 5, 8) == "attack"


def test_round_trip_every_valid_a():
    text = "The Quick brown FOX, 42 jumps! ÀÉ zZ\tend"
    for a in COPRIME_KEYS:
        for b in (-30, -1, 0, 1, 13, 25, 26, 99):
            ct = transform(text, a, b, Direction.ENCRYPT)
            assert transform(ct, a, b, Direction.DECRYPT) == text


def test_non_letters_pass_through_in_place():
    text = "12 ,.!?\n-_ é ß"
    for a in COPRIME_KEYS:
        assert encrypt_text(text, a, 7) == text
        assert decrypt_text(text, a, 7) == text


def test_case_preserved():
    ct = encrypt_text("AbCdEf", 7, 3)
    assert [c.isupper() for c in ct] == [True, False, True, False, True, False]


def test_decrypt_with_non_coprime_a_raises():
    with pytest.raises(ValueError):
        decrypt_text("abc", 2, 0)


def test_parse_int_behaves_like_lenient_form_input():
    assert parse_int("7") == 7
    assert parse_int("  -3") == -3
    assert parse_int("+4") == 4
    assert parse_int("12abc") == 12
    assert parse_int("abc") is None
    assert parse_int("") is None
    assert parse_int(None) is None
    assert parse_int(True) is None
    assert parse_int(5) == 5
    assert parse_int(5.0) is None
    assert parse_int(b"5") is None
    assert parse_int([5]) is None


def test_split_two():
    assert split_two("5,8") == ("5", "8")
    assert split_two("5:8") == ("5", "8")
    assert split_two(" 5 8 ") == ("5", "8")
    assert split_two("5") is None
    assert split_two("1,2,3") is None
