import pytest

from kuroneko.errors import InvalidCharacter, InvalidLength, ChecksumMismatch
from kuroneko.tracking_number import (compute_check_digit, normalize, split,
    validate, verify_check_digit)

BASES = ['0000000000', '1234567890', '9999999999', '00000000000',
    '12345678901', '99999999999', '31415926535', '2718281828']

def with_check_digit(base):
    return base + str(int(base) % 7)

def test_normalize_removes_hyphens():
    assert normalize('000-0000-0000') == '00000000000'
    assert normalize('1234-5678-9013') == '123456789013'

def test_normalize_accepts_full_width_digits():
    assert normalize('１２３４５６７８９０１３') == '123456789013'

@pytest.mark.parametrize('raw', ['12a345678901', '1234 5678 9013', '１２３４５６７８９０１X', '¹23456789013'])
def test_normalize_rejects_non_digits(raw):
    with pytest.raises(InvalidCharacter):
        normalize(raw)

@pytest.mark.parametrize('raw', ['123', '', '1234567890', '1234567890123', '---'])
def test_normalize_rejects_bad_length(raw):
    with pytest.raises(InvalidLength):
        normalize(raw)

def test_character_check_comes_before_length():
    with pytest.raises(InvalidCharacter):
        normalize('12a')

def test_compute_check_digit():
    assert compute_check_digit('1234567890') == '3'
    assert compute_check_digit('0000000000') == '0'
    assert compute_check_digit(13) == '6'
    # larger than 32 bits
    assert compute_check_digit('99999999999') == str(99999999999 % 7)

@pytest.mark.parametrize('base', BASES)
def test_valid_check_digit_verifies(base):
    assert verify_check_digit(with_check_digit(base))

@pytest.mark.parametrize('base', BASES)
def test_any_other_check_digit_fails(base):
    good = with_check_digit(base)
    for digit in '0123456789':
        if digit != good[-1]:
            assert not verify_check_digit(base + digit)

def test_split():
    assert split('123456789013') == ('12345678901', '3')

def test_validate():
    assert validate('1234-5678-9013') == '123456789013'
    with pytest.raises(ChecksumMismatch) as excinfo:
        validate('1234-5678-9012')
    assert str(excinfo.value) == '伝票番号に誤りがあります'
    assert excinfo.value.tracking_number == '1234-5678-9012'
