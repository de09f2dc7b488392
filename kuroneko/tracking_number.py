"""Yamato tracking number validation.

A tracking number is 11 or 12 decimal digits, optionally written with
hyphens (``0000-0000-0000``). The last digit is a check digit: the rest of
the number, read as an integer, modulo 7.
"""

import unicodedata

from .errors import InvalidCharacter, InvalidLength, ChecksumMismatch

SEPARATORS = ('-',)
VALID_LENGTHS = (11, 12)
CHECK_DIGIT_MODULUS = 7

def remove_separators(raw):
    for sep in SEPARATORS:
        raw = raw.replace(sep, '')
    return raw

def normalize(raw):
    """Strip separators from raw and return the bare digit string.

    Any Unicode decimal digit is accepted (full-width digits included) and
    converted to its ASCII form. Raises InvalidCharacter for anything else,
    then InvalidLength if the result is not 11 or 12 digits long.
    """
    digits = remove_separators(raw)
    if not all(c.isdecimal() for c in digits):
        raise InvalidCharacter(raw)
    digits = ''.join(str(unicodedata.decimal(c)) for c in digits)
    if len(digits) not in VALID_LENGTHS:
        raise InvalidLength(raw)
    return digits

def split(normalized):
    """Return (base_digits, check_digit) for a normalized tracking number
    """
    return normalized[:-1], normalized[-1:]

def compute_check_digit(base_digits):
    """Return the check digit for base_digits (a digit string or an int)
    """
    return str(int(base_digits) % CHECK_DIGIT_MODULUS)

def verify_check_digit(normalized):
    base_digits, check_digit = split(normalized)
    if not base_digits:
        return False
    return check_digit == compute_check_digit(base_digits)

def validate(raw):
    """Normalize raw and verify its check digit, returning the normalized
    tracking number. Raises ChecksumMismatch if the check digit is wrong.
    """
    normalized = normalize(raw)
    if not verify_check_digit(normalized):
        raise ChecksumMismatch(raw)
    return normalized
