"""CPF (Cadastro de Pessoas Físicas) validation.

A CPF has 11 digits; the last two are verifier digits computed with a
weighted modulo-11 sum over the digits before them.
"""

from __future__ import annotations

import re

CPF_LENGTH = 11
SEPARATORS_RE = re.compile(r"[.\-]")
CPF_FORMAT_RE = re.compile(rf"[0-9]{{{CPF_LENGTH}}}")

# (limit, initial_weight) for the first and second verifier digits.
FIRST_VERIFIER = (9, 10)
SECOND_VERIFIER = (10, 11)


def strip_separators(text: str) -> str:
    """Return text with every '.' and '-' removed.

    Only those two characters are dropped. Spaces, letters and other
    punctuation are kept so the format check rejects them.
    """
    return SEPARATORS_RE.sub("", text)


def _check_digit(digits: list[int], limit: int, initial_weight: int) -> int:
    """Return the verifier digit for the first `limit` digits."""
    total = sum(digits[i] * (initial_weight - i) for i in range(limit))
    remainder = total % 11
    return 0 if remainder < 2 else 11 - remainder


def validate_cpf(value: object) -> bool:
    """Return True if value is a well-formed, checksum-correct CPF.

    Accepts the digits with or without '.' and '-' separators, e.g.
    '529.982.247-25' or '52998224725'. Returns False (never raises) for
    None, non-string input, wrong length, stray characters, repeated-digit
    sequences and verifier mismatches.
    """
    if not isinstance(value, str) or not value.strip():
        return False

    cleaned = strip_separators(value.strip())
    if not CPF_FORMAT_RE.fullmatch(cleaned):
        return False

    # "00000000000", "11111111111"... pass the checksum but are never issued
    if len(set(cleaned)) == 1:
        return False

    digits = [int(ch) for ch in cleaned]

    if digits[9] != _check_digit(digits, *FIRST_VERIFIER):
        return False
    return digits[10] == _check_digit(digits, *SECOND_VERIFIER)
