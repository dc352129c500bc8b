"""Random password generation and a simple strength score."""

from __future__ import annotations

import secrets
import string

LOWERCASE = string.ascii_lowercase
UPPERCASE = string.ascii_uppercase
DIGITS = string.digits
SPECIAL = "!@#$%^&*()_+-=[]{}|;:,.<>?"

_random = secrets.SystemRandom()


def generate_password(length: int, use_special_chars: bool) -> str:
    """Return a random password with at least one character of each required kind.

    The result holds ``length`` characters, or the number of required kinds
    when ``length`` is smaller than that.
    """
    charset = LOWERCASE + UPPERCASE + DIGITS
    required = [_random.choice(LOWERCASE), _random.choice(UPPERCASE), _random.choice(DIGITS)]
    if use_special_chars:
        charset += SPECIAL
        required.append(_random.choice(SPECIAL))
    extra = [_random.choice(charset) for _ in range(max(0, length - len(required)))]
    chars = required + extra
    _random.shuffle(chars)
    return "".join(chars)


def calculate_password_strength(password: str) -> int:
    """Score a password from 0 to 100 by length, character kinds and variety."""
    score = min(len(password) * 4, 40)
    kinds = set()
    for char in password:
        if char in LOWERCASE:
            kinds.add("lower")
        elif char in UPPERCASE:
            kinds.add("upper")
        elif char in DIGITS:
            kinds.add("digit")
        else:
            kinds.add("special")
    score += 10 * len(kinds)
    score += min(len(set(password)) * 2, 20)
    return min(score, 100)