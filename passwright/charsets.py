"""
passwright.charsets
The four fixed alphabets every generated or evaluated password is measured against.
"""

from enum import Enum
from typing import Dict, Tuple


UPPERCASE = "ABCDEFGHIJKLMNOPQRSTUVWXZ"
LOWERCASE = "abcdefghijklmnopqrstuvwxyz"
DIGITS = "1234567890"
SPECIAL = "!\"#$%&'()*+,-./:;<=>?@[\\]^_`{|}~ "


class CharacterCategory(Enum):
    UPPERCASE = "uppercase"
    LOWERCASE = "lowercase"
    DIGIT = "digit"
    SPECIAL = "special"

    @property
    def alphabet(self) -> str:
        return ALPHABETS[self]


ALPHABETS: Dict[CharacterCategory, str] = {
    CharacterCategory.UPPERCASE: UPPERCASE,
    CharacterCategory.LOWERCASE: LOWERCASE,
    CharacterCategory.DIGIT: DIGITS,
    CharacterCategory.SPECIAL: SPECIAL,
}

# generation and evaluation both walk categories in this order
CATEGORY_ORDER: Tuple[CharacterCategory, ...] = (
    CharacterCategory.UPPERCASE,
    CharacterCategory.LOWERCASE,
    CharacterCategory.DIGIT,
    CharacterCategory.SPECIAL,
)


def categories_in(password: str) -> Tuple[CharacterCategory, ...]:
    """Categories with at least one character present in `password`, in fixed order."""
    return tuple(cat for cat in CATEGORY_ORDER if any(c in cat.alphabet for c in password))
