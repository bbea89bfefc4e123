"""
passwright.evaluator

Password strength evaluator:
- has_repeated_pattern(password): periodic-suffix detector
- estimate_entropy(password): floor(length * log2(pool_size)) over matched alphabets
- StrengthEvaluator.evaluate(password): full report (entropy, variety, pool, repeats, verdict)
- StrengthEvaluator.validate(password): just the StrengthVerdict

The pipeline short-circuits: a common-list hit returns COMMON, a password below
the policy floor returns VERY_WEAK, and only then is entropy scored.
"""

import logging
import math
from enum import IntEnum
from typing import Dict, Optional, Tuple

from .charsets import CharacterCategory, categories_in
from .common import CommonPasswordSet, load_common_passwords
from .config import DEFAULT_POLICY, PasswordPolicy

logger = logging.getLogger(__name__)

MIN_SCORE = -2
MAX_SCORE = 2

# (exclusive lower bound in bits, base tier), checked top-down
ENTROPY_TIERS: Tuple[Tuple[int, int], ...] = (
    (128, 3),
    (60, 1),
    (36, 0),
    (28, -2),
)
BASE_TIER_FLOOR = -3

# variety count -> adjustment; anything not listed gets VARIETY_PENALTY.
# 3 categories scoring below 2 is long-standing policy.
VARIETY_ADJUSTMENT: Dict[int, int] = {4: 2, 2: 1}
VARIETY_PENALTY = -1

REPEAT_PENALTY = 1


class StrengthVerdict(IntEnum):
    COMMON = -3
    VERY_WEAK = -2
    WEAK = -1
    MEDIUM = 0
    STRONG = 1
    VERY_STRONG = 2

    @property
    def label(self) -> str:
        return _LABELS[self]


_LABELS = {
    StrengthVerdict.COMMON: "Common",
    StrengthVerdict.VERY_WEAK: "Very Weak",
    StrengthVerdict.WEAK: "Weak",
    StrengthVerdict.MEDIUM: "Medium",
    StrengthVerdict.STRONG: "Strong",
    StrengthVerdict.VERY_STRONG: "Very Strong",
}


def has_repeated_pattern(password: str) -> bool:
    """
    True if some suffix starting in the first half of the string is made of
    one block repeated end to end, e.g. 'onetwoonetwo' or 'xxabcabc'.
    """
    for start in range(len(password) // 2):
        remaining = password[start:]
        size = len(remaining)
        for period in range(1, size // 2 + 1):
            if remaining[:period] * (size // period) == remaining:
                return True
    return False


def pool_size(password: str) -> int:
    """Distinct characters across the alphabets of every category present."""
    pool = set()
    for cat in categories_in(password):
        pool.update(cat.alphabet)
    return len(pool)


def estimate_entropy(password: str) -> int:
    size = pool_size(password)
    if size == 0:
        return 0
    return math.floor(len(password) * math.log2(size))


def entropy_tier(entropy: int) -> int:
    for bound, tier in ENTROPY_TIERS:
        if entropy > bound:
            return tier
    return BASE_TIER_FLOOR


def variety_adjustment(variety: int) -> int:
    return VARIETY_ADJUSTMENT.get(variety, VARIETY_PENALTY)


class StrengthEvaluator:
    """
    Scores passwords against a common-password set and a length policy.
    The set is never mutated, so one evaluator can be shared freely.
    """

    def __init__(self, common_passwords: Optional[CommonPasswordSet] = None,
                 policy: PasswordPolicy = DEFAULT_POLICY):
        self.common_passwords = common_passwords if common_passwords is not None else CommonPasswordSet()
        self.policy = policy

    def evaluate(self, password: str, check_common: bool = True) -> Dict:
        """
        Returns a dict:
        {
            "password": str,
            "length": int,
            "common": bool,
            "categories": [str],  # category names present
            "variety": int,       # 0..4
            "pool_size": int,
            "entropy": int,       # bits, floored
            "base_tier": int | None,
            "repeated": bool,
            "score": int,         # clamped to [-2, 2], or -3 for COMMON
            "verdict": StrengthVerdict,
        }
        """
        cats = categories_in(password)
        report = {
            "password": password,
            "length": len(password),
            "common": False,
            "categories": [c.value for c in cats],
            "variety": len(cats),
            "pool_size": pool_size(password),
            "entropy": estimate_entropy(password),
            "base_tier": None,
            "repeated": False,
        }

        if check_common and password in self.common_passwords:
            report["common"] = True
            return self._finish(report, StrengthVerdict.COMMON)

        if len(password) < self.policy.allowed_min:
            return self._finish(report, StrengthVerdict.VERY_WEAK)

        strength = entropy_tier(report["entropy"])
        report["base_tier"] = strength
        strength += variety_adjustment(report["variety"])

        report["repeated"] = has_repeated_pattern(password)
        if report["repeated"]:
            strength -= REPEAT_PENALTY

        strength = max(MIN_SCORE, min(MAX_SCORE, strength))
        return self._finish(report, StrengthVerdict(strength))

    def validate(self, password: str, check_common: bool = True) -> StrengthVerdict:
        return self.evaluate(password, check_common)["verdict"]

    @staticmethod
    def _finish(report: Dict, verdict: StrengthVerdict) -> Dict:
        report["score"] = int(verdict)
        report["verdict"] = verdict
        logger.debug(
            "Strength: %s Entropy: %d Repeats: %s Length: %d",
            verdict.name, report["entropy"], report["repeated"], report["length"],
        )
        return report


def default_evaluator(common_passwords_path: Optional[str] = None,
                      policy: PasswordPolicy = DEFAULT_POLICY) -> StrengthEvaluator:
    """Evaluator backed by the word list at `common_passwords_path`, or the bundled one."""
    return StrengthEvaluator(load_common_passwords(common_passwords_path), policy)


def missing_categories(password: str) -> Tuple[CharacterCategory, ...]:
    present = set(categories_in(password))
    return tuple(cat for cat in CharacterCategory if cat not in present)
