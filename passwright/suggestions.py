"""
passwright.suggestions

Turn evaluator output into concrete, prioritized suggestions and produce
example replacement passwords (using generator) to demonstrate stronger choices.
"""

import math
from typing import Dict, List, Optional

from .charsets import SPECIAL, CharacterCategory
from .evaluator import StrengthEvaluator, StrengthVerdict, default_evaluator, missing_categories
from .generator import generate

# full pool, used to estimate chars needed when the password matched nothing
_FULL_POOL = 94


def chars_needed_for(entropy: int, pool: int, target_bits: int) -> int:
    """Approximate random characters to add so entropy rises above target_bits."""
    bits_per_char = math.log2(pool if pool > 1 else _FULL_POOL)
    return max(0, math.ceil((target_bits + 1 - entropy) / bits_per_char))


def suggest_improvements(
    password: str,
    evaluator: Optional[StrengthEvaluator] = None,
    target_bits: int = 60,
    check_common: bool = True,
) -> Dict:
    """
    Return a suggestion object derived from the evaluator plus concrete actions.
    {
        "password": str,
        "verdict": StrengthVerdict,
        "suggestions": [str],  # human-readable prioritized suggestions
        "examples": [str],     # generated example passwords
        "chars_needed": int,   # approximate chars to add to exceed target_bits
    }
    """
    evaluator = evaluator or default_evaluator()
    report = evaluator.evaluate(password, check_common)
    policy = evaluator.policy
    suggestions: List[str] = []

    if report["common"]:
        suggestions.append("This password appears on a list of common passwords. Never use it.")
    if report["length"] < policy.allowed_min:
        suggestions.append(f"Use at least {policy.allowed_min} characters; {policy.default_min} or more is better.")
    for cat in missing_categories(password):
        if cat is CharacterCategory.SPECIAL:
            suggestions.append(f"Add special characters (e.g. {SPECIAL[:6]}).")
        else:
            suggestions.append(f"Add {cat.value} characters.")
    if report["repeated"]:
        suggestions.append("Break repeated sequences like 'abcabc'; repeated blocks add almost no strength.")

    chars_needed = chars_needed_for(report["entropy"], report["pool_size"], target_bits)
    if chars_needed:
        suggestions.append(
            f"Add about {chars_needed} random characters to raise entropy above {target_bits} bits."
        )
    elif report["verdict"] >= StrengthVerdict.STRONG:
        suggestions.append("Your password meets the recommended entropy target.")

    examples = [generate(policy=policy)]
    return {
        "password": password,
        "verdict": report["verdict"],
        "suggestions": list(dict.fromkeys(suggestions)),  # unique-preserve-order
        "examples": examples,
        "chars_needed": chars_needed,
    }
