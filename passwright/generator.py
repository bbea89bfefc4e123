"""
passwright.generator
Password generator with per-category minimum counts.

Minimum counts are filled first, the remaining slots are filled by picking a
category and then a character from it, and the whole sequence is shuffled so
the guaranteed characters are not clustered at the front.
"""

import logging
import random
from dataclasses import dataclass, field
from secrets import SystemRandom
from typing import List, Optional, Tuple

from .charsets import CATEGORY_ORDER, CharacterCategory
from .config import DEFAULT_POLICY, ConfigError, PasswordPolicy

logger = logging.getLogger(__name__)

_sysrand = SystemRandom()


@dataclass(frozen=True)
class CategoryRule:
    included: bool = True
    min_count: int = 1


@dataclass(frozen=True)
class GeneratorConfig:
    length: Optional[int] = None
    uppercase: CategoryRule = field(default_factory=CategoryRule)
    lowercase: CategoryRule = field(default_factory=CategoryRule)
    digits: CategoryRule = field(default_factory=CategoryRule)
    special: CategoryRule = field(default_factory=CategoryRule)

    def rule_for(self, category: CharacterCategory) -> CategoryRule:
        return {
            CharacterCategory.UPPERCASE: self.uppercase,
            CharacterCategory.LOWERCASE: self.lowercase,
            CharacterCategory.DIGIT: self.digits,
            CharacterCategory.SPECIAL: self.special,
        }[category]

    def included_rules(self) -> List[Tuple[CharacterCategory, CategoryRule]]:
        return [(cat, self.rule_for(cat)) for cat in CATEGORY_ORDER if self.rule_for(cat).included]


class PasswordGenerator:
    """A validated generator. Build one with `build_generator`."""

    def __init__(
        self,
        length: int,
        rules: List[Tuple[CharacterCategory, int]],
        rng: Optional[random.Random] = None,
    ):
        self.length = length
        self._rules = list(rules)
        self._alphabets = [cat.alphabet for cat, _ in self._rules]
        self._rng = rng or _sysrand

    @property
    def categories(self) -> Tuple[CharacterCategory, ...]:
        return tuple(cat for cat, _ in self._rules)

    def generate_password(self) -> str:
        rng = self._rng
        password_chars: List[str] = []
        remaining = self.length

        for cat, min_count in self._rules:
            required = min(min_count, remaining)
            alphabet = cat.alphabet
            for _ in range(required):
                password_chars.append(rng.choice(alphabet))
            remaining -= required

        # category first, then character: not uniform over the union alphabet
        for _ in range(remaining):
            alphabet = rng.choice(self._alphabets)
            password_chars.append(rng.choice(alphabet))

        rng.shuffle(password_chars)
        return "".join(password_chars)


def resolve_length(config: GeneratorConfig, policy: PasswordPolicy = DEFAULT_POLICY,
                   rng: Optional[random.Random] = None) -> int:
    if config.length is not None:
        return config.length
    total_min = sum(rule.min_count for _, rule in config.included_rules())
    if policy.default_min > total_min:
        return (rng or _sysrand).randint(policy.default_min, policy.default_max)
    return total_min


def build_generator(
    config: GeneratorConfig,
    policy: PasswordPolicy = DEFAULT_POLICY,
    rng: Optional[random.Random] = None,
) -> PasswordGenerator:
    """
    Validate `config` against `policy` and return a ready generator.
    Raises ConfigError if the configuration cannot be satisfied.
    """
    included = config.included_rules()
    if not included:
        raise ConfigError("At least one character set must be included")
    for cat, rule in included:
        if rule.min_count < 1:
            raise ConfigError(f"Minimum {cat.value} count must be >= 1, got {rule.min_count}")

    total_min = sum(rule.min_count for _, rule in included)
    length = resolve_length(config, policy, rng)
    if length < policy.allowed_min:
        raise ConfigError(f"Password length {length} is below the allowed minimum of {policy.allowed_min}")
    if length < total_min:
        raise ConfigError(
            f"Password length {length} is too short for the requested minimums (sum {total_min})"
        )

    logger.debug(
        "Built generator: length=%d categories=%s",
        length, ",".join(cat.value for cat, _ in included),
    )
    return PasswordGenerator(length, [(cat, rule.min_count) for cat, rule in included], rng=rng)


def generate(
    length: Optional[int] = None,
    use_upper: bool = True,
    use_lower: bool = True,
    use_digits: bool = True,
    use_special: bool = True,
    min_upper: int = 1,
    min_lower: int = 1,
    min_digits: int = 1,
    min_special: int = 1,
    policy: PasswordPolicy = DEFAULT_POLICY,
    rng: Optional[random.Random] = None,
) -> str:
    """
    Generate a single password. Raises ConfigError on an unsatisfiable configuration.
    """
    config = GeneratorConfig(
        length=length,
        uppercase=CategoryRule(use_upper, min_upper),
        lowercase=CategoryRule(use_lower, min_lower),
        digits=CategoryRule(use_digits, min_digits),
        special=CategoryRule(use_special, min_special),
    )
    return build_generator(config, policy, rng).generate_password()
