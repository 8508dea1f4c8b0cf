"""Percentage extraction and metric / praise phrase generation."""

import re

from .banks import METRIC_TEMPLATES, METRIC_VERBS, PRAISE, bank_for
from .random_source import RandomSource

# 1-3 integer digits, optional decimals, optional single space before the sign
_PERCENT_RE = re.compile(r"(?<![\d.])(\d{1,3}(?:\.\d+)?) ?%")

FALLBACK_LOW = 10
FALLBACK_HIGH = 60


def extract_percentages(*texts: str | None) -> list[str]:
    """All "NN%" values found in the given texts, in order of appearance."""
    found: list[str] = []
    for text in texts:
        if text:
            found.extend(_PERCENT_RE.findall(text))
    return found


def resolve_percentage(
    rng: RandomSource,
    *texts: str | None,
    low: int = FALLBACK_LOW,
    high: int = FALLBACK_HIGH,
) -> str:
    """Reuse a user-supplied percentage if there is one, otherwise draw one in [low, high]."""
    found = extract_percentages(*texts)
    if found:
        return rng.pick(found)
    return str(rng.rand_range(low, high))


def metric_phrase(letter_type: object, percentage: str, rng: RandomSource) -> str:
    verb = rng.pick(bank_for(METRIC_VERBS, letter_type))
    template = rng.pick(bank_for(METRIC_TEMPLATES, letter_type))
    return f"{verb} {template.format(pct=percentage)}"


def praise_phrase(letter_type: object, rng: RandomSource) -> str:
    template = rng.pick(bank_for(PRAISE, letter_type))
    if "{pct}" not in template.text:
        return template.text
    return template.text.format(pct=rng.rand_range(template.low, template.high))
