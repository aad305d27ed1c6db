# scoring.py
from __future__ import annotations
from typing import List, Tuple

from ..rules.ruleset import DEFAULT_RULES
from ..schemas import Receipt
from ..utils.logging import logger

def score_breakdown(receipt: Receipt) -> List[Tuple[str, int]]:
    """
    Returns [(rule_name, points), ...] in rule order.
    Every rule runs on every call; a rule that cannot read its input yields 0.
    """
    breakdown: List[Tuple[str, int]] = []
    for name, rule in DEFAULT_RULES:
        points = rule(receipt)
        logger.debug("Rule %s: +%d", name, points)
        breakdown.append((name, points))
    return breakdown

def score_receipt(receipt: Receipt) -> int:
    return sum(points for _, points in score_breakdown(receipt))
