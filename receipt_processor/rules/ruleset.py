# receipt_processor/rules/ruleset.py
import math
import re
from datetime import date, datetime
from typing import Callable, List, Optional, Tuple

from ..schemas import Item, Receipt
from ..utils.logging import logger

# -----------------------------
# Tunables
# -----------------------------
ROUND_DOLLAR_POINTS = 50
QUARTER_MULTIPLE_POINTS = 25
QUARTER = 0.25
ITEM_PAIR_POINTS = 5
DESCRIPTION_LENGTH_MULTIPLE = 3
DESCRIPTION_PRICE_MULTIPLIER = 0.2
ODD_DAY_POINTS = 6
AFTERNOON_POINTS = 10
AFTERNOON_START_HOUR = 14   # inclusive
AFTERNOON_END_HOUR = 16     # exclusive

ALNUM_RE = re.compile(r"[A-Za-z0-9]")
DATE_RE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")
TIME_RE = re.compile(r"[0-9]{1,2}:[0-9]{2}")

# -----------------------------
# Parsing helpers
# Every helper returns None instead of raising, so a rule
# with unusable input simply contributes nothing.
# -----------------------------
def count_alphanumeric(text: str) -> int:
    return len(ALNUM_RE.findall(text or ""))

def parse_amount(text: str | None) -> Optional[float]:
    """Parse a plain decimal string such as "6.49"."""
    if not text or not text.isascii() or text != text.strip() or "_" in text:
        return None
    try:
        value = float(text)
    except ValueError:
        return None
    if not math.isfinite(value):
        return None
    return value

def parse_purchase_date(text: str | None) -> Optional[date]:
    if not text or not DATE_RE.fullmatch(text):
        return None
    try:
        return datetime.strptime(text, "%Y-%m-%d").date()
    except ValueError:
        return None

def parse_purchase_hour(text: str | None) -> Optional[int]:
    if not text or not TIME_RE.fullmatch(text):
        return None
    try:
        return datetime.strptime(text, "%H:%M").hour
    except ValueError:
        return None

# -----------------------------
# Rules
# -----------------------------
def retailer_alphanumeric(receipt: Receipt) -> int:
    return count_alphanumeric(receipt.retailer)

def round_dollar_total(receipt: Receipt) -> int:
    total = parse_amount(receipt.total)
    if total is not None and total.is_integer():
        return ROUND_DOLLAR_POINTS
    return 0

def quarter_multiple_total(receipt: Receipt) -> int:
    total = parse_amount(receipt.total)
    if total is not None and math.fmod(total, QUARTER) == 0:
        return QUARTER_MULTIPLE_POINTS
    return 0

def item_pairs(receipt: Receipt) -> int:
    return (len(receipt.items) // 2) * ITEM_PAIR_POINTS

def item_description_bonus(item: Item) -> int:
    trimmed = item.shortDescription.strip()
    cleaned_length = count_alphanumeric(trimmed)
    logger.debug("Item %r: trimmed=%r cleaned_length=%d",
                 item.shortDescription, trimmed, cleaned_length)
    if cleaned_length % DESCRIPTION_LENGTH_MULTIPLE != 0:
        return 0
    price = parse_amount(item.price)
    if price is None:
        return 0
    # negative prices never take points away
    return max(0, math.ceil(price * DESCRIPTION_PRICE_MULTIPLIER))

def item_descriptions(receipt: Receipt) -> int:
    return sum(item_description_bonus(item) for item in receipt.items)

def odd_purchase_day(receipt: Receipt) -> int:
    purchased = parse_purchase_date(receipt.purchaseDate)
    if purchased is not None and purchased.day % 2 == 1:
        return ODD_DAY_POINTS
    return 0

def afternoon_purchase(receipt: Receipt) -> int:
    hour = parse_purchase_hour(receipt.purchaseTime)
    if hour is not None and AFTERNOON_START_HOUR <= hour < AFTERNOON_END_HOUR:
        return AFTERNOON_POINTS
    return 0

Rule = Callable[[Receipt], int]

DEFAULT_RULES: List[Tuple[str, Rule]] = [
    ("retailer_alphanumeric", retailer_alphanumeric),
    ("round_dollar_total", round_dollar_total),
    ("quarter_multiple_total", quarter_multiple_total),
    ("item_pairs", item_pairs),
    ("item_descriptions", item_descriptions),
    ("odd_purchase_day", odd_purchase_day),
    ("afternoon_purchase", afternoon_purchase),
]
