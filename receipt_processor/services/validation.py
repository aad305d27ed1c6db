# receipt_processor/services/validation.py
from ..errors import MissingFieldError
from ..schemas import Receipt

REQUIRED_TEXT_FIELDS = ("retailer", "purchaseDate", "purchaseTime", "total")

def validate_receipt(receipt: Receipt) -> None:
    """Raise MissingFieldError if a required field is empty. Nothing else is checked."""
    missing = [f for f in REQUIRED_TEXT_FIELDS if not getattr(receipt, f)]
    if not receipt.items:
        missing.append("items")
    if missing:
        raise MissingFieldError(missing)
