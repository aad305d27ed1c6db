# receipt_processor/errors.py
from typing import Iterable


class ReceiptProcessorError(Exception):
    """Base for errors surfaced to API clients as {"detail": ...}."""
    status_code = 500
    detail = "internal error"

    def __str__(self) -> str:
        return self.detail


class ReceiptDecodeError(ReceiptProcessorError):
    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.detail = message


class ReceiptValidationError(ReceiptProcessorError):
    status_code = 400
    detail = "Invalid receipt: missing required fields"


class MissingFieldError(ReceiptValidationError):
    def __init__(self, fields: Iterable[str]):
        self.fields = list(fields)
        super().__init__(", ".join(self.fields))


class ReceiptNotFoundError(ReceiptProcessorError):
    status_code = 404
    detail = "receipt not found"

    def __init__(self, receipt_id: str):
        super().__init__(receipt_id)
        self.receipt_id = receipt_id
