# receipt_processor/services/store.py
import threading
from typing import Dict
from uuid import uuid4

from ..errors import ReceiptNotFoundError
from ..schemas import Receipt, ScoreRecord

class ReceiptStore:
    """
    In-memory id -> ScoreRecord map, guarded by one lock.
    Records are frozen models, so handing them out never exposes mutable state.
    Insert and read only.
    """

    def __init__(self) -> None:
        self._records: Dict[str, ScoreRecord] = {}
        self._lock = threading.Lock()

    def insert(self, receipt: Receipt, points: int) -> str:
        with self._lock:
            receipt_id = str(uuid4())
            while receipt_id in self._records:
                receipt_id = str(uuid4())
            self._records[receipt_id] = ScoreRecord(id=receipt_id, receipt=receipt, points=points)
        return receipt_id

    def get(self, receipt_id: str) -> ScoreRecord:
        with self._lock:
            record = self._records.get(receipt_id)
        if record is None:
            raise ReceiptNotFoundError(receipt_id)
        return record

    def lookup(self, receipt_id: str) -> int:
        return self.get(receipt_id).points

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)
