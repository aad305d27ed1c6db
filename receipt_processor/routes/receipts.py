from fastapi import APIRouter, Depends, Request

from ..schemas import PointsResponse, ProcessResponse, Receipt
from ..services.scoring import score_receipt
from ..services.store import ReceiptStore
from ..services.validation import validate_receipt
from ..utils.logging import logger


router = APIRouter(prefix="/receipts", tags=["receipts"])

def get_store(request: Request) -> ReceiptStore:
    return request.app.state.store

@router.post("/process", response_model=ProcessResponse)
def process_receipt(receipt: Receipt, store: ReceiptStore = Depends(get_store)):
    validate_receipt(receipt)
    points = score_receipt(receipt)
    receipt_id = store.insert(receipt, points)
    logger.info("Processed receipt %s from %r: %d points", receipt_id, receipt.retailer, points)
    return ProcessResponse(id=receipt_id)

@router.get("/{receipt_id}/points", response_model=PointsResponse)
def get_points(receipt_id: str, store: ReceiptStore = Depends(get_store)):
    points = store.lookup(receipt_id)
    logger.info("Fetched points for receipt %s: %d", receipt_id, points)
    return PointsResponse(points=points)
