import pytest
from fastapi.testclient import TestClient

from receipt_processor.main import create_app
from receipt_processor.services.store import ReceiptStore


@pytest.fixture
def store():
    return ReceiptStore()

@pytest.fixture
def client(store):
    return TestClient(create_app(store))

@pytest.fixture
def target_payload():
    return {
        "retailer": "Target",
        "purchaseDate": "2022-01-01",
        "purchaseTime": "13:01",
        "items": [
            {"shortDescription": "Mountain Dew 12PK", "price": "6.49"},
            {"shortDescription": "Emils Cheese Pizza", "price": "12.25"},
            {"shortDescription": "Knorr Creamy Chicken", "price": "1.26"},
            {"shortDescription": "Doritos Nacho Cheese", "price": "3.35"},
            {"shortDescription": "   Klarbrunn 12-PK 12 FL OZ  ", "price": "12.00"},
        ],
        "total": "35.35",
    }
