from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Tuple

# Absent or null string fields decode to "" and absent or null items to (),
# so a missing field is a validation failure rather than a decode failure.
class Item(BaseModel):
    model_config = ConfigDict(frozen=True)

    shortDescription: str = ""
    price: str = ""

    @field_validator("shortDescription", "price", mode="before")
    @classmethod
    def null_as_empty(cls, value):
        return "" if value is None else value

class Receipt(BaseModel):
    model_config = ConfigDict(frozen=True)

    retailer: str = ""
    purchaseDate: str = ""
    purchaseTime: str = ""
    items: Tuple[Item, ...] = Field(default_factory=tuple)
    total: str = ""

    @field_validator("retailer", "purchaseDate", "purchaseTime", "total", mode="before")
    @classmethod
    def null_as_empty(cls, value):
        return "" if value is None else value

    @field_validator("items", mode="before")
    @classmethod
    def null_items_as_empty(cls, value):
        return () if value is None else value

class ScoreRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    receipt: Receipt
    points: int

class ProcessResponse(BaseModel):
    id: str

class PointsResponse(BaseModel):
    points: int
