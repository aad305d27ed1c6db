# tests/test_scoring.py
import pytest

from receipt_processor.schemas import Item, Receipt
from receipt_processor.services.scoring import score_breakdown, score_receipt


def test_target_receipt(target_payload):
    r = Receipt(**target_payload)
    # 6 retailer + 10 item pairs + 4 descriptions + 6 odd day
    assert score_receipt(r) == 6 + 10 + 4 + 6

def test_breakdown_is_ordered_and_sums(target_payload):
    r = Receipt(**target_payload)
    breakdown = score_breakdown(r)
    assert [name for name, _ in breakdown] == [
        "retailer_alphanumeric", "round_dollar_total", "quarter_multiple_total",
        "item_pairs", "item_descriptions", "odd_purchase_day", "afternoon_purchase",
    ]
    assert dict(breakdown) == {
        "retailer_alphanumeric": 6, "round_dollar_total": 0, "quarter_multiple_total": 0,
        "item_pairs": 10, "item_descriptions": 4, "odd_purchase_day": 6, "afternoon_purchase": 0,
    }
    assert sum(p for _, p in breakdown) == score_receipt(r)

def test_special_characters_without_date_or_time():
    r = Receipt(retailer="T@rget!123",
                items=[Item(shortDescription="Mountain Dew 12PK", price="6.49")],
                total="6.49")
    assert score_receipt(r) == 8 + 2

def test_all_rules_fire():
    r = Receipt(retailer="BestBuy", purchaseDate="2022-01-01", purchaseTime="14:33",
                items=[Item(shortDescription="Mountain Dew 12PK", price="6.49"),
                       Item(shortDescription="Emils Cheese Pizza", price="12.25")],
                total="20.00")
    assert score_receipt(r) == 7 + 50 + 25 + 5 + 2 + 6 + 10

def test_empty_items_still_scores_other_rules():
    r = Receipt(retailer="Walmart", purchaseDate="2022-01-01", purchaseTime="13:01",
                items=[], total="10.00")
    assert score_receipt(r) == 7 + 50 + 25 + 6

def test_non_alphanumeric_retailer():
    r = Receipt(retailer="!@#$%^&*()", purchaseDate="2022-01-01", purchaseTime="13:01",
                items=[Item(shortDescription="Bread", price="2.50")], total="2.50")
    assert score_receipt(r) == 25 + 6

def test_description_lengths_multiple_of_three():
    r = Receipt(retailer="GroceryStore", purchaseDate="2022-01-01", purchaseTime="13:01",
                items=[Item(shortDescription="ABC", price="1.00"),
                       Item(shortDescription="DEF", price="2.00")],
                total="3.00")
    assert score_receipt(r) == 12 + 50 + 25 + 5 + 2 + 6

@pytest.mark.parametrize("when,expected", [("14:00", 96), ("16:00", 86)])
def test_boundary_times(when, expected):
    r = Receipt(retailer="Store", purchaseDate="2022-01-01", purchaseTime=when,
                items=[Item(shortDescription="Item", price="1.00")], total="1.00")
    assert score_receipt(r) == expected

def test_quarter_multiple_not_round_dollar():
    r = Receipt(retailer="Retail", purchaseDate="2022-01-01", purchaseTime="13:01",
                items=[Item(shortDescription="Item", price="0.50")], total="0.50")
    assert score_receipt(r) == 25 + 6 + 6

def test_special_characters_in_description():
    r = Receipt(retailer="Shop", purchaseDate="2022-01-01", purchaseTime="13:01",
                items=[Item(shortDescription="!@# ABC", price="1.00")], total="1.00")
    assert score_receipt(r) == 4 + 50 + 25 + 6 + 1

def test_maximum_values():
    r = Receipt(retailer="MaxStore", purchaseDate="2022-01-01", purchaseTime="14:33",
                items=[Item(shortDescription="Expensive Item", price="9999999999.99")],
                total="9999999999.00")
    assert score_receipt(r) == 8 + 50 + 25 + 6 + 10

def test_unparseable_fields_contribute_zero():
    r = Receipt(retailer="", purchaseDate="yesterday", purchaseTime="noon",
                items=[Item(shortDescription="ABC", price="cheap")], total="lots")
    assert score_receipt(r) == 0

def test_score_is_pure(target_payload):
    r = Receipt(**target_payload)
    assert score_receipt(r) == score_receipt(r)

@pytest.mark.parametrize("total", ["1.00", "2.00", "17.00", "0.25", "3.75", "4.10", "0.01"])
def test_round_and_quarter_fire_together_only_for_whole_totals(total):
    breakdown = dict(score_breakdown(Receipt(total=total)))
    whole = float(total).is_integer()
    assert (breakdown["round_dollar_total"] > 0 and breakdown["quarter_multiple_total"] > 0) == whole

def test_score_never_negative():
    r = Receipt(retailer="", items=[Item(shortDescription="ABC", price="-999.99")] * 3,
                total="-3.10")
    assert score_receipt(r) >= 0
