"""Test checkout scanning and basket totals."""
import random
import pytest
from core.pricing import Checkout, InvalidArgument, PricingCatalog, PricingRule, UnknownItem


def scan_all(checkout, items):
    for item in items:
        checkout.scan(item)
    return checkout


def test_empty_basket_is_zero(checkout):
    assert checkout.calculate_total_price() == 0


def test_empty_basket_with_empty_catalog_is_zero():
    assert Checkout(PricingCatalog([])).calculate_total_price() == 0


@pytest.mark.parametrize("items,expected", [
    ("A", 50),
    ("ABCD", 115),
    ("AAA", 130),
    ("AAABB", 175),
    ("BB", 45),
    ("AAAA", 180),
    ("AABBCC", 185),
    ("AABBBCDDD", 240),
    ("AAABBBBCDDD", 285),
    ("CCCDD", 90),
    ("AABBB", 175),
    ("AAAAAA", 260),
    ("ABACDBA", 210),
])
def test_basket_totals(checkout, items, expected):
    scan_all(checkout, items)
    assert checkout.calculate_total_price() == expected


def test_large_basket(checkout):
    for _ in range(1000):
        checkout.scan("A")
        checkout.scan("B")
        checkout.scan("C")
    assert checkout.calculate_total_price() == 85840


def test_scan_counts(checkout):
    scan_all(checkout, "ABAA")
    assert checkout.counts == {"A": 3, "B": 1}
    assert checkout.item_count == 4


def test_counts_is_a_copy(checkout):
    checkout.scan("A")
    checkout.counts["A"] = 99
    assert checkout.counts == {"A": 1}


def test_scan_accepts_unknown_item(checkout):
    checkout.scan("E")  # no error until pricing
    assert checkout.counts == {"E": 1}


def test_unknown_item_fails_total(checkout):
    scan_all(checkout, "AE")
    with pytest.raises(UnknownItem, match="Item 'E' is not valid") as exc:
        checkout.calculate_total_price()
    assert exc.value.item == "E"


def test_unknown_item_is_value_error(checkout):
    checkout.scan("E")
    with pytest.raises(ValueError):
        checkout.calculate_total_price()


def test_empty_catalog_fails_on_first_scan():
    checkout = scan_all(Checkout(PricingCatalog([])), "AB")
    with pytest.raises(UnknownItem) as exc:
        checkout.calculate_total_price()
    assert exc.value.item == "A"


def test_total_is_idempotent(checkout):
    scan_all(checkout, "AAABBC")
    first = checkout.calculate_total_price()
    assert checkout.calculate_total_price() == first
    assert checkout.counts == {"A": 3, "B": 2, "C": 1}


def test_total_between_scans(checkout):
    scan_all(checkout, "AA")
    assert checkout.calculate_total_price() == 100
    checkout.scan("A")
    assert checkout.calculate_total_price() == 130


def test_unknown_item_failure_does_not_reset(checkout):
    scan_all(checkout, "AE")
    with pytest.raises(UnknownItem):
        checkout.calculate_total_price()
    with pytest.raises(UnknownItem):
        checkout.calculate_total_price()
    assert checkout.counts == {"A": 1, "E": 1}


def test_scan_order_does_not_matter(catalog):
    items = list("AAABBBBCDDDAB")
    expected = scan_all(Checkout(catalog), items).calculate_total_price()

    shuffled = items[:]
    random.Random(7).shuffle(shuffled)
    assert scan_all(Checkout(catalog), shuffled).calculate_total_price() == expected


def test_catalog_shared_between_checkouts(catalog):
    first = scan_all(Checkout(catalog), "AAA")
    second = scan_all(Checkout(catalog), "B")
    assert first.catalog is second.catalog
    assert first.calculate_total_price() == 130
    assert second.calculate_total_price() == 30


def test_missing_catalog_rejected():
    with pytest.raises(InvalidArgument):
        Checkout(None)


def test_non_catalog_rejected(rules):
    with pytest.raises(InvalidArgument, match="Expected PricingCatalog"):
        Checkout(rules)


def test_zero_priced_items():
    checkout = scan_all(Checkout(PricingCatalog([PricingRule("F", 0)])), "FFF")
    assert checkout.calculate_total_price() == 0
