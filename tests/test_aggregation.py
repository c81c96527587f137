from decimal import Decimal

from sales_analytics.models import (
    Category, Product, Employee, Sale, SaleItem, DISCOUNT_FIXED, DISCOUNT_PERCENT,
)
from sales_analytics.services.reporting import (
    NO_CATEGORY, aggregate_by_category, aggregate_by_employee, aggregate_by_payment_method,
    compute_summary, net_contribution, resolve_custom_discount, round_money,
)


def make_sale(total="0", cost="0", discount="0", custom="0", custom_type=DISCOUNT_FIXED,
              payment_method="cash", employee=None, items=None):
    return Sale(
        total_amount=Decimal(total), total_cost=Decimal(cost), discount=Decimal(discount),
        custom_discount=Decimal(custom), custom_discount_type=custom_type,
        payment_method=payment_method, employee=employee, items=items or [],
    )


def test_percent_custom_discount_is_resolved_against_gross():
    sale = make_sale(total="1000", custom="10", custom_type=DISCOUNT_PERCENT)
    assert resolve_custom_discount(sale) == Decimal("100")


def test_fixed_custom_discount_is_taken_as_is():
    sale = make_sale(total="1000", custom="10", custom_type=DISCOUNT_FIXED)
    assert resolve_custom_discount(sale) == Decimal("10")


def test_missing_custom_discount_type_defaults_to_fixed():
    sale = make_sale(total="1000", custom="10", custom_type=None)
    assert resolve_custom_discount(sale) == Decimal("10")


def test_missing_amounts_count_as_zero():
    sale = Sale(payment_method="cash")
    assert resolve_custom_discount(sale) == Decimal("0")
    assert net_contribution(sale) == Decimal("0")


def test_employee_gets_net_while_payment_method_gets_gross():
    cashier = Employee(name="Dewi")
    sale = make_sale(total="500", discount="50", custom="0", employee=cashier, payment_method="qris")

    assert aggregate_by_employee([sale])["Dewi"].total_net_sales == Decimal("450")
    assert aggregate_by_payment_method([sale]) == {"qris": Decimal("500")}


def test_employee_summary_skips_sales_without_employee_and_merges_same_name():
    first = Employee(name="Alice")
    second = Employee(name="Alice")
    sales = [
        make_sale(total="100", employee=first),
        make_sale(total="40", discount="5", custom="10", custom_type=DISCOUNT_PERCENT, employee=second),
        make_sale(total="999"),
    ]
    summary = aggregate_by_employee(sales)
    assert list(summary) == ["Alice"]
    assert summary["Alice"].employee_name == "Alice"
    assert summary["Alice"].total_net_sales == Decimal("131")


def test_category_revenue_uses_line_total_and_no_category_fallback():
    drinks = Category(name="Drinks")
    sale = make_sale(total="700", items=[
        SaleItem(product=Product(name="Tea", code="T", category=drinks), quantity=1, total_price=Decimal("200")),
        SaleItem(product=Product(name="Bag", code="B"), quantity=2, total_price=Decimal("300")),
        SaleItem(product=Product(name="Coffee", code="C", category=drinks), quantity=1, total_price=Decimal("200")),
    ])
    assert aggregate_by_category([sale]) == {
        "Drinks": Decimal("400"),
        NO_CATEGORY: Decimal("300"),
    }


def test_payment_method_keys_are_not_normalized():
    sales = [
        make_sale(total="10", payment_method="Cash"),
        make_sale(total="20", payment_method="cash"),
        make_sale(total="30", payment_method="cash"),
    ]
    assert aggregate_by_payment_method(sales) == {"Cash": Decimal("10"), "cash": Decimal("50")}


def test_summary_statistics():
    sales = [
        make_sale(total="1000", cost="600", custom="10", custom_type=DISCOUNT_PERCENT),
        make_sale(total="500", cost="200", discount="50"),
    ]
    stats = compute_summary(sales, total_customers=2)

    assert stats.total_sale_amount == Decimal("1500")
    assert stats.total_cost == Decimal("800")
    assert stats.total_product_discount == Decimal("50")
    assert stats.total_custom_discount == Decimal("100")
    assert stats.net_profit == Decimal("550")
    assert stats.total_transactions == 2
    assert stats.average_transaction_value == Decimal("750")
    assert stats.total_customers == 2


def test_empty_summary_guards_division_by_zero():
    stats = compute_summary([])
    assert stats.total_transactions == 0
    assert stats.average_transaction_value == 0
    assert stats.net_profit == 0
    assert stats.total_customers == 0
    assert aggregate_by_category([]) == {}
    assert aggregate_by_payment_method([]) == {}
    assert aggregate_by_employee([]) == {}


def test_round_half_up_at_output():
    assert round_money(Decimal("10.005")) == Decimal("10.01")
    assert round_money(10.005) == Decimal("10.01")
    assert round_money(Decimal("10.004")) == Decimal("10.00")
    assert round_money(None) == Decimal("0.00")


def test_no_premature_rounding_during_accumulation():
    sales = [make_sale(total="3.335") for _ in range(3)]
    stats = compute_summary(sales)
    assert stats.total_sale_amount == Decimal("10.005")
    assert stats.rounded()["total_sale_amount"] == Decimal("10.01")
    assert stats.rounded()["average_transaction_value"] == Decimal("3.34")
    assert stats.rounded()["total_transactions"] == 3
