import pytest

from pizza_pricing.engine import (
    DayOfWeek,
    FixedClock,
    InvalidQuantity,
    PizzaOrder,
    PizzaType,
    PricingEngine,
    Request,
    add,
    bonus_multiplier,
    line_cost,
    new_dateless_order,
    new_order,
    set_day,
    total,
)


def order_on(day):
    return new_order(FixedClock(day))


def test_initial_cost_is_0():
    assert new_order().total() == 0.0
    assert new_dateless_order().total() == 0.0


def test_new_order_asks_clock():
    assert order_on(DayOfWeek.SUNDAY).current_day == DayOfWeek.SUNDAY


def test_dateless_order_is_neutral(order):
    assert order.current_day == DayOfWeek.TUESDAY
    assert order.running_total == 0.0
    assert order.total_pizzas == 0
    assert order.lines == []


def test_two_pepperoni_costs_20(order):
    order.add(PizzaType.PEPPERONI, 2)
    assert order.total() == 20.0


def test_zero_pepperoni_costs_0(order):
    order.add(PizzaType.PEPPERONI, 0)
    assert order.total() == 0.0
    assert order.total_pizzas == 0
    assert len(order.lines) == 1


def test_10_pepperoni_costs_95(order):
    order.add(PizzaType.PEPPERONI, 10)
    assert order.total() == 95.0


def test_three_brie_costs_45(order):
    order.add(PizzaType.BRIE_CHICKEN_AND_MUSHROOM, 3)
    assert order.total() == 45.0


def test_three_brie_added_separately_costs_45(order):
    order.add(PizzaType.BRIE_CHICKEN_AND_MUSHROOM, 1)
    order.add(PizzaType.BRIE_CHICKEN_AND_MUSHROOM, 1)
    order.add(PizzaType.BRIE_CHICKEN_AND_MUSHROOM, 1)
    assert order.total() == 45.0


def test_one_mighty_veg_costs_12(order):
    order.add(PizzaType.MIGHTY_VEG, 1)
    assert order.total() == 12.0


def test_two_pepperoni_costs_18_on_mondays():
    order = new_order()
    order.set_day(DayOfWeek.MONDAY)
    order.add(PizzaType.PEPPERONI, 2)
    assert order.total() == 18.0


def test_two_pepperoni_costs_20_on_tuesdays():
    order = new_order()
    order.set_day(DayOfWeek.TUESDAY)
    order.add(PizzaType.PEPPERONI, 2)
    assert order.total() == 20.0


def test_one_pepperoni_costs_10_point_5_on_sundays():
    order = new_order()
    order.set_day(DayOfWeek.SUNDAY)
    order.add(PizzaType.PEPPERONI, 1)
    assert order.total() == 10.5


def test_one_brie_costs_15_on_mondays():
    order = order_on(DayOfWeek.MONDAY)
    order.add(PizzaType.BRIE_CHICKEN_AND_MUSHROOM, 1)
    assert order.total() == 15.0


def test_monday_exemption_only_covers_brie():
    order = order_on(DayOfWeek.MONDAY)
    assert order.line_cost(PizzaType.MIGHTY_VEG, 1) == pytest.approx(10.8)
    assert order.line_cost(PizzaType.BRIE_CHICKEN_AND_MUSHROOM, 1) == 15.0


def test_brie_is_surcharged_on_sundays():
    order = order_on(DayOfWeek.SUNDAY)
    assert order.line_cost(PizzaType.BRIE_CHICKEN_AND_MUSHROOM, 1) == pytest.approx(15.75)


@pytest.mark.parametrize("pizza_type", list(PizzaType))
@pytest.mark.parametrize("quantity", [0, 1, 2, 7, 25])
def test_line_cost_is_linear_in_quantity(order, pizza_type, quantity):
    assert line_cost(order, pizza_type, quantity) == quantity * line_cost(order, pizza_type, 1)


@pytest.mark.parametrize("quantity, expected", [
    (5, 1.0),
    (6, 0.95),
])
def test_bulk_threshold_is_strictly_more_than_five(order, quantity, expected):
    order.add(PizzaType.PEPPERONI, quantity)
    assert bonus_multiplier(order) == expected


def test_bulk_bonus_counts_pizzas_across_lines(order):
    order.add(PizzaType.PEPPERONI, 3)
    assert order.bonus_multiplier() == 1.0
    order.add(PizzaType.MIGHTY_VEG, 3)
    assert order.bonus_multiplier() == 0.95
    assert order.total() == pytest.approx((30.0 + 36.0) * 0.95)


def test_bulk_bonus_never_touches_running_total(order):
    order.add(PizzaType.PEPPERONI, 10)
    assert order.running_total == 100.0
    assert total(order) == 95.0
    assert total(order) == 95.0
    assert order.running_total == 100.0


def test_set_day_is_not_retroactive(order):
    add(order, PizzaType.PEPPERONI, 2)
    set_day(order, DayOfWeek.MONDAY)
    assert order.running_total == 20.0
    add(order, PizzaType.PEPPERONI, 2)
    assert order.running_total == 38.0
    assert [line.day for line in order.lines] == [DayOfWeek.TUESDAY, DayOfWeek.MONDAY]


def test_set_day_changes_future_line_cost(order):
    set_day(order, DayOfWeek.SUNDAY)
    assert line_cost(order, PizzaType.PEPPERONI, 2) == 21.0


def test_lines_record_add_time_pricing():
    order = order_on(DayOfWeek.MONDAY)
    order.add(PizzaType.PEPPERONI, 2)
    line = order.lines[0]
    assert line.pizza_type == PizzaType.PEPPERONI
    assert line.quantity == 2
    assert line.day == DayOfWeek.MONDAY
    assert line.multiplier == 0.9
    assert line.line_cost == 18.0


@pytest.mark.parametrize("quantity", [-1, -10, 1.5, "2", True, None])
def test_invalid_quantity_is_rejected(order, quantity):
    order.add(PizzaType.PEPPERONI, 1)
    with pytest.raises(InvalidQuantity):
        order.add(PizzaType.PEPPERONI, quantity)
    # Order is left as it was
    assert order.running_total == 10.0
    assert order.total_pizzas == 1
    assert len(order.lines) == 1


def test_invalid_quantity_is_a_value_error(order):
    with pytest.raises(ValueError, match="-3"):
        order.add(PizzaType.MIGHTY_VEG, -3)


def test_trace_text_shows_each_step():
    order = order_on(DayOfWeek.MONDAY)
    order.add(PizzaType.BRIE_CHICKEN_AND_MUSHROOM, 1)
    order.add(PizzaType.PEPPERONI, 5)
    text = order.get_trace_text()
    assert "Monday exemption" in text
    assert "Mon multiplier" in text
    assert "Bulk Bonus: 6 pizzas" in text
    assert "Total: $57.00" in text


def test_to_dict(order):
    order.add(PizzaType.MIGHTY_VEG, 2)
    data = order.to_dict()
    assert data["day"] == "Tue"
    assert data["total_pizzas"] == 2
    assert data["running_total"] == 24.0
    assert data["bonus_multiplier"] == 1.0
    assert data["total"] == 24.0
    assert data["lines"][0]["label"] == "Mighty Veg"


def test_engine_calculate_uses_request_day():
    engine = PricingEngine(clock=FixedClock(DayOfWeek.TUESDAY))
    result = engine.calculate(Request(items=[(PizzaType.PEPPERONI, 2)], day=DayOfWeek.MONDAY))
    assert isinstance(result, PizzaOrder)
    assert result.total() == 18.0


def test_engine_calculate_falls_back_to_clock():
    engine = PricingEngine(clock=FixedClock(DayOfWeek.SUNDAY))
    result = engine.calculate(Request(items=[(PizzaType.PEPPERONI, 1)]))
    assert result.current_day == DayOfWeek.SUNDAY
    assert result.total() == 10.5


def test_engine_calculate_propagates_invalid_quantity():
    engine = PricingEngine(clock=FixedClock(DayOfWeek.TUESDAY))
    with pytest.raises(InvalidQuantity):
        engine.calculate(Request(items=[(PizzaType.PEPPERONI, -1)]))
