"""
Streamlit UI for the pizza pricing tool.

Features:
- Day picker (defaults to today)
- Add pizzas to an order kept in session state
- Receipt table, pricing trace and CSV export
"""
import streamlit as st
import sys
from pathlib import Path

# Add src to path for imports
src_path = Path(__file__).parent.parent.parent
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from pizza_pricing.engine import (
    DayOfWeek,
    InvalidQuantity,
    PizzaOrder,
    PricingEngine,
    PizzaType,
    daily_discount_multiplier,
    display_label,
    unit_price,
)


st.set_page_config(
    page_title="Pizza Pricing",
    layout="wide",
)


@st.cache_resource
def get_engine():
    """Get cached engine instance."""
    return PricingEngine()


engine = get_engine()

if 'order' not in st.session_state:
    st.session_state.order = engine.new_order()

order: PizzaOrder = st.session_state.order


# ============================================================================
# SIDEBAR: Day & Menu
# ============================================================================
with st.sidebar:
    st.header("📅 Day")
    days = list(DayOfWeek)
    day = st.selectbox(
        "Price new pizzas as",
        options=days,
        index=days.index(order.current_day),
        format_func=lambda d: f"{d.value} (×{daily_discount_multiplier(d)})",
    )
    if day != order.current_day:
        order.set_day(day)
        st.caption("Pizzas already added keep their price.")

    st.divider()
    st.header("🍕 Menu")
    for pizza_type in PizzaType:
        st.caption(f"**{display_label(pizza_type)}**: ${unit_price(pizza_type):.2f}")

    if st.button("🗑️ New Order"):
        st.session_state.order = engine.new_order()
        st.rerun()


# ============================================================================
# MAIN CONTENT
# ============================================================================
st.title("Pizza Pricing")

col1, col2 = st.columns([1.2, 1.8], gap="large")

with col1:
    st.subheader("Add Pizzas")
    with st.container(border=True):
        pizza_type = st.selectbox("Pizza", options=list(PizzaType), format_func=display_label)
        quantity = st.number_input("Qty", min_value=0, value=1, step=1)
        if st.button("➕ Add to Order", type="primary"):
            try:
                order.add(pizza_type, int(quantity))
                st.rerun()
            except InvalidQuantity as e:
                st.error(str(e))

with col2:
    st.subheader("Receipt")
    if not order.lines:
        st.info("No pizzas yet.")
    else:
        frame = order.receipt_frame()
        st.dataframe(frame, hide_index=True, use_container_width=True)

        m1, m2, m3 = st.columns(3)
        m1.metric("Pizzas", order.total_pizzas)
        m2.metric("Subtotal", f"${order.running_total:.2f}")
        m3.metric("Total", f"${order.total():.2f}")
        if order.bonus_multiplier() != 1.0:
            st.success("Bulk bonus applied: 5% off orders of more than five pizzas")

        with st.expander("🔍 Pricing Details"):
            st.code(order.get_trace_text(), language=None)

        st.download_button(
            "⬇️ Download Receipt (CSV)",
            data=frame.to_csv(index=False),
            file_name="receipt.csv",
            mime="text/csv",
        )
