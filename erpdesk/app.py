"""
Order entry page.

Run:
  streamlit run erpdesk/app.py
"""
import pandas as pd
import streamlit as st

from erpdesk.address import AddressData, format_address, get_address_catalog
from erpdesk.config import get_config
from erpdesk.errors import DataUnavailable, InvalidOrderItem
from erpdesk.logging import get_logger
from erpdesk.pricing import calculate_item_subtotal, format_currency, summarize_order

st.set_page_config(page_title="Order Entry", layout="wide")

config = get_config()
logger = get_logger(__name__)

try:
    catalog = get_address_catalog()
except DataUnavailable as e:
    logger.error(f"Address catalog unavailable: {e}")
    st.error("Address data could not be loaded. Check ADDRESS_DATA_DIR and reload the page.")
    st.stop()

# -----------------------------------------------------------------------------
# Sidebar: delivery address (province → city → district cascade)
# -----------------------------------------------------------------------------
st.sidebar.header("Delivery address")

provinces = catalog.list_provinces()
province = st.sidebar.selectbox("Province", provinces, format_func=lambda n: n.name, index=None)

cities = catalog.list_cities(province.code) if province else []
# Keyed by parent so a new province clears the city and district picks
city = st.sidebar.selectbox(
    "City", cities, format_func=lambda n: n.name, index=None, disabled=not cities,
    key=f"city-{province.code if province else ''}",
)

districts = catalog.list_districts(city.code) if city else []
district = st.sidebar.selectbox(
    "District", districts, format_func=lambda n: n.name, index=None, disabled=not districts,
    key=f"district-{city.code if city else ''}",
)

detail = st.sidebar.text_input("Street / building")

address = AddressData(
    province=province.name if province else "",
    city=city.name if city else "",
    district=district.name if district else "",
    detail=detail,
)

if catalog.validate_address(address):
    st.sidebar.success(format_address(address))
elif address.province:
    st.sidebar.info(format_address(address))

with st.sidebar.expander("Find a district"):
    keyword = st.text_input("Name contains")
    hits = catalog.search(keyword)
    if hits:
        st.dataframe(
            pd.DataFrame([{"path": h.full_path, "score": h.score} for h in hits]),
            use_container_width=True,
            hide_index=True,
        )
    elif keyword:
        st.caption(f"No match (minimum {config.address_search_min_length} characters).")

# -----------------------------------------------------------------------------
# Line items
# -----------------------------------------------------------------------------
st.markdown("### Line items")

blank_items = pd.DataFrame(
    {"product": pd.Series(dtype="str"), "quantity": pd.Series(dtype="float"), "unit_price": pd.Series(dtype="float")}
)
edited = st.data_editor(
    blank_items,
    num_rows="dynamic",
    use_container_width=True,
    column_config={
        "quantity": st.column_config.NumberColumn("Quantity", min_value=0),
        "unit_price": st.column_config.NumberColumn("Unit price", min_value=0, format="%.2f"),
    },
)

# Rows without a quantity are still being typed in
rows = edited.dropna(subset=["quantity"])
items = [
    {"quantity": row.quantity, "unit_price": None if pd.isna(row.unit_price) else row.unit_price}
    for row in rows.itertuples(index=False)
]

try:
    totals = summarize_order(items)
    subtotals = [calculate_item_subtotal(i["quantity"], i["unit_price"]) for i in items]
except InvalidOrderItem as e:
    st.error(f"Invalid line item: {e}")
    st.stop()

# -----------------------------------------------------------------------------
# Totals
# -----------------------------------------------------------------------------
c1, c2, c3 = st.columns(3)
c1.metric("Lines", f"{totals.lines:,}")
c2.metric("Units", f"{totals.units:,}")
c3.metric("Order total", format_currency(totals.total))

if items:
    st.markdown("### Subtotals")
    st.dataframe(
        rows.assign(subtotal=[format_currency(s) for s in subtotals]),
        use_container_width=True,
        hide_index=True,
    )
