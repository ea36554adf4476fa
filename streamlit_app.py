"""Streamlit dashboard for the vendor insight backend.

Replaceable UI layer: all display logic lives here and in ``dashboard``.
Backend data is fetched over HTTP via VendorDashboardClient only.
"""

from __future__ import annotations

from typing import Any, Optional

import streamlit as st

from app.config import get_dashboard_settings
from dashboard.api_client import DashboardAPIError, VendorDashboardClient
from dashboard.translations import DEFAULT_LANGUAGE, LANGUAGE_LABELS, SUPPORTED_LANGUAGES, translate
from dashboard.view_models import (
    completion_percentage,
    efficiency_frame,
    resolve_suggestion_text,
    validate_simulation_form,
    weekly_growth_frame,
)

st.set_page_config(page_title="Vendor Insights", page_icon="📊", layout="wide")


@st.cache_resource(show_spinner=False)
def _load_client() -> VendorDashboardClient:
    return VendorDashboardClient(get_dashboard_settings())


# ── Session state defaults ─────────────────────────────────────────────────
_STATE_DEFAULTS: dict = {
    "language": DEFAULT_LANGUAGE,
    "analytics": None,
    "editing": False,
    "form_error": None,
    "flash": None,
}

for _key, _val in _STATE_DEFAULTS.items():
    if _key not in st.session_state:
        st.session_state[_key] = _val


def _t(key: str) -> str:
    return translate(key, st.session_state.language)


def refresh_analytics(vendor_id: str) -> Optional[dict[str, Any]]:
    """Fetch fresh analytics into session state; returns None on failure."""
    try:
        st.session_state.analytics = _load_client().fetch_analytics(vendor_id)
    except DashboardAPIError as exc:
        st.session_state.analytics = None
        st.error(f"{_t('load_failed')} ({exc})")
    return st.session_state.analytics


# ── Helper renderers ───────────────────────────────────────────────────────
def _render_header() -> None:
    left, right = st.columns([3, 2])
    with left:
        st.title(_t("title"))
        st.caption(_t("welcome"))
    with right:
        st.session_state.language = st.radio(
            "Language",
            SUPPORTED_LANGUAGES,
            index=SUPPORTED_LANGUAGES.index(st.session_state.language),
            format_func=lambda code: LANGUAGE_LABELS[code],
            horizontal=True,
            label_visibility="collapsed",
        )
        st.session_state.editing = st.toggle(_t("simulate"), value=st.session_state.editing)
        st.success(_t("live_status"))


def _render_simulation_form(vendor_id: str, data: dict[str, Any]) -> None:
    st.subheader(_t("manual_title"))
    if st.session_state.form_error:
        st.error(_t(st.session_state.form_error))

    with st.form("simulation_form"):
        cols = st.columns(4)
        amount = cols[0].text_input(_t("add_sales"), value="", placeholder="e.g. 5000")
        order_placed = cols[1].text_input(_t("orders_placed"), value=str(data.get("orderPlaced", "")))
        order_served = cols[2].text_input(_t("orders_served"), value=str(data.get("orderServed", "")))
        avg_rating = cols[3].text_input(_t("avg_rating"), value=str(data.get("avgRating", "")))
        submitted = st.form_submit_button(_t("update"), type="primary")

    if not submitted:
        return

    form = {
        "amount": amount.strip(),
        "orderPlaced": order_placed.strip(),
        "orderServed": order_served.strip(),
        "avgRating": avg_rating.strip(),
    }
    error_key = validate_simulation_form(form)
    st.session_state.form_error = error_key
    if error_key:
        st.rerun()

    try:
        _load_client().submit_update(vendor_id, form)
    except DashboardAPIError:
        st.error(_t("update_failed"))
        return

    st.session_state.editing = False
    st.session_state.flash = _t("success_update")
    refresh_analytics(vendor_id)
    st.rerun()


def _render_overview(data: dict[str, Any]) -> None:
    earnings = data.get("earnings", {})
    order_placed = int(data.get("orderPlaced", 0))
    order_served = int(data.get("orderServed", 0))

    cols = st.columns(3)
    with cols[0]:
        st.markdown(f"**{_t('earnings')}**")
        st.metric(_t("earnings"), f"₹{earnings.get('today', 0):,}", label_visibility="collapsed")

    with cols[1]:
        st.markdown(f"**{_t('efficiency')}**")
        pct = completion_percentage(order_placed, order_served)
        st.metric(_t("efficiency"), "–" if pct is None else f"{pct}%", label_visibility="collapsed")
        st.caption(f"{order_served} / {order_placed} {_t('orders_served')}")
        labels = {"served": _t("served"), "missed": _t("missed")}
        st.bar_chart(efficiency_frame(order_placed, order_served, labels), height=160)

    with cols[2]:
        st.markdown(f"**{_t('quick_stats')}**")
        stat_cols = st.columns(2)
        stat_cols[0].metric(_t("avg_rating"), f"⭐ {data.get('avgRating', 0)}")
        stat_cols[1].metric(_t("total_dishes"), data.get("totalDishes", 0))


def _render_insights(data: dict[str, Any]) -> None:
    insights = data.get("ai_insights") or {}
    st.subheader(_t("consultant"))
    st.caption(_t("predictions"))
    score = int(insights.get("credibility_score", 0))
    st.progress(score / 100, text=f"{_t('credibility')}: {score}%")
    for suggestion in insights.get("suggestions", []):
        st.info(resolve_suggestion_text(suggestion, st.session_state.language))


def _render_growth(data: dict[str, Any]) -> None:
    st.subheader(_t("growth"))
    today = int((data.get("earnings") or {}).get("today", 0))
    st.area_chart(weekly_growth_frame(today), height=220)


# ── Page ───────────────────────────────────────────────────────────────────
def main() -> None:
    vendor_id = get_dashboard_settings().vendor_id

    _render_header()
    if st.session_state.flash:
        st.toast(st.session_state.flash)
        st.session_state.flash = None

    data = st.session_state.analytics or refresh_analytics(vendor_id)
    if not data:
        return

    if st.session_state.editing:
        _render_simulation_form(vendor_id, data)

    _render_overview(data)
    st.divider()
    left, right = st.columns([2, 3])
    with left:
        _render_insights(data)
    with right:
        _render_growth(data)


main()
