"""Streamlit UI for WanderPlan - wizard, loading, itinerary and error views.

Run with: streamlit run ui/app.py
"""

# Add project root to sys.path for imports to work when run via streamlit
import sys
from pathlib import Path

_ROOT = Path(__file__).resolve().parents[1]
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

import asyncio  # noqa: E402

import streamlit as st  # noqa: E402
from streamlit.components.v1 import html as components_html  # noqa: E402

from ui.helpers import budget_chart_data, build_timeline_rows, make_generator  # noqa: E402
from ui.map_view import build_folium_map  # noqa: E402
from wanderplan.config import get_settings  # noqa: E402
from wanderplan.features.budget import total_activity_cost  # noqa: E402
from wanderplan.features.maps import TRAVEL_MODES, build_route_url  # noqa: E402
from wanderplan.features.report import (  # noqa: E402
    format_money,
    render_detailed_report,
    render_report_markdown,
)
from wanderplan.models import BUDGET_TIERS, INTEREST_OPTIONS, MAX_TRIP_DAYS  # noqa: E402
from wanderplan.orchestration.controller import run_generation  # noqa: E402
from wanderplan.orchestration.state import (  # noqa: E402
    Action,
    Back,
    EditPreferences,
    Reset,
    StartPlanning,
    Submit,
    ToggleInterest,
    TryAgain,
    View,
    ViewState,
    reduce,
)
from wanderplan.utils.logging import configure_logging  # noqa: E402

settings = get_settings()
configure_logging(settings.log_level)

# Page config
st.set_page_config(
    page_title="WanderPlan AI",
    page_icon="🧭",
    layout="wide",
)

# Initialize session state
if "view_state" not in st.session_state:
    st.session_state.view_state = ViewState()


def current() -> ViewState:
    state: ViewState = st.session_state.view_state
    return state


def dispatch(action: Action) -> None:
    """Reduce an action into the session's view state."""
    st.session_state.view_state = reduce(current(), action)


def _on_field_change(field_name: str) -> None:
    dispatch(EditPreferences({field_name: st.session_state[f"pref_{field_name}"]}))


# =============================================================================
# LANDING
# =============================================================================
def render_landing() -> None:
    # Widgets would otherwise restore the previous session's inputs
    stale_prefixes = ("pref_", "interest_", "timeline_day", "map_day")
    for key in [k for k in st.session_state if k.startswith(stale_prefixes)]:
        del st.session_state[key]

    st.title("🧭 WanderPlan AI")
    st.markdown("### Your next adventure, planned in seconds.")
    st.markdown(
        "Tell us where you want to go and what you love. We build a day-by-day "
        "itinerary grounded in real places from Google Maps."
    )
    st.button("✈️ Start Planning", type="primary", on_click=dispatch, args=(StartPlanning(),))


# =============================================================================
# WIZARD
# =============================================================================
def render_wizard() -> None:
    prefs = current().preferences
    st.button("← Back", on_click=dispatch, args=(Back(),))
    st.title("📋 Plan your trip")

    st.text_input(
        "Where do you want to go? *",
        value=prefs.destination,
        key="pref_destination",
        placeholder="e.g. Kyoto, Japan",
        on_change=_on_field_change,
        args=("destination",),
    )

    col_days, col_people = st.columns(2)
    with col_days:
        st.number_input(
            "Duration (days)",
            min_value=1,
            max_value=MAX_TRIP_DAYS,
            value=prefs.duration,
            key="pref_duration",
            on_change=_on_field_change,
            args=("duration",),
        )
    with col_people:
        st.number_input(
            "Travelers",
            min_value=1,
            value=prefs.travelers,
            key="pref_travelers",
            on_change=_on_field_change,
            args=("travelers",),
        )

    st.radio(
        "Budget Level",
        options=list(BUDGET_TIERS),
        index=BUDGET_TIERS.index(prefs.budget),
        horizontal=True,
        key="pref_budget",
        on_change=_on_field_change,
        args=("budget",),
    )

    st.markdown("**Interests (Select at least 1)**")
    cols = st.columns(5)
    for i, interest in enumerate(INTEREST_OPTIONS):
        with cols[i % len(cols)]:
            st.checkbox(
                interest,
                value=interest in prefs.interests,
                key=f"interest_{interest}",
                on_change=dispatch,
                args=(ToggleInterest(interest),),
            )

    st.button(
        "🚀 Generate Itinerary",
        type="primary",
        use_container_width=True,
        disabled=not prefs.is_submittable(),
        on_click=dispatch,
        args=(Submit(),),
    )


# =============================================================================
# LOADING
# =============================================================================
def render_loading() -> None:
    state = current()
    st.title(f"Designing your trip to {state.preferences.destination}")
    with st.spinner("Our AI is checking Google Maps for the best routes, hidden gems, and local favorites..."):
        st.session_state.view_state = asyncio.run(run_generation(state, make_generator(settings)))
    st.rerun()


# =============================================================================
# ERROR
# =============================================================================
def render_error() -> None:
    st.title("⚠️ Something went wrong")
    st.error(current().error_message)
    st.button("Try Again", on_click=dispatch, args=(TryAgain(),))


# =============================================================================
# ITINERARY
# =============================================================================
def render_itinerary() -> None:
    state = current()
    itinerary = state.itinerary
    prefs = state.preferences
    if itinerary is None:
        st.info("No itinerary yet.")
        return

    st.button("← New trip", on_click=dispatch, args=(Reset(),))
    st.title(itinerary.destination)
    st.markdown(f"*{itinerary.summary}*")
    st.caption(
        f"{len(itinerary.days)} days · {prefs.travelers} traveler(s) · "
        f"est. {format_money(itinerary.currency, itinerary.total_estimated_cost)}"
    )

    tab_timeline, tab_map, tab_budget, tab_report = st.tabs(
        ["🗓️ Timeline", "🗺️ Map", "💰 Budget", "📄 Report"]
    )

    day_numbers = [day.day_number for day in itinerary.days]

    with tab_timeline:
        active = st.radio(
            "Day",
            options=day_numbers,
            format_func=lambda n: f"Day {n}",
            horizontal=True,
            key="timeline_day",
        )
        day = itinerary.get_day(active)
        if day is not None:
            st.subheader(f"Day {day.day_number}: {day.title}")
            route_url = build_route_url(day.activities, itinerary.destination)
            if route_url:
                st.link_button("🧭 Open route in Google Maps", route_url)
            for row in build_timeline_rows(day, itinerary.currency):
                with st.container(border=True):
                    st.markdown(f"**{row['slot']}** · {row['category']} · {row['duration']}")
                    st.markdown(f"#### {row['name']}")
                    st.write(row["description"])
                    if row["location"]:
                        st.caption(f"📍 {row['location']}")
                    st.caption(f"💵 {row['cost']}")
                    if row["map_link"]:
                        st.link_button("View on Google Maps", row["map_link"])

    with tab_map:
        col_day, col_mode = st.columns([3, 1])
        with col_day:
            map_day = st.radio(
                "Show",
                options=[0, *day_numbers],
                format_func=lambda n: "All Days" if n == 0 else f"Day {n}",
                horizontal=True,
                key="map_day",
            )
        with col_mode:
            travel_mode = st.selectbox("Travel mode", options=list(TRAVEL_MODES), key="travel_mode")
        fmap = build_folium_map(itinerary, active_day=map_day, travel_mode=travel_mode)
        components_html(fmap.get_root().render(), height=520)

    with tab_budget:
        st.subheader("Estimated Cost Breakdown")
        data = budget_chart_data(itinerary, prefs.travelers)
        if data["category"]:
            st.metric(
                "Activities total",
                format_money(itinerary.currency, total_activity_cost(itinerary, prefs.travelers)),
            )
            st.bar_chart(data, x="category", y="amount")
            st.caption(
                f"*Estimates for {prefs.travelers} traveler(s). "
                "Excludes flights/accommodation unless specified."
            )
        else:
            st.info("No cost estimates available to visualize.")

    with tab_report:
        st.markdown(render_detailed_report(itinerary.detailed_report))
        st.download_button(
            "⬇️ Download full report",
            data=render_report_markdown(itinerary, prefs.travelers),
            file_name=f"wanderplan-{itinerary.destination.split(',')[0].strip().lower()}.md",
            mime="text/markdown",
        )


VIEWS = {
    View.LANDING: render_landing,
    View.WIZARD: render_wizard,
    View.LOADING: render_loading,
    View.ERROR: render_error,
    View.ITINERARY: render_itinerary,
}

VIEWS[current().view]()
