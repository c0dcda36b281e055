"""
SVP Boston — Transparency & Impact Dashboard (Streamlit)

Donations, expenses, impact, projects, partnerships and risk, rendered from
sample data, a REST endpoint, or an uploaded CSV.

Usage:
    streamlit run app.py
"""

import pandas as pd
import plotly.express as px
import streamlit as st

from config.schema import section_frame
from config.settings import DEFAULT_API_KEY, DEFAULT_API_URL, EXPORT_FILENAME
from extractors.csv_upload import decode_upload
from extractors.registry import SOURCE_DESCRIPTIONS, SOURCE_IDS, SOURCE_LABELS
from loaders.dashboard_state import DashboardController
from loaders.snapshot_writer import snapshot_json
from transformers import metrics as m
from utils.errors import DashboardDataError
from utils.http_client import parse_custom_headers

# ── Page Config ────────────────────────────────────────────────────────
st.set_page_config(
    page_title="SVP Transparency Dashboard",
    page_icon="📊",
    layout="wide",
)

CHART_MARGIN = dict(t=20, b=20, l=20, r=20)
TONE_COLORS = {"good": "normal", "warn": "off", "bad": "inverse"}


def plot_frame(data: dict, section: str) -> pd.DataFrame:
    """Section frame with plain float columns and year labels, ready for plotly."""
    df = section_frame(data, section)
    for col in df.columns:
        if col == "year":
            df[col] = df[col].astype("string")
        elif pd.api.types.is_numeric_dtype(df[col]) and not pd.api.types.is_bool_dtype(df[col]):
            df[col] = df[col].astype("float64")
    return df


def donations_chart(data: dict):
    df = plot_frame(data, "donationsByYear")
    fig = px.line(df, x="year", y="amount", markers=True,
                  labels={"year": "Year", "amount": "Donations"})
    fig.update_layout(margin=CHART_MARGIN, height=320)
    fig.update_yaxes(tickprefix="$", tickformat="~s")
    return fig


def expense_chart(data: dict):
    df = plot_frame(data, "expensesByCategory")
    fig = px.pie(df, values="value", names="label", hole=0.4)
    fig.update_traces(texttemplate="%{label}: %{percent:.0%}")
    fig.update_layout(margin=CHART_MARGIN, height=320)
    return fig


def impact_score_chart(data: dict):
    df = plot_frame(data, "impactByYear")
    fig = px.bar(df, x="year", y="impactScore",
                 labels={"year": "Year", "impactScore": "Impact Score"})
    fig.update_layout(margin=CHART_MARGIN, height=320)
    return fig


def beneficiaries_chart(data: dict):
    df = plot_frame(data, "impactByYear")
    fig = px.line(df, x="year", y="beneficiaries", markers=True,
                  labels={"year": "Year", "beneficiaries": "Beneficiaries"})
    fig.update_layout(margin=CHART_MARGIN, height=320)
    return fig


def tone_delta(value: float) -> str:
    return "normal" if value >= 0 else "inverse"


# ── Session State ──────────────────────────────────────────────────────
if "controller" not in st.session_state:
    st.session_state["controller"] = DashboardController()

controller: DashboardController = st.session_state["controller"]
state = controller.state
data = state.data

donation_total = m.donation_total(data)
last_year = m.latest_donation(data)
yoy = m.yoy_growth(data)
program_pct = m.program_ratio(data)
admin_pct = m.admin_ratio(data)
impact_last = m.latest_impact(data)
impact_delta = m.impact_score_delta(data)

# ── Header ─────────────────────────────────────────────────────────────
head_left, head_right = st.columns([4, 1])
with head_left:
    st.title("SVP Boston — Transparency & Impact Dashboard")
    st.caption("Donations • Expenses • Impact • Projects • Partnerships • Risk")
    st.caption(f"Data last fetched: {state.last_fetched.astimezone().strftime('%H:%M:%S')}")
with head_right:
    st.download_button(
        label="Export Data",
        data=snapshot_json(state).encode("utf-8"),
        file_name=EXPORT_FILENAME,
        mime="application/json",
    )

if state.error:
    st.error(f"⚠️ {state.error} — showing sample data instead.")

# ── Tab Layout ─────────────────────────────────────────────────────────
(tab_home, tab_donations, tab_expenses, tab_impact,
 tab_projects, tab_partners, tab_risk, tab_data) = st.tabs([
    "Home", "Donations", "Expenses", "Impact",
    "Projects", "Partnerships", "Risk & Insights", "Data Source",
])

# ── TAB: Home ──────────────────────────────────────────────────────────
with tab_home:
    col1, col2, col3, col4 = st.columns(4)
    col1.metric("Total Donations (Lifetime)", m.format_money(donation_total),
                m.format_pct(yoy), delta_color=tone_delta(yoy))
    col2.metric("Latest Year Donations", m.format_money(last_year.get("amount")),
                str(last_year.get("year")), delta_color="off")
    col3.metric("Program Spend Ratio", m.format_share(program_pct),
                f"Admin: {m.format_share(admin_pct)}")
    col4.metric("Impact Score (Latest)", f"{impact_last.get('impactScore')}",
                m.format_pct(impact_delta), delta_color=tone_delta(impact_delta))

    st.divider()
    st.subheader("At-a-glance analytics")
    st.caption("Use “Data Source” to connect real data")

    c1, c2, c3 = st.columns(3)
    with c1:
        st.markdown("**Donations by Year**")
        st.plotly_chart(donations_chart(data), use_container_width=True)
    with c2:
        st.markdown("**Expense Allocation**")
        st.plotly_chart(expense_chart(data), use_container_width=True)
    with c3:
        st.markdown("**Impact Score Trend**")
        st.plotly_chart(impact_score_chart(data), use_container_width=True)

# ── TAB: Donations ─────────────────────────────────────────────────────
with tab_donations:
    col1, col2, col3, col4 = st.columns(4)
    col1.metric("Total Raised (Lifetime)", m.format_money(donation_total))
    col2.metric("YoY Growth (Latest)", m.format_pct(yoy))
    col3.metric("Avg Donation (Demo)", m.format_money(185), "Estimated", delta_color="off")
    col4.metric("Recurring Share", m.format_share(m.recurring_share(data)), "Monthly donors")

    c1, c2 = st.columns(2)
    with c1:
        st.subheader("Donations by Year")
        st.plotly_chart(donations_chart(data), use_container_width=True)
    with c2:
        st.subheader("Donate (Demo Module)")
        st.caption("UI demo only; no payment is processed.")
        mode = st.radio("Giving frequency", ["one-time", "monthly"], horizontal=True,
                        format_func=lambda x: "One-time" if x == "one-time" else "Monthly")
        st.metric("Suggested amount", m.format_money(m.suggested_donation(mode)))

        mix = section_frame(data, "donationMix")
        st.dataframe(
            pd.DataFrame({"Type": mix["label"], "Share": mix["value"].map(m.format_share)}),
            use_container_width=True,
            hide_index=True,
        )
        b1, b2 = st.columns(2)
        if b1.button("Continue to Payment"):
            st.info("Demo: connect payment processor here.")
        if b2.button("Employer Match"):
            st.info("Demo: link employer matching tool.")

# ── TAB: Expenses ──────────────────────────────────────────────────────
with tab_expenses:
    col1, col2, col3, col4 = st.columns(4)
    col1.metric("Program Spend", m.format_share(program_pct), "Target: ≥75%")
    col2.metric("Ops + Fundraising", m.format_share(admin_pct), "Efficiency", delta_color="off")
    col3.metric("Cost per Nonprofit (Demo)", m.format_money(32000), "Estimated", delta_color="off")
    col4.metric("Admin Efficiency (Demo)", "High", "Benchmarking")

    c1, c2 = st.columns(2)
    with c1:
        st.subheader("Expense Allocation")
        st.plotly_chart(expense_chart(data), use_container_width=True)
    with c2:
        st.subheader("Expense Summary")
        st.caption("Back this with audited reports / Form 990.")
        expenses = section_frame(data, "expensesByCategory")
        st.dataframe(
            pd.DataFrame({
                "Category": expenses["label"],
                "Share": expenses["value"].map(m.format_share),
                "Signal": expenses["label"].map(
                    lambda x: "High impact" if x == "Programs" else "Monitor"
                ),
            }),
            use_container_width=True,
            hide_index=True,
        )

# ── TAB: Impact ────────────────────────────────────────────────────────
with tab_impact:
    col1, col2, col3, col4 = st.columns(4)
    col1.metric("Nonprofits Supported (Latest)", f"{impact_last.get('nonprofitsSupported')}",
                str(impact_last.get("year")), delta_color="off")
    beneficiaries = impact_last.get("beneficiaries")
    col2.metric("Beneficiaries (Latest)",
                f"{beneficiaries:,}" if isinstance(beneficiaries, (int, float)) else str(beneficiaries),
                "Estimated", delta_color="off")
    col3.metric("Impact Score", f"{impact_last.get('impactScore')}",
                m.format_pct(impact_delta), delta_color=tone_delta(impact_delta))
    col4.metric("Sustainability (Demo)", "84%", "Proxy")

    c1, c2 = st.columns(2)
    with c1:
        st.subheader("Beneficiaries by Year")
        st.plotly_chart(beneficiaries_chart(data), use_container_width=True)
    with c2:
        st.subheader("Impact Score Trend")
        st.plotly_chart(impact_score_chart(data), use_container_width=True)

# ── TAB: Projects ──────────────────────────────────────────────────────
with tab_projects:
    st.subheader("Projects accomplished")
    projects = section_frame({"projects": m.projects_by_year(data)}, "projects")
    st.dataframe(
        projects,
        use_container_width=True,
        hide_index=True,
        column_config={
            "year": st.column_config.NumberColumn("Year", format="%d"),
            "name": st.column_config.TextColumn("Project", width="large"),
            "partner": "Partner",
            "funding": st.column_config.NumberColumn("Funding", format="$%d"),
            "outcome": "Outcome",
            "status": "Status",
        },
    )

# ── TAB: Partnerships ──────────────────────────────────────────────────
with tab_partners:
    col1, col2 = st.columns(2)
    col1.metric("Active Partnerships", f"{m.active_partnerships(data)}")
    col2.metric("Total Partners", f"{m.total_partnerships(data)}")

    partners = section_frame(data, "partnerships")
    st.dataframe(
        pd.DataFrame({
            "Name": partners["name"],
            "Type": partners["type"],
            "Contribution": partners["contribution"],
            "Status": partners["active"].map(lambda x: "Active" if x is True else "Inactive"),
        }),
        use_container_width=True,
        hide_index=True,
    )

# ── TAB: Risk & Insights ───────────────────────────────────────────────
with tab_risk:
    risks = section_frame(data, "risk")
    cols = st.columns(3)
    for idx, row in enumerate(risks.itertuples(index=False)):
        score = float(row.score) if pd.notna(row.score) else 0.0
        with cols[idx % 3]:
            st.subheader(str(row.area))
            st.caption(str(row.note) if pd.notna(row.note) else "")
            st.metric("Risk score", round(score * 100), m.risk_label(score),
                      delta_color=TONE_COLORS[m.risk_tone(score)])
            st.caption(f"Suggested action: {m.risk_action(str(row.area))}")

    st.subheader("Recommended Actions (Board-ready)")
    st.markdown(
        "- **Increase recurring donations** to reduce volatility and improve planning.\n"
        "- **Launch employer matching push** to multiply donations with low overhead.\n"
        "- **Prioritize high-ROI programs** (impact per dollar) and publish outcomes.\n"
        "- **Improve transparency** with annual report + audited financial links."
    )

# ── TAB: Data Source ───────────────────────────────────────────────────
with tab_data:
    st.subheader("Data Source Configuration")
    source = st.radio("Source", SOURCE_IDS, horizontal=True,
                      format_func=lambda s: SOURCE_LABELS[s])
    st.caption(SOURCE_DESCRIPTIONS[source])

    api_url = DEFAULT_API_URL
    csv_text = ""
    uploaded = None
    if source == "api":
        api_url = st.text_input("API endpoint URL", value=DEFAULT_API_URL)
    elif source == "csv":
        uploaded = st.file_uploader("Upload CSV", type=["csv"])
        csv_text = st.text_area(
            "Or paste CSV data here (columns: year, donations)",
            height=150,
        )

    with st.expander("Advanced Settings"):
        api_key = st.text_input("API Key (Optional)", value=DEFAULT_API_KEY, type="password")
        raw_headers = st.text_input("Custom Headers (JSON)", value="{}")

    if st.button("Fetch Data", type="primary"):
        with st.spinner("Fetching data..."):
            try:
                headers = parse_custom_headers(raw_headers)
                if source == "csv" and uploaded is not None:
                    csv_text = decode_upload(uploaded.getvalue())
                params = {"api": api_url, "csv": csv_text}.get(source)
            except DashboardDataError as e:
                controller.fail(source, e)
            else:
                controller.fetch(source, params, api_key=api_key, headers=headers)
        st.rerun()

    st.divider()
    st.subheader("Current Data Preview")
    st.caption(f"Years of donation data: {len(section_frame(data, 'donationsByYear'))}")
    st.json({
        "donationsByYear": data.get("donationsByYear"),
        "expensesByCategory": data.get("expensesByCategory"),
        "projectsCount": m.total_projects(data),
        "partnershipsCount": m.total_partnerships(data),
    })
    st.caption(
        "CSV expects columns: **year**, **donations**. "
        "API should return the same object shape as the sample data."
    )
