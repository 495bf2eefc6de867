import streamlit as st
from typing import Callable, Dict, List

from savings_qualifier import config, narrative
from savings_qualifier.calculator import money
from savings_qualifier.charts import (
    cost_comparison,
    speed_comparison,
    to_frame,
    yearly_cost_comparison,
)
from savings_qualifier.flow import FlowState, QualificationFlow, Step
from savings_qualifier.logging_setup import setup_logging
from savings_qualifier.models import SavingsResult, SessionInput

setup_logging(config.LOG_LEVEL)


# ---------- Page config ----------
st.set_page_config(page_title="GFiber Savings Qualifier", layout="centered")


# ---------- Simple CSS ----------
st.markdown("""
<style>
.summary-card{
  background:#eff6ff;
  padding:16px 20px;
  border-radius:12px;
  border:1px solid #dbeafe;
  text-align:center;
  margin-bottom:12px;
}
.summary-card .plan{ font-size:20px; font-weight:600; color:#1e40af; }
.summary-card .savings{ font-size:18px; margin:.2rem 0; }
.savings .amount{ font-weight:800; color:#16a34a; }
.savings.negative .amount{ color:#dc2626; }
.step-caption{ color:#6b7280; font-size:13px; }
.disclaimer{ font-size:12px; color:#6b7280; text-align:center; margin-top:1rem; }
</style>
""", unsafe_allow_html=True)


# ---------- Session state ----------
if "flow" not in st.session_state:
    st.session_state.flow = QualificationFlow()
flow: QualificationFlow = st.session_state.flow

TOTAL_STEPS = 3  # welcome + details + results
STEP_NUMBER = {Step.WELCOME: 0, Step.DETAILS: 1, Step.RESULTS: 2}

GFIBER_BENEFITS = [
    ("Symmetrical Speeds", "Equally fast upload and download, perfect for video calls, gaming, and large file sharing (unlike most cable providers)."),
    ("No Data Caps", "Stream, game, and browse as much as you want without hidden fees or throttling."),
    ("Reliability", "Fiber is less susceptible to outages and slowdowns caused by weather or network congestion."),
    ("Future-Proof Technology", "A network built for tomorrow's internet demands."),
    ("Transparent Pricing", "Clear, straightforward pricing with no hidden fees or annual contracts."),
    ("Dedicated Customer Support", "Highly-rated customer service focused on your satisfaction."),
]
YOUTUBE_TV_BENEFITS = [
    ("Flexibility", "No long-term contracts, cancel anytime."),
    ("Cloud DVR", "Record your favorite shows and watch them anywhere."),
    ("No Equipment Fees", "Say goodbye to costly cable box rentals."),
    ("Stream on Multiple Devices", "Watch on your phone, tablet, smart TV, and more."),
    ("Comprehensive Channels", "A wide array of live TV channels from major networks."),
]


def header(step: Step, title: str):
    display_idx = STEP_NUMBER[step] + 1
    st.markdown(f"<div class='step-caption'>Step {display_idx} of {TOTAL_STEPS}</div>", unsafe_allow_html=True)
    st.progress(min(display_idx / TOTAL_STEPS, 1.0))
    st.title(title)


def show_error(state: FlowState):
    if state.error:
        st.error(f"**Error!** {state.error}")


def md_money(val) -> str:
    # bare $ pairs turn into LaTeX in st.markdown
    return money(val).replace("$", "\\$")


def plan_ids_by_label() -> Dict[str, str]:
    return {p.label: p.id for p in flow.catalog}


def plan_index(plan_id: str) -> int:
    ids = [p.id for p in flow.catalog]
    return ids.index(plan_id) if plan_id in ids else 0


def tv_choice_labels() -> List[str]:
    return [f"Yes (Add {money(flow.tv_cost)}/month)", "No"]


# model answers only: a raised APIError is not cached, the template is never stored
@st.cache_data(show_spinner=False, ttl=3600)
def cached_model_pitch(session: SessionInput, result: SavingsResult, _client) -> str:
    return narrative.model_pitch(session, result, _client)


def talking_points(session: SessionInput, result: SavingsResult) -> str:
    return narrative.pitch(session, result, writer=cached_model_pitch)


# =========================
# Results-screen callbacks (recompute happens inside the flow)
# =========================
def on_results_plan_change():
    flow.change_plan(plan_ids_by_label()[st.session_state["results_plan"]])


def on_results_tv_change():
    flow.set_tv_bundle(st.session_state["results_tv"] == tv_choice_labels()[0])


# =========================
# Views, one per step
# =========================
def render_welcome(state: FlowState):
    header(state.step, "Welcome")
    st.markdown(
        "Let's help your potential customers see the benefits and savings of switching to GFiber."
    )
    with st.form("start_form"):
        start = st.form_submit_button("Start Qualification", type="primary", use_container_width=True)
    if start:
        flow.start()
        st.rerun()


def render_details(state: FlowState):
    header(state.step, "Customer's Current & Desired GFiber Plan")
    show_error(state)
    session = state.session
    plan_labels = plan_ids_by_label()

    with st.form("details_form"):
        provider = st.selectbox(
            "Customer's Current Internet Provider",
            config.PROVIDERS,
            index=config.PROVIDERS.index(session.provider_name) if session.provider_name in config.PROVIDERS else None,
            placeholder="Select ISP",
            key="provider",
        )
        download = st.text_input(
            "Customer's Current Download Speed (Mbps)",
            value=session.current_download_mbps,
            placeholder="e.g., 300",
            key="download",
        )
        upload = st.text_input(
            "Customer's Current Upload Speed (Mbps)",
            value=session.current_upload_mbps,
            placeholder="e.g., 20",
            key="upload",
        )
        cost = st.text_input(
            "Customer's Current Monthly Cost ($) - Total (Internet + TV if bundled)",
            value=session.current_monthly_cost,
            placeholder="e.g., 75.00 or 150.00 for bundle",
            key="cost",
        )
        has_tv = st.checkbox(
            "Customer currently has a TV bundle (e.g., Cable TV with internet)",
            value=session.has_tv_bundle,
            key="tv_bundle",
        )
        plan = st.radio(
            "Select GFiber Internet Plan:",
            list(plan_labels),
            index=plan_index(session.selected_plan_id),
            key="plan",
        )
        submitted = st.form_submit_button("Show Benefits & Savings", type="primary", use_container_width=True)

    st.button("Back to Welcome", use_container_width=True, on_click=flow.back)

    if submitted:
        flow.submit(
            provider_name=provider or "",
            current_download_mbps=download,
            current_upload_mbps=upload,
            current_monthly_cost=cost,
            has_tv_bundle=has_tv,
            selected_plan_id=plan_labels[plan],
        )
        st.rerun()


def render_results(state: FlowState):
    header(state.step, "Your GFiber Savings!")
    result = state.result
    if result is None:
        # only reachable if the stored inputs stopped resolving
        st.error(state.error or "Something went wrong. Please go back and ensure all details are entered correctly.")
        st.button("Go Back", on_click=flow.revise)
        return

    session = state.session
    plan_labels = plan_ids_by_label()
    st.radio(
        "Adjust GFiber Internet Plan:",
        list(plan_labels),
        index=plan_index(session.selected_plan_id),
        horizontal=True,
        key="results_plan",
        on_change=on_results_plan_change,
    )
    st.radio(
        "Include YouTube TV in GFiber Total:",
        tv_choice_labels(),
        index=0 if session.has_tv_bundle else 1,
        horizontal=True,
        key="results_tv",
        on_change=on_results_tv_change,
    )

    plan = result.recommended_plan
    s_class = "negative" if result.monthly_savings < 0 else "positive"
    card = [
        '<div class="summary-card">',
        f'<div class="plan">Selected GFiber Internet Plan: {plan.display_name} for {md_money(plan.monthly_cost)}/month</div>',
    ]
    if result.tv_cost:
        card.append(f"<div>(Paired with YouTube TV for {md_money(result.tv_cost)}/month)</div>")
    card += [
        f'<div class="savings {s_class}">Potential Monthly Savings: <span class="amount">{md_money(result.monthly_savings)}</span></div>',
        f'<div class="savings {s_class}">Potential Yearly Savings: <span class="amount">{md_money(result.yearly_savings)}</span></div>',
        "</div>",
    ]
    st.markdown("\n".join(card), unsafe_allow_html=True)
    if result.monthly_savings < 0:
        st.warning("Note: GFiber cost is currently higher for this comparison. Focus on other benefits!")

    st.subheader("Monthly Cost Comparison")
    st.bar_chart(to_frame(cost_comparison(result), "Monthly Cost"), color="#4285F4")

    st.subheader("Yearly Cost Comparison")
    st.bar_chart(to_frame(yearly_cost_comparison(result), "Yearly Cost"), color="#34A853")

    if state.details is not None:
        speeds = speed_comparison(state.details, result)
        if speeds:
            st.subheader("Speed Comparison (Mbps)")
            st.bar_chart(to_frame(speeds, "Speed (Mbps)"), color="#FBBC05")

    st.subheader("Talking Points")
    st.info(talking_points(session, result).replace("$", "\\$"))

    st.subheader("Why Switch to GFiber?")
    st.markdown("\n".join(f"- **{title}:** {desc}" for title, desc in GFIBER_BENEFITS))
    if result.tv_cost:
        st.markdown("**Benefits of GFiber + YouTube TV:**")
        st.markdown("\n".join(f"- **{title}:** {desc}" for title, desc in YOUTUBE_TV_BENEFITS))

    st.markdown(
        "<div class='disclaimer'>*All GFiber, YouTube TV, and competitor plan prices are examples for "
        "demonstration purposes only and may vary based on location, promotions, and specific service "
        "agreements. Please verify current pricing with GFiber and competitor representatives.</div>",
        unsafe_allow_html=True,
    )
    st.button("Start New Qualification", type="primary", use_container_width=True, on_click=flow.restart)


# =========================
# UI Flow
# =========================
RENDERERS: Dict[Step, Callable[[FlowState], None]] = {
    Step.WELCOME: render_welcome,
    Step.DETAILS: render_details,
    Step.RESULTS: render_results,
}

state = flow.snapshot()
RENDERERS[state.step](state)
