"""Browser form for the GTM blueprint generator.

Run with:
    streamlit run ui_app.py
"""
from __future__ import annotations

import pandas as pd
import streamlit as st

from gtm_studio.schemas.contracts import GTMPlan
from gtm_studio.services.normalizer import InvalidPayload, normalize_payload
from gtm_studio.services.planner import generate_plan
from gtm_studio.services.playbooks import (
    BUDGET_OPTIONS,
    FOCUS_AREA_OPTIONS,
    SAMPLE_BRIEF,
    STAGE_OPTIONS,
    TIMELINE_OPTIONS,
)
from gtm_studio.services.renderer import PLACEHOLDER_BODY, PLACEHOLDER_TITLE, section_groups

st.set_page_config(page_title="Go-To-Market AI Agent", page_icon="🚀", layout="wide")


def _select(label: str, options, default: str) -> str:
    values = [o.value for o in options]
    labels = {o.value: o.label for o in options}
    return st.selectbox(label, values, index=values.index(default), format_func=labels.get)


def channel_table(plan: GTMPlan) -> pd.DataFrame:
    return pd.DataFrame(
        [{"Channel": c.name, "Cadence": c.cadence, "Objective": c.objective} for c in plan.channel_plan]
    )


def timeline_table(plan: GTMPlan) -> pd.DataFrame:
    return pd.DataFrame(
        [
            {"Phase": p.phase, "Duration": p.duration, "Objectives": "; ".join(p.objectives)}
            for p in plan.launch_timeline
        ]
    )


st.title("🚀 Go-To-Market AI Agent")
st.caption(
    "Configure the agent with your product context. It synthesizes a launch-ready GTM blueprint, "
    "spanning positioning, channel plays, growth loops, and enablement."
)

form_col, plan_col = st.columns([1, 2])

with form_col:
    with st.form("brief"):
        product_name = st.text_input("Product Name", value=SAMPLE_BRIEF["productName"])
        product_description = st.text_area("Product Superpower", value=SAMPLE_BRIEF["productDescription"])
        target_audience = st.text_area("Target Audience / ICP", value=SAMPLE_BRIEF["targetAudience"])
        stage = _select("Stage", STAGE_OPTIONS, SAMPLE_BRIEF["stage"])
        budget_level = _select("Budget Posture", BUDGET_OPTIONS, SAMPLE_BRIEF["budgetLevel"])
        launch_timeline = _select("Launch Timeline", TIMELINE_OPTIONS, SAMPLE_BRIEF["launchTimeline"])
        brand_voice = st.text_area("Brand Voice / Vibe", value=SAMPLE_BRIEF["brandVoice"])
        adoption_goal = st.text_input("North Star Adoption Goal", value=SAMPLE_BRIEF["adoptionGoal"])
        st.markdown("**Focus Areas**")
        focus_areas = [
            o.value for o in FOCUS_AREA_OPTIONS if st.checkbox(o.label, value=o.value in SAMPLE_BRIEF["focusAreas"])
        ]
        submitted = st.form_submit_button("Generate GTM Blueprint", use_container_width=True)

if submitted:
    payload = {
        "productName": product_name,
        "productDescription": product_description,
        "targetAudience": target_audience,
        "stage": stage,
        "budgetLevel": budget_level,
        "launchTimeline": launch_timeline,
        "brandVoice": brand_voice,
        "adoptionGoal": adoption_goal,
        "focusAreas": focus_areas,
    }
    try:
        gtm_input = normalize_payload(payload)
    except InvalidPayload as exc:
        st.session_state.pop("plan", None)
        st.error(str(exc))
    else:
        st.session_state["plan"] = generate_plan(gtm_input)
        st.session_state["product_name"] = gtm_input.product_name

with plan_col:
    plan = st.session_state.get("plan")
    if plan is None:
        st.subheader(PLACEHOLDER_TITLE)
        st.write(" ".join(PLACEHOLDER_BODY))
    else:
        st.header(f"{st.session_state['product_name']} Launch Command")
        for group in section_groups(plan):
            st.subheader(group.label)
            if group.key == "channel_plan":
                st.dataframe(channel_table(plan), use_container_width=True)
            elif group.key == "launch_timeline":
                st.dataframe(timeline_table(plan), use_container_width=True)
            for card in group.cards:
                if card.title:
                    st.markdown(f"**{card.title}**" + (f" · `{card.badge}`" if card.badge else ""))
                st.markdown("\n".join(f"- {line}" for line in card.lines))
        st.download_button(
            "Download plan JSON",
            data=plan.model_dump_json(by_alias=True, indent=2),
            file_name="gtm_plan.json",
            mime="application/json",
        )
