from __future__ import annotations

from typing import List, Literal, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

Stage = Literal["concept", "beta", "ga", "scale"]
BudgetLevel = Literal["lean", "balanced", "aggressive"]
LaunchTimeline = Literal["2-weeks", "1-month", "quarter", "half-year"]

STAGES: Tuple[str, ...] = ("concept", "beta", "ga", "scale")
BUDGET_LEVELS: Tuple[str, ...] = ("lean", "balanced", "aggressive")
LAUNCH_TIMELINES: Tuple[str, ...] = ("2-weeks", "1-month", "quarter", "half-year")

DEFAULT_STAGE = "beta"
DEFAULT_BUDGET_LEVEL = "balanced"
DEFAULT_LAUNCH_TIMELINE = "quarter"

SECTIONS = [
    "executive_summary",
    "key_objectives",
    "audience_profile",
    "messaging_pillars",
    "channel_plan",
    "launch_timeline",
    "content_factory",
    "growth_experiments",
    "measurement_framework",
    "risk_mitigation",
    "follow_ups",
]

SECTION_LABELS = {
    "executive_summary": "Executive Summary",
    "key_objectives": "Objectives",
    "audience_profile": "Audience Intelligence",
    "messaging_pillars": "Messaging Pillars",
    "channel_plan": "Channel Battleplan",
    "launch_timeline": "Launch Timeline",
    "content_factory": "Content Factory",
    "growth_experiments": "Growth Experiments",
    "measurement_framework": "Measurement Framework",
    "risk_mitigation": "Risk & Mitigation",
    "follow_ups": "Next Agentic Steps",
}


class CamelModel(BaseModel):
    """Frozen model that reads and writes camelCase JSON keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class GTMInput(CamelModel):
    product_name: str = "Your Product"
    product_description: str = "delivers a step-change improvement for your customers"
    target_audience: str = "A clearly defined ICP segment with acute pain"
    stage: Stage = DEFAULT_STAGE
    budget_level: BudgetLevel = DEFAULT_BUDGET_LEVEL
    launch_timeline: LaunchTimeline = DEFAULT_LAUNCH_TIMELINE
    brand_voice: str = "Confident, data-backed, customer-obsessed storytelling"
    adoption_goal: str = "Acquire 50 high-fit customers within the first 90 days"
    focus_areas: Tuple[str, ...] = ()


class MessagingPillar(CamelModel):
    pillar: str
    proof_points: Tuple[str, ...] = ()


class ChannelPlay(CamelModel):
    name: str
    cadence: str
    objective: str
    plays: Tuple[str, ...] = ()


class TimelinePhase(CamelModel):
    phase: str
    duration: str
    objectives: Tuple[str, ...] = ()
    tactics: Tuple[str, ...] = ()


class ContentTheme(CamelModel):
    theme: str
    assets: Tuple[str, ...] = ()
    distribution: Tuple[str, ...] = ()


class GrowthExperiment(CamelModel):
    name: str
    hypothesis: str
    metric: str
    owner: str


class RiskEntry(CamelModel):
    risk: str
    mitigation: str


class GTMPlan(CamelModel):
    executive_summary: Tuple[str, ...] = ()
    key_objectives: Tuple[str, ...] = ()
    audience_profile: Tuple[str, ...] = ()
    messaging_pillars: Tuple[MessagingPillar, ...] = ()
    channel_plan: Tuple[ChannelPlay, ...] = ()
    launch_timeline: Tuple[TimelinePhase, ...] = ()
    content_factory: Tuple[ContentTheme, ...] = ()
    growth_experiments: Tuple[GrowthExperiment, ...] = ()
    measurement_framework: Tuple[str, ...] = ()
    risk_mitigation: Tuple[RiskEntry, ...] = ()
    follow_ups: Tuple[str, ...] = ()


class PlanResponse(CamelModel):
    plan: GTMPlan


class ErrorResponse(BaseModel):
    error: str


class Option(BaseModel):
    label: str
    value: str


class OptionsResponse(CamelModel):
    stages: List[Option]
    budget_levels: List[Option]
    launch_timelines: List[Option]
    focus_areas: List[Option]
    sample_brief: GTMInput


class PlanCard(BaseModel):
    title: str = ""
    badge: str = ""
    lines: List[str] = Field(default_factory=list)


class PlanGroup(BaseModel):
    key: str
    label: str
    cards: List[PlanCard] = Field(default_factory=list)


class RenderResponse(CamelModel):
    render_key: str
    files: List[str]
    preview_urls: List[str]
    output_dir: str
    plan: Optional[GTMPlan] = None
