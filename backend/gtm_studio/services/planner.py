from __future__ import annotations

import logging
from typing import Any

from gtm_studio.schemas.contracts import (
    ChannelPlay,
    ContentTheme,
    GrowthExperiment,
    GTMInput,
    GTMPlan,
    MessagingPillar,
    RiskEntry,
    TimelinePhase,
)
from gtm_studio.services.playbooks import (
    BASE_RISKS,
    BUDGET_EXPERIMENT_SLOTS,
    CHANNEL_MIX,
    CONTENT_THEMES,
    DEFAULT_KEYS,
    EXPERIMENT_BACKLOG,
    FOCUS_PLAYBOOKS,
    MESSAGING_PILLARS,
    STAGE_PROFILES,
    STAGE_RISKS,
    TIMELINE_PHASES,
    lookup,
)

logger = logging.getLogger(__name__)


def _fill(template: str, context: dict[str, str]) -> str:
    return template.format(**context)


def _fill_all(templates: list[str], context: dict[str, str]) -> list[str]:
    return [_fill(t, context) for t in templates]


class PlanBuilder:
    """Assembles a GTMPlan from the playbook tables.

    Each ``_section`` method is a pure function of the input; lookups on
    stage, budget and timeline fall back to the default entry so ``build``
    never raises.
    """

    def build(self, req: GTMInput) -> GTMPlan:
        stage = lookup(STAGE_PROFILES, req.stage, DEFAULT_KEYS["stage"])
        context = {
            "product": req.product_name,
            "description": req.product_description,
            "audience": req.target_audience,
            "voice": req.brand_voice,
            "goal": req.adoption_goal,
            "claim": stage["claim"],
            "proof": stage["proof"],
        }
        focus = [FOCUS_PLAYBOOKS[tag] for tag in req.focus_areas if tag in FOCUS_PLAYBOOKS]
        logger.debug(
            f"Building plan stage={req.stage} budget={req.budget_level} "
            f"timeline={req.launch_timeline} focus={list(req.focus_areas)}"
        )
        return GTMPlan(
            executive_summary=self._executive_summary(req, stage, context),
            key_objectives=self._objectives(focus, context),
            audience_profile=self._audience_profile(context),
            messaging_pillars=self._messaging_pillars(context),
            channel_plan=self._channel_plan(req, context),
            launch_timeline=self._launch_timeline(req, context),
            content_factory=self._content_factory(focus, context),
            growth_experiments=self._growth_experiments(req, focus, context),
            measurement_framework=self._measurement_framework(context),
            risk_mitigation=self._risk_mitigation(req, context),
            follow_ups=self._follow_ups(focus, context),
        )

    def _executive_summary(self, req: GTMInput, stage: dict[str, str], context: dict[str, str]) -> list[str]:
        bullets = [
            _fill("{product} {description}", context),
            f"Stage: {stage['label']}. The motion is to {stage['motion']}.",
            _fill("Primary audience: {audience}", context),
            _fill("North star: {goal}", context),
        ]
        if req.focus_areas:
            bullets.append(f"Focus emphasis: {', '.join(req.focus_areas)}.")
        return bullets

    def _objectives(self, focus: list[dict[str, Any]], context: dict[str, str]) -> list[str]:
        objectives = _fill_all(
            [
                "Hit the adoption goal: {goal}",
                "Establish {product} as the default choice for {audience}",
                "Build a repeatable acquisition engine that is ready to scale",
            ],
            context,
        )
        # focus objectives lead so the chosen emphasis reads first
        return [_fill(entry["objective"], context) for entry in focus] + objectives

    def _audience_profile(self, context: dict[str, str]) -> list[str]:
        return _fill_all(
            [
                "Ideal customer: {audience}",
                "Trigger moment: the pain {product} removes becomes visible to leadership",
                "Buying committee: champion, economic buyer and technical evaluator",
                "Voice that resonates: {voice}",
            ],
            context,
        )

    def _messaging_pillars(self, context: dict[str, str]) -> list[MessagingPillar]:
        return [
            MessagingPillar(pillar=entry["pillar"], proof_points=_fill_all(entry["proof_points"], context))
            for entry in MESSAGING_PILLARS
        ]

    def _channel_plan(self, req: GTMInput, context: dict[str, str]) -> list[ChannelPlay]:
        channels = lookup(CHANNEL_MIX, req.budget_level, DEFAULT_KEYS["budget_level"])
        return [
            ChannelPlay(
                name=channel["name"],
                cadence=channel["cadence"],
                objective=_fill(channel["objective"], context),
                plays=_fill_all(channel["plays"], context),
            )
            for channel in channels
        ]

    def _launch_timeline(self, req: GTMInput, context: dict[str, str]) -> list[TimelinePhase]:
        phases = lookup(TIMELINE_PHASES, req.launch_timeline, DEFAULT_KEYS["launch_timeline"])
        return [
            TimelinePhase(
                phase=phase["phase"],
                duration=phase["duration"],
                objectives=_fill_all(phase["objectives"], context),
                tactics=_fill_all(phase["tactics"], context),
            )
            for phase in phases
        ]

    def _content_factory(self, focus: list[dict[str, Any]], context: dict[str, str]) -> list[ContentTheme]:
        themes = CONTENT_THEMES + [entry["theme"] for entry in focus if "theme" in entry]
        return [
            ContentTheme(
                theme=theme["theme"],
                assets=_fill_all(theme["assets"], context),
                distribution=list(theme["distribution"]),
            )
            for theme in themes
        ]

    def _growth_experiments(
        self, req: GTMInput, focus: list[dict[str, Any]], context: dict[str, str]
    ) -> list[GrowthExperiment]:
        slots = lookup(BUDGET_EXPERIMENT_SLOTS, req.budget_level, DEFAULT_KEYS["budget_level"])
        backlog = EXPERIMENT_BACKLOG[:slots] + [entry["experiment"] for entry in focus if "experiment" in entry]
        return [
            GrowthExperiment(
                name=item["name"],
                hypothesis=_fill(item["hypothesis"], context),
                metric=item["metric"],
                owner=item["owner"],
            )
            for item in backlog
        ]

    def _measurement_framework(self, context: dict[str, str]) -> list[str]:
        return _fill_all(
            [
                "North star metric tracked weekly against: {goal}",
                "Acquisition: qualified sign-ups and pipeline created by channel",
                "Activation: share of new {product} accounts reaching the first value moment",
                "Efficiency: blended CAC and payback period",
                "Retention: 30/60/90-day logo and revenue retention",
            ],
            context,
        )

    def _risk_mitigation(self, req: GTMInput, context: dict[str, str]) -> list[RiskEntry]:
        risks = lookup(STAGE_RISKS, req.stage, DEFAULT_KEYS["stage"]) + BASE_RISKS
        return [RiskEntry(risk=entry["risk"], mitigation=_fill(entry["mitigation"], context)) for entry in risks]

    def _follow_ups(self, focus: list[dict[str, Any]], context: dict[str, str]) -> list[str]:
        prompts = _fill_all(
            [
                "Generate launch-day copy for {product} in this voice: {voice}",
                "Turn the channel plan into a week-by-week content calendar",
                "Draft an outbound sequence aimed at {audience}",
            ],
            context,
        )
        return prompts + [_fill(entry["follow_up"], context) for entry in focus]


def generate_plan(gtm_input: GTMInput) -> GTMPlan:
    return PlanBuilder().build(gtm_input)
