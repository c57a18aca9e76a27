from __future__ import annotations

import logging
import textwrap
from pathlib import Path

from PIL import Image, ImageDraw, ImageFont

from gtm_studio.schemas.contracts import SECTION_LABELS, SECTIONS, GTMPlan, PlanCard, PlanGroup, RenderResponse

logger = logging.getLogger(__name__)

PLACEHOLDER_TITLE = "Your GTM blueprint will appear here"
PLACEHOLDER_BODY = [
    "Fill in the product context and the agent will architect a full-funnel launch",
    "strategy with channel plays, content factory, growth experiments, and risk guardrails.",
]


def section_groups(plan: GTMPlan) -> list[PlanGroup]:
    """Flatten a plan into labeled groups of cards, in section order."""
    cards: dict[str, list[PlanCard]] = {
        "executive_summary": [PlanCard(lines=plan.executive_summary)],
        "key_objectives": [PlanCard(lines=plan.key_objectives)],
        "audience_profile": [PlanCard(lines=plan.audience_profile)],
        "messaging_pillars": [PlanCard(title=p.pillar, lines=p.proof_points) for p in plan.messaging_pillars],
        "channel_plan": [
            PlanCard(title=c.name, badge=c.cadence, lines=[c.objective, *c.plays]) for c in plan.channel_plan
        ],
        "launch_timeline": [
            PlanCard(
                title=p.phase,
                badge=p.duration,
                lines=[f"Objective: {o}" for o in p.objectives] + [f"Tactic: {t}" for t in p.tactics],
            )
            for p in plan.launch_timeline
        ],
        "content_factory": [
            PlanCard(
                title=c.theme,
                lines=[f"Asset: {a}" for a in c.assets] + [f"Distribution: {', '.join(c.distribution)}"],
            )
            for c in plan.content_factory
        ],
        "growth_experiments": [
            PlanCard(
                title=e.name,
                lines=[f"Hypothesis: {e.hypothesis}", f"Metric: {e.metric}", f"Owner: {e.owner}"],
            )
            for e in plan.growth_experiments
        ],
        "measurement_framework": [PlanCard(lines=plan.measurement_framework)],
        "risk_mitigation": [PlanCard(title=r.risk, lines=[r.mitigation]) for r in plan.risk_mitigation],
        "follow_ups": [PlanCard(lines=plan.follow_ups)],
    }
    return [PlanGroup(key=name, label=SECTION_LABELS[name], cards=cards[name]) for name in SECTIONS]


class PlanRenderer:
    line_height = 22
    char_width = 7

    def __init__(self, outputs_dir: str):
        self.outputs_dir = Path(outputs_dir)

    def render(
        self,
        plan: GTMPlan | None,
        render_key: str,
        target_width: int = 860,
        max_height_per_image: int = 2000,
    ) -> RenderResponse:
        files: list[str] = []
        preview_urls: list[str] = []
        root = self.outputs_dir / render_key
        root.mkdir(parents=True, exist_ok=True)

        if plan is None:
            groups = [PlanGroup(key="placeholder", label=PLACEHOLDER_TITLE, cards=[PlanCard(lines=PLACEHOLDER_BODY)])]
        else:
            groups = section_groups(plan)

        for idx, group in enumerate(groups):
            canvas = self._draw_group(group, target_width)
            for part, chunk in enumerate(self._slice_image(canvas, max_height_per_image)):
                name = f"{idx:02d}_{group.key}_{part:03d}.png"
                chunk.save(root / name, format="PNG")
                files.append(str(root / name))
                preview_urls.append(f"/outputs/{render_key}/{name}")

        logger.info(f"Rendered {len(files)} image(s) to {root}")
        return RenderResponse(
            render_key=render_key, files=files, preview_urls=preview_urls, output_dir=str(root.resolve()), plan=plan
        )

    def _draw_group(self, group: PlanGroup, width: int) -> Image.Image:
        rows = sum(self._card_rows(card, width) for card in group.cards) or 1
        height = 100 + rows * self.line_height + len(group.cards) * 24
        im = Image.new("RGB", (width, height), "white")
        draw = ImageDraw.Draw(im)
        font = ImageFont.load_default()

        draw.rounded_rectangle((24, 20, 24 + 10 * len(group.label) + 24, 48), radius=12, fill="#eef2ff")
        draw.text((36, 28), group.label, fill="#3730a3", font=font)
        y = 70
        for card in group.cards:
            if card.title:
                heading = f"{card.title}  [{card.badge}]" if card.badge else card.title
                for row in self._wrap(heading, width, indent=30):
                    draw.text((30, y), row, fill="black", font=font)
                    y += self.line_height
            for line in card.lines or ["(No content provided)"]:
                draw.rectangle((30, y + 4, 38, y + 12), outline="black", width=1)
                for row in self._wrap(line, width, indent=48):
                    draw.text((48, y), row, fill="#1f2937", font=font)
                    y += self.line_height
            draw.line((30, y + 8, width - 30, y + 8), fill="#e5e7eb", width=1)
            y += 24
        return im

    def _wrap(self, text: str, width: int, indent: int) -> list[str]:
        limit = max((width - indent - 30) // self.char_width, 20)
        return textwrap.wrap(text, limit) or [""]

    def _card_rows(self, card: PlanCard, width: int) -> int:
        rows = 0
        if card.title:
            heading = f"{card.title}  [{card.badge}]" if card.badge else card.title
            rows += len(self._wrap(heading, width, indent=30))
        for line in card.lines or ["(No content provided)"]:
            rows += len(self._wrap(line, width, indent=48))
        return rows

    def _slice_image(self, image: Image.Image, max_height: int) -> list[Image.Image]:
        if image.height <= max_height:
            return [image]
        result: list[Image.Image] = []
        top = 0
        while top < image.height:
            bottom = min(top + max_height, image.height)
            result.append(image.crop((0, top, image.width, bottom)))
            top = bottom
        return result
