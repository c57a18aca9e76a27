"""Canned template tables the plan builder selects from.

Every table is keyed by an enumerated input value. Templates use
``str.format`` placeholders: ``{product}``, ``{description}``,
``{audience}``, ``{voice}`` and ``{goal}``.
"""
from __future__ import annotations

from typing import Any, Mapping, TypeVar

from gtm_studio.schemas.contracts import (
    DEFAULT_BUDGET_LEVEL,
    DEFAULT_LAUNCH_TIMELINE,
    DEFAULT_STAGE,
    Option,
)

T = TypeVar("T")

STAGE_OPTIONS = [
    Option(label="Concept / Pre-Beta", value="concept"),
    Option(label="Private Beta", value="beta"),
    Option(label="General Availability", value="ga"),
    Option(label="Scale / Growth Stage", value="scale"),
]

BUDGET_OPTIONS = [
    Option(label="Lean (scrappy, <$10k/month)", value="lean"),
    Option(label="Balanced (mix of organic + paid)", value="balanced"),
    Option(label="Aggressive (multi-channel, high spend)", value="aggressive"),
]

TIMELINE_OPTIONS = [
    Option(label="Lightning (under 2 weeks)", value="2-weeks"),
    Option(label="Fast (1 month)", value="1-month"),
    Option(label="Quarterly Horizon", value="quarter"),
    Option(label="6 Month Horizon", value="half-year"),
]

FOCUS_AREA_OPTIONS = [
    Option(label="Positioning & Narrative", value="positioning"),
    Option(label="Revenue Enablement", value="enablement"),
    Option(label="Lifecycle & Activation", value="lifecycle"),
    Option(label="Experimentation Velocity", value="experimentation"),
]

SAMPLE_BRIEF = {
    "productName": "Atlas IQ Copilot",
    "productDescription": "orchestrates customer research, insight synthesis, and activation workflows with AI agents.",
    "targetAudience": "Heads of Product Marketing at PLG SaaS companies scaling from Series A to Series C.",
    "stage": "ga",
    "budgetLevel": "balanced",
    "launchTimeline": "quarter",
    "brandVoice": "Modern, insight-led, customer-obsessed tone with punchy confidence and proof.",
    "adoptionGoal": "Land 30 lighthouse customers and $1M ARR in 2 quarters.",
    "focusAreas": ["positioning", "enablement", "experimentation"],
}


def lookup(table: Mapping[str, T], key: Any, default_key: str) -> T:
    """Return ``table[key]`` or the designated default entry."""
    if isinstance(key, str) and key in table:
        return table[key]
    return table[default_key]


STAGE_PROFILES: dict[str, dict[str, str]] = {
    "concept": {
        "label": "pre-beta concept",
        "motion": "validate the problem narrative with design partners before any broad launch",
        "claim": "early signal",
        "proof": "design-partner interviews and prototype walkthroughs",
    },
    "beta": {
        "label": "private beta",
        "motion": "convert beta usage into referenceable wins and a repeatable activation path",
        "claim": "beta-proven",
        "proof": "beta cohort usage data and customer quotes",
    },
    "ga": {
        "label": "general availability launch",
        "motion": "turn launch attention into qualified pipeline across owned, earned and paid channels",
        "claim": "production-grade",
        "proof": "named customer case studies and quantified ROI",
    },
    "scale": {
        "label": "scale-stage expansion",
        "motion": "compound demand through new segments, partners and expansion revenue",
        "claim": "category-leading",
        "proof": "benchmark data across the customer base and analyst validation",
    },
}

MESSAGING_PILLARS = [
    {
        "pillar": "Differentiated Outcome",
        "proof_points": [
            "{product} {description}",
            "Before/after narrative showing the cost of the status quo for {audience}",
            "Quantified value moment tied to the goal: {goal}",
        ],
    },
    {
        "pillar": "Proof & Trust",
        "proof_points": [
            "Lead with {proof}",
            "Security, reliability and onboarding commitments stated up front",
            "Voice and tone: {voice}",
        ],
    },
    {
        "pillar": "Urgency",
        "proof_points": [
            "Frame the window of advantage for teams adopting {product} now",
            "Launch-only incentives that reward fast activation",
            "Clear first step with a time-to-value promise",
        ],
    },
]

CHANNEL_MIX: dict[str, list[dict[str, Any]]] = {
    "lean": [
        {
            "name": "Founder-Led Social",
            "cadence": "3 posts / week",
            "objective": "Build credibility with {audience} through point-of-view content",
            "plays": [
                "Share build-in-public updates on how {product} {description}",
                "Repurpose customer conversations into short insight threads",
            ],
        },
        {
            "name": "Community Seeding",
            "cadence": "Weekly",
            "objective": "Earn trusted word of mouth in niche communities",
            "plays": [
                "Host an office-hours session in the top two communities",
                "Offer early access codes to active community members",
            ],
        },
        {
            "name": "Direct Outreach",
            "cadence": "20 touches / week",
            "objective": "Open conversations with high-fit accounts",
            "plays": [
                "Personalized teardown offers for a short list of target accounts",
                "Warm intro requests from existing users and advisors",
            ],
        },
    ],
    "balanced": [
        {
            "name": "Content & SEO Engine",
            "cadence": "2 long-form pieces / week",
            "objective": "Capture high-intent search demand from {audience}",
            "plays": [
                "Publish problem-led guides that end in a {product} walkthrough",
                "Refresh comparison pages monthly",
            ],
        },
        {
            "name": "Lifecycle Email",
            "cadence": "Always-on + weekly digest",
            "objective": "Move sign-ups to activation and paid conversion",
            "plays": [
                "Behavioral onboarding sequence keyed to the first value moment",
                "Weekly digest with customer wins and product tips",
            ],
        },
        {
            "name": "Targeted Paid Social",
            "cadence": "Daily optimization",
            "objective": "Retarget engaged visitors and lookalike audiences",
            "plays": [
                "Proof-led creative rotated every two weeks",
                "Retarget content readers with a demo or trial offer",
            ],
        },
        {
            "name": "Partner Co-Marketing",
            "cadence": "1 joint asset / month",
            "objective": "Borrow distribution from adjacent tools {audience} already trust",
            "plays": [
                "Co-hosted webinar with an integration partner",
                "Marketplace listing with launch promotion",
            ],
        },
    ],
    "aggressive": [
        {
            "name": "Paid Acquisition Blitz",
            "cadence": "Daily budget pacing",
            "objective": "Saturate high-intent demand across search, social and review sites",
            "plays": [
                "Search campaigns on category and competitor terms",
                "Multi-format social ads with weekly creative sprints",
                "Sponsored placements on review and comparison sites",
            ],
        },
        {
            "name": "Launch Event Series",
            "cadence": "Bi-weekly",
            "objective": "Create concentrated moments of attention around {product}",
            "plays": [
                "Virtual launch keynote with live product demo",
                "Regional roundtables for {audience}",
            ],
        },
        {
            "name": "Account-Based Marketing",
            "cadence": "Weekly sprints",
            "objective": "Break into named strategic accounts",
            "plays": [
                "Tiered ABM program with personalized landing pages",
                "Executive gifting and direct mail for tier-one accounts",
            ],
        },
        {
            "name": "Influencer & Analyst Relations",
            "cadence": "Monthly briefings",
            "objective": "Earn third-party validation at scale",
            "plays": [
                "Paid creator partnerships with category voices",
                "Analyst briefings ahead of the launch moment",
            ],
        },
        {
            "name": "Lifecycle & Expansion",
            "cadence": "Always-on",
            "objective": "Convert launch volume into retained, expanding revenue",
            "plays": [
                "Product-qualified lead scoring routed to sales",
                "Expansion plays triggered by usage milestones",
            ],
        },
    ],
}

TIMELINE_PHASES: dict[str, list[dict[str, Any]]] = {
    "2-weeks": [
        {
            "phase": "Sprint Prep",
            "duration": "Days 1-4",
            "objectives": ["Lock positioning and launch message", "Prepare launch assets"],
            "tactics": ["One-page messaging brief", "Landing page and launch email ready to ship"],
        },
        {
            "phase": "Launch Burst",
            "duration": "Days 5-14",
            "objectives": ["Drive concentrated awareness", "Capture first activations"],
            "tactics": ["Coordinated launch day across all channels", "Daily metric stand-up and quick fixes"],
        },
    ],
    "1-month": [
        {
            "phase": "Foundation",
            "duration": "Week 1",
            "objectives": ["Finalize narrative and ICP", "Instrument the funnel"],
            "tactics": ["Messaging workshop", "Analytics and attribution setup"],
        },
        {
            "phase": "Launch",
            "duration": "Weeks 2-3",
            "objectives": ["Announce {product}", "Generate first pipeline"],
            "tactics": ["Launch announcement and press outreach", "Activate priority channels"],
        },
        {
            "phase": "Optimize",
            "duration": "Week 4",
            "objectives": ["Double down on winning channels", "Fix activation drop-off"],
            "tactics": ["Channel performance review", "Onboarding iteration based on early data"],
        },
    ],
    "quarter": [
        {
            "phase": "Foundation",
            "duration": "Weeks 1-2",
            "objectives": ["Validate positioning with {audience}", "Build launch asset kit"],
            "tactics": ["Customer interviews to sharpen the narrative", "Sales and support enablement kit"],
        },
        {
            "phase": "Launch",
            "duration": "Weeks 3-5",
            "objectives": ["Launch {product} publicly", "Seed proof and social signal"],
            "tactics": ["Launch event and announcement", "Customer story publishing"],
        },
        {
            "phase": "Amplify",
            "duration": "Weeks 6-9",
            "objectives": ["Scale the channels that convert", "Expand partner reach"],
            "tactics": ["Budget shift toward top performers", "Partner co-marketing push"],
        },
        {
            "phase": "Optimize",
            "duration": "Weeks 10-13",
            "objectives": ["Improve conversion efficiency", "Plan the next quarter"],
            "tactics": ["Funnel experiments on activation", "Quarterly business review with learnings"],
        },
    ],
    "half-year": [
        {
            "phase": "Research & Positioning",
            "duration": "Month 1",
            "objectives": ["Deep ICP research with {audience}", "Define category narrative"],
            "tactics": ["Win/loss and customer interviews", "Competitive landscape mapping"],
        },
        {
            "phase": "Pre-Launch",
            "duration": "Month 2",
            "objectives": ["Build waitlist and advocates", "Produce launch asset library"],
            "tactics": ["Waitlist campaign and early access program", "Analyst and influencer previews"],
        },
        {
            "phase": "Launch",
            "duration": "Month 3",
            "objectives": ["Launch {product} with maximum reach", "Convert waitlist to customers"],
            "tactics": ["Launch week programming", "Sales sprint on warm pipeline"],
        },
        {
            "phase": "Scale",
            "duration": "Months 4-5",
            "objectives": ["Scale acquisition efficiently", "Open new segments"],
            "tactics": ["Paid and partner expansion", "Segment-specific landing pages"],
        },
        {
            "phase": "Expand & Retain",
            "duration": "Month 6",
            "objectives": ["Drive expansion revenue", "Institutionalize the GTM playbook"],
            "tactics": ["Customer advocacy program", "Playbook retrospective and next-half planning"],
        },
    ],
}

CONTENT_THEMES = [
    {
        "theme": "Problem Narrative",
        "assets": ["Point-of-view essay on the {audience} pain", "{claim} problem-framing deck"],
        "distribution": ["Blog", "LinkedIn", "Sales outreach"],
    },
    {
        "theme": "Proof Library",
        "assets": ["Assets built from {proof}", "Short demo video of {product}"],
        "distribution": ["Website", "Email nurture", "Sales enablement"],
    },
    {
        "theme": "How-To Playbooks",
        "assets": ["Step-by-step guide to reaching the first value moment", "Template pack for {audience}"],
        "distribution": ["SEO", "Community", "In-product onboarding"],
    },
]

BUDGET_EXPERIMENT_SLOTS = {"lean": 2, "balanced": 3, "aggressive": 4}

EXPERIMENT_BACKLOG = [
    {
        "name": "Activation Accelerator",
        "hypothesis": "A guided setup checklist will lift week-one activation for {product}",
        "metric": "Week-one activation rate",
        "owner": "Growth PM",
    },
    {
        "name": "Proof-Led Landing Page",
        "hypothesis": "Leading with customer proof will raise trial conversion from {audience}",
        "metric": "Visitor-to-trial conversion",
        "owner": "Product Marketing",
    },
    {
        "name": "Referral Loop",
        "hypothesis": "A double-sided referral incentive will cut blended CAC",
        "metric": "Referred sign-ups / total sign-ups",
        "owner": "Lifecycle Marketing",
    },
    {
        "name": "Pricing Page Test",
        "hypothesis": "Anchoring on an annual plan will raise average contract value",
        "metric": "Average contract value",
        "owner": "Revenue Operations",
    },
]

BASE_RISKS = [
    {
        "risk": "Message-market mismatch",
        "mitigation": "Run weekly message tests with {audience} and retire underperforming claims",
    },
    {
        "risk": "Activation drop-off",
        "mitigation": "Instrument the first-run journey and ship onboarding fixes every sprint",
    },
    {
        "risk": "Channel underperformance",
        "mitigation": "Set kill criteria per channel and reallocate budget every two weeks",
    },
]

STAGE_RISKS: dict[str, list[dict[str, str]]] = {
    "concept": [
        {
            "risk": "Low brand trust",
            "mitigation": "Borrow credibility through design partners, advisors and transparent roadmaps",
        },
    ],
    "beta": [
        {
            "risk": "Beta feedback not converting to proof",
            "mitigation": "Agree on case-study rights and success metrics with every beta customer",
        },
    ],
    "ga": [
        {
            "risk": "Launch spike without retention",
            "mitigation": "Pair launch campaigns with lifecycle nurture and success check-ins",
        },
    ],
    "scale": [
        {
            "risk": "Channel saturation",
            "mitigation": "Open new segments and partner channels before core channels plateau",
        },
    ],
}

FOCUS_PLAYBOOKS: dict[str, dict[str, Any]] = {
    "positioning": {
        "objective": "Codify a positioning narrative that sales, product and marketing repeat verbatim",
        "follow_up": "Draft three positioning statements for {product} and test them with {audience}",
        "theme": {
            "theme": "Category Narrative",
            "assets": ["Category point-of-view manifesto", "Messaging house for {product}"],
            "distribution": ["Website", "Analyst briefings", "Keynotes"],
        },
    },
    "enablement": {
        "objective": "Equip revenue teams with talk tracks, battlecards and demo flows before launch",
        "follow_up": "Build a sales battlecard comparing {product} to the top two alternatives",
        "theme": {
            "theme": "Revenue Enablement Kit",
            "assets": ["Battlecards and objection handling", "Demo script and discovery guide"],
            "distribution": ["Sales portal", "Enablement sessions"],
        },
    },
    "lifecycle": {
        "objective": "Design activation and retention journeys that reach the value moment fast",
        "follow_up": "Map the onboarding journey and flag the top three drop-off points",
        "experiment": {
            "name": "Lifecycle Nudge Sequence",
            "hypothesis": "Behavior-triggered nudges will raise 30-day retention for new {product} accounts",
            "metric": "30-day retention",
            "owner": "Lifecycle Marketing",
        },
    },
    "experimentation": {
        "objective": "Run a weekly experiment cadence with clear hypotheses and kill criteria",
        "follow_up": "Prioritize the experiment backlog with ICE scoring and launch the top test",
        "experiment": {
            "name": "Message A/B Sprint",
            "hypothesis": "Outcome-led headlines will beat feature-led headlines for {audience}",
            "metric": "Click-through to demo request",
            "owner": "Growth Marketing",
        },
    },
}

DEFAULT_KEYS = {
    "stage": DEFAULT_STAGE,
    "budget_level": DEFAULT_BUDGET_LEVEL,
    "launch_timeline": DEFAULT_LAUNCH_TIMELINE,
}
