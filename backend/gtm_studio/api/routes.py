from __future__ import annotations

import logging

from fastapi import APIRouter, Request
from fastapi.concurrency import run_in_threadpool

from gtm_studio.core.settings import settings
from gtm_studio.schemas.contracts import GTMInput, OptionsResponse, PlanResponse, RenderResponse
from gtm_studio.services.normalizer import decode_payload, normalize_payload
from gtm_studio.services.planner import generate_plan
from gtm_studio.services.playbooks import (
    BUDGET_OPTIONS,
    FOCUS_AREA_OPTIONS,
    SAMPLE_BRIEF,
    STAGE_OPTIONS,
    TIMELINE_OPTIONS,
)
from gtm_studio.services.renderer import PlanRenderer
from gtm_studio.utils.render_key import build_render_key

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["api"])


async def read_input(request: Request) -> GTMInput:
    payload = decode_payload(await request.body())
    return normalize_payload(payload)


@router.get("/options", response_model=OptionsResponse)
def options():
    return OptionsResponse(
        stages=STAGE_OPTIONS,
        budget_levels=BUDGET_OPTIONS,
        launch_timelines=TIMELINE_OPTIONS,
        focus_areas=FOCUS_AREA_OPTIONS,
        sample_brief=normalize_payload(SAMPLE_BRIEF),
    )


@router.post("/plan", response_model=PlanResponse)
async def plan(request: Request):
    gtm_input = await read_input(request)
    result = generate_plan(gtm_input)
    logger.info(
        f"Plan generated for {gtm_input.product_name!r} "
        f"({gtm_input.stage}/{gtm_input.budget_level}/{gtm_input.launch_timeline})"
    )
    return PlanResponse(plan=result)


@router.post("/plan/render", response_model=RenderResponse)
async def render(request: Request):
    gtm_input = await read_input(request)
    renderer = PlanRenderer(settings.outputs_dir)
    # Pillow drawing and PNG writes run in the threadpool
    return await run_in_threadpool(
        renderer.render,
        generate_plan(gtm_input),
        build_render_key(gtm_input.product_name),
        target_width=settings.render_width,
        max_height_per_image=settings.max_height_per_image,
    )
