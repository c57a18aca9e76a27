"""Turns an untyped request payload into a fully populated GTMInput."""
from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import Any

from gtm_studio.core.settings import settings
from gtm_studio.schemas.contracts import (
    BUDGET_LEVELS,
    DEFAULT_BUDGET_LEVEL,
    DEFAULT_LAUNCH_TIMELINE,
    DEFAULT_STAGE,
    LAUNCH_TIMELINES,
    STAGES,
    GTMInput,
)

logger = logging.getLogger(__name__)

TEXT_FIELDS = {
    "productName": "product_name",
    "productDescription": "product_description",
    "targetAudience": "target_audience",
    "brandVoice": "brand_voice",
    "adoptionGoal": "adoption_goal",
}

ENUM_FIELDS = {
    "stage": ("stage", STAGES, DEFAULT_STAGE),
    "budgetLevel": ("budget_level", BUDGET_LEVELS, DEFAULT_BUDGET_LEVEL),
    "launchTimeline": ("launch_timeline", LAUNCH_TIMELINES, DEFAULT_LAUNCH_TIMELINE),
}


class InvalidPayload(ValueError):
    """Raised when a request body cannot be turned into a GTMInput."""


def decode_payload(raw: bytes | str) -> Any:
    if isinstance(raw, bytes):
        raw = raw.decode("utf-8", errors="replace")
    try:
        return json.loads(raw)
    except (json.JSONDecodeError, RecursionError) as exc:
        raise InvalidPayload("Malformed JSON body") from exc


def normalize_text(value: Any) -> str:
    if isinstance(value, str):
        return value.strip()
    return ""


def normalize_focus_areas(value: Any) -> tuple[str, ...]:
    if not isinstance(value, (list, tuple)):
        return ()
    seen: list[str] = []
    for item in value:
        if isinstance(item, str) and item not in seen:
            seen.append(item)
    return tuple(seen)


def _pick(payload: Mapping[str, Any], alias: str, name: str) -> Any:
    if alias in payload:
        return payload[alias]
    return payload.get(name)


def _normalize_enum(alias: str, value: Any, allowed: tuple[str, ...], default: str, strict: bool) -> str:
    if value is None:
        return default
    if isinstance(value, str) and value in allowed:
        return value
    if strict:
        raise InvalidPayload(f"Invalid {alias}: expected one of {', '.join(allowed)}")
    logger.debug(f"Unknown {alias} value {value!r}, falling back to {default}")
    return default


def normalize_payload(payload: Any, strict: bool | None = None) -> GTMInput:
    """Validate and default a decoded request body.

    Only non-object payloads are rejected. Blank or missing text fields take
    their documented defaults and unknown enum values fall back to the field
    default unless strict enum checking is enabled.
    """
    if isinstance(payload, GTMInput):
        payload = payload.model_dump(by_alias=True)
    if not isinstance(payload, Mapping):
        raise InvalidPayload("Invalid payload")
    if strict is None:
        strict = settings.strict_enums

    defaults = GTMInput()
    values: dict[str, Any] = {}
    for alias, name in TEXT_FIELDS.items():
        values[name] = normalize_text(_pick(payload, alias, name)) or getattr(defaults, name)
    for alias, (name, allowed, default) in ENUM_FIELDS.items():
        values[name] = _normalize_enum(alias, _pick(payload, alias, name), allowed, default, strict)
    values["focus_areas"] = normalize_focus_areas(_pick(payload, "focusAreas", "focus_areas"))
    return GTMInput(**values)
