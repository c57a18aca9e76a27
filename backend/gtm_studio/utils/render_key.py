import re
import uuid
from datetime import datetime


def build_render_key(product_name: str, now: datetime | None = None, token: str | None = None) -> str:
    ts = (now or datetime.now()).strftime("%Y%m%d_%H%M%S")
    slug = re.sub(r"[^a-z0-9]+", "-", product_name.lower()).strip("-") or "plan"
    return f"{slug[:40]}_{ts}_{token or uuid.uuid4().hex[:8]}"
