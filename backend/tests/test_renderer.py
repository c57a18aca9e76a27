from pathlib import Path

from PIL import Image

from gtm_studio.schemas.contracts import SECTION_LABELS, SECTIONS, GTMPlan, PlanCard
from gtm_studio.services.normalizer import normalize_payload
from gtm_studio.services.planner import generate_plan
from gtm_studio.services.renderer import PlanRenderer, section_groups


def test_slice_image_splits_large_canvas(tmp_path: Path):
    renderer = PlanRenderer(str(tmp_path))
    image = Image.new('RGB', (100, 2300), 'white')
    chunks = renderer._slice_image(image, 2000)
    assert len(chunks) == 2
    assert chunks[0].height == 2000
    assert chunks[1].height == 300


def test_section_groups_follow_section_order():
    groups = section_groups(generate_plan(normalize_payload({})))
    assert [g.key for g in groups] == SECTIONS
    assert [g.label for g in groups] == [SECTION_LABELS[name] for name in SECTIONS]
    channel_group = groups[SECTIONS.index("channel_plan")]
    assert all(card.badge for card in channel_group.cards)


def test_render_exports_pngs(tmp_path: Path):
    renderer = PlanRenderer(str(tmp_path))
    result = renderer.render(generate_plan(normalize_payload({})), "k", target_width=860, max_height_per_image=2000)
    assert len(result.files) >= len(SECTIONS)
    assert all(Path(f).exists() for f in result.files)
    assert result.preview_urls[0].startswith("/outputs/k/00_executive_summary")


def test_render_without_plan_shows_placeholder(tmp_path: Path):
    renderer = PlanRenderer(str(tmp_path))
    result = renderer.render(None, "empty")
    assert len(result.files) == 1
    assert "placeholder" in result.files[0]
    assert result.plan is None


def test_render_tolerates_empty_sections(tmp_path: Path):
    renderer = PlanRenderer(str(tmp_path))
    result = renderer.render(GTMPlan(), "blank", max_height_per_image=50)
    assert result.files


def test_long_lines_wrap_inside_canvas(tmp_path: Path):
    renderer = PlanRenderer(str(tmp_path))
    text = "pipeline " * 60
    rows = renderer._wrap(text, 860, indent=48)
    assert len(rows) > 1
    assert all(48 + len(row) * renderer.char_width <= 860 - 30 for row in rows)
    card = PlanCard(title="Long", lines=[text])
    assert renderer._card_rows(card, 860) == 1 + len(rows)
