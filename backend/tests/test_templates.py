"""
Tests for the template catalogue, colour parsing and layout rendering.
"""

import pytest

from protolab.core import templates
from protolab.core.document import BLACK, RGB
from protolab.core.exceptions import DocumentGenerationError, TemplateNotFoundError
from protolab.core.templates import (
    LAYOUT_RENDERERS,
    LayoutKind,
    Palette,
    apply_template,
    get_template_by_id,
    get_templates_by_tier,
    parse_hex_color,
    render_template_document,
    select_layout,
)
from protolab.schemas.template import TemplateCategory, TemplateDocumentData, TemplateTier


class TestCatalogue:
    """Template lookup by tier and id."""

    def test_tier_counts(self):
        assert len(get_templates_by_tier(TemplateTier.free)) == 8
        assert len(get_templates_by_tier(TemplateTier.premium)) == 13

    def test_free_tier_only_free(self):
        assert all(t.tier == TemplateTier.free for t in get_templates_by_tier(TemplateTier.free))

    def test_ids_unique(self):
        ids = [t.id for t in templates.get_all_templates()]
        assert len(ids) == len(set(ids))

    def test_unknown_id(self):
        with pytest.raises(TemplateNotFoundError) as exc_info:
            get_template_by_id("does_not_exist")

        assert exc_info.value.template_id == "does_not_exist"

    def test_premium_hidden_by_default(self):
        with pytest.raises(TemplateNotFoundError):
            get_template_by_id("silicon_valley")

    def test_premium_found_when_included(self):
        assert get_template_by_id("silicon_valley", include_premium=True).name == "Silicon Valley Pro"

    def test_pitch_deck_templates(self):
        deck_templates = {
            t.id: LayoutKind.resolve(t.layout)
            for t in templates.get_all_templates()
            if t.category == TemplateCategory.pitch_deck
        }

        assert deck_templates == {
            "african_enterprise": LayoutKind.cultural_modern,
            "agritech_green": LayoutKind.two_column,
            "fintech_blue": LayoutKind.modern_grid,
        }


class TestParseHexColor:
    """Hex parsing with a black default."""

    def test_valid_with_hash(self):
        parsed = parse_hex_color("#2563eb")

        assert parsed.color == RGB(37 / 255, 99 / 255, 235 / 255)
        assert parsed.defaulted is False

    def test_valid_without_hash(self):
        assert parse_hex_color("FFFFFF").color == RGB(1.0, 1.0, 1.0)

    def test_real_black_is_not_defaulted(self):
        parsed = parse_hex_color("#000000")

        assert parsed.color == BLACK
        assert parsed.defaulted is False

    @pytest.mark.parametrize(
        "value",
        ["#gold", "", "#12345", "#1234567", "rgb(0,0,0)", "#ggg000", " #2563eb ", "#2563eb\n"],
    )
    def test_malformed_defaults_to_black(self, value):
        parsed = parse_hex_color(value)

        assert parsed.color == BLACK
        assert parsed.defaulted is True

    def test_channels_in_unit_range(self):
        for template in templates.get_all_templates():
            palette = Palette.from_colors(template.colors)
            for colour in (palette.primary, palette.secondary, palette.accent):
                assert all(0.0 <= channel <= 1.0 for channel in colour.as_tuple())


class TestSelectLayout:
    """Palette and layout resolution."""

    def test_modern_minimal(self):
        palette, layout = select_layout("modern_minimal")

        assert palette.primary == RGB(37 / 255, 99 / 255, 235 / 255)
        assert layout is LayoutKind.single_column

    def test_known_layouts(self):
        assert select_layout("tech_startup")[1] is LayoutKind.two_column
        assert select_layout("creative_pro")[1] is LayoutKind.modern_grid
        assert select_layout("african_heritage")[1] is LayoutKind.cultural_modern

    def test_unknown_layout_falls_back(self):
        assert select_layout("executive_classic")[1] is LayoutKind.single_column
        assert LayoutKind.resolve("traditional") is LayoutKind.single_column

    def test_malformed_accent(self):
        palette, _layout = select_layout("investment_banker", include_premium=True)

        assert palette.accent == BLACK
        assert palette.primary == RGB(0x1F / 255, 0x29 / 255, 0x37 / 255)

    def test_unknown_id(self):
        with pytest.raises(TemplateNotFoundError):
            select_layout("nope")

    def test_every_layout_has_renderer(self):
        assert set(LAYOUT_RENDERERS) == set(LayoutKind)


class TestRenderTemplateDocument:
    """Layouts draw the document data onto one page."""

    @pytest.mark.parametrize(
        "template_id",
        ["modern_minimal", "tech_startup", "creative_pro", "executive_classic", "african_heritage"],
    )
    def test_free_templates_render(self, template_id, resume_data):
        document = render_template_document(template_id, resume_data)

        assert len(document.pages) == 1
        texts = document.pages[0].texts
        assert "Amina Otieno" in texts
        assert "EXPERIENCE" in texts
        assert "PROFILE" in texts

    def test_minimal_data(self):
        document = render_template_document("modern_minimal", TemplateDocumentData(name="Solo"))

        assert document.pages[0].texts == ["Solo"]

    def test_apply_returns_pdf(self, resume_data):
        pdf = apply_template("tech_startup", resume_data)

        assert pdf.startswith(b"%PDF-")

    def test_apply_premium(self, resume_data):
        pdf = apply_template("investment_banker", resume_data, include_premium=True)

        assert pdf.startswith(b"%PDF-")

    def test_apply_unknown(self, resume_data):
        with pytest.raises(TemplateNotFoundError):
            apply_template("nope", resume_data)

    def test_serialize_failure_is_wrapped(self, resume_data, monkeypatch):
        def broken(document):
            raise OSError("disk full")

        monkeypatch.setattr(templates, "serialize_document", broken)

        with pytest.raises(DocumentGenerationError) as exc_info:
            apply_template("modern_minimal", resume_data)

        assert exc_info.value.stage == "serialize"
        assert isinstance(exc_info.value.__cause__, OSError)
