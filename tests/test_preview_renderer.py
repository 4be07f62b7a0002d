"""
Tests for HTML preview rendering.
"""

from certificate_designer.services.preview_renderer import PreviewRenderer, css_property


class TestCssProperty:
    """Tests for style key to CSS property mapping."""

    def test_recognised_keys(self):
        assert css_property("fontSize") == "font-size"
        assert css_property("textAlign") == "text-align"

    def test_passthrough_keys(self):
        assert css_property("paddingBottom") == "padding-bottom"
        assert css_property("color") == "color"


class TestRender:
    """Tests for full page rendering."""

    def test_page_size_and_elements(self, canvas):
        page = PreviewRenderer().render(canvas.serialize())
        assert "width: 595px; height: 842px" in page
        assert page.count('class="certificate-element"') == len(canvas)
        assert 'data-element-id="client-name"' in page

    def test_text_element(self, canvas):
        page = PreviewRenderer().render(canvas.serialize())
        assert "left: 20px; top: 50px; width: 492px; height: 40px" in page
        assert "font-size: 28px" in page
        assert "padding-bottom: 10px" in page
        assert "white-space: pre-wrap" in page

    def test_text_is_escaped_and_keeps_newlines(self):
        elements = [{
            "id": "note", "kind": "text", "content": "A & B\n<second line>",
            "geometry": {"x": 0, "y": 0, "width": 100, "height": 40}, "style": {},
        }]
        page = PreviewRenderer().render(elements)
        assert "A &amp; B\n&lt;second line&gt;" in page
        # unset keys fall back to the text defaults
        assert "font-weight: normal" in page

    def test_image_element(self):
        elements = [{
            "id": "logo", "kind": "image", "content": "/img/5.png",
            "geometry": {"x": 10, "y": 600, "width": 200, "height": 60}, "style": {"objectFit": "cover"},
        }]
        page = PreviewRenderer().render(elements)
        assert '<img src="/img/5.png"' in page
        assert "object-fit: cover" in page

    def test_image_default_fit(self):
        elements = [{
            "id": "logo", "kind": "image", "content": "/img/5.png",
            "geometry": {"x": 0, "y": 0, "width": 10, "height": 10}, "style": {},
        }]
        assert "object-fit: contain" in PreviewRenderer().render(elements)

    def test_render_does_not_mutate_input(self, canvas):
        elements = canvas.serialize()
        PreviewRenderer().render(elements)
        assert elements == canvas.serialize()
