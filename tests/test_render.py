from pathlib import Path

from PIL import Image

from aspectfit.controller import CalculatorView
from aspectfit.display.render import PreviewImageRenderer, TemplateRenderer


def test_template_renderer_generates_html(widescreen_view: CalculatorView) -> None:
    html = TemplateRenderer().render_calculator(widescreen_view, title="Widescreen")
    assert "<html" in html.lower()
    assert "Widescreen" in html
    assert "1,089,536" in html
    assert "1.778 (16:9)" in html
    assert "height: 125px" in html
    assert 'min="0.339286"' in html
    assert "disabled" not in html


def test_template_renderer_disables_slider(invalid_view: CalculatorView) -> None:
    html = TemplateRenderer().render_calculator(invalid_view)
    assert "disabled" in html
    assert "width: 0px" in html


def test_png_renderer_draws_preview(tmp_path: Path, widescreen_view: CalculatorView) -> None:
    renderer = PreviewImageRenderer(margin=10)
    output_path = tmp_path / "out" / "preview.png"
    renderer.render_to_image(widescreen_view, output_path)

    with Image.open(output_path) as image:
        assert image.size == (240, 240)
        assert image.getpixel((120, 120)) == PreviewImageRenderer.FILL
        # 125 px tall box leaves blank rows above and below
        assert image.getpixel((120, 20)) == PreviewImageRenderer.BACKGROUND


def test_png_renderer_empty_preview(tmp_path: Path, invalid_view: CalculatorView) -> None:
    output_path = tmp_path / "preview.png"
    PreviewImageRenderer().render_to_image(invalid_view, output_path)

    with Image.open(output_path) as image:
        assert image.getpixel((120, 120)) == PreviewImageRenderer.BACKGROUND
