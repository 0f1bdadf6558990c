"""HTML and PNG rendering of calculator results."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Final, cast

from jinja2 import Environment, Template, select_autoescape
from PIL import Image, ImageDraw

from aspectfit.controller import CalculatorView
from aspectfit.settings.user import UserSettings

logger: Final = logging.getLogger(__name__)


class TemplateRenderer:
    """Renders the calculator page with Jinja2.

    The page mirrors the interactive calculator: base inputs, the ratio
    control with its derived bounds, the fitted resolution and a preview
    box sized by ``map_to_preview``.
    """

    CALCULATOR_TEMPLATE = """<!DOCTYPE html>
    <html>
    <head>
        <meta charset="UTF-8">
        <title>{{ title }}</title>
        <style>
            body { font-family: sans-serif; padding: 24px; }
            dl { display: grid; grid-template-columns: max-content auto; gap: 4px 16px; }
            .preview-frame {
                width: {{ box_size }}px;
                height: {{ box_size }}px;
                display: flex;
                align-items: center;
                justify-content: center;
                border: 1px dashed #999;
            }
            .preview-box {
                width: {{ fields.preview_width }};
                height: {{ fields.preview_height }};
                background: #4a7bd0;
            }
        </style>
    </head>
    <body>
        <h1>{{ title }}</h1>
        <dl>
            <dt>Base</dt><dd>{{ fields.base_width }} &times; {{ fields.base_height }}</dd>
            <dt>Pixels</dt><dd id="pixelCount">{{ fields.base_pixels }}</dd>
            <dt>Base ratio</dt><dd id="baseRatio">{{ fields.base_ratio }}</dd>
        </dl>
        <input id="ratioSlider" type="range"
               min="{{ fields.range_min }}" max="{{ fields.range_max }}"
               step="{{ fields.range_step }}" value="{{ ratio_value }}"
               {% if not enabled %}disabled{% endif %}>
        <dl>
            <dt>Ratio</dt><dd id="ratioValue">{{ fields.ratio }}</dd>
            <dt>Width</dt><dd id="newWidth">{{ fields.new_width }}</dd>
            <dt>Height</dt><dd id="newHeight">{{ fields.new_height }}</dd>
            <dt>Pixels</dt><dd id="newPixels">{{ fields.new_pixels }}</dd>
        </dl>
        <div class="preview-frame"><div class="preview-box" id="previewBox"></div></div>
    </body>
    </html>
    """

    def __init__(self, user_settings: UserSettings | None = None) -> None:
        """Initialize the template renderer.

        Args:
            user_settings: Calculator settings (default: built-in defaults)
        """
        self.user_settings = user_settings or UserSettings()
        self.env = Environment(autoescape=select_autoescape(["html"]))
        self.calculator_template: Template = self.env.from_string(self.CALCULATOR_TEMPLATE)

    def build_context(self, view: CalculatorView, title: str) -> dict[str, Any]:
        """Template context for one calculator view."""
        return {
            "title": title,
            "fields": view.display_fields(),
            "enabled": view.ratio_range.enabled,
            "ratio_value": f"{view.ratio:.6f}",
            "box_size": self.user_settings.preview_size,
        }

    def render_calculator(self, view: CalculatorView, title: str = "Alternate resolution") -> str:
        """Render the calculator page.

        Returns:
            Rendered HTML
        """
        return cast(str, self.calculator_template.render(**self.build_context(view, title)))


class PreviewImageRenderer:
    """Draws the preview box onto a PNG canvas with Pillow.

    The canvas is the preview box size plus a margin; the preview is
    centred and outlined so extreme ratios remain visible.
    """

    BACKGROUND: Final = (255, 255, 255)
    FILL: Final = (74, 123, 208)
    OUTLINE: Final = (153, 153, 153)

    def __init__(self, user_settings: UserSettings | None = None, margin: int = 10) -> None:
        self.user_settings = user_settings or UserSettings()
        self.margin = margin

    def canvas_size(self) -> tuple[int, int]:
        side = self.user_settings.preview_size + 2 * self.margin
        return side, side

    def render_to_image(self, view: CalculatorView, output_path: Path) -> None:
        """Render the preview to a PNG.

        Args:
            view: Calculator view to draw
            output_path: Path where the image will be saved
        """
        width, height = self.canvas_size()
        image = Image.new("RGB", (width, height), self.BACKGROUND)
        draw = ImageDraw.Draw(image)
        draw.rectangle(
            (0, 0, width - 1, height - 1),
            outline=self.OUTLINE,
        )

        box = view.preview
        if box.width > 0 and box.height > 0:
            left = (width - box.width) // 2
            top = (height - box.height) // 2
            draw.rectangle(
                (left, top, left + box.width - 1, top + box.height - 1),
                fill=self.FILL,
            )
        else:
            logger.debug("Empty preview, drawing frame only")

        output_path.parent.mkdir(parents=True, exist_ok=True)
        image.save(output_path, format="PNG")
        logger.debug("Preview image written to %s", output_path)
