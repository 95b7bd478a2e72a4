"""Avatar image composer: background, label sizing, centering and draw."""

from __future__ import annotations

from PIL import Image

from .fonts import LoadedFont
from .gradient import gradient_image
from .initials import extract_initials
from .models import RenderSettings

# Render 3 times bigger for better quality.
OVERSAMPLE = 3

PROBE_FONT_SIZE = 100.0
TEXT_MARGIN = 0.40


def font_size_that_fits(text: str, canvas_width: float, font: LoadedFont) -> float:
    """Single-shot estimate of the size at which ``text`` spans 60% of the canvas.

    The result is not re-measured, so unusual fonts or long labels can overflow.
    """
    target = canvas_width - TEXT_MARGIN * canvas_width
    probe_width = int(font.measure(text, PROBE_FONT_SIZE).width)
    if probe_width <= 0:
        return target
    return PROBE_FONT_SIZE / probe_width * target


class AvatarCompositor:
    """Composes the oversampled avatar buffer shared by square and circle outputs."""

    def __init__(self, oversample: int = OVERSAMPLE) -> None:
        self.oversample = oversample

    def label_for(self, text: str, settings: RenderSettings) -> str:
        if settings.n_initials > 0:
            return extract_initials(text, settings.n_initials)
        # Single-line only; ImageDraw would switch to multiline layout.
        return text.replace("\r\n", " ").replace("\r", " ").replace("\n", " ")

    def render(self, text: str, settings: RenderSettings) -> Image.Image:
        size = settings.size * self.oversample
        image = self._background(size, settings)

        label = self.label_for(text, settings)
        if not label:
            return image

        if settings.font_size > 0:
            font_size = settings.font_size
        else:
            font_size = font_size_that_fits(label, float(size), settings.font)

        metrics = settings.font.measure(label, font_size)
        x = size // 2 - int(metrics.width) // 2
        baseline = size // 2 + int(metrics.height) // 2

        settings.font.draw(image, (x, baseline), label, font_size, settings.text_color.rgba8())
        return image

    @staticmethod
    def _background(size: int, settings: RenderSettings) -> Image.Image:
        if len(settings.gradient) != 0:
            return gradient_image(size, size, settings.gradient)
        return Image.new("RGBA", (size, size), settings.bg_color.rgba8())
