import pytest

from aspectfit.display.preview import map_to_preview
from aspectfit.fitting.models import PreviewBox


@pytest.mark.parametrize(
    "width, height, expected",
    [
        (1216, 896, PreviewBox(220, 162)),
        (896, 1216, PreviewBox(162, 220)),
        (1024, 1024, PreviewBox(220, 220)),
        (1376, 784, PreviewBox(220, 125)),
        (100_000, 1, PreviewBox(220, 8)),
        (1, 100_000, PreviewBox(8, 220)),
        (0, 896, PreviewBox(0, 0)),
        (1216, -1, PreviewBox(0, 0)),
    ],
)
def test_map_to_preview(width: int, height: int, expected: PreviewBox) -> None:
    assert map_to_preview(width, height, 220) == expected


def test_preview_rounds_half_up() -> None:
    assert map_to_preview(4, 1, box_size=10, min_size=1) == PreviewBox(10, 3)


@pytest.mark.parametrize("width, height", [(1, 1), (5000, 3), (3, 5000), (65535, 1)])
def test_preview_never_below_floor(width: int, height: int) -> None:
    box = map_to_preview(width, height)
    assert box.width >= 8 and box.height >= 8
    assert max(box.width, box.height) == 220
