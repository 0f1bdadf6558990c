from typing import Final

# Preview output directory and filenames
PREVIEW_DIR: Final = "preview"
PREVIEW_HTML_NAME: Final = "aspectfit-preview.html"
PREVIEW_PNG_NAME: Final = "aspectfit-preview.png"

# Denominator bound for labelling slider-picked ratios
DEFAULT_MAX_DENOMINATOR: Final = 100
