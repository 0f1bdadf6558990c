"""Preview sizing and rendering."""

from aspectfit.display.preview import map_to_preview

__all__ = ["map_to_preview"]
