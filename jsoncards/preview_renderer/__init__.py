"""Preview renderer engine."""

from jsoncards.preview_renderer.friendly_names import FRIENDLY_NAMES, friendly_name
from jsoncards.preview_renderer.renderer import format_primitive, is_expanded, render_preview

__all__ = ["FRIENDLY_NAMES", "friendly_name", "format_primitive", "is_expanded", "render_preview"]
