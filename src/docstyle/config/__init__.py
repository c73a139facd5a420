"""Style checker configuration package."""

from docstyle.config.loader import apply_overrides, get_config, load_config
from docstyle.config.models import CheckerConfig

__all__ = ["CheckerConfig", "apply_overrides", "get_config", "load_config"]
