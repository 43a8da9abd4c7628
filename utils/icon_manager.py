import logging
from typing import Dict, Optional, Tuple

from PyQt6.QtGui import QIcon
import qtawesome as qta

logger = logging.getLogger(__name__)

_ICON_CACHE: Dict[Tuple[str, Optional[str], Optional[str]], QIcon] = {}
"""Cache for generated :class:`QIcon` objects, cleared via ``IconManager.clear_cache``."""


class IconManager:
    """Creates qtawesome icons for the shell, cached by ``(icon_name, color, active_color)``."""

    @staticmethod
    def create_icon(
        icon_name: str,
        color: Optional[str] = None,
        active_color: Optional[str] = None,
    ) -> QIcon:
        """Create a ``QIcon`` from a qtawesome icon name (e.g. ``'fa5s.times'``).

        An empty ``QIcon`` is returned, and cached, when qtawesome does not
        know the name.
        """
        key = (icon_name, color, active_color)
        if key in _ICON_CACHE:
            return _ICON_CACHE[key]

        base_color = color if color is not None else "#DADADA"
        selected_color = active_color if active_color is not None else base_color
        try:
            qta_icon = qta.icon(
                icon_name,
                color=base_color,
                color_active=selected_color,
                color_selected=selected_color,
            )
            result = QIcon(qta_icon) if qta_icon is not None else QIcon()
        except Exception as e:
            logger.warning("Error creating icon %s: %s", icon_name, e)
            result = QIcon()

        _ICON_CACHE[key] = result
        return result

    @staticmethod
    def clear_cache():
        _ICON_CACHE.clear()
