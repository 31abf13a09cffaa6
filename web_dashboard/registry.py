# ============================================================================
# PANEL_REGISTRY
# ============================================================================
# STATUS: Registry - Panels served by /api/dashboard
# PURPOSE: Map ?tab= names to panel classes and pick the landing panel
# LAST_REVIEWED: 18 OCT 2026
# EXPORTS: PanelRegistry
# DEPENDENCIES: web_dashboard.base_panel
# ============================================================================
"""
Panel registry.

Panels register with ``@PanelRegistry.register``. The registry reads the
class attributes ``name`` and ``order`` directly, so registration never
builds a panel (and never touches the progress listener).

Exports:
    PanelRegistry: Class-level table of registered panels
"""

import logging
from typing import Dict, List, Optional, Type

from web_dashboard.base_panel import BasePanel

logger = logging.getLogger(__name__)


class PanelRegistry:
    """Registered panel classes keyed by ``name``."""

    _panels: Dict[str, Type[BasePanel]] = {}

    @classmethod
    def register(cls, panel_class: Type[BasePanel]) -> Type[BasePanel]:
        """Class decorator; a later class with the same name replaces the earlier one."""
        name = panel_class.name
        if not name:
            raise ValueError(f"{panel_class.__name__} has no name")
        previous = cls._panels.get(name)
        if previous is not None and previous is not panel_class:
            logger.warning(f"Panel '{name}': {previous.__name__} replaced by {panel_class.__name__}")
        cls._panels[name] = panel_class
        logger.debug(f"Registered panel '{name}' ({panel_class.__name__})")
        return panel_class

    @classmethod
    def get(cls, name: str) -> Optional[Type[BasePanel]]:
        return cls._panels.get(name)

    @classmethod
    def ordered(cls) -> List[Type[BasePanel]]:
        """Panel classes by ``order``, then name."""
        return sorted(cls._panels.values(), key=lambda p: (p.order, p.name))

    @classmethod
    def default(cls) -> Optional[Type[BasePanel]]:
        """The landing panel: lowest ``order``."""
        panels = cls.ordered()
        return panels[0] if panels else None

    @classmethod
    def resolve(cls, name: Optional[str]) -> Optional[Type[BasePanel]]:
        """Panel for ``name``, or the landing panel when the name is unknown."""
        return cls._panels.get(name or "") or cls.default()
