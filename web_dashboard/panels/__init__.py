# ============================================================================
# PANELS_PACKAGE_INIT
# ============================================================================
# STATUS: Package init - Registers the dashboard panels
# PURPOSE: Importing this package registers every panel with PanelRegistry
# LAST_REVIEWED: 18 OCT 2026
# EXPORTS: StagesPanel
# DEPENDENCIES: web_dashboard.registry
# ============================================================================
"""
Dashboard panels.

Each panel module applies ``@PanelRegistry.register`` at import time; add
new panel modules to the import list below.

Exports:
    StagesPanel: Stage progress panel (tab "stages")
"""

from web_dashboard.panels.stages import StagesPanel

__all__ = ["StagesPanel"]
