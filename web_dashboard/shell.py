# ============================================================================
# DASHBOARD_SHELL
# ============================================================================
# STATUS: UI chrome - Page document around the stage panel
# PURPOSE: Header, optional tab bar, status bar, page CSS and scripts
# LAST_REVIEWED: 18 OCT 2026
# EXPORTS: DashboardShell, PAGE_CSS
# DEPENDENCIES: config
# ============================================================================
"""
Dashboard shell.

Wraps rendered panel HTML in the page document. With a single registered
panel there is no tab bar; the page is just header, panel and status bar.
A tab bar (with an out-of-band copy on HTMX tab swaps) appears only when a
second panel is registered.

Exports:
    DashboardShell: Page renderer
    PAGE_CSS: Stylesheet shared by every panel
"""

import html as html_module
from typing import List, Optional, Type

from config import DashboardConfig, __version__, get_config
from web_dashboard.base_panel import BasePanel

HTMX_URL = "https://unpkg.com/htmx.org@1.9.12/dist/htmx.min.js"

PAGE_CSS = """
:root {
    --page: #F0F2F5;
    --card: #FFFFFF;
    --ink: #0D2137;
    --muted: #4A5568;
    --line: #C5CBD8;
    --track: #E5E9F0;
    --accent: #0071BC;
    --danger: #DC2626;
    --danger-bg: #FEE2E2;
}
* { box-sizing: border-box; }
body {
    margin: 0;
    font: 14px/1.5 system-ui, -apple-system, "Segoe UI", sans-serif;
    background: var(--page);
    color: var(--ink);
    display: flex;
    flex-direction: column;
    min-height: 100vh;
}
header, footer { display: flex; justify-content: space-between; align-items: center; padding: 8px 24px; }
header { background: var(--card); border-bottom: 1px solid var(--line); }
header h1 { margin: 0; font-size: 20px; }
footer { background: #1A1A2E; color: #E0E0E0; font: 12px monospace; }
.version { font: 12px monospace; color: var(--muted); }
nav.tab-bar { background: var(--card); padding: 0 24px; border-bottom: 1px solid var(--line); }
nav.tab-bar a { display: inline-block; padding: 8px 16px; color: var(--muted); cursor: pointer; }
nav.tab-bar a.active { color: var(--accent); border-bottom: 3px solid var(--accent); }
main { flex: 1; width: 100%; max-width: 1400px; margin: 0 auto; padding: 20px 24px; }
#panel-content { background: var(--card); border: 1px solid var(--line); border-radius: 6px; padding: 20px; }
#panel-content h2 { font-size: 16px; margin: 20px 0 8px; }
.stat-strip { display: flex; flex-wrap: wrap; gap: 12px; margin-bottom: 16px; }
.stat-card { border: 1px solid var(--line); border-radius: 6px; padding: 10px 18px; text-align: center; }
.stat-value { font: 700 22px monospace; }
.stat-label { font-size: 12px; color: var(--muted); }
.data-table { width: 100%; border-collapse: collapse; }
.data-table th { text-align: left; font-size: 12px; color: var(--muted); padding: 6px 10px; border-bottom: 2px solid var(--line); }
.data-table td { padding: 6px 10px; border-bottom: 1px solid var(--track); vertical-align: middle; }
table.sortable th { cursor: pointer; }
.error-block { display: flex; gap: 8px; margin: 12px 0; padding: 12px; background: var(--danger-bg); border-left: 4px solid var(--danger); }
.error-icon { font-weight: 700; color: var(--danger); }
.error-message { color: var(--danger); font-size: 12px; }
#htmx-load-error { background: var(--danger-bg); color: var(--danger); padding: 6px 24px; text-align: center; }
"""

# Click a header of a .sortable table to sort its body; click again to reverse.
# Listens on document so tables swapped in by polling stay sortable.
SORT_SCRIPT = """
<script>
document.addEventListener('click', function (event) {
    var th = event.target.closest('table.sortable th');
    if (!th) return;
    var col = 0;
    for (var prev = th.previousElementSibling; prev; prev = prev.previousElementSibling) {
        col += prev.colSpan;
    }
    var ascending = th.dataset.dir !== 'asc';
    th.dataset.dir = ascending ? 'asc' : 'desc';
    var body = th.closest('table').tBodies[0];
    var rows = Array.prototype.slice.call(body.rows);
    function key(row) {
        var cell = row.cells[col];
        return cell ? cell.textContent.trim() : '';
    }
    rows.sort(function (a, b) {
        var x = key(a), y = key(b), nx = parseFloat(x), ny = parseFloat(y);
        var order = (!isNaN(nx) && !isNaN(ny)) ? nx - ny : x.localeCompare(y);
        return ascending ? order : -order;
    });
    rows.forEach(function (row) { body.appendChild(row); });
});
</script>
"""


class DashboardShell:
    """
    Page renderer.

    ``page`` returns the whole HTML document for a plain GET; ``tab_swap``
    returns what HTMX puts into <main> when the user switches tabs.
    """

    def __init__(self, dashboard: Optional[DashboardConfig] = None):
        self._dashboard = dashboard

    @property
    def dashboard(self) -> DashboardConfig:
        return self._dashboard or get_config().dashboard

    def tab_bar(self, panels: List[Type[BasePanel]], active_tab: str) -> str:
        """<nav> with one link per panel; empty when fewer than two panels exist."""
        if len(panels) < 2:
            return ""
        links = []
        for panel in panels:
            active = ' class="active"' if panel.name == active_tab else ""
            links.append(
                f'<a hx-get="/api/dashboard?tab={html_module.escape(panel.name)}" '
                f'hx-target="main" hx-push-url="true"{active}>'
                f'{html_module.escape(panel.label)}</a>'
            )
        return f'<nav id="tab-bar" class="tab-bar">{"".join(links)}</nav>'

    def page(self, active_tab: str, panel_html: str, panels: List[Type[BasePanel]]) -> str:
        title = html_module.escape(self.dashboard.title)
        version = html_module.escape(__version__)
        refresh = int(self.dashboard.refresh_seconds)
        status = f"Refresh every {refresh}s" if refresh > 0 else "Auto-refresh off"
        return f"""<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="UTF-8">
<meta name="viewport" content="width=device-width, initial-scale=1.0">
<title>{title}</title>
<style>{PAGE_CSS}</style>
<script src="{HTMX_URL}" defer
        onerror="document.getElementById('htmx-load-error').hidden = false"></script>
</head>
<body>
<header><h1>{title}</h1><span class="version">v{version}</span></header>
<div id="htmx-load-error" hidden>HTMX failed to load. Tables will not refresh. Reload the page.</div>
{self.tab_bar(panels, active_tab)}
<main>
{panel_html}
</main>
<footer><span>{status}</span><span>v{version}</span></footer>
{SORT_SCRIPT}
</body>
</html>"""

    def tab_swap(self, active_tab: str, panel_html: str, panels: List[Type[BasePanel]]) -> str:
        """Panel HTML, preceded by an out-of-band tab bar when one is shown."""
        nav = self.tab_bar(panels, active_tab)
        if not nav:
            return panel_html
        nav = nav.replace('id="tab-bar"', 'id="tab-bar" hx-swap-oob="true"', 1)
        return f"{nav}\n{panel_html}"
