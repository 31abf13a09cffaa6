# ============================================================================
# WEB_DASHBOARD_MODULE
# ============================================================================
# STATUS: Route handler - Dashboard entry point and dispatch logic
# PURPOSE: Answer GET /api/dashboard with a page, a tab swap, a section or a fragment
# LAST_REVIEWED: 18 OCT 2026
# EXPORTS: dashboard_handler
# DEPENDENCIES: azure.functions, web_dashboard.shell, web_dashboard.registry
# ============================================================================
"""
Web dashboard module.

``dashboard_handler`` serves every dashboard request. Query parameters:

    tab=<panel name>      unknown or missing -> the landing panel
    section=<key>         unknown -> the panel's default section
    fragment=<name>       polled content; unknown -> error block

The dashboard is read-only: each request renders a fresh snapshot of the
progress listener. Render failures come back as an HTML error block with
status 200 so HTMX still swaps them into the page.

Exports:
    dashboard_handler: The main HTTP handler function
"""

import html as html_module
import logging
from typing import Optional

import azure.functions as func

from exceptions import PanelRenderError
from web_dashboard.registry import PanelRegistry
from web_dashboard.shell import DashboardShell

import web_dashboard.panels  # noqa: F401  (registers panels)

logger = logging.getLogger(__name__)

_shell = DashboardShell()


def _error_html(message: str) -> str:
    return (
        f'<div class="error-block">'
        f'<span class="error-icon">!</span>'
        f'<span class="error-message">{html_module.escape(message)}</span>'
        f'</div>'
    )


def _html_response(body: str, headers: Optional[dict] = None) -> func.HttpResponse:
    return func.HttpResponse(body, mimetype="text/html", status_code=200, headers=headers)


def _render_or_error(what: str, render) -> str:
    """Call ``render``; turn any failure into an error block."""
    try:
        return render()
    except PanelRenderError as e:
        return _error_html(str(e))
    except Exception as e:
        logger.exception(f"Error rendering {what}: {e}")
        return _error_html(f"Error rendering {what}: {e}")


def dashboard_handler(req: func.HttpRequest) -> func.HttpResponse:
    """
    Dispatch, first match wins:
        1. fragment= present -> fragment only (table polling)
        2. HX-Request + section= -> section body
        3. HX-Request -> tab swap
        4. otherwise -> full page

    Route:
        GET /api/dashboard
    """
    try:
        return _dispatch(req)
    except Exception as e:
        logger.exception(f"Dashboard handler error: {e}")
        return _html_response(_error_html(f"Dashboard error: {e}"))


def _dispatch(req: func.HttpRequest) -> func.HttpResponse:
    panel_class = PanelRegistry.resolve(req.params.get("tab"))
    if panel_class is None:
        return func.HttpResponse(
            "Dashboard has no registered panels.", status_code=500, mimetype="text/plain"
        )
    panel = panel_class()
    is_htmx = req.headers.get("HX-Request") == "true"
    fragment = req.params.get("fragment")
    section = req.params.get("section")

    if fragment:
        return _html_response(
            _render_or_error("fragment", lambda: panel.render_fragment(req, fragment))
        )

    if is_htmx and section:
        resolved = panel.resolve_section(section)
        return _html_response(
            _render_or_error("section", lambda: panel.render_section(req, resolved))
        )

    body = _render_or_error(f"{panel.name} panel", lambda: panel.render(req))
    panels = PanelRegistry.ordered()
    if is_htmx:
        return _html_response(_shell.tab_swap(panel.name, body, panels))

    return _html_response(
        _shell.page(panel.name, body, panels),
        headers={"Content-Security-Policy": "frame-ancestors *"},
    )


# Public API
__all__ = ["dashboard_handler"]
