"""
Azure Functions entry point for the stage progress dashboard.

The Function App hosts a read-only HTML view over the process-wide
JobProgressListener. Scheduler integrations feed the listener through its
on_* event handlers; this module only exposes the rendered view.

Exports:
    app: Azure Function App instance

Dependencies:
    azure.functions: Azure Functions SDK
    web_dashboard: Panel dispatch and page chrome
    core.progress_listener: Live metrics store

Endpoints:
    GET /api/dashboard - Stage dashboard (full page, tab switch, fragments)
    GET /api/livez     - Liveness probe, no dependencies checked
"""

import json
import uuid
from datetime import datetime, timezone

import azure.functions as func

from config import __version__, get_config
from util_logger import ComponentType, LoggerFactory, log_exceptions
from web_dashboard import dashboard_handler

logger = LoggerFactory.create_logger(ComponentType.TRIGGER, "function_app")

# Initialize function app with HTTP auth level
app = func.FunctionApp(http_auth_level=func.AuthLevel.ANONYMOUS)

logger.info(
    f"Stage dashboard v{__version__} starting",
    extra={'custom_dimensions': {'environment': get_config().environment}}
)


@app.route(route="dashboard", methods=["GET"])
@log_exceptions(ComponentType.TRIGGER, "dashboard")
def dashboard(req: func.HttpRequest) -> func.HttpResponse:
    """Stage dashboard: full page, HTMX tab switch or table refresh fragment."""
    request_id = req.headers.get("x-ms-client-request-id") or str(uuid.uuid4())
    request_logger = LoggerFactory.create_with_context(
        ComponentType.TRIGGER, "dashboard", request_id=request_id
    )
    request_logger.debug(
        "Dashboard request",
        extra={'custom_dimensions': {
            'tab': req.params.get("tab", ""),
            'fragment': req.params.get("fragment", ""),
        }}
    )
    return dashboard_handler(req)


@app.route(route="livez", methods=["GET"], auth_level=func.AuthLevel.ANONYMOUS)
def livez(req: func.HttpRequest) -> func.HttpResponse:
    """Liveness probe - is the app alive? No dependencies checked."""
    body = {
        "status": "alive",
        "version": __version__,
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }
    return func.HttpResponse(
        json.dumps(body),
        mimetype="application/json",
        status_code=200,
    )
