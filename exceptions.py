# ============================================================================
# EXCEPTIONS
# ============================================================================
# STATUS: Shared - Used by listener, config and dashboard layers
# PURPOSE: Exception hierarchy separating contract violations from runtime failures
# LAST_REVIEWED: 18 OCT 2026
# EXPORTS: ContractViolationError, BusinessLogicError, PanelRenderError, ConfigurationError
# DEPENDENCIES: None (standard library only)
# ============================================================================

"""
Custom Exception Hierarchy

Distinguishes between:
1. Contract Violations (programming bugs that need fixing)
2. Business Logic Failures (expected runtime issues)
3. Configuration errors (fatal misconfiguration at startup)

Missing metrics, absent timestamps and zero-partition stages are NOT errors
anywhere in this package. They resolve to display defaults instead.
"""


class ContractViolationError(TypeError):
    """
    Raised when component contracts are violated (programming bugs).

    These indicate:
    - Wrong types passed to listener event handlers
    - Scheduler handing over something that is not a Stage or TaskInfo

    These should NEVER be caught and handled - they indicate bugs
    that need to be fixed in the caller.

    Examples:
        - on_task_start() receives a dict instead of TaskInfo
        - on_stage_completed() receives a stage id instead of a Stage
    """
    pass


class BusinessLogicError(Exception):
    """
    Base class for expected runtime failures.

    These are normal failures that occur during system operation
    and should be handled gracefully without crashing.
    """
    pass


class PanelRenderError(BusinessLogicError):
    """
    A dashboard panel could not produce its HTML.

    Examples:
        - Unknown section or fragment requested
        - Listener unavailable in this process
    """
    pass


class ConfigurationError(Exception):
    """
    System configuration error.

    These are typically fatal and indicate misconfiguration
    that prevents the system from operating.

    Examples:
        - LISTENER_RETAINED_STAGES is not an integer
        - DASHBOARD_REFRESH_SECONDS is not an integer
    """
    pass
