"""
Unified Logger System.

JSON-only structured logging for the stage dashboard and its listener,
shaped for Azure Functions with Application Insights.

Design Principles:
    - Strong typing with dataclasses (stdlib only)
    - Enum safety for categories
    - Component-specific loggers
    - Clean factory pattern

Exports:
    ComponentType: Enum for component types
    LogLevel: Enum for log levels
    LogContext: Logging context dataclass
    ContextLoggerAdapter: Logger view carrying one LogContext
    ComponentConfig: Per-component logger settings
    JSONFormatter: Application Insights friendly formatter
    LoggerFactory: Factory for creating loggers
    log_exceptions: Exception logging decorator

Dependencies:
    Standard library only (logging, enum, dataclasses, json)
"""

from enum import Enum
from typing import Optional, Dict, Any, Union
from datetime import datetime, timezone
from dataclasses import dataclass
import logging
import sys
import os
import json
import traceback
from functools import wraps


# ============================================================================
# COMPONENT TYPES
# ============================================================================

class ComponentType(Enum):
    """
    Component types of the stage dashboard.

    Each layer has specific logging needs and levels.
    """
    LISTENER = "listener"  # Task/stage event accumulation
    PANEL = "panel"        # Dashboard panel rendering
    TRIGGER = "trigger"    # HTTP entry point layer
    CONFIG = "config"      # Configuration loading


# ============================================================================
# LOG LEVELS - Standard Python levels with enum safety
# ============================================================================

class LogLevel(Enum):
    """
    Standard Python log levels as enum for type safety.
    """
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"

    def to_python_level(self) -> int:
        """Convert to Python logging level constant."""
        return getattr(logging, self.value)

    @classmethod
    def from_string(cls, level: str) -> 'LogLevel':
        """Create from string, case-insensitive."""
        return cls[level.upper()]


# ============================================================================
# LOG CONTEXT - Correlation and tracking
# ============================================================================

@dataclass
class LogContext:
    """
    Context for log correlation across listener events and page renders.
    """
    # Stage tracking
    stage_id: Optional[int] = None

    # Task-level correlation
    task_id: Optional[int] = None
    executor_id: Optional[str] = None

    # Request correlation
    request_id: Optional[str] = None
    tab: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            k: v for k, v in {
                'stage_id': self.stage_id,
                'task_id': self.task_id,
                'executor_id': self.executor_id,
                'request_id': self.request_id,
                'tab': self.tab,
            }.items() if v is not None
        }


# ============================================================================
# COMPONENT CONFIGURATION - Per-component settings
# ============================================================================

@dataclass
class ComponentConfig:
    """
    Configuration for component-specific logging.
    """
    component_type: ComponentType
    log_level: LogLevel = LogLevel.INFO
    enable_debug_context: bool = False


# ============================================================================
# JSON FORMATTER - Structured logging for Azure Functions
# ============================================================================

class JSONFormatter(logging.Formatter):
    """
    JSON formatter for structured logging in Azure Functions.
    Outputs logs in a format that Application Insights can automatically parse.
    """

    def format(self, record: logging.LogRecord) -> str:
        """
        Format log record as JSON for Application Insights.

        Args:
            record: Python LogRecord to format

        Returns:
            JSON string with structured log data
        """
        log_obj = {
            'timestamp': datetime.now(timezone.utc).isoformat(),
            'level': record.levelname,
            'message': record.getMessage(),
            'logger': record.name,
            'module': record.module,
            'function': record.funcName,
            'line': record.lineno
        }

        if hasattr(record, 'custom_dimensions'):
            log_obj['customDimensions'] = record.custom_dimensions

        if record.exc_info:
            log_obj['exception'] = {
                'type': record.exc_info[0].__name__ if record.exc_info[0] else None,
                'message': str(record.exc_info[1]) if record.exc_info[1] else None,
                'traceback': self.formatException(record.exc_info)
            }

        return json.dumps(log_obj, default=str)


# ============================================================================
# CONTEXT ADAPTER - Per-request correlation without mutating shared loggers
# ============================================================================

class ContextLoggerAdapter(logging.LoggerAdapter):
    """
    Adds a LogContext to every record as custom dimensions.

    Each adapter holds its own context, so concurrent requests logging
    through the same underlying logger keep their own request ids.
    Dimensions passed at the call site win over the context.
    """

    def __init__(self, logger: logging.Logger, context: LogContext):
        super().__init__(logger, context.to_dict())
        self.context = context

    def process(self, msg, kwargs):
        extra = dict(kwargs.get('extra') or {})
        dims = dict(self.extra)
        dims.update(extra.get('custom_dimensions', {}))
        extra['custom_dimensions'] = dims
        kwargs['extra'] = extra
        return msg, kwargs


# ============================================================================
# LOGGER FACTORY - Creates component-specific loggers
# ============================================================================

class LoggerFactory:
    """
    Factory for creating component-specific loggers.

    Example:
        logger = LoggerFactory.create_logger(
            ComponentType.LISTENER,
            "JobProgressListener"
        )
        logger.debug("Task started")
    """

    _default_level = (
        LogLevel.DEBUG if os.getenv('DEBUG_LOGGING', '').lower() == 'true'
        else LogLevel.__members__.get(os.getenv('LOG_LEVEL', 'INFO').upper(), LogLevel.INFO)
    )

    DEFAULT_CONFIGS = {
        ComponentType.LISTENER: ComponentConfig(
            component_type=ComponentType.LISTENER,
            log_level=_default_level,
            enable_debug_context=True if _default_level == LogLevel.DEBUG else False
        ),
        ComponentType.PANEL: ComponentConfig(
            component_type=ComponentType.PANEL,
            log_level=_default_level
        ),
        ComponentType.TRIGGER: ComponentConfig(
            component_type=ComponentType.TRIGGER,
            log_level=_default_level
        ),
        ComponentType.CONFIG: ComponentConfig(
            component_type=ComponentType.CONFIG,
            log_level=_default_level
        ),
    }

    @classmethod
    def create_logger(
        cls,
        component_type: ComponentType,
        name: str,
        context: Optional[LogContext] = None,
        config: Optional[ComponentConfig] = None
    ) -> Union[logging.Logger, ContextLoggerAdapter]:
        """
        Create a logger for a specific component.

        Args:
            component_type: Type of component
            name: Component name (e.g., "JobProgressListener")
            context: Optional log context for correlation
            config: Optional custom configuration

        Returns:
            Configured Python logger, or a ContextLoggerAdapter over it when
            a context is given
        """
        if config is None:
            config = cls.DEFAULT_CONFIGS.get(
                component_type,
                ComponentConfig(component_type=component_type)
            )

        logger_name = f"{component_type.value}.{name}"
        logger = logging.getLogger(logger_name)

        if isinstance(config.log_level, str):
            log_level = LogLevel.from_string(config.log_level).to_python_level()
        else:
            log_level = config.log_level.to_python_level()
        logger.setLevel(log_level)

        # One JSON handler per logger, even when create_logger is called repeatedly
        has_json_handler = any(
            isinstance(h.formatter, JSONFormatter) for h in logger.handlers
        )
        if not has_json_handler:
            handler = logging.StreamHandler(sys.stdout)
            handler.setLevel(log_level)
            handler.setFormatter(JSONFormatter())
            logger.addHandler(handler)

        # Propagate to Azure's root logger for Application Insights
        logger.propagate = True

        if not hasattr(logger, '_context_wrapped'):
            original_log = logger._log

            def log_with_context(level, msg, args, exc_info=None, extra=None, stack_info=False, stacklevel=1):
                """Wrapper to inject context as custom dimensions."""
                if extra is None:
                    extra = {}

                custom_dims = {
                    'component_type': component_type.value,
                    'component_name': name
                }

                if 'custom_dimensions' in extra:
                    custom_dims.update(extra['custom_dimensions'])

                extra['custom_dimensions'] = custom_dims

                # +1 for this wrapper frame
                original_log(level, msg, args, exc_info=exc_info, extra=extra,
                             stack_info=stack_info, stacklevel=stacklevel + 1)

            logger._log = log_with_context
            logger._context_wrapped = True

        # Context rides on a per-call adapter; the shared logger stays context-free
        if context:
            return ContextLoggerAdapter(logger, context)
        return logger

    @classmethod
    def create_with_context(
        cls,
        component_type: ComponentType,
        name: str,
        stage_id: Optional[int] = None,
        task_id: Optional[int] = None,
        request_id: Optional[str] = None
    ) -> Union[logging.Logger, ContextLoggerAdapter]:
        """
        Create logger with stage/task/request context.

        Args:
            component_type: Type of component
            name: Component name
            stage_id: Optional stage id
            task_id: Optional task id
            request_id: Optional HTTP request id

        Returns:
            ContextLoggerAdapter when any id is given, else the plain logger
        """
        has_context = any(v is not None for v in (stage_id, task_id, request_id))
        context = LogContext(
            stage_id=stage_id,
            task_id=task_id,
            request_id=request_id
        ) if has_context else None

        return cls.create_logger(
            component_type=component_type,
            name=name,
            context=context
        )


# ============================================================================
# EXCEPTION DECORATOR - Automatic exception logging with context
# ============================================================================

def log_exceptions(component_type: Optional[ComponentType] = None,
                   component_name: Optional[str] = None,
                   logger: Optional[logging.Logger] = None):
    """
    Decorator to automatically log exceptions with full context.

    Can be used in three ways:
    1. With existing logger: @log_exceptions(logger=my_logger)
    2. With component info: @log_exceptions(ComponentType.TRIGGER, "Dashboard")
    3. Simple: @log_exceptions() - uses function module and name

    The exception is always re-raised.
    """
    def decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            if logger:
                log = logger
            elif component_type and component_name:
                log = LoggerFactory.create_logger(component_type, component_name)
            else:
                log = LoggerFactory.create_logger(
                    ComponentType.PANEL,
                    func.__module__ or "unknown"
                )

            try:
                return func(*args, **kwargs)
            except Exception as e:
                log.error(
                    f"Exception in {func.__name__}",
                    exc_info=True,
                    extra={
                        'custom_dimensions': {
                            'function_name': func.__name__,
                            'function_module': func.__module__,
                            'exception_type': type(e).__name__,
                            'exception_message': str(e),
                            'traceback': traceback.format_exc()
                        }
                    }
                )
                raise
        return wrapper
    return decorator
