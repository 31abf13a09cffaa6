"""
Core Stage Progress Components.

Contains the building blocks behind the stage dashboard, separated from
the HTTP and HTML layers.

Structure:
    models/: Pure data structures (no business logic)
    logic/: Progress math and read-side summaries
    progress_listener.py: Live, event-driven metrics store
    utils.py: Shared display formatting

Exports:
    JobProgressListener: Event-driven metrics store
    get_listener: Process-wide listener singleton
"""

# Make subpackages available first (no circular dependencies)
from . import models
from . import logic

# Lazy imports: the listener module reads config at instantiation
_LAZY_IMPORTS = {
    'JobProgressListener': '.progress_listener',
    'get_listener': '.progress_listener',
    'reset_listener': '.progress_listener',
}


def __getattr__(name):
    """Lazy import listener entry points."""
    if name in _LAZY_IMPORTS:
        from importlib import import_module
        module = import_module(_LAZY_IMPORTS[name], package='core')
        return getattr(module, name)
    raise AttributeError(f"module 'core' has no attribute '{name}'")


__all__ = [
    'JobProgressListener',
    'get_listener',
    'reset_listener',
    'models',
    'logic',
]
