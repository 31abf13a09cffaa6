# ============================================================================
# LISTENER CONFIGURATION
# ============================================================================
# STATUS: Configuration - Live progress listener settings
# PURPOSE: Bound the memory held by finished stages
# LAST_REVIEWED: 18 OCT 2026
# ============================================================================
"""
Job Progress Listener Configuration.

The listener keeps every completed and failed stage (plus its counters) so
the dashboard can list them. On long-running applications that list grows
without bound, so it is capped.

Environment Variables:
----------------------
LISTENER_RETAINED_STAGES: Cap for each of the completed/failed lists (default: 1000)
LISTENER_DEBUG_MODE: Log every task/stage event at DEBUG (default: false)
"""

import os
from pydantic import BaseModel, Field

from exceptions import ConfigurationError
from .defaults import ListenerDefaults


class ListenerConfig(BaseModel):
    """
    Progress listener configuration.

    Configuration Fields:
    ---------------------
    retained_stages: Max entries kept in the completed and failed lists
        - When exceeded, the oldest tenth is dropped in one go
        - Default: 1000
        - Range: 10-100000

    debug_mode: Log every listener event
        - Default: False
    """

    retained_stages: int = Field(
        default=ListenerDefaults.RETAINED_STAGES,
        ge=10,
        le=100000,
        description=(
            "Maximum number of completed (and, separately, failed) stages "
            "kept for display. Default: 1000."
        )
    )

    debug_mode: bool = Field(
        default=ListenerDefaults.DEBUG_MODE,
        description="Log every stage and task event at DEBUG level."
    )

    @classmethod
    def from_environment(cls) -> "ListenerConfig":
        """
        Load listener configuration from environment variables.

        Returns:
            ListenerConfig: Configured listener settings

        Raises:
            ConfigurationError: If LISTENER_RETAINED_STAGES is not an integer
        """
        def parse_bool(value: str) -> bool:
            """Parse boolean from environment variable."""
            return value.lower() in ("true", "1", "yes")

        raw_retained = os.environ.get(
            "LISTENER_RETAINED_STAGES", str(ListenerDefaults.RETAINED_STAGES)
        )
        try:
            retained = int(raw_retained)
        except ValueError as e:
            raise ConfigurationError(
                f"LISTENER_RETAINED_STAGES must be an integer, got {raw_retained!r}"
            ) from e

        return cls(
            retained_stages=retained,
            debug_mode=parse_bool(
                os.environ.get("LISTENER_DEBUG_MODE", str(ListenerDefaults.DEBUG_MODE))
            ),
        )

    @property
    def trim_count(self) -> int:
        """Number of oldest stages dropped when a list exceeds the cap."""
        return max(1, self.retained_stages // 10)

    def debug_dict(self) -> dict:
        """
        Return debug-friendly configuration dictionary.

        Returns:
            dict: Configuration with all fields visible
        """
        return {
            "retained_stages": self.retained_stages,
            "debug_mode": self.debug_mode,
        }


__all__ = ["ListenerConfig"]
