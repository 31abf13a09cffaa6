"""
Pure Enumeration Types for the Stage Model.

No business logic - pure type definitions only.

Exports:
    StageStatus: Which stage table a stage belongs to
    TaskEndReason: How a task attempt ended
    StorageLevel: Persistence level of a produced dataset
"""

from enum import Enum


class StageStatus(Enum):
    """
    Lifecycle bucket of a stage as seen by the progress listener.

    State transitions:
    - ACTIVE -> COMPLETED (all partitions computed)
    - ACTIVE -> FAILED (job aborted at this stage)
    """

    ACTIVE = "active"
    COMPLETED = "completed"
    FAILED = "failed"


class TaskEndReason(Enum):
    """
    Outcome of a single task attempt.

    Only SUCCESS counts toward a stage's completed tasks. Every other
    reason counts as a failed attempt.
    """

    SUCCESS = "success"
    EXCEPTION_FAILURE = "exception_failure"
    FETCH_FAILED = "fetch_failed"
    TASK_RESULT_LOST = "task_result_lost"
    KILLED = "killed"

    @property
    def is_failure(self) -> bool:
        return self is not TaskEndReason.SUCCESS


class StorageLevel(str, Enum):
    """
    Persistence level of a stage's output dataset.

    NONE means the dataset is not cached and the dashboard shows no
    stored-dataset link for it.
    """

    NONE = "NONE"
    MEMORY_ONLY = "MEMORY_ONLY"
    MEMORY_ONLY_SER = "MEMORY_ONLY_SER"
    MEMORY_AND_DISK = "MEMORY_AND_DISK"
    MEMORY_AND_DISK_SER = "MEMORY_AND_DISK_SER"
    DISK_ONLY = "DISK_ONLY"
