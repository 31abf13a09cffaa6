"""
Core Data Models Package.

Contains pure data structures without business logic.
All business logic is in the core.logic package.

Exports:
    Stage: Scheduler stage (read-only view)
    DatasetRef: Dataset produced by a stage
    TaskInfo, TaskMetrics: Task attempt info and metrics
    StageStatus, TaskEndReason, StorageLevel: Enums
"""

# Enums
from .enums import (
    StageStatus,
    TaskEndReason,
    StorageLevel
)

# Dataset models
from .dataset import DatasetRef

# Stage models
from .stage import Stage

# Task models
from .task import (
    TaskInfo,
    TaskMetrics
)

__all__ = [
    'StageStatus',
    'TaskEndReason',
    'StorageLevel',
    'DatasetRef',
    'Stage',
    'TaskInfo',
    'TaskMetrics',
]
