"""
Stage Model - Read-only view of a scheduler stage.

The scheduler owns stage identity and timestamps. The listener stores
whatever Stage it was last handed for an id, so a stage that gains a
completion time arrives as a new (updated) instance.

Timestamps are epoch milliseconds.

Exports:
    Stage: Immutable stage description
"""

from typing import Optional
from pydantic import BaseModel, ConfigDict, Field

from .dataset import DatasetRef


class Stage(BaseModel):
    """
    One stage of a job, divided into num_partitions tasks.

    Example:
        Stage(
            stage_id=3,
            name="reduceByKey at wordcount.py:12",
            num_partitions=8,
            dataset=DatasetRef(dataset_id=5),
            submission_time=1760796187000,
        )
    """

    model_config = ConfigDict(frozen=True)

    stage_id: int = Field(..., ge=0, description="Stage id, stable for the stage's lifetime")
    name: str = Field(..., description="Display name (call site that created the stage)")
    num_partitions: int = Field(..., ge=0, description="Partition count; 100% of the stage's work")
    dataset: DatasetRef = Field(..., description="Dataset produced by this stage")
    submission_time: Optional[int] = Field(
        default=None, description="Submission time (ms), None until submitted"
    )
    completion_time: Optional[int] = Field(
        default=None, description="Completion time (ms), None while running"
    )

    def with_submission_time(self, millis: int) -> "Stage":
        return self.model_copy(update={"submission_time": millis})

    def with_completion_time(self, millis: int) -> "Stage":
        return self.model_copy(update={"completion_time": millis})
