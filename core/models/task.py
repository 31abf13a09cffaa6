"""
Task Models - Attempt info and per-attempt metrics.

Exports:
    TaskInfo: One task attempt with launch/finish times
    TaskMetrics: Executor-reported metrics for a finished attempt
"""

from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


class TaskInfo(BaseModel):
    """
    One attempt at computing one partition of a stage.

    The scheduler hands a TaskInfo to the listener when the attempt starts
    (finish_time None) and again, with finish_time set, when it ends.
    Attempts are matched by task_id.
    """

    model_config = ConfigDict(frozen=True)

    task_id: int = Field(..., ge=0, description="Attempt id, unique per application")
    stage_id: int = Field(..., ge=0, description="Owning stage id")
    launch_time: int = Field(..., description="Launch time (ms)")
    finish_time: Optional[int] = Field(default=None, description="Finish time (ms)")
    executor_id: Optional[str] = Field(default=None, description="Executor running the attempt")

    @property
    def finished(self) -> bool:
        return self.finish_time is not None

    def time_running(self, now: int) -> int:
        """
        Milliseconds this attempt has been (or was) running.

        Args:
            now: Current time (ms), used only while the attempt is running

        Returns:
            finish - launch when finished, otherwise now - launch; never negative
        """
        end = self.finish_time if self.finish_time is not None else now
        return max(0, end - self.launch_time)

    def with_finish_time(self, millis: int) -> "TaskInfo":
        return self.model_copy(update={"finish_time": millis})


class TaskMetrics(BaseModel):
    """
    Metrics an executor reports for a finished attempt.

    shuffle_read_bytes counts bytes fetched from remote executors only.
    """

    model_config = ConfigDict(frozen=True)

    executor_run_time: int = Field(default=0, ge=0, description="CPU time spent in the task (ms)")
    shuffle_read_bytes: int = Field(default=0, ge=0, description="Remote shuffle bytes read")
    shuffle_write_bytes: int = Field(default=0, ge=0, description="Shuffle bytes written")
