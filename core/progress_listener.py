# ============================================================================
# JOB PROGRESS LISTENER
# ============================================================================
# STATUS: Core - Live metrics store fed by scheduler events
# PURPOSE: Accumulate per-stage task counts, CPU time and shuffle bytes
# LAST_REVIEWED: 18 OCT 2026
# EXPORTS: JobProgressListener, get_listener, reset_listener
# DEPENDENCIES: threading, config, util_logger
# ============================================================================
"""
Job Progress Listener.

Receives stage and task lifecycle events from the scheduler and keeps the
running aggregates the stage dashboard displays.

Concurrency:
    Scheduler threads call the on_* handlers while HTTP workers read.
    Every mutation and every read happens under one lock, and every read
    returns a copy, so readers can iterate freely. Each accessor is
    consistent on its own; two accessors called back to back may observe
    different moments.

Ordering:
    active_stages()     -> submission order
    completed_stages()  -> most recent first
    failed_stages()     -> most recent first

Exports:
    JobProgressListener: Event-driven metrics store
    get_listener: Process-wide singleton
    reset_listener: Replace the singleton (tests, restarts)
"""

import threading
from collections import deque
from typing import Deque, Dict, List, Optional

from config import ListenerConfig, get_config
from exceptions import ContractViolationError
from util_logger import ComponentType, LoggerFactory, log_exceptions
from .models.enums import StageStatus, TaskEndReason
from .models.stage import Stage
from .models.task import TaskInfo, TaskMetrics

logger = LoggerFactory.create_logger(ComponentType.LISTENER, "JobProgressListener")


def _require(value, expected: type, argument: str) -> None:
    if not isinstance(value, expected):
        raise ContractViolationError(
            f"{argument} must be {expected.__name__}, got {type(value).__name__}"
        )


class JobProgressListener:
    """
    Event-driven store of stage progress.

    Example:
        listener = JobProgressListener()
        listener.on_stage_submitted(stage)
        listener.on_task_start(task)
        listener.on_task_end(task.with_finish_time(now), TaskEndReason.SUCCESS, metrics)
    """

    def __init__(self, config: Optional[ListenerConfig] = None):
        self._config = config or get_config().listener
        self._lock = threading.Lock()

        self._active_stages: Dict[int, Stage] = {}
        # Newest on the left
        self._completed_stages: Deque[Stage] = deque()
        self._failed_stages: Deque[Stage] = deque()

        self._tasks_active: Dict[int, Dict[int, TaskInfo]] = {}
        self._tasks_complete: Dict[int, int] = {}
        self._tasks_failed: Dict[int, int] = {}
        self._stage_time: Dict[int, int] = {}
        self._shuffle_read: Dict[int, int] = {}
        self._shuffle_write: Dict[int, int] = {}

        self._total_time = 0
        self._total_shuffle_read = 0
        self._total_shuffle_write = 0

    # -----------------------------------------------------------------------
    # Stage events
    # -----------------------------------------------------------------------

    @log_exceptions(logger=logger)
    def on_stage_submitted(self, stage: Stage) -> None:
        _require(stage, Stage, "stage")
        with self._lock:
            self._active_stages[stage.stage_id] = stage
        self._debug("Stage submitted", stage.stage_id)

    @log_exceptions(logger=logger)
    def on_stage_completed(self, stage: Stage) -> None:
        _require(stage, Stage, "stage")
        with self._lock:
            self._active_stages.pop(stage.stage_id, None)
            self._completed_stages.appendleft(stage)
            self._trim_if_necessary(self._completed_stages)
        self._debug("Stage completed", stage.stage_id)

    @log_exceptions(logger=logger)
    def on_stage_failed(self, stage: Stage) -> None:
        """Record the stage a job failed at."""
        _require(stage, Stage, "stage")
        with self._lock:
            self._active_stages.pop(stage.stage_id, None)
            self._failed_stages.appendleft(stage)
            self._trim_if_necessary(self._failed_stages)
        logger.info(
            f"Stage {stage.stage_id} failed",
            extra={'custom_dimensions': {'stage_id': stage.stage_id}}
        )

    # -----------------------------------------------------------------------
    # Task events
    # -----------------------------------------------------------------------

    @log_exceptions(logger=logger)
    def on_task_start(self, task: TaskInfo) -> None:
        _require(task, TaskInfo, "task")
        with self._lock:
            self._tasks_active.setdefault(task.stage_id, {})[task.task_id] = task
        self._debug("Task started", task.stage_id, task.task_id)

    @log_exceptions(logger=logger)
    def on_task_end(
        self,
        task: TaskInfo,
        reason: TaskEndReason,
        metrics: Optional[TaskMetrics] = None,
    ) -> None:
        """
        Record a finished task attempt.

        Args:
            task: The attempt (matched to its start event by task_id)
            reason: SUCCESS counts as completed, anything else as failed
            metrics: Executor metrics, if the attempt reported any
        """
        _require(task, TaskInfo, "task")
        _require(reason, TaskEndReason, "reason")
        if metrics is not None:
            _require(metrics, TaskMetrics, "metrics")

        sid = task.stage_id
        with self._lock:
            self._tasks_active.setdefault(sid, {}).pop(task.task_id, None)

            if reason.is_failure:
                self._tasks_failed[sid] = self._tasks_failed.get(sid, 0) + 1
            else:
                self._tasks_complete[sid] = self._tasks_complete.get(sid, 0) + 1

            if metrics is not None:
                self._stage_time[sid] = self._stage_time.get(sid, 0) + metrics.executor_run_time
                self._total_time += metrics.executor_run_time

                self._shuffle_read[sid] = self._shuffle_read.get(sid, 0) + metrics.shuffle_read_bytes
                self._total_shuffle_read += metrics.shuffle_read_bytes

                self._shuffle_write[sid] = self._shuffle_write.get(sid, 0) + metrics.shuffle_write_bytes
                self._total_shuffle_write += metrics.shuffle_write_bytes

        self._debug(f"Task ended ({reason.value})", sid, task.task_id)

    # -----------------------------------------------------------------------
    # Read accessors (copies, safe to iterate)
    # -----------------------------------------------------------------------

    def active_stages(self) -> List[Stage]:
        with self._lock:
            return list(self._active_stages.values())

    def completed_stages(self) -> List[Stage]:
        with self._lock:
            return list(self._completed_stages)

    def failed_stages(self) -> List[Stage]:
        with self._lock:
            return list(self._failed_stages)

    def stages(self, status: StageStatus) -> List[Stage]:
        """Stages in one lifecycle bucket, in that bucket's display order."""
        _require(status, StageStatus, "status")
        if status is StageStatus.ACTIVE:
            return self.active_stages()
        if status is StageStatus.COMPLETED:
            return self.completed_stages()
        return self.failed_stages()

    def active_tasks_by_stage(self) -> Dict[int, List[TaskInfo]]:
        with self._lock:
            return {
                sid: list(tasks.values())
                for sid, tasks in self._tasks_active.items()
            }

    def completed_task_count(self, stage_id: int) -> int:
        with self._lock:
            return self._tasks_complete.get(stage_id, 0)

    def failed_task_count(self, stage_id: int) -> int:
        with self._lock:
            return self._tasks_failed.get(stage_id, 0)

    def shuffle_read_bytes(self, stage_id: int) -> int:
        with self._lock:
            return self._shuffle_read.get(stage_id, 0)

    def shuffle_write_bytes(self, stage_id: int) -> int:
        with self._lock:
            return self._shuffle_write.get(stage_id, 0)

    def stage_cpu_time(self, stage_id: int) -> int:
        """Executor run time of finished tasks of one stage (ms)."""
        with self._lock:
            return self._stage_time.get(stage_id, 0)

    def total_cpu_time(self) -> int:
        with self._lock:
            return self._total_time

    def total_shuffle_read_bytes(self) -> int:
        with self._lock:
            return self._total_shuffle_read

    def total_shuffle_write_bytes(self) -> int:
        with self._lock:
            return self._total_shuffle_write

    # -----------------------------------------------------------------------
    # Internals
    # -----------------------------------------------------------------------

    def _trim_if_necessary(self, stages: Deque[Stage]) -> None:
        """Drop the oldest tenth of a list once it exceeds the cap. Caller holds the lock."""
        if len(stages) <= self._config.retained_stages:
            return
        for _ in range(self._config.trim_count):
            old = stages.pop()
            self._forget_stage(old.stage_id)
        logger.info(
            f"Trimmed {self._config.trim_count} finished stages",
            extra={'custom_dimensions': {'retained': len(stages)}}
        )

    def _forget_stage(self, stage_id: int) -> None:
        if stage_id in self._active_stages:
            return
        self._tasks_active.pop(stage_id, None)
        self._tasks_complete.pop(stage_id, None)
        self._tasks_failed.pop(stage_id, None)
        self._stage_time.pop(stage_id, None)
        self._shuffle_read.pop(stage_id, None)
        self._shuffle_write.pop(stage_id, None)

    def _debug(self, message: str, stage_id: int, task_id: Optional[int] = None) -> None:
        if not self._config.debug_mode:
            return
        dims = {'stage_id': stage_id}
        if task_id is not None:
            dims['task_id'] = task_id
        logger.debug(message, extra={'custom_dimensions': dims})


# ============================================================================
# SINGLETON
# ============================================================================

_listener_instance: Optional[JobProgressListener] = None
_listener_lock = threading.Lock()


def get_listener() -> JobProgressListener:
    """
    Get the process-wide listener.

    Returns:
        The shared JobProgressListener, created on first use
    """
    global _listener_instance
    with _listener_lock:
        if _listener_instance is None:
            _listener_instance = JobProgressListener()
        return _listener_instance


def reset_listener(listener: Optional[JobProgressListener] = None) -> JobProgressListener:
    """
    Replace the process-wide listener.

    Args:
        listener: Instance to install, or None for a fresh one

    Returns:
        The installed listener
    """
    global _listener_instance
    with _listener_lock:
        _listener_instance = listener or JobProgressListener()
        return _listener_instance
