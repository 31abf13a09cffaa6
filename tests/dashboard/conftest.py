"""
Dashboard test fixtures — requests, a populated listener, a panel.
"""

import azure.functions as func
import pytest

from core.models import DatasetRef, Stage, TaskEndReason, TaskInfo, TaskMetrics
from core.progress_listener import reset_listener
from web_dashboard.panels.stages import StagesPanel
from tests.factories.clock import BASE_TIME


@pytest.fixture
def make_request():
    """Factory fixture: GET /api/dashboard with params and optional HX-Request."""
    def _make(params: dict = None, htmx: bool = False) -> func.HttpRequest:
        headers = {"HX-Request": "true"} if htmx else {}
        return func.HttpRequest(
            method="GET",
            url="/api/dashboard",
            headers=headers,
            params=params or {},
            body=b"",
        )
    return _make


@pytest.fixture
def populated_listener(listener):
    """
    One running and one finished stage.

    Stage 1 (active): 4 partitions, 2 tasks running, 1 completed, 2048
    shuffle bytes written. Stage 0 (completed): 4 of 4 tasks done, ran
    for 90 seconds, output cached in memory.
    """
    finished = Stage(
        stage_id=0,
        name="textFile at load.py:3",
        num_partitions=4,
        dataset=DatasetRef(dataset_id=0, name="lines", storage_level="MEMORY_ONLY"),
        submission_time=BASE_TIME - 120_000,
    )
    listener.on_stage_submitted(finished)
    for task_id in range(4):
        task = TaskInfo(task_id=task_id, stage_id=0, launch_time=BASE_TIME - 110_000)
        listener.on_task_start(task)
        listener.on_task_end(
            task.with_finish_time(BASE_TIME - 40_000),
            TaskEndReason.SUCCESS,
            TaskMetrics(executor_run_time=250),
        )
    listener.on_stage_completed(finished.with_completion_time(BASE_TIME - 30_000))

    running = Stage(
        stage_id=1,
        name="reduceByKey at count.py:12",
        num_partitions=4,
        dataset=DatasetRef(dataset_id=1),
        submission_time=BASE_TIME - 20_000,
    )
    listener.on_stage_submitted(running)
    done = TaskInfo(task_id=10, stage_id=1, launch_time=BASE_TIME - 19_000)
    listener.on_task_start(done)
    listener.on_task_end(
        done.with_finish_time(BASE_TIME - 10_000),
        TaskEndReason.SUCCESS,
        TaskMetrics(executor_run_time=9000, shuffle_write_bytes=2048),
    )
    listener.on_task_start(TaskInfo(task_id=11, stage_id=1, launch_time=BASE_TIME - 5_000))
    listener.on_task_start(TaskInfo(task_id=12, stage_id=1, launch_time=BASE_TIME - 1_000))
    return listener


@pytest.fixture
def panel(populated_listener, dashboard_config, clock):
    """StagesPanel over the populated listener with a fixed clock."""
    return StagesPanel(listener=populated_listener, dashboard=dashboard_config, clock=clock)


@pytest.fixture
def installed_listener(populated_listener):
    """Install the populated listener as the process-wide one."""
    reset_listener(populated_listener)
    yield populated_listener
    reset_listener()
