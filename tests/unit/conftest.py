"""
Unit test fixtures — factory-built models.
"""

import pytest

from core.models import DatasetRef, Stage, TaskInfo, TaskMetrics
from tests.factories.model_factories import (
    make_dataset,
    make_stage,
    make_task_info,
    make_task_metrics,
)


@pytest.fixture
def stage_data():
    """Return randomized stage data dict."""
    return make_stage()


@pytest.fixture
def stage():
    """A submitted stage with four partitions."""
    return Stage(**make_stage(stage_id=1, num_partitions=4))


@pytest.fixture
def cached_dataset():
    """A dataset persisted in memory."""
    return DatasetRef(**make_dataset(dataset_id=7, cached=True, name="events"))


@pytest.fixture
def task_factory():
    """Factory fixture: TaskInfo for a stage, launched at a given time."""
    def _make(task_id: int, stage_id: int, launch_time: int = 0) -> TaskInfo:
        return TaskInfo(**make_task_info(task_id=task_id, stage_id=stage_id, launch_time=launch_time))
    return _make


@pytest.fixture
def metrics_factory():
    """Factory fixture: TaskMetrics with overrides."""
    def _make(**overrides) -> TaskMetrics:
        return TaskMetrics(**make_task_metrics(**overrides))
    return _make
