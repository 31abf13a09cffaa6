"""
Progress calculation tests — widths, elapsed time, labels, shuffle cells.
"""

import pytest

from core.logic.calculations import (
    UNKNOWN,
    active_task_time,
    calculate_completion_percentage,
    calculate_fraction,
    elapsed_time,
    format_shuffle,
    progress_widths,
    task_count_label,
)
from core.models import TaskInfo
from core.utils import format_bytes


class TestProgressWidths:

    def test_widths_are_percentages_of_total(self):
        widths = progress_widths(started=2, completed=1, total=4)
        assert widths.complete_percent == 25.0
        assert widths.started_percent == 50.0

    def test_zero_total_gives_zero_widths(self):
        widths = progress_widths(started=3, completed=5, total=0)
        assert widths.complete_percent == 0.0
        assert widths.started_percent == 0.0

    def test_counts_above_total_are_not_clamped(self):
        widths = progress_widths(started=2, completed=4, total=4)
        assert widths.complete_percent == 100.0
        assert widths.complete_percent + widths.started_percent == 150.0

    def test_widths_are_never_negative(self):
        widths = progress_widths(started=0, completed=0, total=10)
        assert widths.complete_percent >= 0
        assert widths.started_percent >= 0


class TestFractions:

    def test_fraction(self):
        assert calculate_fraction(1, 4) == 0.25

    def test_fraction_of_zero_total(self):
        assert calculate_fraction(7, 0) == 0.0

    def test_fraction_may_exceed_one(self):
        assert calculate_fraction(6, 4) == 1.5

    def test_completion_percentage(self):
        assert calculate_completion_percentage(3, 4) == 75.0


class TestElapsedTime:

    def test_unknown_without_submission(self):
        assert elapsed_time(None, 1_000_000) == UNKNOWN

    def test_span_between_submission_and_completion(self):
        assert elapsed_time(10_000, 100_000) == "1.5 min"

    def test_clock_skew_reads_as_zero(self):
        assert elapsed_time(5_000, 4_000) == "0 ms"

    def test_monotonic_as_clock_advances(self):
        submitted = 1_000
        spans = [elapsed_time(submitted, submitted + offset) for offset in (500, 1500, 30_000, 900_000)]
        assert spans == ["500 ms", "1.5 s", "30.0 s", "15 min"]


class TestFormatShuffle:

    def test_zero_is_empty(self):
        assert format_shuffle(0) == ""

    @pytest.mark.parametrize("num_bytes", [1, 2048, 5 * 1024 * 1024])
    def test_non_zero_matches_format_bytes(self, num_bytes):
        assert format_shuffle(num_bytes) == format_bytes(num_bytes)
        assert format_shuffle(num_bytes) != ""


class TestTaskCountLabel:

    def test_without_failures(self):
        assert task_count_label(3, 5, 0) == "3 / 5"

    def test_failure_suffix(self):
        assert task_count_label(3, 5, 2) == "3 / 5(2 failed)"

    def test_completed_may_exceed_total(self):
        assert task_count_label(6, 5, 0) == "6 / 5"


class TestActiveTaskTime:

    def test_sums_running_time_across_stages(self):
        active = {
            1: [TaskInfo(task_id=1, stage_id=1, launch_time=1000)],
            2: [
                TaskInfo(task_id=2, stage_id=2, launch_time=1500),
                TaskInfo(task_id=3, stage_id=2, launch_time=1900),
            ],
        }
        assert active_task_time(active, now=2000) == 1000 + 500 + 100

    def test_empty(self):
        assert active_task_time({}, now=2000) == 0

    def test_task_launched_in_the_future_counts_zero(self):
        active = {1: [TaskInfo(task_id=1, stage_id=1, launch_time=5000)]}
        assert active_task_time(active, now=2000) == 0
