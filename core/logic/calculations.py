# ============================================================================
# STAGE PROGRESS CALCULATIONS
# ============================================================================
# STATUS: Core - Pure calculation functions
# PURPOSE: Progress widths, elapsed times, task labels and shuffle cells
# LAST_REVIEWED: 18 OCT 2026
# ============================================================================
"""
Stage Progress Calculations.

All functions are pure and operate on plain counts and timestamps, so
they can be called with values read from a listener that is being
mutated concurrently. Counts are never sanitized: a stage whose
completed + active tasks exceed its partition count (speculative
attempts, or two counters read a few milliseconds apart) yields
fractions above 1 and widths above 100%, never an exception.

Exports:
    ProgressWidths: Width pair for the two-segment progress bar
    calculate_fraction: count / total, 0.0 when total is 0
    calculate_completion_percentage: count / total * 100, 0.0 when total is 0
    progress_widths: (started, completed, total) -> ProgressWidths
    elapsed_time: Formatted duration or "Unknown"
    format_shuffle: Byte cell text, empty for zero
    task_count_label: "completed / total" with optional failure suffix
    active_task_time: Running time summed over active tasks
"""

from dataclasses import dataclass
from typing import Dict, Iterable, Optional

from ..models.task import TaskInfo
from ..utils import format_bytes, format_duration

UNKNOWN = "Unknown"


@dataclass(frozen=True)
class ProgressWidths:
    """CSS width percentages for the done and in-progress bar segments."""
    complete_percent: float
    started_percent: float


def calculate_fraction(count: int, total: int) -> float:
    """
    Calculate count as a fraction of total.

    Args:
        count: Number of items
        total: Total number of items

    Returns:
        count / total (may exceed 1.0), or 0.0 when total is 0
    """
    if total == 0:
        return 0.0
    return count / total


def calculate_completion_percentage(completed: int, total: int) -> float:
    """
    Calculate completion percentage.

    Args:
        completed: Number of completed items
        total: Total number of items

    Returns:
        Percentage (may exceed 100.0), or 0.0 when total is 0
    """
    return calculate_fraction(completed, total) * 100.0


def progress_widths(started: int, completed: int, total: int) -> ProgressWidths:
    """
    Compute both progress bar segment widths.

    Args:
        started: Tasks currently running
        completed: Tasks finished successfully
        total: Partition count of the stage

    Returns:
        ProgressWidths with both percentages, 0.0 each for a zero-partition stage
    """
    return ProgressWidths(
        complete_percent=calculate_completion_percentage(completed, total),
        started_percent=calculate_completion_percentage(started, total),
    )


def elapsed_time(submitted: Optional[int], completed: int) -> str:
    """
    Format the time between submission and completion.

    Args:
        submitted: Submission time (ms), None if never submitted
        completed: Completion time (ms); pass "now" for running stages

    Returns:
        "Unknown" when submitted is None, otherwise the formatted span
    """
    if submitted is None:
        return UNKNOWN
    return format_duration(max(0, completed - submitted))


def format_shuffle(num_bytes: int) -> str:
    """Shuffle cell text: empty for zero bytes, human-readable otherwise."""
    if num_bytes == 0:
        return ""
    return format_bytes(num_bytes)


def task_count_label(completed: int, total: int, failed: int) -> str:
    """
    Build the task column label.

    Example:
        >>> task_count_label(3, 5, 0)
        '3 / 5'
        >>> task_count_label(3, 5, 2)
        '3 / 5(2 failed)'
    """
    label = f"{completed} / {total}"
    if failed > 0:
        label += f"({failed} failed)"
    return label


def active_task_time(active_tasks: Dict[int, Iterable[TaskInfo]], now: int) -> int:
    """
    Sum the running time of every active task across all stages.

    Args:
        active_tasks: Stage id -> active task attempts
        now: Current time (ms)

    Returns:
        Total milliseconds spent so far by tasks that have not finished
    """
    return sum(
        task.time_running(now)
        for tasks in active_tasks.values()
        for task in tasks
    )
