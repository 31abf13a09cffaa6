"""
Core Business Logic Package.

Contains logic that operates on pure data models and listener reads.
Separated from models to maintain clean architecture.

Exports:
    Calculations: progress_widths, elapsed_time, format_shuffle, task_count_label, active_task_time
    Summaries: collect_stage_metrics, build_stage_row, compute_job_summary
"""

# Calculations
from .calculations import (
    UNKNOWN,
    ProgressWidths,
    calculate_fraction,
    calculate_completion_percentage,
    progress_widths,
    elapsed_time,
    format_shuffle,
    task_count_label,
    active_task_time
)

# Summaries
from .summaries import (
    StageMetrics,
    StageRow,
    JobSummary,
    collect_stage_metrics,
    build_stage_row,
    compute_job_summary
)

__all__ = [
    # Calculations
    'UNKNOWN',
    'ProgressWidths',
    'calculate_fraction',
    'calculate_completion_percentage',
    'progress_widths',
    'elapsed_time',
    'format_shuffle',
    'task_count_label',
    'active_task_time',

    # Summaries
    'StageMetrics',
    'StageRow',
    'JobSummary',
    'collect_stage_metrics',
    'build_stage_row',
    'compute_job_summary',
]
