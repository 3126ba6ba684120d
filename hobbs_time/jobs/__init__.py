"""Batch orchestration over multiple log exports."""

from hobbs_time.jobs.runner import BatchResult, LogSource, build_sources, run_batch

__all__ = ["BatchResult", "LogSource", "build_sources", "run_batch"]
