"""Benchmarks module for checking and timing generators.

This package provides utilities for running, tracking, and reporting
generator and distribution benchmarks:

- registry: Name -> factory maps for generators and distributions
- config: Run configuration loading and overrides
- metrics: Sample moment helpers
- checks: Reproducibility/bounds/moment check suite
- timing: Draws-per-second measurements
- report: Markdown report generation
- workflow: Run directory management
- runner: CLI for running benchmarks
"""

from __future__ import annotations

from benchmarks.checks import CheckResult, ChecksSummary, run_checks
from benchmarks.config import apply_overrides, build_generator, load_config
from benchmarks.metrics import draw_samples, relative_error, sample_moments
from benchmarks.registry import get_distribution, get_generator
from benchmarks.report import render_checks_markdown, render_timings_markdown
from benchmarks.runner import main as run_benchmark
from benchmarks.timing import TimingResult, time_generator
from benchmarks.workflow import next_run_dir, try_get_git_commit, write_run_files

__all__ = [
    # Registry
    "get_generator",
    "get_distribution",
    # Config
    "load_config",
    "apply_overrides",
    "build_generator",
    # Workflow
    "next_run_dir",
    "write_run_files",
    "try_get_git_commit",
    # Metrics
    "draw_samples",
    "sample_moments",
    "relative_error",
    # Timing
    "TimingResult",
    "time_generator",
    # Runner
    "run_benchmark",
    # Checks
    "CheckResult",
    "ChecksSummary",
    "run_checks",
    # Report
    "render_checks_markdown",
    "render_timings_markdown",
]
