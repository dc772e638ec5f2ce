"""Markdown report generation for checks, timings and histograms.

This module provides functions to render check results, throughput tables
and histogram galleries as human-readable Markdown reports.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from benchmarks.checks import ChecksSummary
from benchmarks.timing import TimingResult

__all__ = [
    "render_checks_markdown",
    "render_timings_markdown",
    "render_histograms_markdown",
]


def _fmt(value: Any) -> str:
    """Format a number compactly for a table cell."""
    if isinstance(value, float):
        return f"{value:.6g}"
    return str(value)


def _render_config(config: dict[str, Any]) -> list[str]:
    lines = ["## Configuration", ""]
    lines.append(f"- **Generator**: {config.get('generator', 'xorshift128')}")
    lines.append(f"- **Seed**: {config.get('seed', 0)}")
    lines.append(f"- **Draws**: {config.get('draws', 'N/A')}")
    lines.append(f"- **Samples**: {config.get('samples', 'N/A')}")
    lines.append(f"- **Tolerance**: {config.get('tolerance', 'N/A')}")
    lines.append("")
    return lines


def render_checks_markdown(summary: ChecksSummary, config: dict[str, Any]) -> str:
    """Render checks summary as Markdown.

    Args:
        summary: ChecksSummary from run_checks().
        config: Configuration dictionary.

    Returns:
        Markdown string.
    """
    lines: list[str] = []

    # Title
    status = "✅ PASSED" if summary.passed else "❌ FAILED"
    lines.append(f"# Generator Check Report: {status}")
    lines.append("")

    lines.extend(_render_config(config))

    # Results table
    lines.append("## Check Results")
    lines.append("")
    lines.append("| Check | Status | Key Metrics |")
    lines.append("|-------|--------|-------------|")

    for result in summary.results:
        status_icon = "✅" if result.passed else "❌"
        details = result.details

        # Skip skipped checks with minimal info
        if details.get("skipped"):
            lines.append(f"| {result.name} | ⏭️ Skipped | {details.get('reason', 'N/A')} |")
            continue

        # Format key metrics based on check type
        if result.name == "reset_reproducibility":
            metrics = f"draws={details.get('draws', 0)}, mismatches={details.get('mismatches', 0)}"
        elif result.name == "bounds":
            metrics = (
                f"draws={details.get('draws', 0)}, "
                f"violations={details.get('total_violations', 0)}"
            )
        elif result.name == "boolean_buffer":
            metrics = (
                f"after_31={details.get('word_after_31_booleans_ok')}, "
                f"after_32={details.get('word_after_32_booleans_ok')}, "
                f"true_share={details.get('true_share', 0):.4f}"
            )
        elif result.name.startswith("moments["):
            parts = []
            if "expected_mean" in details:
                parts.append(
                    f"mean={_fmt(details['sample_mean'])} "
                    f"(expected {_fmt(details['expected_mean'])}, "
                    f"err={details['mean_error']:.4f})"
                )
            else:
                parts.append("mean undefined")
            if "expected_variance" in details:
                parts.append(
                    f"var={_fmt(details['sample_variance'])} "
                    f"(expected {_fmt(details['expected_variance'])}, "
                    f"err={details['variance_error']:.4f})"
                )
            else:
                parts.append("variance undefined")
            if not details.get("in_support", True):
                parts.append("samples outside support")
            metrics = ", ".join(parts)
        else:
            # Generic fallback
            metrics = ", ".join(f"{k}={v}" for k, v in details.items() if k != "error")

        lines.append(f"| {result.name} | {status_icon} | {metrics} |")

    lines.append("")

    # Summary
    lines.append("## Summary")
    lines.append("")
    num_passed = sum(1 for r in summary.results if r.passed)
    num_failed = sum(1 for r in summary.results if not r.passed)
    lines.append(f"- **Total checks**: {len(summary.results)}")
    lines.append(f"- **Passed**: {num_passed}")
    lines.append(f"- **Failed**: {num_failed}")
    lines.append("")

    if summary.passed:
        lines.append("**Overall: ✅ ALL CHECKS PASSED**")
    else:
        lines.append("**Overall: ❌ SOME CHECKS FAILED**")
        lines.append("")
        lines.append("Failed checks:")
        for result in summary.results:
            if not result.passed:
                error = result.details.get("error", "See details above")
                lines.append(f"- `{result.name}`: {error}")

    lines.append("")

    return "\n".join(lines)


def render_timings_markdown(
    results: list[TimingResult],
    config: dict[str, Any],
    *,
    plot_path: Path | None = None,
) -> str:
    """Render timing results as a Markdown table sorted as measured.

    Args:
        results: TimingResult list from benchmarks.timing.
        config: Configuration dictionary.
        plot_path: Optional throughput plot, linked relative to the report.

    Returns:
        Markdown string.
    """
    lines = ["# Throughput Report", ""]
    lines.extend(_render_config(config))

    lines.append("## Timings")
    lines.append("")
    lines.append("| Subject | Method | Draws | Seconds | Draws/s |")
    lines.append("|---------|--------|-------|---------|---------|")
    for r in results:
        lines.append(
            f"| {r.subject} | `{r.method}` | {r.draws} | {r.seconds:.4f} | {r.draws_per_second:,.0f} |"
        )
    lines.append("")

    if plot_path is not None:
        lines.append(f"![Throughput]({plot_path.as_posix()})")
        lines.append("")

    return "\n".join(lines)


def render_histograms_markdown(entries: list[dict[str, Any]], config: dict[str, Any]) -> str:
    """Render a gallery of histogram plots.

    Args:
        entries: One dict per distribution with keys ``distribution``,
            ``plot`` (path relative to the report), ``sample_mean`` and
            optionally ``expected_mean``.
        config: Configuration dictionary.

    Returns:
        Markdown string.
    """
    lines = ["# Histogram Report", ""]
    lines.extend(_render_config(config))

    for entry in entries:
        lines.append(f"## {entry['distribution']}")
        lines.append("")
        expected = entry.get("expected_mean")
        expected_text = _fmt(expected) if expected is not None else "undefined"
        lines.append(f"- Sample mean: {_fmt(entry['sample_mean'])}")
        lines.append(f"- Expected mean: {expected_text}")
        lines.append("")
        lines.append(f"![{entry['distribution']}]({entry['plot']})")
        lines.append("")

    return "\n".join(lines)
