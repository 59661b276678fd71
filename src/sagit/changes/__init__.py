"""Change aggregation and commit classification."""

from sagit.changes.aggregator import aggregate, language_of, top_dir
from sagit.changes.classifier import classify, render_message, scope_from_path
from sagit.changes.models import AggregatedSummary, Classification

__all__ = [
    "AggregatedSummary",
    "Classification",
    "aggregate",
    "classify",
    "language_of",
    "render_message",
    "scope_from_path",
    "top_dir",
]
