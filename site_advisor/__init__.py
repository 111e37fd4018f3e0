"""Website improvement analyzer.

Fetches one page and turns a set of shallow HTML checks into grouped,
presentation-ready improvement suggestions.
"""

from .pipeline import normalize_url, run_analysis

__all__ = ["normalize_url", "run_analysis"]
