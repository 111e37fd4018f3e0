"""Improvement checks package.

Provides `ImprovementAdvisor`, which runs the per-category checks
implemented in sibling modules and collects their advisories into buckets.
"""

from .analyzer import ImprovementAdvisor
