from __future__ import annotations

from dataclasses import dataclass, field, asdict
from typing import Any, Dict, List

BUCKET_NAMES = ("seo", "performance", "wordpress", "ux", "accessibility", "content")


@dataclass(frozen=True)
class AdvisoryItem:
    text: str
    source: str  # rationale or citation shown next to the text

    def to_dict(self) -> Dict[str, str]:
        return asdict(self)


@dataclass
class CategoryBuckets:
    """The six advisory collections filled during one analysis run."""

    seo: List[AdvisoryItem] = field(default_factory=list)
    performance: List[AdvisoryItem] = field(default_factory=list)
    wordpress: List[AdvisoryItem] = field(default_factory=list)
    ux: List[AdvisoryItem] = field(default_factory=list)
    accessibility: List[AdvisoryItem] = field(default_factory=list)
    content: List[AdvisoryItem] = field(default_factory=list)

    def get(self, name: str) -> List[AdvisoryItem]:
        if name not in BUCKET_NAMES:
            raise KeyError(f"Unknown category bucket: {name}")
        return getattr(self, name)


@dataclass(frozen=True)
class OutputGroup:
    category: str
    icon: str
    priority: str  # high | medium | low
    items: tuple

    def to_dict(self) -> Dict[str, Any]:
        return {
            "category": self.category,
            "icon": self.icon,
            "priority": self.priority,
            "items": [item.to_dict() for item in self.items],
        }


@dataclass(frozen=True)
class AnalysisResult:
    url: str
    improvements: tuple

    def to_dict(self) -> Dict[str, Any]:
        return {
            "url": self.url,
            "improvements": [group.to_dict() for group in self.improvements],
        }
