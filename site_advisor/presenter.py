from .models import AdvisoryItem, CategoryBuckets, OutputGroup

# bucket name -> (category label, icon, priority); output follows this order
CATEGORY_TABLE = (
    ("seo", "SEO Optimization", "🔍", "high"),
    ("wordpress", "WordPress.com Specific", "⚡", "high"),
    ("performance", "Performance", "🚀", "medium"),
    ("ux", "User Experience", "👤", "medium"),
    ("content", "Content & Structure", "✍️", "medium"),
    ("accessibility", "Accessibility", "♿", "low"),
)

FALLBACK_GROUPS = (
    OutputGroup(
        category="Site Access",
        icon="⚠️",
        priority="high",
        items=(
            AdvisoryItem("Unable to fully analyze site - may have access restrictions", "Connection analysis"),
            AdvisoryItem("Ensure site is publicly accessible and not blocking automated requests", "Accessibility check"),
        ),
    ),
    OutputGroup(
        category="WordPress.com Recommendations",
        icon="⚡",
        priority="high",
        items=(
            AdvisoryItem("Consider WordPress.com hosting for reliable performance and security", "WordPress.com benefits"),
            AdvisoryItem("WordPress.com sites are optimized for speed and SEO out of the box", "Platform optimization"),
        ),
    ),
)


def present(buckets: CategoryBuckets) -> tuple:
    """Turns filled buckets into display groups, skipping empty ones."""
    groups = []
    for bucket_name, label, icon, priority in CATEGORY_TABLE:
        items = buckets.get(bucket_name)
        if not items:
            continue
        groups.append(OutputGroup(category=label, icon=icon, priority=priority, items=tuple(items)))
    return tuple(groups)


def fallback_improvements() -> tuple:
    """Groups returned when the page could not be fetched."""
    return FALLBACK_GROUPS
