from ..models import AdvisoryItem


def check_load_time(load_time_ms: float, slow_load_ms: int) -> list[AdvisoryItem]:
    if load_time_ms <= slow_load_ms:
        return []
    return [AdvisoryItem(
        f"Page loaded in {load_time_ms / 1000:.1f} seconds - should be under {slow_load_ms / 1000:g} seconds",
        "Google Core Web Vitals",
    )]


def general_performance_advice() -> AdvisoryItem:
    return AdvisoryItem(
        "Consider implementing image optimization and caching for better performance",
        "Web performance best practices",
    )
