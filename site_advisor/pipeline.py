import logging

from .advisor import ImprovementAdvisor
from .exceptions import FetchFailure, ValidationError
from .fetcher import PageFetcher
from .models import AnalysisResult
from .presenter import fallback_improvements, present

logger = logging.getLogger(__name__)


def normalize_url(url) -> str:
    """Validates the requested URL and prefixes https:// when no http(s) scheme is given."""
    if not isinstance(url, str) or not url.strip():
        raise ValidationError("URL is required")
    if not url.startswith(("http://", "https://")):
        return "https://" + url
    return url


def run_analysis(url: str, config: dict | None = None, fetcher: PageFetcher | None = None) -> AnalysisResult:
    """
    Fetches the page and returns its grouped improvement suggestions.

    A page that cannot be fetched still yields a result: the fixed
    fallback groups replace the analysis. Any other error propagates.

    Args:
        url (str): Target URL, with or without scheme.
        config (dict): Full application config (sections keyed by module name).
        fetcher (PageFetcher): Optional fetcher to use instead of a fresh one.
    """
    target_url = normalize_url(url)
    logger.info("Analyzing: %s", target_url)

    own_fetcher = fetcher is None
    if own_fetcher:
        fetcher = PageFetcher.from_app_config(config)
    try:
        page = fetcher.fetch(target_url)
    except FetchFailure as e:
        logger.warning("Fetch error: %s", e.message)
        return AnalysisResult(url=target_url, improvements=fallback_improvements())
    finally:
        if own_fetcher:
            fetcher.close()

    advisor = ImprovementAdvisor.from_app_config(config)
    buckets = advisor.analyze(page.html, target_url, page.load_time_ms)
    return AnalysisResult(url=target_url, improvements=present(buckets))
