from ..document import HtmlDocument
from ..models import AdvisoryItem


def check_https(url: str) -> list[AdvisoryItem]:
    if url.startswith("https://"):
        return []
    return [AdvisoryItem(
        "Site should use HTTPS for security and SEO benefits",
        "Google HTTPS ranking factor",
    )]


def check_url_length(url: str, url_max_length: int) -> list[AdvisoryItem]:
    if len(url) <= url_max_length:
        return []
    return [AdvisoryItem(
        f"URL is {len(url)} characters long - keep URLs short and descriptive",
        "Google URL structure guidelines",
    )]


def check_title(doc: HtmlDocument, title_min_len: int, title_max_len: int) -> list[AdvisoryItem]:
    title = doc.title_text()
    if title is None:
        return [AdvisoryItem(
            "Missing page title - add a descriptive title tag",
            "Google SEO guidelines",
        )]
    if len(title) > title_max_len:
        return [AdvisoryItem(
            f"Page title is {len(title)} characters - should be 50-60 for optimal display",
            "Google SERP optimization",
        )]
    if len(title) < title_min_len:
        return [AdvisoryItem(
            "Page title seems short - consider making it more descriptive",
            "SEO title optimization",
        )]
    return []


def check_meta_description(doc: HtmlDocument, desc_max_len: int) -> list[AdvisoryItem]:
    description = doc.meta_content(name="description")
    if description is None:
        return [AdvisoryItem(
            "Missing meta description - add one for better search results",
            "Google SEO best practices",
        )]
    if len(description) > desc_max_len:
        return [AdvisoryItem(
            f"Meta description is {len(description)} characters - keep it under {desc_max_len} to avoid truncation",
            "Google search snippet guidelines",
        )]
    return []


def check_h1(doc: HtmlDocument) -> list[AdvisoryItem]:
    h1_count = len(doc.find_all("h1"))
    if h1_count == 0:
        return [AdvisoryItem(
            "No H1 heading found - add one for better SEO structure",
            "SEO heading hierarchy",
        )]
    if h1_count > 1:
        return [AdvisoryItem(
            f"Found {h1_count} H1 headings - should typically have only one per page",
            "SEO best practices",
        )]
    return []


def check_open_graph(doc: HtmlDocument) -> list[AdvisoryItem]:
    has_title = doc.find_first("meta", property="og:title") is not None
    has_description = doc.find_first("meta", property="og:description") is not None
    if has_title and has_description:
        return []
    return [AdvisoryItem(
        "Missing Open Graph tags - add for better social media sharing",
        "Facebook Open Graph documentation",
    )]


def check_structured_data(doc: HtmlDocument) -> list[AdvisoryItem]:
    if doc.contains("schema.org") or doc.find_first("script", type="application/ld+json") is not None:
        return []
    return [AdvisoryItem(
        "No structured data found - add Schema.org markup to enable rich results",
        "Google structured data guidelines",
    )]
