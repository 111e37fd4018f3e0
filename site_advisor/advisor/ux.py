from ..document import HtmlDocument
from ..models import AdvisoryItem

CONTACT_MARKERS = ("contact", "email", "@")


def check_viewport(doc: HtmlDocument) -> list[AdvisoryItem]:
    if doc.find_first("meta", name="viewport") is not None:
        return []
    return [AdvisoryItem(
        "Missing viewport meta tag - important for mobile responsiveness",
        "Google Mobile-First indexing",
    )]


def check_contact_info(doc: HtmlDocument) -> list[AdvisoryItem]:
    if any(doc.contains_ci(marker) for marker in CONTACT_MARKERS):
        return []
    return [AdvisoryItem(
        "No obvious contact information found - make it easy for users to reach you",
        "User experience best practices",
    )]


def general_ux_advice() -> AdvisoryItem:
    return AdvisoryItem(
        "Add clear call-to-action buttons to guide user behavior",
        "Conversion optimization guidelines",
    )
