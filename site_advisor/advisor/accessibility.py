from ..document import HtmlDocument
from ..models import AdvisoryItem


def count_images_without_alt(doc: HtmlDocument) -> int:
    return sum(1 for img in doc.find_all("img") if doc.attr(img, "alt") is None)


def check_image_alt(doc: HtmlDocument) -> list[AdvisoryItem]:
    missing = count_images_without_alt(doc)
    if missing == 0:
        return []
    return [AdvisoryItem(
        f"Found {missing} images without alt text - add for accessibility",
        "WCAG 2.1 accessibility standards",
    )]
