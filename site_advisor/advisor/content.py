from ..document import HtmlDocument
from ..models import AdvisoryItem


def count_words(text: str) -> int:
    return len(text.split())


def check_word_count(doc: HtmlDocument, content_min_words: int) -> list[AdvisoryItem]:
    word_count = count_words(doc.visible_body_text())
    if word_count >= content_min_words:
        return []
    return [AdvisoryItem(
        f"Limited content detected ({word_count} words) - aim for at least {content_min_words} words of useful text",
        "Google helpful content guidelines",
    )]
