"""
Shared fixtures for the improvement analyzer tests.
"""
import pytest

FILLER = " ".join(["content"] * 320)


def build_page(head="", body="", title="A well sized page title for search results"):
    """Wraps head/body fragments in a minimal document. title=None omits the <title> tag."""
    title_tag = f"<title>{title}</title>" if title is not None else ""
    return f"<!DOCTYPE html><html><head>{title_tag}{head}</head><body>{body}</body></html>"


@pytest.fixture
def page_builder():
    return build_page


@pytest.fixture
def clean_page_html():
    """A WordPress page that passes every specific check."""
    head = (
        '<meta name="viewport" content="width=device-width, initial-scale=1">'
        '<meta name="description" content="Handmade pottery from our studio.">'
        '<meta property="og:title" content="Pottery">'
        '<meta property="og:description" content="Handmade pottery">'
        '<script type="application/ld+json">{"@type": "Organization"}</script>'
        '<link rel="stylesheet" href="https://example.com/wp-content/themes/astra/style.css">'
        '<script src="https://example.com/wp-content/plugins/jetpack/jetpack.js"></script>'
    )
    body = (
        "<h1>Studio pottery</h1>"
        f"<p>{FILLER}</p>"
        '<img src="/vase.jpg" alt="Blue vase">'
        '<a href="/contact">Contact us</a>'
    )
    return build_page(head=head, body=body)


@pytest.fixture
def client():
    """Create a Flask test client."""
    from app import app

    app.config['TESTING'] = True
    with app.test_client() as client:
        yield client
