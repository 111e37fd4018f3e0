import re

from ..document import HtmlDocument
from ..models import AdvisoryItem

THEME_PATTERN = re.compile(r"wp-content/themes/([^/]+)")
DEFAULT_THEMES = ("twentytwenty", "twentynineteen", "twentyeighteen")
ECOMMERCE_WORDS = ("shop", "buy", "cart", "product", "store", "price")


def detect_wordpress(doc: HtmlDocument) -> bool:
    if doc.contains("wp-content") or doc.contains("wordpress"):
        return True
    generator = doc.meta_content(name="generator")
    return bool(generator and "WordPress" in generator)


def extract_theme_name(doc: HtmlDocument):
    if not doc.contains("wp-content/themes/"):
        return None
    match = THEME_PATTERN.search(doc.html)
    return match.group(1) if match else None


def _plan_recommendations(doc: HtmlDocument) -> list[AdvisoryItem]:
    items = []
    has_custom_theme = doc.contains_ci("wp-content/themes/") and not any(
        doc.contains_ci(theme) for theme in DEFAULT_THEMES
    )
    has_plugins = doc.contains_ci("wp-content/plugins/")
    if not has_custom_theme and not has_plugins:
        items.append(AdvisoryItem(
            "Consider upgrading to WordPress.com Business plan for advanced customization and SEO tools",
            "WordPress.com plan recommendations for growing sites",
        ))

    has_ecommerce = any(doc.contains_ci(word) for word in ECOMMERCE_WORDS)
    if has_ecommerce and not doc.contains_ci("woocommerce"):
        items.append(AdvisoryItem(
            "Site mentions products/shopping - consider WordPress.com Business plan with WooCommerce for e-commerce",
            "E-commerce functionality analysis",
        ))
    return items


def check_wordpress(doc: HtmlDocument, plan_recommendations: bool = False) -> list[AdvisoryItem]:
    """Platform advice: tuning tips for WordPress sites, a migration pitch for everything else."""
    if not detect_wordpress(doc):
        return [AdvisoryItem(
            "Consider migrating to WordPress.com for better content management",
            "Platform recommendation",
        )]

    items = [AdvisoryItem(
        "WordPress site detected - great choice for content management",
        "WordPress site analysis",
    )]

    theme = extract_theme_name(doc)
    if theme:
        items.append(AdvisoryItem(
            f'Using the "{theme}" theme - make sure it is kept up to date and optimized for speed',
            "WordPress theme analysis",
        ))

    if plan_recommendations:
        items.extend(_plan_recommendations(doc))

    if not doc.contains_ci("jetpack"):
        items.append(AdvisoryItem(
            "Consider installing Jetpack for enhanced performance and security",
            "WordPress.com recommendations",
        ))

    items.append(AdvisoryItem(
        "Optimize images using WordPress.com built-in compression",
        "WordPress.com performance features",
    ))
    return items
