from ..base_module import AdvisorModule
from ..document import HtmlDocument
from ..models import CategoryBuckets
from .seo import (
    check_https,
    check_url_length,
    check_title,
    check_meta_description,
    check_h1,
    check_open_graph,
    check_structured_data,
)
from .wordpress import check_wordpress
from .performance import check_load_time, general_performance_advice
from .ux import check_viewport, check_contact_info, general_ux_advice
from .content import check_word_count
from .accessibility import check_image_alt


class ImprovementAdvisor(AdvisorModule):
    """Runs the improvement checks over one fetched page."""

    def __init__(self, config=None):
        super().__init__(config=config)
        self.url_max_length = self.config.get("url_max_length", 60)
        self.title_min_len = self.config.get("title_min_length", 30)
        self.title_max_len = self.config.get("title_max_length", 60)
        self.desc_max_len = self.config.get("desc_max_length", 160)
        self.slow_load_ms = self.config.get("slow_load_ms", 3000)
        self.content_min_words = self.config.get("content_min_words", 300)
        self.plan_recommendations = bool(self.config.get("wordpress_plan_recommendations", False))

    def analyze(self, html: str, url: str, load_time_ms: float) -> CategoryBuckets:
        doc = HtmlDocument(html)
        buckets = CategoryBuckets()

        buckets.seo.extend(check_https(url))
        buckets.seo.extend(check_url_length(url, self.url_max_length))
        buckets.seo.extend(check_title(doc, self.title_min_len, self.title_max_len))
        buckets.seo.extend(check_meta_description(doc, self.desc_max_len))
        buckets.seo.extend(check_h1(doc))
        buckets.seo.extend(check_open_graph(doc))
        buckets.seo.extend(check_structured_data(doc))

        buckets.wordpress.extend(check_wordpress(doc, self.plan_recommendations))

        buckets.performance.extend(check_load_time(load_time_ms, self.slow_load_ms))

        buckets.ux.extend(check_viewport(doc))
        buckets.ux.extend(check_contact_info(doc))

        buckets.content.extend(check_word_count(doc, self.content_min_words))

        buckets.accessibility.extend(check_image_alt(doc))

        # Generic advice for buckets no specific check wrote to
        if not buckets.performance:
            buckets.performance.append(general_performance_advice())
        if not buckets.ux:
            buckets.ux.append(general_ux_advice())

        return buckets
