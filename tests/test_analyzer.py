from site_advisor.advisor import ImprovementAdvisor
from site_advisor.models import CategoryBuckets
from site_advisor.presenter import present

GENERIC_PERFORMANCE = "Consider implementing image optimization and caching for better performance"
GENERIC_UX = "Add clear call-to-action buttons to guide user behavior"


def _texts(items):
    return [item.text for item in items]


def test_clean_page_only_gets_platform_and_generic_advice(clean_page_html):
    buckets = ImprovementAdvisor().analyze(clean_page_html, "https://example.com", 850)

    assert buckets.seo == []
    assert buckets.content == []
    assert buckets.accessibility == []
    assert _texts(buckets.performance) == [GENERIC_PERFORMANCE]
    assert _texts(buckets.ux) == [GENERIC_UX]
    assert buckets.wordpress[0].text.startswith("WordPress site detected")
    assert '"astra"' in buckets.wordpress[1].text


def test_generic_performance_advice_only_when_nothing_fired(clean_page_html):
    buckets = ImprovementAdvisor().analyze(clean_page_html, "https://example.com", 5200)
    texts = _texts(buckets.performance)
    assert texts == ["Page loaded in 5.2 seconds - should be under 3 seconds"]
    assert GENERIC_PERFORMANCE not in texts


def test_generic_ux_advice_only_when_nothing_fired(page_builder):
    buckets = ImprovementAdvisor().analyze(page_builder(body="<p>Hello</p>"), "https://example.com", 100)
    texts = _texts(buckets.ux)
    assert len(texts) == 2
    assert GENERIC_UX not in texts


def test_bare_page_fills_every_bucket(page_builder):
    html = page_builder(title=None, body='<img src="a.png">')
    buckets = ImprovementAdvisor().analyze(html, "http://example.com", 100)

    seo = _texts(buckets.seo)
    assert seo[0].startswith("Site should use HTTPS")
    assert seo[1].startswith("Missing page title")
    assert seo[2].startswith("Missing meta description")
    assert seo[3].startswith("No H1 heading")
    assert seo[4].startswith("Missing Open Graph")
    assert seo[5].startswith("No structured data")
    assert len(seo) == 6
    assert _texts(buckets.wordpress) == ["Consider migrating to WordPress.com for better content management"]
    assert len(buckets.content) == 1
    assert len(buckets.accessibility) == 1


def test_thresholds_come_from_config(page_builder):
    advisor = ImprovementAdvisor(config={"title_max_length": 10, "content_min_words": 1})
    buckets = advisor.analyze(page_builder(title="Twelve chars", body="<p>one two</p>"), "https://e.com", 0)
    assert any("12 characters" in t for t in _texts(buckets.seo))
    assert buckets.content == []


def test_from_app_config_reads_its_section():
    advisor = ImprovementAdvisor.from_app_config({
        "ImprovementAdvisor": {"slow_load_ms": 1000, "wordpress_plan_recommendations": True},
        "Global": {"request_timeout": 5},
    })
    assert advisor.slow_load_ms == 1000
    assert advisor.plan_recommendations is True
    assert advisor.global_config == {"request_timeout": 5}


def test_same_input_gives_same_groups(clean_page_html):
    advisor = ImprovementAdvisor()
    first = present(advisor.analyze(clean_page_html, "https://example.com", 1200))
    second = present(advisor.analyze(clean_page_html, "https://example.com", 1200))
    assert [g.to_dict() for g in first] == [g.to_dict() for g in second]


def test_returns_fresh_buckets_each_run(page_builder):
    advisor = ImprovementAdvisor()
    first = advisor.analyze(page_builder(), "https://example.com", 0)
    second = advisor.analyze(page_builder(), "https://example.com", 0)
    assert isinstance(first, CategoryBuckets)
    assert first is not second
    assert len(first.ux) == len(second.ux)


def test_module_name():
    assert ImprovementAdvisor().get_module_name() == "ImprovementAdvisor"
