# app.py
import argparse
import copy
import json
import logging
import os
from datetime import datetime
from urllib.parse import urlparse

from flask import Flask, request, jsonify

from site_advisor import run_analysis
from site_advisor.exceptions import ValidationError
from site_advisor.logger import configure_logging

DEFAULT_CONFIG = {
    "ImprovementAdvisor": {
        "url_max_length": 60,
        "title_min_length": 30, "title_max_length": 60,
        "desc_max_length": 160,
        "slow_load_ms": 3000,
        "content_min_words": 300,
        "wordpress_plan_recommendations": False,
    },
    "Global": {
        "request_timeout": 10,
        "user_agent": "WordPress.com Website Analyzer Bot",
        "log_level": "INFO",
    },
}

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}

logger = logging.getLogger("site_advisor.app")
configure_logging(DEFAULT_CONFIG["Global"]["log_level"])

app = Flask(__name__)
app.json.ensure_ascii = False  # keep category icons readable in responses
# Configuration used by the request handlers; replaced by run_cli when --config is given
flask_app_config = copy.deepcopy(DEFAULT_CONFIG)


def merge_config(base: dict, override: dict) -> dict:
    """Returns a copy of base with override merged in one level deep (per module section)."""
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if key in merged and isinstance(merged[key], dict) and isinstance(value, dict):
            merged[key].update(value)
        else:
            merged[key] = value
    return merged


def load_config(path: str | None) -> dict:
    if not path:
        return copy.deepcopy(DEFAULT_CONFIG)
    try:
        with open(path, "r") as f:
            custom_config = json.load(f)
    except FileNotFoundError:
        logger.warning("Config file %s not found. Using default settings.", path)
        return copy.deepcopy(DEFAULT_CONFIG)
    except json.JSONDecodeError:
        logger.warning("Error decoding JSON from %s. Using default settings.", path)
        return copy.deepcopy(DEFAULT_CONFIG)
    logger.info("Loaded custom configuration from %s", path)
    return merge_config(DEFAULT_CONFIG, custom_config)


@app.after_request
def add_cors_headers(response):
    response.headers.update(CORS_HEADERS)
    return response


@app.errorhandler(405)
def method_not_allowed(error):
    return jsonify({"error": "Method not allowed"}), 405


@app.route('/api/analyze', methods=['POST', 'OPTIONS'])
def analyze_endpoint():
    if request.method == 'OPTIONS':
        return "", 200

    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        data = {}

    try:
        result = run_analysis(data.get('url'), config=flask_app_config)
    except ValidationError as ve:
        return jsonify({"error": str(ve)}), 400
    except Exception:
        logger.exception("Server error while analyzing %r", data.get('url'))
        return jsonify({"error": "Analysis failed"}), 500
    return jsonify(result.to_dict())


@app.route('/api/test', methods=['POST', 'OPTIONS'])
def test_endpoint():
    """Deployment smoke check: answers with a fixed group without fetching anything."""
    if request.method == 'OPTIONS':
        return "", 200

    data = request.get_json(silent=True)
    url = data.get('url') if isinstance(data, dict) else None
    return jsonify({
        "url": url,
        "improvements": [
            {
                "category": "Test Results",
                "icon": "✅",
                "priority": "high",
                "items": [
                    {"text": "API is working! This is a test response.", "source": "API Test"},
                    {"text": "Your backend is successfully deployed", "source": "Deployment Test"},
                ],
            }
        ],
    })


def save_report_to_file(report: dict, filename_prefix="improvements"):
    if not os.path.exists("reports"):
        os.makedirs("reports")
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    safe_domain_name = urlparse(report["url"]).netloc.replace(".", "_").replace(":", "_")
    filename = f"reports/{filename_prefix}_{safe_domain_name}_{timestamp}.json"
    try:
        with open(filename, "w", encoding="utf-8") as f:
            json.dump(report, f, indent=4, ensure_ascii=False)
        logger.info("Report saved to %s", filename)
        return filename
    except IOError as e:
        logger.error("Error saving report: %s", e)
        return None


def run_cli(argv=None):
    parser = argparse.ArgumentParser(description="Website improvement analyzer")
    parser.add_argument("url", nargs='?', default=None, help="The URL to analyze (omit to run in API/server mode).")
    parser.add_argument("--config", type=str, default=None, help="Path to a JSON config file.")
    parser.add_argument("--save", action="store_true", help="Also write the result to the reports/ directory.")
    parser.add_argument("--host", type=str, default="127.0.0.1", help="Host for API/server mode.")
    parser.add_argument("--port", type=int, default=5000, help="Port for API/server mode.")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging.")

    args = parser.parse_args(argv)

    global flask_app_config
    current_config = load_config(args.config)
    flask_app_config = current_config
    configure_logging("DEBUG" if args.verbose else current_config.get("Global", {}).get("log_level", "INFO"))

    # Without a URL, run in API/server mode. Otherwise analyze once and print the result.
    if not args.url:
        logger.info("Starting Flask server on http://%s:%s/ (API mode)", args.host, args.port)
        app.run(host=args.host, port=args.port, debug=False)
        return 0

    try:
        result = run_analysis(args.url, config=current_config)
    except ValidationError as ve:
        logger.error("Error: %s", ve)
        return 2

    report = result.to_dict()
    print(json.dumps(report, indent=2, ensure_ascii=False))
    if args.save:
        save_report_to_file(report)
    return 0


if __name__ == "__main__":
    raise SystemExit(run_cli())
