class AnalyzerError(Exception):
    """Base class for errors raised by the improvement analyzer."""


class ValidationError(AnalyzerError):
    """The request did not carry a usable URL."""


class FetchFailure(AnalyzerError):
    """The target page could not be retrieved (network error, timeout or non-2xx status)."""

    def __init__(self, url: str, message: str):
        super().__init__(f"Could not fetch {url}: {message}")
        self.url = url
        self.message = message
