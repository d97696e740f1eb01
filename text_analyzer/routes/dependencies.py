from fastapi import Request

from text_analyzer.services.analyzer import TextAnalyzer
from text_analyzer.services.cache import ResultCache


# The app factory puts one analyzer and one cache on app.state at startup;
# handlers receive them through these dependencies.

def get_analyzer(request: Request) -> TextAnalyzer:
    return request.app.state.analyzer


def get_cache(request: Request) -> ResultCache:
    return request.app.state.cache
