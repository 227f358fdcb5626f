import json
from typing import Any, Callable, List, Optional

# Rewrites tried in order when the text is not canonical JSON. The server
# sometimes returns a Python-repr style object ('single' quotes) or a JSON
# document that was escaped once or twice more than it should have been.
_REWRITES: List[Callable[[str], str]] = [
    lambda s: s,
    lambda s: s.replace("'", '"'),
    lambda s: s.replace('\\"', '"'),
    lambda s: s.replace('\\\\"', '"'),
]


def parse_json_lenient(raw: str) -> Optional[Any]:
    """Try strict JSON, then a few quote rewrites; None if nothing parses.

    The single-quote rewrite does not care about apostrophes inside values,
    so "it's" turns into broken JSON and the next rewrite gets its turn.
    The last rewrite collapses a doubled escape (\\\\" -> "), so text escaped
    twice still decodes here instead of being left to the regex scrape.
    """
    for rewrite in _REWRITES:
        try:
            return json.loads(rewrite(raw))
        except (RecursionError, TypeError, ValueError):
            continue
    return None
