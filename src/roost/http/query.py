"""Query string parsing.

Turns the raw text after ``?`` into a plain dict. A key that appears
once maps to its string value; a repeated key maps to the list of all
its values, in order.
"""

from typing import TypeAlias
from urllib.parse import parse_qs

QueryValue: TypeAlias = str | list[str]


def parse_query(raw: str) -> dict[str, QueryValue]:
    """Parse a raw query string (without the leading ``?``).

    Blank values are kept (``"a=&b"`` gives ``{"a": "", "b": ""}``).
    Malformed pairs are handled by :func:`urllib.parse.parse_qs`'s own
    best-effort rules; nothing is validated here.

    Examples::

        parse_query("active=true")        -> {"active": "true"}
        parse_query("tag=a&tag=b&q=x")    -> {"tag": ["a", "b"], "q": "x"}
        parse_query("")                   -> {}
    """
    if not raw:
        return {}
    parsed = parse_qs(raw, keep_blank_values=True)
    return {key: values[0] if len(values) == 1 else values for key, values in parsed.items()}
