"""Route template compilation.

A template is a slash-separated path where any segment may carry a
parameter marker, ``:name`` or ``%name``. The ``%`` form exists for
filesystems that reject ``:`` in file names, so ``users/%id.py`` and
``path = "/users/:id"`` describe the same route.

Examples::

    "/users"            -> ^/users(?:\\?(?P<query>.*)|\\Z)
    "/users/:id"        -> ^/users/([^?/]+)(?:\\?(?P<query>.*)|\\Z)
    "/widgets/index"    -> ^/widgets(?:/(?:[:%]?index)?)?(?:\\?(?P<query>.*)|\\Z)

Matching is anchored at the start, case-insensitive, and stops at the
first ``?``; whatever follows it is parsed as the query string.
"""

import re
from dataclasses import dataclass

from roost.http.query import parse_query
from roost.routing.route import RouteMatch

# A marker runs until the next "/" (so ":id.json" names the param "id.json")
_PARAM_RE = re.compile(r"[:%]([^/]+)")

# One capture group per parameter; never crosses a segment or the query
_CAPTURE = r"([^?/]+)"

# Optional trailing index segment: "", "/", "/index", "/:index", "/%index"
_OPTIONAL_INDEX = r"(?:/(?:[:%]?index)?)?"
_BARE_INDEX = r"(?:/?(?:[:%]?index)?)"

_QUERY_TAIL = r"(?:\?(?P<query>.*)|\Z)"

_INDEX = "index"


@dataclass(frozen=True, slots=True)
class RoutePattern:
    """A compiled route template.

    Attributes:
        template: The source template, verbatim.
        regex: Compiled matcher; one positional group per parameter,
            plus the named ``query`` group.
        param_names: Parameter names in capture-group order.
        is_index: True when the template's last segment is ``index``.
    """

    template: str
    regex: re.Pattern[str]
    param_names: tuple[str, ...]
    is_index: bool = False

    def match(self, url: str) -> RouteMatch | None:
        """Match a raw ``path[?query]`` string.

        Returns ``None`` when the URL doesn't match. Captured values are
        bound to names positionally; a repeated name keeps its last value.
        """
        m = self.regex.match(url)
        if m is None:
            return None
        params: dict[str, str] = {}
        for group, name in enumerate(self.param_names, start=1):
            params[name] = m.group(group)
        return RouteMatch(params=params, query=parse_query(m.group("query") or ""))


def compile_template(template: str) -> RoutePattern:
    """Compile a route template into a :class:`RoutePattern`.

    Markers are substituted left to right, so the n-th name in
    ``param_names`` is bound to the n-th capture group. Literal text is
    escaped and matched as-is.
    """
    pieces: list[str] = []
    names: list[str] = []
    pos = 0
    for m in _PARAM_RE.finditer(template):
        pieces.append(re.escape(template[pos : m.start()]))
        pieces.append(_CAPTURE)
        names.append(m.group(1))
        pos = m.end()
    tail = template[pos:]

    is_index = False
    prefix, sep, last = tail.rpartition("/")
    if last == _INDEX:
        # "/foo/index" -> "/foo" + optional index; a bare "index" is optional entirely
        is_index = True
        pieces.append(re.escape(prefix))
        pieces.append(_OPTIONAL_INDEX if sep else _BARE_INDEX)
    else:
        pieces.append(re.escape(tail))

    regex = re.compile("^" + "".join(pieces) + _QUERY_TAIL, re.IGNORECASE)
    return RoutePattern(
        template=template,
        regex=regex,
        param_names=tuple(names),
        is_index=is_index,
    )
