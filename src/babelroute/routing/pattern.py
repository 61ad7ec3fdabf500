"""Route template compilation.

Turns a user-written route template such as ``/user/([0-9]+)/`` into an
anchored regular expression. Templates are regular expressions already;
compilation only normalizes the surrounding slashes, makes the slash in
front of an optional group optional, and prepends the language prefix.
"""

import re

from babelroute.errors import InvalidRoutePattern


def _group_spans(regex: str) -> list[tuple[int, int]]:
    """Return ``(open, close)`` indexes of every balanced group in *regex*.

    Escaped parentheses and parentheses inside character classes are not
    groups. Unbalanced input yields the groups that did close; ``re``
    reports the error itself at compile time.
    """
    spans: list[tuple[int, int]] = []
    stack: list[int] = []
    escaped = False
    class_start = -1

    for i, ch in enumerate(regex):
        if escaped:
            escaped = False
            continue
        if ch == "\\":
            escaped = True
            continue
        if class_start >= 0:
            # "]" right after "[" or "[^" is a literal
            if ch == "]" and i > class_start + 1 and regex[class_start + 1 : i] != "^":
                class_start = -1
            continue
        if ch == "[":
            class_start = i
        elif ch == "(":
            stack.append(i)
        elif ch == ")" and stack:
            spans.append((stack.pop(), i))

    return spans


def _is_capturing(regex: str, start: int) -> bool:
    if regex.startswith("(?P<", start):
        return True
    return not regex.startswith("(?", start)


def fold_optional_slashes(regex: str) -> str:
    """Make the ``/`` in front of each optional capturing group optional.

    ``/([a-z]+)?/reviews/`` becomes ``/?([a-z]+)?/reviews/`` so that
    ``/reviews/`` matches without the leading segment. Only a slash
    directly adjacent to the group is folded.
    """
    folds = [
        start - 1
        for start, end in _group_spans(regex)
        if start > 0
        and regex[start - 1] == "/"
        and regex[end + 1 : end + 2] == "?"
        and _is_capturing(regex, start)
    ]
    for pos in sorted(folds, reverse=True):
        regex = regex[: pos + 1] + "?" + regex[pos + 1 :]
    return regex


def format_route_regex(template: str) -> str:
    """Normalize a route template to its regex body.

    Examples::

        "about"              -> "/about/"
        "/about/"            -> "/about/"
        ""                   -> "/"
        "/([a-z]+)?/reviews" -> "/?([a-z]+)?/reviews/"
    """
    trimmed = template.strip("/")
    regex = f"/{trimmed}/" if trimmed else "/"
    return fold_optional_slashes(regex)


def lang_prefix(lang: str) -> str:
    """Literal regex prefix that addresses *lang* in a URI, e.g. ``/es``."""
    return "/" + re.escape(lang)


def compile_route_pattern(
    template: str,
    prefix: str = "",
    *,
    case_sensitive: bool = True,
) -> tuple[str, re.Pattern[str]]:
    """Compile *template* into ``(regex_source, pattern)``.

    The pattern is meant to be used with ``fullmatch``, which anchors it at
    both ends. *prefix* is prepended verbatim (see ``lang_prefix``).

    Raises ``InvalidRoutePattern`` if the result is not a valid regex.
    """
    regex = prefix + format_route_regex(template)
    flags = 0 if case_sensitive else re.IGNORECASE
    try:
        pattern = re.compile(regex, flags)
    except re.error as exc:
        raise InvalidRoutePattern(template, regex, str(exc)) from exc
    return regex, pattern
