"""Terminal actions available inside a test case body.

``passed()`` and ``fail()`` build outcome values meant to be returned from
the case::

    @unit
    def test_double():
        for i in range(1000):
            if double(i) != 2 * i:
                return fail()

``assert_true()`` and ``assert_false()`` stop the case on the spot when the
check does not hold, recording the literal source text of the condition::

    @unit
    def test_two_plus_two():
        assert_true(2 + 2 == 4)
"""

from __future__ import annotations

import ast
import inspect
import linecache
import logging
from types import FrameType

from microunit.errors import CaseFailed
from microunit.outcome import Failure, Success

logger = logging.getLogger("microunit.assertions")

_UNAVAILABLE = "<source unavailable>"


def passed() -> Success:
    """Pass the test case. Use as ``return passed()``."""
    return Success()


def fail(message: str = "") -> Failure:
    """Fail the test case. Use as ``return fail()``."""
    return Failure(message=message)


def assert_true(condition: object, message: str | None = None) -> None:
    """Fail and stop the test case if ``condition`` is falsy."""
    if not condition:
        _halt("assert_true", message, inspect.currentframe())


def assert_false(condition: object, message: str | None = None) -> None:
    """Fail and stop the test case if ``condition`` is truthy."""
    if condition:
        _halt("assert_false", message, inspect.currentframe())


def _halt(helper: str, message: str | None, frame: FrameType | None) -> None:
    caller = frame.f_back if frame is not None else None
    try:
        text = message if message is not None else condition_text(helper, caller)
    finally:
        del frame, caller
    logger.debug(f"{helper} failed: {text}")
    raise CaseFailed(Failure(condition=text))


def condition_text(helper: str, frame: FrameType | None) -> str:
    """Return the source text of the first argument passed to ``helper``.

    The exact call is located from the frame's current instruction position
    where the interpreter records one. Otherwise the calling line is scanned
    for the first ``helper(`` call, falling back to the whole stripped line,
    and to a placeholder when no source is available (e.g. code typed into a
    REPL).
    """
    if frame is None:
        return _UNAVAILABLE
    call = call_source(frame)
    if call is not None:
        argument = first_argument(call)
        if argument is not None:
            return argument
    info = inspect.getframeinfo(frame, context=1)
    if not info.code_context:
        return _UNAVAILABLE
    line = info.code_context[0].strip()
    return extract_argument(line, helper) or line


def call_source(frame: FrameType) -> str | None:
    """Source text of the call expression ``frame`` is currently executing.

    Needs instruction positions (Python 3.11+, not disabled with
    ``-X no_debug_ranges``). Returns None when they are unavailable.
    """
    code = frame.f_code
    if not hasattr(code, "co_positions"):
        return None
    positions = list(code.co_positions())
    index = frame.f_lasti // 2
    if not 0 <= index < len(positions):
        return None
    lineno, end_lineno, col, end_col = positions[index]
    if None in (lineno, end_lineno, col, end_col):
        return None
    lines = linecache.getlines(code.co_filename, frame.f_globals)
    if end_lineno > len(lines):
        return None
    # column offsets are in UTF-8 bytes
    chunk = [line.encode("utf-8") for line in lines[lineno - 1 : end_lineno]]
    if len(chunk) == 1:
        text = chunk[0][col:end_col]
    else:
        text = chunk[0][col:] + b"".join(chunk[1:-1]) + chunk[-1][:end_col]
    return text.decode("utf-8", errors="replace")


def first_argument(call: str) -> str | None:
    """Source text of the first positional argument of the call in ``call``.

    >>> first_argument("assert_true(\\n    x == 1,\\n)")
    'x == 1'
    """
    call = call.strip()
    try:
        tree = ast.parse(call, mode="eval")
    except SyntaxError:
        return None
    node = tree.body
    if not isinstance(node, ast.Call) or not node.args:
        return None
    segment = ast.get_source_segment(call, node.args[0])
    if segment is None:
        return None
    return " ".join(part.strip() for part in segment.splitlines())


def extract_argument(line: str, helper: str) -> str | None:
    """Pull the first call argument of ``helper(...)`` out of ``line``.

    >>> extract_argument("assert_true(len(xs) == 2, 'sizes')", "assert_true")
    'len(xs) == 2'
    """
    start = line.find(f"{helper}(")
    if start < 0:
        return None
    i = start + len(helper) + 1
    depth = 0
    quote: str | None = None
    begin = i
    while i < len(line):
        ch = line[i]
        if quote:
            if ch == "\\":
                i += 1
            elif ch == quote:
                quote = None
        elif ch in "'\"":
            quote = ch
        elif ch in "([{":
            depth += 1
        elif ch in ")]}":
            if depth == 0:
                return line[begin:i].strip() or None
            depth -= 1
        elif ch == "," and depth == 0:
            return line[begin:i].strip() or None
        i += 1
    # call continues on the next line
    return line[begin:].strip() or None
