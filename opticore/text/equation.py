"""LaTeX to Unicode plain-text equation rendering.

Converts a small, fixed subset of LaTeX math (Greek letters, function
names, common operators, \\frac, \\sqrt, \\text, sub/superscripts) into a
single line of readable Unicode. There is no layout engine: this is an
approximate textual substitute for typesetting.

Pipeline:
    1. Strip spacing commands and \\left, \\right, \\mathrm, \\mathbf.
    2. Replace known commands with symbols (longest command first).
    3. Resolve structures innermost-first until nothing changes, at most
       MAX_PASSES times.
    4. Convert single-character sub/superscripts.
    5. Drop leftover braces and normalize whitespace.
    6. Polish simple fractions and parenthesized powers.

Unknown commands are passed through with their backslash so that
unsupported input stays visible. The function never raises.
"""

import re

from .symbols import SUBSCRIPTS, SUPERSCRIPTS, SYMBOLS, to_subscript, to_superscript

__all__ = ["MAX_PASSES", "normalize_equation"]

# Upper bound on structural resolution passes
MAX_PASSES = 10

_SPACING = re.compile(r"\\[,;!:]|\\ ")
_WHITESPACE = re.compile(r"\s+")
_WRAPPERS = re.compile(r"\\(?:left|right|mathrm|mathbf)(?![a-zA-Z])")
_SYMBOL = re.compile(
    "|".join(re.escape(k) for k in sorted(SYMBOLS, key=len, reverse=True))
)
_SINGLE_SUB = re.compile(r"_([a-zA-Z0-9])")
_SINGLE_SUP = re.compile(r"\^([a-zA-Z0-9])")
_BRACES = re.compile(r"[{}]")
# Operands are ASCII alphanumerics or the Greek and Coptic block
_SIMPLE_FRACTION = re.compile(
    r"\(([a-zA-Z0-9Ͱ-Ͽ]+)\)/\(([a-zA-Z0-9Ͱ-Ͽ]+)\)"
)
_PAREN_POWER = re.compile(r"\^\(([A-Za-z0-9])\)")


class _StructureScanner:
    """One left-to-right rewriting pass over a string.

    Only constructs whose brace groups contain no further braces are
    rewritten, so nested input resolves from the inside out over
    successive passes. Anything else is copied through unchanged.
    """

    def __init__(self, text: str):
        self.text = text
        self.pos = 0
        self.out = []

    def run(self) -> str:
        while self.pos < len(self.text):
            if not self._rewrite():
                self.out.append(self.text[self.pos])
                self.pos += 1
        return "".join(self.out)

    def _group(self, pos, open_ch="{", close_ch="}", skip_space=True):
        """Read a non-empty, brace-free group starting at ``pos``.

        Returns (content, end) where ``end`` is the index after the
        closing delimiter, or None if there is no such group.
        """
        text = self.text
        if skip_space:
            while pos < len(text) and text[pos].isspace():
                pos += 1
        if pos >= len(text) or text[pos] != open_ch:
            return None

        end = pos + 1
        while end < len(text) and text[end] not in "{}" and text[end] != close_ch:
            end += 1
        if end >= len(text) or text[end] != close_ch or end == pos + 1:
            return None
        return text[pos + 1 : end], end + 1

    def _emit(self, s: str, end: int) -> bool:
        self.out.append(s)
        self.pos = end
        return True

    def _rewrite(self) -> bool:
        ch = self.text[self.pos]
        if ch == "\\":
            return self._command()
        if ch == "_":
            return self._subscript()
        if ch == "^":
            return self._superscript()
        return False

    def _command(self) -> bool:
        text, pos = self.text, self.pos

        if text.startswith("\\text", pos):
            group = self._group(pos + 5)
            if group:
                return self._emit(group[0], group[1])

        elif text.startswith("\\sqrt", pos):
            group = self._group(pos + 5)
            if group:
                return self._emit(f"√({group[0]})", group[1])
            index = self._group(pos + 5, "[", "]")
            if index:
                group = self._group(index[1])
                if group:
                    return self._emit(f"root({index[0]}, {group[0]})", group[1])

        elif text.startswith("\\frac", pos):
            num = self._group(pos + 5)
            if num:
                den = self._group(num[1])
                if den:
                    return self._emit(f"({num[0]})/({den[0]})", den[1])

        return False

    def _subscript(self) -> bool:
        group = self._group(self.pos + 1, skip_space=False)
        if not group:
            return False
        inner, end = group
        converted = to_subscript(inner)
        return self._emit(converted if converted is not None else f"_{inner}", end)

    def _superscript(self) -> bool:
        group = self._group(self.pos + 1, skip_space=False)
        if not group:
            return False
        inner, end = group
        if inner == "°":
            return self._emit("°", end)
        converted = to_superscript(inner)
        return self._emit(converted if converted is not None else f"^({inner})", end)


def _resolve_structures(s: str, verbose: bool) -> str:
    for n_pass in range(1, MAX_PASSES + 1):
        rewritten = _StructureScanner(s).run()
        if verbose:
            print(f"  pass {n_pass:2d}: {rewritten}")
        if rewritten == s:
            if verbose:
                print(f"  Converged after {n_pass} passes.")
            return s
        s = rewritten

    if verbose:
        print(f"  Stopped at pass limit ({MAX_PASSES}).")
    return s


def normalize_equation(latex: str, verbose: bool = False) -> str:
    """Render a LaTeX math string as single-line Unicode text.

    Args:
        latex: LaTeX source, without surrounding $ delimiters.
        verbose: If True, print the string after each structural pass.

    Returns:
        Plain-text rendering. Malformed or unsupported input degrades to
        literal pass-through; no exception is raised.

    Example:
        >>> normalize_equation(r"\\frac{1}{p} + \\frac{1}{q} = \\frac{1}{f}")
        '1/p + 1/q = 1/f'
        >>> normalize_equation(r"n_1 \\sin\\theta_1 = n_2 \\sin\\theta_2")
        'n₁ sinθ₁ = n₂ sinθ₂'
    """
    s = _SPACING.sub(" ", latex)
    s = _WHITESPACE.sub(" ", s)
    s = _WRAPPERS.sub("", s)

    s = _SYMBOL.sub(lambda m: SYMBOLS[m.group(0)], s)

    if verbose:
        print(f"normalize_equation: {s!r}")
    s = _resolve_structures(s, verbose)

    s = _SINGLE_SUB.sub(lambda m: SUBSCRIPTS.get(m.group(1), m.group(0)), s)
    s = _SINGLE_SUP.sub(lambda m: SUPERSCRIPTS.get(m.group(1), m.group(0)), s)

    s = _BRACES.sub("", s)
    s = _WHITESPACE.sub(" ", s).strip()

    s = _SIMPLE_FRACTION.sub(r"\1/\2", s)
    # Mapped characters go straight to superscript so a rerun is a no-op
    s = _PAREN_POWER.sub(lambda m: SUPERSCRIPTS.get(m.group(1), "^" + m.group(1)), s)

    return s
