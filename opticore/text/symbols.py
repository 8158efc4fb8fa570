"""Lookup tables for the equation normalizer."""

__all__ = ["SYMBOLS", "SUBSCRIPTS", "SUPERSCRIPTS", "to_subscript", "to_superscript"]

# LaTeX command -> Unicode replacement
SYMBOLS = {
    # Greek letters
    "\\alpha": "α",
    "\\beta": "β",
    "\\gamma": "γ",
    "\\delta": "δ",
    "\\Delta": "Δ",
    "\\epsilon": "ε",
    "\\theta": "θ",
    "\\lambda": "λ",
    "\\mu": "μ",
    "\\pi": "π",
    "\\rho": "ρ",
    "\\sigma": "σ",
    "\\tau": "τ",
    "\\phi": "φ",
    "\\psi": "ψ",
    "\\omega": "ω",
    "\\Omega": "Ω",
    # Function names
    "\\sin": "sin",
    "\\cos": "cos",
    "\\tan": "tan",
    "\\arcsin": "arcsin",
    "\\arccos": "arccos",
    "\\arctan": "arctan",
    "\\ln": "ln",
    "\\log": "log",
    # Operators and relations
    "\\approx": "≈",
    "\\cdot": "·",
    "\\times": "×",
    "\\le": "≤",
    "\\ge": "≥",
    "\\pm": "±",
    "\\mp": "∓",
    "\\infty": "∞",
    "\\to": "→",
    "\\rightarrow": "→",
    "\\leftarrow": "←",
    "\\degree": "°",
    "\\circ": "°",
    # Calculus
    "\\int": "∫",
    "\\oint": "∮",
    "\\sum": "Σ",
    "\\partial": "∂",
    "\\nabla": "∇",
}

SUBSCRIPTS = {
    "0": "₀", "1": "₁", "2": "₂", "3": "₃", "4": "₄",
    "5": "₅", "6": "₆", "7": "₇", "8": "₈", "9": "₉",
    "+": "₊", "-": "₋", "=": "₌", "(": "₍", ")": "₎",
    "a": "ₐ", "e": "ₑ", "h": "ₕ", "i": "ᵢ", "k": "ₖ", "l": "ₗ", "m": "ₘ",
    "n": "ₙ", "o": "ₒ", "p": "ₚ", "r": "ᵣ", "s": "ₛ", "t": "ₜ", "u": "ᵤ",
    "v": "ᵥ", "x": "ₓ",
}

SUPERSCRIPTS = {
    "0": "⁰", "1": "¹", "2": "²", "3": "³", "4": "⁴",
    "5": "⁵", "6": "⁶", "7": "⁷", "8": "⁸", "9": "⁹",
    "+": "⁺", "-": "⁻", "=": "⁼", "(": "⁽", ")": "⁾",
    "n": "ⁿ", "i": "ⁱ", "x": "ˣ", "y": "ʸ",
}


def _convert(text: str, table: dict):
    if not text or any(c not in table for c in text):
        return None
    return "".join(table[c] for c in text)


def to_subscript(text: str):
    """Unicode subscript form of ``text``, or None if any char is unmapped."""
    return _convert(text, SUBSCRIPTS)


def to_superscript(text: str):
    """Unicode superscript form of ``text``, or None if any char is unmapped."""
    return _convert(text, SUPERSCRIPTS)
