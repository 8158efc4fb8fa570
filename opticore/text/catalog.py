"""Reference equations for each optics topic.

Each entry keeps its LaTeX source; ``render_catalog`` turns a topic's
equations into plain text with ``normalize_equation``.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Tuple, Union

from .equation import normalize_equation

__all__ = ["Topic", "CatalogEquation", "EQUATIONS", "render_catalog", "find_equation"]


class Topic(str, Enum):
    LENSES_MIRRORS = "Lenses & Mirrors"
    INTERFERENCE = "Interference & Diffraction"
    REFRACTION = "Reflection & Refraction"


@dataclass(frozen=True)
class CatalogEquation:
    """A named reference equation.

    Attributes:
        name: Short title.
        latex: LaTeX source.
        description: One-line technical description.
        simple: Plain-language explanation.
    """

    name: str
    latex: str
    description: str
    simple: str

    @property
    def text(self) -> str:
        """Unicode rendering of ``latex``."""
        return normalize_equation(self.latex)


EQUATIONS: Dict[Topic, Tuple[CatalogEquation, ...]] = {
    Topic.REFRACTION: (
        CatalogEquation(
            "Snell's Law",
            r"n_1 \sin\theta_1 = n_2 \sin\theta_2",
            "Relationship between angles of incidence and refraction.",
            "Light bends when changing mediums. Higher 'n' means smaller angle.",
        ),
        CatalogEquation(
            "Index of Refraction",
            r"n = \frac{c}{v}",
            "Ratio of speed of light in vacuum to medium.",
            "How much slower light travels in a material.",
        ),
        CatalogEquation(
            "Critical Angle",
            r"\sin\theta_c = \frac{n_2}{n_1}",
            "For internal reflection (n1 > n2).",
            "The angle where light gets trapped inside the denser material.",
        ),
        CatalogEquation(
            "Prism Deviation",
            r"\delta = \theta_1 + \theta_{2} - A",
            "Total angular deviation through a prism.",
            "Total bending of a light ray through a prism.",
        ),
        CatalogEquation(
            "Apparent Depth (Slab)",
            r"d' = d \frac{n_2}{n_1}",
            "Apparent shift in depth when viewing through a medium.",
            "Objects look closer when underwater or in glass.",
        ),
    ),
    Topic.LENSES_MIRRORS: (
        CatalogEquation(
            "Lens/Mirror Equation",
            r"\frac{1}{p} + \frac{1}{q} = \frac{1}{f}",
            "Relates object (p), image (q), and focal length (f).",
            "Calculates where the image forms.",
        ),
        CatalogEquation(
            "Magnification",
            r"m = -\frac{q}{p} = \frac{h_i}{h_o}",
            "Ratio of image height to object height.",
            "Negative m means inverted. |m| > 1 means bigger.",
        ),
        CatalogEquation(
            "Lens Power",
            r"P = \frac{1}{f}",
            "Optical power measured in Diopters (m⁻¹).",
            "Stronger lenses have shorter focal lengths.",
        ),
        CatalogEquation(
            "Lens Maker's Eq",
            r"\frac{1}{f} = (n-1)\left(\frac{1}{R_1} - \frac{1}{R_2}\right)",
            "Focal length based on curvature.",
            "Determines f based on the lens shape and material.",
        ),
        CatalogEquation(
            "Two-Lens System",
            r"\frac{1}{f_{eff}} = \frac{1}{f_1} + \frac{1}{f_2} - \frac{d}{f_1 f_2}",
            "Effective focal length of two separated lenses.",
            "How two lenses work together (like in a microscope).",
        ),
    ),
    Topic.INTERFERENCE: (
        CatalogEquation(
            "Double-Slit Maxima",
            r"d \sin\theta = m\lambda",
            "Condition for constructive interference (Bright spots).",
            "Where peaks meet peaks (Bright Fringes).",
        ),
        CatalogEquation(
            "Single-Slit Minima",
            r"a \sin\theta = m\lambda",
            "Condition for destructive diffraction (Dark spots).",
            "Where the wave cancels itself out (Dark spots).",
        ),
        CatalogEquation(
            "Thin Film (Constructive)",
            r"2t = (m + \frac{1}{2})\frac{\lambda}{n}",
            "Phase shift assumed (1 hard reflection).",
            "Why soap bubbles look colorful.",
        ),
        CatalogEquation(
            "Resolution (Rayleigh)",
            r"\theta_{min} = \frac{1.22\lambda}{D}",
            "Minimum angular separation.",
            "The limit of detail a lens can resolve.",
        ),
    ),
}


def render_catalog(topic: Union[Topic, str]) -> List[Tuple[str, str]]:
    """Plain-text renderings of every equation in a topic.

    Args:
        topic: Topic member or its display value.

    Returns:
        List of (name, rendered text) pairs in catalog order.
    """
    return [(eq.name, eq.text) for eq in EQUATIONS[Topic(topic)]]


def find_equation(name: str) -> CatalogEquation:
    """Look up a catalog equation by name (case-insensitive)."""
    key = name.casefold()
    for equations in EQUATIONS.values():
        for eq in equations:
            if eq.name.casefold() == key:
                return eq
    raise KeyError(f"No catalog equation named {name!r}")
