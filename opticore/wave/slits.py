"""Slit aperture configuration for diffraction/interference patterns."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from ..utils.validation import coerce_enum

__all__ = [
    "SlitMode",
    "SlitConfig",
    "DEFAULT_SEPARATION_MARGIN",
    "clamp_slit_separation",
]

# Minimum gap kept between slit width and separation when clamping (m).
DEFAULT_SEPARATION_MARGIN = 5e-6


class SlitMode(str, Enum):
    SINGLE = "single"
    DOUBLE = "double"


@dataclass(frozen=True)
class SlitConfig:
    """Immutable slit and screen parameters.

    All lengths are in metres.

    Attributes:
        wavelength: Light wavelength λ.
        slit_width: Width a of each slit.
        screen_distance: Slit-to-screen distance L.
        slit_separation: Centre-to-centre separation d. Required in
            double mode, where it must exceed the slit width.
        mode: Single or double slit.

    Example:
        ```python
        cfg = SlitConfig.from_lab_units(
            wavelength_nm=532, slit_width_um=10, slit_separation_um=40
        )
        ```
    """

    wavelength: float
    slit_width: float
    screen_distance: float = 1.0
    slit_separation: Optional[float] = None
    mode: Union[SlitMode, str] = SlitMode.DOUBLE

    def __post_init__(self) -> None:
        """Validate and coerce the mode."""
        mode = coerce_enum(SlitMode, self.mode)
        object.__setattr__(self, "mode", mode)

        if self.wavelength <= 0:
            raise ValueError(f"Wavelength must be positive, got {self.wavelength}")
        if self.slit_width <= 0:
            raise ValueError(f"Slit width must be positive, got {self.slit_width}")
        if self.screen_distance <= 0:
            raise ValueError(
                f"Screen distance must be positive, got {self.screen_distance}"
            )
        if mode is SlitMode.DOUBLE:
            if self.slit_separation is None:
                raise ValueError("Double slit requires a slit separation")
            if self.slit_separation <= self.slit_width:
                raise ValueError(
                    f"Slit separation ({self.slit_separation}) must exceed "
                    f"slit width ({self.slit_width})"
                )

    @classmethod
    def from_lab_units(
        cls,
        wavelength_nm: float,
        slit_width_um: float,
        slit_separation_um: Optional[float] = None,
        screen_distance_m: float = 1.0,
        mode: Union[SlitMode, str] = SlitMode.DOUBLE,
    ) -> "SlitConfig":
        """Build a config from bench units (nm, μm, μm, m)."""
        separation = None if slit_separation_um is None else slit_separation_um * 1e-6
        return cls(
            wavelength=wavelength_nm * 1e-9,
            slit_width=slit_width_um * 1e-6,
            screen_distance=screen_distance_m,
            slit_separation=separation,
            mode=mode,
        )

    @property
    def is_double(self) -> bool:
        return self.mode is SlitMode.DOUBLE


def clamp_slit_separation(
    slit_width: float,
    slit_separation: float,
    margin: float = DEFAULT_SEPARATION_MARGIN,
) -> float:
    """Keep a slit separation at least ``margin`` above the slit width.

    Interactive callers clamp instead of rejecting: any separation below
    ``slit_width + margin`` is raised to that value.

    Args:
        slit_width: Slit width a.
        slit_separation: Requested separation d.
        margin: Minimum gap between width and separation. Must be positive.

    Returns:
        ``max(slit_separation, slit_width + margin)``, always strictly
        greater than ``slit_width``.
    """
    if margin <= 0:
        raise ValueError(f"Margin must be positive, got {margin}")
    return max(slit_separation, slit_width + margin)
