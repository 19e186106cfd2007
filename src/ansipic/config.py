import argparse
from dataclasses import dataclass

from ansipic.charsets import DEFAULT, RAMPS


@dataclass(frozen=True)
class RenderOptions:
    width: int | None = None
    height: int | None = None
    alpha_threshold: int = 0
    ramp: str = DEFAULT
    colour: bool = True
    corrected: bool = False

    def __post_init__(self):
        if not 0 <= self.alpha_threshold <= 255:
            raise ValueError(f"Alpha threshold must be in 0-255, got {self.alpha_threshold}")
        if not self.ramp:
            raise ValueError("Glyph ramp must not be empty")

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> "RenderOptions":
        return cls(
            width=args.width,
            height=args.height,
            alpha_threshold=args.threshold,
            ramp=RAMPS[args.charset],
            colour=args.colour,
            corrected=args.corrected_luminance,
        )
