"""24-bit colours and blending between them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator


def _a_byte(valor: float) -> int:
    """Truncate towards zero and keep the result inside a byte."""
    return min(255, max(0, int(valor)))


@dataclass(frozen=True)
class Color:
    """An RGB colour with one byte per channel."""

    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        for canal in self:
            if not 0 <= canal <= 255:
                raise ValueError(f"canal de color fuera de rango: {canal}")

    def __iter__(self) -> Iterator[int]:
        yield self.r
        yield self.g
        yield self.b

    def mezcla(self, otro: "Color", porcentaje: float) -> "Color":
        """Blend towards this colour: 1.0 gives self, 0.0 gives otro."""
        return Color(
            *(
                _a_byte(canal_otro + porcentaje * (canal - canal_otro))
                for canal, canal_otro in zip(self, otro)
            )
        )


NEGRO = Color(0, 0, 0)