"""Textures: colour as a function of surface coordinates."""

from __future__ import annotations

import os
from abc import ABC, abstractmethod
from dataclasses import dataclass

import numpy as np
from PIL import Image

from raypath.rng import clamp
from raypath.vec import Vec3

_COLOR_SCALE = 1.0 / 255.0


class Texture(ABC):
    """A colour lookup at texture coordinates (u, v) and point p."""

    @abstractmethod
    def value(self, u: float, v: float, p: Vec3) -> Vec3:
        """Colour at the given coordinates."""


@dataclass(frozen=True)
class SolidColor(Texture):
    """The same colour everywhere."""

    color: Vec3

    def value(self, u: float, v: float, p: Vec3) -> Vec3:
        return self.color


class ImageTexture(Texture):
    """An RGB image sampled by (u, v), with v = 0 at the bottom row."""

    def __init__(self, data: np.ndarray | None = None, path: str = "") -> None:
        self.data = data
        self.path = path

    @property
    def width(self) -> int:
        return 0 if self.data is None else int(self.data.shape[1])

    @property
    def height(self) -> int:
        return 0 if self.data is None else int(self.data.shape[0])

    @classmethod
    def load(cls, path: str | os.PathLike[str]) -> ImageTexture:
        """Read an image file, flipped so that row 0 is the bottom."""
        with Image.open(path) as img:
            rgb = img.convert("RGB").transpose(Image.Transpose.FLIP_TOP_BOTTOM)
            data = np.asarray(rgb, dtype=np.uint8).copy()
        return cls(data, str(path))

    def value(self, u: float, v: float, p: Vec3) -> Vec3:
        # Without image data, solid cyan makes the gap visible.
        if self.data is None:
            return Vec3(0.0, 1.0, 1.0)
        u = clamp(u, 0.0, 1.0)
        v = clamp(v, 0.0, 1.0)
        i = int(u * (self.width - 1))
        j = int(v * (self.height - 1))
        r, g, b = (int(c) for c in self.data[j, i, :3])
        return Vec3(_COLOR_SCALE * r, _COLOR_SCALE * g, _COLOR_SCALE * b)