"""Pointer-reactive tile background.

A decorative grid of rounded tiles that drift away from the pointer and
spring back. It knows nothing about tasks; a UI mounts it on any drawing
surface and calls ``step()`` and ``render()`` once per frame.
"""

import math
import random
from dataclasses import dataclass, field
from typing import Protocol

TILE_COLORS: tuple[str, ...] = (
    "rgba(255, 255, 255, 0.9)",
    "rgba(255, 255, 255, 0.85)",
    "rgba(245, 243, 255, 0.95)",
    "rgba(237, 233, 254, 0.9)",
)

INFLUENCE_RADIUS = 250.0
PUSH_STRENGTH = 15.0
LIFT_STRENGTH = 30.0
SCALE_STRENGTH = 0.15
ROTATION_STRENGTH = 0.08
DAMPING = 0.88
SCALE_EASING = 0.12


@dataclass(frozen=True)
class TileShadow:
    """Drop shadow under a tile; lifted tiles cast longer, softer, darker ones."""

    blur: float
    offset_y: float
    alpha: float

    def lifted(self, lift: float) -> "TileShadow":
        return TileShadow(
            blur=self.blur + lift * 0.3,
            offset_y=self.offset_y + lift * 0.5,
            alpha=self.alpha * (1 + lift / 50),
        )


TILE_SHADOWS: tuple[TileShadow, ...] = (
    TileShadow(blur=20, offset_y=8, alpha=0.1),
    TileShadow(blur=25, offset_y=10, alpha=0.12),
    TileShadow(blur=30, offset_y=12, alpha=0.08),
)


class DrawingSurface(Protocol):
    """Anything a tile field can be drawn on."""

    width: int
    height: int

    def draw_tile(
        self,
        x: float,
        y: float,
        size: float,
        scale: float,
        rotation: float,
        color: str,
        shadow: TileShadow,
    ) -> None: ...


@dataclass
class Tile:
    base_x: float
    base_y: float
    color: str
    shadow: TileShadow
    offset_x: float = 0.0
    offset_y: float = 0.0
    offset_z: float = 0.0
    scale: float = 1.0
    rotation: float = 0.0

    @property
    def x(self) -> float:
        return self.base_x + self.offset_x

    @property
    def y(self) -> float:
        return self.base_y + self.offset_y

    @property
    def current_shadow(self) -> TileShadow:
        return self.shadow.lifted(self.offset_z)


@dataclass
class TileField:
    """Grid of tiles covering a surface plus a one-tile margin on every side."""

    width: int
    height: int
    tile_size: int = 120
    gap: int = 20
    rng: random.Random = field(default_factory=random.Random)
    tiles: list[Tile] = field(init=False, default_factory=list)
    pointer: tuple[float, float] | None = field(init=False, default=None)
    surface: DrawingSurface | None = field(init=False, default=None)

    def __post_init__(self) -> None:
        self._layout()

    @classmethod
    def compact(cls, width: int, height: int, rng: random.Random | None = None) -> "TileField":
        """Larger, sparser tiles for small touch screens."""
        return cls(width, height, tile_size=150, gap=25, rng=rng or random.Random())

    @property
    def pitch(self) -> int:
        return self.tile_size + self.gap

    @property
    def columns(self) -> int:
        return math.ceil(self.width / self.pitch) + 2

    @property
    def rows(self) -> int:
        return math.ceil(self.height / self.pitch) + 2

    def _layout(self) -> None:
        self.tiles = [
            Tile(
                base_x=col * self.pitch,
                base_y=row * self.pitch,
                color=self.rng.choice(TILE_COLORS),
                shadow=self.rng.choice(TILE_SHADOWS),
            )
            for row in range(-1, self.rows)
            for col in range(-1, self.columns)
        ]

    def resize(self, width: int, height: int) -> None:
        """Rebuild the grid for new surface dimensions."""
        self.width = width
        self.height = height
        self._layout()

    def mount(self, surface: DrawingSurface) -> None:
        """Attach to a surface and size the grid to it."""
        self.surface = surface
        self.resize(surface.width, surface.height)

    def pointer_moved(self, x: float, y: float) -> None:
        self.pointer = (x, y)

    def pointer_left(self) -> None:
        self.pointer = None

    def step(self) -> None:
        """Advance the animation by one frame."""
        half = self.tile_size / 2
        for tile in self.tiles:
            if self.pointer is not None:
                dx = self.pointer[0] - (tile.base_x + half)
                dy = self.pointer[1] - (tile.base_y + half)
                distance = math.hypot(dx, dy)
                if distance < INFLUENCE_RADIUS:
                    force = (INFLUENCE_RADIUS - distance) / INFLUENCE_RADIUS
                    angle = math.atan2(dy, dx)
                    tile.offset_x -= math.cos(angle) * force * PUSH_STRENGTH
                    tile.offset_y -= math.sin(angle) * force * PUSH_STRENGTH
                    tile.offset_z = force * LIFT_STRENGTH
                    tile.scale = 1 + force * SCALE_STRENGTH
                    tile.rotation = force * math.sin(angle) * ROTATION_STRENGTH

            # spring back toward rest
            tile.offset_x *= DAMPING
            tile.offset_y *= DAMPING
            tile.offset_z *= DAMPING
            tile.scale += (1 - tile.scale) * SCALE_EASING
            tile.rotation *= DAMPING

    def render(self) -> None:
        """Draw every tile on the mounted surface."""
        if self.surface is None:
            raise RuntimeError("TileField not mounted. Call mount() first.")
        for tile in self.tiles:
            self.surface.draw_tile(
                tile.x,
                tile.y,
                self.tile_size,
                tile.scale,
                tile.rotation,
                tile.color,
                tile.current_shadow,
            )
