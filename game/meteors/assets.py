"""
Asset bundle: sprite extents, textures and the fire sound cue.

The bundle is built once at startup and handed to the simulation. Only the
loader touches arcade, so training and tests can run on a headless bundle.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional, Protocol, Tuple


class AudioCue(Protocol):
    """Pre-decoded sound that can be restarted from the beginning"""

    def rewind(self) -> None: ...

    def play(self) -> None: ...


class SilentCue:
    """Audio cue that only counts how often it was played"""

    def __init__(self):
        self.plays = 0
        self.rewinds = 0

    def rewind(self) -> None:
        self.rewinds += 1

    def play(self) -> None:
        self.plays += 1


class ArcadeSoundCue:
    """Wraps an ``arcade.Sound``; each play restarts the sound"""

    def __init__(self, sound, volume: float = 1.0):
        self.sound = sound
        self.volume = volume
        self._player = None

    def rewind(self) -> None:
        if self._player is not None:
            self.sound.stop(self._player)
            self._player = None

    def play(self) -> None:
        self._player = self.sound.play(volume=self.volume)


@dataclass(frozen=True)
class SpriteInfo:
    """Sprite extents plus an optional texture handle for the renderer"""
    width: float
    height: float
    texture: Any = None
    name: str = ""

    @property
    def half_width(self) -> float:
        return self.width / 2

    @property
    def half_height(self) -> float:
        return self.height / 2


@dataclass(frozen=True)
class AssetBundle:
    player: SpriteInfo
    laser: SpriteInfo
    meteors: Tuple[SpriteInfo, ...]
    fire_cue: Any = field(default_factory=SilentCue)
    font_name: Optional[str] = None

    def __post_init__(self):
        if not self.meteors:
            raise ValueError("AssetBundle needs at least one meteor sprite")


# Extents of the stock Kenney space-shooter sprites
PLAYER_SIZE = (99, 75)
LASER_SIZE = (9, 54)
METEOR_SIZES = ((101, 84), (120, 98), (89, 82), (98, 96))


def headless_assets() -> AssetBundle:
    """Bundle with stock sprite sizes, no textures and a silent cue"""
    return AssetBundle(
        player=SpriteInfo(*PLAYER_SIZE, name="player"),
        laser=SpriteInfo(*LASER_SIZE, name="laser"),
        meteors=tuple(
            SpriteInfo(w, h, name=f"meteor{i}") for i, (w, h) in enumerate(METEOR_SIZES)
        ),
        fire_cue=SilentCue(),
    )


def find_assets_root() -> Path:
    """Return the path to the ``assets`` directory.

    Looks next to a PyInstaller bundle first, then walks up from this file.

    :raises FileNotFoundError: If the assets directory cannot be found.
    """
    # pylint: disable=protected-access
    if hasattr(sys, "_MEIPASS"):
        candidate = Path(sys._MEIPASS) / "assets"
        if candidate.is_dir():
            return candidate
    # pylint: enable=protected-access

    here = Path(__file__).resolve()
    for parent in here.parents:
        candidate = parent / "assets"
        if candidate.is_dir():
            return candidate

    raise FileNotFoundError("Could not locate 'assets' directory.")


def _require(path: Path) -> Path:
    if not path.is_file():
        raise FileNotFoundError(f"Missing asset: {path}")
    return path


def _load_sprite(path: Path) -> SpriteInfo:
    import arcade

    texture = arcade.load_texture(_require(path))
    return SpriteInfo(texture.width, texture.height, texture=texture, name=path.stem)


def load_assets(root: Optional[Path] = None, font_name: str = "Kenney Future") -> AssetBundle:
    """Load every sprite, the laser sound and the score font from ``root``.

    Any missing file aborts loading; the game is meaningless without it.
    """
    root = Path(root) if root is not None else find_assets_root()
    if not root.is_dir():
        raise FileNotFoundError(f"Assets directory not found: {root}")

    meteor_paths = sorted((root / "meteors").glob("*.png"))
    if not meteor_paths:
        raise FileNotFoundError(f"No meteor sprites in {root / 'meteors'}")
    for name in ("player.png", "laser.png", "laser.ogg", "font.ttf"):
        _require(root / name)

    import arcade

    arcade.load_font(_require(root / "font.ttf"))
    sound = arcade.load_sound(_require(root / "laser.ogg"))

    return AssetBundle(
        player=_load_sprite(root / "player.png"),
        laser=_load_sprite(root / "laser.png"),
        meteors=tuple(_load_sprite(p) for p in meteor_paths),
        fire_cue=ArcadeSoundCue(sound),
        font_name=font_name,
    )
