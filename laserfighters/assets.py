"""Loading and caching of textures and fonts."""

from typing import Callable, Optional, TypeVar

import pygame

_T = TypeVar("_T")


def _attempt(loader: Callable[..., _T], *args) -> Optional[_T]:
    """Call ``loader``; a file that cannot be read gives None."""
    try:
        return loader(*args)
    except (pygame.error, OSError):
        return None


def _open_font(path: Optional[str], size: int) -> pygame.font.Font:
    if not pygame.font.get_init():
        pygame.font.init()
    return pygame.font.Font(path, size)


class AssetManager:
    """Keeps loaded images and fonts by name so each is read from disk once."""

    def __init__(self) -> None:
        self._textures: dict[str, pygame.Surface] = {}
        self._font_paths: dict[str, str] = {}
        self._fonts: dict[tuple[str, int], pygame.font.Font] = {}

    def load_texture(self, name: str, file_name) -> None:
        """Load an image under ``name``; a file that cannot be read is ignored."""
        surface = _attempt(pygame.image.load, str(file_name))
        if surface is not None:
            self._textures[name] = surface

    def texture(self, name: str) -> pygame.Surface:
        """Return a loaded image; raises KeyError if none has that name."""
        return self._textures[name]

    def load_font(self, name: str, file_name) -> None:
        """Register a font file under ``name``; a file that cannot be read is ignored."""
        path = str(file_name)
        if _attempt(_open_font, path, 12) is None:
            return
        self._font_paths[name] = path
        self._fonts = {key: font for key, font in self._fonts.items() if key[0] != name}

    def font(self, name: str, size: int) -> pygame.font.Font:
        """Return the named font at ``size`` points; raises KeyError if unknown."""
        key = (name, size)
        if key not in self._fonts:
            self._fonts[key] = _open_font(self._font_paths[name], size)
        return self._fonts[key]