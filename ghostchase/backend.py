"""Window, drawing and keyboard access through pygame."""

from __future__ import annotations

import math
from typing import Any, Optional

import pygame

from .config import GameError
from .input import Key

_KEY_MAP = {
    pygame.K_ESCAPE: Key.ESCAPE,
    pygame.K_p: Key.P,
    pygame.K_SPACE: Key.SPACE,
    pygame.K_UP: Key.UP,
    pygame.K_LEFT: Key.LEFT,
    pygame.K_RIGHT: Key.RIGHT,
    pygame.K_DOWN: Key.DOWN,
}


class PygameBackend:
    """Opens the game window and serves as the renderer for scenes."""

    def __init__(self, refresh_rate: float = 60.0) -> None:
        self._refresh_rate = float(refresh_rate)
        self._screen: Optional[pygame.Surface] = None
        self._clock: Optional[pygame.time.Clock] = None
        self._fonts: dict[int, pygame.font.Font] = {}

    def _surface(self) -> pygame.Surface:
        if self._screen is None:
            raise GameError("the display is not open")
        return self._screen

    def open(self, title: str, width: int, height: int) -> None:
        try:
            pygame.init()
            self._screen = pygame.display.set_mode((width, height))
        except pygame.error as exc:
            raise GameError(f"could not open the display: {exc}") from exc
        pygame.display.set_caption(title)
        self._clock = pygame.time.Clock()

    def process_events(self) -> bool:
        """Handle window events; False once the window is asked to close."""
        self._surface()
        return not any(event.type == pygame.QUIT for event in pygame.event.get())

    def pressed_keys(self) -> list[int]:
        """Key codes of the game keys held down right now."""
        self._surface()
        pressed = pygame.key.get_pressed()
        return [int(code) for key, code in _KEY_MAP.items() if pressed[key]]

    def refresh_rate(self) -> float:
        return self._refresh_rate

    def clear(self) -> None:
        self._surface().fill((0, 0, 0))

    def flip(self) -> None:
        self._surface()
        pygame.display.flip()
        if self._clock is not None:
            self._clock.tick(self._refresh_rate)

    def draw_image(self, image: Any, x: float, y: float, scale: float, angle: float) -> None:
        """Draw ``image`` centred on (x, y), scaled and turned clockwise by ``angle`` radians."""
        screen = self._surface()
        if image is None:
            return
        surface = image
        if scale != 1.0 or angle != 0.0:
            surface = pygame.transform.rotozoom(image, -math.degrees(angle), scale)
        screen.blit(surface, surface.get_rect(center=(round(x), round(y))))

    def draw_text(
        self, x: float, y: float, text: str, color: tuple[int, int, int], size: int
    ) -> None:
        screen = self._surface()
        font = self._fonts.get(size)
        if font is None:
            font = pygame.font.Font(None, size)
            self._fonts[size] = font
        screen.blit(font.render(text, True, color), (round(x), round(y)))

    def close(self) -> None:
        self._fonts.clear()
        self._screen = None
        self._clock = None
        pygame.quit()