"""Caching access to image and sound resources."""

from __future__ import annotations

from typing import Any, ClassVar, Optional, Protocol

import pygame

from .config import GameError


class ResourceError(GameError):
    """Raised when a resource file cannot be loaded."""


class _Loader(Protocol):
    def load_image(self, path: str) -> Any: ...

    def load_divided_images(
        self, path: str, all_num: int, num_x: int, num_y: int, size_x: int, size_y: int
    ) -> list[Any]: ...

    def load_sound(self, path: str) -> Any: ...

    def release_image(self, handle: Any) -> None: ...

    def release_sound(self, handle: Any) -> None: ...


class PygameLoader:
    """Loads images and sounds through pygame and tracks what it has handed out."""

    def __init__(self) -> None:
        self._images: dict[int, Any] = {}
        self._sounds: dict[int, Any] = {}

    @property
    def live_handles(self) -> int:
        """Number of image and sound handles not yet released."""
        return len(self._images) + len(self._sounds)

    @staticmethod
    def _load_surface(path: str) -> "pygame.Surface":
        try:
            return pygame.image.load(str(path))
        except (pygame.error, OSError) as exc:
            raise ResourceError(f"{path} not found") from exc

    def load_image(self, path: str) -> "pygame.Surface":
        surface = self._load_surface(path)
        self._images[id(surface)] = surface
        return surface

    def load_divided_images(
        self, path: str, all_num: int, num_x: int, num_y: int, size_x: int, size_y: int
    ) -> list["pygame.Surface"]:
        """Cut a sheet into ``all_num`` frames of ``size_x`` by ``size_y``, row by row."""
        if all_num < 1 or num_x < 1 or num_y < 1 or all_num > num_x * num_y:
            raise ResourceError(f"{path}: cannot divide into {all_num} frames")
        sheet = self._load_surface(path)
        frames = []
        for index in range(all_num):
            row, col = divmod(index, num_x)
            rect = pygame.Rect(col * size_x, row * size_y, size_x, size_y)
            try:
                frame = sheet.subsurface(rect)
            except ValueError as exc:
                raise ResourceError(f"{path}: frame {index} lies outside the image") from exc
            self._images[id(frame)] = frame
            frames.append(frame)
        return frames

    def load_sound(self, path: str) -> "pygame.mixer.Sound":
        try:
            if not pygame.mixer.get_init():
                pygame.mixer.init()
            sound = pygame.mixer.Sound(str(path))
        except (pygame.error, OSError) as exc:
            raise ResourceError(f"{path} not found") from exc
        self._sounds[id(sound)] = sound
        return sound

    def release_image(self, handle: Any) -> None:
        self._images.pop(id(handle), None)

    def release_sound(self, handle: Any) -> None:
        sound = self._sounds.pop(id(handle), None)
        if sound is not None:
            sound.stop()


class ResourceManager:
    """Loads each resource once and hands out the cached handles."""

    _instance: ClassVar[Optional["ResourceManager"]] = None

    def __init__(self, loader: Optional[_Loader] = None) -> None:
        self._loader: _Loader = loader if loader is not None else PygameLoader()
        self._images: dict[str, list[Any]] = {}
        self._sounds: dict[str, Any] = {}

    @classmethod
    def get_instance(cls) -> "ResourceManager":
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @classmethod
    def delete_instance(cls) -> None:
        """Release every resource of the shared instance and drop it."""
        if cls._instance is not None:
            cls._instance.unload_images()
            cls._instance.unload_sounds()
            cls._instance = None

    def get_images(
        self,
        file_name: str,
        all_num: int = 1,
        num_x: int = 1,
        num_y: int = 1,
        size_x: int = 0,
        size_y: int = 0,
    ) -> list[Any]:
        """Return the image handles for ``file_name``, loading it on first use."""
        key = str(file_name)
        if key not in self._images:
            if all_num == 1:
                self._images[key] = [self._loader.load_image(key)]
            else:
                self._images[key] = list(
                    self._loader.load_divided_images(key, all_num, num_x, num_y, size_x, size_y)
                )
        return list(self._images[key])

    def get_sound(self, file_path: str) -> Any:
        """Return the sound handle for ``file_path``, loading it on first use."""
        key = str(file_path)
        if key not in self._sounds:
            self._sounds[key] = self._loader.load_sound(key)
        return self._sounds[key]

    def unload_images(self) -> None:
        for handles in self._images.values():
            for handle in handles:
                self._loader.release_image(handle)
        self._images.clear()

    def unload_sounds(self) -> None:
        for handle in self._sounds.values():
            self._loader.release_sound(handle)
        self._sounds.clear()