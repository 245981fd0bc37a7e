import pygame
import pytest

from ghostchase.config import GameError
from ghostchase.resources import PygameLoader, ResourceError, ResourceManager


class FakeLoader:
    def __init__(self, fail=False):
        self.fail = fail
        self.calls = []
        self.released_images = []
        self.released_sounds = []

    def load_image(self, path):
        self.calls.append(("image", path))
        if self.fail:
            raise ResourceError(f"{path} not found")
        return f"img:{path}"

    def load_divided_images(self, path, all_num, num_x, num_y, size_x, size_y):
        self.calls.append(("divided", path, all_num, num_x, num_y, size_x, size_y))
        return [f"{path}#{i}" for i in range(all_num)]

    def load_sound(self, path):
        self.calls.append(("sound", path))
        return f"snd:{path}"

    def release_image(self, handle):
        self.released_images.append(handle)

    def release_sound(self, handle):
        self.released_sounds.append(handle)


@pytest.fixture(autouse=True)
def _reset_singleton():
    ResourceManager.delete_instance()
    yield
    ResourceManager.delete_instance()


def test_single_image_loaded_once():
    loader = FakeLoader()
    rm = ResourceManager(loader)
    first = rm.get_images("dot.png")
    second = rm.get_images("dot.png")
    assert first == second == ["img:dot.png"]
    assert loader.calls == [("image", "dot.png")]


def test_divided_image_passes_division_parameters():
    loader = FakeLoader()
    rm = ResourceManager(loader)
    frames = rm.get_images("monster.png", 20, 20, 1, 32, 32)
    assert len(frames) == 20
    assert frames[0] == "monster.png#0"
    assert loader.calls == [("divided", "monster.png", 20, 20, 1, 32, 32)]


def test_returned_list_does_not_alter_cache():
    rm = ResourceManager(FakeLoader())
    rm.get_images("dot.png").append("extra")
    assert rm.get_images("dot.png") == ["img:dot.png"]


def test_sound_is_cached():
    loader = FakeLoader()
    rm = ResourceManager(loader)
    assert rm.get_sound("start.mp3") == rm.get_sound("start.mp3")
    assert loader.calls == [("sound", "start.mp3")]


def test_unload_releases_every_handle_and_reloads_afterwards():
    loader = FakeLoader()
    rm = ResourceManager(loader)
    rm.get_images("sheet.png", 3, 3, 1, 8, 8)
    rm.get_sound("a.wav")
    rm.unload_images()
    rm.unload_sounds()
    assert loader.released_images == ["sheet.png#0", "sheet.png#1", "sheet.png#2"]
    assert loader.released_sounds == ["snd:a.wav"]
    rm.get_sound("a.wav")
    assert loader.calls.count(("sound", "a.wav")) == 2


def test_loader_error_propagates():
    rm = ResourceManager(FakeLoader(fail=True))
    with pytest.raises(ResourceError):
        rm.get_images("missing.png")


def test_resource_error_is_caught_as_game_error():
    rm = ResourceManager(FakeLoader(fail=True))
    with pytest.raises(GameError):
        rm.get_images("missing.png")


def test_singleton_instance_is_shared_until_deleted():
    first = ResourceManager.get_instance()
    assert ResourceManager.get_instance() is first
    ResourceManager.delete_instance()
    assert ResourceManager.get_instance() is not first


def test_pygame_loader_missing_image(tmp_path):
    with pytest.raises(ResourceError):
        PygameLoader().load_image(str(tmp_path / "nothing.bmp"))


def test_pygame_loader_missing_sound(tmp_path):
    with pytest.raises(ResourceError):
        PygameLoader().load_sound(str(tmp_path / "nothing.wav"))


def test_pygame_loader_divides_sheet(tmp_path):
    sheet = pygame.Surface((8, 2))
    sheet.fill((255, 0, 0), pygame.Rect(0, 0, 4, 2))
    sheet.fill((0, 0, 255), pygame.Rect(4, 0, 4, 2))
    path = tmp_path / "sheet.bmp"
    pygame.image.save(sheet, str(path))

    loader = PygameLoader()
    frames = loader.load_divided_images(str(path), 2, 2, 1, 4, 2)
    assert [f.get_size() for f in frames] == [(4, 2), (4, 2)]
    assert tuple(frames[0].get_at((0, 0)))[:3] == (255, 0, 0)
    assert tuple(frames[1].get_at((0, 0)))[:3] == (0, 0, 255)
    assert loader.live_handles == 2
    for frame in frames:
        loader.release_image(frame)
    assert loader.live_handles == 0


def test_pygame_loader_rejects_bad_division(tmp_path):
    path = tmp_path / "small.bmp"
    pygame.image.save(pygame.Surface((4, 4)), str(path))
    loader = PygameLoader()
    with pytest.raises(ResourceError):
        loader.load_divided_images(str(path), 3, 1, 1, 4, 4)
    with pytest.raises(ResourceError):
        loader.load_divided_images(str(path), 2, 2, 1, 4, 4)