import math
from types import SimpleNamespace

import pygame
import pytest


@pytest.fixture(autouse=True)
def stub_pygame_and_renderer(monkeypatch):
    """Stub out pygame display and the Renderer to allow Game init without a window."""
    monkeypatch.setattr(pygame, "init", lambda: None)
    monkeypatch.setattr(pygame, "quit", lambda: None)
    monkeypatch.setattr(
        pygame.display, "set_mode", lambda *args, **kwargs: None
    )
    monkeypatch.setattr(
        pygame.display, "set_caption", lambda *args, **kwargs: None
    )
    monkeypatch.setattr(pygame.display, "flip", lambda: None)
    monkeypatch.setattr(pygame.key, "set_repeat", lambda *args: None)
    import raycaster.game as rg

    rendered = []

    class DummyRenderer:
        window_size = (600, 300)

        def __init__(self, map_size, screen_size):
            self.map_size = map_size
            self.screen_size = screen_size

        def render(self, target, frame, world, player):
            rendered.append(frame)

    monkeypatch.setattr(rg, "Renderer", DummyRenderer)
    return rendered


class DummyClock:
    def __init__(self):
        self.ticks = []

    def tick(self, fps):
        self.ticks.append(fps)
        return 0


def _events(monkeypatch, events):
    monkeypatch.setattr(pygame.event, "get", lambda: list(events))


def test_game_starts_at_world_player_start():
    from raycaster.game import Game

    game = Game(clock=DummyClock())
    assert game.player.x == 75.0 and game.player.y == 100.0
    assert math.isclose(game.player.angle, 1.5 * math.pi, rel_tol=1e-9)


def test_step_builds_full_frame_in_enclosed_map():
    from raycaster.game import Game

    game = Game(clock=DummyClock())
    frame = game.step()
    assert frame is game.frame
    assert len(frame.rays) == len(frame.intersections) == 100
    assert all(hit is not None for hit in frame.intersections)
    assert [s.index for s in frame.strips] == list(range(100))
    assert all(0.0 <= s.shade <= 255.0 for s in frame.strips)


def test_step_with_empty_world_renders_nothing():
    from raycaster.game import Game
    from raycaster.world import World

    game = Game(clock=DummyClock(), world=World(walls=[]))
    frame = game.step()
    assert frame.intersections == [None] * 100
    assert frame.strips == []


def test_step_uses_injected_caster():
    from raycaster.caster import PythonRayCaster
    from raycaster.game import Game

    game = Game(clock=DummyClock(), caster=PythonRayCaster(ray_count=10))
    frame = game.step()
    assert len(frame.rays) == 10
    assert frame.strips[0].width == pytest.approx(game.screen_width / 10)


def test_handle_events_moves_player(monkeypatch):
    from raycaster.game import Game

    game = Game(clock=DummyClock())
    _events(
        monkeypatch,
        [
            SimpleNamespace(type=pygame.KEYDOWN, key=pygame.K_UP),
            SimpleNamespace(type=pygame.KEYDOWN, key=pygame.K_LEFT),
        ],
    )
    game.handle_events()
    # Facing 1.5*pi moves down the screen
    assert game.player.x == pytest.approx(75.0)
    assert game.player.y == pytest.approx(102.0)
    assert game.player.angle == pytest.approx(1.48 * math.pi)
    assert game.running


def test_run_renders_until_quit(monkeypatch, stub_pygame_and_renderer):
    from raycaster.game import Game

    clock = DummyClock()
    game = Game(clock=clock)
    _events(monkeypatch, [SimpleNamespace(type=pygame.QUIT)])
    game.run()
    assert not game.running
    assert len(stub_pygame_and_renderer) == 1
    assert len(stub_pygame_and_renderer[0].strips) == 100
    assert clock.ticks == [game.fps]


def _view_column(game, x, y):
    """Fractional 3D view column in which the world point (x, y) appears."""
    from raycaster.caster import ray_angles

    pose = game.player.pose
    angle = math.atan2(-(y - pose.y), x - pose.x)
    start = ray_angles(pose, game.caster.fov, game.caster.ray_count)[0]
    # Keep the angle within one turn of the fan start
    angle = start + (angle - start) % (2 * math.pi)
    return (angle - start) / (game.caster.fov / game.caster.ray_count)


@pytest.mark.parametrize(
    "key,moves_right",
    [(pygame.K_LEFT, True), (pygame.K_a, True), (pygame.K_RIGHT, False)],
)
def test_turning_shifts_scene_against_turn(monkeypatch, key, moves_right):
    from raycaster.game import Game

    game = Game(clock=DummyClock())
    # The point straight ahead sits in the middle column
    before = _view_column(game, 75.0, 300.0)
    assert before == pytest.approx(50.0)
    _events(monkeypatch, [SimpleNamespace(type=pygame.KEYDOWN, key=key)])
    game.handle_events()
    after = _view_column(game, 75.0, 300.0)
    # Looking left brings what was ahead towards the right of the view
    assert (after > before) == moves_right


def test_map_view_uses_world_size():
    from raycaster.game import Game
    from raycaster.geometry import Segment
    from raycaster.world import World

    world = World(
        walls=[Segment.from_coords(0, 0, 400, 0)], width=400, height=250
    )
    game = Game(clock=DummyClock(), world=world)
    assert game.renderer.map_size == (400, 250)
    assert game.renderer.screen_size == (game.screen_width, game.screen_height)
