import pygame
import pytest

import config
from entities import Marking
from gate import RefillGate
from render import Renderer
from sprites import Sprite, load_sprite


@pytest.fixture
def screen(sim):
    return pygame.Surface((sim.geometry.width, sim.geometry.height))


def test_background_and_road(sim, screen):
    Renderer().draw(screen, sim)
    assert screen.get_at((2, sim.geometry.height // 2))[:3] == config.BG
    assert screen.get_at((sim.geometry.width // 2, sim.geometry.height // 3))[:3] == config.ROAD


def test_car_placeholder_before_image_loads(sim, screen):
    Renderer().draw(screen, sim)
    x, y, w, h = sim.car.rect()
    assert screen.get_at((int(x + w / 2), int(y + h / 2)))[:3] == config.CAR_FALLBACK


def test_item_placeholder(running_sim, screen):
    item = running_sim.spawn_item()
    item.y = 300
    item.x = running_sim.geometry.lane_x(item.lane, item.y) - item.width / 2
    Renderer().draw(screen, running_sim)
    assert screen.get_at((int(item.x + item.width / 2), int(item.y + item.height / 2)))[:3] == config.ITEM_FALLBACK


def test_loaded_image_is_used(sim, screen):
    image = pygame.Surface((30, 30), pygame.SRCALPHA)
    image.fill((10, 200, 30, 255))
    Renderer(car=Sprite(image, config.CAR_FALLBACK)).draw(screen, sim)
    x, y, w, h = sim.car.rect()
    assert screen.get_at((int(x + w / 2), int(y + h / 2)))[:3] == (10, 200, 30)


def test_marking_drawn_on_its_border(running_sim, screen):
    marking = Marking(2, running_sim.geometry)
    marking.y = 400
    running_sim.markings.append(marking)
    Renderer().draw(screen, running_sim)
    mid_y = 440
    x = running_sim.geometry.border_x(2, mid_y)
    assert screen.get_at((int(round(x)), mid_y))[:3] == config.MARKING


def test_offscreen_marking_skipped(running_sim, screen):
    marking = Marking(1, running_sim.geometry)
    marking.y = running_sim.geometry.height + 10
    assert not marking.visible(running_sim.geometry.height)
    marking.y = -marking.length - 1
    assert not marking.visible(running_sim.geometry.height)
    running_sim.markings.append(marking)
    Renderer().draw(screen, running_sim)


def test_marking_quad_tapers():
    from geometry import LaneGeometry
    geo = LaneGeometry(1000, 500, 4)
    marking = Marking(2, geo, length=100)
    marking.y = 0
    top_left, top_right, bot_right, bot_left = marking.quad(geo)
    assert top_left[0] == pytest.approx(geo.border_x(2, 0) - marking.half_width)
    assert bot_right[0] == pytest.approx(geo.border_x(2, 100) + marking.half_width)
    assert top_left[1] == 0 and bot_left[1] == 100


def test_fuel_bar_proportional(running_sim, screen):
    running_sim.fuel = 50
    Renderer().draw(screen, running_sim)
    x, y, w, h = config.FUEL_BAR
    assert screen.get_at((x + w // 4, y + h // 2))[:3] == config.FUEL_FILL
    assert screen.get_at((x + 3 * w // 4, y + h // 2))[:3] == config.FUEL_BG


def test_gate_overlay_drawn_when_visible(sim, screen):
    gate = RefillGate(sim.geometry.width, sim.geometry.height)
    Renderer().draw(screen, sim, gate)
    assert screen.get_at(gate.rect.center)[:3] == config.GATE_FALLBACK
    gate.hide()
    Renderer().draw(screen, sim, gate)
    assert screen.get_at(gate.rect.center)[:3] != config.GATE_FALLBACK


def test_translucent_placeholder(screen):
    screen.fill((0, 0, 0))
    Sprite(None, (255, 255, 255, 128)).draw(screen, 10, 10, 20, 20)
    r, g, b = screen.get_at((15, 15))[:3]
    assert 100 < r < 160 and r == g == b


def test_load_sprite_missing_file_falls_back(tmp_path, caplog):
    sprite = load_sprite(str(tmp_path / "nope.png"), config.ITEM_FALLBACK)
    assert not sprite.ready
    assert sprite.color == config.ITEM_FALLBACK
    assert "Failed to load" in caplog.text


def test_load_sprite_reads_image(tmp_path):
    path = tmp_path / "car.png"
    image = pygame.Surface((6, 4))
    image.fill((1, 2, 3))
    pygame.image.save(image, str(path))
    sprite = load_sprite(str(path), config.CAR_FALLBACK)
    assert sprite.ready
    assert sprite.image.get_size() == (6, 4)
