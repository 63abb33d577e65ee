import pytest

from geometry import LaneGeometry


SIZES = [(1, 1), (320, 480), (400, 800), (1024, 768), (1920, 1080), (3, 5000)]


@pytest.mark.parametrize("width,height", SIZES)
def test_borders_strictly_increasing(width, height):
    geo = LaneGeometry(width, height, 4)
    for borders in (geo.bottom_borders, geo.top_borders):
        assert len(borders) == 5
        assert all(a < b for a, b in zip(borders, borders[1:]))


@pytest.mark.parametrize("width,height", SIZES)
def test_centers_between_borders(width, height):
    geo = LaneGeometry(width, height, 4)
    for borders, centers in ((geo.bottom_borders, geo.bottom_centers), (geo.top_borders, geo.top_centers)):
        assert len(centers) == 4
        for i, c in enumerate(centers):
            assert borders[i] < c < borders[i + 1]
            assert c == pytest.approx((borders[i] + borders[i + 1]) / 2)


def test_road_proportions():
    geo = LaneGeometry(1000, 500, 4)
    assert geo.bottom_borders[0] == pytest.approx(100)
    assert geo.bottom_borders[-1] == pytest.approx(900)
    assert geo.top_borders[0] == pytest.approx(400)
    assert geo.top_borders[-1] == pytest.approx(600)
    assert geo.lane_width == pytest.approx(200)


@pytest.mark.parametrize("width,height", SIZES)
def test_lane_x_endpoints_exact(width, height):
    geo = LaneGeometry(width, height, 4)
    for lane in range(4):
        assert geo.lane_x(lane, 0) == geo.top_centers[lane]
        assert geo.lane_x(lane, geo.height) == geo.bottom_centers[lane]


def test_lane_x_midway():
    geo = LaneGeometry(1000, 500, 4)
    lane = 0
    expected = (geo.top_centers[lane] + geo.bottom_centers[lane]) / 2
    assert geo.lane_x(lane, 250) == pytest.approx(expected)


def test_border_x_follows_road_edge():
    geo = LaneGeometry(1000, 500, 4)
    assert geo.border_x(0, 0) == pytest.approx(400)
    assert geo.border_x(0, 500) == pytest.approx(100)
    assert geo.border_x(4, 250) == pytest.approx(750)


def test_nearest_lane():
    geo = LaneGeometry(800, 600, 4)
    assert geo.nearest_lane(geo.bottom_centers[2]) == 2
    assert geo.nearest_lane(-500) == 0
    assert geo.nearest_lane(5000) == 3


def test_resize_recomputes():
    geo = LaneGeometry(400, 800, 4)
    old = list(geo.bottom_centers)
    geo.resize(800, 400)
    assert geo.bottom_centers == pytest.approx([c * 2 for c in old])
    assert geo.height == 400


def test_degenerate_size_clamped():
    geo = LaneGeometry(0, 0, 4)
    assert geo.width == 1 and geo.height == 1
    geo.lane_x(0, 10)
