import pytest

from terrain.biomes import Tile, BONE, DIRT, GRASS, SAND, STONE, SUBMERGED_DIRT
from terrain.decorations import (
    DecorationPlacer, RockCluster, SkeletalFigure, TreeCluster,
)
from terrain.hexgrid import WorldPosition
from terrain.stateless_rng import tile_rng


class ScriptedRng:
    """Returns queued draws; running dry means an unexpected draw."""

    def __init__(self, *values):
        self.values = list(values)

    def random(self):
        return self.values.pop(0)


def tile(biome, height=5.0):
    return Tile(WorldPosition(1.0, 2.0), height, biome)


def test_stone_rock_uses_shared_stream():
    placer = DecorationPlacer()
    rng = ScriptedRng(0.81, 0.5, 0.25, 0.5)
    (rock,) = placer.place(tile(STONE), rng)
    assert isinstance(rock, RockCluster)
    assert rock.jitter == pytest.approx((0.2, 0.1))
    assert rock.scale == pytest.approx(0.25)
    assert rng.values == []


def test_presence_threshold_is_strict():
    placer = DecorationPlacer()
    assert placer.place(tile(STONE), ScriptedRng(0.8)) == []
    assert placer.place(tile(SAND), ScriptedRng(0.8)) == []
    assert placer.place(tile(DIRT), ScriptedRng(0.5)) == []
    (rock,) = placer.place(tile(SAND), ScriptedRng(0.9, 0.0, 0.0, 0.0))
    assert rock.scale == pytest.approx(0.1)


def test_bare_biomes_draw_nothing():
    placer = DecorationPlacer()
    assert placer.place(tile(GRASS), ScriptedRng()) == []
    assert placer.place(tile(SUBMERGED_DIRT, 0.0), ScriptedRng()) == []


def test_dirt_gets_theme_tall_decoration():
    (tree,) = DecorationPlacer().place(tile(DIRT), ScriptedRng(0.51, 0.5))
    assert isinstance(tree, TreeCluster)
    assert tree.scale == pytest.approx(1.75)
    assert tree.batch_biome == GRASS

    (figure,) = DecorationPlacer(SkeletalFigure).place(tile(DIRT), ScriptedRng(0.9))
    assert isinstance(figure, SkeletalFigure)
    assert figure.scale == 2.0
    assert figure.batch_biome == BONE


def test_tall_decoration_fraction_on_dirt():
    placer = DecorationPlacer()
    hits = 0
    for i in range(10_000):
        t = tile(DIRT)
        hits += len(placer.place(t, tile_rng(i % 100, i // 100, 99)))
    assert 0.47 < hits / 10_000 < 0.53


def test_tree_geometry_stacks_three_cones():
    tree = TreeCluster(WorldPosition(0.0, 0.0), height=5.0, scale=2.0, lift=1.0)
    geo = tree.geometry()
    assert geo.vertex_count == 3 * 15
    assert geo.index_count == 3 * 18
    lo, hi = geo.bounds()
    assert lo[1] == pytest.approx(5.0, abs=1e-5)
    assert hi[1] == pytest.approx(9.5, abs=1e-5)
    assert hi[0] <= 1.5 + 1e-5


def test_rock_geometry_sits_on_tile():
    rock = RockCluster(WorldPosition(3.0, -2.0), height=7.0, scale=0.3, jitter=(0.1, 0.2))
    geo = rock.geometry()
    assert geo.vertex_count == 64
    lo, hi = geo.bounds()
    assert (lo[1] + hi[1]) / 2 == pytest.approx(7.0, abs=1e-5)
    assert hi[1] == pytest.approx(7.3, abs=1e-5)


def test_skeletal_figure_geometry():
    geo = SkeletalFigure(WorldPosition(0.0, 0.0), height=2.0).geometry()
    # one head sphere plus five closed limbs
    assert geo.vertex_count == 64 + 5 * 46
    assert geo.index_count == 252 + 5 * 84
    lo, hi = geo.bounds()
    # legs reach slightly into the tile, head on top
    assert lo[1] == pytest.approx(1.8, abs=1e-5)
    assert hi[1] == pytest.approx(3.5, abs=1e-5)
