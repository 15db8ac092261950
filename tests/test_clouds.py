import math

import numpy as np
import pytest

from mesh.buffer import MeshBuffer
from terrain.clouds import CloudFieldGenerator, CloudMesh, CloudRules, cloud_count


class ConstantRng:
    def __init__(self, value):
        self.value = value
        self.draws = 0

    def random(self):
        self.draws += 1
        return self.value


def test_cloud_count_curve():
    assert cloud_count(0.0) == 0
    assert cloud_count(0.81) == 3
    assert cloud_count(0.999999) == 3
    assert cloud_count(0.2) == 1


def test_generator_emits_separate_meshes():
    rng = ConstantRng(0.81)
    clouds = CloudFieldGenerator(rng).generate()
    assert len(clouds) == 3
    # count, three puff jitters, x/y/z, yaw for each cloud
    assert rng.draws == 1 + 3 * 7
    assert [c.spin for c in clouds] == [1, -1, 1]
    for c in clouds:
        assert c.geometry.vertex_count == 3 * 64
        assert c.offset == pytest.approx((6.2, 12.67, 6.2))
        assert c.yaw == pytest.approx(0.81 * 2 * math.pi)
        assert c.material_key == "cloud"
    assert clouds[0] is not clouds[1]


def test_no_clouds_on_zero_draw():
    rng = ConstantRng(0.0)
    assert CloudFieldGenerator(rng).generate() == []
    assert rng.draws == 1


def test_scene_bounds_override_span():
    (cloud,) = CloudFieldGenerator(ConstantRng(0.2), CloudRules()).generate(scene_bounds=5.0)
    assert cloud.offset[0] == pytest.approx(0.2 * 10.0 - 5.0)


def test_yaw_orbits_world_origin():
    point = MeshBuffer([[0.0, 0.0, 0.0]], [[0.0, 1.0, 0.0]], [])
    cloud = CloudMesh(point, (1.0, 2.0, 0.0), math.pi / 2)
    assert np.allclose(cloud.world_geometry().positions[0], [0.0, 2.0, -1.0], atol=1e-6)
