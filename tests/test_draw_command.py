import itertools

import pytest

from zenith.draw_command import DrawCommand


class _VertexArray:
    pass


class _Material:
    pass


@pytest.fixture
def parts():
    return [_VertexArray(), _VertexArray()], [_Material(), _Material()]


def test_equality_ignores_transform(parts):
    (va, _), (mat, _) = parts
    a = DrawCommand(va, mat, "first")
    b = DrawCommand(va, mat, "second")
    assert a == b
    assert a <= b and a >= b
    assert not (a < b) and not (a > b)


def test_different_material_is_not_equal(parts):
    (va, _), (m1, m2) = parts
    assert DrawCommand(va, m1, None) != DrawCommand(va, m2, None)


def test_exactly_one_ordering_holds(parts):
    vas, mats = parts
    commands = [DrawCommand(v, m, None) for v, m in itertools.product(vas, mats)]
    for a, b in itertools.product(commands, repeat=2):
        holds = [a < b, a == b, a > b]
        assert holds.count(True) == 1
        assert (a <= b) == (not (a > b))
        assert (a >= b) == (not (a < b))


def test_vertex_array_sorts_before_material(parts):
    (v1, v2), (m1, m2) = parts
    low_va, high_va = sorted([v1, v2], key=id)
    low_m, high_m = sorted([m1, m2], key=id)
    assert DrawCommand(low_va, high_m, None) < DrawCommand(high_va, low_m, None)
    assert DrawCommand(low_va, low_m, None) < DrawCommand(low_va, high_m, None)


def test_sorting_groups_equal_commands(parts):
    vas, mats = parts
    commands = [
        DrawCommand(vas[i % 2], mats[(i // 2) % 2], i) for i in range(12)
    ]
    ordered = sorted(commands)
    groups = [list(g) for _, g in itertools.groupby(ordered, key=lambda c: (id(c.vertex_array), id(c.material)))]
    assert len(groups) == 4
    assert sum(len(g) for g in groups) == len(commands)
    for earlier, later in zip(ordered, ordered[1:]):
        assert earlier <= later


def test_hash_matches_equality(parts):
    (va, _), (mat, _) = parts
    assert len({DrawCommand(va, mat, 1), DrawCommand(va, mat, 2)}) == 1