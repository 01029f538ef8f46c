from shapes import LINEAR_MAPS, apply_linear_map, canonical_order, normalize, shape_str


def test_normalize_moves_shape_to_origin():
    assert normalize([(2, 3), (3, 3), (3, 4)]) == ((0, 0), (1, 0), (1, 1))


def test_normalize_handles_negative_offsets():
    assert normalize([(0, 0), (-1, 0), (-1, -1)]) == ((1, 1), (0, 1), (0, 0))


def test_normalize_is_idempotent():
    shape = normalize([(5, -2), (6, -2), (6, -1), (7, -1)])
    assert normalize(shape) == shape


def test_canonical_order_sorts_row_then_column():
    assert canonical_order([(1, 0), (0, 1), (0, 0)]) == ((0, 0), (0, 1), (1, 0))


def test_rotation_turns_horizontal_domino_vertical():
    assert apply_linear_map(((0, 0), (0, 1)), (0, -1, 1, 0)) == ((0, 0), (1, 0))


def test_identity_map_only_canonicalizes():
    assert apply_linear_map([(1, 1), (0, 0)], (1, 0, 0, 1)) == ((0, 0), (1, 1))


def test_linear_maps_are_the_eight_dihedral_symmetries():
    assert len(set(LINEAR_MAPS)) == 8
    for a, b, c, d in LINEAR_MAPS:
        assert abs(a * d - b * c) == 1
    dets = sorted(a * d - b * c for a, b, c, d in LINEAR_MAPS)
    assert dets == [-1] * 4 + [1] * 4


def test_shape_str_draws_cells():
    assert shape_str([(0, 0), (1, 0), (1, 1)]) == "X\nXX"
    assert shape_str([(0, 1), (1, 0), (1, 1)]) == " X\nXX"
