"""
Tests for the move model: Cube value type + bidir_solver/state.py.

Test Groups:
- C1-C6: models.py (Color, Cubelet, Cube)
- M1-M8: bidir_solver/state.py (apply, expand, inverse)
- G1-G5: bidir_solver/state.py (is_goal)
"""

import dataclasses

import pytest

from twisty.solver.models import Action, Color, Cube, Cubelet, CAP_COLOR, BASE_COLOR
from twisty.solver.bidir_solver.state import (
    ACTIONS, apply, apply_sequence, expand, inverse, is_goal, rotate_ring
)

R, G, B, O = Color.RED, Color.GREEN, Color.BLUE, Color.ORANGE


# ========== Fixtures ==========

@pytest.fixture
def solved():
    """Canonical solved cube: red, green, blue, orange faces"""
    sides = [R, R, G, G, B, B, O, O]
    return Cube.from_side_colors(sides, sides)


@pytest.fixture
def scramble():
    """Default driver scramble"""
    return Cube.from_side_colors(
        [B, B, G, G, O, O, R, R],
        [G, O, O, G, B, R, R, B],
    )


@pytest.fixture
def labelled():
    """Cube with 16 distinguishable cubelets (tracks where each one moves)"""
    cubelets = [Cubelet(Color(i // 6), Color(i % 6)) for i in range(16)]
    return Cube(cubelets[:8], cubelets[8:])


# ========== Test Group C: models.py ==========

def test_C1_color_order():
    """C1: Colours are totally ordered (red lowest, white highest)"""
    print("\nTest C1: Color Order...", end=" ")

    assert sorted([Color.WHITE, Color.ORANGE, Color.RED, Color.YELLOW, Color.BLUE, Color.GREEN]) == [
        Color.RED, Color.GREEN, Color.BLUE, Color.ORANGE, Color.YELLOW, Color.WHITE
    ]

    print("✓")


def test_C2_cubelet_order_by_fields():
    """C2: Cubelet ordering compares top first, then side"""
    print("\nTest C2: Cubelet Order...", end=" ")

    assert Cubelet(Color.YELLOW, Color.RED) < Cubelet(Color.YELLOW, Color.GREEN)
    assert Cubelet(Color.YELLOW, Color.WHITE) < Cubelet(Color.WHITE, Color.RED)
    assert Cubelet(Color.RED, Color.BLUE) == Cubelet(Color.RED, Color.BLUE)

    print("✓")


def test_C3_cube_structural_equality(solved):
    """C3: Equal layers -> equal cubes with equal hashes"""
    print("\nTest C3: Structural Equality...", end=" ")

    sides = [R, R, G, G, B, B, O, O]
    other = Cube.from_side_colors(list(sides), list(sides))

    assert other == solved
    assert hash(other) == hash(solved)
    assert len({other, solved}) == 1
    assert isinstance(other.cap_layer, tuple)

    print("✓")


def test_C4_cube_is_immutable(solved):
    """C4: Cube is frozen"""
    print("\nTest C4: Immutable...", end=" ")

    with pytest.raises(dataclasses.FrozenInstanceError):
        solved.cap_layer = solved.base_layer

    print("✓")


def test_C5_cube_layer_length_checked():
    """C5: Layers must hold exactly 8 cubelets"""
    print("\nTest C5: Layer Length...", end=" ")

    with pytest.raises(ValueError):
        Cube.from_side_colors([R] * 7, [R] * 8)
    with pytest.raises(ValueError):
        Cube.from_side_colors([R] * 8, [R] * 9)

    print("✓")


def test_C6_cube_order_cap_layer_first():
    """C6: Cube ordering is lexicographic, cap layer before base layer"""
    print("\nTest C6: Cube Order...", end=" ")

    low = Cube.from_side_colors([R] * 8, [O] * 8)
    high = Cube.from_side_colors([G] + [R] * 7, [R] * 8)
    assert low < high
    assert max([high, low]) == high

    same_cap_low = Cube.from_side_colors([R] * 8, [R] * 8)
    assert same_cap_low < low

    print("✓")


# ========== Test Group M: apply / expand / inverse ==========

def test_M1_front_swaps_three_pairs(labelled):
    """M1: FRONT swaps cap 0<->base 2, cap 1<->base 1, cap 2<->base 0"""
    print("\nTest M1: FRONT...", end=" ")

    new = apply(labelled, Action.FRONT)
    cap, base = labelled.cap_layer, labelled.base_layer

    assert new.cap_layer[0] == base[2] and new.base_layer[2] == cap[0]
    assert new.cap_layer[1] == base[1] and new.base_layer[1] == cap[1]
    assert new.cap_layer[2] == base[0] and new.base_layer[0] == cap[2]
    assert new.cap_layer[3:] == cap[3:]
    assert new.base_layer[3:] == base[3:]

    print("✓")


@pytest.mark.parametrize("action, pairs", [
    (Action.RIGHT, [(2, 4), (3, 3), (4, 2)]),
    (Action.BACK, [(4, 6), (5, 5), (6, 4)]),
    (Action.LEFT, [(6, 0), (7, 7), (0, 6)]),
])
def test_M2_other_swap_moves(labelled, action, pairs):
    """M2: RIGHT/BACK/LEFT swap their three cap/base pairs, nothing else moves"""
    new = apply(labelled, action)
    cap, base = labelled.cap_layer, labelled.base_layer

    for cap_pos, base_pos in pairs:
        assert new.cap_layer[cap_pos] == base[base_pos]
        assert new.base_layer[base_pos] == cap[cap_pos]

    moved_cap = {c for c, _ in pairs}
    moved_base = {b for _, b in pairs}
    for i in range(8):
        if i not in moved_cap:
            assert new.cap_layer[i] == cap[i]
        if i not in moved_base:
            assert new.base_layer[i] == base[i]


def test_M3_twist_rotates_cap_ring_by_two(labelled):
    """M3: TWIST: new_cap[i] = old_cap[i - 2], base untouched"""
    print("\nTest M3: TWIST...", end=" ")

    new = apply(labelled, Action.TWIST)
    for i in range(8):
        assert new.cap_layer[i] == labelled.cap_layer[(i - 2) % 8]
    assert new.base_layer == labelled.base_layer

    print("✓")


def test_M4_apply_returns_new_value(scramble):
    """M4: apply never changes its input"""
    print("\nTest M4: Pure Apply...", end=" ")

    before = Cube(scramble.cap_layer, scramble.base_layer)
    for action in Action:
        apply(scramble, action)
    assert scramble == before

    print("✓")


@pytest.mark.parametrize("action", list(Action))
def test_M5_round_trip_with_inverse(scramble, solved, labelled, action):
    """M5: apply(apply(s, a), inverse(a)) == s"""
    for state in (scramble, solved, labelled):
        assert apply_sequence(apply(state, action), inverse(action)) == state


def test_M6_move_orders(labelled):
    """M6: Swap moves have order 2, TWIST has order 4"""
    print("\nTest M6: Move Orders...", end=" ")

    for action in (Action.LEFT, Action.RIGHT, Action.FRONT, Action.BACK):
        assert apply(labelled, action) != labelled
        assert apply_sequence(labelled, [action] * 2) == labelled

    assert apply_sequence(labelled, [Action.TWIST] * 2) != labelled
    assert apply_sequence(labelled, [Action.TWIST] * 4) == labelled
    assert inverse(Action.TWIST) == (Action.TWIST, Action.TWIST, Action.TWIST)
    assert inverse(Action.FRONT) == (Action.FRONT,)

    print("✓")


def test_M7_expand_order_and_count(scramble):
    """M7: expand yields one successor per action in declaration order"""
    print("\nTest M7: Expand...", end=" ")

    successors = list(expand(scramble))

    assert [a for _, a in successors] == [
        Action.LEFT, Action.RIGHT, Action.FRONT, Action.BACK, Action.TWIST
    ]
    assert ACTIONS == tuple(a for _, a in successors)
    for new_state, action in successors:
        assert new_state == apply(scramble, action)

    print("✓")


def test_M8_rotate_ring_both_directions():
    """M8: rotate_ring right/left and full turns"""
    print("\nTest M8: rotate_ring...", end=" ")

    ring = tuple(range(8))
    assert rotate_ring(ring, 2) == (6, 7, 0, 1, 2, 3, 4, 5)
    assert rotate_ring(ring, -1) == (1, 2, 3, 4, 5, 6, 7, 0)
    assert rotate_ring(rotate_ring(ring, 1), -1) == ring
    assert rotate_ring(ring, 8) == ring

    print("✓")


# ========== Test Group G: is_goal ==========

def test_G1_solved_cube_is_goal(solved):
    """G1: Canonical solved cube passes"""
    assert is_goal(solved)


def test_G2_scramble_is_not_goal(scramble):
    """G2: Default scramble fails (sides of both layers differ)"""
    assert not is_goal(scramble)


def test_G3_cap_colour_must_be_on_top(solved):
    """G3: A swap move brings base cubelets into the cap layer -> not solved"""
    print("\nTest G3: Cap Colour...", end=" ")

    moved = apply(solved, Action.FRONT)
    assert moved.cap_layer[0].top == BASE_COLOR
    assert not is_goal(moved)

    print("✓")


def test_G4_neighbour_rule(solved):
    """G4: An inner cap position whose side matches neither neighbour fails"""
    print("\nTest G4: Neighbour Rule...", end=" ")

    sides = [R, G, R, G, B, B, O, O]
    alternating = Cube.from_side_colors(sides, sides)
    assert not is_goal(alternating)

    # TWIST misaligns cap and base sides
    assert not is_goal(apply(solved, Action.TWIST))

    print("✓")


def test_G5_boundary_positions_exempt():
    """G5: Positions 0 and 7 are not checked against their neighbours"""
    print("\nTest G5: Boundary Exemption...", end=" ")

    # Ring shifted by one: position 0 and 7 share red across the seam
    sides = [R, G, G, B, B, O, O, R]
    shifted = Cube.from_side_colors(sides, sides)
    assert is_goal(shifted)

    lonely_ends = [G, R, R, B, B, O, O, G]
    assert is_goal(Cube.from_side_colors(lonely_ends, lonely_ends))

    print("✓")


def test_G6_base_top_colour_not_checked():
    """G6: Only cap tops are checked, base tops are free"""
    sides = [R, R, G, G, B, B, O, O]
    cube = Cube.from_side_colors(sides, sides, cap_color=CAP_COLOR, base_color=Color.RED)
    assert is_goal(cube)
