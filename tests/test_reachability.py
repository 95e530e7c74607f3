from dataclasses import replace

import pytest

from everclimb.difficulty import difficulty_for
from everclimb.grid import ChunkGrid
from everclimb.mapgen.reachability import (
    BestStates, analyze, ensure_reachable, is_saturated, next_states,
    pick_column, repair_candidates, repair_cell, seed_bottom_row, expand_row,
)
from everclimb.rng import rng
from everclimb.tiles import Item, Terrain

# Round numbers so the expected stamina values are exact.
D = replace(
    difficulty_for(1),
    base_cost=1.0, mud_cost=3.0, slip_cost_extra=0.5,
    food_value=20.0, boots_steps=5, stamina_budget=100.0,
)

CODES = {"d": Terrain.DIRT, "s": Terrain.STONE, "m": Terrain.MUD, "i": Terrain.ICE}

def make_grid(rows, items=None):
    """rows: top row first, one char per cell; items: {(q, r): Item}."""
    cols = len(rows[0])
    g = ChunkGrid.empty(cols, len(rows))
    for r, line in enumerate(rows):
        for q, ch in enumerate(line):
            g.set_terrain(q, r, CODES[ch])
    for (q, r), it in (items or {}).items():
        g.set_item(q, r, it)
    return g

def moves(g, q, r, stamina, timer=0, diff=D):
    return list(next_states(g, q, r, stamina, timer, diff))

def script(*vals):
    it = iter(vals)
    return lambda: next(it)

# --- movement model ---------------------------------------------------------

def test_straight_and_diagonal_climb():
    g = make_grid(["sss", "sss", "sss"])
    assert moves(g, 0, 2, 10.0) == [(0, 1, 9.0, 0), (1, 1, 9.0, 0)]

def test_right_edge_has_no_diagonal():
    g = make_grid(["sss", "sss"])
    assert moves(g, 2, 1, 10.0) == [(2, 0, 9.0, 0)]

def test_top_row_has_no_moves():
    g = make_grid(["sss", "sss"])
    assert moves(g, 1, 0, 10.0) == []

def test_mud_costs_more():
    g = make_grid(["ms", "ss"])
    assert moves(g, 0, 1, 10.0) == [(0, 0, 7.0, 0), (1, 0, 9.0, 0)]

def test_move_needs_stamina_left_over():
    g = make_grid(["mm", "ss"])
    assert moves(g, 0, 1, 3.0) == []
    assert moves(g, 0, 1, 3.5) == [(0, 0, 0.5, 0), (1, 0, 0.5, 0)]
    assert moves(g, 0, 1, 0.0) == []

def test_ice_slides_one_more_cell():
    g = make_grid(["sss", "sis", "sss"])
    # diagonal onto ice at (1,1) slides on to (2,0): 1 + 1 + 0.5
    assert moves(g, 0, 2, 10.0) == [(0, 1, 9.0, 0), (2, 0, 7.5, 0)]

def test_slide_pays_mud_at_the_end():
    g = make_grid(["ms", "is", "ss"])
    assert moves(g, 0, 2, 10.0)[0] == (0, 0, 10.0 - 1 - 3 - 0.5, 0)

def test_slide_off_the_grid_is_dropped():
    g = make_grid(["iss", "sss"])
    assert moves(g, 0, 1, 10.0) == [(1, 0, 9.0, 0)]
    g = make_grid(["ssi", "sss"])
    assert moves(g, 1, 1, 10.0) == [(1, 0, 9.0, 0)]

def test_boots_stop_the_slide():
    g = make_grid(["sss", "sis", "sss"])
    assert moves(g, 0, 2, 10.0, timer=3) == [(0, 1, 9.0, 2), (1, 1, 9.0, 2)]

def test_last_boots_step_still_slides():
    g = make_grid(["sss", "sis", "sss"])
    # timer 1 drops to 0 on this step
    assert moves(g, 0, 2, 10.0, timer=1)[1] == (2, 0, 7.5, 0)

def test_food_and_boots_pickups():
    g = make_grid(["sss", "sss"], {(0, 0): Item.FOOD, (1, 0): Item.BOOTS})
    assert moves(g, 0, 1, 10.0, timer=2) == [(0, 0, 29.0, 1), (1, 0, 9.0, 5)]

def test_item_on_the_slid_over_ice_is_skipped():
    g = make_grid(["ss", "is", "ss"], {(0, 1): Item.FOOD})
    assert moves(g, 0, 2, 10.0)[0] == (0, 0, 7.5, 0)

def test_coins_do_not_block():
    g = make_grid(["ss", "ss"], {(0, 0): Item.COIN})
    assert moves(g, 0, 1, 10.0)[0] == (0, 0, 9.0, 0)

# --- best-state arenas ------------------------------------------------------

def test_best_states_keep_the_max_per_regime():
    b = BestStates(2)
    b.offer(0, 5.0, 0)
    b.offer(0, 4.0, 0)
    assert b.idle[0] == 5.0 and not b.alive(1)
    b.offer(0, 3.0, 2)
    b.offer(0, 3.0, 4)
    b.offer(0, 2.0, 5)
    assert (b.shod[0], b.shod_timer[0]) == (3.0, 4)
    b.offer(1, 1.0, 1)
    assert b.alive(1)
    b.clear_prefix(1)
    assert not b.alive(0) and b.alive(1)

def test_bottom_row_seeding():
    g = make_grid(["ssss", "smsi"], {(2, 1): Item.BOOTS, (3, 1): Item.FOOD})
    b = BestStates(8)
    seed_bottom_row(g, b, D)
    assert b.idle[4:] == [99.0, 97.0, 0.0, 119.0]
    assert b.shod[6] == 99.0 and b.shod_timer[6] == 5
    assert not any(b.alive(i) for i in range(4))

def test_shod_states_expand_with_their_own_timer():
    g = make_grid(["ss", "is", "ss"])
    b = BestStates(6)
    b.offer(g.idx(0, 2), 10.0, 1)
    expand_row(g, b, 2, D)
    # timer 1 runs out on the ice, so the climber slides past row 1
    assert not b.alive(g.idx(0, 1))
    assert b.idle[g.idx(0, 0)] == 7.5

# --- analysis ---------------------------------------------------------------

def test_plain_stone_is_fully_reachable():
    res = analyze(make_grid(["ssss"] * 6), D)
    assert res.reachable_rows() == [True] * 6
    assert res.dead_rows() == []

def test_solid_ice_row_is_skipped_over():
    res = analyze(make_grid(["sss", "iii", "sss"]), D)
    assert res.dead_rows() == [1]
    assert res.row_reachable(0)

def test_stamina_runs_out_on_a_mud_column():
    d = replace(D, stamina_budget=10.0)
    res = analyze(make_grid(["mm"] * 6), d)
    # 10 - 3 = 7 on the bottom row, then 4, then 1, then dead
    assert res.dead_rows() == [0, 1, 2]

def test_analyze_does_not_touch_the_grid():
    g = make_grid(["sss", "iii", "sss"])
    before = (list(g.terrain), list(g.item))
    analyze(g, D)
    assert (g.terrain, g.item) == before

# --- repair -----------------------------------------------------------------

def test_candidates_follow_live_cells_below():
    g = make_grid(["ssss", "ssss", "ssss"])
    b = BestStates(12)
    b.offer(g.idx(1, 2), 5.0, 0)
    assert repair_candidates(g, b, 2) == [1, 2]
    g.set_item(2, 1, Item.FOOD)
    assert is_saturated(g, 2, 1)
    assert repair_candidates(g, b, 2) == [1]
    b.offer(g.idx(3, 2), 5.0, 0)
    assert repair_candidates(g, b, 2) == [1, 3]

def test_pick_column_prefers_the_middle():
    assert pick_column([0, 5, 9], 10, lambda: 0.0) == 0
    assert pick_column([0, 5, 9], 10, lambda: 0.5) == 5
    assert pick_column([0, 5, 9], 10, lambda: 0.999) == 9
    counts = {0: 0, 5: 0, 9: 0}
    stream = rng(77)
    for _ in range(700):
        counts[pick_column([0, 5, 9], 10, stream)] += 1
    assert counts[5] > counts[0] + counts[9]

def test_repair_cell_ladder():
    g = make_grid(["i", "s"])
    assert repair_cell(g, 0, 0, script(0.0, 0.99), D) == "food"
    assert g.item_at(0, 0) is Item.FOOD and g.terrain_at(0, 0) is Terrain.ICE
    assert repair_cell(g, 0, 0, script(0.99), D) == "ice->stone"
    assert is_saturated(g, 0, 0)

def test_repair_cell_can_drop_boots():
    g = make_grid(["s", "s"])
    assert repair_cell(g, 0, 0, script(0.0, 0.0), D) == "boots"
    assert g.item_at(0, 0) is Item.BOOTS
    # boots are upgraded to food once the footing is safe
    assert repair_cell(g, 0, 0, script(0.99), D) == "boots->food"

def test_repair_cell_softens_before_touching_coins():
    g = make_grid(["m", "s"], {(0, 0): Item.COIN})
    assert repair_cell(g, 0, 0, script(0.0), D) == "mud->stone"
    assert g.item_at(0, 0) is Item.COIN
    assert repair_cell(g, 0, 0, script(0.0), D) == "coin->food"

def test_ensure_reachable_fixes_an_ice_band():
    g = make_grid(["sss", "iii", "sss"])
    res = ensure_reachable(g, rng(7), D)
    assert res.repairs >= 1
    assert res.dead_rows() == []
    assert analyze(g, D).dead_rows() == []

def test_ensure_reachable_feeds_a_long_mud_climb():
    d = replace(D, stamina_budget=10.0)
    g = make_grid(["mm"] * 30)
    res = ensure_reachable(g, rng(8), d)
    assert analyze(g, d).dead_rows() == []
    assert g.count(Item.FOOD) + sum(1 for t in g.terrain if t is Terrain.STONE) >= 1
    assert res.repairs <= 3 * 2 * 30

def test_ensure_reachable_leaves_good_grids_alone():
    g = make_grid(["sss"] * 5)
    res = ensure_reachable(g, rng(1), D)
    assert res.repairs == 0
    assert g.terrain == [Terrain.STONE] * 15

def test_ensure_reachable_is_deterministic():
    grids = [make_grid(["imim", "miim", "iiii", "mimi", "ssss"]) for _ in range(2)]
    d = replace(D, stamina_budget=8.0)
    for g in grids:
        ensure_reachable(g, rng(42), d)
    assert grids[0].terrain == grids[1].terrain
    assert grids[0].item == grids[1].item

def test_repair_budget_overrun_fails_fast():
    g = make_grid(["sss", "iii", "sss"])
    with pytest.raises(RuntimeError):
        ensure_reachable(g, rng(7), D, max_repairs=0)
