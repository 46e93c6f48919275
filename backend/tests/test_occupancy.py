"""Tests for the hourly occupancy model."""
import pytest

from app.models.simulation import Room
from app.simulation.occupancy import DEFAULT_OCCUPANCY_PROB, OccupancyModel, hour_of_day
from app.simulation.rng import create_rng


def test_defaults_cover_every_room_with_24_hours():
    assert set(DEFAULT_OCCUPANCY_PROB) == set(Room)
    for probs in DEFAULT_OCCUPANCY_PROB.values():
        assert len(probs) == 24


def test_therapy_rooms_busy_during_business_hours():
    for room in (Room.therapy_a, Room.therapy_b):
        probs = DEFAULT_OCCUPANCY_PROB[room]
        assert probs[8] == 0.1
        assert probs[9] == 0.6
        assert probs[16] == 0.6
        assert probs[17] == 0.1


def test_waiting_and_admin_schedules():
    assert DEFAULT_OCCUPANCY_PROB[Room.waiting][12] == 0.8
    assert DEFAULT_OCCUPANCY_PROB[Room.waiting][3] == 0.2
    assert DEFAULT_OCCUPANCY_PROB[Room.admin][8] == 0.9
    assert DEFAULT_OCCUPANCY_PROB[Room.admin][17] == 0.9
    assert DEFAULT_OCCUPANCY_PROB[Room.admin][18] == 0.1


def test_default_table_is_read_only():
    with pytest.raises(TypeError):
        DEFAULT_OCCUPANCY_PROB[Room.admin] = (1.0,) * 24


def test_hour_of_day():
    assert hour_of_day(0) == 0
    assert hour_of_day(59) == 0
    assert hour_of_day(60) == 1
    assert hour_of_day(1439) == 23


def test_override_replaces_only_that_room():
    model = OccupancyModel({Room.waiting: [0.0] * 24})
    assert model.probability(Room.waiting, 12) == 0.0
    assert model.probability(Room.admin, 12) == DEFAULT_OCCUPANCY_PROB[Room.admin][12]


def test_override_accepts_plain_room_names():
    model = OccupancyModel({"Admin": [0.5] * 24})
    assert model.probability(Room.admin, 3) == 0.5


def test_short_override_falls_back_to_default_for_missing_hours():
    model = OccupancyModel({Room.therapy_a: [1.0] * 10})
    assert model.probability(Room.therapy_a, 9) == 1.0
    assert model.probability(Room.therapy_a, 12) == DEFAULT_OCCUPANCY_PROB[Room.therapy_a][12]


def test_override_does_not_mutate_defaults():
    OccupancyModel({Room.therapy_b: [0.9] * 24})
    assert DEFAULT_OCCUPANCY_PROB[Room.therapy_b][0] == 0.1


def test_draw_consumes_exactly_one_value(fixed_rng):
    rng = fixed_rng(0.05, 0.95)
    model = OccupancyModel()
    assert model.draw(Room.therapy_a, 0, rng) is True
    assert rng.calls == 1
    assert model.draw(Room.therapy_a, 0, rng) is False
    assert rng.calls == 2


def test_draw_is_strictly_less_than(fixed_rng):
    model = OccupancyModel({Room.admin: [0.5] * 24})
    assert model.draw(Room.admin, 0, fixed_rng(0.5)) is False


def test_certain_and_impossible_probabilities():
    rng = create_rng("occ")
    always = OccupancyModel({Room.admin: [1.0] * 24})
    never = OccupancyModel({Room.admin: [0.0] * 24})
    assert all(always.draw(Room.admin, h, rng) for h in range(24))
    assert not any(never.draw(Room.admin, h, rng) for h in range(24))


def test_out_of_range_probability_is_not_clamped():
    rng = create_rng("unchecked")
    model = OccupancyModel({Room.waiting: [1.5] * 24})
    assert model.probability(Room.waiting, 0) == 1.5
    assert all(model.draw(Room.waiting, 0, rng) for _ in range(100))
