from poolcaptain.generator import partition_roster
from poolcaptain.models import Player


def _roster() -> list[Player]:
    return [
        Player(id="a", name="Ann", skill8=5, required8=True),
        Player(id="b", name="Bob", skill8=4, required9=True),
        Player(id="c", name="Cal", skill8=3, required8=True, absent=True),
        Player(id="d", name="Dee", skill8=2),
        Player(id="e", name="Eve", skill8=6, required8=True, required9=True),
    ]


def test_partition_by_variant_pin():
    partition = partition_roster(_roster(), "8-Ball")

    assert [p.id for p in partition.required] == ["a", "e"]
    assert [p.id for p in partition.optional] == ["b", "d"]
    assert [p.id for p in partition.absent] == ["c"]
    assert [p.id for p in partition.available] == ["a", "b", "d", "e"]
    assert partition.available_count == 4


def test_pins_are_independent_per_variant():
    partition = partition_roster(_roster(), "9-Ball")

    assert [p.id for p in partition.required] == ["b", "e"]
    assert [p.id for p in partition.optional] == ["a", "d"]


def test_empty_roster():
    partition = partition_roster([], "8-Ball")

    assert partition.required == ()
    assert partition.optional == ()
    assert partition.available_count == 0
