import csv
from io import StringIO

from poolcaptain.export import EXPORT_HEADERS, export_results_to_csv
from poolcaptain.generator import generate
from poolcaptain.models import Player


def test_export_writes_one_row_per_lineup():
    roster = [
        Player(id="a", name="Ann", skill8=5, skill9=6),
        Player(id="b", name="Bob", skill8=4, skill9=2),
        Player(id="c", name="Cal", skill8=3, skill9=3),
    ]
    results = generate(roster, "Double-Jeopardy")

    rows = list(csv.reader(StringIO(export_results_to_csv(results))))

    assert tuple(rows[0]) == EXPORT_HEADERS
    assert [row[0] for row in rows[1:]] == ["8-Ball", "9-Ball"]
    eight = rows[1]
    assert eight[1] == "8-Ball-L001"
    assert eight[2] == "12"
    assert eight[4] == "no"
    assert eight[5] == "a b c ghost-8-Ball-0 ghost-8-Ball-1"
    assert eight[7] == "5 4 3 0 0"
    assert rows[2][5] == "a c b ghost-9-Ball-0 ghost-9-Ball-1"


def test_export_empty_results_has_only_header():
    roster = [Player(id=f"p{i}", name=f"P{i}", skill8=5) for i in range(6)]

    text = export_results_to_csv(generate(roster, "8-Ball"))

    assert text.strip().splitlines() == [",".join(EXPORT_HEADERS)]
