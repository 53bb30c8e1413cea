import pytest

from pacmaze.errors import ErrorCode, PacManError
from pacmaze.mapfile import (
    check_paths,
    check_walls,
    count_components,
    flood_fill,
    has_ber_extension,
    load_map,
    measure_map,
    parse_map,
)

SAMPLE = "1111111\n1P0C0E1\n10M0001\n1111111"


def rows_of(text):
    return [list(line) for line in text.split("\n")]


@pytest.mark.parametrize(
    "path, expected",
    [
        ("maps/level.ber", True),
        ("level.berx", True),
        ("level.txt", False),
        (".hidden.ber", False),
        ("noext", False),
        ("a.b", False),
    ],
)
def test_has_ber_extension(path, expected):
    assert has_ber_extension(path) is expected


def test_measure_sample():
    assert measure_map(SAMPLE) == (len("1111111"), SAMPLE.count("\n") + 1)


def test_measure_trailing_newline_is_shape_error():
    with pytest.raises(PacManError) as info:
        measure_map(SAMPLE + "\n")
    assert info.value.code is ErrorCode.SHAPE


def test_measure_ragged_is_shape_error():
    with pytest.raises(PacManError) as info:
        measure_map("11\n111")
    assert info.value.code is ErrorCode.SHAPE


def test_measure_empty_is_shape_error():
    with pytest.raises(PacManError) as info:
        measure_map("")
    assert info.value.code is ErrorCode.SHAPE


def test_measure_unknown_character():
    with pytest.raises(PacManError) as info:
        measure_map("1X1")
    assert info.value.code is ErrorCode.CHARACTER


def test_shape_beats_character():
    with pytest.raises(PacManError) as info:
        measure_map("1X1\n11")
    assert info.value.code is ErrorCode.SHAPE


def test_parse_sample():
    level = parse_map(SAMPLE)
    assert level.player == (1, 1)
    assert level.enemy == (2, 2)
    assert level.stars == 1
    assert level.rows[2][2] == "0"
    assert (level.width, level.height) == measure_map(SAMPLE)


def test_check_walls_rejects_gap():
    with pytest.raises(PacManError) as info:
        check_walls(rows_of("111\n0P1\n111"))
    assert info.value.code is ErrorCode.WALLS


def test_parse_open_border():
    with pytest.raises(PacManError) as info:
        parse_map("1111111\n1P0C0E0\n10M0001\n1111111")
    assert info.value.code is ErrorCode.WALLS


def test_count_components_counts_collectibles():
    assert count_components(rows_of("1111111\n1PCC0E1\n10M0C01\n1111111")) == 3


def test_count_components_two_players():
    with pytest.raises(PacManError) as info:
        count_components(rows_of("1111111\n1PPC0E1\n10M0001\n1111111"))
    assert info.value.code is ErrorCode.COMPONENTS


def test_count_components_no_collectible():
    with pytest.raises(PacManError) as info:
        count_components(rows_of("111111\n1P00E1\n10M001\n111111"))
    assert info.value.code is ErrorCode.COMPONENTS


def test_flood_fill_marks_reachable_only():
    rows = rows_of("11111\n1P1C1\n11111")
    filled = flood_fill(rows, (1, 1))
    assert filled[1] == list("1F1C1")
    assert rows[1] == list("1P1C1")


def test_check_paths_unreachable_collectible():
    rows = rows_of("1111111\n1P01CE1\n1001001\n1111111")
    with pytest.raises(PacManError) as info:
        check_paths(rows, (1, 1))
    assert info.value.code is ErrorCode.PATHS


def test_parse_blocked_exit():
    with pytest.raises(PacManError) as info:
        parse_map("1111111\n1PC01E1\n10M0101\n1111111")
    assert info.value.code is ErrorCode.PATHS


def test_load_map_round_trip(tmp_path):
    path = tmp_path / "level.ber"
    path.write_text(SAMPLE)
    level = load_map(str(path))
    assert level == parse_map(SAMPLE)


def test_load_missing_file(tmp_path):
    with pytest.raises(PacManError) as info:
        load_map(str(tmp_path / "missing.ber"))
    assert info.value.code is ErrorCode.PATH