import numpy as np
import pytest

from cfdlab.config import Config
from cfdlab.datafile import (
    DataFileError,
    find_string,
    read_double,
    read_int,
    read_matrix,
    read_pgm,
    read_string,
    write_matrix,
)


@pytest.fixture
def datafile(tmp_path):
    path = tmp_path / "scenario.dat"
    path.write_text(
        "# comment line imax 3\n"
        "\n"
        "imax 50   # trailing comment\n"
        "Re\t100.5\n"
        "problem Cavity extra\n"
        "omg   1.7\n"
    )
    return path


def test_find_string_returns_value_text(datafile):
    assert find_string(datafile, "problem") == "Cavity extra"


def test_find_string_strips_comment(datafile):
    assert find_string(datafile, "imax").strip() == "50"


def test_read_int_ignores_commented_definition(datafile):
    assert read_int(datafile, "imax") == 50


def test_read_double(datafile):
    assert read_double(datafile, "Re") == 100.5
    assert read_double(datafile, "omg") == 1.7


def test_read_string_takes_first_word(datafile):
    assert read_string(datafile, "problem") == "Cavity"


def test_star_prefix_is_dropped(datafile):
    assert read_string(datafile, "*problem") == "Cavity"
    assert read_int(datafile, "*imax") == 50


def test_read_int_truncates_decimal(datafile):
    assert read_int(datafile, "omg") == 1


def test_missing_variable_raises(datafile):
    with pytest.raises(DataFileError, match="variable not found"):
        read_int(datafile, "jmax")


def test_missing_file_raises(tmp_path):
    with pytest.raises(DataFileError, match="Could not open file"):
        find_string(tmp_path / "absent.dat", "imax")


def test_name_without_value_raises(tmp_path):
    path = tmp_path / "bad.dat"
    path.write_text("imax\nRe 3\n")
    with pytest.raises(DataFileError, match="wrong format"):
        read_double(path, "Re")


def test_non_numeric_value_raises(tmp_path):
    path = tmp_path / "bad.dat"
    path.write_text("imax abc\n")
    with pytest.raises(DataFileError, match="wrong format"):
        read_int(path, "imax")


def test_matrix_round_trip(tmp_path):
    path = tmp_path / "m.bin"
    m = np.arange(12, dtype=float).reshape(3, 4) * 0.5
    write_matrix(path, m, 0, 2, 0, 3, 1.0, 1.0, True)
    assert path.stat().st_size == 12 * 4
    assert np.array_equal(read_matrix(path, 0, 2, 0, 3), m)


def test_matrix_column_index_is_outermost(tmp_path):
    path = tmp_path / "m.bin"
    m = np.array([[1.0, 2.0], [3.0, 4.0]])
    write_matrix(path, m, 0, 1, 0, 1, 1.0, 1.0, True)
    raw = np.frombuffer(path.read_bytes(), dtype=np.float32)
    assert raw.tolist() == [1.0, 3.0, 2.0, 4.0]


def test_matrix_sub_block(tmp_path):
    path = tmp_path / "m.bin"
    m = np.arange(20, dtype=float).reshape(4, 5)
    write_matrix(path, m, 1, 2, 2, 4, 1.0, 1.0, True)
    assert np.array_equal(read_matrix(path, 1, 2, 2, 4), m[1:3, 2:5])


def test_matrix_append_and_overwrite(tmp_path):
    path = tmp_path / "m.bin"
    first = np.ones((2, 2))
    second = np.full((2, 2), 2.0)
    write_matrix(path, first, 0, 1, 0, 1, 1.0, 1.0, True)
    write_matrix(path, second, 0, 1, 0, 1, 1.0, 1.0, False)
    assert path.stat().st_size == 2 * 4 * 4
    assert np.array_equal(read_matrix(path, 0, 1, 0, 1), first)
    write_matrix(path, second, 0, 1, 0, 1, 1.0, 1.0, True)
    assert path.stat().st_size == 4 * 4
    assert np.array_equal(read_matrix(path, 0, 1, 0, 1), second)


def test_read_matrix_short_file_raises(tmp_path):
    path = tmp_path / "m.bin"
    write_matrix(path, np.ones((2, 2)), 0, 1, 0, 1, 1.0, 1.0, True)
    with pytest.raises(DataFileError):
        read_matrix(path, 0, 2, 0, 2)


def test_read_matrix_missing_file_raises(tmp_path):
    with pytest.raises(DataFileError):
        read_matrix(tmp_path / "absent.bin", 0, 1, 0, 1)


ROWS = [
    [2, 2, 2, 2],
    [2, 1, 1, 4],
    [3, 1, 1, 2],
    [2, 2, 2, 2],
]


def _write_pgm(path, rows, header="P2\n# a comment\n"):
    body = "\n".join(" ".join(str(v) for v in row) for row in rows)
    path.write_text(f"{header}{len(rows[0])} {len(rows)}\n6\n{body}\n")


def _config(path, **kwargs):
    values = dict(geometry=str(path), imax=2, jmax=2, il=1, jb=1, l_imax=2, l_jmax=2)
    values.update(kwargs)
    return Config(**values)


def test_read_pgm_identity_scaling(tmp_path):
    path = tmp_path / "geo.pgm"
    _write_pgm(path, ROWS)
    config = _config(path)
    result = read_pgm(config)
    expected = np.array(ROWS[::-1]).T
    assert result.shape == (4, 4)
    assert np.array_equal(result, expected)
    assert config.total_n_fluid == sum(row.count(1) for row in ROWS)
    assert config.n_fluid == config.total_n_fluid


def test_read_pgm_bottom_left_is_first_index(tmp_path):
    path = tmp_path / "geo.pgm"
    _write_pgm(path, ROWS)
    result = read_pgm(_config(path))
    assert result[0, 1] == ROWS[2][0]
    assert result[3, 2] == ROWS[1][3]


def test_read_pgm_rejects_non_p2(tmp_path):
    path = tmp_path / "geo.pgm"
    _write_pgm(path, ROWS, header="P5\n")
    with pytest.raises(DataFileError, match="P2"):
        read_pgm(_config(path))


def test_read_pgm_too_few_values(tmp_path):
    path = tmp_path / "geo.pgm"
    path.write_text("P2\n4 4\n6\n1 1 1\n")
    with pytest.raises(DataFileError, match="read of geometry file failed"):
        read_pgm(_config(path))


def test_read_pgm_missing_file(tmp_path):
    with pytest.raises(DataFileError, match="Can not read file"):
        read_pgm(_config(tmp_path / "absent.pgm"))