from blockfloyd.generate import INPUT_ERROR, SIZE_ERROR, USAGE, WRITE_ERROR, main
from blockfloyd.matrixfile import INF, format_matrix, read_matrix


def test_writes_file_and_prints(tmp_path, capsys):
    path = tmp_path / "m.bin"
    assert main(["5", str(path)]) == 0
    matrix = read_matrix(path)
    assert len(matrix) == 5
    assert all(matrix[i][i] == 0 for i in range(5))
    assert all(v == INF or 0 <= v <= 9 for row in matrix for v in row)
    assert capsys.readouterr().out == format_matrix(matrix)


def test_max_weight_argument(tmp_path):
    path = tmp_path / "m.bin"
    assert main(["6", str(path), "1"]) == 0
    matrix = read_matrix(path)
    values = {v for i, row in enumerate(matrix) for j, v in enumerate(row) if i != j}
    assert values <= {1, INF}


def test_large_matrix_not_printed(tmp_path, capsys):
    path = tmp_path / "m.bin"
    assert main(["33", str(path)]) == 0
    assert capsys.readouterr().out == ""
    assert len(read_matrix(path)) == 33


def test_wrong_argument_count(capsys):
    assert main(["5"]) == INPUT_ERROR
    assert capsys.readouterr().out.strip() == USAGE


def test_size_too_small(tmp_path, capsys):
    assert main(["2", str(tmp_path / "m.bin")]) == SIZE_ERROR
    assert "at least equal to 3" in capsys.readouterr().out


def test_non_numeric_size(tmp_path, capsys):
    assert main(["abc", str(tmp_path / "m.bin")]) == SIZE_ERROR
    assert "at least equal to 3" in capsys.readouterr().out


def test_size_too_big(tmp_path, capsys):
    assert main(["99999999999999999999999", str(tmp_path / "m.bin")]) == SIZE_ERROR
    assert "too big" in capsys.readouterr().out


def test_bad_max_weight(tmp_path, capsys):
    path = tmp_path / "m.bin"
    assert main(["5", str(path), "0"]) == SIZE_ERROR
    assert "at least equal to 1" in capsys.readouterr().out
    assert not path.exists()


def test_unwritable_path(tmp_path, capsys):
    assert main(["4", str(tmp_path / "missing" / "m.bin")]) == WRITE_ERROR
    assert "Cannot write" in capsys.readouterr().out