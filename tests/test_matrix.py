import pytest

from pixel_proxy.errors import UnknownAlgorithmError
from pixel_proxy.processing import matrix


def test_bayer_2x2_matches_reference():
    assert matrix.get("2x2") == ((0, 2), (3, 1))
    assert [list(row) for row in matrix.get("2x2")] == [[0, 2], [3, 1]]


def test_bayer_4x4_matches_reference():
    assert matrix.get("4x4") == (
        (0, 8, 2, 10),
        (12, 4, 14, 6),
        (3, 11, 1, 9),
        (15, 7, 13, 5),
    )


@pytest.mark.parametrize("kind, size", [("2x2", 2), ("4x4", 4), ("8x8", 8)])
def test_bayer_matrices_are_permutations(kind, size):
    values = sorted(value for row in matrix.get(kind) for value in row)

    assert values == list(range(size * size))


def test_8x8_is_transpose_of_generated_bayer():
    generated = matrix.bayer_matrix(8)
    table = matrix.get("8x8")

    assert table[0] == (0, 48, 12, 60, 3, 51, 15, 63)
    assert all(table[y][x] == generated[x][y] for y in range(8) for x in range(8))


def test_clustered_matrix_is_fixed_ranking():
    clustered = matrix.get("clustered4x4")

    assert clustered[0] == (7, 13, 11, 4)
    assert sorted(value for row in clustered for value in row) == list(range(1, 17))


def test_matrices_are_shared_constants():
    assert matrix.get("4x4") is matrix.get("4x4")


def test_unknown_matrix_kind():
    with pytest.raises(UnknownAlgorithmError):
        matrix.get("3x3")
    with pytest.raises(UnknownAlgorithmError):
        matrix.bayer_matrix(3)


def test_threshold_is_centred_in_bucket():
    two = matrix.get("2x2")

    assert matrix.threshold(two, 0, 0) == pytest.approx(0.5 / 4 * 255)
    assert matrix.threshold(two, 1, 0) == pytest.approx(2.5 / 4 * 255)
    # coordinates wrap modulo the matrix size
    assert matrix.threshold(two, 3, 2) == matrix.threshold(two, 1, 0)
