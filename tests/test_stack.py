import pytest

from algokit.stack import cal_points, daily_temperatures, eval_rpn, is_valid_brackets


def test_cal_points_example():
    assert cal_points(["5", "2", "C", "D", "+"]) == 30


def test_cal_points_with_negative():
    assert cal_points(["5", "-2", "4", "C", "D", "9", "+", "+"]) == 27


def test_cal_points_single_and_cancelled():
    assert cal_points(["1"]) == 1
    assert cal_points(["1", "C"]) == 0


def test_cal_points_cancel_on_empty_raises():
    with pytest.raises(IndexError):
        cal_points(["C"])


def test_cal_points_bad_score_raises():
    with pytest.raises(ValueError):
        cal_points(["x"])


@pytest.mark.parametrize(
    "temperatures",
    [[73, 74, 75, 71, 69, 72, 76, 73], [30, 40, 50, 60], [30, 60, 90], [55, 38, 53, 81, 61, 93]],
)
def test_daily_temperatures_invariants(temperatures):
    waits = daily_temperatures(temperatures)
    assert len(waits) == len(temperatures)
    for day, wait in enumerate(waits):
        if wait:
            later = day + wait
            assert temperatures[later] > temperatures[day]
            assert all(t <= temperatures[day] for t in temperatures[day + 1:later])
        else:
            assert all(t <= temperatures[day] for t in temperatures[day + 1:])


def test_daily_temperatures_never_warmer():
    assert daily_temperatures([5, 4, 3]) == [0, 0, 0]
    assert daily_temperatures([]) == []


def test_eval_rpn_example():
    assert eval_rpn(["2", "1", "+", "3", "*"]) == 9


def test_eval_rpn_single_number():
    assert eval_rpn(["42"]) == 42


def test_eval_rpn_division_truncates_toward_zero():
    assert eval_rpn(["0", "7", "-", "2", "/"]) == -3
    assert eval_rpn(["7", "2", "/"]) == 3


def test_eval_rpn_leading_minus_is_operator():
    with pytest.raises(IndexError):
        eval_rpn(["-3"])


def test_eval_rpn_errors():
    with pytest.raises(ZeroDivisionError):
        eval_rpn(["1", "0", "/"])
    with pytest.raises(IndexError):
        eval_rpn([])
    with pytest.raises(IndexError):
        eval_rpn(["1", "+"])


@pytest.mark.parametrize(
    "text, expected",
    [
        ("()", True),
        ("()[]{}", True),
        ("{[]}", True),
        ("(]", False),
        ("([)]", False),
        ("", True),
        ("((", False),
        ("]", False),
        ("(a)", False),
    ],
)
def test_is_valid_brackets(text, expected):
    assert is_valid_brackets(text) is expected