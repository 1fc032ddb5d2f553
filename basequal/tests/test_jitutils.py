import numpy as np
import pytest

from basequal import jitutils


def test_add_log10_prob():

    for _ in range(10):
        p1 = np.random.rand()
        p2 = np.random.rand()

        log_p1 = np.log10(p1)
        log_p2 = np.log10(p2)

        query = jitutils.add_log10_prob(log_p1, log_p2)
        answer = np.log10(p1 + p2)

        assert np.round(query, 10) == np.round(answer, 10)


@pytest.mark.parametrize(
    "x,y,answer",
    [
        pytest.param(-np.inf, -np.inf, -np.inf, id="zeros"),
        pytest.param(-np.inf, -2.0, -2.0, id="zero-x"),
        pytest.param(-2.0, -np.inf, -2.0, id="zero-y"),
        pytest.param(np.inf, -2.0, np.inf, id="inf-x"),
        pytest.param(-np.inf, np.inf, np.inf, id="inf-y"),
    ],
)
def test_add_log10_prob_infinite(x, y, answer):
    assert jitutils.add_log10_prob(x, y) == answer


def test_sum_log10_probs():

    for _ in range(10):
        length = np.random.randint(2, 10)
        p = np.random.rand(length)
        answer = np.log10(np.sum(p))

        log_p = np.log10(p)
        query = jitutils.sum_log10_probs(log_p)

        assert np.round(query, 10) == np.round(answer, 10)


def test_sum_log10_probs_matches_pairwise():
    log_p = np.log10(np.random.rand(20))
    accumulate = log_p[0]
    for i in range(1, len(log_p)):
        accumulate = jitutils.add_log10_prob(accumulate, log_p[i])
    np.testing.assert_almost_equal(jitutils.sum_log10_probs(log_p), accumulate)


def test_sum_log10_probs_zeros():

    p = np.random.rand(10)
    p[5:] = 0
    answer = np.log10(np.sum(p))

    # ignore warning for log of 0 which produces -inf
    with np.errstate(divide="ignore"):
        log_p = np.log10(p)

    query = jitutils.sum_log10_probs(log_p)

    np.testing.assert_almost_equal(query, answer)


def test_sum_log10_probs_small_values():
    # naive exponentiation underflows to zero
    log_p = np.array([-400.0, -400.0, -400.0, -400.0])
    with np.errstate(divide="ignore"):
        assert np.log10(np.sum(10.0**log_p)) == -np.inf
    query = jitutils.sum_log10_probs(log_p)
    np.testing.assert_almost_equal(query, -400.0 + np.log10(4))


@pytest.mark.parametrize("max_quality", [1, 10, 93])
def test_phred_probability_tables(max_quality):
    correct, incorrect = jitutils.phred_probability_tables(max_quality)
    assert correct.shape == (max_quality,)
    assert incorrect.shape == (max_quality,)
    qual = np.arange(max_quality)
    np.testing.assert_almost_equal(incorrect, 10 ** (qual / -10))
    np.testing.assert_almost_equal(correct + incorrect, 1.0)
    assert correct[0] == 0.0

