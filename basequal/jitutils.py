import numpy as np
import numba


@numba.njit(cache=True)
def add_log10_prob(x, y):
    """Sum of two probabilities in log10 space.

    Parameters
    ----------
    x, y : float
        Log10-transformed probabilities.

    Returns
    -------
    z : float
        The log10-transformed sum of the un-transformed `x` and `y`.

    """
    if x == y == -np.inf:
        return -np.inf
    if x == np.inf or y == np.inf:
        return np.inf
    if x > y:
        return x + np.log10(1.0 + 10.0 ** (y - x))
    else:
        return y + np.log10(1.0 + 10.0 ** (x - y))


@numba.njit(cache=True)
def sum_log10_probs(array):
    """Sum of values in log10 space.

    Parameters
    ----------
    array : ndarray, float, shape (n_values, )
        Log10-transformed values.

    Returns
    -------
    z : float
        The log10-transformed sum of the un-transformed values.

    Notes
    -----
    Any `+inf` value gives `+inf` and otherwise any `nan` value
    gives `nan`, regardless of order.
    All terms are shifted by the largest value so that every
    exponentiated term lies in (0, 1].
    The array must contain at least one value.

    """
    n = len(array)
    has_nan = False
    maximum = -np.inf
    for i in range(n):
        val = array[i]
        if val == np.inf:
            return np.inf
        if np.isnan(val):
            has_nan = True
        elif val > maximum:
            maximum = val
    if has_nan:
        return np.nan
    if maximum == -np.inf:
        # sum of zero probabilities
        return -np.inf
    if n == 1:
        return maximum
    total = 0.0
    for i in range(n):
        total += 10.0 ** (array[i] - maximum)
    return maximum + np.log10(total)


@numba.njit(cache=True)
def phred_probability_tables(max_quality):
    """Probabilities of a correct and incorrect base call
    for each phred score.

    Parameters
    ----------
    max_quality : int
        Exclusive upper bound of phred scores.

    Returns
    -------
    correct : ndarray, float, shape (max_quality, )
        Probability that a call with each score is correct.
    incorrect : ndarray, float, shape (max_quality, )
        Probability that a call with each score is incorrect.

    """
    correct = np.empty(max_quality, dtype=np.float64)
    incorrect = np.empty(max_quality, dtype=np.float64)
    for i in range(max_quality):
        correct[i] = 1.0 - 10.0 ** (i / -10.0)
        incorrect[i] = 1.0 - correct[i]
    return correct, incorrect
