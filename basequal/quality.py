#!/usr/bin/env python3

import operator
import numpy as np

from basequal.constant import MAX_QUALITY
from basequal.jitutils import (
    add_log10_prob,
    sum_log10_probs,
    phred_probability_tables,
)

__all__ = [
    "QualityOutOfRangeError",
    "QualityProbabilityModel",
    "DEFAULT_MODEL",
    "correct_probability",
    "error_probability",
    "log10_correct_probability",
    "correct_probabilities",
    "error_probabilities",
    "log10_error_probability",
    "add_log10_probabilities",
    "sum_log10_probabilities",
]


QUALITY_RANGE_ERROR = "Phred score {score} is outside of the range [0, {max_quality})."
QUALITY_DTYPE_ERROR = "Phred scores must be integers not '{dtype}'."


class QualityOutOfRangeError(IndexError):
    pass


def log10_error_probability(score):
    """Log10 probability that a call with the given phred score is incorrect.

    Parameters
    ----------
    score : float or array_like
        Phred scaled quality score(s). Fractional, negative and
        very large scores are allowed.

    Returns
    -------
    log10_prob : float or ndarray
        Log10 transformed probability of an incorrect call.
    """
    return score / -10.0


def add_log10_probabilities(x, y):
    """Log10 of the sum of two log10 transformed probabilities.

    Parameters
    ----------
    x, y : float
        Log10 transformed probabilities.

    Returns
    -------
    log10_sum : float
        The log10 transformed sum of the un-transformed `x` and `y`.
    """
    return float(add_log10_prob(float(x), float(y)))


def sum_log10_probabilities(values):
    """Log10 of the sum of log10 transformed probabilities.

    Parameters
    ----------
    values : array_like, float, shape (n_values, )
        Log10 transformed probabilities.

    Returns
    -------
    log10_sum : float
        The log10 transformed sum of the un-transformed values.

    Raises
    ------
    ValueError
        If `values` is empty or not one-dimensional.

    Notes
    -----
    Computed with the log-sum-exp method so that no un-transformed
    value is ever materialized.
    A `+inf` value results in `+inf`, otherwise a `nan` value results
    in `nan`. If all values are `-inf` the result is `-inf`.
    """
    array = np.asarray(values, dtype=np.float64)
    if array.ndim != 1:
        raise ValueError("Expected a one-dimensional sequence of values.")
    if len(array) == 0:
        raise ValueError("Cannot sum an empty sequence of probabilities.")
    return float(sum_log10_probs(array))


class QualityProbabilityModel(object):
    """Cached probabilities of base call correctness for every
    phred score of a quality encoding.

    Parameters
    ----------
    max_quality : int
        Exclusive upper bound of phred scores in the cache.

    Notes
    -----
    The cached tables are read-only once the model is constructed so
    a single model can be shared between threads.
    """

    def __init__(self, max_quality=MAX_QUALITY):
        max_quality = operator.index(max_quality)
        if max_quality < 1:
            raise ValueError("Maximum quality must be a positive integer.")
        self._max_quality = max_quality
        correct, incorrect = phred_probability_tables(max_quality)
        with np.errstate(divide="ignore"):
            log10_correct = np.log10(correct)
        for array in (correct, incorrect, log10_correct):
            array.flags.writeable = False
        self._correct = correct
        self._incorrect = incorrect
        self._log10_correct = log10_correct

    @classmethod
    def from_encoding(cls, encoding):
        """Model covering the scores of a quality encoding."""
        return cls(max_quality=encoding.max_quality)

    @property
    def max_quality(self):
        return self._max_quality

    def __repr__(self):
        return "{}(max_quality={})".format(type(self).__name__, self._max_quality)

    def _check_score(self, score):
        score = operator.index(score)
        if not 0 <= score < self._max_quality:
            raise QualityOutOfRangeError(
                QUALITY_RANGE_ERROR.format(score=score, max_quality=self._max_quality)
            )
        return score

    def _check_scores(self, scores):
        scores = np.asarray(scores)
        if scores.size == 0:
            return scores.astype(np.int64)
        if scores.dtype.kind not in "iu":
            raise TypeError(QUALITY_DTYPE_ERROR.format(dtype=scores.dtype))
        for score in (scores.min(), scores.max()):
            if not 0 <= score < self._max_quality:
                raise QualityOutOfRangeError(
                    QUALITY_RANGE_ERROR.format(score=score, max_quality=self._max_quality)
                )
        return scores

    def correct_probability(self, score):
        """Probability that a call with the given phred score is correct.

        Parameters
        ----------
        score : int
            Phred scaled quality score.

        Returns
        -------
        prob : float
            Probability (not log transformed).

        Raises
        ------
        QualityOutOfRangeError
            If `score` is outside of `[0, max_quality)`.
        """
        return float(self._correct[self._check_score(score)])

    def error_probability(self, score):
        """Probability that a call with the given phred score is incorrect.

        Parameters
        ----------
        score : int
            Phred scaled quality score.

        Returns
        -------
        prob : float
            Probability (not log transformed).

        Raises
        ------
        QualityOutOfRangeError
            If `score` is outside of `[0, max_quality)`.
        """
        return float(self._incorrect[self._check_score(score)])

    def log10_correct_probability(self, score):
        """Log10 probability that a call with the given phred score
        is correct (`-inf` for a score of 0).
        """
        return float(self._log10_correct[self._check_score(score)])

    def correct_probabilities(self, scores):
        """Probabilities of correct calls for an array of phred scores.

        Parameters
        ----------
        scores : array_like, int
            Phred scaled quality scores of any shape.

        Returns
        -------
        probs : ndarray, float
            Probabilities with the same shape as `scores`.
        """
        return self._correct[self._check_scores(scores)]

    def error_probabilities(self, scores):
        """Probabilities of incorrect calls for an array of phred scores.

        Parameters
        ----------
        scores : array_like, int
            Phred scaled quality scores of any shape.

        Returns
        -------
        probs : ndarray, float
            Probabilities with the same shape as `scores`.
        """
        return self._incorrect[self._check_scores(scores)]

    log10_error_probability = staticmethod(log10_error_probability)
    add_log10_probabilities = staticmethod(add_log10_probabilities)
    sum_log10_probabilities = staticmethod(sum_log10_probabilities)


DEFAULT_MODEL = QualityProbabilityModel()

correct_probability = DEFAULT_MODEL.correct_probability
error_probability = DEFAULT_MODEL.error_probability
log10_correct_probability = DEFAULT_MODEL.log10_correct_probability
correct_probabilities = DEFAULT_MODEL.correct_probabilities
error_probabilities = DEFAULT_MODEL.error_probabilities
