#!/usr/bin/env python3

import numpy as np
from dataclasses import dataclass

from basequal.constant import MAX_QUALITY, SANGER_OFFSET, ILLUMINA_OFFSET
from basequal.quality import QualityOutOfRangeError, QUALITY_RANGE_ERROR

__all__ = [
    "QualityEncoding",
    "SANGER",
    "ILLUMINA_1_3",
    "ILLUMINA_1_5",
    "ILLUMINA_1_8",
    "qual_of_char",
    "char_of_qual",
    "prob_of_qual",
    "qual_of_prob",
]


@dataclass(frozen=True)
class QualityEncoding(object):
    """ASCII encoding of phred scaled quality scores.

    Attributes
    ----------
    name : str
        Name of the encoding.
    offset : int
        ASCII value of the character encoding a score of 0.
    max_quality : int
        Exclusive upper bound of scores representable by the encoding.
    """

    name: str
    offset: int
    max_quality: int


SANGER = QualityEncoding("sanger", SANGER_OFFSET, MAX_QUALITY)
ILLUMINA_1_3 = QualityEncoding("illumina-1.3", ILLUMINA_OFFSET, 62)
ILLUMINA_1_5 = QualityEncoding("illumina-1.5", ILLUMINA_OFFSET, 62)
ILLUMINA_1_8 = QualityEncoding("illumina-1.8", SANGER_OFFSET, MAX_QUALITY)


def _check_quals(qual, encoding):
    low, high = np.min(qual), np.max(qual)
    for score in (low, high):
        if not 0 <= score < encoding.max_quality:
            raise QualityOutOfRangeError(
                QUALITY_RANGE_ERROR.format(score=score, max_quality=encoding.max_quality)
            )


def qual_of_char(char, encoding=SANGER):
    """Convert unicode characters of a qual string into an integer value.

    Paramters
    ---------
    char : array_like
        A single char or array of chars.
    encoding : QualityEncoding
        Encoding of the qual string (default = SANGER).

    Returns
    -------
    qual : array_like
        A single int or array of integers.
    """
    if isinstance(char, str):
        if len(char) != 1:
            raise ValueError("Input must be character or array of characters")
        qual = ord(char) - encoding.offset
        _check_quals(qual, encoding)
        return qual
    elif isinstance(char, np.ndarray):
        if char.dtype == np.dtype("<U1"):
            qual = char.view(np.int32) - encoding.offset
            if qual.size:
                _check_quals(qual, encoding)
            return qual
        else:
            raise ValueError('Array must have dtype "<U1"')
    else:
        raise ValueError("Input must be character or array of characters")


def char_of_qual(qual, encoding=SANGER):
    """Convert an integer quality score into its unicode character."""
    _check_quals(qual, encoding)
    return chr(qual + encoding.offset)


def prob_of_qual(qual):
    """Convert phred-scaled quality integer into a probability of the call being correct.

    Paramters
    ---------
    qual : array_like
        A single int or array of integers.

    Returns
    -------
    prob : array_like
        A single float or array of floats.
    """
    return 1 - (10 ** (np.asarray(qual) / -10))


def qual_of_prob(prob, precision=6):
    """Convert a probability of a call being correct into a phred-scaled quality integer.

    Paramters
    ---------
    prob : array_like
        A single float or array of floats.
    precision : int
        Max precision to treat the probability

    Returns
    -------
    qual : array_like
        A single int or array of integers.
    """
    # a precision of 6 produces a max qual of 60
    maximum = 1 - 0.1**precision
    prob = np.minimum(prob, maximum)
    prob = np.floor(prob * 10**precision) / 10**precision
    return np.round((-10 * np.log10((1 - prob)))).astype(int)
