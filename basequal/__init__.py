from basequal.constant import MAX_QUALITY
from basequal.quality import (
    QualityOutOfRangeError,
    QualityProbabilityModel,
    correct_probability,
    error_probability,
    log10_correct_probability,
    correct_probabilities,
    error_probabilities,
    log10_error_probability,
    add_log10_probabilities,
    sum_log10_probabilities,
)
from basequal.encoding import (
    QualityEncoding,
    SANGER,
    ILLUMINA_1_3,
    ILLUMINA_1_5,
    ILLUMINA_1_8,
    qual_of_char,
    char_of_qual,
    prob_of_qual,
    qual_of_prob,
)
from basequal.version import __version__

__all__ = [
    "MAX_QUALITY",
    "QualityOutOfRangeError",
    "QualityProbabilityModel",
    "correct_probability",
    "error_probability",
    "log10_correct_probability",
    "correct_probabilities",
    "error_probabilities",
    "log10_error_probability",
    "add_log10_probabilities",
    "sum_log10_probabilities",
    "QualityEncoding",
    "SANGER",
    "ILLUMINA_1_3",
    "ILLUMINA_1_5",
    "ILLUMINA_1_8",
    "qual_of_char",
    "char_of_qual",
    "prob_of_qual",
    "qual_of_prob",
    "__version__",
]
