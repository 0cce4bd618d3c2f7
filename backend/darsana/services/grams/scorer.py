"""
Scores the grams two corpora have in common.

Every method starts from the combined concept map at the requested gram
size, which only holds grams present in both corpora, and returns a
mapping ordered by gram.
"""
import logging
import math
from enum import Enum
from typing import Callable, Dict, Union

from rapidfuzz.distance import JaroWinkler

from darsana.errors import ConceptMapInconsistency, InvalidParameterError, NumericDomainError
from darsana.services.grams.concepts import combined_concept_map
from darsana.services.grams.ngram import tokenize

logger = logging.getLogger(__name__)

MIN_RECURRENCE = 2
HARMONIC_THRESHOLD = 1.0
SIMILARITY_THRESHOLD = 0.9
PAIR_SEPARATOR = ","


class ScoreMethod(Enum):
    RAW_FREQUENCY = 0
    RELATIVE_FREQUENCY = 1
    STRING_DISTANCE = 2
    TF_IDF = 3

    @classmethod
    def parse(cls, value: Union["ScoreMethod", int, str]) -> "ScoreMethod":
        """Accept a member, its integer value, or its name."""
        if isinstance(value, cls):
            return value
        if isinstance(value, int) and not isinstance(value, bool):
            try:
                return cls(value)
            except ValueError:
                pass
        elif isinstance(value, str):
            name = value.strip().upper()
            if name.isdigit():
                try:
                    return cls.parse(int(name))
                except ValueError:
                    pass
            if name in cls.__members__:
                return cls[name]
        raise InvalidParameterError(f"unknown scoring method: {value!r}")


def _words(gram: str):
    return gram.split(" ")


def _unigram_frequency(unigrams: Dict[str, float], word: str) -> float:
    try:
        return unigrams[word]
    except KeyError:
        raise ConceptMapInconsistency(f"word {word!r} missing from unigram map") from None


def harmonic_frequency(gram: str, unigrams: Dict[str, float]) -> float:
    words = _words(gram)
    inverse_sum = 0.0
    for word in words:
        freq = _unigram_frequency(unigrams, word)
        if freq <= 0:
            raise NumericDomainError(f"unigram frequency of {word!r} is {freq}")
        inverse_sum += 1.0 / freq
    return len(words) / inverse_sum


def raw_frequency(gram: str, unigrams: Dict[str, float]) -> int:
    """Mean unigram frequency of the gram's words, using integer division."""
    words = _words(gram)
    total = sum(_unigram_frequency(unigrams, word) for word in words)
    return int(total) // len(words)


def tf_idf(term_frequency: float, document_frequency: float, document_size: float) -> float:
    if term_frequency <= 0:
        raise NumericDomainError(f"term frequency must be > 0, got {term_frequency}")
    if document_frequency <= 0:
        raise NumericDomainError(f"document frequency must be > 0, got {document_frequency}")
    if document_size <= 0:
        raise NumericDomainError(f"document size must be > 0, got {document_size}")

    return (1 + math.log(term_frequency)) * math.log(document_size / document_frequency)


def _score_raw_frequency(src, dst, concepts):
    return {gram: count for gram, count in concepts.items() if count >= MIN_RECURRENCE}


def _score_relative_frequency(src, dst, concepts):
    unigrams = combined_concept_map(src, dst, 1)

    scores = {}
    for gram in concepts:
        harmonic = harmonic_frequency(gram, unigrams)
        if harmonic > HARMONIC_THRESHOLD:
            scores[gram] = harmonic
    return scores


def _score_string_distance(src, dst, concepts):
    # Only lexicographic neighbours are compared.
    keys = list(concepts)

    scores = {}
    for left, right in zip(keys, keys[1:]):
        similarity = JaroWinkler.similarity(left, right)
        if similarity >= SIMILARITY_THRESHOLD:
            scores[f"{left}{PAIR_SEPARATOR}{right}"] = similarity
    return scores


def _score_tf_idf(src, dst, concepts):
    unigrams = combined_concept_map(src, dst, 1)
    document_size = len(tokenize(src)) + len(tokenize(dst))

    return {
        gram: tf_idf(raw_frequency(gram, unigrams), count, document_size)
        for gram, count in concepts.items()
    }


_SCORERS: Dict[ScoreMethod, Callable[[str, str, Dict[str, float]], Dict[str, float]]] = {
    ScoreMethod.RAW_FREQUENCY: _score_raw_frequency,
    ScoreMethod.RELATIVE_FREQUENCY: _score_relative_frequency,
    ScoreMethod.STRING_DISTANCE: _score_string_distance,
    ScoreMethod.TF_IDF: _score_tf_idf,
}


def score(
    src: str,
    dst: str,
    method: Union[ScoreMethod, int, str],
    gram_size: int,
) -> Dict[str, float]:
    """
    Score the grams of size `gram_size` shared by `src` and `dst`.

    Raises InvalidParameterError for an unknown method or a gram size
    below 1, and NumericDomainError when TF_IDF would take the log of
    a non-positive number.
    """
    method = ScoreMethod.parse(method)
    if isinstance(gram_size, bool) or not isinstance(gram_size, int) or gram_size < 1:
        raise InvalidParameterError(f"gram size must be an integer >= 1, got {gram_size!r}")

    concepts = combined_concept_map(src, dst, gram_size)
    scores = _SCORERS[method](src, dst, concepts)

    logger.info(
        "scored %s shared grams with %s (n=%s): %s kept",
        len(concepts), method.name, gram_size, len(scores),
    )
    return scores
