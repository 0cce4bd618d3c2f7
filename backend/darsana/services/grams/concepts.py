import logging
from collections import Counter
from typing import Dict

from darsana.services.grams.ngram import NGram

logger = logging.getLogger(__name__)


def _count_grams(corpus: str, n: int) -> Dict[str, float]:
    counts = Counter(NGram(n, corpus))
    return {gram: float(count) for gram, count in counts.items()}


def single_concept_map(corpus: str, n: int) -> Dict[str, float]:
    counts = _count_grams(corpus, n)
    return {gram: counts[gram] for gram in sorted(counts)}


def combined_concept_map(src: str, dst: str, n: int) -> Dict[str, float]:
    """
    Count grams of size n across both corpora, keeping only grams that
    occur at least once in each. A kept gram's count is the sum of its
    occurrences in src and dst.
    """
    src_counts = _count_grams(src, n)
    dst_counts = _count_grams(dst, n)

    shared = sorted(src_counts.keys() & dst_counts.keys())

    logger.debug(
        "concept map n=%s: %s src grams, %s dst grams, %s shared",
        n, len(src_counts), len(dst_counts), len(shared),
    )

    return {gram: src_counts[gram] + dst_counts[gram] for gram in shared}
