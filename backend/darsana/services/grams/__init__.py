from darsana.services.grams.ngram import NGram, tokenize
from darsana.services.grams.scorer import ScoreMethod, score

__all__ = ["NGram", "tokenize", "ScoreMethod", "score"]
