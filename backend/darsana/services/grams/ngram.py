from typing import Iterator, List

from darsana.errors import InvalidParameterError


def tokenize(corpus: str) -> List[str]:
    """
    Split a corpus on single spaces.

    Runs of spaces are not collapsed, so they produce empty tokens.
    Trailing empty tokens are dropped and an empty corpus has no tokens.
    """
    if not corpus:
        return []

    tokens = corpus.split(" ")
    while tokens and tokens[-1] == "":
        tokens.pop()
    return tokens


class NGram:
    """Single-pass, left-to-right sliding window of n tokens over a corpus."""

    def __init__(self, n: int, corpus: str):
        if isinstance(n, bool) or not isinstance(n, int) or n < 1:
            raise InvalidParameterError(f"gram size must be an integer >= 1, got {n!r}")

        self.n = n
        self.tokens = tokenize(corpus)
        self.pos = 0

    def __iter__(self) -> Iterator[str]:
        return self

    def __next__(self) -> str:
        if not self.has_next():
            raise StopIteration
        return self.next_gram()

    def has_next(self) -> bool:
        return self.pos < len(self.tokens) - self.n + 1

    def next_gram(self) -> str:
        if not self.has_next():
            raise StopIteration
        gram = " ".join(self.tokens[self.pos:self.pos + self.n])
        self.pos += 1
        return gram
