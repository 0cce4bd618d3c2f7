import re

_PUNCTUATION_RE = re.compile(r"[?,!.;]+")


def normalize_corpus(text: str) -> str:
    """Strip sentence punctuation, trim, and lowercase a raw corpus."""
    return _PUNCTUATION_RE.sub("", text).strip().lower()
