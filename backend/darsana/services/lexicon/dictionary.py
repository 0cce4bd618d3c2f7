from typing import Dict


class Dictionary:
    """
    Lemma dictionary: each lemma maps to the distinct surface forms
    ("concepts") that reduce to it. Lemmas and their forms keep
    insertion order.
    """

    def __init__(self, language: str):
        self.language = language
        self._lemmas: Dict[str, Dict[str, None]] = {}

    @property
    def lang(self) -> str:
        return self.language

    def has_concept(self, key: str) -> bool:
        return key in self._lemmas

    def get_lemma(self, concept: str) -> str:
        """Return the first lemma the concept was filed under, or ""."""
        for lemma, concepts in self._lemmas.items():
            if concept in concepts:
                return lemma
        return ""

    def put_lemma(self, lemma: str, concept: str) -> None:
        self._lemmas.setdefault(lemma, {})[concept] = None

    def __len__(self) -> int:
        return sum(len(concepts) for concepts in self._lemmas.values())
