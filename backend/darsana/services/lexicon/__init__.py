from darsana.services.lexicon.dictionary import Dictionary

__all__ = ["Dictionary"]
