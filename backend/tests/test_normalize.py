from darsana.services.grams.normalize import normalize_corpus


def test_strips_sentence_punctuation_and_lowercases():
    assert normalize_corpus("  Hello, World! How are you?  ") == "hello world how are you"


def test_punctuation_runs_are_removed_without_adding_spaces():
    assert normalize_corpus("wait...;what") == "waitwhat"


def test_other_characters_are_kept():
    assert normalize_corpus("it's a-ok: yes") == "it's a-ok: yes"
