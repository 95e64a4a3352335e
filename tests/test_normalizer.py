from correction_feedback.alignment.normalizer import (
    are_equal,
    extract_punctuation,
    normalize_token,
    same_word_different_punctuation,
    strip_punctuation,
)


def test_normalize_lowercases_and_trims():
    assert normalize_token(" HeLLo ") == "hello"


def test_normalize_composes_unicode():
    assert normalize_token("Cafe\u0301") == "caf\u00e9"


def test_are_equal_ignores_case_and_composition():
    assert are_equal("Word", "word")
    assert are_equal("Cafe\u0301", "caf\u00e9")


def test_are_equal_respects_punctuation():
    assert not are_equal("word", "word.")


def test_strip_and_extract_punctuation():
    assert strip_punctuation("(don't-stop)...") == "dontstop"
    assert extract_punctuation("a-b.c") == "-."
    assert strip_punctuation("«hi»") == "«hi»"


def test_missing_punctuation_reported_from_reference():
    diff = same_word_different_punctuation("Hello", "hello,")
    assert diff.is_same_word
    assert diff.missing_punctuation == ","
    assert diff.extra_punctuation is None
    assert diff.user_word == "hello"
    assert diff.correct_word == "hello"


def test_extra_punctuation_reported_from_user():
    diff = same_word_different_punctuation("hello.", "hello")
    assert diff.is_same_word
    assert diff.extra_punctuation == "."
    assert diff.missing_punctuation is None


def test_extra_punctuation_collects_all_marks():
    assert same_word_different_punctuation("(hello)", "hello").extra_punctuation == "()"
    assert same_word_different_punctuation("wait…", "wait").extra_punctuation == "…"
    assert same_word_different_punctuation("don't", "dont").extra_punctuation == "'"


def test_punctuation_on_both_sides_is_not_same_word():
    assert not same_word_different_punctuation("hello!", "hello.").is_same_word


def test_different_words_are_not_same_word():
    assert not same_word_different_punctuation("cat", "dog.").is_same_word


def test_bare_punctuation_is_not_same_word():
    assert not same_word_different_punctuation("...", ".").is_same_word


def test_custom_punctuation_set():
    assert not same_word_different_punctuation("hello", "hello!", punctuation=".").is_same_word
    diff = same_word_different_punctuation("hello", "hello.", punctuation=".")
    assert diff.missing_punctuation == "."
