from affinecracker.core.config import Settings
from affinecracker.core.scoring import (
    extract_words,
    get_english_words,
    has_long_dictionary_word,
    is_plausible_english,
    word_hit_rate,
)


def test_dictionary_loaded_from_package_data():
    words = get_english_words()
    assert "the" in words
    assert "secretmessage" in words
    assert all(w == w.lower() for w in words)
    assert not any(w.startswith("#") for w in words)
    assert get_english_words() is words


def test_extract_words_strips_punctuation_and_digits():
    assert extract_words("Hello, World! 42  it's") == ["hello", "world", "its"]
    assert extract_words("  \n\t ") == []


def test_empty_and_symbol_only_text():
    assert not is_plausible_english("")
    assert not is_plausible_english("123 !!! ???")


def test_long_dictionary_word_wins():
    assert is_plausible_english("xyz secretmessage qzx")
    assert is_plausible_english("qq ww ee rr tt password")
    assert has_long_dictionary_word(["xx", "attack"])
    # long but not a dictionary word
    assert not has_long_dictionary_word(["xqzplm"])
    # dictionary word but too short
    assert not has_long_dictionary_word(["the"])


def test_short_text():
    assert is_plausible_english("the")
    assert not is_plausible_english("xqz")
    assert is_plausible_english("xqz is")
    assert not is_plausible_english("xqz wfp")


def test_majority_rule():
    assert not is_plausible_english("the dog xqzplm wfplq")
    assert is_plausible_english("the and xqzplm wfplq")
    assert not is_plausible_english("xqz wfp qqq")


def test_case_insensitive():
    assert is_plausible_english("THE SECRET")


def test_word_hit_rate():
    assert word_hit_rate("the and xqzplm wfplq") == 0.5
    assert word_hit_rate("") == 0.0


def test_settings_override():
    text = "meet xqzplm wfplq qqq"
    assert not is_plausible_english(text)
    assert is_plausible_english(text, Settings(majority_threshold=0.25))
    assert is_plausible_english("meet xx", Settings(min_long_word_length=4, short_text_max_words=0))
