"""Keyword extraction tests."""

from app.services.keywords import STOP_WORDS, extract_keywords, keyword_phrase


def test_removes_stop_words_and_short_tokens():
    keywords = extract_keywords("رمز عبور چگونه تغییر میکند")
    assert keywords == ["رمز", "عبور", "تغییر", "میکند"]
    assert "چگونه" not in keywords


def test_all_stop_words_yield_nothing():
    assert extract_keywords("و را که") == []


def test_single_character_tokens_dropped():
    assert extract_keywords("a b رمز x") == ["رمز"]


def test_punctuation_replaced_with_space():
    assert extract_keywords("رمز،عبور؟ حساب.کاربری,جدید?") == ["رمز،عبور", "حساب", "کاربری", "جدید"]


def test_duplicates_collapse_in_first_occurrence_order():
    assert extract_keywords("حساب رمز حساب رمز ایمیل") == ["حساب", "رمز", "ایمیل"]


def test_empty_and_whitespace_text():
    assert extract_keywords("") == []
    assert extract_keywords("   \n\t ") == []
    assert extract_keywords("؟ . , ?") == []


def test_extraction_is_idempotent():
    text = "چگونه رمز عبور را در حساب کاربری تغییر دهم؟"
    keywords = extract_keywords(text)
    assert extract_keywords(keyword_phrase(keywords)) == keywords


def test_never_returns_stop_words():
    text = " ".join(sorted(STOP_WORDS)) + " پشتیبانی"
    assert extract_keywords(text) == ["پشتیبانی"]


def test_keyword_phrase_joins_with_single_space():
    assert keyword_phrase(["رمز", "عبور"]) == "رمز عبور"
    assert keyword_phrase([]) == ""
