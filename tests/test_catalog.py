from brand_check.brand.catalog import normalize, tokenize


def test_normalize_strips_punctuation_and_case():
    assert normalize("  Hello,   WORLD!! ") == "hello world"


def test_normalize_removes_underscore():
    assert normalize("snake_case brand") == "snakecase brand"


def test_normalize_collapses_all_whitespace():
    assert normalize("a\tb\n\nc") == "a b c"


def test_normalize_keeps_unicode_letters():
    assert normalize("Nestlé Café") == "nestlé café"
    assert normalize("Москва!") == "москва"


def test_normalize_fold_accents():
    assert normalize("Nestlé Café", fold_accents=True) == "nestle cafe"


def test_normalize_non_string():
    assert normalize(None) == ""
    assert normalize(42) == ""


def test_tokenize():
    assert tokenize("i love nike shoes") == ["i", "love", "nike", "shoes"]
    assert tokenize("") == []
