from src.triage.normalizer import normalize


def test_normalize_lowercases_and_strips_punctuation() -> None:
    assert normalize("Wi-Fi won't CONNECT!!") == ["wi", "fi", "won", "t", "connect"]


def test_normalize_maps_synonyms() -> None:
    assert normalize("wireless microphone signin cannot printing") == ["wifi", "mic", "login", "cant", "printer"]


def test_normalize_keeps_unicode_letters_and_digits() -> None:
    assert normalize("Café 2FA 와이파이") == ["café", "2fa", "와이파이"]


def test_normalize_empty_and_whitespace_input() -> None:
    assert normalize("") == []
    assert normalize("   \t\n ") == []
    assert normalize("?!--") == []


def test_normalize_splits_hyphenated_forms_before_synonym_lookup() -> None:
    assert normalize("Wi-Fi e-mail sign-in can't") == ["wi", "fi", "e", "mail", "sign", "in", "can", "t"]
