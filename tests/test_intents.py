from src.triage.intents import INTENT_RULES, IntentRule, intent_boost


def _rule(label: str) -> IntentRule:
    return next(rule for rule in INTENT_RULES if rule.label == label)


def test_wifi_no_internet_phrase_boosts_networking_haystack() -> None:
    haystack = "wi-fi says connected but no internet networking wifi internet dns"
    assert intent_boost("WiFi connected but NO internet", haystack) == 2.5


def test_rule_requires_label_word_in_haystack() -> None:
    rule = _rule("teams mic")
    assert rule.matches("teams microphone is silent")
    assert rule.applies_to("microsoft teams mic not working")
    assert not rule.applies_to("clear browser cache & cookies")
    assert intent_boost("teams microphone is silent", "clear browser cache & cookies browser") == 0


def test_multiple_rules_are_additive() -> None:
    haystack = "reset password login cant"
    boost = intent_boost("i can't login, need to reset my password", haystack)
    assert boost == _rule("cant login").weight + _rule("reset password").weight


def test_no_rule_matches_plain_tokens() -> None:
    assert intent_boost("xyzzy123 qqqq", "anything at all") == 0
