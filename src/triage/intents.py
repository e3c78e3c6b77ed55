import re
from dataclasses import dataclass


@dataclass(frozen=True)
class IntentRule:
    """Phrase-level pattern over the raw query with a ranking boost.

    A rule only boosts a guide whose haystack mentions at least one word of
    the rule label, so a "dns flush" phrase does not lift printer guides.
    """

    label: str
    pattern: re.Pattern[str]
    weight: float

    @classmethod
    def compile(cls, label: str, pattern: str, weight: float) -> "IntentRule":
        return cls(label=label, pattern=re.compile(pattern, re.IGNORECASE), weight=weight)

    def matches(self, raw_query: str) -> bool:
        return self.pattern.search(raw_query.lower()) is not None

    def applies_to(self, haystack: str) -> bool:
        lowered = haystack.lower()
        return any(word in lowered for word in self.label.lower().split())


INTENT_RULES: tuple[IntentRule, ...] = (
    IntentRule.compile(
        "wifi no internet",
        r"(wifi|wi-?fi).*(no|not).*(internet|access)|no.*internet.*(wifi|wi-?fi)",
        2.5,
    ),
    IntentRule.compile("cant login", r"(can.?t|cannot|unable).*(log.?in|sign.?in)", 2.0),
    IntentRule.compile("reset password", r"(reset|forgot).*(password)", 2.0),
    IntentRule.compile("printer missing", r"(printer).*(not|missing|can.?t).*(show|find|see|add)", 1.8),
    IntentRule.compile("mfa issue", r"(mfa|2fa|authenticator).*(code|setup|reset|change)", 1.5),
    IntentRule.compile("dns flush", r"(dns).*(flush|clear)", 1.5),
    IntentRule.compile("renew ip", r"(renew).*(ip)", 1.5),
    IntentRule.compile("teams mic", r"(teams).*(mic|microphone|audio)", 1.5),
    IntentRule.compile("zoom audio", r"(zoom).*(audio|mic|microphone)", 1.3),
    IntentRule.compile("clear cache", r"(clear).*(cache|cookies)", 1.0),
)


def intent_boost(raw_query: str, haystack: str, rules: tuple[IntentRule, ...] = INTENT_RULES) -> float:
    return sum(rule.weight for rule in rules if rule.matches(raw_query) and rule.applies_to(haystack))
