from types import MappingProxyType

SYNONYMS: MappingProxyType[str, str] = MappingProxyType(
    {
        "wireless": "wifi",
        "microphone": "mic",
        "printing": "printer",
        "passcode": "password",
        "signin": "login",
        "cannot": "cant",
    }
)


def _strip_symbols(text: str) -> str:
    return "".join(ch if ch.isalnum() else " " for ch in text)


def normalize(text: str, synonyms: MappingProxyType[str, str] = SYNONYMS) -> list[str]:
    """Lower-case, split on anything that is not a letter or digit, then canonicalize synonyms."""
    if not text:
        return []
    tokens = _strip_symbols(text.lower()).split()
    return [synonyms.get(token, token) for token in tokens]


def token_set(text: str) -> set[str]:
    return set(normalize(text))
