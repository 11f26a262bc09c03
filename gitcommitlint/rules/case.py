"""Letter-case checks shared by the *-case rules."""
import re
from typing import Callable, Dict, List

_WORD = re.compile(r"[A-Z]+(?![a-z])|[A-Z]?[a-z]+|\d+")


def _words(text: str) -> List[str]:
    return _WORD.findall(text)


def _sentence(text: str) -> str:
    return text[:1].upper() + text[1:].lower()


def _camel(text: str) -> str:
    words = [word.lower() for word in _words(text)]
    return words[0] + "".join(word.capitalize() for word in words[1:]) if words else ""


def _pascal(text: str) -> str:
    return "".join(word.capitalize() for word in _words(text))


def _start(text: str) -> str:
    return " ".join(word[:1].upper() + word[1:] for word in text.split(" "))


CASES: Dict[str, Callable[[str], str]] = {
    "lower-case": str.lower,
    "upper-case": str.upper,
    "camel-case": _camel,
    "kebab-case": lambda text: "-".join(word.lower() for word in _words(text)),
    "pascal-case": _pascal,
    "sentence-case": _sentence,
    "snake-case": lambda text: "_".join(word.lower() for word in _words(text)),
    "start-case": _start,
}


def is_case(text: str, case: str) -> bool:
    """Return True if ``text`` already is in ``case``.

    Text without any letters is considered to be in every case.
    """
    if not any(char.isalpha() for char in text):
        return True
    return CASES[case](text) == text
