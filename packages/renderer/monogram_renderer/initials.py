"""Rule-based reduction of names, handles and e-mail addresses to initials."""

from __future__ import annotations

import re
import unicodedata

# Unicode ranges allowed next to ASCII in local parts and domains.
_UCS = r"\u00A0-\uD7FF\uF900-\uFDCF\uFDF0-\uFFEF"

_ATEXT = r"[a-zA-Z\d!#$%&'*+\-/=?^_`{|}~" + _UCS + "]"
_DOT_ATOM = _ATEXT + r"+(?:\." + _ATEXT + r"+)*"

_FWS = r"(?:(?:[\x20\x09]*\x0d\x0a)?[\x20\x09]+)"
_QTEXT = r"[\x01-\x08\x0b\x0c\x0e-\x1f\x7f\x21\x23-\x5b\x5d-\x7e" + _UCS + "]"
_QPAIR = r"\\[\x01-\x09\x0b\x0c\x0d-\x7f" + _UCS + "]"
_QUOTED = '"(?:' + _FWS + "?(?:" + _QTEXT + "|" + _QPAIR + "))*" + _FWS + '?"'

_LABEL_EDGE = r"[a-zA-Z\d" + _UCS + "]"
_LABEL_BODY = r"[a-zA-Z\d\-._~" + _UCS + "]"
_TLD_EDGE = r"[a-zA-Z" + _UCS + "]"
_DOMAIN = (
    "(?:(?:" + _LABEL_EDGE + "|" + _LABEL_EDGE + _LABEL_BODY + "*" + _LABEL_EDGE + r")\.)+"
    "(?:" + _TLD_EDGE + "|" + _TLD_EDGE + _LABEL_BODY + "*" + _TLD_EDGE + r")\.?"
)

EMAIL_RE = re.compile("(?:" + _DOT_ATOM + "|" + _QUOTED + ")@" + _DOMAIN)


def is_email(text: str) -> bool:
    return EMAIL_RE.fullmatch(text) is not None


def is_skip(ch: str) -> bool:
    """Punctuation, symbols, separators and whitespace never become initials."""
    return ch.isspace() or unicodedata.category(ch)[0] in ("P", "S", "Z")


def _is_upper(ch: str) -> bool:
    return unicodedata.category(ch) == "Lu"


def _is_lower(ch: str) -> bool:
    return unicodedata.category(ch) == "Ll"


def extract_initials(text: str, max_initials: int) -> str:
    """Return at most ``max_initials`` characters that stand for ``text``.

    A character starts a new "word" when it follows a skip character, when it
    is an uppercase letter right after a lowercase one, or when it is the first
    lowercase letter seen. Short results are padded with the next unused
    characters from the front of the text.
    """
    if not text or max_initials <= 0:
        return ""

    if is_email(text):
        text = text.rpartition("@")[0]

    picked: list[int] = []
    previous = " "
    for index, ch in enumerate(text):
        if is_skip(ch):
            previous = ch
            continue
        if (_is_upper(ch) and _is_lower(previous)) or (_is_lower(ch) and not picked) or is_skip(previous):
            picked.append(index)
        previous = ch

    initials = [text[i] for i in picked[:max_initials]]
    if len(initials) < max_initials:
        used = set(picked)
        for index, ch in enumerate(text):
            if len(initials) >= max_initials:
                break
            if index in used or is_skip(ch):
                continue
            initials.append(ch)

    return "".join(initials)
