"""Turn a document icon into a display emoji and a favicon tag."""

from dataclasses import dataclass

import regex

# Regional indicator symbols (flag halves) or any extended pictographic.
_EMOJI_RE = regex.compile("[\U0001f1e6-\U0001f1ff]|\\p{Extended_Pictographic}")

DEFAULT_FAVICON = '<link rel="icon" type="image/x-icon" href="/favicon.ico">'

_EMOJI_FAVICON = (
    '<link rel="icon" href="data:image/svg+xml,'
    "<svg xmlns=%22http://www.w3.org/2000/svg%22 viewBox=%220 0 100 100%22>"
    '<text y=%22.9em%22 font-size=%2290%22>{emoji}</text></svg>">'
)

NOT_FOUND_ICON = "\U0001f978"  # disguised face
ERROR_ICON = "\U0001f525"  # fire


@dataclass(frozen=True)
class Icons:
    emoji: str | None
    favicon: str


def is_emoji(token: str | None) -> bool:
    if not token:
        return False
    return _EMOJI_RE.search(token) is not None


def classify_icon(token: str | None) -> Icons:
    """Classify an Outline icon token.

    Emoji tokens are kept for display and drawn into an SVG favicon. Named
    icons (``"collection"``), empty and missing tokens get the default favicon.
    """
    if not is_emoji(token):
        return Icons(emoji=None, favicon=DEFAULT_FAVICON)
    return Icons(emoji=token, favicon=_EMOJI_FAVICON.format(emoji=token))
