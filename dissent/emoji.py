"""Normalisation of emoji strings."""

from __future__ import annotations

_REGIONAL_FIRST = (0x1F1E6, 0x1F1FF)
_REGIONAL_SECOND = (0x1F1E8, 0x1F1FC)
_BLACK_FLAG = 0x1F3F4
_CANCEL_TAG = 0xE007F
_VARIATION_SELECTOR_16 = 0xFE0F


def sanitize_emoji(emoji: str) -> str:
    """Drop a trailing extraneous variation selector from common emoji forms.

    Covers flags, tag-sequence flags, keycaps and single emoji followed by a
    presentation selector; other strings are returned unchanged.
    """
    codes = [ord(ch) for ch in emoji]
    count = len(codes)

    if count == 3:
        first, second = codes[0], codes[1]
        if (
            _REGIONAL_FIRST[0] <= first <= _REGIONAL_FIRST[1]
            and _REGIONAL_SECOND[0] <= second <= _REGIONAL_SECOND[1]
        ):
            return emoji[:-1]

    if count == 8 and codes[0] == _BLACK_FLAG and codes[6] == _CANCEL_TAG:
        return emoji[:-1]

    if count == 4 and codes[0] >= ord("#") and codes[2] >= ord("9"):
        return emoji[:-1]

    if count == 2 and codes[1] == _VARIATION_SELECTOR_16:
        return emoji[:-1]

    return emoji