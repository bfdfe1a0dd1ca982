import pytest

from dissent.emoji import sanitize_emoji


def test_regional_flag_with_extra():
    flag = "\U0001F1FA\U0001F1F8"
    assert sanitize_emoji(flag + "\ufe0f") == flag


def test_regional_flag_second_out_of_range_unchanged():
    text = "\U0001F1FA\U0001F1E6\ufe0f"
    assert sanitize_emoji(text) == text


def test_tag_flag_with_extra():
    flag = (
        "\U0001F3F4\U000E0067\U000E0062\U000E0065\U000E006E\U000E0067\U000E007F"
    )
    assert sanitize_emoji(flag + "\ufe0f") == flag


def test_tag_flag_without_cancel_unchanged():
    text = "\U0001F3F4" + "\U000E0067" * 7
    assert sanitize_emoji(text) == text


def test_keycap_with_extra():
    keycap = "#\ufe0f\u20e3"
    assert sanitize_emoji(keycap + "\ufe0f") == keycap


def test_variation_selector_pair():
    assert sanitize_emoji("\u2764\ufe0f") == "\u2764"


@pytest.mark.parametrize("text", ["", "a", "ab", "\U0001F600", "\u2764\u2764"])
def test_other_strings_unchanged(text):
    assert sanitize_emoji(text) == text


@pytest.mark.parametrize(
    "text",
    ["\u2764\ufe0f", "#\ufe0f\u20e3\ufe0f", "\U0001F1FA\U0001F1F8\ufe0f"],
)
def test_result_is_prefix_one_shorter(text):
    result = sanitize_emoji(text)
    assert text.startswith(result)
    assert len(result) == len(text) - 1