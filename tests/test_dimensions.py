from dissent import dimensions
from dissent.dimensions import css_variables, px


def test_px_format():
    assert px(42) == "42px"
    assert px(0) == "0px"


def test_css_variable_names():
    assert set(css_variables()) == {
        "header_height",
        "header_padding",
        "guild_icon_size",
        "channel_icon_size",
        "message_avatar_size",
        "inline_emoji_size",
        "large_emoji_size",
        "sticker_size",
        "user_bar_avatar_size",
    }


def test_css_variables_match_constants():
    variables = css_variables()
    for name, value in variables.items():
        assert value == px(getattr(dimensions, name.upper()))


def test_header_height_variable():
    assert css_variables()["header_height"] == "42px"


def test_css_variables_returns_fresh_dict():
    first = css_variables()
    first["header_height"] = "changed"
    assert css_variables()["header_height"] == px(dimensions.HEADER_HEIGHT)