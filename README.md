# dissent

Small building blocks for a chat client. The package has no dependencies
outside the standard library.

## Installation

```
pip install dissent
```

To run the tests:

```
pip install "dissent[test]"
pytest
```

## Modules

### `dissent.colorhash`

Turns a name into a stable colour.

- `RGBA` is a frozen colour with `r`, `g`, `b` and `a` (default `0xFF`).
- `Djb2Hash` and `Fnv32aHash` are 32-bit string hashes with `update`,
  `sum32`, `digest` (four big-endian bytes) and `reset`.
- `HSVHasher(hash_factory, saturation, value)` hashes a name with the given
  hash and maps it to a colour whose saturation and value fall within the
  given ranges.
- `LIGHT_COLOR_HASHER` gives pastel colours for dark backgrounds;
  `DARK_COLOR_HASHER` gives stronger colours for light backgrounds. Both
  use FNV-1a.
- `hsv_to_rgb(h, s, v)` converts HSV (hue in degrees) to `RGBA`.
- `rgb_hex(color)` formats a colour as `#rrggbb`, ignoring alpha.
- `default_hasher()` and `set_default_hasher(hasher)` read and replace the
  process-wide default hasher, which starts as `LIGHT_COLOR_HASHER`.

### `dissent.emoji`

`sanitize_emoji(emoji)` drops the last code point of regional-indicator
flags, tag-sequence flags, keycaps and two-code-point emoji ending in
variation selector 16. Other strings come back unchanged.

### `dissent.dimensions`

Pixel sizes of interface elements (`HEADER_HEIGHT`, `GUILD_ICON_SIZE`,
`STICKER_SIZE` and others), `px(num)` which gives strings such as `"42px"`,
and `css_variables()` which maps CSS variable names to those strings.
`TITLEBAR_CSS` holds a stylesheet fragment that refers to
`{$header_height}`.

### `dissent.handler`

- `Handler` keeps callbacks keyed by event type. `add_handler(event_type, fn)`
  returns a function that removes the callback; `callers_for(event)` lists
  the callbacks whose type matches the event (by `isinstance`), in
  registration order; `dispatch(event)` calls them.
- `MainThreadHandler(source, schedule=None)` subscribes to every event of a
  source `Handler`. For each event it picks its own matching callbacks and,
  if there are any, hands one job running them to `schedule`. Without a
  scheduler the job runs at once. `add_sync_handler` is the same as
  `add_handler`.

### `dissent.naming`

- `ChannelType`, `User` and `Channel` model channels and their recipients;
  `User.tag` is the username, with `#discriminator` when there is one.
  `ALLOWED_CHANNEL_TYPES` lists the channel types that are shown.
- `user_name`, `recipient_names`, `channel_name` and
  `channel_name_without_hash` produce display text.
- `round_size` rounds a positive size up to a power of two (and raises
  `ValueError` otherwise). `inject_size_unscaled(url, size)` sets the `size`
  query parameter to the rounded size; `inject_size(url, size, scale=1)`
  first multiplies by `scale` if it is above 2, or by 2 otherwise, and
  returns `""` for an empty URL; `inject_avatar_size(url, scale=1)` uses a
  base size of 64.
- `hash_user_color(tag)` gives a user's colour from the default hasher as a
  hex string.
- `event_dump_filename(event_id, code, event_type)` names a dumped raw
  event, e.g. `00001-0-READY.json`.

## Example

```python
from dissent.colorhash import default_hasher, rgb_hex
from dissent.naming import inject_size_unscaled

print(rgb_hex(default_hasher().hash("someone")))
print(inject_size_unscaled("https://cdn.example.com/avatar.png", 100))
# https://cdn.example.com/avatar.png?size=128
```

## What it does not do

The package is a set of helpers only. It has no user interface, no command,
and no network client: it does not connect to a chat service, fetch or
cache channels, members or messages, or render message markup. Callers
supply `User` and `Channel` values themselves.