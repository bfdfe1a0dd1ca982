"""Plain-text names for users and channels, sized asset URLs and debug dump names."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

from dissent.colorhash import default_hasher, rgb_hex

UNKNOWN_CHANNEL = "Unknown channel"
EMPTY_CHANNEL = "Empty channel"
AVATAR_SIZE = 64


class ChannelType(enum.IntEnum):
    """Kinds of channel, numbered as on the wire."""

    GUILD_TEXT = 0
    DIRECT_MESSAGE = 1
    GUILD_VOICE = 2
    GROUP_DM = 3
    GUILD_CATEGORY = 4
    GUILD_ANNOUNCEMENT = 5
    GUILD_ANNOUNCEMENT_THREAD = 10
    GUILD_PUBLIC_THREAD = 11
    GUILD_PRIVATE_THREAD = 12
    GUILD_STAGE_VOICE = 13
    GUILD_FORUM = 15


ALLOWED_CHANNEL_TYPES: tuple[ChannelType, ...] = (
    ChannelType.GUILD_TEXT,
    ChannelType.GUILD_CATEGORY,
    ChannelType.GUILD_PUBLIC_THREAD,
    ChannelType.GUILD_PRIVATE_THREAD,
    ChannelType.GUILD_FORUM,
    ChannelType.GUILD_ANNOUNCEMENT,
    ChannelType.GUILD_ANNOUNCEMENT_THREAD,
    ChannelType.GUILD_VOICE,
    ChannelType.GUILD_STAGE_VOICE,
)
"""Channel types that are shown."""


@dataclass
class User:
    """A chat user."""

    username: str
    display_name: str = ""
    id: int = 0
    discriminator: str = ""
    bot: bool = False

    @property
    def tag(self) -> str:
        """The username, followed by the discriminator where there is one."""
        if self.discriminator in ("", "0"):
            return self.username
        return f"{self.username}#{self.discriminator}"


@dataclass
class Channel:
    """A channel, with the recipients it has when it is a direct message."""

    type: ChannelType
    name: str = ""
    id: int = 0
    guild_id: int = 0
    recipients: list[User] = field(default_factory=list)


def user_name(user: User) -> str:
    """Return the display name, with the username added when they differ."""
    if not user.display_name:
        return user.username
    if user.display_name.casefold() == user.username.casefold():
        return user.display_name
    return f"{user.display_name} ({user.username})"


def recipient_names(channel: Channel) -> str:
    """Describe the recipients of a channel as a list of names."""
    names = [user_name(user) for user in channel.recipients]
    if not names:
        return EMPTY_CHANNEL
    if len(names) == 1:
        return names[0]
    if len(names) == 2:
        return f"{names[0]} and {names[1]}"
    head = "".join(f"{name}, " for name in names[:-1])
    return f"{head} and {names[-1]}"


def _channel_name(channel: Channel | None, with_hash: bool) -> str:
    if channel is None:
        return UNKNOWN_CHANNEL
    if channel.type == ChannelType.DIRECT_MESSAGE:
        if not channel.recipients:
            return recipient_names(channel)
        return user_name(channel.recipients[0])
    if channel.type == ChannelType.GROUP_DM:
        return channel.name or recipient_names(channel)
    if channel.type in (ChannelType.GUILD_PUBLIC_THREAD, ChannelType.GUILD_PRIVATE_THREAD):
        return channel.name
    return f"#{channel.name}" if with_hash else channel.name


def channel_name(channel: Channel | None) -> str:
    """Return the channel's name in plain text."""
    return _channel_name(channel, True)


def channel_name_without_hash(channel: Channel | None) -> str:
    """Return the channel's name in plain text without a leading hash."""
    return _channel_name(channel, False)


def round_size(size: int) -> int:
    """Round a positive size up to the nearest power of two."""
    if size <= 0:
        raise ValueError(f"size must be positive, got {size}")
    return 1 << (size - 1).bit_length()


def inject_size_unscaled(url: str, size: int) -> str:
    """Set the size query parameter of url to size rounded up to a power of two."""
    size = round_size(size)
    try:
        parts = urlsplit(url)
    except ValueError:
        return url

    query: dict[str, list[str]] = {}
    for key, value in parse_qsl(parts.query, keep_blank_values=True):
        query.setdefault(key, []).append(value)
    query["size"] = [str(size)]

    encoded = urlencode(sorted(query.items()), doseq=True)
    return urlunsplit(parts._replace(query=encoded))


def inject_size(url: str, size: int, scale: int = 1) -> str:
    """Set the size query parameter, scaled by at least two."""
    if not url:
        return ""
    size *= scale if scale > 2 else 2
    return inject_size_unscaled(url, size)


def inject_avatar_size(url: str, scale: int = 1) -> str:
    """Set the size query parameter for an avatar image."""
    return inject_size(url, AVATAR_SIZE, scale)


def hash_user_color(tag: str) -> str:
    """Return the generated hex colour for a user tag."""
    return rgb_hex(default_hasher().hash(tag))


def event_dump_filename(event_id: int, code: int, event_type: str) -> str:
    """Return the file name under which a raw gateway event is dumped."""
    return f"{event_id:05d}-{code}-{event_type}.json"