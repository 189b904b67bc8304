"""Icon lookup with a default glyph."""

DEFAULT_ICON = "help-circle"


class IconRegistry:
    """Maps symbolic icon names to renderable glyph ids."""

    def __init__(self, glyphs: dict[str, str], default: str = DEFAULT_ICON):
        self._glyphs = dict(glyphs)
        self._default = default

    def lookup(self, name: str) -> str:
        """Glyph for ``name``, or the default glyph if unknown."""
        return self._glyphs.get(name, self._default)

    def __contains__(self, name: object) -> bool:
        return name in self._glyphs


SITE_ICONS = IconRegistry(
    {
        "map-pin": "map-pin",
        "phone": "phone",
        "mail": "mail",
        "send": "send",
        "check-circle": "check-circle",
        "message-square": "message-square",
        "x": "x",
    }
)
