"""
Color Palettes for typescale
============================

Raw color values of the design system.
Use semantic_colors.py for named purposes.
"""


class ColorPalette:
    """
    Base color palette.

    Usage:
        >>> ColorPalette.SKY["sky_gray"]
        '#111236'
    """

    SKY = {
        # Grays (text and neutral surfaces)
        "sky_gray": "#111236",
        "sky_gray_tint_01": "#444560",
        "sky_gray_tint_02": "#68697F",
        "sky_gray_tint_03": "#8F90A0",
        "sky_gray_tint_04": "#B2B2BF",
        "sky_gray_tint_05": "#CDCDD7",
        "sky_gray_tint_06": "#DDDDE5",
        "sky_gray_tint_07": "#F1F2F8",
        "white": "#FFFFFF",

        # Blues (primary / links)
        "sky_blue": "#0770E3",
        "sky_blue_shade_01": "#084EB2",
        "sky_blue_tint_01": "#6EB5F7",

        # Status
        "monteverde": "#00A698",   # success
        "kolkata": "#FF9400",      # warning
        "panjin": "#FF5452",       # danger
    }

    @classmethod
    def get(cls, name: str) -> str:
        """Return the hex value for a palette entry; KeyError if unknown."""
        return cls.SKY[name]

    @classmethod
    def names(cls) -> list:
        return list(cls.SKY.keys())
