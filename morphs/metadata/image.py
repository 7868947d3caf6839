# Copyright (c) 2023-2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

import base64

from .tiers import Tier
from .vocabulary import Palette

__all__ = ("SVG_URI_PREFIX", "render_svg", "svg_data_uri")

SVG_URI_PREFIX = "data:image/svg+xml;base64,"

# number of glyph rows written on the scroll, by tier
_ROWS = {"base": 3, "mythical": 4, "cosmic": 5, "celestial": 6}


def render_svg(token_id: int, tier: Tier, palette: Palette) -> str:
    rows = "".join(
        f'<rect x="110" y="{120 + i * 22}" width="{180 - (i % 3) * 30}" '
        f'height="6" rx="3" fill="{palette.ink}"/>'
        for i in range(_ROWS[tier.name])
    )
    return (
        '<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 400 400">'
        f'<rect width="400" height="400" fill="{palette.background}"/>'
        f'<rect x="80" y="70" width="240" height="260" rx="12" '
        f'fill="{palette.paper}"/>'
        f'<rect x="70" y="60" width="260" height="24" rx="12" '
        f'fill="{palette.ink}"/>'
        f'<rect x="70" y="316" width="260" height="24" rx="12" '
        f'fill="{palette.ink}"/>'
        f"{rows}"
        f'<text x="200" y="380" text-anchor="middle" font-family="monospace" '
        f'font-size="16" fill="{palette.paper}">#{token_id}</text>'
        "</svg>"
    )


def svg_data_uri(svg: str) -> str:
    return SVG_URI_PREFIX + base64.b64encode(svg.encode("utf-8")).decode(
        "ascii"
    )
