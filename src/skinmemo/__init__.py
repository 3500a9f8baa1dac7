"""Token-skin memo formatting for blockchain memo instructions.

    >>> format_token_skin_memo("rare", Color(255, 0, 0), {"tier": 3})
    'token-skin:rare:FF0000:tier=3'
"""

from skinmemo.colors import Color
from skinmemo.memo import flatten_segments, format_token_skin_memo

__all__ = ["Color", "flatten_segments", "format_token_skin_memo"]
