# -*- coding: utf-8 -*-
"""
Presentation helpers: plain-text board rendering and the end-of-game share message.
"""

from .render import render_board, share_message

__all__ = ["render_board", "share_message"]
