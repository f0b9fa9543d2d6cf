"""
Format writers for claim content plans.
"""

from writway.rendering.pdf_writer import render_pdf
from writway.rendering.word_writer import render_word

__all__ = ["render_pdf", "render_word"]
