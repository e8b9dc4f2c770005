"""
Module: sheets.output

Purpose:
    PDF rendering and attachment naming for sticker sheets.
    Converts SheetLayout to PDF bytes using ReportLab.

Key Functions:
    - render_to_pdf(): Render layout to PDF bytes
    - print_ready_filename(): Suggested attachment name

Dependencies:
    - reportlab: PDF generation
    - PIL: Image handling

Used By:
    - sheets.controller: Pipeline orchestration
"""

from .renderer import render_to_pdf
from .naming import print_ready_filename

__all__ = [
    "render_to_pdf",
    "print_ready_filename",
]
