from dojodraw.printing.html import (
    document_filename,
    generate_bracket_html,
    generate_groups_html,
    generate_kata_scoresheet_html,
    round_title,
)
from dojodraw.printing.pdf import write_pdf

__all__ = [
    "document_filename",
    "generate_bracket_html",
    "generate_groups_html",
    "generate_kata_scoresheet_html",
    "round_title",
    "write_pdf",
]
