# Dojo Draw
# Copyright (C) 2025  Dojo Draw developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

"""
PDF output for printable documents.

HTML is laid out by a ``QTextDocument`` and printed to file through a
high-resolution ``QPrinter``, the same path print previews take.
"""

import os
import sys
from pathlib import Path
from typing import Union

from dojodraw.exceptions import RenderException
from dojodraw.utils import setup_logger

logger = setup_logger(__name__)

_app = None


def _ensure_gui_application():
    # Text layout needs a QGuiApplication; reuse the caller's if it exists
    global _app
    from PyQt6.QtGui import QGuiApplication

    if QGuiApplication.instance() is None:
        if "DISPLAY" not in os.environ and sys.platform.startswith("linux"):
            os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
        _app = QGuiApplication(sys.argv[:1])
    return QGuiApplication.instance()


def write_pdf(html: str, path: Union[str, Path]) -> Path:
    """Render ``html`` to a PDF file at ``path``.

    Raises:
        RenderException: If Qt is unavailable or the file cannot be written
    """
    path = Path(path)
    try:
        _ensure_gui_application()
        from PyQt6.QtGui import QPageSize, QTextDocument
        from PyQt6.QtPrintSupport import QPrinter
    except ImportError as e:
        raise RenderException(f"PDF output needs PyQt6: {e}") from e

    path.parent.mkdir(parents=True, exist_ok=True)

    printer = QPrinter(QPrinter.PrinterMode.HighResolution)
    printer.setOutputFormat(QPrinter.OutputFormat.PdfFormat)
    printer.setPageSize(QPageSize(QPageSize.PageSizeId.A4))
    printer.setOutputFileName(str(path))

    doc = QTextDocument()
    doc.setHtml(html)
    doc.print(printer)

    if not path.exists():
        raise RenderException(f"PDF was not written: {path}")
    logger.info("Wrote %s", path)
    return path
