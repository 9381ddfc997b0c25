# ocgui/window.py

"""
Desktop window host for standalone apps.

Shows the remi server's page in a Qt web view instead of a browser tab.
Needs the `desktop` extra (PySide6).
"""

import logging
import sys

logger = logging.getLogger(__name__)


def create_window(url: str, title: str, width: int = 1024, height: int = 768):
    """Create and show a window displaying `url`. A QApplication must exist."""
    from PySide6.QtCore import QUrl
    from PySide6.QtWebEngineCore import QWebEngineSettings
    from PySide6.QtWebEngineWidgets import QWebEngineView
    from PySide6.QtWidgets import QVBoxLayout, QWidget

    window = QWidget()
    window.setWindowTitle(title)
    window.resize(width, height)

    layout = QVBoxLayout(window)
    layout.setContentsMargins(0, 0, 0, 0)

    webview = QWebEngineView(window)
    webview.settings().setAttribute(QWebEngineSettings.LocalContentCanAccessRemoteUrls, True)
    webview.setUrl(QUrl(url))
    layout.addWidget(webview)

    window.webview = webview
    window.show()
    return window


def open_window(url: str, title: str, width: int = 1024, height: int = 768) -> int:
    """
    Open `url` in a desktop window and run the Qt event loop until it closes.

    :return: the Qt exit code.
    """
    from PySide6.QtWidgets import QApplication

    app = QApplication.instance() or QApplication(sys.argv)
    window = create_window(url, title, width, height)
    logger.info("Opened window %r on %s", title, url)
    code = app.exec()
    window.close()
    return code
