"""Main Window - Application shell hosting the translator panel."""

from PySide6.QtGui import QAction
from PySide6.QtWidgets import QMainWindow, QMessageBox, QWidget


class MainWindow(QMainWindow):
    """Provides the application shell, menu and message boxes."""

    def __init__(self):
        super().__init__()
        self.setWindowTitle("Thai Minima")
        self.setGeometry(100, 100, 900, 700)

        self._create_menu_bar()

    def _create_menu_bar(self):
        """Create the application menu bar."""
        file_menu = self.menuBar().addMenu("&File")

        exit_action = QAction("E&xit", self)
        exit_action.setShortcut("Ctrl+Q")
        exit_action.triggered.connect(self.close)
        file_menu.addAction(exit_action)

    def set_panel(self, panel: QWidget) -> None:
        self.setCentralWidget(panel)

    def show_error(self, title: str, message: str):
        """Display an error message to the user."""
        QMessageBox.critical(self, title, message)
