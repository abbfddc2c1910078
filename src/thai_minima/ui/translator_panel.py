"""Translator Panel - Input, output and recent-translation widgets."""

from typing_extensions import override

from PySide6.QtCore import Qt, Signal
from PySide6.QtGui import QKeyEvent
from PySide6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QListWidget,
    QListWidgetItem,
    QPlainTextEdit,
    QPushButton,
    QSizePolicy,
    QTextEdit,
    QVBoxLayout,
    QWidget,
)

from thai_minima.core import TranslationRecord


class _SourceTextEdit(QPlainTextEdit):
    """Plain text edit that emits submit_requested on Ctrl/Cmd+Enter."""

    submit_requested = Signal()

    @override
    def keyPressEvent(self, event: QKeyEvent):
        is_enter = event.key() in (Qt.Key.Key_Return, Qt.Key.Key_Enter)
        modifiers = event.modifiers()
        if is_enter and modifiers & (Qt.KeyboardModifier.ControlModifier | Qt.KeyboardModifier.MetaModifier):
            self.submit_requested.emit()
            return
        super().keyPressEvent(event)


class TranslatorPanel(QWidget):
    """English input, Thai output and the history list."""

    text_edited = Signal(str)
    translate_clicked = Signal()
    clear_clicked = Signal()
    copy_clicked = Signal()
    clear_history_clicked = Signal()
    history_item_clicked = Signal(object)  # TranslationRecord

    def __init__(self):
        super().__init__()

        main_layout = QVBoxLayout(self)
        main_layout.setContentsMargins(12, 12, 12, 12)
        main_layout.setSpacing(8)

        header = QLabel("English → Thai")
        header.setStyleSheet("font-weight: bold;")
        main_layout.addWidget(header)

        self.input_text = _SourceTextEdit()
        self.input_text.setPlaceholderText("Type English text here...")
        self.input_text.setMinimumHeight(140)
        self.input_text.textChanged.connect(self._on_text_changed)
        self.input_text.submit_requested.connect(self.translate_clicked.emit)
        main_layout.addWidget(self.input_text)

        actions_layout = QHBoxLayout()
        self.clear_button = QPushButton("Clear")
        self.clear_button.clicked.connect(self.clear_clicked.emit)
        self.translate_button = QPushButton("Translate")
        self.translate_button.setEnabled(False)
        self.translate_button.clicked.connect(self.translate_clicked.emit)
        actions_layout.addWidget(self.clear_button)
        actions_layout.addStretch()
        actions_layout.addWidget(self.translate_button)
        main_layout.addLayout(actions_layout)

        tip = QLabel("Tip: press Ctrl + Enter to translate quickly.")
        tip.setStyleSheet("color: gray;")
        main_layout.addWidget(tip)

        self.output_text = QTextEdit()
        self.output_text.setReadOnly(True)
        self.output_text.setPlaceholderText("Translation will appear here")
        self.output_text.setMinimumHeight(140)
        self.output_text.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)
        main_layout.addWidget(self.output_text, 1)

        copy_layout = QHBoxLayout()
        copy_layout.addStretch()
        self.copy_button = QPushButton("Copy")
        self.copy_button.setEnabled(False)
        self.copy_button.clicked.connect(self.copy_clicked.emit)
        copy_layout.addWidget(self.copy_button)
        main_layout.addLayout(copy_layout)

        history_header = QHBoxLayout()
        self.history_label = QLabel("Recent Translations")
        self.history_label.setStyleSheet("font-weight: bold;")
        self.clear_history_button = QPushButton("Clear History")
        self.clear_history_button.clicked.connect(self.clear_history_clicked.emit)
        history_header.addWidget(self.history_label)
        history_header.addStretch()
        history_header.addWidget(self.clear_history_button)
        main_layout.addLayout(history_header)

        self.history_list = QListWidget()
        self.history_list.itemClicked.connect(self._on_history_item_clicked)
        main_layout.addWidget(self.history_list, 1)

        self._is_loading = False
        self.set_history([])

    def _on_text_changed(self):
        text = self.input_text.toPlainText()
        self._refresh_translate_button()
        self.text_edited.emit(text)

    def _on_history_item_clicked(self, item: QListWidgetItem):
        record = item.data(Qt.ItemDataRole.UserRole)
        if record is not None:
            self.history_item_clicked.emit(record)

    def _refresh_translate_button(self):
        has_text = bool(self.input_text.toPlainText().strip())
        self.translate_button.setEnabled(has_text and not self._is_loading)

    def set_input_text(self, text: str) -> None:
        if self.input_text.toPlainText() != text:
            self.input_text.setPlainText(text)

    def set_output_text(self, text: str) -> None:
        self.output_text.setPlainText(text)
        self.copy_button.setEnabled(bool(text))

    def set_loading(self, loading: bool) -> None:
        self._is_loading = loading
        self.translate_button.setText("Translating..." if loading else "Translate")
        self._refresh_translate_button()

    def set_copied(self, copied: bool) -> None:
        self.copy_button.setText("Copied" if copied else "Copy")

    def set_history(self, records: list[TranslationRecord]) -> None:
        self.history_list.clear()
        for record in records:
            item = QListWidgetItem(f"{record.original}\n{record.translated}\n{record.display_time()}")
            item.setData(Qt.ItemDataRole.UserRole, record)
            self.history_list.addItem(item)

        visible = bool(records)
        self.history_label.setVisible(visible)
        self.clear_history_button.setVisible(visible)
        self.history_list.setVisible(visible)
