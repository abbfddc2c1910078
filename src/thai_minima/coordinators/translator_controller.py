"""Translator Controller - Owns widget state and runs the translate workflow."""

import logging
from typing import Any, Optional, Protocol

from PySide6.QtCore import QObject, QThreadPool, QTimer, Signal, Slot
from PySide6.QtGui import QGuiApplication

from thai_minima.core import TranslationRecord
from thai_minima.io import HistoryStore
from thai_minima.services import TranslationService, TranslationWorker, TranslatorError

logger = logging.getLogger(__name__)


class ErrorNotifier(Protocol):
    def show_error(self, title: str, message: str) -> None: ...


class _TranslationRequest(QObject):
    """Holds the submitted text while a worker runs and forwards its results."""

    def __init__(self, source_text: str, parent: "TranslatorController"):
        super().__init__()
        self.source_text = source_text
        self.parent_ref = parent

    @Slot(str)
    def on_translation_result(self, result: str):
        self.parent_ref._handle_translation_result(self.source_text, result)

    @Slot(object)
    def on_translation_error(self, error: TranslatorError):
        self.parent_ref._handle_translation_error(error)


class TranslatorController(QObject):
    """
    Orchestrates the English→Thai translation widget.

    Responsibilities:
    - Own input/output text, the in-flight flag and the copy-confirmation flag.
    - Run the translation service off the UI thread, one request at a time.
    - Record successful translations in the history store.
    - Surface failures as one generic user-facing notification.
    """

    COPY_CONFIRMATION_MS = 2000
    ERROR_TITLE = "Translation Failed"
    ERROR_MESSAGE = "Something went wrong. Please try again."
    HISTORY_ERROR_TITLE = "History Not Saved"
    HISTORY_ERROR_MESSAGE = "The translation could not be saved to your history."

    input_changed = Signal(str)
    output_changed = Signal(str)
    loading_changed = Signal(bool)
    copied_changed = Signal(bool)
    history_changed = Signal(list)
    translation_failed = Signal(str)

    def __init__(
        self,
        translation_service: TranslationService,
        history_store: HistoryStore,
        notifier: ErrorNotifier,
        clipboard: Optional[Any] = None,
        thread_pool: Optional[QThreadPool] = None,
    ):
        super().__init__()

        self.translation_service = translation_service
        self.history_store = history_store
        self.notifier = notifier
        self._clipboard = clipboard
        self.thread_pool = thread_pool or QThreadPool.globalInstance()

        self._input_text = ""
        self._output_text = ""
        self._is_loading = False
        self._is_copied = False

        # Keep a reference so the helper isn't garbage collected while the worker runs
        self._request_helper: Optional[_TranslationRequest] = None

        self._copy_timer = QTimer(self)
        self._copy_timer.setSingleShot(True)
        self._copy_timer.setInterval(self.COPY_CONFIRMATION_MS)
        self._copy_timer.timeout.connect(self._on_copy_confirmation_expired)

    @property
    def input_text(self) -> str:
        return self._input_text

    @property
    def output_text(self) -> str:
        return self._output_text

    @property
    def is_loading(self) -> bool:
        return self._is_loading

    @property
    def is_copied(self) -> bool:
        return self._is_copied

    @property
    def history(self) -> list[TranslationRecord]:
        """Current history, most recent first."""
        return self.history_store.all()

    def load_history(self) -> list[TranslationRecord]:
        """Restore persisted history at startup."""
        records = self.history_store.load()
        self.history_changed.emit(records)
        return records

    def set_input_text(self, text: str) -> None:
        if text == self._input_text:
            return
        self._input_text = text
        self.input_changed.emit(text)

    def can_submit(self) -> bool:
        return bool(self._input_text.strip()) and not self._is_loading

    def submit_translation(self) -> None:
        """Translate the current input in the background."""
        if not self._input_text.strip():
            return
        if self._is_loading:
            logger.debug("Ignoring submit while a translation is in flight")
            return

        source_text = self._input_text
        self._set_loading(True)

        worker = TranslationWorker(
            translation_service=self.translation_service,
            text=source_text,
        )
        request_helper = _TranslationRequest(source_text, self)
        self._request_helper = request_helper

        worker.signals.translation_result.connect(request_helper.on_translation_result)
        worker.signals.error.connect(request_helper.on_translation_error)

        self.thread_pool.start(worker)

    def _handle_translation_result(self, source_text: str, result: str) -> None:
        """Handle a successful translation (runs in main thread)."""
        try:
            self._set_output(result)
            self.history_store.record(source_text, result)
            self.history_changed.emit(self.history_store.all())
        except OSError:
            logger.exception("Could not save translation history")
            self.notifier.show_error(self.HISTORY_ERROR_TITLE, self.HISTORY_ERROR_MESSAGE)
        finally:
            self._finish_request()

    def _handle_translation_error(self, error: TranslatorError) -> None:
        """Handle a failed translation (runs in main thread)."""
        try:
            kind = getattr(error, "kind", "translation")
            logger.error("Translation failed (%s): %s", kind, error)
            self.translation_failed.emit(str(error))
            self.notifier.show_error(self.ERROR_TITLE, self.ERROR_MESSAGE)
        finally:
            self._finish_request()

    def _finish_request(self) -> None:
        self._request_helper = None
        self._set_loading(False)

    def restore(self, record: TranslationRecord) -> None:
        """Show a history entry again without touching the history itself."""
        self.set_input_text(record.original)
        self._set_output(record.translated)

    def clear_input(self) -> None:
        self.set_input_text("")
        self._set_output("")

    def clear_history(self) -> None:
        self.history_store.clear()
        self.history_changed.emit([])

    def copy_output(self) -> None:
        """Copy the output to the clipboard and flag the confirmation for 2 s."""
        if not self._output_text:
            return

        self._get_clipboard().setText(self._output_text)
        self._set_copied(True)
        # Restarting a running timer is equivalent to letting the newest one win
        self._copy_timer.start()

    @Slot()
    def _on_copy_confirmation_expired(self) -> None:
        self._set_copied(False)

    def _get_clipboard(self):
        if self._clipboard is None:
            self._clipboard = QGuiApplication.clipboard()
        return self._clipboard

    def _set_output(self, text: str) -> None:
        if text == self._output_text:
            return
        self._output_text = text
        self.output_changed.emit(text)

    def _set_loading(self, value: bool) -> None:
        if value == self._is_loading:
            return
        self._is_loading = value
        self.loading_changed.emit(value)

    def _set_copied(self, value: bool) -> None:
        if value == self._is_copied:
            return
        self._is_copied = value
        self.copied_changed.emit(value)
