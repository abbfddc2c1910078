"""Async workers for non-blocking API calls using Qt threading."""

from PySide6.QtCore import QObject, QRunnable, Signal, Slot

from thai_minima.services.translation import TranslationError, TranslationService, TranslatorError


class WorkerSignals(QObject):
    """
    Signals for communicating results from worker threads.

    QRunnable doesn't inherit from QObject, so we need a separate
    QObject to hold the signals.
    """
    finished = Signal()
    error = Signal(object)  # TranslatorError
    translation_result = Signal(str)


class TranslationWorker(QRunnable):
    """
    Worker that runs the translation API call in a background thread.

    Emits translation_result on success, error with a classified
    TranslatorError on failure, and finished in both cases.
    """

    def __init__(self, translation_service: TranslationService, text: str):
        super().__init__()
        self.translation_service = translation_service
        self.text = text
        self.signals = WorkerSignals()
        self.setAutoDelete(True)

    @Slot()
    def run(self):
        """Execute the translation API call in background thread."""
        try:
            result = self.translation_service.translate(self.text)
            self.signals.translation_result.emit(result)
        except TranslatorError as e:
            self.signals.error.emit(e)
        except Exception as e:
            # Catch any unexpected exceptions not handled by service
            wrapped = TranslationError(f"Unexpected translation error: {e}")
            wrapped.__cause__ = e
            self.signals.error.emit(wrapped)
        finally:
            self.signals.finished.emit()
