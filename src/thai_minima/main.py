"""Main entry point for the Thai Minima translator."""

import logging
import sys

from PySide6.QtWidgets import QApplication

from thai_minima.coordinators import TranslatorController
from thai_minima.io import FileKeyValueStorage, HistoryStore
from thai_minima.services import GeminiTranslationService, SettingsManager
from thai_minima.ui import MainWindow, TranslatorPanel


def main():
    """
    Bootstrap the application following the Composition Root pattern.
    This is the only place that knows how to instantiate and wire all components.
    """
    # 1. Configuration and logging
    settings_manager = SettingsManager()
    logging.basicConfig(
        level=settings_manager.get_log_level(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # 2. Initialize Application
    app = QApplication(sys.argv)
    app.setApplicationName("Thai Minima")
    app.setOrganizationName("ThaiMinima")

    # 3. Initialize Infrastructure
    storage = FileKeyValueStorage(settings_manager.get_data_dir())
    history_store = HistoryStore(storage)
    translation_service = GeminiTranslationService(settings_manager)

    # 4. Construct UI
    main_window = MainWindow()
    panel = TranslatorPanel()
    main_window.set_panel(panel)

    # 5. Instantiate Coordinator (Dependency Injection)
    controller = TranslatorController(
        translation_service=translation_service,
        history_store=history_store,
        notifier=main_window,
        clipboard=app.clipboard(),
    )

    # 6. Signal Wiring (UI -> Controller)
    panel.text_edited.connect(controller.set_input_text)
    panel.translate_clicked.connect(controller.submit_translation)
    panel.clear_clicked.connect(controller.clear_input)
    panel.copy_clicked.connect(controller.copy_output)
    panel.clear_history_clicked.connect(controller.clear_history)
    panel.history_item_clicked.connect(controller.restore)

    # Controller -> UI
    controller.input_changed.connect(panel.set_input_text)
    controller.output_changed.connect(panel.set_output_text)
    controller.loading_changed.connect(panel.set_loading)
    controller.copied_changed.connect(panel.set_copied)
    controller.history_changed.connect(panel.set_history)

    controller.load_history()

    # 7. Show UI and start event loop
    main_window.show()

    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
