from __future__ import annotations

import logging

from PyQt6.QtCore import Qt

from textedit.domain.interfaces import IAppConfig, IFileService
from textedit.services.config.app_config import build_app_config
from textedit.services.dispatcher import boot
from textedit.services.file_service import FileService
from textedit.services.task_runner import QtTaskRunner
from textedit.services.ui.adapters import QtFileDialogService
from textedit.services.ui.main_window import MainWindow
from textedit.services.ui.ports.dialogs import IFileDialogService
from textedit.services.ui.presenters import MainPresenter
from textedit.utils.constants import APP_NAME

_LOGGER = logging.getLogger(__name__)


class Container:
    """
    Lightweight DI container:
      - Wires default services if not provided
      - Builds the window, the presenter that drives it and the task runner it spawns on
    """

    def __init__(
        self,
        config: IAppConfig | None = None,
        files: IFileService | None = None,
        dialogs: IFileDialogService | None = None,
    ) -> None:
        self.config: IAppConfig = config or build_app_config()
        self.file_service: IFileService = files or FileService()
        self.dialogs: IFileDialogService = dialogs or QtFileDialogService()

    @staticmethod
    def default(config: IAppConfig | None = None) -> Container:
        return Container(config=config)

    # ---------- UI factories ----------

    def build_task_runner(self) -> QtTaskRunner:
        return QtTaskRunner(self.file_service, self.dialogs)

    def build_main_window(self, *, app_title: str = APP_NAME) -> MainWindow:
        """
        Create the Qt MainWindow with its presenter attached and the initial load of the
        default file already scheduled.
        """
        window = MainWindow(app_title=app_title)
        runner = self.build_task_runner()
        runner.setParent(window)
        runner.set_dialog_parent(window)

        theme = self.config.initial_theme()
        state, initial = boot(self.config.default_file(), theme)
        presenter = MainPresenter(
            view=window,
            runner=runner,
            state=state,
            default_grammar=self.config.default_grammar(),
        )
        window.attach_presenter(presenter)
        runner.completed.connect(presenter.dispatch, Qt.ConnectionType.QueuedConnection)

        _LOGGER.debug("Startup load of %s", self.config.default_file())
        presenter.start(initial)
        return window
