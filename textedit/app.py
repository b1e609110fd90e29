from __future__ import annotations

import logging
from collections.abc import Sequence

from PyQt6.QtWidgets import QApplication

from textedit.di.container import Container
from textedit.services.config.app_config import build_app_config, configure_logging
from textedit.utils.constants import APP_NAME, APP_ORG

_LOGGER = logging.getLogger(__name__)


def run_app(argv: Sequence[str]) -> int:
    """
    Bootstraps Qt, composes the application via the DI container,
    and launches the main window. Only Qt looks at argv.
    """
    config = build_app_config()
    configure_logging(config)
    _LOGGER.info("%s %s starting", APP_NAME, config.get_version())
    _LOGGER.debug(
        "Configuration from %s: %s", config.loaded_from or "built-in defaults", config.as_dict()
    )

    QApplication.setOrganizationName(APP_ORG)
    QApplication.setApplicationName(APP_NAME)
    app = QApplication(list(argv))

    container = Container.default(config=config)
    win = container.build_main_window(app_title=APP_NAME)
    win.show()

    return app.exec()
