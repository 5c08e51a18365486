from PySide6.QtWidgets import QApplication
from PySide6.QtCore import QCoreApplication, QSettings

import sys
import os

ORG_ID = "imperialcalc"
APP_ID = "imperialcalc"
ORG_DOMAIN = "imperialcalc.local"

VISIBLE_APP_NAME = "Imperial Calc"


def create_app() -> QApplication:
    """Create and configure the QApplication instance."""
    os.environ.setdefault("QT_ENABLE_HIGHDPI_SCALING", "1")

    QCoreApplication.setOrganizationName(ORG_ID)
    QCoreApplication.setOrganizationDomain(ORG_DOMAIN)
    QCoreApplication.setApplicationName(APP_ID)
    QSettings.setDefaultFormat(QSettings.Format.IniFormat)

    app = QApplication.instance() or QApplication(sys.argv)

    visible_name = QCoreApplication.translate("App", VISIBLE_APP_NAME)
    app.setApplicationDisplayName(visible_name)

    return app
