"""Allow running Timer Boss as a module: python -m timerboss."""

import logging
import sys

from PyQt6.QtWidgets import QApplication

from .settings import load_settings
from .app import TimerBossApp


def main() -> None:
    settings = load_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logging.getLogger(__name__).info("Timer Boss ready!")

    app = QApplication(sys.argv)
    app.setApplicationName("TimerBoss")
    app.setOrganizationName("TimerBoss")

    window = TimerBossApp(settings)
    window.show()

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
