"""
Application Initialization
==========================
This module constructs the MVC (Model-View-Controller) architecture and starts
the Qt Event Loop.

Why is this file needed?
------------------------
It acts as the "Dependency Injection" root. It:
1. Instantiates the interaction engine (which owns the InteractionState).
2. Instantiates the Main Window (View).
3. Passes the engine into the View so they can communicate.
"""
import argparse
import logging
import sys
from typing import Optional, Sequence

from PySide6.QtWidgets import QApplication

from sliderule.controller.engine import InteractionEngine
from sliderule.logging_config import setup_logging
from sliderule.view.main_window import MainWindow, VISIBLE_APP_NAME


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="sliderule", description="Interactive virtual slide rule.")
    parser.add_argument("--debug", action="store_true", help="log gestures and viewport changes")
    parser.add_argument("--log-file", default=None, help="also write the log to this file")
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = parse_args(argv)

    # 1. Setup Logging (Console + Optional File)
    setup_logging(level=logging.DEBUG if args.debug else logging.INFO, log_file=args.log_file)

    # 2. Create the Qt Application (Qt parses its own options from argv)
    app = QApplication(sys.argv[:1])
    app.setApplicationName(VISIBLE_APP_NAME)

    # 3. Initialize the interaction engine at the home extent
    engine = InteractionEngine()

    # 4. Initialize the Main Window, passing the engine
    window = MainWindow(engine)
    window.show()

    # 5. Start Event Loop
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
