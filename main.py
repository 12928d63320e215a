"""
Entry point for the CSV Charts application.

Usage: csvcharts [FILE ...]
Files given on the command line are loaded at start-up.
"""
import os
import sys

from PySide6.QtWidgets import QApplication

from ui.viewer import ChartViewer


def main():
    app = QApplication(sys.argv)

    viewer = ChartViewer()
    viewer.show()

    # QApplication strips the Qt options it understands from its argument list
    file_paths = [arg for arg in app.arguments()[1:] if os.path.isfile(arg)]
    if file_paths:
        viewer.load_files(file_paths)

    try:
        sys.exit(app.exec())
    except KeyboardInterrupt:
        print("Application interrupted by user, exiting...")
        sys.exit(0)

if __name__ == "__main__":
    main()
