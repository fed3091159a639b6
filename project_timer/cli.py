import argparse
import logging

from . import __version__
from .config import ConfigManager


def build_parser():
    parser = argparse.ArgumentParser(
        prog="project-timer",
        description="Run a sequential countdown across a list of projects.",
    )
    parser.add_argument("--config", help="path to the settings JSON file")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    import tkinter as tk

    from .app import ProjectTimerApp

    root = tk.Tk()
    ProjectTimerApp(root, config=ConfigManager(args.config))
    root.mainloop()
    return 0
