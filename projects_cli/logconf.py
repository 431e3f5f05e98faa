# projects_cli/logconf.py
import logging, sys, pathlib

FORMAT = "%(asctime)s | %(levelname)-5s | %(module)s | %(message)s"


def init(level: str = "WARNING", log_file: pathlib.Path | None = None):
    """Configure root logger once per run."""
    handlers = [logging.StreamHandler(sys.stderr)]
    if log_file:
        log_file = pathlib.Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format=FORMAT,
        handlers=handlers,
        force=True,
    )
