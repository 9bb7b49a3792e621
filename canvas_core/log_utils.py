import os
from datetime import datetime
from pathlib import Path
from typing import Callable


LOG_DIR = Path(os.environ.get("CANVAS_LOG_DIR", Path(__file__).parent.parent / "logs"))
LOG_FILE = LOG_DIR / "app.log"


def log(message: str) -> None:
    """Log to stdout and append to logs/app.log."""
    timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    line = f"{timestamp} {message}"
    print(line, flush=True)
    try:
        LOG_DIR.mkdir(parents=True, exist_ok=True)
        with LOG_FILE.open("a", encoding="utf-8") as f:
            f.write(line + os.linesep)
    except OSError:
        # stdout already has the line
        pass


def tagged(tag: str) -> Callable[[str], None]:
    """log() with a fixed [TAG] prefix, e.g. tagged("SESSION")("Imported")."""
    prefix = f"[{tag}] "

    def _log(message: str) -> None:
        log(prefix + message)

    return _log
