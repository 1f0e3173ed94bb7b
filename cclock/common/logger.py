import logging
from pathlib import Path
from logging.handlers import RotatingFileHandler
from cclock.common.setup import PATHS
from datetime import datetime

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s:%(filename)s:%(lineno)d] %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Attaches a handler to the logger only if no handler with that name is attached yet, so repeated get_logger()
# calls (tests, re-imports) never double up output.
def _attach_once(logger: logging.Logger, handler_name: str, build, level, fmt) -> None:
    if any(h.get_name() == handler_name for h in logger.handlers):
        return
    handler = build()
    handler.setLevel(level)
    handler.setFormatter(fmt)
    handler.set_name(handler_name)
    logger.addHandler(handler)

# Deletes all but the newest `keep` per-run debug logs.
def _prune_debug_runs(debug_dir: Path, name: str, keep: int) -> None:
    runs = sorted(debug_dir.glob(f"{name}_*.log"),key=lambda p: p.stat().st_mtime,reverse=True)
    for run in runs[keep:]:
        try: run.unlink()
        except OSError: pass

def get_logger(
        name = "chessclock",
        level = logging.INFO,
        log_dir: Path | None = None,
        max_bytes = 2 * 1024 * 1024,
        backup_count = 3,
        persistent = True,
        console = False,
        historical_debugs: int = 5
) -> logging.Logger:
    logger = logging.getLogger(name)
    logger.propagate = False
    logger.setLevel(level)

    log_dir = log_dir or PATHS.logs
    log_dir.mkdir(parents=True,exist_ok=True)

    fmt = logging.Formatter(LOG_FORMAT,LOG_DATE_FORMAT)

    # Rotating log that survives across runs
    if persistent:
        _attach_once(logger, f"{name}:persistent", lambda: RotatingFileHandler(
            filename=log_dir / f"{name}.log",
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding="utf-8",
            delay=False,
        ), level, fmt)

    # Latest-only log, overwritten each run
    _attach_once(logger, f"{name}:latest", lambda: logging.FileHandler(
        filename=log_dir / "latest.log",
        mode="w",
        encoding="utf-8",
        delay=False
    ), level, fmt)

    # One full debug log per run, only the newest few are kept
    if historical_debugs > 0:
        debug_dir = log_dir / "debug"
        debug_dir.mkdir(parents=True,exist_ok=True)
        this_run = debug_dir / f"{name}_{datetime.now():%Y-%m-%d_%H-%M-%S}.log"
        _attach_once(logger, f"{name}:historical_debug", lambda: logging.FileHandler(
            filename=this_run,
            encoding="utf-8",
            delay=False
        ), logging.DEBUG, fmt)
        _prune_debug_runs(debug_dir, name, historical_debugs)

    if console:
        _attach_once(logger, f"{name}:console", logging.StreamHandler, level, fmt)

    return logger

# Turns the console handler on after startup (used by --debug).
def enable_console(logger: logging.Logger, level=logging.DEBUG) -> None:
    fmt = logging.Formatter(LOG_FORMAT,LOG_DATE_FORMAT)
    _attach_once(logger, f"{logger.name}:console", logging.StreamHandler, level, fmt)

log = get_logger(level=logging.DEBUG,console=False,historical_debugs=5)
log.info("=== INITIALIZED NEW SESSION ===")
