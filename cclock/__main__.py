"""Two-player chess clock.

Usage examples:
    # Five minutes each (or whatever settings.json says)
    python -m cclock

    # Ten minutes each
    python -m cclock --t 10m

    # Time odds: 1h30m against 45 minutes
    python -m cclock --t1 1h30m --t2 45min

    # Start fullscreen without the pause/fullscreen/reset buttons
    python -m cclock --t 3m --fullscreen --no-controls
"""

import argparse
import sys
from cclock.common.logger import enable_console, log
from cclock.core import config
from cclock.core.durations import DurationError, resolve_initial_times


def build_parser():
    parser = argparse.ArgumentParser(
        prog="cclock",
        description="Two-player chess clock. Durations are tokens like 90, 30s, 5m, 1h30m or 2min30sec.",
    )
    parser.add_argument("--t", help="starting time for both players")
    parser.add_argument("--t1", help="starting time for the left player (overrides --t)")
    parser.add_argument("--t2", help="starting time for the right player (overrides --t)")
    parser.add_argument("--fullscreen", action="store_true", help="start in fullscreen")
    parser.add_argument("--no-controls", action="store_true", help="hide the pause/fullscreen/reset buttons")
    parser.add_argument("--debug", action="store_true", help="also log to the console")
    return parser


# Parses the command line against the saved settings. Flags only override settings for this run, nothing is
# written back.
def parse_args(argv, settings):
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        initial_times = resolve_initial_times(args.t, args.t1, args.t2, default=settings["default_time"])
    except DurationError as e:
        log.error(f"Rejected starting times: {e}")
        parser.error(str(e))

    run_settings = dict(settings)
    if args.fullscreen:
        run_settings["start_fullscreen"] = True
    if args.no_controls:
        run_settings["show_controls"] = False
    return args, initial_times, run_settings


# Entry point for `python -m cclock`
def run(argv=None) -> None:
    try:
        settings = config.load_settings()
        args, initial_times, run_settings = parse_args(sys.argv[1:] if argv is None else argv, settings)
        if args.debug:
            enable_console(log)
        log.info(f"Starting clock with {initial_times[0]}s / {initial_times[1]}s")

        # Qt is only imported once the arguments are known to be good
        from cclock.ui.app import main
        main(initial_times, run_settings)
    except SystemExit:
        raise
    except Exception:
        # Full stack trace, always
        log.exception("Uncaught exception in entrypoint, exiting")
        sys.exit(1)

if __name__ == "__main__":
    run()
