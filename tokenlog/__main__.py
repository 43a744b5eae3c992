"""tokenlog CLI entry point.

Allows running via `python -m tokenlog` and provides the console script
defined in `pyproject.toml`.
"""

from __future__ import annotations

import importlib.metadata
import logging
import os
import sys

import platformdirs

from .settings import APP_NAME, get_persistence

USAGE = "usage: tokenlog [--textual] [--log-dir DIR] [--debug] | --version"


def get_version_string() -> str:
    try:
        return importlib.metadata.version(APP_NAME)
    except importlib.metadata.PackageNotFoundError:
        return "unknown"


def configure_logging(debug: bool) -> None:
    """Send log records to a file; the terminal belongs to the UI."""
    if not debug:
        logging.getLogger(APP_NAME).addHandler(logging.NullHandler())
        return
    log_dir = platformdirs.user_log_dir(APP_NAME)
    os.makedirs(log_dir, exist_ok=True)
    logging.basicConfig(
        filename=os.path.join(log_dir, "tokenlog.log"),
        level=logging.DEBUG,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )


def parse_args(args: list[str]) -> dict:
    """Parse command line arguments.

    Raises:
        ValueError: On unknown arguments or a missing option value
    """
    options = {'textual': False, 'debug': False, 'log_dir': None, 'version': False}
    args = list(args)
    while args:
        arg = args.pop(0)
        if arg in ("--version", "-V"):
            options['version'] = True
        elif arg == "--textual":
            options['textual'] = True
        elif arg == "--debug":
            options['debug'] = True
        elif arg == "--log-dir":
            if not args:
                raise ValueError("--log-dir needs a directory")
            options['log_dir'] = args.pop(0)
        else:
            raise ValueError(f"unknown argument: {arg}")
    return options


def main() -> None:
    try:
        options = parse_args(sys.argv[1:])
    except ValueError as e:
        print(f"tokenlog: {e}\n{USAGE}", file=sys.stderr)
        sys.exit(2)

    if options['version']:
        print(get_version_string())
        return

    configure_logging(options['debug'])
    settings = get_persistence().load_settings()
    if options['log_dir']:
        settings['log_dir'] = options['log_dir']

    # Lazy import to avoid importing UI deps for --version
    if options['textual']:
        from .textual_app import TokenLogApp
        app = TokenLogApp(settings=settings)
        app.run()
        saved_path = app.shutdown()
    else:
        from .editor import LogEditor
        editor = LogEditor(settings=settings)
        editor.run()
        saved_path = editor.shutdown()

    if saved_path:
        print(f"Log saved to {saved_path}")
    else:
        print("Could not save log", file=sys.stderr)


if __name__ == "__main__":  # pragma: no cover
    main()
