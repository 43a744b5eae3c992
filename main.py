#!/usr/bin/env python3
"""tokenlog - a keyboard-driven structured-text logger.

Usage:
    python main.py [--textual] [--log-dir DIR] [--debug]

Controls:
    Letter keys: Log the key's tag ("A  B  C" on one line)
    Ctrl-N: Newline action
    Enter: Line break
    Tab: Type a remark, Enter to add it as "(remark)"
    Ctrl-L: Clear the log
    Ctrl-Z: Undo the last step
    Ctrl-Q: Quit and save the log to Logs/log-YYYYMMDD-HHMMSS.txt
"""

from tokenlog.__main__ import main


if __name__ == "__main__":
    main()
