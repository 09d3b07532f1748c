"""Entry point: python -m memfs [shell|demo]

- No args / "shell": Interactive session on stdin/stdout
- "demo":            Replay a walkthrough of every command and print the transcript
"""

from __future__ import annotations

import logging
import sys

from memfs.config import MemfsConfig, load_config

DEMO_SCRIPT = [
    "help",
    "create", "notes.txt", "This is my first note file with some content!",
    "create", "todo.md", "# Todo List - learn the commands - try every alias",
    "create", "config.json", '{"name": "File Manager", "version": "1.0", "debug": true}',
    "list",
    "read", "notes.txt",
    "info", "1",
    "write", "notes.txt", "Updated note: now with more detailed information!",
    "stats",
    "delete", "config.json",
    "list",
    "read", "config.json",
    "stats",
    "quit",
]


def _setup_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )


def _run(config: MemfsConfig, terminal) -> int:
    from memfs.core import Dispatcher
    from memfs.errors import InputStreamError
    from memfs.store import FileStore

    dispatcher = Dispatcher(FileStore(), terminal, config)
    try:
        dispatcher.run()
    except InputStreamError as e:
        print(f"Fatal error: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("\n👋 Goodbye!")
    return 0


def _run_shell() -> int:
    """Interactive session mode."""
    config = load_config()
    _setup_logging(config.log_level)

    from memfs.connectors.cli import StdioTerminal

    return _run(config, StdioTerminal())


def _run_demo() -> int:
    """Scripted walkthrough mode."""
    config = load_config()
    _setup_logging(config.log_level)

    from memfs.connectors.script import ScriptedTerminal

    terminal = ScriptedTerminal(DEMO_SCRIPT)
    code = _run(config, terminal)
    print(terminal.output)
    return code


def main(argv: list[str] | None = None) -> None:
    args = sys.argv[1:] if argv is None else argv
    cmd = args[0] if args else "shell"

    if cmd == "shell":
        sys.exit(_run_shell())
    elif cmd == "demo":
        sys.exit(_run_demo())
    else:
        print("Usage: python -m memfs [shell|demo]")
        print("  shell  — Interactive file manager session (default)")
        print("  demo   — Run a scripted walkthrough of every command")
        sys.exit(1)


if __name__ == "__main__":
    main()
