"""Main entry point for the Theseus package when run as a module.

This module enables running Theseus directly using 'python -m theseus'.
It provides a simple command router to the CLI commands.
"""

import sys

from . import cli

COMMANDS = ("solve", "format")


def main():
    """Main entry point for the package."""
    if len(sys.argv) < 2:
        print("Usage: python -m theseus <command> [args...]")
        print("\nAvailable commands:")
        print("  solve  - Find path(s) through a maze file")
        print("  format - Print a maze file in normalized form")
        sys.exit(1)

    command = sys.argv[1]
    if command.startswith("-") or command in COMMANDS:
        sys.exit(cli.main(sys.argv[1:]))

    print(f"Unknown command: {command}")
    print(f"Available commands: {', '.join(COMMANDS)}")
    sys.exit(1)


if __name__ == "__main__":
    main()
