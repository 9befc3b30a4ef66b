#!/usr/bin/env python3
"""
MARK - CLI Interface
====================
Command-line tool for a priority-ordered personal task list.

Usage:
    mark add 2 hello world
    mark ls
    mark del 3
    mark done 1
    mark update 1 0 new text
    mark report
"""

import argparse
import json
import logging
import sys

from .config import get_settings
from .errors import StorageError, ValidationError
from .manager import TaskManager

logger = logging.getLogger("mark.cli")

EXIT_OK = 0
EXIT_VALIDATION = 1
EXIT_STORAGE = 3

USAGE = """Usage :-
$ mark add 2 hello world          # Add a new item with priority 2 and text "hello world" to the list.
$ mark ls                         # Show incomplete priority list items sorted by priority in ascending order.
$ mark del INDEX                  # Delete the incomplete item with the given index.
$ mark done INDEX                 # Mark the incomplete item with the given index as complete.
$ mark help                       # Show usage.
$ mark report                     # Statistics.
$ mark update INDEX 0 new_text    # Update an item's priority and/or text with the given index.
                                    Here, 0 is the new priority of that task & new_text is the new text for the task.
                                    If no new_text is provided, only the priority is updated."""


def _common_options(dir_default, verbose_default) -> argparse.ArgumentParser:
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--dir", default=dir_default, help="Tasks directory")
    common.add_argument("-v", "--verbose", action="count", default=verbose_default, help="More logging (-vv for debug)")
    return common


def build_parser(settings) -> argparse.ArgumentParser:
    # Subcommand copies must not set defaults, or they would overwrite
    # options given before the command word.
    common = _common_options(argparse.SUPPRESS, argparse.SUPPRESS)

    parser = argparse.ArgumentParser(
        prog="mark",
        description="MARK - priority-ordered task list",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=USAGE,
        parents=[_common_options(str(settings.tasks_dir), 0)],
    )

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # HELP command
    subparsers.add_parser("help", parents=[common], help="Show usage")

    # LS command
    ls_parser = subparsers.add_parser("ls", parents=[common], help="List pending tasks")
    ls_parser.add_argument("--json", action="store_true", help="Output as JSON")

    # REPORT command
    report_parser = subparsers.add_parser("report", parents=[common], help="Pending and completed summary")
    report_parser.add_argument("--json", action="store_true", help="Output as JSON")

    # ADD command
    add_parser = subparsers.add_parser("add", parents=[common], help="Add a pending task")
    add_parser.add_argument("priority", type=int, nargs="?", help="Priority (0 = most urgent)")
    add_parser.add_argument("text", nargs=argparse.REMAINDER, help="Task text (options must come before it)")

    # DEL command
    del_parser = subparsers.add_parser("del", parents=[common], help="Delete a pending task")
    del_parser.add_argument("index", type=int, nargs="?", help="Index from 'ls'")

    # DONE command
    done_parser = subparsers.add_parser("done", parents=[common], help="Mark a pending task as done")
    done_parser.add_argument("index", type=int, nargs="?", help="Index from 'ls'")

    # UPDATE command
    update_parser = subparsers.add_parser("update", parents=[common], help="Change a task's priority and/or text")
    update_parser.add_argument("index", type=int, nargs="?", help="Index from 'ls'")
    update_parser.add_argument("priority", type=int, nargs="?", help="New priority")
    update_parser.add_argument("text", nargs=argparse.REMAINDER, help="New text (keeps the old text if omitted)")

    return parser


def setup_logging(level_name: str, verbose: int = 0) -> None:
    level = getattr(logging, level_name, logging.WARNING)
    if verbose == 1:
        level = min(level, logging.INFO)
    elif verbose > 1:
        level = logging.DEBUG

    logging.basicConfig(
        level=level,
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        force=True,
    )


def run(args, manager: TaskManager) -> int:
    """Execute one parsed command against the manager"""
    if args.command in (None, "help"):
        print(USAGE)

    elif args.command == "ls":
        if args.json:
            tasks = manager.load_pending()
            print(json.dumps([t.model_dump(mode="json") for t in tasks], indent=2))
        else:
            print(manager.format_listing())

    elif args.command == "report":
        if args.json:
            summary = manager.get_summary()
            print(json.dumps(summary.model_dump(mode="json"), indent=2))
        else:
            print(manager.get_report())

    elif args.command == "add":
        text = " ".join(args.text)
        if args.priority is None or not text:
            raise ValidationError("Missing tasks string. Nothing added!")
        task = manager.add_task(args.priority, text)
        print(f'Added task: "{task.text}" with priority {task.priority}.')

    elif args.command == "del":
        if args.index is None:
            raise ValidationError("Missing NUMBER for deleting tasks.")
        manager.delete_task(args.index)
        print(f"Deleted task #{args.index}")

    elif args.command == "done":
        if args.index is None:
            raise ValidationError("Missing NUMBER for marking tasks as done.")
        manager.complete_task(args.index)
        print("Marked item as done.")

    elif args.command == "update":
        if args.index is None or args.priority is None:
            raise ValidationError("Missing NUMBER for updating the priority.")
        manager.update_task(args.index, args.priority, " ".join(args.text))
        print("Updated item.")

    return EXIT_OK


def main(argv=None) -> int:
    settings = get_settings()
    parser = build_parser(settings)
    args = parser.parse_args(argv)

    setup_logging(settings.log_level, getattr(args, "verbose", 0))

    manager = TaskManager(
        tasks_dir=getattr(args, "dir", settings.tasks_dir),
        pending_name=settings.pending_file,
        completed_name=settings.completed_file
    )

    try:
        if args.command not in (None, "help"):
            manager.ensure_files()
        return run(args, manager)
    except ValidationError as e:
        print(f"Error: {e}")
        return EXIT_VALIDATION
    except StorageError as e:
        logger.debug("Storage failure", exc_info=True)
        print(f"❌ {e}", file=sys.stderr)
        return EXIT_STORAGE


if __name__ == "__main__":
    sys.exit(main())
