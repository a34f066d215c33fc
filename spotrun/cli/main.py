import argparse
import logging
import sys

from spotrun import SPOTRUN_VERSION
from spotrun.cli import args as args_cmd
from spotrun.cli import run as run_cmd
from spotrun.cli.exitcodes import EXIT_CONFIG_ERROR, exit_code_from_error
from spotrun.errors import SpotrunError

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="spotrun", description="spotrun — configure and launch SpotBugs analysis runs")
    p.add_argument("--version", action="version", version=f"spotrun {SPOTRUN_VERSION}")
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")

    sub = p.add_subparsers(dest="cmd", required=True)

    # run
    run_p = sub.add_parser("run", help="Assemble arguments and launch SpotBugs.")
    run_p.add_argument("build_file", nargs="?", default=None, help="Build file (default: spotrun.yaml)")
    run_p.add_argument("--task", default=None, help="Task name (required if the build declares several).")
    run_p.add_argument("--java", default=None, help="Java executable (default: $JAVA_HOME/bin/java or java).")

    # args
    args_p = sub.add_parser("args", help="Print the SpotBugs command line without launching it.")
    args_p.add_argument("build_file", nargs="?", default=None, help="Build file (default: spotrun.yaml)")
    args_p.add_argument("--task", default=None, help="Task name (required if the build declares several).")
    args_p.add_argument("--java", default=None, help="Java executable (default: $JAVA_HOME/bin/java or java).")

    # tasks
    tasks_p = sub.add_parser("tasks", help="List tasks declared in the build file.")
    tasks_p.add_argument("build_file", nargs="?", default=None, help="Build file (default: spotrun.yaml)")

    return p


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
        stream=sys.stderr,
    )


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)

    try:
        if args.cmd == "run":
            return run_cmd.run(build_file=args.build_file, task=args.task, java=args.java)

        if args.cmd == "args":
            return args_cmd.show(build_file=args.build_file, task=args.task, java=args.java)

        if args.cmd == "tasks":
            return args_cmd.list_tasks(build_file=args.build_file)

        print("Unknown command.", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    except SpotrunError as e:
        print(f"spotrun: error: {e}", file=sys.stderr)
        return exit_code_from_error(e)


if __name__ == "__main__":
    sys.exit(main())
