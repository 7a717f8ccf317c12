import argparse
import logging
import sys

from rich.console import Console

from . import __version__
from .config import get_worklog_config
from .errors import WorklogError
from .hook import install_hook, run_check
from .setup_wizard import configure


def build_parser():
    parser = argparse.ArgumentParser(
        prog="git-worklog",
        description="Block commits and pushes until time is logged on the branch's Jira issue.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-v", "--verbose", action="store_true", help="Print debug output")
    sub = parser.add_subparsers(dest="command")

    sub.add_parser("check", help="Verify the current branch's issue has logged work (used by the hook)")

    p_configure = sub.add_parser("configure", help="Store Jira credentials in the local git config")
    p_configure.add_argument("--reconfigure", action="store_true", help="Ask again even if configured")

    p_install = sub.add_parser("install", help="Install the git hook into this repository")
    p_install.add_argument("--type", dest="hook_type", help="Hook to install (defaults to the configured one)")
    p_install.add_argument("--force", action="store_true", help="Replace an existing hook")
    return parser


def _install(args, console):
    hook_type = args.hook_type
    if not hook_type:
        config = get_worklog_config()
        hook_type = config.hook_type if config else "pre-commit"
    path = install_hook(hook_type, force=args.force)
    console.print(f"Installed git {hook_type} hook: {path}", style="green", markup=False)
    return 0


def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    console = Console()
    err_console = Console(stderr=True)

    command = args.command or "check"
    if command == "check":
        return run_check(console, err_console)
    try:
        if command == "configure":
            return configure(args.reconfigure, console)
        return _install(args, console)
    except WorklogError as e:
        err_console.print(str(e), style="red", markup=False, highlight=False)
        return 1
    except KeyboardInterrupt:
        err_console.print("Aborted", style="red")
        return 130


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
