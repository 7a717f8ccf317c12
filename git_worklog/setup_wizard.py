"""setup_wizard

Provides `configure(reconfigure=False)` which:
- Reads the existing ``worklog.*`` git config of the current repository.
- If nothing is stored, or `reconfigure` is True, asks for the Jira email,
  password (hidden, asked twice), hook type, board url and REST API version.
  Stored values are offered as defaults.
- Saves the answers back into the local git config.

Invalid answers are asked again until they validate.
"""

from __future__ import annotations

import getpass
import re

from rich.console import Console

from .config import read_git_config, save_worklog_config, validate_url

EMAIL_PATTERN = re.compile(r"\w+@\w+")

HOOK_TYPE_OPTIONS = [
    ("pre-commit", "pre-commit (terminate operation)"),
    ("post-commit", "post-commit (warning only)"),
    ("pre-push", "pre-push  (terminate operation)"),
]

VERSION_OPTIONS = [
    ("2", "2 (current stable)"),
    ("3", "3 (experimental)"),
]


def prompt_visible(prompt: str, default: str = None, ask=input) -> str:
    suffix = f" [{default}]" if default else ""
    try:
        answer = ask(f"{prompt}{suffix} ").strip()
    except EOFError:
        answer = ""
    return answer or (default or "")


def prompt_until_valid(prompt: str, validate, default: str = None, ask=input, console: Console = None) -> str:
    while True:
        answer = prompt_visible(prompt, default, ask)
        if validate(answer):
            return answer
        if console:
            console.print(f"Invalid value: {answer!r}", style="red", markup=False)


def prompt_choice(message: str, options, default: str = None, ask=input, console: Console = None) -> str:
    """Numbered menu; returns the value of the chosen option."""
    values = [value for value, _ in options]
    default_index = str(values.index(default) + 1) if default in values else "1"
    lines = [message] + [f"  {i}) {label}" for i, (_, label) in enumerate(options, start=1)]
    (console or Console()).print("\n".join(lines), markup=False, highlight=False)
    answer = prompt_until_valid(
        "Choice:",
        lambda a: a.isdigit() and 1 <= int(a) <= len(options),
        default_index,
        ask,
        console,
    )
    return values[int(answer) - 1]


def prompt_password(existing: str = None, secret=getpass.getpass, console: Console = None) -> str:
    """Ask for the password twice. Empty input keeps ``existing`` when there is one."""
    while True:
        password = secret("Jira login password: ")
        if not password and existing:
            return existing
        if not password:
            if console:
                console.print("Password must not be empty", style="red")
            continue
        if secret("Confirm password: ") == password:
            return password
        if console:
            console.print("Passwords do not match", style="red")


def run_wizard(existing: dict = None, ask=input, secret=getpass.getpass, console: Console = None) -> dict:
    existing = existing or {}
    return {
        "email": prompt_until_valid(
            "Jira login email:",
            lambda email: bool(EMAIL_PATTERN.search(email)),
            existing.get("email"),
            ask,
            console,
        ),
        "password": prompt_password(existing.get("password"), secret, console),
        "type": prompt_choice(
            "What type of git hook you want to use for worklog?",
            HOOK_TYPE_OPTIONS,
            existing.get("type"),
            ask,
            console,
        ),
        "url": prompt_until_valid(
            "Full Jira board url:",
            validate_url,
            existing.get("url"),
            ask,
            console,
        ),
        "version": prompt_choice(
            "Which Jira REST API version your team is using?",
            VERSION_OPTIONS,
            existing.get("version"),
            ask,
            console,
        ),
    }


def configure(reconfigure: bool = False, console: Console = None, ask=input, secret=getpass.getpass) -> int:
    console = console or Console()
    existing = read_git_config()
    if existing and not reconfigure:
        console.print(
            "Configuration for worklog has already been created. If you want to change "
            "the config options, start `git-worklog configure --reconfigure`"
        )
        return 0
    answers = run_wizard(existing, ask, secret, console)
    save_worklog_config(answers)
    console.print("worklog hook was configured successfully", style="green")
    return 0
