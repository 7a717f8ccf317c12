"""Backward compatible wrapper.

The project has been packaged. Use the console script `git-worklog` now.
Running this module directly delegates to `git_worklog.cli.main`, so an
existing hook calling ``python main.py`` keeps working:

- no arguments runs the check (exit status 1 blocks the git operation)
- `configure [--reconfigure]` runs the setup wizard
"""

import sys

from git_worklog.cli import main

if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
