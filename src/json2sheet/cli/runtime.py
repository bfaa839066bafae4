from __future__ import annotations
import sys
import traceback
from typing import Optional, Protocol

from ..errors import Json2SheetError


class MainFunc(Protocol):
    def __call__(self, argv: Optional[list[str]] = None) -> int: ...


def _wants_traceback(argv: list[str]) -> bool:
    # cheap peek; main() does the real parsing
    verbosity = sum(1 for a in argv if a in ("-v", "--verbose")) + (2 if "-vv" in argv else 0)
    return "--debug" in argv or verbosity >= 2


def run_cli(main_func: MainFunc, argv: Optional[list[str]] = None) -> None:
    """
    Single catch point for conversion failures.

    - Calls main_func(argv) and exits with its return code.
    - Conversion errors (missing input, bad JSON, failed save, bad config)
      print one 'Error: ...' line and exit 1.
    - Unexpected exceptions do the same; the traceback is shown only with
      '--debug' or '-vv'.
    """
    args = sys.argv[1:] if argv is None else argv
    debug = _wants_traceback(args)

    try:
        code = main_func(args)
    except SystemExit:
        # argparse --help / usage errors
        raise
    except KeyboardInterrupt:
        print("Interrupted", file=sys.stderr)
        raise SystemExit(130)
    except Json2SheetError as e:
        if debug:
            traceback.print_exc()
        print(f"Error: {e}", file=sys.stderr)
        raise SystemExit(1)
    except Exception as e:
        if debug:
            traceback.print_exc()
        else:
            print(f"Error: {e}", file=sys.stderr)
        raise SystemExit(1)
    else:
        raise SystemExit(code)
