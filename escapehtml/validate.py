"""
Command-line argument validation.

validate() inspects the positional arguments that follow the program name;
Arguments is the parsed value handed to the escaper once they check out.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

from .errors import EscapeHtmlError, NotADirectoryArgumentError, PathNotFoundError, error_message
from .paths import PathKind, classify

logger = logging.getLogger(__name__)

USAGE_ARGS = "<source_file/source_dir> [dest_dir]"


def usage(prog: str) -> str:
    return f"Usage: {prog} {USAGE_ARGS}"


@dataclass(frozen=True)
class Arguments:
    """Validated positional arguments."""
    source: str
    destination: Optional[str] = None

    @classmethod
    def from_args(cls, args: Sequence[str]) -> 'Arguments':
        return cls(args[0], args[1] if len(args) == 2 else None)


def validate(args: Sequence[str]) -> Tuple[bool, Optional[EscapeHtmlError]]:
    """
    Check the positional arguments.

    Returns (True, None) when the arguments are usable. (False, None) means
    the argument count is wrong and the caller should print usage.
    (False, error) carries a message ready to show the user.
    """
    if len(args) not in (1, 2):
        return False, None

    source = args[0]
    try:
        classify(source)
    except PathNotFoundError as e:
        return False, e
    except OSError as e:
        return False, EscapeHtmlError(error_message(str(e)))

    if len(args) == 2:
        destination = args[1]
        try:
            kind = classify(destination)
        except PathNotFoundError:
            # Created on first write
            kind = None
        except OSError as e:
            logger.debug("Cannot inspect destination %s: %s", destination, e)
            kind = None
        if kind is not None and kind is not PathKind.DIRECTORY:
            return False, NotADirectoryArgumentError(destination)

    return True, None
