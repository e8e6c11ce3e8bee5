from cleo.io.outputs.output import Verbosity

from reginald.logs.level import DEBUG
from reginald.logs.level import INFO
from reginald.logs.level import TRACE
from reginald.logs.level import WARN
from reginald.logs.level import Level


def verbosity_for(level: Level) -> Verbosity:
    """
    Picks the console verbosity at which a message of the given level is shown.
    Warnings and errors survive --quiet, trace needs -vv and anything below
    TRACE needs -vvv.
    """
    if level >= WARN:
        return Verbosity.QUIET
    if level >= INFO:
        return Verbosity.NORMAL
    if level >= DEBUG:
        return Verbosity.VERBOSE
    if level >= TRACE:
        return Verbosity.VERY_VERBOSE
    return Verbosity.DEBUG
