"""
Numlens plain-text presentation of output groups
"""

# Standard library -----------------------------------------------------------------------------------------------------
import sys
from typing import Iterable, TextIO

# Local ----------------------------------------------------------------------------------------------------------------
from .align import align
from .config import DisplayConf
from .interpret import OutputGroup
from .tools import print_title


# Methods --------------------------------------------------------------------------------------------------------------

def render_group(group: OutputGroup, conf: DisplayConf | None = None) -> list[str]:
    """
    Render one group as text lines: the heading, then one 'key:  value' line per aligned pair.
    """
    conf = DisplayConf() if conf is None else conf
    lines = [conf.format_title(group.title)]
    lines.extend(f"{key}{conf.key_separator}{value}" for key, value in align(group))
    return lines


def render(groups: Iterable[OutputGroup], conf: DisplayConf | None = None) -> str:
    """Render groups separated by blank lines."""
    return "\n\n".join("\n".join(render_group(g, conf)) for g in groups)


def print_groups(groups: Iterable[OutputGroup],
                 conf: DisplayConf | None = None,
                 file: TextIO | None = None):
    """Print groups to a stream, each followed by a blank line."""
    conf = DisplayConf() if conf is None else conf
    file = sys.stdout if file is None else file
    for group in groups:
        heading, *body = render_group(group, conf)
        print_title(heading, file=file)
        for line in body:
            print(line, file=file)
        print(file=file)
