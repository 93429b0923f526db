#
# Numlens Display Configuration
#

# Standard library -----------------------------------------------------------------------------------------------------
import logging
import os
from dataclasses import dataclass, fields
from typing import Any, Self

# Third-party ----------------------------------------------------------------------------------------------------------
import toml

# Local ----------------------------------------------------------------------------------------------------------------
from .tools import fmt_type, fmt_value

logger = logging.getLogger(__name__)

CONF_TABLE = "numlens"


# Classes --------------------------------------------------------------------------------------------------------------

@dataclass(frozen=True)
class DisplayConf:
    """
    Display settings shared by the generator and the text presentation.

    Attributes:
        precision: Fractional digits used for byte-unit conversions before trailing zeros are trimmed.
        bin_group_size: Bits per group in the grouped 64-bit binary string, must divide 64.
        key_separator: Text printed between a key and its padded value.
        title_template: Group heading, '{title}' is replaced with the interpretation title.
        uppercase_titles: Print group headings in upper case.
    """

    precision: int = 15
    bin_group_size: int = 8
    key_separator: str = ":  "
    title_template: str = "### Interpreted as: {title} ###"
    uppercase_titles: bool = True

    def __post_init__(self):
        if not isinstance(self.precision, int) or isinstance(self.precision, bool):
            raise TypeError(f"precision must be an int, but found {fmt_type(self.precision)}")
        if not 0 <= self.precision <= 20:
            raise ValueError(f"precision must be in range [0, 20], but found {self.precision}")

        if not isinstance(self.bin_group_size, int) or isinstance(self.bin_group_size, bool):
            raise TypeError(f"bin_group_size must be an int, but found {fmt_type(self.bin_group_size)}")
        if self.bin_group_size < 1 or 64 % self.bin_group_size:
            raise ValueError(f"bin_group_size must divide 64, but found {self.bin_group_size}")

        for name in ("key_separator", "title_template"):
            if not isinstance(getattr(self, name), str):
                raise TypeError(f"{name} must be a str, but found {fmt_type(getattr(self, name))}")
        if "{title}" not in self.title_template:
            raise ValueError(f"title_template must contain '{{title}}', but found {fmt_value(self.title_template)}")

        if not isinstance(self.uppercase_titles, bool):
            raise TypeError(f"uppercase_titles must be a bool, but found {fmt_type(self.uppercase_titles)}")

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Self:
        """
        Create from a mapping of setting names to values.

        Raises:
            ValueError: The mapping holds unknown setting names.
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ValueError(f"unknown display settings {unknown}, expected any of {sorted(known)}")
        return cls(**data)

    def format_title(self, title: str) -> str:
        text = self.title_template.format(title=title)
        return text.upper() if self.uppercase_titles else text


# Methods --------------------------------------------------------------------------------------------------------------

def load_conf(path: str | os.PathLike) -> DisplayConf:
    """
    Load DisplayConf from a TOML file.

    Settings are read from the [numlens] table, a file without that table yields the defaults.

    Example file:
        [numlens]
        precision = 6
        bin_group_size = 4
    """
    data = toml.load(os.fspath(path))
    table = data.get(CONF_TABLE, {})
    if not isinstance(table, dict):
        raise ValueError(f"[{CONF_TABLE}] must be a table, but found {fmt_type(table)}")
    logger.info("Loaded display settings from %s: %s", os.fspath(path), table)
    return DisplayConf.from_dict(table)
