"""
elan-util subcommands
"""

# Author: Eric Kow
# License: CeCILL-B (French BSD3)

from . import (annotations,
               tiers,
               timeslots)

SUBCOMMAND_SECTIONS = [
    ('Tables', [
        tiers,
        timeslots,
        annotations,
    ]),
]

SUBCOMMANDS = []
for descr, section in SUBCOMMAND_SECTIONS:
    SUBCOMMANDS.extend(section)
