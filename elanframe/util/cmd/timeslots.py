# Author: Eric Kow
# License: CeCILL-B (French BSD3-like)

"""
List the time slots of an ELAN file
"""

from ..args import (add_usual_input_args, add_usual_output_args,
                    write_table)
from elanframe.eaf import load_document
from elanframe.timeslots import read_time_slots


def config_argparser(parser):
    """
    Subcommand flags.

    You should create and pass in the subparser to which the flags
    are to be added.
    """
    add_usual_input_args(parser, single=True)
    add_usual_output_args(parser)
    parser.set_defaults(func=main)


def main(args):
    """
    Subcommand main.

    You shouldn't need to call this yourself if you're using
    `config_argparser`
    """
    doc = load_document(args.files[0])
    write_table(args, read_time_slots(doc))
