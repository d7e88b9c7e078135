# Author: Eric Kow
# License: CeCILL-B (French BSD3-like)

"""
List the tiers of one or more ELAN files

Participant, annotator and locale are inherited from parent tiers
unless you ask otherwise.
"""

from ..args import (add_usual_input_args, add_usual_output_args,
                    input_paths, positive_int, write_table)
from elanframe.corpus import aggregate_tiers


def config_argparser(parser):
    """
    Subcommand flags.

    You should create and pass in the subparser to which the flags
    are to be added.
    """
    add_usual_input_args(parser)
    add_usual_output_args(parser)
    parser.add_argument('--no-inherit', action='store_true',
                        help='show tier attributes as written in the file')
    parser.add_argument('--jobs', type=positive_int, default=1,
                        help='number of files to read concurrently')
    parser.set_defaults(func=main)


def main(args):
    """
    Subcommand main.

    You shouldn't need to call this yourself if you're using
    `config_argparser`
    """
    df = aggregate_tiers(input_paths(args),
                         inherit_missing_attrs=not args.no_inherit,
                         n_jobs=args.jobs)
    write_table(args, df)
