# Author: Eric Kow
# License: CeCILL-B (French BSD3-like)

"""
List the annotations of one or more ELAN files

With a single file and a single kind of annotation, the table has the
columns of that kind only; otherwise rows also say which file and kind
they come from.
"""

from ..args import (add_usual_input_args, add_usual_output_args,
                    input_paths, positive_int, write_table)
from elanframe.annotation import AnnotationKind
from elanframe.corpus import aggregate_annotations, KIND_COL
from elanframe.eaf import load_document
from elanframe.extract import drop_na_columns, read_annotations


KIND_CHOICES = [k.value for k in AnnotationKind] + ['all']


def config_argparser(parser):
    """
    Subcommand flags.

    You should create and pass in the subparser to which the flags
    are to be added.
    """
    add_usual_input_args(parser)
    add_usual_output_args(parser)
    parser.add_argument('--kind', choices=KIND_CHOICES, default='ALIGNABLE',
                        help='kind of annotation to list')
    parser.add_argument('--keep-empty', action='store_true',
                        help='keep columns that have no values at all')
    parser.add_argument('--jobs', type=positive_int, default=1,
                        help='number of files to read concurrently')
    parser.set_defaults(func=main)


def main(args):
    """
    Subcommand main.

    You shouldn't need to call this yourself if you're using
    `config_argparser`
    """
    paths = input_paths(args)
    drop = not args.keep_empty
    if len(paths) == 1 and args.kind != 'all':
        df = read_annotations(load_document(paths[0]), args.kind,
                              drop_na_cols=drop)
    else:
        df = aggregate_annotations(paths, drop_na_cols=False,
                                   n_jobs=args.jobs)
        if args.kind != 'all':
            df = df[df[KIND_COL] == args.kind].reset_index(drop=True)
        if drop:
            df = drop_na_columns(df)
    write_table(args, df)
