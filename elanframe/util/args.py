# Author Eric Kow
# License: CeCILL-B (BSD3-ish)

"""
Command line options
"""

import argparse
import os
import sys

from tabulate import tabulate

from elanframe.corpus import Reader


def positive_int(string):
    """
    Parse a strictly positive integer (or -1, joblib's "all CPUs").
    Used for argparse
    """
    try:
        val = int(string)
    except ValueError:
        raise argparse.ArgumentTypeError("%r is not an integer" % string)
    if val == 0 or val < -1:
        msg = "%r is not a positive number of jobs (or -1)" % string
        raise argparse.ArgumentTypeError(msg)
    return val


def add_usual_input_args(parser, single=False):
    """
    Augment a subcommand argparser with typical input arguments: ELAN
    files given one by one, or a corpus directory to search for them

    :param single: if True, take exactly one file (and no corpus dir)
    :type single: bool
    """
    if single:
        parser.add_argument('files', metavar='FILE', nargs=1,
                            help='ELAN file')
        return
    parser.add_argument('files', metavar='FILE', nargs='*',
                        help='ELAN file(s)')
    parser.add_argument('--corpus', metavar='DIR',
                        help='read all .eaf files under this dir')
    parser.add_argument('--doc', metavar='GLOB',
                        help='limit --corpus to documents matching this '
                        'glob')


def add_usual_output_args(parser):
    """
    Augment a subcommand argparser with typical output arguments
    """
    parser.add_argument('--csv', metavar='FILE',
                        help='write the table as CSV to this file '
                        '(default: pretty-print to stdout)')


def input_paths(args):
    """
    Paths of the ELAN files named on the command line, either directly
    or via `--corpus`
    """
    paths = list(args.files)
    if getattr(args, 'corpus', None):
        if not os.path.isdir(args.corpus):
            sys.exit("No corpus directory {corpus}".format(
                corpus=args.corpus))
        reader = Reader(args.corpus)
        paths.extend(reader.files(doc_glob=args.doc).values())
    if not paths:
        sys.exit("No ELAN files given (use FILE or --corpus DIR)")
    return paths


def write_table(args, df):
    """
    Save the table as CSV if asked, otherwise print it
    """
    if args.csv:
        df.to_csv(args.csv, index=False)
        print("Table written to", args.csv, file=sys.stderr)
    else:
        print(tabulate(df.astype(object).where(df.notna(), None),
                       headers='keys', showindex=False, missingval='-'))
