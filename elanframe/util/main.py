# Author: Eric Kow
# License: CeCILL-B (French BSD3-like)

"""
elan-util command line entry point
"""

import argparse
import sys
import xml.etree.ElementTree as ET

from elanframe.internalutil import ElanException
from elanframe.util import add_subcommand
from elanframe.util.cmd import SUBCOMMANDS, SUBCOMMAND_SECTIONS


def mk_argparser():
    """
    Argument parser with one subcommand per module in
    `elanframe.util.cmd`
    """
    epilog = '\n'.join('%s: %s' % (descr,
                                   ', '.join(m.__name__.split('.')[-1]
                                             for m in section))
                       for descr, section in SUBCOMMAND_SECTIONS)
    arg_parser = argparse.ArgumentParser(description='ELAN files as tables',
                                         epilog=epilog)
    subparsers = arg_parser.add_subparsers(title='subcommands',
                                           dest='subcommand')
    subparsers.required = True
    for module in SUBCOMMANDS:
        subparser = add_subcommand(subparsers, module)
        module.config_argparser(subparser)
    return arg_parser


def main(argv=None):
    """
    elan-util CLI entry point
    """
    args = mk_argparser().parse_args(argv)
    try:
        args.func(args)
    except (ElanException, ET.ParseError) as e:
        sys.exit("elan-util: %s" % e)
