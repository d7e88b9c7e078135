# Author: Eric Kow
# License: BSD3
# pylint: disable=invalid-name

"""
Tests for the elan-util command line tool
"""

import argparse
import contextlib
import io
import os
import shutil
import tempfile
import unittest

import pandas as pd

from elanframe.tests import ex_doc, mk_alignable, mk_doc_xml, mk_tier
from elanframe.util.args import positive_int
from elanframe.util.main import main, mk_argparser


class ElanUtilTest(unittest.TestCase):
    "tests for elanframe.util"

    def setUp(self):
        self.tmpdir = tempfile.mkdtemp()
        self.f1 = os.path.join(self.tmpdir, 'f1.eaf')
        with open(self.f1, 'w', encoding='utf-8') as fout:
            fout.write(ex_doc)
        self.out = os.path.join(self.tmpdir, 'out.csv')

    def tearDown(self):
        shutil.rmtree(self.tmpdir)

    def run_main(self, argv):
        "stdout of elan-util when run with these arguments"
        buf = io.StringIO()
        with contextlib.redirect_stdout(buf), \
                contextlib.redirect_stderr(io.StringIO()):
            main(argv)
        return buf.getvalue()

    def test_subcommands(self):
        parser = mk_argparser()
        args = parser.parse_args(['tiers', self.f1])
        self.assertEqual('tiers', args.subcommand)
        self.assertFalse(args.no_inherit)
        args = parser.parse_args(['annotations', '--kind', 'REF', self.f1])
        self.assertEqual('REF', args.kind)
        self.assertEqual(1, args.jobs)

    def test_tiers_csv(self):
        self.run_main(['tiers', self.f1, '--csv', self.out])
        df = pd.read_csv(self.out)
        self.assertEqual(['A', 'B'], list(df['tier_id']))
        self.assertEqual(['X', 'X'], list(df['participant']))
        self.assertIn('filename', df.columns)

    def test_tiers_print(self):
        out = self.run_main(['tiers', self.f1, '--no-inherit'])
        self.assertIn('tier_id', out)
        self.assertIn('utterance', out)

    def test_timeslots(self):
        self.run_main(['timeslots', self.f1, '--csv', self.out])
        df = pd.read_csv(self.out)
        self.assertEqual(['ts1', 'ts2'], list(df['ts_id']))
        self.assertEqual([1000, 4000], list(df['time']))

    def test_annotations_single(self):
        self.run_main(['annotations', self.f1, '--csv', self.out])
        df = pd.read_csv(self.out)
        self.assertEqual(['tier_id', 'annotation_id', 't0_id', 't0',
                          't1_id', 't1', 'value'], list(df.columns))
        self.assertEqual('hello', df['value'][0])

    def test_annotations_corpus(self):
        f2 = os.path.join(self.tmpdir, 'f2.eaf')
        with open(f2, 'w', encoding='utf-8') as fout:
            fout.write(mk_doc_xml(
                [mk_tier('T', children=mk_alignable('x1', 'ts1', 'ts2',
                                                    'hi'))],
                slots=[('ts1', 5), ('ts2', 50)]))
        self.run_main(['annotations', '--corpus', self.tmpdir,
                       '--kind', 'all', '--csv', self.out])
        df = pd.read_csv(self.out)
        self.assertEqual(['a1', 'b1', 'x1'], list(df['annotation_id']))
        self.assertEqual(['ALIGNABLE', 'REF', 'ALIGNABLE'], list(df['kind']))

        self.run_main(['annotations', '--corpus', self.tmpdir,
                       '--kind', 'REF', '--csv', self.out])
        df = pd.read_csv(self.out)
        self.assertEqual(['b1'], list(df['annotation_id']))
        self.assertNotIn('t0', df.columns)

    def test_errors(self):
        with self.assertRaises(SystemExit) as cm:
            self.run_main(['tiers', os.path.join(self.tmpdir, 'nope.eaf')])
        self.assertIn('does not exist', str(cm.exception.code))
        with self.assertRaises(SystemExit):
            self.run_main(['tiers'])

    def test_malformed_xml(self):
        bad = os.path.join(self.tmpdir, 'bad.eaf')
        with open(bad, 'w', encoding='utf-8') as fout:
            fout.write('<ANNOTATION_DOCUMENT><TIER>')
        for subcmd in ['timeslots', 'tiers', 'annotations']:
            with self.assertRaises(SystemExit) as cm:
                self.run_main([subcmd, bad])
            self.assertTrue(str(cm.exception.code).startswith('elan-util: '))

    def test_subcommand_help(self):
        parser = mk_argparser()
        subparsers = [a for a in parser._actions
                      if isinstance(a, argparse._SubParsersAction)][0]
        self.assertEqual(['tiers', 'timeslots', 'annotations'],
                         list(subparsers.choices))
        help_texts = dict((a.dest, a.help)
                          for a in subparsers._choices_actions)
        self.assertEqual('List the time slots of an ELAN file',
                         help_texts['timeslots'])

    def test_positive_int(self):
        self.assertEqual(4, positive_int('4'))
        self.assertEqual(-1, positive_int('-1'))
        for bad in ['0', '-2', 'many']:
            with self.assertRaises(argparse.ArgumentTypeError):
                positive_int(bad)


if __name__ == '__main__':
    unittest.main()
