# -*- coding: utf-8 -*-
#
# Author: Eric Kow
# License: BSD3
# pylint: disable=too-many-public-methods, invalid-name

"""
Tests for elanframe
"""

import os
import shutil
import tempfile
import unittest
import xml.etree.ElementTree as ET

from frozendict import frozendict
import pandas as pd
from pandas.testing import assert_frame_equal

import elanframe
from elanframe.annotation import AnnotationKind, Tier
from elanframe.corpus import (Reader, aggregate_annotations, aggregate_tiers,
                              document_annotations, document_tiers)
from elanframe.eaf import load_document
from elanframe.extract import read_annotations
from elanframe.internalutil import (CyclicTierHierarchy, DocumentNotFound,
                                    InvalidArgument, MalformedTimeValue,
                                    MissingRequiredAttribute, NotSupported,
                                    UnknownParentTier, UnknownTimeSlot,
                                    UnresolvedTimeSlot, node_text,
                                    scoped_string_options)
from elanframe.projection import (project_attributes, project_record,
                                  project_records)
from elanframe.tiers import TierHierarchyResolver, read_tiers
from elanframe.timeslots import TimeSlotTable, read_time_slots


# ---------------------------------------------------------------------
# fixtures
# ---------------------------------------------------------------------

ex_doc = """<ANNOTATION_DOCUMENT AUTHOR="" FORMAT="3.0" VERSION="3.0">
    <HEADER MEDIA_FILE="" TIME_UNITS="milliseconds"/>
    <TIME_ORDER>
        <TIME_SLOT TIME_SLOT_ID="ts1" TIME_VALUE="1000"/>
        <TIME_SLOT TIME_SLOT_ID="ts2" TIME_VALUE="4000"/>
    </TIME_ORDER>
    <TIER LINGUISTIC_TYPE_REF="utterance" PARTICIPANT="X" TIER_ID="A">
        <ANNOTATION>
            <ALIGNABLE_ANNOTATION ANNOTATION_ID="a1" TIME_SLOT_REF1="ts1" TIME_SLOT_REF2="ts2">
                <ANNOTATION_VALUE>hello</ANNOTATION_VALUE>
            </ALIGNABLE_ANNOTATION>
        </ANNOTATION>
    </TIER>
    <TIER LINGUISTIC_TYPE_REF="words" PARENT_REF="A" TIER_ID="B">
        <ANNOTATION>
            <REF_ANNOTATION ANNOTATION_ID="b1" ANNOTATION_REF="a1">
                <ANNOTATION_VALUE>world</ANNOTATION_VALUE>
            </REF_ANNOTATION>
        </ANNOTATION>
    </TIER>
</ANNOTATION_DOCUMENT>
"""


def mk_tier(tier_id, ling_type='default', children='', **kwargs):
    "XML for a tier with the given attributes"
    attrs = {'TIER_ID': tier_id, 'LINGUISTIC_TYPE_REF': ling_type}
    attrs.update(kwargs)
    attr_str = ' '.join('%s="%s"' % (k, v) for k, v in sorted(attrs.items()))
    return '<TIER %s>%s</TIER>' % (attr_str, children)


def mk_alignable(ann_id, ts1, ts2, value, **kwargs):
    "XML for an alignable annotation"
    extra = ''.join(' %s="%s"' % (k, v) for k, v in sorted(kwargs.items()))
    return ('<ANNOTATION><ALIGNABLE_ANNOTATION ANNOTATION_ID="%s" '
            'TIME_SLOT_REF1="%s" TIME_SLOT_REF2="%s"%s>'
            '<ANNOTATION_VALUE>%s</ANNOTATION_VALUE>'
            '</ALIGNABLE_ANNOTATION></ANNOTATION>' %
            (ann_id, ts1, ts2, extra, value))


def mk_doc_xml(tiers, slots=None):
    """
    XML for a whole document

    :param slots: (id, value) pairs; a None value makes an unaligned slot
    """
    slot_xml = []
    for ts_id, val in (slots or []):
        if val is None:
            slot_xml.append('<TIME_SLOT TIME_SLOT_ID="%s"/>' % ts_id)
        else:
            slot_xml.append('<TIME_SLOT TIME_SLOT_ID="%s" TIME_VALUE="%s"/>'
                            % (ts_id, val))
    return ('<ANNOTATION_DOCUMENT><TIME_ORDER>%s</TIME_ORDER>%s'
            '</ANNOTATION_DOCUMENT>' % (''.join(slot_xml), ''.join(tiers)))


def mk_doc(tiers, slots=None):
    "Parsed document (as `load_document` would return)"
    return ET.ElementTree(ET.fromstring(mk_doc_xml(tiers, slots)))


def mk_nodes(*attr_dicts):
    "Bare XML elements with the given attributes"
    return [ET.Element('NODE', attrib=dict(a)) for a in attr_dicts]


# ---------------------------------------------------------------------
# projection
# ---------------------------------------------------------------------

class ProjectionTest(unittest.TestCase):
    "tests for elanframe.projection"

    def test_columns_and_rows(self):
        "one row per node, columns exactly required + optional"
        nodes = mk_nodes({'B': 'b1', 'A': 'a1', 'EXTRA': 'x'},
                         {'A': 'a2', 'B': 'b2', 'C': 'c2'})
        df = project_attributes(nodes, ['A', 'B'], ['C', 'D'])
        self.assertEqual(['A', 'B', 'C', 'D'], list(df.columns))
        self.assertEqual(2, len(df))
        self.assertEqual(['a1', 'a2'], list(df['A']))
        self.assertIsNone(df['C'][0])
        self.assertEqual('c2', df['C'][1])
        self.assertNotIn('EXTRA', df.columns)

    def test_absent_is_not_empty(self):
        "an absent optional attribute is distinguishable from ''"
        nodes = mk_nodes({'A': '1', 'C': ''}, {'A': '2'})
        recs = project_records(nodes, ['A'], ['C'])
        self.assertEqual('', recs[0]['C'])
        self.assertIsNone(recs[1]['C'])

    def test_record_order(self):
        "records are read-only and keyed in the requested order"
        node = mk_nodes({'Z': 'z', 'Y': 'y', 'X': 'x'})[0]
        rec = project_record(node, 0, ['X'], ['Z', 'W'])
        self.assertIsInstance(rec, frozendict)
        self.assertEqual(['X', 'Z', 'W'], list(rec.keys()))

    def test_missing_required(self):
        "a missing required attribute fails the whole batch"
        nodes = mk_nodes({'A': '1'}, {'A': '2'}, {'B': '3'})
        with self.assertRaises(MissingRequiredAttribute) as cm:
            project_attributes(nodes, ['A'], ['B'])
        self.assertEqual(2, cm.exception.index)
        self.assertEqual('A', cm.exception.attr)

    def test_empty(self):
        "no nodes, no rows, but still the columns"
        df = project_attributes([], ['A'], ['B'])
        self.assertEqual(0, len(df))
        self.assertEqual(['A', 'B'], list(df.columns))


class InternalUtilTest(unittest.TestCase):
    "tests for elanframe.internalutil"

    def test_scoped_options_restored(self):
        "the pandas option is back to what it was, even on error"
        before = pd.get_option('future.infer_string')
        with self.assertRaises(RuntimeError):
            with scoped_string_options():
                self.assertFalse(pd.get_option('future.infer_string'))
                raise RuntimeError('oops')
        self.assertEqual(before, pd.get_option('future.infer_string'))

    def test_node_text(self):
        "text is concatenated in document order, whitespace kept"
        node = ET.fromstring('<R><V>foo</V><V>bar</V></R>')
        self.assertEqual('foobar', node_text(node))
        node = ET.fromstring('<R><V/></R>')
        self.assertEqual('', node_text(node))
        node = ET.fromstring('<R><V>a b</V></R>')
        self.assertEqual('a b', node_text(node))
        node = ET.fromstring('<V> </V>')
        self.assertEqual(' ', node_text(node))


# ---------------------------------------------------------------------
# time slots
# ---------------------------------------------------------------------

class TimeSlotTest(unittest.TestCase):
    "tests for elanframe.timeslots"

    def test_lookup(self):
        doc = mk_doc([], slots=[('ts1', 1000), ('ts2', None)])
        tslots = TimeSlotTable.build(doc.getroot().iter('TIME_SLOT'))
        self.assertEqual(2, len(tslots))
        self.assertEqual(1000, tslots.lookup('ts1'))
        self.assertIsNone(tslots.lookup('ts2'))
        self.assertIn('ts2', tslots)

    def test_unknown(self):
        tslots = TimeSlotTable.build([])
        with self.assertRaises(UnknownTimeSlot):
            tslots.lookup('ts9')
        # callers can treat this as a plain missing key
        with self.assertRaises(KeyError):
            tslots.lookup('ts9')

    def test_malformed(self):
        for bad in ['12ms', 'nan', '']:
            nodes = mk_nodes({'TIME_SLOT_ID': 'ts1', 'TIME_VALUE': bad})
            with self.assertRaises(MalformedTimeValue):
                TimeSlotTable.build(nodes)

    def test_duplicate(self):
        nodes = mk_nodes({'TIME_SLOT_ID': 'ts1', 'TIME_VALUE': '10'},
                         {'TIME_SLOT_ID': 'ts1', 'TIME_VALUE': '20'})
        with self.assertWarns(UserWarning):
            tslots = TimeSlotTable.build(nodes)
        self.assertEqual(10, tslots.lookup('ts1'))

    def test_read_time_slots(self):
        doc = mk_doc([], slots=[('ts1', 1000), ('ts2', 4000), ('ts3', None)])
        df = read_time_slots(doc)
        self.assertEqual(['ts_id', 'time'], list(df.columns))
        self.assertEqual(['ts1', 'ts2', 'ts3'], list(df['ts_id']))
        self.assertEqual(4000, df['time'][1])
        self.assertTrue(pd.isna(df['time'][2]))


# ---------------------------------------------------------------------
# tiers
# ---------------------------------------------------------------------

class TierTest(unittest.TestCase):
    "tests for elanframe.tiers"

    def assertTierField(self, expected, df, tier_id, field):
        "the field for the given tier has the expected value"
        row = df[df['tier_id'] == tier_id].iloc[0]
        if expected is None:
            self.assertIsNone(row[field])
        else:
            self.assertEqual(expected, row[field])

    def test_columns(self):
        df = read_tiers(mk_doc([mk_tier('A')]))
        self.assertEqual(['tier_id', 'linguistic_type', 'participant',
                          'annotator', 'locale', 'parent_ref'],
                         list(df.columns))

    def test_inherit_chain(self):
        "C inherits from its grandparent A through B"
        doc = mk_doc([mk_tier('A', PARTICIPANT='X', ANNOTATOR='ann1'),
                      mk_tier('B', PARENT_REF='A', ANNOTATOR='ann2'),
                      mk_tier('C', PARENT_REF='B')])
        df = read_tiers(doc)
        self.assertTierField('X', df, 'C', 'participant')
        # nearest ancestor wins
        self.assertTierField('ann2', df, 'C', 'annotator')
        self.assertTierField('ann1', df, 'A', 'annotator')
        # nobody has it
        self.assertTierField(None, df, 'C', 'locale')
        # parent refs are never inherited
        self.assertTierField('B', df, 'C', 'parent_ref')
        self.assertTierField(None, df, 'A', 'parent_ref')

    def test_no_inherit(self):
        doc = mk_doc([mk_tier('A', PARTICIPANT='X'),
                      mk_tier('B', PARENT_REF='A')])
        df = read_tiers(doc, inherit_missing_attrs=False)
        self.assertTierField(None, df, 'B', 'participant')

    def test_document_order(self):
        "children listed before their parents stay where they are"
        doc = mk_doc([mk_tier('C', PARENT_REF='A'),
                      mk_tier('A', DEFAULT_LOCALE='fr')])
        df = read_tiers(doc)
        self.assertEqual(['C', 'A'], list(df['tier_id']))
        self.assertTierField('fr', df, 'C', 'locale')

    def test_cycle(self):
        doc = mk_doc([mk_tier('A', PARENT_REF='B'),
                      mk_tier('B', PARENT_REF='A')])
        with self.assertRaises(CyclicTierHierarchy):
            read_tiers(doc)
        # no inheritance, no walk
        df = read_tiers(doc, inherit_missing_attrs=False)
        self.assertEqual(2, len(df))

    def test_self_cycle(self):
        "a cycle is caught even if nothing needs inheriting"
        doc = mk_doc([mk_tier('A', PARENT_REF='A', PARTICIPANT='X',
                              ANNOTATOR='Y', DEFAULT_LOCALE='en')])
        with self.assertRaises(CyclicTierHierarchy) as cm:
            read_tiers(doc)
        self.assertEqual('A', cm.exception.tier_id)

    def test_cycle_above(self):
        "the tier itself is not on the cycle, but its ancestors are"
        tiers = [Tier('A', 't', None, None, None, 'B'),
                 Tier('B', 't', None, None, None, 'A'),
                 Tier('C', 't', None, None, None, 'A')]
        resolver = TierHierarchyResolver(tiers)
        with self.assertRaises(CyclicTierHierarchy):
            resolver.ancestors(tiers[2])

    def test_unknown_parent(self):
        doc = mk_doc([mk_tier('A', PARENT_REF='nope')])
        with self.assertRaises(UnknownParentTier):
            read_tiers(doc)

    def test_ancestors(self):
        tiers = [Tier('A', 't', 'X', None, None, None),
                 Tier('B', 't', None, None, None, 'A'),
                 Tier('C', 't', None, None, None, 'B')]
        resolver = TierHierarchyResolver(tiers)
        self.assertEqual(['B', 'A'],
                         [t.tier_id for t in resolver.ancestors(tiers[2])])
        self.assertEqual([], resolver.ancestors(tiers[0]))

    def test_duplicate(self):
        doc = mk_doc([mk_tier('A', PARTICIPANT='X'),
                      mk_tier('A', PARTICIPANT='Y'),
                      mk_tier('B', PARENT_REF='A')])
        with self.assertWarns(UserWarning):
            df = read_tiers(doc)
        self.assertEqual(3, len(df))
        self.assertTierField('X', df, 'B', 'participant')

    def test_missing_required(self):
        doc = ET.ElementTree(ET.fromstring(
            '<ANNOTATION_DOCUMENT><TIER TIER_ID="A"/></ANNOTATION_DOCUMENT>'))
        with self.assertRaises(MissingRequiredAttribute):
            read_tiers(doc)


# ---------------------------------------------------------------------
# annotations
# ---------------------------------------------------------------------

class AnnotationTest(unittest.TestCase):
    "tests for elanframe.extract"

    def setUp(self):
        self.doc = ET.ElementTree(ET.fromstring(ex_doc))

    def test_alignable(self):
        df = read_annotations(self.doc)
        self.assertEqual(1, len(df))
        row = df.iloc[0]
        self.assertEqual('A', row['tier_id'])
        self.assertEqual('a1', row['annotation_id'])
        self.assertEqual('hello', row['value'])
        self.assertEqual(1000, row['t0'])
        self.assertEqual(4000, row['t1'])
        self.assertEqual('ts1', row['t0_id'])
        self.assertEqual('ts2', row['t1_id'])
        self.assertEqual(['tier_id', 'annotation_id', 't0_id', 't0',
                          't1_id', 't1', 'value'],
                         list(df.columns))

    def test_reference(self):
        df = read_annotations(self.doc, AnnotationKind.REF)
        self.assertEqual(['tier_id', 'annotation_id', 'annotation_ref',
                          'value'],
                         list(df.columns))
        self.assertEqual({'tier_id': 'B',
                          'annotation_id': 'b1',
                          'annotation_ref': 'a1',
                          'value': 'world'},
                         df.iloc[0].to_dict())

    def test_kind_strings(self):
        for ann_type in ['REF', 'ref', 'Reference']:
            df = read_annotations(self.doc, ann_type)
            self.assertEqual(['b1'], list(df['annotation_id']))
        df = read_annotations(self.doc, 'alignable')
        self.assertEqual(['a1'], list(df['annotation_id']))

    def test_invalid_kind(self):
        with self.assertRaises(InvalidArgument):
            read_annotations(self.doc, 'SYMBOLIC')
        with self.assertRaises(ValueError):
            read_annotations(self.doc, 42)

    def test_single_tier(self):
        with self.assertRaises(NotSupported):
            read_annotations(self.doc, tier_id='A')

    def test_keep_empty_columns(self):
        full = read_annotations(self.doc, drop_na_cols=False)
        dropped = read_annotations(self.doc)
        self.assertEqual(['tier_id', 'annotation_id', 't0_id', 't0',
                          't1_id', 't1', 'value', 'svg_ref', 'ext_ref'],
                         list(full.columns))
        self.assertTrue(set(dropped.columns) <= set(full.columns))
        # exactly the all-null columns go
        all_null = [c for c in full.columns if full[c].isna().all()]
        self.assertEqual(['svg_ref', 'ext_ref'], all_null)
        self.assertEqual([c for c in full.columns if c not in all_null],
                         list(dropped.columns))
        self.assertIsNone(full['ext_ref'][0])

        ref_full = read_annotations(self.doc, 'REF', drop_na_cols=False)
        self.assertEqual(['tier_id', 'annotation_id', 'annotation_ref',
                          'value', 'previous_annotation', 'ext_ref'],
                         list(ref_full.columns))

    def test_partly_empty_column_kept(self):
        tier = mk_tier('A', children=(mk_alignable('a1', 'ts1', 'ts2', 'x',
                                                   EXT_REF='e1') +
                                      mk_alignable('a2', 'ts1', 'ts2', 'y')))
        doc = mk_doc([tier], slots=[('ts1', 0), ('ts2', 10)])
        df = read_annotations(doc)
        self.assertIn('ext_ref', df.columns)
        self.assertNotIn('svg_ref', df.columns)
        self.assertEqual(['e1', None], list(df['ext_ref']))

    def test_unresolved(self):
        tier = mk_tier('A', children=mk_alignable('a1', 'ts1', 'ts9', 'x'))
        doc = mk_doc([tier], slots=[('ts1', 0)])
        with self.assertRaises(UnresolvedTimeSlot) as cm:
            read_annotations(doc)
        self.assertEqual('a1', cm.exception.annotation_id)
        self.assertEqual('ts9', cm.exception.ts_id)
        # reference annotations never look at time slots
        df = read_annotations(doc, 'REF')
        self.assertEqual(0, len(df))

    def test_unaligned_slot(self):
        tier = mk_tier('A', children=mk_alignable('a1', 'ts1', 'ts2', 'x'))
        doc = mk_doc([tier], slots=[('ts1', 0), ('ts2', None)])
        df = read_annotations(doc, drop_na_cols=False)
        self.assertEqual(0, df['t0'][0])
        self.assertEqual('ts2', df['t1_id'][0])
        self.assertTrue(pd.isna(df['t1'][0]))
        # no time for any end slot: the column goes, the reference stays
        df = read_annotations(doc)
        self.assertNotIn('t1', df.columns)
        self.assertIn('t1_id', df.columns)
        self.assertEqual(['ts2'], list(df['t1_id']))

    def test_backwards_times(self):
        tier = mk_tier('A', children=mk_alignable('a1', 'ts2', 'ts1', 'x'))
        doc = mk_doc([tier], slots=[('ts1', 0), ('ts2', 10)])
        with self.assertWarns(UserWarning):
            df = read_annotations(doc)
        self.assertEqual(1, len(df))

    def test_empty_tiers(self):
        "tiers without matching annotations contribute no rows"
        children = mk_alignable('a1', 'ts1', 'ts2', 'x')
        doc = mk_doc([mk_tier('E1'),
                      mk_tier('A', children=children),
                      mk_tier('E2')],
                     slots=[('ts1', 0), ('ts2', 10)])
        df = read_annotations(doc)
        self.assertEqual(['A'], list(df['tier_id']))
        df = read_annotations(mk_doc([mk_tier('E1')]), drop_na_cols=False)
        self.assertEqual(0, len(df))
        self.assertIn('t0', df.columns)

    def test_tier_order(self):
        doc = mk_doc([mk_tier('B', children=(
                          mk_alignable('b1', 'ts1', 'ts2', 'x') +
                          mk_alignable('b2', 'ts2', 'ts3', 'y'))),
                      mk_tier('A', children=mk_alignable('a1', 'ts1', 'ts3',
                                                         'z'))],
                     slots=[('ts1', 0), ('ts2', 10), ('ts3', 20)])
        df = read_annotations(doc)
        self.assertEqual(['b1', 'b2', 'a1'], list(df['annotation_id']))
        self.assertEqual(['B', 'B', 'A'], list(df['tier_id']))

    def test_values(self):
        "value is always a single string"
        tier = mk_tier('A', children=(
            mk_alignable('a1', 'ts1', 'ts2', '') +
            mk_alignable('a2', 'ts1', 'ts2', 'café olé') +
            mk_alignable('a3', 'ts1', 'ts2', '<b>x</b>y')))
        doc = mk_doc([tier], slots=[('ts1', 0), ('ts2', 10)])
        df = read_annotations(doc)
        self.assertEqual(['', 'café olé', 'xy'], list(df['value']))

    def test_whitespace_values(self):
        "whitespace inside the value is content, layout around it is not"
        tier = mk_tier('A', children=(
            mk_alignable('a1', 'ts1', 'ts2', ' ') +
            mk_alignable('a2', 'ts1', 'ts2', 'a <b/> c')))
        doc = mk_doc([tier], slots=[('ts1', 0), ('ts2', 10)])
        df = read_annotations(doc)
        self.assertEqual([' ', 'a  c'], list(df['value']))
        # pretty-printed document
        df = read_annotations(ET.ElementTree(ET.fromstring(ex_doc)))
        self.assertEqual(['hello'], list(df['value']))
        df = read_annotations(ET.ElementTree(ET.fromstring(ex_doc)), 'REF')
        self.assertEqual(['world'], list(df['value']))

    def test_missing_required(self):
        tier = mk_tier('A', children=(
            '<ANNOTATION><ALIGNABLE_ANNOTATION ANNOTATION_ID="a1" '
            'TIME_SLOT_REF1="ts1"/></ANNOTATION>'))
        doc = mk_doc([tier], slots=[('ts1', 0)])
        with self.assertRaises(MissingRequiredAttribute) as cm:
            read_annotations(doc)
        self.assertEqual('TIME_SLOT_REF2', cm.exception.attr)

    def test_idempotent(self):
        before = pd.get_option('future.infer_string')
        df1 = read_annotations(self.doc)
        df2 = read_annotations(self.doc)
        assert_frame_equal(df1, df2)
        self.assertEqual(before, pd.get_option('future.infer_string'))

    def test_public_surface(self):
        "the package level names agree with the modules"
        assert_frame_equal(read_annotations(self.doc, 'REF'),
                           elanframe.list_annotations(self.doc, 'REF'))
        assert_frame_equal(read_tiers(self.doc),
                           elanframe.list_tiers(self.doc))
        self.assertEqual(2, len(elanframe.list_time_slots(self.doc)))


# ---------------------------------------------------------------------
# corpus
# ---------------------------------------------------------------------

class CorpusTest(unittest.TestCase):
    "tests for elanframe.corpus"

    def setUp(self):
        self.tmpdir = tempfile.mkdtemp()
        self.f1 = self._write('f1.eaf', ex_doc)
        self.f2 = self._write(
            os.path.join('sub', 'f2.eaf'),
            mk_doc_xml([mk_tier('T1', PARTICIPANT='P'),
                        mk_tier('T2', PARENT_REF='T1'),
                        mk_tier('T3', PARENT_REF='T1',
                                children=mk_alignable('x1', 'ts1', 'ts2',
                                                      'hi'))],
                       slots=[('ts1', 5), ('ts2', 50)]))

    def tearDown(self):
        shutil.rmtree(self.tmpdir)

    def _write(self, name, xml):
        path = os.path.join(self.tmpdir, name)
        if not os.path.isdir(os.path.dirname(path)):
            os.makedirs(os.path.dirname(path))
        with open(path, 'w', encoding='utf-8') as fout:
            fout.write(xml)
        return path

    def test_load(self):
        doc = load_document(self.f1)
        self.assertEqual('ANNOTATION_DOCUMENT', doc.getroot().tag)
        with self.assertRaises(DocumentNotFound):
            load_document(os.path.join(self.tmpdir, 'nope.eaf'))
        with self.assertRaises(IOError):
            load_document(os.path.join(self.tmpdir, 'nope.eaf'))

    def test_aggregate_tiers(self):
        df = aggregate_tiers([self.f1, self.f2])
        self.assertEqual(set([self.f1, self.f2]), set(df['filename']))
        for path in [self.f1, self.f2]:
            expected = read_tiers(load_document(path))
            self.assertEqual(len(expected),
                             (df['filename'] == path).sum())
        self.assertEqual(['A', 'B', 'T1', 'T2', 'T3'], list(df['tier_id']))
        t2 = df[df['tier_id'] == 'T2'].iloc[0]
        self.assertEqual('P', t2['participant'])

    def test_aggregate_tiers_no_inherit(self):
        df = aggregate_tiers([self.f2], inherit_missing_attrs=False)
        t2 = df[df['tier_id'] == 'T2'].iloc[0]
        self.assertTrue(pd.isna(t2['participant']))

    def test_aggregate_annotations(self):
        df = aggregate_annotations([self.f1, self.f2])
        self.assertEqual(['a1', 'b1', 'x1'], list(df['annotation_id']))
        self.assertEqual(['ALIGNABLE', 'REF', 'ALIGNABLE'], list(df['kind']))
        self.assertEqual([self.f1, self.f1, self.f2], list(df['filename']))
        self.assertEqual(50, df['t1'][2])
        self.assertNotIn('svg_ref', df.columns)
        full = aggregate_annotations([self.f1, self.f2], drop_na_cols=False)
        self.assertIn('svg_ref', full.columns)

    def test_aggregate_missing_values(self):
        "one marker for absent values, whichever kind the column is from"
        full = aggregate_annotations([self.f1, self.f2], drop_na_cols=False)
        self.assertEqual([None, None, None], list(full['svg_ref']))
        self.assertEqual([None, 'a1', None], list(full['annotation_ref']))
        self.assertEqual([None, None, None],
                         list(full['previous_annotation']))
        self.assertEqual(object, full['annotation_ref'].dtype)
        # times stay numeric
        self.assertTrue(pd.isna(full['t0'][1]))
        self.assertEqual(5, full['t0'][2])
        df = document_annotations(self.f1)
        self.assertEqual([None, 'a1'], list(df['annotation_ref']))
        self.assertEqual([None, None], list(df['svg_ref']))

    def test_parallel(self):
        df_seq = aggregate_tiers([self.f1, self.f2])
        df_par = aggregate_tiers([self.f1, self.f2], n_jobs=2)
        assert_frame_equal(df_seq, df_par)

    def test_whole_batch_failure(self):
        bad = self._write('bad.eaf', mk_doc_xml(
            [mk_tier('A', children=mk_alignable('a1', 'ts1', 'ts2', 'x'))]))
        with self.assertRaises(UnresolvedTimeSlot):
            aggregate_annotations([self.f1, bad, self.f2])
        with self.assertRaises(DocumentNotFound):
            aggregate_tiers([self.f1, os.path.join(self.tmpdir, 'nope.eaf')])

    def test_empty(self):
        self.assertEqual(0, len(aggregate_tiers([])))
        self.assertEqual(0, len(aggregate_annotations([])))

    def test_document_tiers(self):
        df = document_tiers(self.f1)
        self.assertEqual([self.f1, self.f1], list(df['filename']))

    def test_reader(self):
        reader = Reader(self.tmpdir)
        files = reader.files()
        self.assertEqual({'f1': self.f1,
                          os.path.join('sub', 'f2'): self.f2},
                         files)
        self.assertEqual(['f1'], list(reader.files(doc_glob='f*')))
        corpus = reader.slurp()
        self.assertEqual(sorted(files), sorted(corpus))
        tiers = read_tiers(corpus['f1'])
        self.assertEqual(['A', 'B'], list(tiers['tier_id']))


if __name__ == '__main__':
    unittest.main()
