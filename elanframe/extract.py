# Author: Eric Kow
# License: BSD3

"""
Annotations as tables.

Each `TIER` holds annotations of one of two shapes (see
`elanframe.annotation.AnnotationKind`); we read one shape at a time
across all tiers of a document.  Alignable annotations have their time
slot references resolved to actual times; reference annotations are
left pointing at whatever they point at
"""

import warnings

import pandas as pd

from elanframe.annotation import (AnnotationKind, AlignableAnnotation,
                                  RefAnnotation, ANNOTATION_COLS, TIME_COLS)
from elanframe.eaf import (ANNOTATION_ATTRS, ANNOTATION_VALUE, COLUMN_NAMES,
                           TIER_ID, ANNOTATION_ID, TIME_SLOT_REF1,
                           TIME_SLOT_REF2, SVG_REF, EXT_REF,
                           annotation_path, tier_nodes, time_slot_nodes)
from elanframe.internalutil import (InvalidArgument, NotSupported,
                                    UnknownTimeSlot, UnresolvedTimeSlot,
                                    node_text, scoped_string_options)
from elanframe.projection import project_records
from elanframe.timeslots import TimeSlotTable


def _resolve(tslots, annotation_id, ts_id):
    """
    Time for a slot referred to by an annotation

    Raise `UnresolvedTimeSlot` if there is no such slot
    """
    try:
        return tslots.lookup(ts_id)
    except UnknownTimeSlot:
        raise UnresolvedTimeSlot(annotation_id, ts_id)


def annotation_value(anode):
    """
    Text of an annotation node: that of its `ANNOTATION_VALUE`
    children, whitespace included.  Layout between the annotation
    element and its children is not part of the value
    """
    return ''.join(node_text(v) for v in anode.findall(ANNOTATION_VALUE))


def _mk_alignable(tslots, tier_id, record, value):
    """
    Alignable annotation from a projected record, with time slots
    resolved
    """
    ann_id = record[ANNOTATION_ID]
    t0_id = record[TIME_SLOT_REF1]
    t1_id = record[TIME_SLOT_REF2]
    t0 = _resolve(tslots, ann_id, t0_id)
    t1 = _resolve(tslots, ann_id, t1_id)
    if t0 is not None and t1 is not None and t0 > t1:
        warnings.warn('Annotation %s ends (%s) before it starts (%s)' %
                      (ann_id, t1, t0))
    return AlignableAnnotation(tier_id=tier_id,
                               annotation_id=ann_id,
                               t0_id=t0_id,
                               t0=t0,
                               t1_id=t1_id,
                               t1=t1,
                               value=value,
                               svg_ref=record[SVG_REF],
                               ext_ref=record[EXT_REF])


def _mk_ref(tier_id, record, value):
    "Reference annotation from a projected record"
    fields = {COLUMN_NAMES[k]: v for k, v in record.items()}
    return RefAnnotation(tier_id=tier_id, value=value, **fields)


def tier_annotations(tier_id, tier_node, kind, tslots=None):
    """
    Annotations of the given kind in a single `TIER` node (whose id is
    `tier_id`), in document order.  A tier with no such annotations
    gives an empty list.

    :param tslots: time slots to resolve alignable annotations against
                   (not needed for reference annotations)
    :type tslots: TimeSlotTable
    """
    anodes = tier_node.findall(annotation_path(kind))
    required, optional = ANNOTATION_ATTRS[kind]
    records = project_records(anodes, required, optional)
    if kind == AnnotationKind.ALIGNABLE:
        return [_mk_alignable(tslots, tier_id, r, annotation_value(n))
                for r, n in zip(records, anodes)]
    else:
        return [_mk_ref(tier_id, r, annotation_value(n))
                for r, n in zip(records, anodes)]


def drop_na_columns(df):
    """
    The dataframe without the columns that are null in every row
    (an empty dataframe is returned as is)
    """
    if df.empty:
        return df
    return df.loc[:, df.notna().any(axis=0)]


def read_annotations(doc, ann_type=AnnotationKind.ALIGNABLE, tier_id=None,
                     drop_na_cols=True):
    """Read annotations from an ELAN document.

    Parameters
    ----------
    doc : ElementTree
        Parsed ELAN document (see `elanframe.eaf.load_document`).

    ann_type : AnnotationKind or str, defaults to ALIGNABLE
        `ALIGNABLE` for time-stamped annotations or `REF` for reference
        annotations.

    tier_id : str, optional
        Tier to read annotations from; only `None` (all tiers) is
        supported for now.

    drop_na_cols : boolean, defaults to True
        If True, drop any column where all values are missing.

    Returns
    -------
    df : DataFrame
        One row per annotation, tier by tier in document order, with
        the tier id, the annotation attributes and its text in `value`.
        For alignable annotations, the time slot references come with
        their times (`t0_id`, `t0`, `t1_id`, `t1`).
    """
    try:
        kind = AnnotationKind.coerce(ann_type)
    except ValueError:
        raise InvalidArgument("'ann_type' must be either 'ALIGNABLE' or "
                              "'REF' (got %r)" % (ann_type,))
    if tier_id is not None:
        raise NotSupported('getting annotations for a single tier not '
                           'supported yet')

    tslots = None
    if kind == AnnotationKind.ALIGNABLE:
        tslots = TimeSlotTable.build(time_slot_nodes(doc))

    tnodes = tier_nodes(doc)
    tids = [r[TIER_ID] for r in project_records(tnodes, [TIER_ID], [])]
    rows = []
    for tid, tnode in zip(tids, tnodes):
        rows.extend(tier_annotations(tid, tnode, kind, tslots))

    with scoped_string_options():
        res = pd.DataFrame(rows, columns=ANNOTATION_COLS[kind], dtype=object)
        if kind == AnnotationKind.ALIGNABLE:
            res = res.astype({c: float for c in TIME_COLS})
    if drop_na_cols:
        res = drop_na_columns(res)
    return res
