# Author: Eric Kow
# License: BSD3

"""
The `ELAN <https://archive.mpi.nl/tla/elan>`__ file format (`.eaf`)

Informal DTD (only the parts we read):

    * `ANNOTATION_DOCUMENT` is the root
    * `TIME_ORDER/TIME_SLOT` has `TIME_SLOT_ID` and (unless the slot is
      unaligned) `TIME_VALUE`, in milliseconds
    * `TIER` has `TIER_ID`, `LINGUISTIC_TYPE_REF` and optionally
      `PARTICIPANT`, `ANNOTATOR`, `DEFAULT_LOCALE`, `PARENT_REF`
    * each `TIER/ANNOTATION` wraps exactly one `ALIGNABLE_ANNOTATION`
      or `REF_ANNOTATION`, whose `ANNOTATION_VALUE` child holds the text

You're likely most interested in `load_document`; the tables are built
by `elanframe.timeslots`, `elanframe.tiers` and `elanframe.extract`
"""

import os
import xml.etree.ElementTree as ET

from elanframe.annotation import AnnotationKind
from elanframe.internalutil import DocumentNotFound


TIME_SLOT = 'TIME_SLOT'
TIER = 'TIER'
ANNOTATION = 'ANNOTATION'
ANNOTATION_VALUE = 'ANNOTATION_VALUE'

# ---------------------------------------------------------------------
# attributes
# ---------------------------------------------------------------------

TIME_SLOT_ID = 'TIME_SLOT_ID'
TIME_VALUE = 'TIME_VALUE'

TIER_ID = 'TIER_ID'
LINGUISTIC_TYPE_REF = 'LINGUISTIC_TYPE_REF'
PARTICIPANT = 'PARTICIPANT'
ANNOTATOR = 'ANNOTATOR'
DEFAULT_LOCALE = 'DEFAULT_LOCALE'
PARENT_REF = 'PARENT_REF'

ANNOTATION_ID = 'ANNOTATION_ID'
TIME_SLOT_REF1 = 'TIME_SLOT_REF1'
TIME_SLOT_REF2 = 'TIME_SLOT_REF2'
SVG_REF = 'SVG_REF'
EXT_REF = 'EXT_REF'
ANNOTATION_REF = 'ANNOTATION_REF'
PREVIOUS_ANNOTATION = 'PREVIOUS_ANNOTATION'

TIER_REQ_ATTRS = [TIER_ID, LINGUISTIC_TYPE_REF]
TIER_OPT_ATTRS = [PARTICIPANT, ANNOTATOR, DEFAULT_LOCALE, PARENT_REF]

# (required, optional) attributes for each kind of annotation
ANNOTATION_ATTRS = {
    AnnotationKind.ALIGNABLE: ([ANNOTATION_ID, TIME_SLOT_REF1, TIME_SLOT_REF2],
                               [SVG_REF, EXT_REF]),
    AnnotationKind.REF: ([ANNOTATION_ID, ANNOTATION_REF],
                         [PREVIOUS_ANNOTATION, EXT_REF]),
}

# table column for each attribute
COLUMN_NAMES = {
    TIME_SLOT_ID: 'ts_id',
    TIME_VALUE: 'time',
    TIER_ID: 'tier_id',
    LINGUISTIC_TYPE_REF: 'linguistic_type',
    PARTICIPANT: 'participant',
    ANNOTATOR: 'annotator',
    DEFAULT_LOCALE: 'locale',
    PARENT_REF: 'parent_ref',
    ANNOTATION_ID: 'annotation_id',
    TIME_SLOT_REF1: 't0_id',
    TIME_SLOT_REF2: 't1_id',
    SVG_REF: 'svg_ref',
    EXT_REF: 'ext_ref',
    ANNOTATION_REF: 'annotation_ref',
    PREVIOUS_ANNOTATION: 'previous_annotation',
}


def annotation_path(kind):
    """
    Path (relative to a `TIER` node) to the annotation nodes of the
    given kind
    """
    return '%s/%s_ANNOTATION' % (ANNOTATION, kind.value)


def time_slot_nodes(doc):
    "All `TIME_SLOT` nodes in the document, in document order"
    return doc.getroot().findall('.//' + TIME_SLOT)


def tier_nodes(doc):
    "The `TIER` nodes directly under the document root"
    return doc.getroot().findall(TIER)


def load_document(path):
    """
    Parse an ELAN file into an `ElementTree`

    Raise `DocumentNotFound` if there is no such file
    """
    if not os.path.exists(path):
        raise DocumentNotFound(path)
    return ET.parse(path)
