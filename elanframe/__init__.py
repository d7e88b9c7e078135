# Author: Eric Kow
# License: BSD3

"""
The elanframe library turns ELAN_ annotation documents into flat
`pandas` tables, so that tiers can be joined and time codes looked up
without writing tree-walking code for every analysis.  It has a layered
structure, much like the documents it reads:

* projection (elanframe.projection): reading XML nodes with a varying
  set of attributes into records of a fixed shape

* time slots (elanframe.timeslots): from slot id to time

* tiers (elanframe.tiers): the tier list, with participant, annotator
  and locale inherited along the tier hierarchy

* annotations (elanframe.extract): alignable or reference annotations,
  with time slots resolved

* corpus (elanframe.corpus): the above over several files at once

The tool layer (elanframe.eaf) knows the names of things in the ELAN
file itself; the data model lives in elanframe.annotation ::

    corpus -> extract -> timeslots
                |            |
                +-> tiers    |
                |     |      |
                v     v      v
               projection, eaf, annotation

A typical session ::

    import elanframe

    doc = elanframe.load_document('session1.eaf')
    tiers = elanframe.list_tiers(doc)
    words = elanframe.list_annotations(doc, 'REF')

.. _ELAN: https://archive.mpi.nl/tla/elan
"""

from .annotation import AnnotationKind
from .corpus import aggregate_annotations, aggregate_tiers
from .eaf import load_document
from .extract import read_annotations
from .internalutil import (ElanException, DocumentNotFound, InvalidArgument,
                           NotSupported, MissingRequiredAttribute,
                           MalformedTimeValue, UnknownTimeSlot,
                           UnresolvedTimeSlot, CyclicTierHierarchy,
                           UnknownParentTier)
from .tiers import read_tiers
from .timeslots import read_time_slots

list_time_slots = read_time_slots
list_tiers = read_tiers
list_annotations = read_annotations
