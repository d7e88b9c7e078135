# Author: Eric Kow
# License: BSD3

"""
Corpus management: tables spanning several ELAN files.

Each file is read on its own (`document_annotations`, `document_tiers`)
and the results are stacked, with every row tagged by the file it came
from.  As files share nothing, the per-file readers can be farmed out
to several processes (see the `n_jobs` parameters).

A failure on any one file is a failure for the whole batch.
"""

from glob import glob
import os
import sys

from joblib import Parallel, delayed
import pandas as pd

from elanframe.annotation import AnnotationKind, TIME_COLS
from elanframe.eaf import load_document
from elanframe.extract import drop_na_columns, read_annotations
from elanframe.internalutil import scoped_string_options
from elanframe.tiers import read_tiers


FILENAME_COL = 'filename'
"column giving the file a row comes from"

KIND_COL = 'kind'
"column giving the kind of annotation (`ALIGNABLE` or `REF`)"


def _missing_as_none(df):
    """
    Same table with every missing value outside the time columns set
    to None (concatenation fills gaps with NaN)
    """
    with scoped_string_options():
        for col in df.columns:
            if col in TIME_COLS:
                continue
            vals = df[col].astype(object)
            df[col] = vals.where(vals.notna(), None)
    return df


def document_annotations(path):
    """
    Alignable and reference annotations from a single file, one after
    the other, tagged with the file name and kind.  All columns are
    kept, even empty ones
    """
    doc = load_document(path)
    frames = []
    for kind in AnnotationKind:
        dfa = read_annotations(doc, kind, drop_na_cols=False)
        dfa[FILENAME_COL] = path
        dfa[KIND_COL] = kind.value
        frames.append(dfa)
    res = pd.concat(frames, ignore_index=True, sort=False)
    return _missing_as_none(res)


def document_tiers(path, inherit_missing_attrs=True):
    """
    Tiers from a single file (see `elanframe.tiers.read_tiers`), tagged
    with the file name
    """
    doc = load_document(path)
    dft = read_tiers(doc, inherit_missing_attrs)
    dft[FILENAME_COL] = path
    return dft


def _run_all(func, paths, n_jobs, *args):
    """
    Apply `func` to each path, in parallel if asked; results come back
    in the order of `paths`
    """
    return Parallel(n_jobs=n_jobs)(delayed(func)(p, *args) for p in paths)


def aggregate_annotations(paths, drop_na_cols=True, n_jobs=1):
    """Read in the annotations from multiple ELAN files.

    Parameters
    ----------
    paths : list of str
        Paths to the ELAN files.

    drop_na_cols : boolean, defaults to True
        If True, drop columns where all values (across all files) are
        missing.

    n_jobs : int, defaults to 1
        Number of files to read concurrently (see `joblib.Parallel`).

    Returns
    -------
    df : DataFrame
        Annotations of all files, in the order of `paths`, with the
        columns `filename` and `kind` added.
    """
    frames = _run_all(document_annotations, list(paths), n_jobs)
    if not frames:
        return pd.DataFrame(columns=[FILENAME_COL, KIND_COL])
    res = pd.concat(frames, ignore_index=True, sort=False)
    res = _missing_as_none(res)
    if drop_na_cols:
        res = drop_na_columns(res)
    return res


def aggregate_tiers(paths, inherit_missing_attrs=True, n_jobs=1):
    """Read in the tiers from multiple ELAN files.

    Parameters
    ----------
    paths : list of str
        Paths to the ELAN files.

    inherit_missing_attrs : boolean, defaults to True
        Inherit missing attributes from parent tiers.

    n_jobs : int, defaults to 1
        Number of files to read concurrently (see `joblib.Parallel`).

    Returns
    -------
    df : DataFrame
        Tiers of all files, in the order of `paths`, with the column
        `filename` added.
    """
    frames = _run_all(document_tiers, list(paths), n_jobs,
                      inherit_missing_attrs)
    if not frames:
        return pd.DataFrame(columns=[FILENAME_COL])
    res = pd.concat(frames, ignore_index=True, sort=False)
    return _missing_as_none(res)


class Reader(object):
    """
    `Reader` provides little more than dictionaries from document
    names to data.

    :param rootdir: the top directory of the corpus
    :type rootdir: str

    Documents are named after their `.eaf` file, relative to the root
    and without the extension.  As with any dictionary, you can take a
    slice before reading anything in ::

        reader = Reader(corpus_dir)
        files = reader.files()
        subfiles = {k: v for k, v in files.items() if k.startswith('pilot')}
        corpus = reader.slurp(subfiles)
    """
    def __init__(self, rootdir):
        self.rootdir = rootdir

    def files(self, doc_glob=None):
        """
        Return a dictionary from document name to filepath, sorted by
        name.

        Parameters
        ----------
        doc_glob : str, optional
            Glob expression for the document names; if `None`, all
            `.eaf` files anywhere under the root.
        """
        if doc_glob is None:
            doc_glob = os.path.join('**', '*')
        full_glob = os.path.join(self.rootdir, doc_glob + '.eaf')
        corpus = {}
        for path in sorted(glob(full_glob, recursive=True)):
            name = os.path.splitext(os.path.relpath(path, self.rootdir))[0]
            corpus[name] = path
        return corpus

    def slurp(self, cfiles=None, doc_glob=None, verbose=False):
        """
        Read the entire corpus if `cfiles` is `None` or else the
        subset specified by `cfiles`.

        Return a dictionary from document name to parsed document

        Parameters
        ----------
        cfiles : dict, optional
            Dict of files like what `Reader.files()` would return.

        doc_glob : str, optional
            Glob pattern for document names; ignored if `cfiles` is not
            None.

        verbose : boolean, defaults to False
            If True, print what we're reading to stderr.
        """
        if cfiles is None:
            cfiles = self.files(doc_glob=doc_glob)
        corpus = {}
        counter = 0
        for k, path in cfiles.items():
            if verbose:
                sys.stderr.write("\rSlurping corpus dir [%d/%d]" %
                                 (counter, len(cfiles)))
            corpus[k] = load_document(path)
            counter = counter + 1
        if verbose:
            sys.stderr.write("\rSlurping corpus dir [%d/%d done]\n" %
                             (counter, len(cfiles)))
        return corpus
