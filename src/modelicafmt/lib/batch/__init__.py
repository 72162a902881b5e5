"""Batch discovery, dispatch, and output routing."""

from modelicafmt.lib.batch.classify import HIDDEN_PREFIX, SOURCE_SUFFIX, is_eligible
from modelicafmt.lib.batch.controller import run
from modelicafmt.lib.batch.dispatcher import dispatch, read_source
from modelicafmt.lib.batch.sink import OverwriteSink, StreamSink, open_sink
from modelicafmt.lib.batch.traversal import walk

__all__ = [
    "HIDDEN_PREFIX",
    "SOURCE_SUFFIX",
    "OverwriteSink",
    "StreamSink",
    "dispatch",
    "is_eligible",
    "open_sink",
    "read_source",
    "run",
    "walk",
]
