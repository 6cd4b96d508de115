"""Pydantic models for snapshots and fetch results."""

from cricmirror.models.results import FetchResult
from cricmirror.models.snapshot import (
    CssInventory,
    ElementDescriptor,
    ExternalScript,
    ExternalStylesheet,
    FastSnapshot,
    FullSnapshot,
    ImageRef,
    InlineScript,
    InlineStyle,
    JsInventory,
    LinkRef,
    Snapshot,
    StyleTag,
    TextNode,
)

__all__ = [
    'FetchResult',
    'CssInventory',
    'ElementDescriptor',
    'ExternalScript',
    'ExternalStylesheet',
    'FastSnapshot',
    'FullSnapshot',
    'ImageRef',
    'InlineScript',
    'InlineStyle',
    'JsInventory',
    'LinkRef',
    'Snapshot',
    'StyleTag',
    'TextNode',
]
