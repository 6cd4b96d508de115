"""Output formatting for extracted snapshots."""

from cricmirror.outputs.json_output import format_json, save_json, save_snapshot

__all__ = ['format_json', 'save_json', 'save_snapshot']
