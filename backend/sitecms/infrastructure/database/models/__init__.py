from .kv_entry import KVEntryModel

__all__ = ["KVEntryModel"]
