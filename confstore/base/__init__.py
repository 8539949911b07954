from confstore.base.confstore_base import ConfStoreBase, ConfStoreMeta

__all__ = ["ConfStoreBase", "ConfStoreMeta"]
