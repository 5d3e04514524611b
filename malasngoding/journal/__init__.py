"""
Ngeluh Dulu: a personal complaint journal with mood analytics.

    from malasngoding.journal import ComplaintStore, JsonFileStorage, analytics

    store = ComplaintStore(JsonFileStorage("~/.ngeluh-dulu/storage.json"))
    store.add("Deploy gagal lagi", Feeling.KESEL)
    analytics.feeling_counts(store.complaints)
"""

from malasngoding.journal import analytics
from malasngoding.journal.storage import JsonFileStorage
from malasngoding.journal.store import STORAGE_KEY, ComplaintStore

__all__ = ["analytics", "ComplaintStore", "JsonFileStorage", "STORAGE_KEY"]
