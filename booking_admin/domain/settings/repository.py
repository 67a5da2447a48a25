"""Settings repository - widget configuration singleton"""

from typing import Optional

from ...config import WIDGET_CONFIG_COLLECTION, WIDGET_CONFIG_DOCUMENT
from ...store import DocumentStore


class SettingsRepository:
    @staticmethod
    def get_widget_config(store: DocumentStore) -> Optional[dict]:
        doc = store.get(WIDGET_CONFIG_COLLECTION, WIDGET_CONFIG_DOCUMENT)
        if doc is None:
            return None
        doc.pop("id", None)
        return doc

    @staticmethod
    def save_widget_config(store: DocumentStore, data: dict) -> None:
        """Whole-document write; the last save wins"""
        store.set(WIDGET_CONFIG_COLLECTION, WIDGET_CONFIG_DOCUMENT, data)
