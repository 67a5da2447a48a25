"""Settings service - load, save and patch the widget configuration"""

import copy
import logging
from typing import Any

from fastapi import HTTPException
from pydantic import ValidationError

from ...config import WIDGET_BUSINESS_ID, WIDGET_SCRIPT_URL
from ...i18n import translate
from ...store import DocumentStore
from .repository import SettingsRepository
from .schemas import WidgetConfig, WidgetConfigSaved, WidgetEmbed

logger = logging.getLogger(__name__)


class UnknownConfigField(ValueError):
    """A change addressed a top-level field the widget config does not have"""


def merge_over(base: dict, override: dict) -> dict:
    """Recursive merge; dicts are merged key by key, anything else replaces"""
    result = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(result.get(key), dict):
            result[key] = merge_over(result[key], value)
        else:
            result[key] = copy.deepcopy(value)
    return result


def apply_changes(config: dict, changes: dict[str, Any]) -> dict:
    """
    Apply ``{"a.b.c": value}`` changes to a copy of ``config``.

    Any depth is accepted; intermediate objects are created when missing or
    not objects. Only the first path segment is checked against the
    widget config fields.
    """
    result = copy.deepcopy(config)
    for path, value in changes.items():
        parts = path.split(".")
        if not all(parts):
            raise UnknownConfigField(f"Invalid field path: {path!r}")
        if parts[0] not in WidgetConfig.model_fields:
            raise UnknownConfigField(f"Unknown configuration field: {parts[0]}")

        node = result
        for part in parts[:-1]:
            if not isinstance(node.get(part), dict):
                node[part] = {}
            node = node[part]
        node[parts[-1]] = copy.deepcopy(value)
    return result


def _error_detail(error: ValidationError) -> list[dict]:
    return [{"loc": list(e["loc"]), "msg": e["msg"]} for e in error.errors()]


class SettingsService:
    def __init__(self, store: DocumentStore, lang: str = "en"):
        self.store = store
        self.lang = lang
        self.repo = SettingsRepository()

    def get_widget_config(self) -> WidgetConfig:
        """Stored values over defaults; stored fields that no longer validate are ignored"""
        stored = self.repo.get_widget_config(self.store)
        if not stored:
            return WidgetConfig()

        known = {k: v for k, v in stored.items() if k in WidgetConfig.model_fields}
        merged = merge_over(WidgetConfig().model_dump(), known)
        try:
            return WidgetConfig(**merged)
        except ValidationError as e:
            invalid = {err["loc"][0] for err in e.errors() if err["loc"]}
            logger.warning(f"⚠️ Stored widget config has invalid fields, using defaults for: {sorted(invalid)}")
            return WidgetConfig(**{k: v for k, v in merged.items() if k not in invalid})

    def save_widget_config(self, config: WidgetConfig) -> WidgetConfigSaved:
        self.repo.save_widget_config(self.store, config.model_dump())
        logger.info(f"✅ Widget configuration saved ({config.businessName or 'unnamed business'})")
        return WidgetConfigSaved(message=translate("settings.saved", self.lang), config=config)

    def patch_widget_config(self, changes: dict[str, Any]) -> WidgetConfigSaved:
        current = self.get_widget_config().model_dump()
        try:
            updated = WidgetConfig(**apply_changes(current, changes))
        except UnknownConfigField as e:
            raise HTTPException(status_code=400, detail=str(e)) from e
        except ValidationError as e:
            raise HTTPException(status_code=422, detail=_error_detail(e)) from e
        return self.save_widget_config(updated)

    def get_embed_snippet(self) -> WidgetEmbed:
        return WidgetEmbed(
            snippet=(
                f'<script src="{WIDGET_SCRIPT_URL}"></script>\n'
                f'<div id="booking-widget" data-business-id="{WIDGET_BUSINESS_ID}"></div>'
            )
        )
