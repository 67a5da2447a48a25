"""Settings router - widget configuration endpoints"""

from fastapi import APIRouter, Depends

from ...auth import get_current_admin
from ...i18n import get_language
from ...store import DocumentStore, get_store
from .schemas import WidgetConfig, WidgetConfigPatch, WidgetConfigSaved, WidgetEmbed
from .service import SettingsService

router = APIRouter(prefix="/settings", tags=["Settings"], dependencies=[Depends(get_current_admin)])


def get_settings_service(
    store: DocumentStore = Depends(get_store),
    lang: str = Depends(get_language),
) -> SettingsService:
    """Dependency injection for SettingsService"""
    return SettingsService(store, lang)


@router.get("/widget", response_model=WidgetConfig)
async def get_widget_config(service: SettingsService = Depends(get_settings_service)):
    return service.get_widget_config()


@router.put("/widget", response_model=WidgetConfigSaved)
async def save_widget_config(
    data: WidgetConfig,
    service: SettingsService = Depends(get_settings_service),
):
    """Replace the whole configuration document"""
    return service.save_widget_config(data)


@router.patch("/widget", response_model=WidgetConfigSaved)
async def patch_widget_config(
    data: WidgetConfigPatch,
    service: SettingsService = Depends(get_settings_service),
):
    """Apply dotted-path changes to the stored configuration and save it"""
    return service.patch_widget_config(data.changes)


@router.get("/widget/embed", response_model=WidgetEmbed)
async def get_widget_embed(service: SettingsService = Depends(get_settings_service)):
    """HTML snippet that mounts the booking widget on a website"""
    return service.get_embed_snippet()
