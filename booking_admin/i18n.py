"""
UI string catalogs.

Keys are namespaced (``bookings.status.updating``). Lookups fall back to
English and then to the key itself, so a missing translation never fails a
request.
"""

from typing import Optional

from fastapi import Request

from .config import DEFAULT_LANGUAGE

TRANSLATIONS: dict[str, dict[str, str]] = {
    "en": {
        "navigation.dashboard": "Dashboard",
        "navigation.categories": "Categories",
        "navigation.services": "Services",
        "navigation.professionals": "Professionals",
        "navigation.bookings": "Bookings",
        "navigation.schedule": "Schedule",
        "navigation.calendar": "Calendar",
        "navigation.settings": "Settings",
        "bookings.status.pending": "Pending",
        "bookings.status.confirmed": "Confirmed",
        "bookings.status.completed": "Completed",
        "bookings.status.canceled": "Canceled",
        "bookings.status.updating": "Updating booking status...",
        "bookings.status.updateSuccess": "Booking status updated to {status}",
        "bookings.status.updateError": "Failed to update booking status",
        "bookings.deleteSuccess": "Booking deleted successfully",
        "bookings.deleteError": "Failed to delete booking",
        "errors.storeUnavailable": "The database could not be reached. Please try again.",
        "errors.notFound": "The requested record does not exist",
        "calendar.notConfigured": "Google Calendar credentials not configured",
        "calendar.noEmail": "This staff member has no email address",
        "calendar.email.subject": "Authorize Google Calendar access",
        "calendar.email.body": "Hello {name},\n\nPlease open the link below to connect your Google Calendar:\n\n{url}\n",
        "settings.saved": "Configuration saved successfully",
    },
    "es": {
        "navigation.dashboard": "Panel",
        "navigation.categories": "Categorías",
        "navigation.services": "Servicios",
        "navigation.professionals": "Profesionales",
        "navigation.bookings": "Reservas",
        "navigation.schedule": "Horario",
        "navigation.calendar": "Calendario",
        "navigation.settings": "Ajustes",
        "bookings.status.pending": "Pendiente",
        "bookings.status.confirmed": "Confirmada",
        "bookings.status.completed": "Completada",
        "bookings.status.canceled": "Cancelada",
        "bookings.status.updating": "Actualizando estado de la reserva...",
        "bookings.status.updateSuccess": "Estado de la reserva actualizado a {status}",
        "bookings.status.updateError": "No se pudo actualizar el estado de la reserva",
        "bookings.deleteSuccess": "Reserva eliminada correctamente",
        "bookings.deleteError": "No se pudo eliminar la reserva",
        "errors.storeUnavailable": "No se pudo acceder a la base de datos. Inténtalo de nuevo.",
        "errors.notFound": "El registro solicitado no existe",
        "calendar.notConfigured": "Las credenciales de Google Calendar no están configuradas",
        "calendar.noEmail": "Este profesional no tiene correo electrónico",
        "calendar.email.subject": "Autoriza el acceso a Google Calendar",
        "calendar.email.body": "Hola {name},\n\nAbre el siguiente enlace para conectar tu Google Calendar:\n\n{url}\n",
        "settings.saved": "Configuración guardada correctamente",
    },
}

SUPPORTED_LANGUAGES = tuple(TRANSLATIONS)


def translate(key: str, lang: Optional[str] = None, **params) -> str:
    catalog = TRANSLATIONS.get(lang or DEFAULT_LANGUAGE, {})
    text = catalog.get(key) or TRANSLATIONS["en"].get(key) or key
    if params:
        try:
            return text.format(**params)
        except (KeyError, IndexError):
            return text
    return text


def negotiate_language(lang: Optional[str], accept_language: Optional[str]) -> str:
    """Pick a supported language from an explicit choice or an Accept-Language header"""
    if lang and lang.lower()[:2] in TRANSLATIONS:
        return lang.lower()[:2]

    if accept_language:
        for part in accept_language.split(","):
            code = part.split(";")[0].strip().lower()[:2]
            if code in TRANSLATIONS:
                return code

    return DEFAULT_LANGUAGE if DEFAULT_LANGUAGE in TRANSLATIONS else "en"


def get_language(request: Request) -> str:
    return negotiate_language(
        request.query_params.get("lang"), request.headers.get("accept-language")
    )
