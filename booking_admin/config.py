import os
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(dotenv_path=env_path)

# Firebase / Firestore Configuration
FIREBASE_PROJECT_ID = os.getenv("FIREBASE_PROJECT_ID")
# Path to a service account JSON file; Application Default Credentials are used when unset
GOOGLE_APPLICATION_CREDENTIALS = os.getenv("GOOGLE_APPLICATION_CREDENTIALS")

# Admin authentication (Firebase ID tokens) - only disable for local development
ADMIN_AUTH_ENABLED = os.getenv("ADMIN_AUTH_ENABLED", "true").lower() == "true"

# Frontend base URL (dashboard SPA)
FRONTEND_URL = os.getenv("FRONTEND_URL", "http://localhost:5173")

CORS_ALLOWED_ORIGINS = os.getenv(
    "CORS_ALLOWED_ORIGINS", f"{FRONTEND_URL},http://localhost:3000"
).split(",")

# Push subscription on the bookings collection for the dashboard
DASHBOARD_LIVE_FEED = os.getenv("DASHBOARD_LIVE_FEED", "true").lower() == "true"

# Create the sample dataset on startup when collections are empty
SEED_ON_STARTUP = os.getenv("SEED_ON_STARTUP", "false").lower() == "true"

# UI language used when the request does not ask for one
DEFAULT_LANGUAGE = os.getenv("DEFAULT_LANGUAGE", "en")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Collection names in the document store
CATEGORIES_COLLECTION = "serviceCategories"
SERVICES_COLLECTION = "services"
EMPLOYEES_COLLECTION = "employees"
BOOKINGS_COLLECTION = "bookings"
CLIENTS_COLLECTION = "clients"

# Singleton documents
WIDGET_CONFIG_COLLECTION = "config"
WIDGET_CONFIG_DOCUMENT = "widget"
CALENDAR_SETTINGS_COLLECTION = "settings"
CALENDAR_SETTINGS_DOCUMENT = "googleCalendar"

# Google Calendar OAuth
GOOGLE_AUTH_URL = "https://accounts.google.com/o/oauth2/v2/auth"
GOOGLE_CALENDAR_SCOPES = [
    "https://www.googleapis.com/auth/calendar",
    "https://www.googleapis.com/auth/calendar.events",
]

# Public booking widget embed snippet
WIDGET_SCRIPT_URL = os.getenv("WIDGET_SCRIPT_URL", "https://your-widget-url.com/widget.js")
WIDGET_BUSINESS_ID = os.getenv("WIDGET_BUSINESS_ID", FIREBASE_PROJECT_ID or "your-business-id")
