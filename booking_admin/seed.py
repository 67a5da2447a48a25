"""
Sample dataset for an empty project.

Each collection is probed with a single-document read. Categories are only
created when ``serviceCategories`` is empty, services only when categories
were just created and ``services`` is empty, employees only when services
were just created and ``employees`` is empty. ``bookings`` and ``clients``
are created by the widget on first write and are only reported here.

Running it twice in a row is harmless; running two seeds at the same time
can create the sample data twice.
"""

import logging

from .config import (
    BOOKINGS_COLLECTION,
    CATEGORIES_COLLECTION,
    CLIENTS_COLLECTION,
    EMPLOYEES_COLLECTION,
    SERVICES_COLLECTION,
)
from .domain.scheduling.normalize import schedule_from_working_hours
from .store import DocumentStore, utcnow

logger = logging.getLogger(__name__)

SEED_COLLECTIONS = (
    CATEGORIES_COLLECTION,
    SERVICES_COLLECTION,
    EMPLOYEES_COLLECTION,
    BOOKINGS_COLLECTION,
    CLIENTS_COLLECTION,
)

SAMPLE_CATEGORIES = [
    {"name": "Hair Care", "description": "All hair related services", "active": True, "order": 0},
    {"name": "Skin Care", "description": "Facial and skin treatments", "active": True, "order": 1},
]

# one service per sample category, same position
SAMPLE_SERVICES = [
    {
        "name": "Haircut",
        "description": "Basic haircut service",
        "duration": 30,
        "price": 30,
        "active": True,
        "order": 0,
    },
    {
        "name": "Basic Facial",
        "description": "Cleansing and moisturizing facial",
        "duration": 45,
        "price": 50,
        "active": True,
        "order": 0,
    },
]


def _hours(start, end, saturday=None):
    weekdays = {day: {"start": start, "end": end} for day in ("monday", "tuesday", "wednesday", "thursday", "friday")}
    return {**weekdays, "saturday": saturday, "sunday": None}


# one employee per sample service, same position
SAMPLE_EMPLOYEES = [
    {
        "name": "John Smith",
        "email": "john@example.com",
        "phone": "+1234567890",
        "role": "Hairstylist",
        "active": True,
        "workingHours": _hours("09:00", "17:00", saturday={"start": "10:00", "end": "15:00"}),
    },
    {
        "name": "Sarah Johnson",
        "email": "sarah@example.com",
        "phone": "+1234567891",
        "role": "Esthetician",
        "active": True,
        "workingHours": _hours("10:00", "18:00"),
    },
]


def _add_all(store: DocumentStore, collection: str, documents: list[dict]) -> list[str]:
    now = utcnow()
    ids = [store.add(collection, {**doc, "createdAt": now, "updatedAt": now}) for doc in documents]
    logger.info(f"✅ Created {len(ids)} documents in {collection}")
    return ids


def seed_collections(store: DocumentStore) -> dict:
    """
    Create the sample categories, services and employees where missing.

    Returns a report with the collections that already had documents and
    the number of documents created per collection.
    """
    existing = [name for name in SEED_COLLECTIONS if store.has_documents(name)]
    missing = [name for name in SEED_COLLECTIONS if name not in existing]
    logger.info(f"Existing collections: {existing}")
    logger.info(f"Missing collections: {missing}")

    created = {}
    if CATEGORIES_COLLECTION not in existing:
        category_ids = _add_all(store, CATEGORIES_COLLECTION, SAMPLE_CATEGORIES)
        created[CATEGORIES_COLLECTION] = len(category_ids)

        if SERVICES_COLLECTION not in existing:
            services = [
                {**service, "categoryId": category_id}
                for service, category_id in zip(SAMPLE_SERVICES, category_ids)
            ]
            service_ids = _add_all(store, SERVICES_COLLECTION, services)
            created[SERVICES_COLLECTION] = len(service_ids)

            if EMPLOYEES_COLLECTION not in existing:
                employees = []
                for sample, service_id in zip(SAMPLE_EMPLOYEES, service_ids):
                    employee = {k: v for k, v in sample.items() if k != "workingHours"}
                    employee["services"] = [service_id]
                    employee["schedule"] = schedule_from_working_hours(sample["workingHours"]).model_dump()
                    employees.append(employee)
                created[EMPLOYEES_COLLECTION] = len(_add_all(store, EMPLOYEES_COLLECTION, employees))

    for name in (BOOKINGS_COLLECTION, CLIENTS_COLLECTION):
        if name not in existing:
            logger.info(f"Collection {name} is empty; it is created on first write")

    logger.info("✅ Seed finished")
    return {"existing": existing, "created": created}
