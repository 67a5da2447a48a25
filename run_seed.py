"""
Sample data seeding script
Usage: python run_seed.py
"""
import sys
import logging
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent))

from booking_admin.seed import seed_collections
from booking_admin.store import DocumentStore, StoreError

logging.basicConfig(level=logging.INFO, format='%(message)s')
logger = logging.getLogger(__name__)


def run_seed():
    """Seed every empty collection of the configured project"""
    store = DocumentStore.from_firebase()
    try:
        report = seed_collections(store)
    finally:
        store.close()

    for collection, count in report["created"].items():
        logger.info(f"  {collection}: {count} created")
    if not report["created"]:
        logger.info("Nothing to create, every sample collection already has data")


if __name__ == "__main__":
    try:
        run_seed()
    except StoreError as e:
        logger.error(f"❌ Seeding failed: {e}")
        sys.exit(1)
