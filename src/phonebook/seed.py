"""
Sample contacts loaded when the API starts.
"""

from .config import settings
from .logging import get_logger
from .store import ContactRecord, ContactStore

logger = get_logger(__name__)

SEED_CONTACTS: tuple[ContactRecord, ...] = (
    ContactRecord(
        id="3d594650-3436-11e9-bc57-8b80ba54c431",
        name="Arto Hellas",
        phone="040-123543",
        street="Tapiolankatu 5 A",
        city="Espoo",
    ),
    ContactRecord(
        id="3d599470-3436-11e9-bc57-8b80ba54c431",
        name="Matti Luukkainen",
        phone="040-432342",
        street="Malminkaari 10 A",
        city="Helsinki",
    ),
    ContactRecord(
        id="3d599471-3436-11e9-bc57-8b80ba54c431",
        name="Venla Ruuska",
        street="Nallemäentie 22 C",
        city="Helsinki",
    ),
)


def create_seeded_store(seed: bool | None = None) -> ContactStore:
    """
    Create a fresh contact store.

    Args:
        seed: Load SEED_CONTACTS. Defaults to settings.seed_contacts.
    """
    if seed is None:
        seed = settings.seed_contacts

    if not seed:
        logger.info("Starting with an empty contact directory")
        return ContactStore()

    store = ContactStore.from_seed(SEED_CONTACTS)
    logger.info("Contact directory seeded", count=store.count())
    return store
