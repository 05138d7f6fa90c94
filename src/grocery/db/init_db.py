"""Database initialization script."""
from sqlalchemy import create_engine, select
from sqlalchemy.orm import Session

from grocery.models import Base, Client, GroceryList, Product
from grocery.config.settings import get_settings
from grocery.utils.logger import get_logger

logger = get_logger(__name__)

DEMO_LISTS = [
    ("Boodschappen familieweekend", "#FF6A00"),
    ("Kerstboodschappen", "#626262"),
]

DEMO_PRODUCTS = [
    ("Melk", 300),
    ("Kaas", 100),
    ("Brood", 400),
    ("Cornflakes", 0),
    ("Eieren", 12),
    ("Appels", 25),
]


def seed(session: Session, client_id: int) -> None:
    """Create the demo client, lists and catalog if they are missing."""
    client = session.get(Client, client_id)
    if client is None:
        client = Client(id=client_id, name="Demo", email="demo@example.com")
        session.add(client)
        session.flush()
        for name, color in DEMO_LISTS:
            session.add(GroceryList(name=name, color=color, owner_id=client.id))
        logger.info("Created demo client and lists", client_id=client_id)

    existing = set(session.execute(select(Product.name)).scalars().all())
    for name, stock in DEMO_PRODUCTS:
        if name not in existing:
            session.add(Product(name=name, stock=stock))

    session.commit()


def init_db() -> None:
    """Initialize the database with tables and demo data."""
    settings = get_settings()
    engine = create_engine(settings.DB_URL)

    Base.metadata.create_all(engine)

    with Session(engine) as session:
        seed(session, settings.DEFAULT_CLIENT_ID)


if __name__ == "__main__":
    init_db()
