from datetime import date

import pytest
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

import models

# ---------- TEST FIXTURES ----------

# Use in-memory SQLite for test isolation
TEST_DATABASE_URL = "sqlite:///:memory:"


@pytest.fixture(scope="session")
def engine():
    engine = create_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    @event.listens_for(engine, "connect")
    def _enable_foreign_keys(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    models.Base.metadata.create_all(bind=engine)
    yield engine
    models.Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def db_session(engine):
    """A new DB session for each test, rolled back afterwards."""
    connection = engine.connect()
    transaction = connection.begin()
    Session = sessionmaker(bind=connection)
    session = Session()
    yield session
    session.close()
    if transaction.is_active:
        transaction.rollback()
    connection.close()


# ---------- TEST DATA HELPERS ----------

def make_user(db, name="Devin Sanders", email="devin@example.com", password="password"):
    user = models.User(name=name, email=email, password=password)
    db.add(user)
    db.flush()
    return user


def make_property(db, owner, title="Cozy Cabin", city="Vancouver", cost_per_night=10000):
    prop = models.Property(
        owner_id=owner.id,
        title=title,
        description="description",
        thumbnail_photo_url="https://example.com/thumb.jpg",
        cover_photo_url="https://example.com/cover.jpg",
        cost_per_night=cost_per_night,
        street="536 Namsub Highway",
        city=city,
        province="BC",
        post_code="28142",
        country="Canada",
        parking_spaces=1,
        number_of_bathrooms=1,
        number_of_bedrooms=2,
    )
    db.add(prop)
    db.flush()
    return prop


def make_reservation(db, prop, guest, start=date(2026, 1, 1), end=date(2026, 1, 5)):
    reservation = models.Reservation(
        property_id=prop.id,
        guest_id=guest.id,
        start_date=start,
        end_date=end,
    )
    db.add(reservation)
    db.flush()
    return reservation


def make_reviews(db, prop, guest, *ratings):
    """One past reservation plus one review per rating."""
    reviews = []
    for rating in ratings:
        reservation = make_reservation(db, prop, guest)
        review = models.PropertyReview(
            guest_id=guest.id,
            property_id=prop.id,
            reservation_id=reservation.id,
            rating=rating,
            message="messages",
        )
        db.add(review)
        reviews.append(review)
    db.flush()
    return reviews


@pytest.fixture
def owner(db_session):
    return make_user(db_session, name="Owner", email="owner@example.com")


@pytest.fixture
def guest(db_session):
    return make_user(db_session, name="Guest", email="guest@example.com")
