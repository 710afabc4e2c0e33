"""
Seed script for the Property Listings API
Creates the properties table and a set of sample listings
"""
import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from app.core.database import SessionLocal, engine, Base
from app.models.property import Property

SAMPLE_PROPERTIES = [
    {"address": "16 Sweetwater Lane, Austin", "price": 4850000, "bedrooms": 3, "bathrooms": 2, "type": "House"},
    {"address": "720 Harbor View Drive #4B", "price": 9375751, "bedrooms": 3, "bathrooms": 6, "type": None},
    {"address": "90678 South Vellum Extension #6A2", "price": 12104869, "bedrooms": 5, "bathrooms": 4, "type": None},
    {"address": "3 Sweet Briar Court", "price": 715000, "bedrooms": 2, "bathrooms": 1, "type": "Apartment"},
    {"address": "4100 Lakeshore Boulevard", "price": 10000000, "bedrooms": 6, "bathrooms": 5, "type": "House"},
    {"address": "55 Market Street, Unit 12", "price": 1250000, "bedrooms": 1, "bathrooms": 1, "type": "Condo"},
]


def seed_data():
    print("Creating database tables...")
    Base.metadata.create_all(bind=engine)

    db = SessionLocal()

    try:
        # Check if data already exists
        if db.query(Property).first():
            print("Data already seeded. Skipping...")
            return

        print("Creating properties...")
        for values in SAMPLE_PROPERTIES:
            db.add(Property(**values))
        db.commit()

        print(f"Seeded {len(SAMPLE_PROPERTIES)} properties.")
    except Exception as e:
        print(f"Error seeding data: {e}")
        db.rollback()
        raise
    finally:
        db.close()


if __name__ == "__main__":
    seed_data()
