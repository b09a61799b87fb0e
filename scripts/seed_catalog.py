#!/usr/bin/env python3
"""
Seed the catalog with reference categories and demo listings.

Features:
- Deterministic: fixed seed → same dataset every run
- Idempotent: safe to run multiple times (clears before seeding)
- Categories: electronics, furniture, vehicles

Usage:
    python scripts/seed_catalog.py
"""

from __future__ import annotations

import random
import sys
from pathlib import Path

# Add src to path so we can import our modules
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from sqlalchemy import delete
from sqlalchemy.orm import Session

from classifieds_lite.domain.listing import ListingStatus
from classifieds_lite.infra.db.models import CategoryRow, ImageRow, ListingRow, UserRow
from classifieds_lite.infra.db.session import get_session


# ==============================================================================
# Configuration
# ==============================================================================

RANDOM_SEED = 42  # Fixed seed for deterministic results
NUM_LISTINGS = 30

DEMO_USER_ID = "user_demo_seller"

CATEGORIES = [
    ("electronics", "Electronics"),
    ("furniture", "Furniture"),
    ("vehicles", "Vehicles"),
]

CITIES = ["Lahore", "Karachi", "Islamabad", "Rawalpindi", "Faisalabad"]

# Titles and price bands (smallest currency unit) per category slug
CATALOG = {
    "electronics": {
        "titles": ["iPhone 14 Pro", "Samsung Galaxy S23", "MacBook Air M2", "Sony WH-1000XM5", "iPad Mini"],
        "price_min": 20_000,
        "price_max": 400_000,
    },
    "furniture": {
        "titles": ["Oak Dining Table", "Leather Sofa", "Office Chair", "Queen Bed Frame", "Bookshelf"],
        "price_min": 5_000,
        "price_max": 150_000,
    },
    "vehicles": {
        "titles": ["Honda Civic 2019", "Toyota Corolla 2020", "Suzuki Alto 2022", "Honda CD 70", "Yamaha YBR"],
        "price_min": 100_000,
        "price_max": 6_000_000,
    },
}


# ==============================================================================
# Generation
# ==============================================================================


def generate_listing(category: CategoryRow) -> ListingRow:
    band = CATALOG[category.slug]
    title = random.choice(band["titles"])
    price = random.randrange(band["price_min"], band["price_max"], 500)

    return ListingRow(
        title=title,
        description=f"{title} in good condition. Pickup only, serious buyers please.",
        price=price,
        city=random.choice(CITIES),
        # Roughly one in five listings is no longer available
        status=random.choices(
            [ListingStatus.ACTIVE, ListingStatus.INACTIVE], weights=[4, 1], k=1
        )[0],
        owner_id=DEMO_USER_ID,
        category_id=category.id,
    )


def generate_images(listing: ListingRow) -> list[ImageRow]:
    count = random.randint(0, 3)
    return [
        ImageRow(
            listing_id=listing.id,
            url=f"https://images.classifieds-lite.example/{listing.id}/{position}.jpg",
            is_primary=position == 0,
        )
        for position in range(count)
    ]


def clear_catalog(session: Session) -> None:
    for row_type in (ImageRow, ListingRow, CategoryRow, UserRow):
        session.execute(delete(row_type))


def seed_catalog(num_listings: int = NUM_LISTINGS, seed: int = RANDOM_SEED) -> None:
    """
    Seed the database with categories, a demo user and demo listings.

    Args:
        num_listings: Number of listings to generate
        seed: Random seed for deterministic results
    """
    random.seed(seed)

    print(f"🌱 Seeding catalog with {num_listings} listings (seed={seed})...")

    with get_session() as session:
        # Step 1: Clear existing data (idempotent)
        print("🗑️  Clearing existing catalog...")
        clear_catalog(session)

        # Step 2: Reference data
        categories = [CategoryRow(slug=slug, name=name) for slug, name in CATEGORIES]
        session.add_all(categories)
        session.add(UserRow(id=DEMO_USER_ID, name="Demo Seller", email="seller@example.com"))
        session.flush()
        print(f"📂 Created {len(categories)} categories")

        # Step 3: Listings, then their images once ids are assigned
        listings = [generate_listing(random.choice(categories)) for _ in range(num_listings)]
        session.add_all(listings)
        session.flush()

        images = [image for listing in listings for image in generate_images(listing)]
        session.add_all(images)
        session.flush()

        print(f"✅ Successfully seeded {len(listings)} listings and {len(images)} images!")

        print("\n📊 Sample listings:")
        for i, listing in enumerate(listings[:5], 1):
            print(f"   {i}. {listing.title} - {listing.price:,} ({listing.city}, {listing.status.value})")

        if len(listings) > 5:
            print(f"   ... and {len(listings) - 5} more")


# ==============================================================================
# Main
# ==============================================================================


if __name__ == "__main__":
    try:
        seed_catalog()
    except Exception as e:
        print(f"❌ Error seeding database: {e}", file=sys.stderr)
        sys.exit(1)
