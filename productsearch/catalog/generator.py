"""Product catalog generator with deterministic seeding.

Generates synthetic products for development databases. Uses seeded
random so the same seed always yields the same catalog.
"""

import hashlib
import random
from dataclasses import dataclass
from typing import Iterator

from productsearch.catalog.models import Product


# ============================================================================
# Constants
# ============================================================================

# Synthetic brand names (fictional companies)
BRANDS = [
    "Acme",
    "Contoso",
    "Northwind",
    "Fabrikam",
    "Tailwind",
    "Globex",
    "Initech",
    "Umbrella",
]

ADJECTIVES = [
    "Premium", "Elite", "Pro", "Ultra", "Classic",
    "Essential", "Smart", "Flex", "Prime", "Nova",
]

COLORS = ["Black", "White", "Red", "Blue", "Green", "Navy", "Gray"]

# Categories with price ranges (in cents) and name templates
CATEGORIES = [
    {
        "name": "Laptops",
        "price_range": (59999, 199999),
        "templates": ["{brand} {adj} Laptop 15\"", "{brand} Notebook {adj}"],
    },
    {
        "name": "Headphones",
        "price_range": (2999, 39999),
        "templates": ["{brand} {adj} Headphones", "{brand} Wireless {adj} Earbuds"],
    },
    {
        "name": "Shirts",
        "price_range": (1999, 4999),
        "templates": ["{color} {brand} {adj} Shirt", "{color} {brand} Cotton T-Shirt"],
    },
    {
        "name": "Hats",
        "price_range": (999, 3999),
        "templates": ["{color} {brand} {adj} Hat", "{color} {brand} Baseball Cap"],
    },
    {
        "name": "Office Chairs",
        "price_range": (19999, 89999),
        "templates": ["{brand} {adj} Office Chair", "{brand} Ergonomic {adj} Chair"],
    },
    {
        "name": "Board Games",
        "price_range": (1999, 6999),
        "templates": ["{brand} {adj} Board Game", "{brand} Strategy {adj}"],
    },
]

DESCRIPTION_TEMPLATES = [
    "The {name} from {brand}. A {adj_lower} pick in {category}.",
    "{brand} {category}: {name}, built for everyday use.",
    "Meet the {name}, {brand}'s {adj_lower} addition to the {category} range.",
]


# ============================================================================
# Generator Configuration
# ============================================================================


@dataclass
class GeneratorConfig:
    """Configuration for product generation.

    Attributes:
        seed: Random seed for reproducibility.
        products_per_category: Number of products per category.
    """

    seed: int = 42
    products_per_category: int = 10

    @classmethod
    def small(cls) -> "GeneratorConfig":
        """Create config for small catalog (~30 products)."""
        return cls(seed=42, products_per_category=5)

    @classmethod
    def full(cls) -> "GeneratorConfig":
        """Create config for full catalog (~300 products)."""
        return cls(seed=42, products_per_category=50)


# ============================================================================
# Product Generator
# ============================================================================


class ProductGenerator:
    """Generates product catalogs with deterministic seeding.

    Example usage:
        generator = ProductGenerator(GeneratorConfig.small())
        for product in generator.generate():
            print(product.name)
    """

    def __init__(self, config: GeneratorConfig) -> None:
        """Initialize generator with configuration.

        Args:
            config: Generator configuration.
        """
        self.config = config

    def _deterministic_seed(self, *args: str | int) -> int:
        """Create deterministic seed from arguments.

        Args:
            args: Values to include in seed.

        Returns:
            Deterministic integer seed.
        """
        data = "|".join(str(a) for a in args)
        hash_bytes = hashlib.md5(data.encode()).digest()
        return int.from_bytes(hash_bytes[:4], "big")

    def _generate_product(self, category: dict, index: int) -> Product:
        """Generate a single product.

        Args:
            category: Category definition from CATEGORIES.
            index: Product index within category.

        Returns:
            Generated (unsaved) Product.
        """
        rng = random.Random(
            self._deterministic_seed(self.config.seed, category["name"], index)
        )

        brand = rng.choice(BRANDS)
        adj = rng.choice(ADJECTIVES)
        color = rng.choice(COLORS)
        name = rng.choice(category["templates"]).format(brand=brand, adj=adj, color=color)
        description = rng.choice(DESCRIPTION_TEMPLATES).format(
            name=name,
            brand=brand,
            adj_lower=adj.lower(),
            category=category["name"].lower(),
        )

        min_price, max_price = category["price_range"]
        # Round to .99 pricing
        price = (rng.randint(min_price, max_price) // 100) * 100 + 99

        image_seed = self._deterministic_seed(name, index)

        return Product(
            name=name,
            description=description,
            price=price,
            currency="USD",
            category=category["name"],
            image_url=f"https://picsum.photos/seed/{image_seed}/400/400",
            is_desired=False,
        )

    def generate(self) -> Iterator[Product]:
        """Generate products for every category.

        Yields:
            Unsaved Product instances.
        """
        for category in CATEGORIES:
            for index in range(self.config.products_per_category):
                yield self._generate_product(category, index)

    def generate_list(self) -> list[Product]:
        """Generate all products as a list.

        Returns:
            List of unsaved products.
        """
        return list(self.generate())
