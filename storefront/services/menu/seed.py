"""Default menu seed data."""
import yaml
from pathlib import Path
from typing import List, Optional

from storefront.services.menu.base import MenuItem

DEFAULT_SEED_FILE = Path(__file__).parent / "data" / "menu.yaml"


def load_seed_items(seed_file: Optional[str] = None) -> List[MenuItem]:
    """Load seed menu items from YAML, falling back to the built-in default."""
    path = Path(seed_file) if seed_file else DEFAULT_SEED_FILE
    if not path.exists():
        # Default menu if file doesn't exist
        return [
            MenuItem(
                id="margherita-pizza",
                name="Margherita Pizza",
                description="Classic pizza with fresh mozzarella, basil, and tomato sauce.",
                price=10.99,
                image="/images/margherita.jpg",
            ),
            MenuItem(
                id="cheeseburger",
                name="Cheeseburger",
                description="Juicy beef patty, cheddar cheese, lettuce, and tomato.",
                price=8.49,
                image="/images/cheeseburger.jpg",
            ),
            MenuItem(
                id="veggie-bowl",
                name="Veggie Bowl",
                description="Roasted vegetables with quinoa and tahini drizzle.",
                price=9.25,
                image="/images/veggie-bowl.jpg",
            ),
        ]

    with open(path, "r") as f:
        data = yaml.safe_load(f) or {}
    return [MenuItem(**item) for item in data.get("items", [])]
