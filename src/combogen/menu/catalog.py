"""Static catalog of menu items the daily menu is drawn from."""

from __future__ import annotations

from combogen.menu.models import Category, MenuItem, Taste

MAIN = Category.MAIN
SIDE = Category.SIDE
DRINK = Category.DRINK

MENU_ITEMS: list[MenuItem] = [
    # Main courses
    MenuItem("Paneer Butter Masala", MAIN, 450, Taste.SPICY, 90),
    MenuItem("Chicken Biryani", MAIN, 600, Taste.SPICY, 95),
    MenuItem("Vegetable Pulao", MAIN, 400, Taste.SAVORY, 70),
    MenuItem("Rajma Chawal", MAIN, 500, Taste.SAVORY, 80),
    MenuItem("Chole Bhature", MAIN, 650, Taste.SPICY, 85),
    MenuItem("Masala Dosa", MAIN, 480, Taste.SAVORY, 88),
    MenuItem("Grilled Sandwich", MAIN, 370, Taste.SAVORY, 60),
    # Side dishes
    MenuItem("Garlic Naan", SIDE, 200, Taste.SAVORY, 90),
    MenuItem("Mixed Veg Salad", SIDE, 150, Taste.SWEET, 75),
    MenuItem("French Fries", SIDE, 350, Taste.SAVORY, 80),
    MenuItem("Curd Rice", SIDE, 250, Taste.SAVORY, 70),
    MenuItem("Papad", SIDE, 100, Taste.SAVORY, 65),
    MenuItem("Paneer Tikka", SIDE, 300, Taste.SPICY, 85),
    # Drinks
    MenuItem("Masala Chaas", DRINK, 100, Taste.SPICY, 80),
    MenuItem("Sweet Lassi", DRINK, 220, Taste.SWEET, 90),
    MenuItem("Lemon Soda", DRINK, 90, Taste.SAVORY, 70),
    MenuItem("Cold Coffee", DRINK, 180, Taste.SWEET, 75),
    MenuItem("Coconut Water", DRINK, 60, Taste.SWEET, 60),
    MenuItem("Iced Tea", DRINK, 120, Taste.SWEET, 78),
]


def get_items_by_category(
    category: Category, catalog: list[MenuItem] | None = None
) -> list[MenuItem]:
    """Return catalog items of one category, in catalog order."""
    items = MENU_ITEMS if catalog is None else catalog
    return [item for item in items if item.category == category]
