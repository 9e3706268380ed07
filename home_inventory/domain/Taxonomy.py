"""Fixed two-level taxonomy: inventory categories and their subcategories.

Icons and colors are opaque keys/hex strings resolved by whatever renders them.
"""
from enum import Enum
from typing import Dict, List


class InventoryCategory(Enum):
    FRIDGE = ("Fridge", "kitchen", "#007AFF")
    GROCERY = ("Grocery", "local_grocery_store", "#34C759")
    HYGIENE = ("Hygiene", "cleaning_services", "#00C7BE")
    PERSONAL_CARE = ("Personal Care", "face_retouching_natural", "#FF2D92")

    def __init__(self, display_name: str, icon: str, color: str):
        self.display_name = display_name
        self.icon = icon
        self.color = color

    @property
    def subcategories(self) -> List["InventorySubcategory"]:
        return [sub for sub in InventorySubcategory if sub.category is self]

    @staticmethod
    def from_string(value: str) -> "InventoryCategory":
        return InventoryCategory[value.strip().upper()]


class InventorySubcategory(Enum):
    # Fridge subcategories
    DOOR_BOTTLES = ("Door Bottles", "water_bottle", "#007AFF", InventoryCategory.FRIDGE)
    TRAY = ("Tray Section", "breakfast_dining", "#FF9500", InventoryCategory.FRIDGE)
    MAIN = ("Main Section", "kitchen", "#34C759", InventoryCategory.FRIDGE)
    VEGETABLE = ("Vegetable Section", "eco", "#30D158", InventoryCategory.FRIDGE)
    FREEZER = ("Freezer", "ac_unit", "#00C7BE", InventoryCategory.FRIDGE)
    MINI_COOLER = ("Mini Cooler", "icecream", "#5856D6", InventoryCategory.FRIDGE)

    # Grocery subcategories
    RICE = ("Rice Items", "rice_bowl", "#8E6C42", InventoryCategory.GROCERY)
    PULSES = ("Pulses", "grain", "#FFD60A", InventoryCategory.GROCERY)
    CEREALS = ("Cereals", "bakery_dining", "#FF9500", InventoryCategory.GROCERY)
    CONDIMENTS = ("Condiments", "local_dining", "#FF3B30", InventoryCategory.GROCERY)
    OILS = ("Oils", "opacity", "#FFD60A", InventoryCategory.GROCERY)

    # Hygiene subcategories
    WASHING = ("Washing", "local_laundry_service", "#007AFF", InventoryCategory.HYGIENE)
    DISHWASHING = ("Dishwashing", "restaurant", "#34C759", InventoryCategory.HYGIENE)
    TOILET_CLEANING = ("Toilet Cleaning", "wc", "#00C7BE", InventoryCategory.HYGIENE)
    KIDS = ("Kids", "child_care", "#FF2D92", InventoryCategory.HYGIENE)
    GENERAL_CLEANING = ("General Cleaning", "auto_awesome", "#5856D6", InventoryCategory.HYGIENE)

    # Personal Care subcategories
    FACE = ("Face", "face", "#FF2D92", InventoryCategory.PERSONAL_CARE)
    BODY = ("Body", "accessibility_new", "#30D158", InventoryCategory.PERSONAL_CARE)
    HEAD = ("Head", "psychology", "#5856D6", InventoryCategory.PERSONAL_CARE)

    def __init__(self, display_name: str, icon: str, color: str, category: InventoryCategory):
        self.display_name = display_name
        self.icon = icon
        self.color = color
        self.category = category

    @property
    def sample_items(self) -> List[str]:
        return list(SAMPLE_ITEMS.get(self.name, []))

    @staticmethod
    def from_string(value: str) -> "InventorySubcategory":
        return InventorySubcategory[value.strip().upper()]


# Seed names used when the inventory is reset to defaults
SAMPLE_ITEMS: Dict[str, List[str]] = {
    "DOOR_BOTTLES": ["Water Bottles", "Juice", "Milk", "Soft Drinks"],
    "TRAY": ["Eggs", "Butter", "Cheese", "Yogurt"],
    "MAIN": ["Leftovers", "Cooked Food", "Fruits", "Vegetables"],
    "VEGETABLE": ["Onions", "Tomatoes", "Potatoes", "Leafy Greens"],
    "FREEZER": ["Ice Cream", "Frozen Vegetables", "Meat", "Ice Cubes"],
    "MINI_COOLER": ["Cold Drinks", "Snacks", "Chocolates"],
    "RICE": ["Basmati Rice", "Brown Rice", "Jasmine Rice", "Wild Rice"],
    "PULSES": ["Lentils", "Chickpeas", "Black Beans", "Kidney Beans"],
    "CEREALS": ["Oats", "Cornflakes", "Wheat Flakes", "Muesli"],
    "CONDIMENTS": ["Salt", "Sugar", "Spices", "Sauces"],
    "OILS": ["Cooking Oil", "Olive Oil", "Coconut Oil", "Ghee"],
    "WASHING": ["Detergent", "Fabric Softener", "Stain Remover"],
    "DISHWASHING": ["Dish Soap", "Dishwasher Tablets", "Sponges"],
    "TOILET_CLEANING": ["Toilet Cleaner", "Toilet Paper", "Air Freshener"],
    "KIDS": ["Diapers", "Baby Wipes", "Baby Shampoo"],
    "GENERAL_CLEANING": ["All-Purpose Cleaner", "Floor Cleaner", "Glass Cleaner"],
    "FACE": ["CC Cream", "Powder", "Face Wash", "Moisturizer"],
    "BODY": ["Lotion", "Deodorant", "Bathing Soap", "Body Wash"],
    "HEAD": ["Shampoo", "Conditioner", "Hair Oil", "Hair Gel"],
}
