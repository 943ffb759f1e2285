# restobill/modules/store/constants.py

"""Default records written to an empty store on first start."""

DEFAULT_SETTINGS = {
    "name": "Spice Garden",
    "address": "42 Masala Street, New Delhi, 110001",
    "phone": "+91 98765 43210",
    "currency": "₹",
    "gstRate": 5,
    "serviceChargeRate": 5,
}

DEFAULT_TABLE_COUNT = 12
DEFAULT_TABLE_CAPACITY = 4

DEFAULT_TABLES = [
    {
        "id": f"t{i}",
        "name": f"Table {i}",
        "capacity": DEFAULT_TABLE_CAPACITY,
        "status": "available",
        "currentOrderId": None,
    }
    for i in range(1, DEFAULT_TABLE_COUNT + 1)
]

# (id, name, price, cost price, category, description)
_MENU_ROWS = [
    ("1", "Paneer Tikka", 240, 90, "Starters", "Marinated cottage cheese grilled in tandoor"),
    ("2", "Chicken Tikka", 280, 110, "Starters", "Spicy marinated chicken chunks"),
    ("3", "Veg Manchurian", 180, 60, "Starters", "Vegetable balls in spicy chinese sauce"),
    ("4", "Samosa (2pcs)", 40, 12, "Starters", "Crispy pastry filled with spiced potatoes"),
    ("5", "Butter Chicken", 350, 140, "Main Course", "Classic chicken in rich tomato butter gravy"),
    ("6", "Dal Makhani", 220, 80, "Main Course", "Creamy black lentils slow cooked overnight"),
    ("7", "Paneer Butter Masala", 260, 95, "Main Course", "Cottage cheese in rich tomato gravy"),
    ("8", "Kadai Chicken", 320, 130, "Main Course", "Chicken cooked with bell peppers and spices"),
    ("9", "Garlic Naan", 55, 15, "Breads", "Leavened bread topped with garlic"),
    ("10", "Butter Roti", 35, 8, "Breads", "Whole wheat bread with butter"),
    ("11", "Chicken Biryani", 280, 120, "Rice", "Aromatic basmati rice cooked with spiced chicken"),
    ("12", "Jeera Rice", 140, 40, "Rice", "Basmati rice tempered with cumin seeds"),
    ("13", "Masala Dosa", 120, 45, "South Indian", "Crispy rice crepe filled with potato masala"),
    ("14", "Idli Sambar", 80, 25, "South Indian", "Steamed rice cakes with lentil soup"),
    ("15", "Masala Chai", 30, 8, "Beverages", "Spiced indian tea"),
    ("16", "Sweet Lassi", 80, 25, "Beverages", "Chilled yogurt drink"),
    ("17", "Gulab Jamun", 60, 20, "Dessert", "Deep fried milk dumplings in sugar syrup"),
]

DEFAULT_MENU = [
    {
        "id": item_id,
        "name": name,
        "price": price,
        "costPrice": cost_price,
        "category": category,
        "description": description,
    }
    for item_id, name, price, cost_price, category, description in _MENU_ROWS
]

DEFAULT_STAFF = [
    {"id": "s1", "name": "Rahul Sharma", "role": "Manager", "phone": "98765-00001", "status": "present"},
    {"id": "s2", "name": "Priya Singh", "role": "Waiter", "phone": "98765-00002", "status": "present"},
    {"id": "s3", "name": "Amit Kumar", "role": "Chef", "phone": "98765-00003", "status": "absent"},
]
