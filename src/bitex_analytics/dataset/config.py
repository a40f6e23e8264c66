"""Configuration constants for dataset loading and sample generation."""

from bitex_analytics.types import MenuItem

# Timezone offset-aware input timestamps are converted to before being made naive
LOCAL_TIMEZONE = "Asia/Kolkata"

# Reference catalog used by the sample generator
SAMPLE_MENU = (
    MenuItem("1", "Old Delhi Butter Chicken", "Main", 850, 220),
    MenuItem("2", "Awadhi Mutton Biryani", "Main", 1250, 380),
    MenuItem("3", "Paneer Tikka Multani", "Appetizer", 550, 150),
    MenuItem("4", "Tandoori Jhinga (Prawns)", "Main", 1550, 520),
    MenuItem("5", "Kesari Rasmalai", "Dessert", 420, 90),
    MenuItem("6", "Mango Lassi Supreme", "Beverage", 280, 60),
    MenuItem("7", "Galouti Kebab", "Appetizer", 650, 180),
    MenuItem("8", "Dal Makhani Bukhara", "Main", 620, 140),
    MenuItem("9", "Gulab Jamun with Rabri", "Dessert", 380, 80),
    MenuItem("10", "Masala Kokum Cooler", "Beverage", 240, 40),
    MenuItem("11", "Hyderabadi Veg Biryani", "Main", 750, 190),
    MenuItem("12", "Samosa Chaat Platter", "Appetizer", 350, 85),
    MenuItem("13", "Kashmiri Rogan Josh", "Main", 1100, 340),
    MenuItem("14", "Gajar Ka Halwa", "Dessert", 320, 70),
    MenuItem("15", "Assamese Masala Tea", "Beverage", 150, 30),
    MenuItem("16", "Malai Kofta Mughlai", "Main", 720, 160),
    MenuItem("17", "Amritsari Fish Fry", "Appetizer", 880, 260),
    MenuItem("18", "Shahi Tukda with Thandai", "Dessert", 450, 110),
    MenuItem("19", "Palak Paneer", "Main", 680, 150),
    MenuItem("20", "Pink Guava Chilli Sip", "Beverage", 260, 55),
)

CUSTOMER_NAMES = [
    "Arjun Mehta", "Priya Sharma", "Rahul Kapoor", "Sneha Reddy",
    "Vikram Singh", "Ananya Iyer", "Siddharth Gupta", "Ishani Verma",
    "Rohan Das", "Kavita Nair", "Amitabh Bose", "Zoya Khan",
    "Suresh Prabhu", "Meera Deshmukh", "Aditya Kulkarni", "Neha Grewal",
]

# Generator shape
SAMPLE_DAYS = 30
SAMPLE_CUSTOMERS = 250
FIRST_VISIT_LOOKBACK_DAYS = 60

# Friday, Saturday, Sunday carry weekend volume
WEEKEND_WEEKDAYS = {4, 5, 6}
WEEKEND_ORDERS = (75, 125)  # [low, high)
WEEKDAY_ORDERS = (40, 70)

LUNCH_HOURS = (12, 15)
DINNER_HOURS = (19, 23)

PREP_MINUTES = (20, 50)
ITEMS_PER_ORDER = (2, 7)
RATING_RANGE = (3.5, 5.0)

# Minutes between placement and service for manual entries
MANUAL_SERVICE_MINUTES = 15
