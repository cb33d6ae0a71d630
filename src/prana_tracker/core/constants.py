"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_PORT = 3000
ADMIN_ACTIVITY_FEED_LIMIT = 50

DEMO_STUDENT = {
    "scholar_id": "23144003",
    "name": "Akansha Rana",
    "password": "password123",
    "hostel": "Nivedita",
    "email": "akansha@dsvv.ac.in",
}

DEMO_ADMIN = {
    "email": "admin@prana.com",
    "password": "admin123",
    "name": "Admin User",
}

# (activity_name, activity_time, status)
DEMO_ACTIVITIES = (
    ("Morning Prayer", "5:00 AM - 5:30 AM", "completed"),
    ("Yoga", "5:30 AM - 6:00 AM", "completed"),
    ("Yagya", "6:00 AM - 7:00 AM", "completed"),
    ("Shramdaan", "4:00 PM - 5:00 PM", "pending"),
    ("Naad Yog", "6:00 PM - 6:15 PM", "pending"),
    ("Evening Prayer", "8:00 PM - 8:30 PM", "pending"),
)
