"""
Seattle-area sample catalog loaded into a fresh app DB.
Dates are day offsets from seeding time plus a local start/end hour.
"""

SAMPLE_CATEGORIES = [
    ("Hiking", "directions_walk"),
    ("Cycling", "pedal_bike"),
    ("Kayaking", "waves"),
    ("Camping", "park"),
    ("Climbing", "filter_drama"),
    ("Fishing", "directions_boat"),
]

# (start day offset, start hour, start minute), (end day offset, end hour, end minute)
SAMPLE_ACTIVITIES = [
    {
        "title": "Guided Nature Walk",
        "description": (
            "Join our expert guide for a family-friendly nature walk through the beautiful trails of "
            "Carkeek Park. Learn about local flora and fauna while enjoying scenic views of Puget Sound "
            "and the Olympic Mountains. This educational experience is perfect for beginners and "
            "families with children."
        ),
        "image_url": "https://images.unsplash.com/photo-1552521218-13b2354c0c86?auto=format&fit=crop&w=600&h=400&q=80",
        "location": "Carkeek Park, Seattle",
        "lat": 47.7129,
        "lng": -122.3779,
        "start": (7, 10, 0),
        "end": (7, 12, 0),
        "budget_level": 1,
        "price": "$5/person",
        "category": "Hiking",
        "tags": ["Family-friendly", "Beginner", "Wildlife", "Educational"],
        "host_name": "Sarah Johnson",
        "host_title": "Naturalist & Trail Guide",
        "host_image_url": "https://images.unsplash.com/photo-1573496359142-b8d87734a5a2?auto=format&fit=crop&w=100&q=80",
        "requirements": [
            "Comfortable walking shoes",
            "Water bottle",
            "Weather-appropriate clothing",
            "Camera (optional)",
            "Binoculars (optional)",
        ],
        "is_featured": True,
    },
    {
        "title": "Sunset Kayaking",
        "description": (
            "Experience Seattle from the water with our guided sunset kayaking tour. All equipment and "
            "basic instruction provided. Paddle through the calm waters of Elliott Bay while watching "
            "the sunset over the Olympic Mountains."
        ),
        "image_url": "https://images.unsplash.com/photo-1623166856835-83bff6d3a611?auto=format&fit=crop&w=600&h=400&q=80",
        "location": "Alki Beach, Seattle",
        "lat": 47.5812,
        "lng": -122.4061,
        "start": (6, 19, 0),
        "end": (6, 21, 0),
        "budget_level": 2,
        "price": "$45/person",
        "category": "Kayaking",
        "tags": ["Water Sports", "Equipment Provided", "Scenic", "Sunset"],
        "host_name": "Mike Davis",
        "host_title": "Kayak Instructor & Guide",
        "host_image_url": "https://images.unsplash.com/photo-1506794778202-cad84cf45f1d?auto=format&fit=crop&w=100&q=80",
        "requirements": ["Water bottle", "Clothes that can get wet", "Sunscreen", "Sunglasses with strap"],
        "is_featured": False,
    },
    {
        "title": "Rock Climbing Workshop",
        "description": (
            "Learn rock climbing fundamentals from professional instructors in this hands-on workshop. "
            "All skill levels welcome. Our experienced instructors will teach you proper techniques, "
            "safety procedures, and climbing etiquette."
        ),
        "image_url": "https://images.unsplash.com/photo-1527021239703-d2dc2299399e?auto=format&fit=crop&w=600&h=400&q=80",
        "location": "Vertical World, Seattle",
        "lat": 47.6615,
        "lng": -122.3794,
        "start": (8, 13, 0),
        "end": (8, 16, 0),
        "budget_level": 3,
        "price": "$75/person",
        "category": "Climbing",
        "tags": ["Indoor", "Professional Instructors", "All Levels", "Equipment Provided"],
        "host_name": "Alex Chen",
        "host_title": "Certified Climbing Instructor",
        "host_image_url": "https://images.unsplash.com/photo-1542327897-d73f4005b533?auto=format&fit=crop&w=100&q=80",
        "requirements": ["Athletic clothing", "Water bottle", "Snacks", "Towel"],
        "is_featured": False,
    },
    {
        "title": "Waterfall Hike",
        "description": (
            "Explore the beautiful waterfalls of Discovery Park on this beginner-friendly hike. Perfect "
            "for nature enthusiasts and photographers looking to capture the beauty of Washington's "
            "natural landscapes."
        ),
        "image_url": "https://images.unsplash.com/photo-1551632811-561732d1e306?auto=format&fit=crop&w=600&h=400&q=80",
        "location": "Discovery Park, Seattle",
        "lat": 47.6614,
        "lng": -122.4055,
        "start": (5, 8, 0),
        "end": (5, 11, 0),
        "budget_level": 1,
        "price": "Free",
        "category": "Hiking",
        "tags": ["Waterfall", "Photography", "Nature", "Beginner-friendly"],
        "host_name": "Emma Wilson",
        "host_title": "Park Ranger",
        "host_image_url": "https://images.unsplash.com/photo-1438761681033-6461ffad8d80?auto=format&fit=crop&w=100&q=80",
        "requirements": ["Hiking shoes", "Water bottle", "Camera", "Snacks"],
        "is_featured": True,
    },
    {
        "title": "Mountain Biking Adventure",
        "description": (
            "Hit the trails on this exciting mountain biking adventure at Tiger Mountain. Suitable for "
            "intermediate riders with some experience. Explore winding forest trails and enjoy stunning "
            "views of the Cascade Mountains."
        ),
        "image_url": "https://images.unsplash.com/photo-1544845894-20b3d88ff624?auto=format&fit=crop&w=600&h=400&q=80",
        "location": "Tiger Mountain, Issaquah",
        "lat": 47.4924,
        "lng": -121.9452,
        "start": (6, 9, 30),
        "end": (6, 13, 0),
        "budget_level": 2,
        "price": "$35/person",
        "category": "Cycling",
        "tags": ["Mountain Biking", "Intermediate", "Forest Trails", "Equipment Rental Available"],
        "host_name": "Jason Martinez",
        "host_title": "Mountain Bike Instructor",
        "host_image_url": "https://images.unsplash.com/photo-1568602471122-7832951cc4c5?auto=format&fit=crop&w=100&q=80",
        "requirements": ["Mountain bike (rentals available)", "Helmet", "Water bottle", "Athletic clothing"],
        "is_featured": True,
    },
    {
        "title": "Overnight Camping Trip",
        "description": (
            "Escape the city for an overnight camping experience at Mount Rainier National Park. Learn "
            "essential wilderness skills and enjoy stargazing far from city lights."
        ),
        "image_url": "https://images.unsplash.com/photo-1504280390367-361c6d9f38f4?auto=format&fit=crop&w=600&h=400&q=80",
        "location": "Mount Rainier National Park",
        "lat": 46.8800,
        "lng": -121.7269,
        "start": (14, 10, 0),
        "end": (15, 12, 0),
        "budget_level": 2,
        "price": "$50/person",
        "category": "Camping",
        "tags": ["Overnight", "Stargazing", "Wilderness Skills", "Campfire Cooking"],
        "host_name": "Robert Lee",
        "host_title": "Wilderness Guide",
        "host_image_url": "https://images.unsplash.com/photo-1507003211169-0a1dd7228f2d?auto=format&fit=crop&w=100&q=80",
        "requirements": ["Tent (rentals available)", "Sleeping bag", "Warm clothing", "Headlamp", "Food supplies"],
        "is_featured": False,
    },
]
