SECRET_KEY = "test-secret"

GEO_CONFIG = {
    "office_lat": 12.9716,
    "office_lng": 77.5946,
    "radius_meters": 100,
    "accuracy_preference": "high",
    "timeout_seconds": None,
    "max_accuracy_meters": None,
}

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"
