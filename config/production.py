import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

GEO_CONFIG = {
    "office_lat": os.getenv("OFFICE_LAT", "12.9716"),
    "office_lng": os.getenv("OFFICE_LNG", "77.5946"),
    "radius_meters": os.getenv("GEOFENCE_RADIUS_METERS", "100"),
    "accuracy_preference": os.getenv("ACCURACY_PREFERENCE", "high"),
    "timeout_seconds": os.getenv("ACQUISITION_TIMEOUT_SECONDS", "20"),
    "max_accuracy_meters": os.getenv("MAX_ACCURACY_METERS", "50"),
}

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
