import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

GEO_CONFIG = {
    "office_lat": os.getenv("OFFICE_LAT", "12.9716"),
    "office_lng": os.getenv("OFFICE_LNG", "77.5946"),
    "radius_meters": os.getenv("GEOFENCE_RADIUS_METERS", "100"),
    # high: best GPS fix, slower; balanced: faster, coarser
    "accuracy_preference": os.getenv("ACCURACY_PREFERENCE", "high"),
    "timeout_seconds": os.getenv("ACQUISITION_TIMEOUT_SECONDS", "20"),
    "max_accuracy_meters": os.getenv("MAX_ACCURACY_METERS", ""),
}

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")
