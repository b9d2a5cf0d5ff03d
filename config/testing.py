SECRET_KEY = "test-secret"

DEBUG = False
TESTING = True

SEED_DEMO_ROSTER = True

LOG_LEVEL = "WARNING"
