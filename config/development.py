import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DEBUG = True

# Start with the five demo students (ids 1-5, counter at 6)
SEED_DEMO_ROSTER = bool(int(os.getenv("SEED_DEMO_ROSTER", "1")))

LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")
