import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DEBUG = False

SEED_DEMO_ROSTER = bool(int(os.getenv("SEED_DEMO_ROSTER", "0")))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
