import os
from dotenv import load_dotenv

# Load .env at config import time (safe for dev/local)
load_dotenv()

class Config:
    SECRET_KEY = os.environ.get("SECRET_KEY")
    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")

    # IP geolocation provider; {ip} is substituted per lookup
    GEOLOCATION_API_URL = os.environ.get("GEOLOCATION_API_URL", "https://ipapi.co/{ip}/json/")
    GEOLOCATION_TIMEOUT = float(os.environ.get("GEOLOCATION_TIMEOUT", "5"))
    GEOLOCATION_CACHE_TTL = int(os.environ.get("GEOLOCATION_CACHE_TTL", str(24 * 60 * 60)))
    GEOLOCATION_USER_AGENT = os.environ.get("GEOLOCATION_USER_AGENT", "geoprice/1.0")

    # Checkout widget colour passed through in the gateway config; unset uses geoprice.gateway.DEFAULT_THEME_COLOR
    GATEWAY_THEME_COLOR = os.environ.get("GATEWAY_THEME_COLOR")

class DevConfig(Config):
    DEBUG = True
    LOG_LEVEL = os.environ.get("LOG_LEVEL", "DEBUG")

class ProdConfig(Config):
    DEBUG = False

class TestConfig(Config):
    TESTING = True
    LOG_LEVEL = "DEBUG"
    GEOLOCATION_API_URL = "https://geo.test/{ip}/json/"
    GATEWAY_THEME_COLOR = None
