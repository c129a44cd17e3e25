from .base import *

DEBUG = True
ALLOWED_HOSTS = ["*"]

LOG_LEVEL = "DEBUG"
LOGGING["root"]["level"] = LOG_LEVEL

BOOKSTORE["ALLOWED_TOKENS"] = BOOKSTORE["ALLOWED_TOKENS"] or ["token1", "token2"]

REST_FRAMEWORK["DEFAULT_THROTTLE_RATES"] = {"api": "1000/15m"}
