import os
from dataclasses import dataclass


@dataclass
class Config:
    """Configuration class for the URL shortener client"""
    SHORTENER_API_URL: str = "https://www.googleapis.com/urlshortener/v1/url"
    SHORTENER_API_KEY: str = ""
    APPLICATION_NAME: str = "PhysicalWeb"
    LOG_LEVEL: str = "INFO"

    def __init__(self):
        # Keep the defaults, but allow environment override if needed
        self.SHORTENER_API_URL = os.getenv("SHORTENER_API_URL", self.SHORTENER_API_URL)
        self.SHORTENER_API_KEY = os.getenv("SHORTENER_API_KEY", self.SHORTENER_API_KEY)
        self.APPLICATION_NAME = os.getenv("APPLICATION_NAME", self.APPLICATION_NAME)
        self.LOG_LEVEL = os.getenv("LOG_LEVEL", self.LOG_LEVEL)

        if not self.SHORTENER_API_URL:
            raise ValueError("SHORTENER_API_URL is required")


# Only goo.gl links are recognised as short
SHORT_URL_PREFIXES = (
    "http://goo.gl/",
    "https://goo.gl/",
)
