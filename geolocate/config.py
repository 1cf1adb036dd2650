import os
from dotenv import load_dotenv

load_dotenv()


class Settings:
    DEFAULT_TIMEOUT: float = 10.0

    def __init__(self):
        self.GOOGLE_MAPS_API_KEY: str = os.getenv("GOOGLE_MAPS_API_KEY", "")
        self.GOOGLE_MAPS_REGION: str = os.getenv("GOOGLE_MAPS_REGION", "")
        self.GEOCODING_TIMEOUT: float = float(os.getenv("GEOCODING_TIMEOUT", str(self.DEFAULT_TIMEOUT)))

settings = Settings()
