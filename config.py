import os
from dotenv import load_dotenv

load_dotenv()


class Config:
    # Directory holding users.json, progress.json and community.json
    DATA_DIR = os.getenv("DATA_DIR", "data")
    HOST = os.getenv("HOST", "0.0.0.0")
    PORT = int(os.getenv("PORT", 3000))
    FRONTEND_URL = os.getenv("FRONTEND_URL", "*")
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
