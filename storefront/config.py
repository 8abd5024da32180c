import os
from urllib.parse import quote_plus


class Config:
    SECRET_KEY = os.getenv("SECRET_KEY", "secret")

    DB_USER = os.getenv("DB_USER")
    DB_PASSWORD = quote_plus(os.getenv("DB_PASSWORD", ""))
    DB_HOST = os.getenv("DB_HOST")
    DB_PORT = os.getenv("DB_PORT")
    DB_NAME = os.getenv("DB_NAME")

    SQLALCHEMY_DATABASE_URI = os.getenv("DB_URI") or (
        f"postgresql+psycopg2://{DB_USER}:{DB_PASSWORD}"
        f"@{DB_HOST}:{DB_PORT}/{DB_NAME}"
    )

    SQLALCHEMY_TRACK_MODIFICATIONS = False

    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

    # Share links and the messaging hand-off
    WEB_URL = os.getenv("WEB_URL", "http://localhost:3000")
    WHATSAPP_NUMBER = os.getenv("WHATSAPP_NUMBER", "")

    SLUG_SUFFIX_LENGTH = int(os.getenv("SLUG_SUFFIX_LENGTH", 6))


class TestingConfig(Config):
    TESTING = True
    SECRET_KEY = "test-secret-key"
    SQLALCHEMY_DATABASE_URI = "sqlite:///:memory:"
    WEB_URL = "https://shop.test"
    WHATSAPP_NUMBER = "2348000000000"
