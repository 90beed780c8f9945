import os
import yaml

ROOT_PATH = os.path.dirname(__file__)
CONFIG_FILE_PATH = os.path.join(ROOT_PATH, "env.yaml")

if os.path.exists(CONFIG_FILE_PATH):
    with open(CONFIG_FILE_PATH, "r") as r_file:
        data = yaml.safe_load(r_file) or dict()
else:
    data = dict()


class ApplicationConfig:
    DB_URI = data.get("DB_URI", "sqlite+aiosqlite:///./chapterhub.db")
    API_PREFIX = data.get("API_PREFIX", "/api")
    API_PORT = data.get("API_PORT", 8000)
    API_HOST = data.get("API_HOST", "0.0.0.0")
    CORS_ORIGINS = data.get("CORS_ORIGINS", [])
    CORS_ALLOW_CREDENTIALS = data.get("CORS_ALLOW_CREDENTIALS", True)
    LOG_LEVEL = data.get("LOG_LEVEL", "INFO")
    JWT_SECRET = data.get("JWT_SECRET", "dev-secret-key-change-in-production")
    JWT_EXPIRE_MINUTES = int(data.get("JWT_EXPIRE_MINUTES", 60))
    APP_URL = data.get("APP_URL", "http://localhost:3000")
    MAIL_API_URL = data.get("MAIL_API_URL", "https://api.brevo.com/v3/smtp/email")
    MAIL_API_KEY = data.get("MAIL_API_KEY", "")
    MAIL_SENDER_EMAIL = data.get("MAIL_SENDER_EMAIL", "")
    MAIL_SENDER_NAME = data.get("MAIL_SENDER_NAME", "Chapterhub")
    MAIL_TIMEOUT_SECONDS = float(data.get("MAIL_TIMEOUT_SECONDS", 10.0))
    PAYMENT_KEY_SECRET = data.get("PAYMENT_KEY_SECRET", "")
