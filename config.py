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
    DB_URI = data.get("DB_URI", "sqlite+aiosqlite:///./inventory.db")
    API_PREFIX = data.get("API_PREFIX", "/api")
    API_PORT = data.get("API_PORT", 5000)
    API_HOST = data.get("API_HOST", "0.0.0.0")
    CORS_ORIGINS = data.get("CORS_ORIGINS", ["http://localhost:3000"])
    CORS_ALLOW_CREDENTIALS = data.get("CORS_ALLOW_CREDENTIALS", True)
    LOG_LEVEL = data.get("LOG_LEVEL", "INFO")
    ENABLE_LOGGING_MIDDLEWARE = bool(data.get("ENABLE_LOGGING_MIDDLEWARE", 1))

    # Session tokens
    JWT_SECRET = data.get("JWT_SECRET", "dev-secret-key-change-in-production")
    SESSION_TOKEN_TTL_HOURS = data.get("SESSION_TOKEN_TTL_HOURS", 24)
    BCRYPT_ROUNDS = data.get("BCRYPT_ROUNDS", 10)
    COOKIE_SECURE = bool(data.get("COOKIE_SECURE", True))
    COOKIE_SAMESITE = data.get("COOKIE_SAMESITE", "none")

    # Password reset
    RESET_TOKEN_TTL_MINUTES = data.get("RESET_TOKEN_TTL_MINUTES", 30)
    FRONTEND_URL = data.get("FRONTEND_URL", "http://localhost:3000")

    # Mail relay
    SMTP_HOST = data.get("SMTP_HOST", "")
    SMTP_PORT = data.get("SMTP_PORT", 587)
    SMTP_USER = data.get("SMTP_USER", "")
    SMTP_PASSWORD = data.get("SMTP_PASSWORD", "")
    SMTP_USE_TLS = bool(data.get("SMTP_USE_TLS", True))
    EMAIL_FROM = data.get("EMAIL_FROM", "noreply@example.com")
    SUPPORT_EMAIL = data.get("SUPPORT_EMAIL", data.get("EMAIL_FROM", "noreply@example.com"))

    # Product images
    UPLOAD_DIR = data.get("UPLOAD_DIR", os.path.join(ROOT_PATH, "uploads"))
