import os
from dotenv import load_dotenv

# Load environment variables
load_dotenv()


def _split_origins(value):
    return [origin.strip() for origin in value.split(',') if origin.strip()]


class Config:
    """Runtime settings read from the environment (.env supported)"""

    PORT = int(os.getenv('PORT', 3001))
    APP_ENV = os.getenv('APP_ENV', 'development')
    API_VERSION = os.getenv('API_VERSION', 'v1')

    DATABASE = os.getenv('DB_PATH', os.path.join('.', 'database', 'healthhub.db'))

    JWT_SECRET = os.getenv('JWT_SECRET', 'healthhub-dev-jwt-secret-change-in-production')
    JWT_EXPIRES_HOURS = int(os.getenv('JWT_EXPIRES_HOURS', 24))
    BCRYPT_ROUNDS = int(os.getenv('BCRYPT_ROUNDS', 12))

    CORS_ORIGINS = _split_origins(os.getenv(
        'CORS_ORIGINS',
        'http://localhost:3000,http://127.0.0.1:3000,http://localhost:8080'
    ))

    RATE_LIMIT_WINDOW_MS = int(os.getenv('RATE_LIMIT_WINDOW_MS', 900000))
    RATE_LIMIT_MAX_REQUESTS = int(os.getenv('RATE_LIMIT_MAX_REQUESTS', 100))
    RATELIMIT_ENABLED = os.getenv('RATELIMIT_ENABLED', 'true').lower() == 'true'

    KAFKA_ENABLED = os.getenv('KAFKA_ENABLED', 'false').lower() == 'true'
    KAFKA_BOOTSTRAP_SERVERS = os.getenv('KAFKA_BOOTSTRAP_SERVERS', 'localhost:9092')
    KAFKA_TOPIC = os.getenv('KAFKA_TOPIC', 'healthhub-events')

    @classmethod
    def default_rate_limit(cls):
        """Flask-Limiter string for the configured window, e.g. '100 per 900 second'"""
        seconds = max(1, cls.RATE_LIMIT_WINDOW_MS // 1000)
        return f"{cls.RATE_LIMIT_MAX_REQUESTS} per {seconds} second"

    @classmethod
    def as_flask_config(cls):
        return {
            'DATABASE': cls.DATABASE,
            'JWT_SECRET': cls.JWT_SECRET,
            'JWT_EXPIRES_HOURS': cls.JWT_EXPIRES_HOURS,
            'BCRYPT_ROUNDS': cls.BCRYPT_ROUNDS,
            'RATELIMIT_ENABLED': cls.RATELIMIT_ENABLED,
            'API_VERSION': cls.API_VERSION,
            'APP_ENV': cls.APP_ENV,
        }


config = Config()
