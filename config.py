# ======================================
# Configuration
# ======================================

import os

from dotenv import load_dotenv
from sqlalchemy.engine import URL

# Pick up a local .env when present; real environment variables win
load_dotenv()


def database_uri():
    """Build the store URL from DATABASE_URL or the DB_* variables."""
    if os.environ.get('DATABASE_URL'):
        return os.environ['DATABASE_URL']
    url = URL.create(
        'mysql+pymysql',
        username=os.environ.get('DB_USER', 'root'),
        password=os.environ.get('DB_PASSWORD', 'root'),
        host=os.environ.get('DB_HOST', 'localhost'),
        port=int(os.environ.get('DB_PORT', 3306)),
        database=os.environ.get('DB_NAME', 'clinic_db'),
    )
    return url.render_as_string(hide_password=False)


class Config:
    SQLALCHEMY_DATABASE_URI = database_uri()
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    PORT = int(os.environ.get('PORT', 5000))
    STATIC_ROOT = os.environ.get('STATIC_ROOT') or os.getcwd()
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO').upper()
