"""
Initialize database tables.
Run this on first deploy to create the documents table up front.

Set RESET_DB=1 environment variable to drop and recreate all tables.
"""
import os
import sys

from docscan import create_app, db


def init_db():
    """Create all database tables."""
    app = create_app(os.getenv('FLASK_ENV', 'production'))
    if not app.config.get('DATABASE_URL'):
        print("DATABASE_URL is not set - nothing to initialize.")
        return 1

    with app.app_context():
        from docscan import models  # noqa: F401

        if os.getenv('RESET_DB', '').strip() in ('1', 'true', 'yes'):
            print("RESET_DB is set - dropping all tables...")
            db.drop_all()
            print("Tables dropped.")

        print("Creating database tables...")
        db.create_all()
        print("Database tables created successfully!")
    return 0


if __name__ == '__main__':
    sys.exit(init_db())
