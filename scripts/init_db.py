"""
Database initialization script.

Creates the readiness tables and seeds the engine settings row from the
environment defaults.

Usage:
    python scripts/init_db.py
"""

import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from sqlmodel import Session

from app.core.logging import configure_logging
from app.db.init_db import init_db
from app.db.session import engine
from app.services.settings_service import SettingsService

if __name__ == "__main__":
    configure_logging()
    print("=" * 50)
    print("Ready Database Initialization")
    print("=" * 50)
    print()

    try:
        init_db()
        with Session(engine) as session:
            config = SettingsService(session).get_config()
        print(f"Baseline period: {config.baseline_period_days} days, "
              f"minimum {config.minimum_days_for_baseline} days, "
              f"retention {config.retention_days} days")
        print()
        print("=" * 50)
        print("SUCCESS: Database initialized!")
        print("=" * 50)
        sys.exit(0)

    except Exception as e:
        print()
        print("=" * 50)
        print("ERROR: Database initialization failed!")
        print(f"Details: {e}")
        print("=" * 50)
        sys.exit(1)
