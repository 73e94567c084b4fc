"""
Diagnostic script to test the database connection
Run this to debug database connectivity issues: python check_db.py
"""
import asyncio
import logging
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent))

from portfolio_api import config
from portfolio_api.database import build_connect_args, database

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


async def main() -> int:
    """Run diagnostic tests"""
    print("=" * 60)
    print("Database Connection Diagnostic")
    print("=" * 60)
    print(f"\nMode: {config.MODE}")
    print(f"Database URL: {database.url.render_as_string(hide_password=True)}")
    print(f"Backend: {database.url.get_backend_name()}")

    connect_args = build_connect_args(config.DATABASE_URL)
    if connect_args:
        print(f"\nDriver settings:")
        print(f"  - SSL: {connect_args.get('ssl', 'disabled')}")
        print(f"  - Connect timeout: {connect_args.get('timeout')}s")
        print(f"  - Prepared statements: {'off' if 'statement_cache_size' in connect_args else 'on'}")

    print(f"\nTesting database connection...")
    print("-" * 60)
    try:
        success = await database.ping()
    finally:
        await database.dispose()

    print("-" * 60)
    if success:
        print("✓ Database connection successful")
        return 0
    print("✗ Database connection failed, see the log above")
    return 1


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
