#!/usr/bin/env python3
"""
Quick script to create the WeChat Radar database tables.
Run with: python create_tables.py [--seed]
"""

import argparse
import sys
from sqlmodel import Session

from wechat_radar.config import Settings
from wechat_radar.database import build_engine, create_db_and_tables, seed_default_keywords, count_rows


def main():
    parser = argparse.ArgumentParser(description="Create WeChat Radar database tables")
    parser.add_argument(
        "--seed",
        action="store_true",
        help="Insert the default keywords when the keyword table is empty",
    )
    args = parser.parse_args()

    engine = build_engine(Settings.from_env())

    print(f"Connecting to database: {engine.url.render_as_string(hide_password=True)}")

    try:
        print("Creating tables...")
        create_db_and_tables(engine)
        print("✅ Tables created: articles, keyword_configs, subscriptions")

        with Session(engine) as session:
            if args.seed:
                added = seed_default_keywords(session)
                print(f"🌱 Seeded {added} default keywords")

            for table, count in count_rows(session).items():
                print(f"  - {table}: {count} rows")

    except Exception as e:
        print(f"❌ Error creating tables: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
