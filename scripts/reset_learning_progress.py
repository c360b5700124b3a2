"""
Reset learning progress for a user.

DANGEROUS: This sets every word and verb back to "never practiced"!

Usage:
    python -m scripts.reset_learning_progress [--user-id ID] [--drop-all]
"""

import argparse

from vocab_core.config import get_default_user_id
from vocab_core.store import reset_db, reset_learning_progress


def main():
    parser = argparse.ArgumentParser(description="Reset learning scores and practice history")
    parser.add_argument("--user-id", default=None, help="User to reset (default: DEFAULT_USER_ID)")
    parser.add_argument(
        "--drop-all",
        action="store_true",
        help="Drop and recreate all tables instead (deletes every record)"
    )
    args = parser.parse_args()
    user_id = args.user_id or get_default_user_id()

    print("=" * 60)
    print("WARNING: Reset Learning Progress")
    print("=" * 60)
    print()
    if args.drop_all:
        print("This will DELETE all words, verbs, categories and languages.")
    else:
        print(f"This will reset for user '{user_id}':")
        print("  - Learning scores (back to 0)")
        print("  - Last practiced timestamps")
        print("  - Practice counts")
    print()

    response = input("Are you sure you want to reset? (type 'yes' to confirm): ")

    if response.lower() != "yes":
        print("\nCancelled. No changes made.")
        return

    if args.drop_all:
        reset_db()
        print("✓ Database reset complete!")
    else:
        count = reset_learning_progress(user_id)
        print(f"✓ Reset {count} words and verbs.")


if __name__ == "__main__":
    main()
