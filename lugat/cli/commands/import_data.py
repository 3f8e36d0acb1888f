"""CLI command for importing dictionary data."""

from pathlib import Path

from lugat.cli.commands._common import config_from_args
from lugat.exceptions import LugatException
from lugat.services.stores import SQLiteStore


def import_command(args) -> int:
    """Execute the import subcommand.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 = success, 1 = failure)
    """
    try:
        config = config_from_args(args)
        store = SQLiteStore(config.db_path)
        translations, articles = store.import_json(Path(args.file))
    except LugatException as e:
        print(f"[ERROR] {e}")
        return 1

    print(f"[OK] Imported {translations} translations and {articles} articles into {config.db_path}")
    return 0
