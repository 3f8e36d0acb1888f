"""CLI command for rendering raw article text."""

from lugat.cli.commands._common import config_from_args
from lugat.exceptions import LugatException
from lugat.models import Translation
from lugat.services import EntryRenderer
from lugat.utils import markup_to_plain


def render_command(args) -> int:
    """Execute the render subcommand.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 = success, 1 = failure)
    """
    try:
        config = config_from_args(args)
    except LugatException as e:
        print(f"[ERROR] {e}")
        return 1

    renderer = EntryRenderer(
        abbreviation_dict=config.abbreviation_dict, link_scheme=config.link_scheme
    )
    meta = Translation(
        word=args.headword, dict_id=args.dict_id, shortening_pos=args.shortening_pos
    )
    rendered = renderer.render(args.text, args.headword, meta)

    print(markup_to_plain(rendered) if args.plain else rendered)
    return 0
