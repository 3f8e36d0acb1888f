"""CLI command for looking up a word."""

from lugat.cli.commands._common import config_from_args
from lugat.exceptions import LugatException
from lugat.presenters import ConsolePresenter
from lugat.services import EntryRenderer, ImmediateRunner, SearchController, create_store


def lookup_command(args) -> int:
    """Execute the lookup subcommand.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 = word found, 1 = failure or no entry)
    """
    try:
        config = config_from_args(args)
        store = create_store(config)
    except LugatException as e:
        print(f"[ERROR] {e}")
        return 1

    renderer = EntryRenderer(
        abbreviation_dict=config.abbreviation_dict, link_scheme=config.link_scheme
    )
    controller = SearchController(
        store=store,
        runner=ImmediateRunner(),
        view=ConsolePresenter(renderer),
        renderer=renderer,
    )

    controller.submit_word(args.word)
    state = controller.state

    if not state.suggestions:
        print(f"No entries starting with '{args.word}'")
        return 1

    if state.selected is None:
        print(f"\nNo exact entry for '{args.word}'")
        return 1

    if not state.articles:
        print(f"\nNo articles for '{state.selected.word}'")
        return 1

    return 0
