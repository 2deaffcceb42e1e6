"""
Frontline CLI - Command-line interface for the engine.

Usage:
    frontline cards [--faction SLUG]          List a faction's cards and commanders
    frontline new --p1 NAME --p2 NAME [--seed N]  Create a match, print its snapshot
    frontline serve [--host H] [--port P]     Run the HTTP API
"""

import argparse
import sys


def main(argv=None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Frontline - Tactical card game rules engine",
        prog="frontline",
    )
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # Cards command
    cards_parser = subparsers.add_parser("cards", help="List a faction catalog")
    cards_parser.add_argument("--faction", default="ashen_legion", help="Faction slug")

    # New match command
    new_parser = subparsers.add_parser("new", help="Create a match and print its state")
    new_parser.add_argument("--p1", default="Player 1", help="First player's name")
    new_parser.add_argument("--p2", default="Player 2", help="Second player's name")
    new_parser.add_argument("--seed", type=int, default=None, help="Random seed")
    new_parser.add_argument("--faction", default="ashen_legion", help="Faction slug")

    # Serve command
    serve_parser = subparsers.add_parser("serve", help="Run the HTTP API")
    serve_parser.add_argument("--host", default="127.0.0.1", help="Bind address")
    serve_parser.add_argument("--port", type=int, default=8000, help="Port")

    args = parser.parse_args(argv)

    if args.command == "cards":
        cmd_cards(args)
    elif args.command == "new":
        cmd_new(args)
    elif args.command == "serve":
        cmd_serve(args)
    else:
        parser.print_help()
        sys.exit(1)


def cmd_cards(args):
    """List a faction's cards and commanders."""
    from .factions import get_faction

    try:
        faction = get_faction(args.faction)
    except ValueError as e:
        print(f"Error: {e}")
        sys.exit(1)

    print(f"{faction.name} ({len(faction.cards)} cards)")
    for card in faction.cards:
        print(
            f"  {card.id}  {card.name:<30} {card.base_health:>2}/{card.base_morale:<2} "
            f"delay {card.delay}  {card.damage_type.value:<6}  {card.rarity}"
        )
        for ability in card.abilities:
            print(f"      - {ability.name}: {ability.description}")

    print("\nCommanders:")
    for commander in faction.commanders:
        ability = commander.ability
        print(f"  {commander.id}  {commander.name}")
        print(f"      - {ability.name} (cooldown {ability.cooldown}): {ability.description}")


def cmd_new(args):
    """Create a match and print its JSON snapshot."""
    from .api.schemas import GameStateSnapshot
    from .factions import setup_match

    try:
        state = setup_match([args.p1, args.p2], faction=args.faction, random_seed=args.seed)
    except ValueError as e:
        print(f"Error: {e}")
        sys.exit(1)

    print(GameStateSnapshot.from_state(state).model_dump_json(indent=2))


def cmd_serve(args):
    """Run the HTTP API with uvicorn."""
    import uvicorn

    uvicorn.run("frontline.api.app:app", host=args.host, port=args.port)


if __name__ == "__main__":
    main()
