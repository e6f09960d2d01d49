# Area: Shared
"""
overcookied_client.cli — Command-line interface
===============================================

Joins the matchmaking queue and plays (or watches) one session.

Usage:
    python -m overcookied_client --demo                       # Bot plays the match
    python -m overcookied_client --config config.json         # Join and watch
    overcookied-client --api-url http://localhost:8080 --token $JWT --demo

Every option can also come from the config file or from OVERCOOKIED_*
environment variables (see ``_client_config``).
"""

import argparse
import asyncio
import logging
import sys
from typing import Any, Dict, List, Optional

from ._client_config import load_config, validate_config
from ._session import ConnectionState, Credential
from ._shared import (
    AuthClient,
    Origin,
    enable_protocol_mode,
    get_protocol_logger,
    is_token_fresh,
    setup_logging,
)
from .client import GameClient
from .demo_player import DemoPlayer
from .errors import ConfigurationError

logger = logging.getLogger("overcookied_client")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Overcookied client - join a match from the terminal",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  overcookied-client --api-url http://localhost:8080 --token $JWT --demo
  overcookied-client --config config.json
  OVERCOOKIED_TOKEN=... overcookied-client --origin https://overcookied.example.com
        """,
    )
    parser.add_argument("--config", type=str, help="Path to JSON config file")
    parser.add_argument(
        "--demo",
        action="store_true",
        help="Let the demo player click and claim golden cookies",
    )
    parser.add_argument("--token", type=str, help="Bearer token (JWT)")
    parser.add_argument("--api-url", type=str, help="Backend URL override")
    parser.add_argument("--origin", type=str, help="Page origin used when there is no override")
    parser.add_argument(
        "--verify-session",
        action="store_true",
        help="Resolve the user through /auth/verify before connecting",
    )
    parser.add_argument("--clicks-per-second", type=int, help="Demo player click rate")
    parser.add_argument("--verbose", action="store_true", help="Show standard logs and debug output")
    return parser.parse_args(argv)


def apply_overrides(config: Dict[str, Any], args: argparse.Namespace) -> Dict[str, Any]:
    """Command-line flags win over file and environment."""
    if args.token:
        config["token"] = args.token
    if args.api_url:
        config["api_url"] = args.api_url
    if args.origin:
        config["origin"] = args.origin
    if args.verify_session:
        config["verify_session"] = True
    if args.clicks_per_second is not None:
        config["clicks_per_second"] = args.clicks_per_second
    return config


def resolve_credential(config: Dict[str, Any]) -> Optional[Credential]:
    """Build the credential, asking the auth API for the user if configured."""
    token = config["token"]
    if not is_token_fresh(token):
        logger.warning("Token is expired or not a JWT; the server may refuse the connection")

    if not config.get("verify_session"):
        return Credential(user_id=config.get("user_id", ""), token=token)

    api_base = config.get("api_url") or config.get("origin") or ""
    session = AuthClient(api_url=api_base).verify_session(token)
    if session is None:
        return None
    logger.info(f"Signed in as {session['name'] or session['email'] or session['id']}")
    return Credential.from_session(session)


async def play_session(client: GameClient, credential: Credential,
                       player: Optional[DemoPlayer] = None) -> int:
    """
    Connect, run until the session is finished or the socket drops, close.

    Returns:
        Process exit code.
    """
    if await client.connect(credential) is None:
        return 1

    finished = asyncio.Event()

    def check_finished(_: Any) -> None:
        if client.session.is_finished or client.connection_state == ConnectionState.DISCONNECTED:
            finished.set()

    unsubscribers = [
        client.session.subscribe(check_finished),
        client.connection.subscribe(check_finished),
    ]
    tasks = [
        asyncio.create_task(client.run()),
        asyncio.create_task(finished.wait()),
    ]
    if player is not None:
        tasks.append(asyncio.create_task(player.play()))

    try:
        done, _ = await asyncio.wait(tasks, return_when=asyncio.FIRST_COMPLETED)
        for task in done:
            task.result()
    finally:
        for unsubscribe in unsubscribers:
            unsubscribe()
        for task in tasks:
            task.cancel()
        await client.close()

    _log_outcome(client)
    return 0


def _log_outcome(client: GameClient) -> None:
    snapshot = client.snapshot
    if snapshot is None or not snapshot.is_final:
        logger.info(f"Session ended in phase {client.phase.value} without a result")
        return
    if snapshot.is_draw:
        outcome = "draw"
    elif snapshot.winner == client.local_user_id:
        outcome = "you won"
    else:
        outcome = "you lost"
    logger.info(
        f"Match over: {outcome} ({snapshot.my_score}-{snapshot.opponent_score}, "
        f"reason={snapshot.reason or 'time'})"
    )


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    args = parse_args(argv)
    try:
        config = apply_overrides(load_config(args.config), args)
        validate_config(config)
        origin = Origin.from_url(config["origin"]) if config.get("origin") else None
    except ConfigurationError as e:
        print(f"Error: {e}", file=sys.stderr)
        print("Set via config file, environment variables or flags.", file=sys.stderr)
        return 1

    setup_logging(
        log_file_path=config["log_file"],
        level=logging.DEBUG if args.verbose else logging.INFO,
    )
    if not args.verbose:
        enable_protocol_mode()

    credential = resolve_credential(config)
    if credential is None:
        get_protocol_logger().log_error("session verification failed")
        return 1

    client = GameClient(api_url=config.get("api_url"), origin=origin)
    player = DemoPlayer(client, config["clicks_per_second"]) if args.demo else None
    try:
        return asyncio.run(play_session(client, credential, player))
    except KeyboardInterrupt:
        logger.info("Interrupted")
        return 130
