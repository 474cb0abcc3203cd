"""
Command-line entrypoint.

    wallet-registry serve [--host HOST] [--port PORT]
    wallet-registry register --wallet-type EVM --private-key-env WALLET_PRIVATE_KEY [--url URL]
    wallet-registry register --wallet-type Movement --address ADDRESS [--url URL]
    wallet-registry list

Env: REGISTRY_STORE, REGISTRATIONS_PATH, DATABASE_URL, API_HOST, API_PORT, REGISTRY_URL, LOG_LEVEL.
"""

from __future__ import annotations

import argparse
import json
import os
import sys

from wallet_registry.config import get_settings
from wallet_registry.registry_logging import get_logger

logger = get_logger("wallet_registry.cli")


def _cmd_serve(args: argparse.Namespace) -> int:
    import uvicorn

    settings = get_settings()
    host = args.host or settings.api_host
    port = args.port or settings.api_port
    logger.info("server_starting", host=host, port=port, store=settings.store_backend)
    uvicorn.run(
        "wallet_registry.api_server.app:app",
        host=host,
        port=port,
        log_level=os.getenv("LOG_LEVEL", "info").lower(),
    )
    return 0


def _cmd_register(args: argparse.Namespace) -> int:
    import httpx

    from wallet_registry.connector import (
        EvmWalletConnector,
        MovementWalletConnector,
        RegistrationClient,
        RegistrationClientError,
        register_with_connector,
    )

    if args.wallet_type == "EVM":
        private_key = (os.getenv(args.private_key_env) or "").strip()
        if not private_key:
            print(f"Set {args.private_key_env} to the wallet's private key.", file=sys.stderr)
            return 1
        connector: EvmWalletConnector | MovementWalletConnector = EvmWalletConnector.from_key(private_key)
    else:
        address = args.address
        connector = MovementWalletConnector(prompt=(lambda _: address) if address else input)

    url = args.url or get_settings().registry_url
    try:
        with RegistrationClient(url) as client:
            result = register_with_connector(client, connector)
    except RegistrationClientError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return 1
    except httpx.HTTPError as e:
        logger.warning("register_request_failed", url=url, error=str(e))
        print("Error registering wallet.", file=sys.stderr)
        return 1
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    print(f"Success: {result['message']}")
    return 0


def _cmd_list(args: argparse.Namespace) -> int:
    from wallet_registry.store import build_store

    store = build_store(get_settings())
    print(json.dumps([r.to_json_dict() for r in store.load()], indent=2))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="wallet-registry", description="Wallet registration service")
    sub = parser.add_subparsers(dest="command", required=True)

    serve = sub.add_parser("serve", help="Run the registration API")
    serve.add_argument("--host", default=None)
    serve.add_argument("--port", type=int, default=None)
    serve.set_defaults(func=_cmd_serve)

    register = sub.add_parser("register", help="Register a wallet against a running API")
    register.add_argument("--wallet-type", choices=["EVM", "Movement"], default="EVM")
    register.add_argument(
        "--private-key-env",
        default="WALLET_PRIVATE_KEY",
        help="Env var holding the EVM private key (default: WALLET_PRIVATE_KEY)",
    )
    register.add_argument("--address", default=None, help="Movement address (prompted when omitted)")
    register.add_argument("--url", default=None, help="API base URL (default: REGISTRY_URL)")
    register.set_defaults(func=_cmd_register)

    list_cmd = sub.add_parser("list", help="Print stored registrations as JSON")
    list_cmd.set_defaults(func=_cmd_list)
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
