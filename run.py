#!/usr/bin/env python3
"""
Start the Travel Tracker API.

    python run.py --env production --workers 4
    python run.py --migrate          # alembic upgrade head, then serve
    python run.py --create-sample staging
"""

import argparse
import sys

import uvicorn
from alembic import command
from alembic.config import Config

from travel_tracker.config import ConfigLoader, Environment, load_config_for_environment


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Travel Tracker API Server")
    parser.add_argument(
        "--env",
        choices=[e.value for e in Environment],
        default=None,
        help="Environment to run (default: from ENVIRONMENT env var or development)"
    )
    parser.add_argument("--host", default=None, help="Host to bind to (overrides config)")
    parser.add_argument("--port", type=int, default=None, help="Port to bind to (overrides config)")
    parser.add_argument("--workers", type=int, default=None, help="Worker processes (overrides config)")
    parser.add_argument("--reload", action="store_true", help="Enable auto-reload")
    parser.add_argument("--debug", action="store_true", help="Enable debug mode")
    parser.add_argument("--migrate", action="store_true", help="Apply alembic migrations before starting")

    config_commands = parser.add_mutually_exclusive_group()
    config_commands.add_argument("--list-envs", action="store_true", help="List .env.<environment> files")
    config_commands.add_argument("--validate-env", metavar="ENV", help="Check that .env.<ENV> loads")
    config_commands.add_argument("--create-sample", metavar="ENV", help="Write .env.<ENV>.sample")
    return parser


def run_config_command(args) -> int:
    """Handle the configuration subcommands; returns an exit code."""
    if args.list_envs:
        print("Available environment configurations:")
        for env in ConfigLoader.get_available_environments():
            print(f"  - {env}")
        return 0

    if args.validate_env:
        if ConfigLoader.validate_environment_config(args.validate_env):
            print(f"✓ Environment '{args.validate_env}' configuration is valid")
            return 0
        print(f"✗ Environment '{args.validate_env}' configuration is invalid or missing")
        return 1

    try:
        sample_file = ConfigLoader.create_sample_env_file(args.create_sample)
    except (ValueError, OSError) as e:
        print(f"✗ Failed to create sample configuration: {e}")
        return 1
    print(f"✓ Sample configuration created: {sample_file}")
    return 0


def main() -> int:
    args = build_parser().parse_args()

    if args.list_envs or args.validate_env or args.create_sample:
        return run_config_command(args)

    try:
        settings = load_config_for_environment(args.env)
    except ValueError as e:
        print(f"✗ Failed to load configuration: {e}")
        return 1

    if args.host:
        settings.host = args.host
    if args.port:
        settings.port = args.port
    if args.workers:
        settings.workers = args.workers
    settings.reload = settings.reload or args.reload
    settings.debug = settings.debug or args.debug

    if args.migrate:
        alembic_cfg = Config("alembic.ini")
        alembic_cfg.set_main_option("sqlalchemy.url", settings.database_url)
        command.upgrade(alembic_cfg, "head")
        print("✓ Database migrated to head")

    print(f"🚀 Starting {settings.app_name} v{settings.app_version} ({settings.environment.value})")
    print(f"   Listening on {settings.host}:{settings.port}, workers={settings.workers}")
    print(f"   Debug: {settings.debug}  Reload: {settings.reload}  Log level: {settings.log_level.value}")

    uvicorn.run(
        "travel_tracker.main:app",
        host=settings.host,
        port=settings.port,
        workers=1 if settings.reload else settings.workers,
        reload=settings.reload,
        log_level=settings.log_level.value.lower(),
        access_log=True,
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
