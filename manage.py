#!/usr/bin/env python3
"""
=============================================================================
TASKHUB - UNIFIED COMMANDER
=============================================================================
The single entry point for all developer operations.

Usage:
    python manage.py serve       # Launch the HTTP API (supports --host, --port, --reload)
    python manage.py init-db     # Create the users/tasks tables in DATABASE_URL
    python manage.py doctor      # Configuration summary + database connectivity check
"""

import argparse
import asyncio
import sys

from taskhub.shared.config import settings

# Colors for terminal output
class Colors:
    HEADER = '\033[95m'
    CYAN = '\033[96m'
    GREEN = '\033[92m'
    WARNING = '\033[93m'
    FAIL = '\033[91m'
    ENDC = '\033[0m'

def log(msg, color=Colors.ENDC):
    print(f"{color}{msg}{Colors.ENDC}")

def _redact(url: str) -> str:
    """Hides the password part of a database URL."""
    scheme, sep, rest = url.partition("://")
    if not sep or "@" not in rest:
        return url
    credentials, _, host = rest.rpartition("@")
    user = credentials.split(":", 1)[0]
    return f"{scheme}://{user}:***@{host}"

# --- COMMANDS ---

def serve(host=None, port=None, reload=False):
    """Runs uvicorn on the application factory."""
    import uvicorn

    host = host or settings.SERVER_HOST
    port = port or settings.SERVER_PORT
    log(f"\n🚀 Serving {settings.APP_NAME} on http://{host}:{port}", Colors.HEADER)
    uvicorn.run(
        "taskhub.adapters.api.main:create_app",
        host=host,
        port=port,
        reload=reload,
        factory=True,
    )
    return 0

async def _init_db():
    from taskhub.adapters.persistence.database import create_engine, create_schema

    engine = create_engine(settings)
    try:
        await create_schema(engine)
    finally:
        await engine.dispose()

def init_db():
    """Creates the schema against DATABASE_URL."""
    log("\n🗄️  Initializing database...", Colors.HEADER)
    log(f"   URL: {_redact(settings.DATABASE_URL)}")
    try:
        asyncio.run(_init_db())
    except Exception as e:
        log(f"   ❌ Schema creation failed: {e}", Colors.FAIL)
        return 1
    log("   ✅ Tables ready.", Colors.GREEN)
    return 0

async def _database_reachable():
    from taskhub.adapters.persistence.database import create_engine, ping

    engine = create_engine(settings)
    try:
        return await ping(engine)
    finally:
        await engine.dispose()

def doctor():
    """System Diagnostic Tool."""
    log("\n🩺 Running Doctor...", Colors.HEADER)

    # 1. Configuration
    log(f"   ⚙️  Environment: {settings.APP_ENV.value} (debug={settings.DEBUG})")
    log(f"   ⚙️  Bind: {settings.SERVER_HOST}:{settings.SERVER_PORT}")
    log(f"   ⚙️  Database: {_redact(settings.DATABASE_URL)}")
    log(f"   ⚙️  Pool: {settings.DB_MIN_CONNECTIONS}..{settings.DB_MAX_CONNECTIONS} connections")
    if settings.OTEL_EXPORTER_OTLP_ENDPOINT:
        log(f"   ✅ Tracing to {settings.OTEL_EXPORTER_OTLP_ENDPOINT}", Colors.GREEN)
    else:
        log("   ⚠️  Tracing disabled (OTEL_EXPORTER_OTLP_ENDPOINT unset).", Colors.WARNING)

    # 2. Connectivity
    if not asyncio.run(_database_reachable()):
        log("   ❌ Database is NOT reachable.", Colors.FAIL)
        return 1

    log("   ✅ Database reachable.", Colors.GREEN)
    log("   ✅ Doctor complete.", Colors.GREEN)
    return 0

# --- MAIN ---

def build_parser():
    parser = argparse.ArgumentParser(description="TaskHub Commander")
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # Serve
    serve_parser = subparsers.add_parser("serve", help="Run the HTTP API")
    serve_parser.add_argument("--host", type=str, default=None, help="Bind address (default: SERVER_HOST)")
    serve_parser.add_argument("--port", type=int, default=None, help="Bind port (default: SERVER_PORT)")
    serve_parser.add_argument("--reload", action="store_true", help="Restart on code changes")

    # Init DB
    subparsers.add_parser("init-db", help="Create the database schema")

    # Doctor
    subparsers.add_parser("doctor", help="Run diagnostics")

    return parser

def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    # Default to help
    if not args.command:
        parser.print_help()
        return 0

    if args.command == "serve":
        return serve(host=args.host, port=args.port, reload=args.reload)

    elif args.command == "init-db":
        return init_db()

    elif args.command == "doctor":
        return doctor()

    return 0

if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        log("\n🛑 Interrupted.", Colors.WARNING)
        sys.exit(130)
