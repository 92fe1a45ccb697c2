"""CLI entry point for the weathercast service."""

import argparse
import json
import logging

from weathercast.config.loader import load_config
from weathercast.config.schema import AppConfig
from weathercast.errors import WeatherError
from weathercast.pipeline.weather_service import WeatherService
from weathercast.storage.city_repo import CityStore
from weathercast.storage.database import connect, run_migrations

DEFAULT_CONFIG = "config/weathercast.yaml"


def _positive_int(value: str) -> int:
    try:
        n = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: {value!r}")
    if n < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {n}")
    return n


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="weathercast",
        description="City weather lookup with a recent-searches cache",
    )
    parser.add_argument(
        "--config", default=DEFAULT_CONFIG, help="Config YAML path"
    )
    parser.add_argument("--db", default=None, help="SQLite DB path (overrides config)")

    sub = parser.add_subparsers(dest="command")

    # serve
    serve_p = sub.add_parser("serve", help="Run the web server")
    serve_p.add_argument("--host", default=None)
    serve_p.add_argument("--port", type=int, default=None)

    # lookup
    lookup_p = sub.add_parser("lookup", help="Print the forecast for a city")
    lookup_p.add_argument("city")
    lookup_p.add_argument("--json", action="store_true", help="Emit JSON")

    # recent
    recent_p = sub.add_parser("recent", help="List recently looked-up cities")
    recent_p.add_argument("--limit", type=_positive_int, default=None)

    # init-db
    sub.add_parser("init-db", help="Create or migrate the database")

    # config show
    config_p = sub.add_parser("config", help="Config operations")
    config_sub = config_p.add_subparsers(dest="config_command")
    config_sub.add_parser("show", help="Display current config")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = load_config(args.config)
    if args.db:
        config = config.model_copy(
            update={"database": config.database.model_copy(update={"path": args.db})}
        )

    if args.command == "serve":
        return _cmd_serve(config, args)
    elif args.command == "lookup":
        return _cmd_lookup(config, args)
    elif args.command == "recent":
        return _cmd_recent(config, args)
    elif args.command == "init-db":
        return _cmd_init_db(config)
    elif args.command == "config":
        return _cmd_config(config, args)
    else:
        parser.print_help()
        return 1


def _open_store(config: AppConfig) -> CityStore:
    conn = connect(config.database.path)
    run_migrations(conn)
    return CityStore(conn)


def _cmd_serve(config: AppConfig, args) -> int:
    import uvicorn

    from weathercast.web.app import create_app

    app = create_app(config)
    uvicorn.run(
        app,
        host=args.host or config.server.host,
        port=args.port or config.server.port,
    )
    return 0


def _cmd_lookup(config: AppConfig, args) -> int:
    store = _open_store(config)
    service = WeatherService.from_config(config, store)
    try:
        display = service.lookup(args.city)
    except WeatherError as e:
        print(f"Error: {e}")
        return 1
    finally:
        store.conn.close()

    if args.json:
        print(json.dumps(display.to_dict(), indent=2, ensure_ascii=False))
        return 0

    print(f"Weather for {display.city}")
    for f in display.forecasts:
        print(f"  {f.date:<18} {f.temperature:>8}")
    return 0


def _cmd_recent(config: AppConfig, args) -> int:
    store = _open_store(config)
    try:
        limit = args.limit if args.limit is not None else config.recent_limit
        cities = store.list_recent(limit)
    except WeatherError as e:
        print(f"Error: {e}")
        return 1
    finally:
        store.conn.close()

    if not cities:
        print("No lookups yet")
    for name in cities:
        print(name)
    return 0


def _cmd_init_db(config: AppConfig) -> int:
    conn = connect(config.database.path)
    applied = run_migrations(conn)
    conn.close()
    if applied:
        print(f"Applied: {', '.join(applied)}")
    else:
        print("Database up to date")
    return 0


def _cmd_config(config: AppConfig, args) -> int:
    if args.config_command == "show":
        print(config.model_dump_json(indent=2))
        return 0
    print("Use: config show")
    return 1
