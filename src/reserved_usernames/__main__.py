from __future__ import annotations

import argparse
import asyncio
import json
import logging

from .core.formats import NameFormat
from .core.options import RegistryOptions
from .core.registry import ReservedUsernames


def _options_from_args(args: argparse.Namespace) -> RegistryOptions:
    overrides: dict = {}
    if args.case_sensitive:
        overrides["case_sensitive"] = True
    if args.auto_update:
        overrides["auto_update"] = True
    if args.cache_file:
        overrides["cache_file"] = args.cache_file
    if args.custom:
        overrides["custom_reserved"] = tuple(args.custom)
    return RegistryOptions.from_env().with_overrides(**overrides)


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="reserved-usernames", description="Check usernames against a reserved list")
    p.add_argument("--case-sensitive", action="store_true")
    p.add_argument("--auto-update", action="store_true", help="Refresh the list from the remote source on start")
    p.add_argument("--cache-file", default=None)
    p.add_argument("--custom", nargs="*", default=None, metavar="NAME", help="Extra names to reserve")
    p.add_argument("--log-level", default="WARNING")

    sub = p.add_subparsers(dest="command", required=True)

    check = sub.add_parser("check", help="Report whether each name is reserved")
    check.add_argument("names", nargs="+")

    suggest = sub.add_parser("suggest", help="Suggest alternatives for a reserved name")
    suggest.add_argument("name")
    suggest.add_argument("--count", type=int, default=5)

    validate = sub.add_parser("validate", help="Validate a name against reserved list and rules")
    validate.add_argument("name")
    validate.add_argument("--min-length", type=int, default=None)
    validate.add_argument("--max-length", type=int, default=None)
    validate.add_argument("--allowed-chars", default=None, help="Regex character class body, e.g. a-zA-Z0-9_")
    validate.add_argument("--forbid", nargs="*", default=(), metavar="PATTERN")

    sub.add_parser("stats", help="Print length statistics as JSON")

    export = sub.add_parser("export", help="Print the reserved list")
    export.add_argument("--format", default="txt", choices=[f.value for f in NameFormat if f is not NameFormat.ARRAY])

    sub.add_parser("update", help="Force a refresh from the remote source")
    sub.add_parser("clear-cache", help="Delete the local cache file")

    serve = sub.add_parser("serve", help="Serve the HTTP API")
    serve.add_argument("--host", default="127.0.0.1")
    serve.add_argument("--port", type=int, default=8000)

    return p


async def _run_command(args: argparse.Namespace, options: RegistryOptions) -> int:
    registry = ReservedUsernames(options)

    if args.command == "clear-cache":
        removed = registry.clear_cache()
        print("removed" if removed else "no cache file")
        return 0

    await registry.initialize()

    if args.command == "check":
        any_reserved = False
        for c in registry.check_multiple(args.names):
            any_reserved = any_reserved or c.is_reserved
            print(f"{c.username}: {'RESERVED' if c.is_reserved else 'available'}")
        return 1 if any_reserved else 0

    if args.command == "suggest":
        for s in registry.suggest_alternatives(args.name, args.count):
            print(s)
        return 0

    if args.command == "validate":
        result = registry.validate_username(
            args.name,
            {
                "min_length": args.min_length,
                "max_length": args.max_length,
                "allowed_chars": args.allowed_chars,
                "forbidden_patterns": args.forbid or (),
            },
        )
        print(f"{args.name}: {'VALID' if result.is_valid else 'INVALID'}")
        for err in result.errors:
            print(f"  - {err}")
        return 0 if result.is_valid else 1

    if args.command == "stats":
        print(json.dumps(registry.get_stats().to_dict(), indent=2))
        return 0

    if args.command == "export":
        print(registry.export(args.format))
        return 0

    if args.command == "update":
        ok = await registry.force_update()
        print(f"{'updated' if ok else 'update failed'}: {len(registry)} names")
        return 0 if ok else 1

    raise ValueError(f"Unknown command: {args.command}")


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")
    options = _options_from_args(args)

    if args.command == "serve":
        from .runtime.server import run

        run(host=args.host, port=args.port, options=options, log_level=args.log_level.lower())
        return 0

    return asyncio.run(_run_command(args, options))


if __name__ == "__main__":
    raise SystemExit(main())
