"""CLI for Passwright — generate, validate, config (show/set)."""

import argparse
import logging
import os
from typing import List, Optional

from rich import print
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from .config import ConfigError, DEFAULTS, config_path, load_config, policy_from_config, save_config
from .evaluator import StrengthVerdict, default_evaluator
from .generator import CategoryRule, GeneratorConfig, build_generator
from .suggestions import suggest_improvements

logger = logging.getLogger("passwright")

VERDICT_STYLES = {
    StrengthVerdict.COMMON: "bold red",
    StrengthVerdict.VERY_WEAK: "red",
    StrengthVerdict.WEAK: "yellow",
    StrengthVerdict.MEDIUM: "cyan",
    StrengthVerdict.STRONG: "green",
    StrengthVerdict.VERY_STRONG: "bold green",
}

def setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
        handlers=[RichHandler(show_path=False)],
    )

def cmd_generate(args, cfg):
    policy = policy_from_config(cfg)
    config = GeneratorConfig(
        length=args.length,
        uppercase=CategoryRule(not args.no_upper, args.min_upper),
        lowercase=CategoryRule(not args.no_lower, args.min_lower),
        digits=CategoryRule(not args.no_digits, args.min_digits),
        special=CategoryRule(not args.no_special, args.min_special),
    )
    generator = build_generator(config, policy)
    for i in range(args.copies):
        pw = generator.generate_password()
        print(f"[bold green]Password #{i+1}:[/bold green] {escape(pw)}")
    return 0

def cmd_validate(args, cfg):
    # tokens are joined with no separator so unquoted passwords with spaces still work
    pw = "".join(args.password)
    check_common = cfg.get("check_common", True) and not args.no_common_check
    evaluator = default_evaluator(cfg.get("common_passwords_path"), policy_from_config(cfg))
    result = evaluator.evaluate(pw, check_common)
    verdict = result["verdict"]
    style = VERDICT_STYLES[verdict]
    print(f"Strength: [{style}]{verdict.label}[/{style}]")
    if not args.details:
        return 0

    body = (
        f"Length: {result['length']}\n"
        f"Categories: {', '.join(result['categories']) or 'none'}\n"
        f"Pool size: {result['pool_size']}\n"
        f"Estimated entropy: {result['entropy']} bits\n"
        f"Repeated pattern: {'yes' if result['repeated'] else 'no'}"
    )
    print(Panel(body, title=f"Score: {result['score']} — {verdict.label}"))
    sugg = suggest_improvements(pw, evaluator, check_common=check_common)
    if sugg["suggestions"]:
        print("\n[bold]Suggestions:[/bold]")
        for s in sugg["suggestions"]:
            print(f" • {escape(s)}")
    if sugg["examples"]:
        table = Table(show_header=True, header_style="bold magenta")
        table.add_column("Example stronger password")
        for ex in sugg["examples"]:
            table.add_row(escape(ex))
        print(table)
    return 0

def cmd_config_show(args, cfg):
    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("Key")
    table.add_column("Value")
    for key in DEFAULTS:
        table.add_row(key, repr(cfg.get(key)))
    print(table)
    return 0

def _parse_setting(key: str, raw: str):
    default = DEFAULTS[key]
    if isinstance(default, bool):
        if raw.lower() in ("1", "true", "yes", "on"):
            return True
        if raw.lower() in ("0", "false", "no", "off"):
            return False
        raise ConfigError(f"{key} expects true/false, got {raw!r}")
    if isinstance(default, int):
        try:
            return int(raw)
        except ValueError as e:
            raise ConfigError(f"{key} expects an integer, got {raw!r}") from e
    return raw or None

def cmd_config_set(args, cfg):
    if args.key not in DEFAULTS:
        raise ConfigError(f"Unknown setting {args.key!r}; expected one of: {', '.join(DEFAULTS)}")
    cfg = dict(cfg)
    cfg[args.key] = _parse_setting(args.key, args.value)
    if args.key == "common_passwords_path" and cfg[args.key] and not os.path.isfile(cfg[args.key]):
        raise ConfigError(f"Word list not found: {cfg[args.key]}")
    # refuse to persist a policy that would break every later command
    policy_from_config(cfg)
    path = save_config(cfg, args.config)
    print(f"[green]Saved {args.key} = {cfg[args.key]!r} to[/green] {path}")
    return 0

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="passwright")
    parser.add_argument("--config", type=str, help="Path to settings file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="cmd", required=True)

    gen = sub.add_parser("generate", help="Generate one or more passwords")
    gen.add_argument("--length", type=int, default=None, help="Password length (random in the default range if omitted)")
    gen.add_argument("--min-upper", type=int, default=1, help="Minimum uppercase characters")
    gen.add_argument("--min-lower", type=int, default=1, help="Minimum lowercase characters")
    gen.add_argument("--min-digits", type=int, default=1, help="Minimum digits")
    gen.add_argument("--min-special", type=int, default=1, help="Minimum special characters")
    gen.add_argument("--no-upper", action="store_true", help="Disable uppercase")
    gen.add_argument("--no-lower", action="store_true", help="Disable lowercase")
    gen.add_argument("--no-digits", action="store_true", help="Disable digits")
    gen.add_argument("--no-special", action="store_true", help="Disable special characters")
    gen.add_argument("--copies", type=int, default=1, help="How many passwords to generate")
    gen.set_defaults(func=cmd_generate)

    val = sub.add_parser("validate", help="Rate the strength of a password")
    val.add_argument("password", nargs="+", help="Password to evaluate (tokens are joined without spaces)")
    val.add_argument("--no-common-check", action="store_true", help="Skip the common-password lookup")
    val.add_argument("--details", action="store_true", help="Show entropy breakdown and suggestions")
    val.set_defaults(func=cmd_validate)

    c = sub.add_parser("config", help="Settings")
    csub = c.add_subparsers(dest="ccmd", required=True)
    c_show = csub.add_parser("show", help="Show current settings")
    c_show.set_defaults(func=cmd_config_show)
    c_set = csub.add_parser("set", help="Change a setting")
    c_set.add_argument("key", type=str, help="Setting name")
    c_set.add_argument("value", type=str, help="New value")
    c_set.set_defaults(func=cmd_config_set)

    return parser

def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose)
    cfg = load_config(args.config)
    logger.debug("Using settings from %s", args.config or config_path())
    try:
        return args.func(args, cfg)
    except ConfigError as e:
        print(f"[red]ERROR: {escape(str(e))}[/red]")
        return 1

if __name__ == "__main__":
    raise SystemExit(main())
