from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Callable, List, Optional, Sequence

if __package__ in (None, ""):
    sys.path.append(str(Path(__file__).resolve().parents[1]))

from morsegen.config import AppConfig, load_config
from morsegen.generator import MorseCodeGenerator
from morsegen.morse import EOM, PROSIGNS, UnsupportedCharacterError

LogFn = Callable[[str], None]


def _print_err(msg: str) -> None:
    print(msg, file=sys.stderr)


def _print_words(
    generator: MorseCodeGenerator,
    stop_on_error: bool,
    log_fn: LogFn = print,
    err_fn: LogFn = _print_err,
) -> int:
    """Print the remaining words one per line. Returns the number of rejected words."""
    errors = 0
    while True:
        try:
            part = generator.get_next()
        except UnsupportedCharacterError as exc:
            err_fn(f"ERR {exc}")
            errors += 1
            if stop_on_error:
                break
            continue
        if part == EOM:
            break
        log_fn(part)
    return errors


def _translate_cli(text: str, cfg: AppConfig, log_fn: LogFn = print, err_fn: LogFn = _print_err) -> int:
    generator = MorseCodeGenerator()
    generator.set_message(text)
    # Without the word stream the full translation still validates the input.
    if cfg.console.show_full or not cfg.console.word_by_word:
        try:
            full = generator.get_message()
        except UnsupportedCharacterError as exc:
            err_fn(f"ERR {exc}")
            if cfg.console.stop_on_error or not cfg.console.word_by_word:
                return 1
        else:
            if cfg.console.show_full:
                log_fn(full)
    if cfg.console.word_by_word:
        if _print_words(generator, cfg.console.stop_on_error, log_fn, err_fn):
            return 1
    return 0


def _check_prosigns(generator: MorseCodeGenerator) -> bool:
    generator.set_message("AR SK")
    got = [generator.get_next() for _ in range(3)]
    return got == [PROSIGNS["AR"], PROSIGNS["SK"], EOM]


def _run_demo_cli(cfg: AppConfig, log_fn: LogFn = print, err_fn: LogFn = _print_err) -> int:
    generator = MorseCodeGenerator()
    for message in cfg.console.demo_messages:
        log_fn(f"[Demo] Setting message: {message}")
        generator.set_message(message)
        try:
            full = generator.get_message()
        except UnsupportedCharacterError as exc:
            err_fn(f"[Rejected] {exc}")
            if cfg.console.stop_on_error:
                break
            continue
        log_fn("[Demo] Full Morse message:")
        log_fn(full)
        log_fn("[Demo] Word-by-word output:")
        _print_words(generator, cfg.console.stop_on_error, log_fn, err_fn)

    log_fn("[Demo] Checking prosigns AR SK")
    if not _check_prosigns(generator):
        err_fn("[Failed] Prosign check failed.")
        return 1
    log_fn("[Passed] Prosign check successful.")
    return 0


def _run_simulation_cli(cfg: AppConfig) -> int:
    generator = MorseCodeGenerator()
    print("Simulation mode (stdin). Commands: /next /full /clear /quit")
    while True:
        try:
            line = input("tx> ").strip()
        except (EOFError, KeyboardInterrupt):
            print()
            break
        if not line:
            continue
        cmd = line.lower()
        if cmd == "/quit":
            break
        if cmd == "/clear":
            generator.clear_message()
            print("Message cleared.")
            continue
        if cmd == "/next":
            try:
                print(generator.get_next())
            except UnsupportedCharacterError as exc:
                print(f"ERR {exc}")
            continue
        if cmd == "/full":
            try:
                print(generator.get_message())
            except UnsupportedCharacterError as exc:
                print(f"ERR {exc}")
            continue
        generator.set_message(line)
        print(f"words: {len(generator.words)}")
        if cfg.console.show_full:
            try:
                print(generator.get_message())
            except UnsupportedCharacterError as exc:
                print(f"ERR {exc}")
    return 0


def build_arg_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Text to International Morse code translator")
    p.add_argument("text", nargs="*", help="Text to translate.")
    p.add_argument("--config", default="morsegen.yaml", help="YAML config path.")
    p.add_argument("--word-by-word", action="store_true", help="Also print one word per line until <EOM>.")
    p.add_argument("--no-full", action="store_true", help="Do not print the full translation.")
    p.add_argument("--keep-going", action="store_true", help="Skip rejected words instead of stopping.")
    p.add_argument("--demo", action="store_true", help="Run the demo messages from the config.")
    p.add_argument("--simulate", action="store_true", help="Run stdin simulation mode.")
    return p


def _apply_cli_overrides(cfg: AppConfig, args: argparse.Namespace) -> None:
    if args.word_by_word:
        cfg.console.word_by_word = True
    if args.no_full:
        cfg.console.show_full = False
    if args.keep_going:
        cfg.console.stop_on_error = False


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_arg_parser()
    args = parser.parse_args(argv)
    cfg = load_config(Path(args.config))
    _apply_cli_overrides(cfg, args)

    if args.demo:
        return _run_demo_cli(cfg)
    if args.simulate:
        return _run_simulation_cli(cfg)

    words: List[str] = list(args.text)
    if not words:
        parser.print_usage(sys.stderr)
        _print_err("error: no text given (use --demo or --simulate for interactive modes)")
        return 2
    return _translate_cli(" ".join(words), cfg)


if __name__ == "__main__":
    raise SystemExit(main())
