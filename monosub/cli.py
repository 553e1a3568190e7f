"""Command-line front end for monoalphabetic substitution.

Usage examples:
  python3 -m monosub -a alphabet.txt "hello world"
  python3 -m monosub -a alphabet.txt -d -i secret.txt -o plain.txt
  python3 -m monosub -a alphabet.txt "next line" -o log.txt -A
  python3 -m monosub generate -o alphabet.txt
  python3 -m monosub freq -i secret.txt --plot freq.png
"""

import argparse
import sys
from dataclasses import dataclass
from typing import List, Optional

from .cipher import Cipher
from .freq import char_frequencies, format_frequencies, plot_frequencies
from .keygen import ALPHABET, keyword_mapping, mapping_table, random_mapping
from .mapping import FormatError, format_mapping


@dataclass(frozen=True)
class RunConfig:
    alphabet: str
    text: Optional[str] = None
    input_path: Optional[str] = None
    decrypt: bool = False
    output: Optional[str] = None
    append: bool = False
    strict: bool = False
    show_key: bool = False


# ===============================
# Helpers
# ===============================

def read_text_file(path: str, what: str) -> str:
    try:
        with open(path, "r", encoding="utf-8") as f:
            return f.read()
    except OSError as e:
        raise OSError(f"cannot read {what} {path}: {e.strerror or e}") from e
    except UnicodeDecodeError as e:
        raise OSError(f"cannot read {what} {path}: not valid UTF-8 ({e.reason} at byte {e.start})") from e


def write_result(path: str, data: str, append: bool = False) -> None:
    try:
        if append:
            with open(path, "a", encoding="utf-8") as f:
                f.write(data + "\n")
        else:
            with open(path, "w", encoding="utf-8") as f:
                f.write(data)
    except OSError as e:
        raise OSError(f"cannot write output file {path}: {e.strerror or e}") from e


def input_text(text: Optional[str], input_path: Optional[str]) -> str:
    if input_path is not None:
        return read_text_file(input_path, "input file")
    return text


# ===============================
# Commands
# ===============================

def run(config: RunConfig) -> str:
    """Encrypt or decrypt according to `config`; returns the transformed text."""
    spec = read_text_file(config.alphabet, "mapping file")
    cipher = Cipher.from_text(spec, strict=config.strict)
    text = input_text(config.text, config.input_path)

    if config.show_key:
        print(mapping_table(cipher.table))

    result = cipher.apply(text, decrypt=config.decrypt)

    if config.output:
        write_result(config.output, result, append=config.append)
        if config.append:
            print(f"Result appended to file: {config.output}")
        else:
            print(f"Result saved to file: {config.output}")
    else:
        print(result)
    return result


def run_generate(args) -> None:
    if args.keyword:
        table = keyword_mapping(args.keyword, charset=args.charset)
    else:
        table = random_mapping(charset=args.charset)
    spec = format_mapping(table)
    if args.output:
        write_result(args.output, spec)
        print(f"Mapping saved to file: {args.output}")
    else:
        print(spec, end="")


def run_freq(args) -> None:
    text = input_text(args.text, args.input)
    rows = char_frequencies(text, letters_only=not args.all_chars)
    print(format_frequencies(rows))
    if args.plot:
        plot_frequencies(rows, args.plot)
        print(f"Chart saved to file: {args.plot}")


# ===============================
# CLI
# ===============================

def add_text_source(p: argparse.ArgumentParser) -> None:
    p.add_argument("text", nargs="?", help="Text to process (omit when using --input)")
    p.add_argument("-i", "--input", help="Read the input text from this file")


def check_text_source(p: argparse.ArgumentParser, args) -> None:
    if args.text is not None and args.input is not None:
        p.error("argument -i/--input: not allowed with a text argument")
    if args.text is None and args.input is None:
        p.error("no text to process: give a text argument or --input")


def build_cipher_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="monosub",
        description="Monoalphabetic substitution cipher with a user-defined alphabet",
        epilog="Other commands: 'monosub generate --help', 'monosub freq --help'",
    )
    p.add_argument("-a", "--alphabet", required=True,
                   help="Alphabet file with 'key = value' lines (spaces around '=' allowed)")
    add_text_source(p)
    mode = p.add_mutually_exclusive_group()
    mode.add_argument("-e", "--encrypt", action="store_true", help="Encrypt the text (default)")
    mode.add_argument("-d", "--decrypt", action="store_true", help="Decrypt the text")
    p.add_argument("-o", "--output", help="Write the result to this file instead of the screen")
    p.add_argument("-A", "--append", action="store_true",
                   help="Append the result as a new line instead of overwriting (requires --output)")
    p.add_argument("--strict", action="store_true",
                   help="Reject alphabet rules with more than one character on a side")
    p.add_argument("--show-key", action="store_true", help="Print the substitution table first")
    return p


def build_generate_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="monosub generate",
                                description="Generate an alphabet file")
    p.add_argument("--charset", default=ALPHABET,
                   help=f"Characters to permute (default: {ALPHABET})")
    p.add_argument("--keyword", help="Build a keyword alphabet instead of a random one")
    p.add_argument("-o", "--output", help="Write the alphabet to this file instead of the screen")
    return p


def build_freq_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="monosub freq",
                                description="Character frequency analysis")
    add_text_source(p)
    p.add_argument("--all-chars", action="store_true",
                   help="Count every non-whitespace character, not only letters")
    p.add_argument("--plot", help="Save a bar chart (PNG) to this file")
    return p


def parse_config(argv: List[str]) -> RunConfig:
    p = build_cipher_parser()
    args = p.parse_args(argv)
    check_text_source(p, args)
    if args.append and not args.output:
        p.error("argument -A/--append: requires -o/--output")
    return RunConfig(
        alphabet=args.alphabet,
        text=args.text,
        input_path=args.input,
        decrypt=args.decrypt,
        output=args.output,
        append=args.append,
        strict=args.strict,
        show_key=args.show_key,
    )


def main(argv: Optional[List[str]] = None) -> int:
    argv = sys.argv[1:] if argv is None else list(argv)

    try:
        if argv and argv[0] == "generate":
            run_generate(build_generate_parser().parse_args(argv[1:]))
        elif argv and argv[0] == "freq":
            p = build_freq_parser()
            args = p.parse_args(argv[1:])
            check_text_source(p, args)
            run_freq(args)
        else:
            run(parse_config(argv))
    except (FormatError, OSError, ValueError) as e:
        print("Error:", e, file=sys.stderr)
        return 1
    return 0
