"""The Command Line Interface for the engine, including Interactive elements.

A hybrid CLI/ICLI that asks interactively for whatever the command line left out, unless running non-interactive.
Encryption and decryption can print their step trace as they go.

Typical usage example:

    rsatrace keygen --mode teaching -p demo.pub -P demo.key
    rsatrace -n encrypt -p demo.pub --message Hi --trace
    OR
    python -m rsatrace
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import argparse
import logging
import pathlib
import sys
import typing

import rsatrace
from rsatrace.trace import TraceStep


class HelpData(typing.NamedTuple):
    description: str
    format: typing.Type = str
    choices: list[str] | None = None
    default: typing.Any = None
    advanced: bool = False


help_dict: dict[str, HelpData] = {
    "subcommand":
        HelpData(
            description="The available subcommands in rsatrace.",
            choices=["keygen", "encrypt", "decrypt"],
        ),
    "keygen":
        HelpData("Key generation utility."),
    "encrypt":
        HelpData("Encryption utility."),
    "decrypt":
        HelpData("Decryption utility."),
    "public_key":
        HelpData(
            description="Location of the public key file.",
            format=pathlib.Path,
        ),
    "private_key":
        HelpData(
            description="Location of the private key file.",
            format=pathlib.Path,
        ),
    "message":
        HelpData(
            description="Message or path to file containing payload. If Path start with `P:`",
            format=str,
        ),
    "mode":
        HelpData(
            description="Key-size mode. Teaching keys are tiny and NOT secure.",
            choices=sorted(rsatrace.PROFILES),
            default="secure",
        ),
    "trace":
        HelpData(
            description="Print every step of the process.",
            format=bool,
            advanced=True,
            default=False,
        ),
    "overwrite":
        HelpData(
            description="Overwrite specified destination files if they exist?",
            choices=["Y", "N"],
            default="N",
        )
}

needs = {
    "keygen": ("public_key", "private_key", "mode"),
    "encrypt": ("public_key", "message", "trace"),
    "decrypt": ("private_key", "message", "trace"),
}

pubkey = argparse.ArgumentParser(add_help=False)
pubkey.add_argument("--public_key", "-p", type=help_dict["public_key"].format, help=help_dict["public_key"].description)
privkey = argparse.ArgumentParser(add_help=False)
privkey.add_argument("--private_key",
                     "-P",
                     type=help_dict["private_key"].format,
                     help=help_dict["private_key"].description)
payloads = argparse.ArgumentParser(add_help=False)
payloads.add_argument("--message", type=help_dict["message"].format, help=help_dict["message"].description)
payloads.add_argument("--trace", "-t", action="store_true", help=help_dict["trace"].description)
corep = argparse.ArgumentParser(prog="rsatrace")
corep.add_argument("--version", "-v", action="version", version=f"%(prog)s {rsatrace.__version__}")
corep.add_argument("--non-interactive", "-n", action="store_true", help="Enable non-interactive mode")
corep.add_argument("--advanced", "-a", action="store_true", help="Enable advanced mode, for interactive mode")
corep.add_argument("--verbose", "-V", action="count", default=0, help="Log more detail (repeat for debug output)")
commands = corep.add_subparsers(dest="subcommand", title="Subcommands")

keygen = commands.add_parser("keygen", parents=[privkey, pubkey], help=help_dict["keygen"].description)
keygen.add_argument("--mode", "-m", choices=help_dict["mode"].choices, help=help_dict["mode"].description)
keygen.add_argument("--overwrite", "-o", action="store_const", const="Y", help=help_dict["overwrite"].description)

encrypt = commands.add_parser("encrypt", parents=[pubkey, payloads], help=help_dict["encrypt"].description)
decrypt = commands.add_parser("decrypt", parents=[privkey, payloads], help=help_dict["decrypt"].description)


def checkmodes(arg: str, mode: tuple[bool, bool]):
    """Resolve `arg` without prompting where possible.

    Returns the default when running non-interactive, or when the option is advanced and advanced mode is off.
    Otherwise returns the option's `HelpData` so the caller prompts for it.

    Raises:
        IOError: If non-interactive mode is active and the option has no default.
    """
    non_interactive, advanced = mode
    info = help_dict[arg]
    skip_prompt = non_interactive or (info.advanced and not advanced)
    if skip_prompt and info.default is not None:
        return info.default
    if non_interactive:
        raise IOError(f"Argument {arg} is missing and non-interactive mode is active.")
    return info


def _introduce(arg: str, info: HelpData, prntr: typing.Callable) -> None:
    prntr(f"Please specify the {arg}!")
    prntr("Description: " + info.description)


def choice_handler(arg: str, mode: tuple[bool, bool], prntr: typing.Callable = print):
    """Prompt until one of the option's choices, or an empty line for its default, is entered."""
    info = checkmodes(arg, mode)
    if not isinstance(info, HelpData):
        return info
    _introduce(arg, info, prntr)
    for choice in info.choices:
        label = f"{choice} - {help_dict[choice].description}" if choice in help_dict else choice
        prntr(label + (" (Default)" if choice == info.default else ""))
    if info.default is not None:
        prntr("To accept default just click enter. Otherwise specify value.")
    while True:
        answer = input(f"{arg}: ")
        if answer in info.choices:
            return answer
        if not answer and info.default is not None:
            return info.default
        prntr("Please select an option from the list.")


def input_handler(arg: str, mode: tuple[bool, bool], prntr: typing.Callable = print):
    """Prompt for a free-form value and convert it with the option's `format` type."""
    info = checkmodes(arg, mode)
    if not isinstance(info, HelpData):
        return info
    _introduce(arg, info, prntr)
    if info.default is not None:
        prntr(f"Default value: {info.default}")
        prntr("To accept default just click enter. Otherwise specify value.")
    while True:
        answer = input(f"{arg}: ")
        if not answer:
            if info.default is not None:
                return info.default
            prntr("Please provide a value.")
            continue
        try:
            return info.format(answer)
        except ValueError:
            prntr(f"We could not convert your value to {info.format.__name__}.")


def check_message(mess: str, enc: str = "utf-8") -> str:
    """Return `mess`, or the contents of the file it names when prefixed with `P:`."""
    if not mess.startswith("P:"):
        return mess
    return pathlib.Path(mess[2:]).read_text(encoding=enc)


def print_step(step: TraceStep) -> None:
    """Print one trace step as an indented block."""
    print(f"[{step.index}] {step.name}: {step.description} ({step.status})")
    if step.value is not None:
        print(f"    value: {step.value}")
    if step.details is not None:
        print(f"    {step.details}")


def main(argv: list[str] | None = None):
    """Core Hybrid CLI/ICLI (Command Line Interface/Interactive Command Line Interface)"""
    args = corep.parse_args(argv)
    pstatus = (args.non_interactive, args.advanced)
    logging.basicConfig(level=(logging.WARNING, logging.INFO, logging.DEBUG)[min(args.verbose, 2)],
                        format="%(levelname)s %(name)s: %(message)s")

    def pspr(text: str):
        """Print only if not in non-interactive mode."""
        if not pstatus[0]:
            print(text)

    pspr("Welcome to rsatrace!\n")
    if not args.subcommand:
        args.subcommand = choice_handler("subcommand", pstatus)
    for reqs in needs[args.subcommand]:
        if getattr(args, reqs, None) is None:
            if help_dict[reqs].choices is not None:
                res = choice_handler(reqs, pstatus)
            else:
                res = input_handler(reqs, pstatus)
            setattr(args, reqs, res)
        else:
            pspr(f"{reqs}: {getattr(args, reqs)}")
    pspr("\nInput Complete! Executing...")
    on_step = print_step if getattr(args, "trace", False) else None
    try:
        match args.subcommand:
            case "keygen":
                if args.private_key.exists() or args.public_key.exists():
                    rs = getattr(args, "overwrite", None)
                    if rs is None:
                        rs = choice_handler("overwrite", pstatus, pspr)
                    if rs == "N":
                        print("Destination private or public key already exists!")
                        return
                pair = rsatrace.KeyPair.generate(args.mode)
                pair.private_key.export(args.private_key)
                pair.public_key.export(args.public_key)
                pspr("\nKey pair generated!")
            case "encrypt":
                message = check_message(args.message)
                rpu = rsatrace.RSAPubKey.import_key(args.public_key)
                ciph = rpu.encrypt(message, on_step)
                pspr("Ciphertext:")
                print(ciph)
            case "decrypt":
                ciph = check_message(args.message, "ascii").strip()
                rpk = rsatrace.RSAPrivKey.import_key(args.private_key)
                clear = rpk.decrypt(ciph, on_step)
                pspr("Cleartext:")
                print(clear)
    except ValueError as err:
        print(f"Error: {err}", file=sys.stderr)
        sys.exit(1)
    pspr("Thank you for using rsatrace!")
    pspr("Goodbye!")


if __name__ == "__main__":
    main()
