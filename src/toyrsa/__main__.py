"""The Command Line Interface for the utility, including Interactive elements.

Walks through the three key generation steps of the classroom exercise: draw the primes p and q, choose the public
exponent e, and assemble the key pair (e, M) / (d, M). Any value missing from the command line is asked for
interactively, unless non-interactive mode is active.

Typical usage example:

    toyrsa
    OR
    python -m toyrsa keygen -p 11 -q 13 -e 23
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import argparse
import sys
import typing

import toyrsa

# Keeps the CLI from spinning forever on a range without primes.
_CLI_PRIME_ATTEMPTS = 100000


class Prompt(typing.NamedTuple):
    label: str
    description: str
    default: int | None = None


prompts: dict[str, Prompt] = {
    "min_val": Prompt("min", "Inclusive lower bound for the primes.", toyrsa.keygen.DEFAULT_PRIME_MIN),
    "max_val": Prompt("max", "Exclusive upper bound for the primes.", toyrsa.keygen.DEFAULT_PRIME_MAX),
    "prime_p": Prompt("p", "The first prime."),
    "prime_q": Prompt("q", "The second prime, different from p."),
    "exponent_e": Prompt("e", "The public exponent, coprime to (p-1)*(q-1)."),
}

steps: dict[str, tuple[str, tuple[str, ...]]] = {
    "primes": ("Step 1: generate the primes p, q and the RSA modulus M.", ("min_val", "max_val")),
    "exponent": ("Step 2: generate the coprime number e.", ("prime_p", "prime_q")),
    "keygen": ("Step 3: generate the key pair.", ("prime_p", "prime_q", "exponent_e")),
}

primep = argparse.ArgumentParser(add_help=False)
primep.add_argument("--prime-p", "-p", type=int, help=prompts["prime_p"].description)
primep.add_argument("--prime-q", "-q", type=int, help=prompts["prime_q"].description)
corep = argparse.ArgumentParser(prog="toyrsa")
corep.add_argument("--version", "-v", action="version", version=f"%(prog)s {toyrsa.__version__}")
corep.add_argument("--non-interactive", "-n", action="store_true", help="Enable non-interactive mode")
corep.add_argument("--advanced", "-a", action="store_true", help="Also ask for values that have defaults")
commands = corep.add_subparsers(dest="subcommand", title="Subcommands")

primes = commands.add_parser("primes", help=steps["primes"][0])
primes.add_argument("--min", dest="min_val", type=int, help=prompts["min_val"].description)
primes.add_argument("--max", dest="max_val", type=int, help=prompts["max_val"].description)

exponent = commands.add_parser("exponent", parents=[primep], help=steps["exponent"][0])
exponent.add_argument("--randomized", "-r", action="store_true", help="Sample e at random instead of searching.")

keygen = commands.add_parser("keygen", parents=[primep], help=steps["keygen"][0])
keygen.add_argument("--exponent", "-e", dest="exponent_e", type=int, help=prompts["exponent_e"].description)
keygen.add_argument("--message",
                    "-m",
                    type=int,
                    help="Optional value in range [0, M) to encrypt and decrypt with the new pair.")


def ask_int(prompt: Prompt, prntr: typing.Callable = print) -> int:
    """Ask for one integer until the answer parses, accepting the default on an empty answer."""
    prntr(f"{prompt.label}: {prompt.description}")
    if prompt.default is not None:
        prntr(f"Press enter to use {prompt.default}.")
    while True:
        answer = input(f"{prompt.label} = ").strip()
        if not answer and prompt.default is not None:
            return prompt.default
        try:
            return int(answer)
        except ValueError:
            prntr(f"{prompt.label} must be a whole number.")


def ask_step(prntr: typing.Callable = print) -> str:
    """Ask which step to run."""
    prntr("Which step would you like to run?")
    for name, (description, _) in steps.items():
        prntr(f"{name} - {description}")
    while True:
        answer = input("step: ").strip()
        if answer in steps:
            return answer
        prntr(f"Please pick one of: {', '.join(steps)}.")


def fill_missing(args: argparse.Namespace) -> None:
    """Complete the values the chosen step needs, from defaults or by asking.

    Values with a default are only asked for in advanced mode.

    Raises:
        IOError: A value without default is missing and non-interactive mode is active.
    """
    for name in steps[args.subcommand][1]:
        if getattr(args, name, None) is not None:
            continue
        prompt = prompts[name]
        if prompt.default is not None and (args.non_interactive or not args.advanced):
            value = prompt.default
        elif args.non_interactive:
            raise IOError(f"Value {prompt.label} is missing and non-interactive mode is active.")
        else:
            value = ask_int(prompt)
        setattr(args, name, value)


def check_key_inputs(p: int, q: int, e: int | None = None) -> list[str]:
    """List the problems with user-provided key material, empty if there are none."""
    problems = []
    if not toyrsa.is_prime(p):
        problems.append(f"p = {p} is not a prime number.")
    if not toyrsa.is_prime(q):
        problems.append(f"q = {q} is not a prime number.")
    if p == q:
        problems.append("p and q must be different.")
    if problems or e is None:
        return problems
    phi = toyrsa.totient(p, q)
    if not 1 < e < phi:
        problems.append(f"e = {e} must be in range (1, {phi}).")
    elif toyrsa.gcd(e, phi) != 1:
        problems.append(f"e = {e} is not coprime to the totient {phi}.")
    return problems


def main():
    """Core Hybrid CLI/ICLI (Command Line Interface/Interactive Command Line Interface)"""
    args = corep.parse_args()

    def pspr(text: str):
        """Print only if not in non-interactive mode."""
        if not args.non_interactive:
            print(text)

    def fail(problems: list[str]):
        for problem in problems:
            print(problem)
        sys.exit(1)

    pspr("RSA Key Pair Generator\n")
    if not args.subcommand:
        if args.non_interactive:
            raise IOError("No step given and non-interactive mode is active.")
        args.subcommand = ask_step()
    fill_missing(args)
    match args.subcommand:
        case "primes":
            try:
                p, q = toyrsa.generate_primes(args.min_val, args.max_val, _CLI_PRIME_ATTEMPTS)
            except (ValueError, RuntimeError) as exc:
                fail([str(exc)])
            pspr("Primes p, q and RSA modulus M:")
            print(f"p = {p}")
            print(f"q = {q}")
            print(f"M = {p * q}")
        case "exponent":
            problems = check_key_inputs(args.prime_p, args.prime_q)
            if problems:
                fail(problems)
            try:
                e = toyrsa.select_exponent(toyrsa.totient(args.prime_p, args.prime_q),
                                           getattr(args, "randomized", False))
            except ValueError as exc:
                fail([str(exc)])
            pspr("Coprime e:")
            print(f"e = {e}")
        case "keygen":
            problems = check_key_inputs(args.prime_p, args.prime_q, args.exponent_e)
            if problems:
                fail(problems)
            (e, m), (d, _) = toyrsa.generate_key_pair(args.prime_p, args.prime_q, args.exponent_e)
            pspr("Public Key (e, M):")
            print(f"({e}, {m})")
            pspr("Private Key (d, M):")
            print(f"({d}, {m})")
            message = getattr(args, "message", None)
            if message is not None:
                rpk = toyrsa.RSAPrivKey(m, e, d, args.prime_p, args.prime_q)
                try:
                    ciph = rpk.pub.encrypt(message)
                except ValueError as exc:
                    fail([str(exc)])
                pspr("Ciphertext and decrypted message:")
                print(ciph)
                print(rpk.decrypt(ciph))
    pspr("\nGoodbye!")


if __name__ == "__main__":
    main()
