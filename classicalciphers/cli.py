"""
Command-line front end for the Playfair, Hill and Rail Fence engines.

Values not given as options are asked for interactively; every prompt
repeats until the answer is valid.

Examples:
  classical-ciphers --cipher playfair --key monarchy --message instruments --encrypt
  classical-ciphers --cipher railfence --key 3 --message "we are discovered" --encrypt --verbose
  classical-ciphers            # fully interactive
"""
import argparse
import re
import sys
from collections import namedtuple
from typing import List, Optional

from . import history
from .errors import CipherError
from .hill import hill_decrypt, hill_encrypt
from .playfair import playfair_decrypt, playfair_encrypt
from .railfence import is_valid_rail_key, rail_decode, rail_encode, validate_rail_key

CIPHERS = ("playfair", "hill", "railfence")

CIPHER_PATTERN = re.compile(r"^(playfair|hill|railfence)$")
KEY_PATTERN = re.compile(r"^([A-Za-z ]+|[0-9]+)$")
MESSAGE_PATTERN = re.compile(r"^[A-Za-z ]+$")
ANSWER_PATTERN = re.compile(r"^(yes|no|true|false|y|n)$", re.IGNORECASE)

CipherRequest = namedtuple("CipherRequest", ["cipher", "key", "message", "encrypt", "verbose"])

# ===============================
# Input checks
# ===============================

def _pattern_type(pattern, what: str):
    def check(value: str) -> str:
        if not pattern.match(value):
            raise argparse.ArgumentTypeError(f"invalid {what} `{value}`")
        return value
    return check


def is_yes(answer: str) -> bool:
    return answer.strip().lower() in ("yes", "true", "y")


def normalize(text: str) -> str:
    """Lowercase and drop everything that is not a letter (Playfair/Hill input)."""
    return ''.join(ch.lower() for ch in text if ch.isascii() and ch.isalpha())

# ===============================
# Interactive prompts
# ===============================

def ask(question: str, prompt: str, pattern, error: str) -> str:
    while True:
        print(f"\n{question}")
        answer = input(f"{prompt}> ").strip()
        if pattern.match(answer):
            return answer
        print(error.format(answer))


def ask_cipher() -> str:
    return ask("Cipher technique to be used (playfair/hill/railfence)", "cipher",
               CIPHER_PATTERN, "Error: Unknown value `{}`")


def ask_key(cipher: str) -> str:
    if cipher == "railfence":
        while True:
            key = ask("Number of rails to be used (positive integer)", "key",
                      KEY_PATTERN, "Error: Invalid key `{}`. Enter a positive integer.")
            if is_valid_rail_key(key):
                return key
            print(f"Error: Invalid key. The key entered `{key}` cannot be used with RailFence cipher.")
    return ask("Key to be used in the cipher (alphabets only)", "key",
               KEY_PATTERN, "Error: Invalid key `{}`. The key should consist of only alphabets.")


def ask_message() -> str:
    return ask("Message that is to be ciphered (alphabets only)", "message",
               MESSAGE_PATTERN, "Error: Invalid message `{}`. Should consist of alphabets only.")


def ask_yes_no(question: str, prompt: str) -> bool:
    return is_yes(ask(question, prompt, ANSWER_PATTERN, "Error: Unexpected answer `{}`"))

# ===============================
# CLI
# ===============================

def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="classical-ciphers",
        description="Playfair, Hill (3x3) and Rail Fence ciphers with step-by-step trace output",
    )
    p.add_argument("--cipher", choices=CIPHERS, help="Cipher technique to use")
    p.add_argument("--key", type=_pattern_type(KEY_PATTERN, "key"),
                   help="Key: letters for Playfair/Hill, a positive integer (rails) for Rail Fence")
    p.add_argument("--message", type=_pattern_type(MESSAGE_PATTERN, "message"),
                   help="Message to encrypt/decrypt (letters and spaces)")
    mode = p.add_mutually_exclusive_group()
    mode.add_argument("--encrypt", dest="encrypt", action="store_const", const=True, default=None,
                      help="Encrypt the message")
    mode.add_argument("--decrypt", dest="encrypt", action="store_const", const=False,
                      help="Decrypt the message")
    p.add_argument("--verbose", action="store_true", default=None,
                   help="Print the key matrix and every intermediate step")
    p.add_argument("--history", metavar="FILE", help="Append a record of this run to FILE")
    return p


def collect(args: argparse.Namespace, cli_used: bool) -> CipherRequest:
    """Fill in whatever the command line left out by asking the user."""
    cipher = args.cipher or ask_cipher()
    key = args.key if args.key is not None else ask_key(cipher)
    message = args.message if args.message is not None else ask_message()

    if args.verbose is not None:
        verbose = args.verbose
    elif not cli_used:
        verbose = ask_yes_no("Use verbose mode (yes/no)?", "verbose")
    else:
        verbose = False

    if args.encrypt is not None:
        encrypt = args.encrypt
    else:
        encrypt = ask_yes_no("Encrypt the message (yes/no)?", "encrypt/decrypt")

    return CipherRequest(cipher, key, message, encrypt, verbose)


def run(request: CipherRequest) -> str:
    """Normalise the request for its cipher and call the engine."""
    if request.cipher == "railfence":
        key = validate_rail_key(request.key)
        crypt = rail_encode if request.encrypt else rail_decode
        return crypt(key, request.message, request.verbose)

    key = normalize(request.key)
    message = normalize(request.message)
    if request.cipher == "playfair":
        crypt = playfair_encrypt if request.encrypt else playfair_decrypt
    elif request.cipher == "hill":
        crypt = hill_encrypt if request.encrypt else hill_decrypt
    else:
        raise CipherError(f"Undefined cipher type `{request.cipher}`")
    return crypt(message, key, request.verbose)


def main(argv: Optional[List[str]] = None) -> int:
    if argv is None:
        argv = sys.argv[1:]
    args = build_parser().parse_args(argv)

    handler = history.open_history(args.history) if args.history else None
    request = None
    try:
        request = collect(args, cli_used=bool(argv))
        result = run(request)
        history.record_run(request.cipher, request.encrypt, request.key, request.message, result)
    except CipherError as e:
        if request is not None:
            history.record_failure(request.cipher, request.encrypt, request.key, request.message, e)
        print("Error:", e)
        return 1
    except (EOFError, KeyboardInterrupt):
        print("\nAborted.")
        return 1
    finally:
        if handler is not None:
            history.close_history(handler)

    print("\nEncrypted text:" if request.encrypt else "\nDecrypted text:")
    print(result)
    return 0
