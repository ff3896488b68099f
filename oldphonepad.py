#!/usr/bin/env python3
"""
Old Phone Keypad Decoder

Decode multi-tap keypad input, as typed on an old mobile phone, into text.

Keys:
    2-9     : letters, press repeatedly to cycle (2 = A, 22 = B, 222 = C)
    1       : & ' (
    0       : space, one per press
    <space> : pause, separates two letters on the same key
    *       : backspace
    #       : send, must end the sequence

Examples:
    # Decode a sequence
    python3 oldphonepad.py decode "4433555 555666#"
    # Output: HELLO

    # Show every decoding step
    python3 oldphonepad.py decode --explain "227*#"

    # Decode one sequence per line from stdin
    echo "33#" | python3 oldphonepad.py decode -

    # Keypad legend, example battery, then interactive prompt
    python3 oldphonepad.py demo
"""

import sys
import logging
import argparse
from types import MappingProxyType
from typing import Iterable, Iterator, List, NamedTuple, Optional


logger = logging.getLogger(__name__)


# Keypad Mapping

KEYPAD = MappingProxyType({
    '0': ' ',
    '1': "&'(",
    '2': 'ABC',
    '3': 'DEF',
    '4': 'GHI',
    '5': 'JKL',
    '6': 'MNO',
    '7': 'PQRS',
    '8': 'TUV',
    '9': 'WXYZ',
})

SEND_KEY = '#'
BACKSPACE_KEY = '*'
SPACE_KEY = '0'
PAUSE = ' '

VALID_CHARS = frozenset(KEYPAD) | {SEND_KEY, BACKSPACE_KEY, PAUSE}


def get_mapping(digit: str) -> str:
    """Return the characters a key cycles through ('' for unknown keys)."""
    return KEYPAD.get(digit, '')


def has_mapping(digit: str) -> bool:
    """Check whether a key has a character mapping."""
    return digit in KEYPAD


# Errors

class PhonePadError(ValueError):
    """Base class for malformed keypad sequences."""


class NullInputError(PhonePadError):
    """No sequence was supplied at all."""

    def __init__(self):
        super().__init__("Input cannot be None.")


class FormatError(PhonePadError):
    """Sequence is empty, unterminated, or holds an illegal character."""

    def __init__(self, message: str, char: Optional[str] = None,
                 position: Optional[int] = None):
        super().__init__(message)
        self.char = char
        self.position = position


# Validation

def is_valid(sequence: Optional[str]) -> bool:
    """
    Check whether a sequence is well formed.

    True when the sequence is non-empty, ends with '#', and holds nothing
    else but digits, spaces and '*'. A valid sequence always decodes.
    """
    if not sequence or not sequence.endswith(SEND_KEY):
        return False
    return all(c in VALID_CHARS and c != SEND_KEY for c in sequence[:-1])


def strip_send(sequence: Optional[str]) -> str:
    """Check the sequence framing and return it without the send marker."""
    if sequence is None:
        raise NullInputError()
    if not sequence:
        raise FormatError("Input cannot be empty.")
    if not sequence.endswith(SEND_KEY):
        raise FormatError(f"Input must end with '{SEND_KEY}' (send button).")
    return sequence[:-1]


# Scanning

FLUSH = 'flush'
SPACE = 'space'
BACKSPACE = 'backspace'


class Step(NamedTuple):
    """A single decoding event."""
    action: str
    reason: str
    key: Optional[str] = None
    presses: int = 0


def cycle(key: str, presses: int) -> str:
    """Character produced by pressing a key repeatedly (wraps around)."""
    letters = KEYPAD[key]
    return letters[(presses - 1) % len(letters)]


def scan(body: str) -> Iterator[Step]:
    """
    Walk a sequence body (send marker removed) and yield decoding steps.

    The pending run is a (key, presses) pair. It is flushed by a pause,
    a backspace, a zero, a different key, or the end of input. Every
    zero yields its own space step.

    Raises:
        FormatError: on a character outside the keypad alphabet
    """
    key = None
    presses = 0

    for position, char in enumerate(body):
        if char == PAUSE:
            reason = 'pause'
        elif char == BACKSPACE_KEY:
            reason = 'backspace'
        elif char == SPACE_KEY:
            reason = 'zero'
        elif char in KEYPAD:
            if char == key:
                presses += 1
                continue
            reason = 'new key'
        else:
            raise FormatError(
                f"Invalid character '{char}' at position {position}. "
                "Only 0-9, *, #, and space are allowed.",
                char=char, position=position)

        if key is not None:
            yield Step(FLUSH, reason, key, presses)
            key, presses = None, 0

        if char == BACKSPACE_KEY:
            yield Step(BACKSPACE, reason)
        elif char == SPACE_KEY:
            yield Step(SPACE, reason, char, 1)
        elif char != PAUSE:
            key, presses = char, 1

    if key is not None:
        yield Step(FLUSH, 'end', key, presses)


# Decoding

def decode(sequence: str) -> str:
    """
    Decode a keypad sequence to text.

    Args:
        sequence: Key presses ending with '#', e.g. "4433555 555666#"

    Returns:
        Decoded text (empty for "#")

    Raises:
        NullInputError: if sequence is None
        FormatError: if sequence is empty, does not end with '#', or holds
            an illegal character
    """
    output: List[str] = []

    for step in scan(strip_send(sequence)):
        if step.action == FLUSH:
            char = cycle(step.key, step.presses)
            logger.debug("%s: '%s' x%d -> %r",
                         step.reason, step.key, step.presses, char)
            output.append(char)
        elif step.action == SPACE:
            output.append(KEYPAD[SPACE_KEY])
        elif output:
            removed = output.pop()
            logger.debug("backspace: removed %r", removed)
        else:
            logger.debug("backspace: nothing to remove")

    return ''.join(output)


# Tracing

FLUSH_REASONS = {
    'pause': 'Pause detected',
    'new key': 'New key pressed',
    'zero': 'Zero key next',
    'backspace': 'Backspace next',
    'end': 'End of input',
}


def describe(step: Step) -> str:
    """Human-readable description of one step."""
    if step.action == SPACE:
        return "Zero key pressed - inserting space"
    if step.action == BACKSPACE:
        return "Backspace key pressed"
    run = step.key * step.presses
    char = cycle(step.key, step.presses)
    return f"{FLUSH_REASONS[step.reason]} - processing '{run}' -> '{char}'"


def trace(sequence: str) -> List[str]:
    """List the decoding steps of a sequence, in order."""
    return [describe(step) for step in scan(strip_send(sequence))]


def explain(sequence: str) -> str:
    """
    Explain how a sequence decodes, step by step.

    The result line comes from decode() itself.
    """
    if not is_valid(sequence):
        return "Invalid input format"

    lines = [f"Input: {sequence}", "Processing steps:"]
    for number, text in enumerate(trace(sequence), 1):
        lines.append(f"  Step {number}: {text}")
    lines.append(f"Result: {decode(sequence)}")
    return '\n'.join(lines) + '\n'


# Demo

KEYPAD_LEGEND = """\
Phone Keypad Reference:
+-----+-----+-----+
|  1  |  2  |  3  |
| &'( | ABC | DEF |
+-----+-----+-----+
|  4  |  5  |  6  |
| GHI | JKL | MNO |
+-----+-----+-----+
|  7  |  8  |  9  |
|PQRS | TUV |WXYZ |
+-----+-----+-----+
|  *  |  0  |  #  |
|  <- |space| SEND|
+-----+-----+-----+

Tips:
  - Press a key multiple times to cycle through letters
  - Use space to pause between same-key letters
  - Use * for backspace
  - Always end with # to send"""

EXAMPLES = [
    ("33#", "E", "Simple: Press 3 twice"),
    ("227*#", "B", "With backspace"),
    ("4433555 555666#", "HELLO", "Word with pause"),
    ("8 88777444666*664#", "TURING", "Complex with backspace"),
    ("222 2 22#", "CAB", "Same key with pauses"),
    ("4433555 555666 0 9666777555 3#", "HELLO WORLD", "Full sentence"),
]


def show_keypad() -> None:
    """Print the keypad legend."""
    print(KEYPAD_LEGEND)


def run_examples() -> bool:
    """Decode the example battery. Returns True if every case passes."""
    passed = 0

    for sequence, expected, description in EXAMPLES:
        print(f"Test: {description}")
        print(f"Input:    {sequence}")
        print(f"Expected: {expected}")
        try:
            result = decode(sequence)
        except PhonePadError as e:
            print(f"ERROR: {e}\n")
            continue

        ok = result == expected
        passed += ok
        print(f"Result:   {result} {'PASS' if ok else 'FAIL'}\n")

    print(f"{passed}/{len(EXAMPLES)} examples passed")
    return passed == len(EXAMPLES)


def run_interactive(show_steps: bool = False) -> None:
    """Prompt for sequences until 'exit' or end of input."""
    print("Enter your own inputs to test (type 'exit' to quit).")
    print("Remember to end each input with '#'\n")

    while True:
        try:
            line = input("Input: ")
        except EOFError:
            print()
            break

        if line.strip().lower() == 'exit':
            print("\nThank you for using the Old Phone Keypad Decoder!")
            break

        if not line.strip():
            print("Please enter a valid input.\n")
            continue

        if not is_valid(line):
            print("Invalid input format. Make sure to:")
            print("   - Use only digits 0-9, space, * and #")
            print("   - End with # (send button)\n")
            continue

        print(f"Output: {decode(line)}")
        if show_steps:
            print(explain(line))
        else:
            print()


# I/O

def read_sequences(args: List[str]) -> Iterable[str]:
    """Yield sequences from arguments, or one per stdin line for '-'."""
    if not args or args == ['-']:
        for line in sys.stdin:
            line = line.rstrip('\r\n')
            if line:
                yield line
    else:
        yield from args


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(
        description='Old phone multi-tap keypad decoder',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__
    )
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Log decoding steps to stderr')

    subparsers = parser.add_subparsers(dest='command', required=True,
                                       help='Operation mode')

    # Decode command
    decode_parser = subparsers.add_parser('decode',
                                          help='Decode keypad sequences')
    decode_parser.add_argument('sequences', nargs='*', metavar='SEQUENCE',
                               help="Sequences to decode (default or '-': stdin)")
    decode_parser.add_argument('-e', '--explain', action='store_true',
                               help='Show each decoding step')

    subparsers.add_parser('keypad', help='Show the keypad legend')
    subparsers.add_parser('examples', help='Run the example conversions')

    interactive_parser = subparsers.add_parser('interactive',
                                               help='Decode typed sequences')
    demo_parser = subparsers.add_parser('demo',
                                        help='Legend, examples, then prompt')
    for sub in (interactive_parser, demo_parser):
        sub.add_argument('-e', '--explain', action='store_true',
                         help='Show each decoding step')

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s',
        stream=sys.stderr
    )

    try:
        if args.command == 'decode':
            for sequence in read_sequences(args.sequences):
                text = decode(sequence)
                if args.explain:
                    print(explain(sequence), end='')
                else:
                    print(text)

        elif args.command == 'keypad':
            show_keypad()

        elif args.command == 'examples':
            if not run_examples():
                sys.exit(1)

        elif args.command == 'interactive':
            run_interactive(args.explain)

        else:  # demo
            show_keypad()
            print()
            all_passed = run_examples()
            print()
            run_interactive(args.explain)
            if not all_passed:
                sys.exit(1)

    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    except KeyboardInterrupt:
        print("\nInterrupted", file=sys.stderr)
        sys.exit(1)


if __name__ == '__main__':
    main()
