# input_reader.py

import sys


def read_file(path):
    """
    Read the whole input file and return it with trailing newlines removed.
    """
    with open(path, 'r', encoding='utf-8', errors='replace') as f:
        return f.read().rstrip('\n')


def read_stdin(stream=None):
    """Read piped or redirected standard input, trailing newlines removed."""
    stream = sys.stdin if stream is None else stream
    return stream.read().rstrip('\n')


def read_interactive(stream=None, prompt_stream=None):
    """
    Read lines typed by the user until end-of-input (CTRL+D, or CTRL+Z on
    Windows) and return them joined, without the trailing newline.
    """
    stream = sys.stdin if stream is None else stream
    prompt_stream = sys.stderr if prompt_stream is None else prompt_stream

    eof_keys = "CTRL+Z" if sys.platform.startswith('win') else "CTRL+D"
    print(f"Please enter the input text. Press {eof_keys} to finish.", file=prompt_stream)

    lines = [line.rstrip('\r\n') for line in stream]
    return "\n".join(lines).rstrip('\n')


def stdin_is_piped(stream=None):
    stream = sys.stdin if stream is None else stream
    try:
        return not stream.isatty()
    except (AttributeError, ValueError):
        return False


def acquire_input(args, input_file=None, stream=None):
    """
    Pick the input source: an input file, then piped stdin, then the command
    line arguments, and finally an interactive session.
    """
    if input_file:
        return read_file(input_file)
    if stdin_is_piped(stream):
        return read_stdin(stream)
    if args:
        return " ".join(args)
    return read_interactive(stream)
