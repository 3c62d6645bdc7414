import os
import sys
import getopt

import hexwriter

VERSION = "Hex Writer Cat  Version 1.00"

exe = os.path.basename(sys.argv[0])
usage_msg = f"""
Usage: {exe} [-o file] [-s chunk_size] [-?] [-v] [file ...]

Options:
  -o file         - write the dump to a file instead of stdout
  -s chunk_size   - read size in bytes (default 4096)
  -?              - this help
  -v              - version

Reads standard input when no file (or '-') is given.
"""

DEFAULT_CHUNK_SIZE = 4096


def usage():
    print(usage_msg)
    return 1


def error(msg):
    print(f"error: {msg}", file=sys.stderr)
    return 1


def parse_args(argv):
    opts, args = getopt.getopt(argv, "o:s:?v")

    flags = {
        "output": None,
        "chunk_size": DEFAULT_CHUNK_SIZE,
        "help": False,
        "version": False,
    }

    for opt, val in opts:
        if opt == "-o":
            flags["output"] = val
        elif opt == "-s":
            flags["chunk_size"] = int(val)
            if flags["chunk_size"] <= 0:
                raise ValueError("chunk size must be positive")
        elif opt == "-?":
            flags["help"] = True
        elif opt == "-v":
            flags["version"] = True

    return flags, args or ["-"]


def read_chunks(stream, chunk_size):
    while True:
        chunk = stream.read(chunk_size)
        if not chunk:
            return
        yield chunk


def dump_file(writer, name, chunk_size):
    if name == "-":
        writer.writelines(read_chunks(sys.stdin.buffer, chunk_size))
        return
    with open(name, "rb") as f:
        writer.writelines(read_chunks(f, chunk_size))


def dump(sink, names, chunk_size):
    with hexwriter.HexWriter(sink) as writer:
        for name in names:
            dump_file(writer, name, chunk_size)


def main(argv=None):
    if argv is None:
        argv = sys.argv[1:]

    try:
        flags, names = parse_args(argv)
    except (getopt.GetoptError, ValueError) as e:
        print(f"error: {e}\n")
        return usage()

    if flags["help"]:
        return usage()

    if flags["version"]:
        print(VERSION)
        return 1

    try:
        if flags["output"]:
            with open(flags["output"], "wb") as sink:
                dump(sink, names, flags["chunk_size"])
        else:
            dump(sys.stdout.buffer, names, flags["chunk_size"])
    except OSError as e:
        return error(e)

    return 0


if __name__ == "__main__":
    sys.exit(main())
