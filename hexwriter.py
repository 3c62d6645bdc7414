"""
Streaming hex dump writer.

Wraps a binary sink and turns every byte written to it into rows of the form

0x00000000: 48 65 6C 6C 6F 2C 20 57  6F 72 6C 64 21 0A 0A 4D | Hello, World!..M |

The gutter shows 0x20-0x7E as-is and every other byte, 0x80-0xFF included, as
"." so the dump stays pure ASCII with one column per byte.

Sinks may return None from write() to mean "all written", except io.RawIOBase
sinks, where None means the write would block and is reported as a failure.
"""

import io
import logging

ROW_WIDTH = 16
HALF_ROW = 8
OFFSET_SEPARATOR = ": "

logger = logging.getLogger(__name__)


class SinkWriteFailure(OSError):
    pass


class HexWriter:
    def __init__(self, sink):
        self.sink = sink
        self.position = 0
        self.row = bytearray(ROW_WIDTH)
        self.closed = False
        self.printables = list(map(self.printable, range(256)))
        self.hex = list(map("{:02X}".format, range(256)))

    def printable(self, c):
        return chr(c) if 0x20 <= c < 0x7F else '.'

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        if exc_type is None:
            self.close()
            return
        try:
            self.close()
        except SinkWriteFailure as e:
            logger.error("Hex writer finalisation failed at offset 0x%08X: %s",
                         self.position, e)

    def _sink_write(self, text):
        data = text.encode('ascii')
        try:
            while data:
                n = self.sink.write(data)
                if n is None:
                    # raw streams return None when the write would block
                    if isinstance(self.sink, io.RawIOBase):
                        raise SinkWriteFailure(f"sink would block with {len(data)} byte(s) pending")
                    break
                if n == 0:
                    raise SinkWriteFailure(f"sink accepted 0 of {len(data)} byte(s)")
                data = data[n:]
        except SinkWriteFailure:
            raise
        except (OSError, ValueError) as e:
            raise SinkWriteFailure(f"sink write failed: {e}") from e

    def _byte_text(self, byte, blank):
        text = '  ' if blank else self.hex[byte]
        if self.position % ROW_WIDTH == 0:
            return f"0x{self.position:08X}{OFFSET_SEPARATOR}{text}"
        return text

    def _separator(self):
        if self.position % ROW_WIDTH == 0:
            gutter = "".join([self.printables[x] for x in self.row])
            return f" | {gutter} |\n"
        if self.position % HALF_ROW == 0:
            return '  '
        return ' '

    def _emit(self, data, blank=False):
        for byte in data:
            # position only moves once the byte's hex text reached the sink
            self._sink_write(self._byte_text(byte, blank))
            self.row[self.position % ROW_WIDTH] = byte
            self.position += 1
            separator = self._separator()
            if self.position % ROW_WIDTH == 0:
                self.row = bytearray(ROW_WIDTH)
            self._sink_write(separator)

    def _check_open(self):
        if self.closed:
            raise ValueError("I/O operation on closed hex writer")

    def write(self, data):
        self._check_open()
        data = memoryview(data).cast('B')
        self._emit(data)
        return len(data)

    def writelines(self, chunks):
        for chunk in chunks:
            self.write(chunk)

    def flush(self):
        flush = getattr(self.sink, 'flush', None)
        if flush is None:
            return
        try:
            flush()
        except (OSError, ValueError) as e:
            raise SinkWriteFailure(f"sink flush failed: {e}") from e

    def padding(self):
        return (ROW_WIDTH - self.position % ROW_WIDTH) % ROW_WIDTH

    def close(self):
        if self.closed:
            return
        # Marked first so a failing sink cannot trigger a second padding pass.
        self.closed = True
        extra = self.padding()
        logger.debug("Finalising hex writer: %d byte(s), %d padding byte(s)",
                     self.position, extra)
        self._emit(bytes(extra), blank=True)
        self.flush()


def hexdump(data):
    out = io.BytesIO()
    with HexWriter(out) as writer:
        writer.write(data)
    return out.getvalue().decode('ascii')
