# domain/geometry/text_io.py
"""
Whitespace-separated text form of the geometric types.

A Vector is two scalars (x y), a Line three (a b c), and a Beam or Segment
two vectors in a row. Tokens may be split across lines arbitrarily, which
is how problem input is usually laid out.
"""
import io
import logging
from typing import Iterator, Optional, TextIO, Union
from geomprim.domain.geometry.vector import Vector
from geomprim.domain.geometry.line import Line
from geomprim.domain.geometry.beam import Beam
from geomprim.domain.geometry.segment import Segment

logger = logging.getLogger(__name__)


class GeometryReader:
    """Reads scalars and geometric values from a string or a text stream."""

    def __init__(self, source: Union[str, TextIO]) -> None:
        if isinstance(source, str):
            source = io.StringIO(source)
        self._tokens = self._tokenize(source)
        self._peeked: Optional[str] = None
        self.position = 0  # Number of tokens consumed so far

    @staticmethod
    def _tokenize(stream: TextIO) -> Iterator[str]:
        for line in stream:
            yield from line.split()

    def _next_token(self) -> str:
        if self._peeked is not None:
            token, self._peeked = self._peeked, None
        else:
            token = next(self._tokens, None)
            if token is None:
                raise ValueError(f"Unexpected end of input after {self.position} tokens")
        self.position += 1
        return token

    def at_end(self) -> bool:
        """True when no tokens are left."""
        if self._peeked is None:
            self._peeked = next(self._tokens, None)
        return self._peeked is None

    def read_scalar(self) -> float:
        token = self._next_token()
        try:
            return float(token)
        except ValueError:
            raise ValueError(f"Expected a number at token {self.position}, got {token!r}") from None

    def read_vector(self) -> Vector:
        x = self.read_scalar()
        y = self.read_scalar()
        return Vector(x=x, y=y)

    def read_line(self) -> Line:
        a = self.read_scalar()
        b = self.read_scalar()
        c = self.read_scalar()
        return Line(a=a, b=b, c=c)

    def read_beam(self) -> Beam:
        origin = self.read_vector()
        through = self.read_vector()
        return Beam(origin=origin, through=through)

    def read_segment(self) -> Segment:
        a = self.read_vector()
        b = self.read_vector()
        return Segment(a=a, b=b)


def _parse_all(text: str, read):
    reader = GeometryReader(text)
    value = read(reader)
    if not reader.at_end():
        raise ValueError(f"Unexpected trailing input after {reader.position} tokens")
    logger.debug(f"Parsed {value!r} from {reader.position} tokens")
    return value


def parse_vector(text: str) -> Vector:
    return _parse_all(text, GeometryReader.read_vector)


def parse_line(text: str) -> Line:
    return _parse_all(text, GeometryReader.read_line)


def parse_beam(text: str) -> Beam:
    return _parse_all(text, GeometryReader.read_beam)


def parse_segment(text: str) -> Segment:
    return _parse_all(text, GeometryReader.read_segment)


def format_vector(vector: Vector) -> str:
    return vector.format_as_text()


def format_line(line: Line) -> str:
    return line.format_as_text()


def format_beam(beam: Beam) -> str:
    return f"{format_vector(beam.origin)} {format_vector(beam.through)}"


def format_segment(segment: Segment) -> str:
    return f"{format_vector(segment.a)} {format_vector(segment.b)}"
