from tailmerge.parser.directives import parse_directives
from tailmerge.parser.errors import ParseError

__all__ = ["parse_directives", "ParseError"]
