"""
Converter errors.

Every failure of a conversion is terminal: nothing is retried and
no output document is written once one of these is raised.
"""


class GPXRouteError(Exception):
    """Base converter error."""
    pass


class MissingArgumentError(GPXRouteError):
    """No input file was given on the command line."""
    pass


class FileReadError(GPXRouteError):
    """Input file could not be read."""
    pass


class ParseError(GPXRouteError):
    """Input is not a GPX document with a track and a segment."""
    pass


class InvalidTrackError(GPXRouteError):
    """Track has no points, or a point has a missing/invalid coordinate."""
    pass


class OutputWriteError(GPXRouteError):
    """Output documents could not be written."""
    pass
