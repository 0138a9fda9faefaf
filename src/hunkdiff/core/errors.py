"""Error types raised by the diff core"""


class MalformedEditScript(ValueError):
    """An edit script broke its contract: bad indices, gaps, overlaps or late runs."""
