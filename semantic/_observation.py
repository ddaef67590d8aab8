import datetime
from typing import NamedTuple

from semantic._tools._logging import logfmt_str_escape


class Observation(NamedTuple):
    """
    Progress of a traversal through an ``observe`` stage.

    Args:
        subject (``str``): Human-readable description of the elements (e.g., "cats", "dogs", "requests").

        elapsed (``timedelta``): Time elapsed since the traversal reached the stage.

        elements (``int``): Number of elements forwarded so far.
    """

    subject: str
    elapsed: datetime.timedelta
    elements: int

    def __str__(self) -> str:
        """
        Return a logfmt-formatted string representation.

        Returns:
            ``str``: Logfmt string with subject, elapsed, and elements.
        """
        subject = logfmt_str_escape(self.subject)
        elapsed = logfmt_str_escape(str(self.elapsed))
        return f"observed={subject} elapsed={elapsed} elements={self.elements}"
