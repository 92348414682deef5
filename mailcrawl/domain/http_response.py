from typing import NamedTuple


class HttpResponse(NamedTuple):
    """Response from HTTP fetch operation.

    `text` is only populated for 200 responses; other statuses are not read.
    """
    url: str
    status_code: int
    text: str = ""
