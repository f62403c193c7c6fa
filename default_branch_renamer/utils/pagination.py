"""Contains helpers for GitHub's Link-header based pagination."""

import httpx


def get_last_page(raw_response: httpx.Response) -> int | None:
    """Return the page number of the response's `last` link, or None if there is none.

    GitHub omits the `last` link when the response is the only page (and on
    the final page of a listing).
    """
    last_url = raw_response.links.get("last", {}).get("url")
    if last_url is None:
        return None
    page = httpx.URL(last_url).params.get("page")
    if page is None:
        return None
    try:
        return int(page)
    except ValueError:
        return None
