"""Lookup of the newest released tag."""

import json
import logging
import urllib.error
import urllib.request

log = logging.getLogger(__name__)

_TIMEOUT_SECONDS = 30


class FetchError(Exception):
    """Raised when the latest release tag cannot be retrieved."""


def fetch_latest_tag(url):
    """Return the ``tag_name`` of the latest release served at ``url``."""
    log.debug("Fetching latest tag from %s", url)
    try:
        with urllib.request.urlopen(url, timeout=_TIMEOUT_SECONDS) as response:
            status, reason = response.status, response.reason
            body = response.read()
    except urllib.error.HTTPError as err:
        raise FetchError(f"expected HTTP status 200 OK, got {err.code} {err.reason}") from err
    except OSError as err:
        raise FetchError(f"could not GET the latest release: {err}") from err

    if status != 200:
        raise FetchError(f"expected HTTP status 200 OK, got {status} {reason}")

    log.debug("Parsing response")
    try:
        data, _ = json.JSONDecoder().raw_decode(body.decode("utf-8").lstrip())
    except (UnicodeDecodeError, json.JSONDecodeError) as err:
        raise FetchError(f"could not parse the response: {err}") from err

    if data is None:
        return ""
    if not isinstance(data, dict):
        raise FetchError("could not parse the response: expected a JSON object")
    tag = data.get("tag_name")
    if tag is None:
        tag = ""
    if not isinstance(tag, str):
        raise FetchError("could not parse the response: tag_name is not a string")
    log.debug("Fetched latest tag name (%s)", tag)
    return tag