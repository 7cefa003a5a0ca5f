"""
Reader for the `.packages` location index.

Each entry maps a package name to the uri of its `lib/` directory, e.g.

    # Generated by pub on 2017-01-01 00:00:00.000.
    args:file:///home/me/.pub-cache/hosted/pub.dartlang.org/args-0.13.7/lib/
    my_app:lib/

The index stores `lib/` uris; this module resolves them to package roots.
"""
import logging
import os
from typing import Dict, Iterable
from urllib.parse import unquote, urlparse
from urllib.request import url2pathname

from pubgraph.utils.exceptions import LocationIndexNotFoundError, MalformedLocationEntryError

logger = logging.getLogger(__name__)

DEFAULT_LOCATION_INDEX_FILE = ".packages"


def read_package_locations(
    package_dir: str, index_file: str = DEFAULT_LOCATION_INDEX_FILE
) -> Dict[str, str]:
    """
    Read the location index of a package.

    Args:
        package_dir: Package root directory containing the index
        index_file: Index file name inside package_dir

    Returns:
        Mapping of package name to absolute package root directory

    Raises:
        LocationIndexNotFoundError: If the index file does not exist
        MalformedLocationEntryError: If any entry cannot be parsed
    """
    index_path = os.path.join(package_dir, index_file)
    if not os.path.isfile(index_path):
        raise LocationIndexNotFoundError(index_path)

    with open(index_path, "r", encoding="utf-8") as f:
        locations = parse_package_locations(f.read().splitlines(), package_dir)

    logger.debug(f"Read {len(locations)} package locations from {index_path}")
    return locations


def parse_package_locations(lines: Iterable[str], package_dir: str) -> Dict[str, str]:
    """Parse location index lines, resolving relative entries against package_dir."""
    base_dir = os.path.abspath(package_dir)
    locations: Dict[str, str] = {}

    for line_number, raw_line in enumerate(lines, start=1):
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue

        name, sep, uri_string = line.partition(":")
        if not sep or not name:
            raise MalformedLocationEntryError(line, line_number, "expected `name:uri`")
        if not uri_string.endswith("lib/"):
            raise MalformedLocationEntryError(line, line_number, "uri must point to a `lib/` directory")

        # Strip the trailing `lib/` and then any trailing slash
        uri_string = uri_string[: -len("lib/")]
        if uri_string.endswith("/"):
            uri_string = uri_string[:-1]

        locations[name] = _uri_to_path(uri_string, base_dir, line, line_number)

    return locations


def _uri_to_path(uri_string: str, base_dir: str, line: str, line_number: int) -> str:
    """Convert a location uri to an absolute filesystem path."""
    parsed = urlparse(uri_string)

    if parsed.scheme == "file":
        path = url2pathname(parsed.path)
    elif not parsed.scheme or len(parsed.scheme) == 1:
        # Relative paths and Windows drive letters have no real scheme
        path = unquote(uri_string)
    else:
        raise MalformedLocationEntryError(line, line_number, f"unsupported uri scheme `{parsed.scheme}`")

    if not os.path.isabs(path):
        path = os.path.join(base_dir, path)
    return os.path.normpath(path)
