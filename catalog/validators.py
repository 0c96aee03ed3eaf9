# catalog/validators.py
"""Validators that need no database access.

A ``True`` return means the proposed value is acceptable. Whether a field is
required at all is checked separately.
"""
import re
from enum import Enum
from typing import Optional


class VolumeLocation(str, Enum):
    BOX = "Box"                # Book in a box (see notes)
    COMPUTER = "Computer"      # Computer download (PDF etc.)
    KINDLE = "Kindle"          # Kindle download
    KOBO = "Kobo"              # Kobo download
    OTHER = "Other"            # Other location (see notes)
    RETURNED = "Returned"      # Kindle Unlimited, returned
    UNLIMITED = "Unlimited"    # Kindle Unlimited, checked out
    WATCH = "Watch"            # Not yet purchased or downloaded


class VolumeType(str, Enum):
    SINGLE = "Single"          # Single story by the volume author(s)
    COLLECTION = "Collection"  # Collection by the volume author(s)
    ANTHOLOGY = "Anthology"    # Anthology by different authors


LIBRARY_SCOPE_PATTERN = re.compile(r"^[a-zA-Z0-9]+$")

# Every href a user could hand back to us (e.g. as a "back" parameter)
VALID_HREF_PATTERNS = [
    re.compile(r"^/authors/\d+/\d+$"),
    re.compile(r"^/base/\d+$"),
    re.compile(r"^/base/\d+/authors/\d+$"),
    re.compile(r"^/base/\d+/series/\d+$"),
    re.compile(r"^/base/\d+/stories/\d+$"),
    re.compile(r"^/base/\d+/volumes/\d+$"),
    re.compile(r"^/series/\d+/\d+$"),
    re.compile(r"^/stories/\d+/\d+$"),
    re.compile(r"^/volumes/\d+/\d+$"),
]


def validate_href(href: Optional[str]) -> bool:
    if not href:
        return False
    return any(pattern.fullmatch(href) for pattern in VALID_HREF_PATTERNS)


def validate_library_scope(scope: Optional[str]) -> bool:
    if not scope:
        return True
    return LIBRARY_SCOPE_PATTERN.fullmatch(scope) is not None


def validate_volume_location(location: Optional[str]) -> bool:
    if not location:
        return True
    return location in {item.value for item in VolumeLocation}


def validate_volume_type(volume_type: Optional[str]) -> bool:
    if not volume_type:
        return True
    return volume_type in {item.value for item in VolumeType}
