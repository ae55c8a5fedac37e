"""
KMZ archive factories - build real zip archives on disk.

Placemark names and coordinates are randomized so tests cannot rely on
specific document contents.
"""

import os
import random
import string
import zipfile
from typing import Dict, Optional


def _random_suffix(length: int = 6) -> str:
    """Generate random alphanumeric suffix."""
    return "".join(random.choices(string.ascii_lowercase + string.digits, k=length))


def make_kml(placemarks: int = 2, document_name: str = None) -> str:
    """
    Build a small KML document with point placemarks.

    Args:
        placemarks: Number of point placemarks (0 gives an empty document)
        document_name: Optional fixed <Document><name>
    """
    items = []
    for i in range(placemarks):
        lon = round(random.uniform(-120.0, -70.0), 5)
        lat = round(random.uniform(25.0, 48.0), 5)
        items.append(
            f"<Placemark><name>pt-{i}-{_random_suffix()}</name>"
            f"<Point><coordinates>{lon},{lat},0</coordinates></Point></Placemark>"
        )
    name = document_name or f"doc-{_random_suffix()}"
    return (
        '<?xml version="1.0" encoding="UTF-8"?>'
        '<kml xmlns="http://www.opengis.net/kml/2.2"><Document>'
        f"<name>{name}</name>{''.join(items)}"
        "</Document></kml>"
    )


def make_kmz(
    path: str,
    members: Optional[Dict[str, str]] = None,
    placemarks: int = 2
) -> str:
    """
    Write a KMZ (zip) archive.

    Args:
        path: Archive path; parent folders are created
        members: Archive member name -> text content. Defaults to a single
            doc.kml with `placemarks` points.
        placemarks: Points in the default doc.kml

    Returns:
        The archive path
    """
    if members is None:
        members = {"doc.kml": make_kml(placemarks)}

    os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
    with zipfile.ZipFile(path, "w", compression=zipfile.ZIP_DEFLATED) as z:
        for name, content in members.items():
            z.writestr(name, content)
    return path


def make_malformed_kmz(path: str) -> str:
    """KMZ that extracts to zero KML files (only an icon)."""
    return make_kmz(path, members={"files/icon.png": "not-really-a-png"})
