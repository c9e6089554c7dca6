"""Type package versions matching each supported GNOME Shell release."""

from __future__ import annotations

from collections.abc import Sequence

PACKAGE_DEPENDENCIES: dict[int, dict[str, str]] = {
    45: {
        "@girs/gjs": "^4.0.0-beta.14",
        "@girs/gnome-shell": "^45.0.0-beta9",
    },
    46: {
        "@girs/gjs": "^4.0.0-beta.14",
        "@girs/gnome-shell": "^46.0.2",
    },
    47: {
        "@girs/gjs": "^4.0.0-beta.14",
        "@girs/gnome-shell": "^47.0.0-next.2",
    },
}


def type_dependencies_for(shell_versions: Sequence[str]) -> dict[str, str]:
    """Return the @girs pins for the newest requested Shell version we know.

    Returns an empty dict when none of the requested versions is listed,
    leaving the template's own pins untouched.
    """
    known = [int(v) for v in shell_versions if v.isdigit() and int(v) in PACKAGE_DEPENDENCIES]
    if not known:
        return {}
    return dict(PACKAGE_DEPENDENCIES[max(known)])
