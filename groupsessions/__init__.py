# SPDX-License-Identifier: MIT
"""Group Sessions: record, browse, edit and delete group session records."""

from groupsessions._version import __version__

__all__ = ["__version__"]
