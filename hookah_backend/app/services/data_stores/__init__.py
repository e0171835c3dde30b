# hookah_backend/app/services/data_stores/__init__.py
"""
Unified export surface for data store helpers.

Import from here in routers/service code, e.g.:
    from hookah_backend.app.services.data_stores import (
        # IO
        read_json, atomic_write,
        # Flavors
        list_flavors, get_flavor, create_flavor, update_flavor, delete_flavor,
        # Guest mixes
        list_guest_mixes, append_guest_mix, delete_guest_mix,
        like_guest_mix, unlike_guest_mix,
    )
"""

from __future__ import annotations

# ---- Low-level IO helpers ----
from .io_utils import read_json, atomic_write, read_json_list, write_json_list  # noqa: F401

# ---- Flavor catalog ----
from .flavors import (  # noqa: F401
    FlavorExistsError,
    list_flavors,
    get_flavor,
    create_flavor,
    update_flavor,
    delete_flavor,
)

# ---- Guest mixes gallery ----
from .guest_mixes import (  # noqa: F401
    list_guest_mixes,
    append_guest_mix,
    delete_guest_mix,
    like_guest_mix,
    unlike_guest_mix,
)

__all__ = [
    # io_utils
    "read_json", "atomic_write", "read_json_list", "write_json_list",
    # flavors
    "FlavorExistsError", "list_flavors", "get_flavor", "create_flavor",
    "update_flavor", "delete_flavor",
    # guest mixes
    "list_guest_mixes", "append_guest_mix", "delete_guest_mix",
    "like_guest_mix", "unlike_guest_mix",
]
