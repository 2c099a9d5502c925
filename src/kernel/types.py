"""
Shared type aliases for the kernel layer.
"""

import uuid
from typing import Union

# Identifiers are opaque, comparable keys: integers in the SQL schema, UUIDs
# for stores that use them. "Absent" is always None, never a falsy id.
EntityId = Union[int, uuid.UUID]
