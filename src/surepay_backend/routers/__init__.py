# Router modules are exported here for easier access.

from . import health, root, status

__all__ = ["health", "root", "status"]
