from .version import __version__
from .percy import Percy, percy_snapshot

__all__ = ["Percy", "percy_snapshot", "__version__"]
