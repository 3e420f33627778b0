__title__ = 'cmdtree'
__license__ = 'MIT'
# Placeholder, modified by dynamic-versioning.
__version__ = "0.0.0"

from .sentinel import *
from .binding import *
from .context import *
from .dispatcher import *
from .faults import *
from .nodes import *
from .rendering import *
from .trees import *

VersionInfo = __import__("collections").namedtuple("VersionInfo", (
    "major",
    "minor",
    "micro",
    "releaselevel",
    "serial",
    "metadata"
))

# Placeholder, modified by dynamic-versioning.
version_info = VersionInfo(0, 0, 0, "final", 0, "")

__all__ = (
    "__title__",
    "__license__",
    "__version__",
    "version_info"
)

# Load the exposed API of every module
__all__ += sentinel.__all__  # type: ignore[attr-defined]
__all__ += binding.__all__  # type: ignore[attr-defined]
__all__ += context.__all__  # type: ignore[attr-defined]
__all__ += dispatcher.__all__  # type: ignore[attr-defined]
__all__ += faults.__all__  # type: ignore[attr-defined]
__all__ += nodes.__all__  # type: ignore[attr-defined]
__all__ += rendering.__all__  # type: ignore[attr-defined]
__all__ += trees.__all__  # type: ignore[attr-defined]
