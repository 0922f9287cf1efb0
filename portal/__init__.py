"""
Portal package for the Research Lab website.

Groups the backend adapter, session handling, access control and the generic
resource managers. Build everything for one browser session through the
container:

```python
from portal import PortalContainer

container = PortalContainer.build()
container.session_store.boot()
```
"""

from .container import PortalContainer  # noqa: F401

__all__ = ["PortalContainer"]
