from __future__ import annotations

import os

# Keep telelog quiet while the suite runs; must happen before ed_engine imports.
os.environ.setdefault("ED_ENGINE_DISABLE_CONSOLE", "1")
