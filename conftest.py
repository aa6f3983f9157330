# SPDX-License-Identifier: MIT
# Copyright (c) 2025 microsoft-login contributors

"""Root conftest.py so microsoft_login is importable without installing."""

import sys
from pathlib import Path

_repo_root = Path(__file__).parent
if str(_repo_root) not in sys.path:
    sys.path.insert(0, str(_repo_root))
