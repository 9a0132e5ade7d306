"""Environment loading helpers.

Not invoked at import time. The entry point calls them explicitly so tests and
embedders control when a ``.env`` file is read.
"""

from __future__ import annotations

from dotenv import find_dotenv, load_dotenv


def load_dotenv_if_present() -> bool:
    """Load environment variables from a .env file if one is found.

    Existing variables win over values from the file.
    """

    dotenv_path = find_dotenv(filename=".env", usecwd=True)
    if not dotenv_path:
        return False
    return load_dotenv(dotenv_path=dotenv_path, override=False)
