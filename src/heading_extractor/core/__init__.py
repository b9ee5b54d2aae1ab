"""Settings, errors, logging and the extraction workflow.

Importing this package loads the nearest ``.env`` file, searched upward from
the working directory, so ``HEADINGS_*`` settings can sit next to the papers.
Variables already present in the environment win.
"""

from dotenv import find_dotenv, load_dotenv


def load_env_file() -> str:
    """Load the nearest ``.env`` file without overriding set variables.

    Returns:
        Path of the loaded file, or an empty string when there is none
    """
    path = find_dotenv(usecwd=True)
    if path:
        load_dotenv(path, override=False)
    return path


ENV_FILE = load_env_file()
