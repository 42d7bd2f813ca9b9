from __future__ import annotations


def load_dotenv(env_file: str | None) -> bool:
    """Load environment variables from a dotenv file if one is configured.

    Values already present in the process environment win over the file.
    Returns True when a file was found and read.
    """

    if not env_file:
        return False

    from dotenv import load_dotenv as dotenv_load_dotenv

    return dotenv_load_dotenv(env_file, override=False)
