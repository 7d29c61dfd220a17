"""Option name classification for command-line tokens."""

__all__ = ["is_valid_name", "binary_name_from_path"]


def is_valid_name(name: str) -> bool:
    """
    Check whether a token is shaped like an option name.

    A name is valid when it starts with a dash and the character after the
    leading dash(es) is a letter.

    Examples:
        '-x' -> True
        '--output' -> True
        '-1' -> False
        '--' -> False
        'value' -> False

    Args:
        name: Candidate option name or raw token

    Returns:
        True if the token names an option, False otherwise
    """
    if len(name) <= 1 or name[0] != "-":
        return False
    if len(name) == 2:
        return name[1].isalpha()
    return name[2 if name[1] == "-" else 1].isalpha()


def binary_name_from_path(path: str) -> str:
    """
    Extract the binary name from the invoking path (first argv token).

    Both '/' and '\\' count as path separators.

    Examples:
        '/usr/local/bin/tool' -> 'tool'
        'C:\\tools\\tool.exe' -> 'tool.exe'
        'tool' -> 'tool'
    """
    pos = max(path.rfind("/"), path.rfind("\\"))
    return path[pos + 1:]
