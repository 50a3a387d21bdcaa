"""Checks that the plugin bin directory is reachable through PATH."""

import logging
import os
import sys

log = logging.getLogger(__name__)

_INSTRUCTION_WINDOWS = """To be able to run kubectl plugins, you need to add the
"%%USERPROFILE%%\\.krew\\bin" directory to your PATH environment variable
and restart your shell."""

_INSTRUCTION_UNIX_TEMPLATE = """To be able to run kubectl plugins, you need to add
the following to your {instruction}

and restart your shell."""

_INSTRUCTION_ZSH = """~/.zshrc:

    export PATH="${KREW_ROOT:-$HOME/.krew}/bin:$PATH\""""

_INSTRUCTION_BASH = """~/.bash_profile or ~/.bashrc:

    export PATH="${KREW_ROOT:-$HOME/.krew}/bin:$PATH\""""

_INSTRUCTION_FISH = """config.fish:

    set -q KREW_ROOT; and set -gx PATH $PATH $KREW_ROOT/.krew/bin; or set -gx PATH $PATH $HOME/.krew/bin"""

_INSTRUCTION_GENERIC = """~/.bash_profile, ~/.bashrc, or ~/.zshrc:

    export PATH="${KREW_ROOT:-$HOME/.krew}/bin:$PATH\""""

_SHELL_INSTRUCTIONS = {
    "/zsh": _INSTRUCTION_ZSH,
    "/bash": _INSTRUCTION_BASH,
    "/fish": _INSTRUCTION_FISH,
}

_PLATFORM_OS = {"win32": "windows", "cygwin": "windows", "darwin": "darwin"}


def _detected_os():
    override = os.environ.get("KREW_OS")
    if override:
        return override
    if sys.platform.startswith("linux"):
        return "linux"
    return _PLATFORM_OS.get(sys.platform, sys.platform)


def is_windows():
    """Tell whether the target OS (``KREW_OS`` or the running one) is Windows."""
    return _detected_os() == "windows"


def is_bin_dir_in_path(base_path, bin_path):
    """Tell whether ``bin_path`` is on PATH; a missing ``base_path`` counts as yes."""
    try:
        os.stat(base_path)
    except FileNotFoundError:
        log.debug("Assuming this is the first run")
        return True
    except OSError:
        log.debug("Assuming this is the first run")
        return False

    wanted = os.path.abspath(bin_path)
    path_value = os.environ.get("PATH", "")
    entries = path_value.split(os.pathsep) if path_value else []
    return any(os.path.abspath(entry) == wanted for entry in entries)


def setup_instructions():
    """Return instructions for adding the bin directory to PATH."""
    if is_windows():
        return _INSTRUCTION_WINDOWS
    shell = os.environ.get("SHELL", "")
    instruction = next(
        (text for suffix, text in _SHELL_INSTRUCTIONS.items() if shell.endswith(suffix)),
        _INSTRUCTION_GENERIC,
    )
    return _INSTRUCTION_UNIX_TEMPLATE.format(instruction=instruction)