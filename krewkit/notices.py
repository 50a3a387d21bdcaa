"""Warnings printed to the user."""

import json
import os
import sys

KREW_PLUGIN_NAME = "krew"

_WARNING_STYLE = "\x1b[31;1m"
_RESET_STYLE = "\x1b[0m"

_SECURITY_NOTICE = (
    "You installed plugin {plugin} from the krew-index plugin repository.\n"
    "   These plugins are not audited for security by the Krew maintainers.\n"
    "   Run them at your own risk.\n"
)


def _use_color(out):
    if "NO_COLOR" in os.environ or os.environ.get("TERM") == "dumb":
        return False
    isatty = getattr(out, "isatty", None)
    return bool(isatty and isatty())


def print_warning(out, message):
    """Write ``message`` to ``out`` behind a ``WARNING:`` label."""
    label = "WARNING: "
    if _use_color(out):
        label = f"{_WARNING_STYLE}{label}{_RESET_STYLE}"
    out.write(label + message)


def print_security_notice(plugin, out=None):
    """Warn that a plugin from the default index was not audited."""
    if plugin == KREW_PLUGIN_NAME:
        return
    quoted = json.dumps(plugin, ensure_ascii=False)
    print_warning(out if out is not None else sys.stderr, _SECURITY_NOTICE.format(plugin=quoted))