import io
import re

from krewkit.notices import print_security_notice, print_warning


class _TtyStream(io.StringIO):
    def isatty(self):
        return True


def test_print_warning_plain():
    out = io.StringIO()
    print_warning(out, "something happened\n")
    assert out.getvalue() == "WARNING: something happened\n"


def test_print_warning_colored_on_terminal(monkeypatch):
    monkeypatch.delenv("NO_COLOR", raising=False)
    monkeypatch.setenv("TERM", "xterm")
    out = _TtyStream()
    print_warning(out, "careful\n")
    value = out.getvalue()
    assert "\x1b[" in value
    assert re.sub(r"\x1b\[[0-9;]*m", "", value) == "WARNING: careful\n"


def test_print_warning_no_color_env(monkeypatch):
    monkeypatch.setenv("NO_COLOR", "1")
    out = _TtyStream()
    print_warning(out, "careful\n")
    assert out.getvalue() == "WARNING: careful\n"


def test_security_notice_for_plugin():
    out = io.StringIO()
    print_security_notice("ctx", out)
    value = out.getvalue()
    assert value.startswith('WARNING: You installed plugin "ctx" from the krew-index plugin repository.')
    assert "Run them at your own risk." in value
    assert value.endswith("\n")


def test_security_notice_skipped_for_krew():
    out = io.StringIO()
    print_security_notice("krew", out)
    assert out.getvalue() == ""