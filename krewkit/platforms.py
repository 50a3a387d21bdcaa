"""Platform selectors and checks on the platforms a plugin manifest declares."""

import logging
import os
import re
import stat
from dataclasses import dataclass, field

log = logging.getLogger(__name__)

OP_IN = "In"
OP_NOT_IN = "NotIn"
OP_EXISTS = "Exists"
OP_DOES_NOT_EXIST = "DoesNotExist"

_OPERATORS = frozenset({OP_IN, OP_NOT_IN, OP_EXISTS, OP_DOES_NOT_EXIST})

_NAME_PART = re.compile(r"([A-Za-z0-9][-A-Za-z0-9_.]*)?[A-Za-z0-9]")
_DNS_SUBDOMAIN = re.compile(r"[a-z0-9]([-a-z0-9]*[a-z0-9])?(\.[a-z0-9]([-a-z0-9]*[a-z0-9])?)*")
_LABEL_VALUE = re.compile(r"(([A-Za-z0-9][-A-Za-z0-9_.]*)?[A-Za-z0-9])?")

_LICENSE_FILES = frozenset(
    {
        "license",
        "license.txt",
        "license.md",
        "licenses",
        "licenses.txt",
        "licenses.md",
        "copying",
        "copying.txt",
    }
)


class PlatformError(Exception):
    """Raised when a selector or the platforms of a manifest are invalid."""


@dataclass(frozen=True)
class OSArchPair:
    """An operating system and CPU architecture combination."""

    os: str
    arch: str

    def __str__(self):
        return f"{self.os}/{self.arch}"


@dataclass(frozen=True)
class SelectorRequirement:
    """A single ``key operator values`` expression of a label selector."""

    key: str
    operator: str
    values: tuple = ()


def _validate_key(key):
    prefix, sep, name = key.rpartition("/")
    if sep and (not prefix or len(prefix) > 253 or not _DNS_SUBDOMAIN.fullmatch(prefix)):
        raise PlatformError(f"invalid label key {key!r}: bad prefix")
    if not name or len(name) > 63 or not _NAME_PART.fullmatch(name):
        raise PlatformError(f"invalid label key {key!r}")


def _validate_value(value):
    if len(value) > 63 or not _LABEL_VALUE.fullmatch(value):
        raise PlatformError(f"invalid label value {value!r}")


def _check_requirement(requirement):
    _validate_key(requirement.key)
    op = requirement.operator
    if op not in _OPERATORS:
        raise PlatformError(f"{op!r} is not a valid label selector operator")
    if op in (OP_IN, OP_NOT_IN) and not requirement.values:
        raise PlatformError(f"operator {op} requires at least one value")
    if op in (OP_EXISTS, OP_DOES_NOT_EXIST) and requirement.values:
        raise PlatformError(f"operator {op} takes no values")
    for value in requirement.values:
        _validate_value(value)


def _requirement_matches(requirement, labels):
    present = requirement.key in labels
    value = labels.get(requirement.key)
    op = requirement.operator
    if op == OP_IN:
        return present and value in requirement.values
    if op == OP_NOT_IN:
        return not present or value not in requirement.values
    if op == OP_EXISTS:
        return present
    return not present


@dataclass(frozen=True)
class LabelSelector:
    """Selects label sets by exact labels and by expressions, all of which must hold.

    An empty selector matches every label set.
    """

    match_labels: dict = field(default_factory=dict)
    match_expressions: tuple = ()

    def _requirements(self):
        requirements = [
            SelectorRequirement(key, OP_IN, (value,))
            for key, value in self.match_labels.items()
        ]
        requirements.extend(
            SelectorRequirement(r.key, r.operator, tuple(r.values)) for r in self.match_expressions
        )
        for requirement in requirements:
            _check_requirement(requirement)
        return requirements

    def matches(self, labels):
        """Tell whether ``labels`` satisfy the selector; raise PlatformError if it is invalid."""
        return all(_requirement_matches(r, labels) for r in self._requirements())


def all_platforms():
    """Return every <os,arch> pair plugins are supported on."""
    return [
        OSArchPair("windows", "386"),
        OSArchPair("windows", "amd64"),
        OSArchPair("windows", "arm64"),
        OSArchPair("linux", "386"),
        OSArchPair("linux", "amd64"),
        OSArchPair("linux", "arm"),
        OSArchPair("linux", "arm64"),
        OSArchPair("linux", "ppc64le"),
        OSArchPair("darwin", "386"),
        OSArchPair("darwin", "amd64"),
        OSArchPair("darwin", "arm64"),
    ]


def selector_matches_os_arch(selector, env):
    """Tell whether ``selector`` selects ``env``; a missing or invalid selector selects nothing."""
    if selector is None:
        return False
    try:
        return selector.matches({"os": env.os, "arch": env.arch})
    except PlatformError as err:
        log.warning("Failed to convert label selector %r: %s", selector, err)
        return False


def find_any_matching_platform(selector):
    """Return the first supported platform ``selector`` selects, or None."""
    for platform in all_platforms():
        if selector_matches_os_arch(selector, platform):
            log.debug("%r MATCHED <%s>", selector, platform)
            return platform
        log.debug("%r didn't match <%s>", selector, platform)
    return None


def check_overlapping_platform_selectors(selectors):
    """Raise PlatformError if a supported platform is selected by more than one selector."""
    for env in all_platforms():
        hits = [i for i, selector in enumerate(selectors) if selector_matches_os_arch(selector, env)]
        if len(hits) > 1:
            indexes = "[" + " ".join(str(i) for i in hits) + "]"
            raise PlatformError(
                f"multiple spec.platforms (at indexes {indexes}) have overlapping "
                f"selectors that select {env}"
            )


def _regular_files(path):
    """Yield names of regular files below ``path`` in lexical walk order."""
    info = os.lstat(path)
    if stat.S_ISREG(info.st_mode):
        yield os.path.basename(path)
    elif stat.S_ISDIR(info.st_mode):
        for name in sorted(os.listdir(path)):
            yield from _regular_files(os.path.join(path, name))


def validate_license_file_exists(install_dir):
    """Raise PlatformError unless a licence file lies somewhere under ``install_dir``."""
    try:
        files = list(_regular_files(install_dir))
    except OSError as err:
        raise PlatformError(f"failed to walk installation directory: {err}") from err

    for name in files:
        log.debug("found installed file: %s", name)
        if name.lower() in _LICENSE_FILES:
            log.debug("found license file %r", name)
            return
    raise PlatformError(f"could not find license file among [{', '.join(files)}]")