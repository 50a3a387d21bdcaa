# krewkit

krewkit is a small library of building blocks for a kubectl plugin
manager. It uses only the standard library and supports Python 3.10 and
later.

- `krewkit.fuzzy`: fuzzy matching of a pattern against a list of strings.
- `krewkit.search`: plugin search on names first, then on short
  descriptions.
- `krewkit.notices`: the `WARNING:` label and the security notice for
  plugins installed from the default index.
- `krewkit.setup_check`: whether the plugin `bin` directory is on `PATH`,
  and shell-specific instructions for adding it.
- `krewkit.fetch_tag`: the latest release tag from a JSON endpoint.
- `krewkit.platforms`: label selectors over `os`/`arch`, the supported
  platforms, overlap detection between platform selectors, and a check
  that an installed plugin ships a licence file.

## Fuzzy matching

```python
from krewkit.fuzzy import find

for match in find("fb", ["foo", "foobar", "bar"]):
    print(match.text, match.index, match.score)
```

`find` returns `Match` objects (`text`, `index`, `matched_indexes`,
`score`) for every string containing the pattern's characters in order,
ignoring case. Results are sorted best score first; equal scores keep the
order of the input. An empty pattern matches nothing.

## Searching

```python
from krewkit.search import SearchItem, search_by_name_and_desc

targets = [
    SearchItem(name="foo", description="first plugin"),
    SearchItem(name="bar", description="second plugin"),
    SearchItem(name="foobar", description="third plugin"),
]
search_by_name_and_desc("foo", targets)  # ["foo", "foobar"]
search_by_name_and_desc("", targets)     # ["foo", "bar", "foobar"]
```

Name matches come first. A description match is added only when its name
was not already matched and its score is positive.

## Notices

```python
import sys
from krewkit.notices import print_security_notice, print_warning

print_warning(sys.stderr, "something needs attention\n")
print_security_notice("ctx")  # written to stderr
```

`print_warning` writes `WARNING: ` followed by the message; the label is
red and bold when the stream is a terminal, unless `NO_COLOR` is set or
`TERM` is `dumb`. `print_security_notice` says nothing for the plugin
named `krew`, and writes to standard error unless another stream is given.

## Setup checks

```python
from krewkit.setup_check import is_bin_dir_in_path, is_windows, setup_instructions

if not is_bin_dir_in_path("/home/user/.krew", "/home/user/.krew/bin"):
    print(setup_instructions())
```

`is_bin_dir_in_path` returns `True` when the base directory does not exist
yet (a first run), and otherwise compares the absolute form of each `PATH`
entry with the bin directory. `setup_instructions` follows the `SHELL`
environment variable (zsh, bash, fish, or a generic fallback), or gives the
Windows form when `is_windows()` is true. The target operating system can
be overridden with the `KREW_OS` environment variable.

## Latest release tag

```python
from krewkit.fetch_tag import FetchError, fetch_latest_tag

try:
    tag = fetch_latest_tag("http://localhost:8080/releases/latest")
except FetchError as err:
    print(err)
```

The endpoint must answer `200 OK` with a JSON object; its `tag_name` is
returned, or an empty string when the field is missing. Network errors,
other status codes and malformed JSON raise `FetchError`.

## Platform validation

```python
from krewkit.platforms import (
    OP_IN,
    LabelSelector,
    PlatformError,
    SelectorRequirement,
    all_platforms,
    check_overlapping_platform_selectors,
    find_any_matching_platform,
)

darwin = LabelSelector(match_labels={"os": "darwin"})
print(find_any_matching_platform(darwin))  # darwin/386

unix = LabelSelector(
    match_expressions=(SelectorRequirement("os", OP_IN, ("darwin", "linux")),)
)
try:
    check_overlapping_platform_selectors([darwin, unix])
except PlatformError as err:
    print(err)
```

- `all_platforms()` lists the supported `OSArchPair` values.
- `LabelSelector.matches(labels)` requires every label and expression to
  hold (operators `In`, `NotIn`, `Exists`, `DoesNotExist`); an empty
  selector matches everything, and an invalid one raises `PlatformError`.
- `selector_matches_os_arch(selector, env)` returns `False` for a missing
  or invalid selector.
- `find_any_matching_platform(selector)` returns the first supported pair
  selected, or `None`.
- `check_overlapping_platform_selectors(selectors)` raises `PlatformError`
  when one supported pair is selected by more than one selector.
- `validate_license_file_exists(install_dir)` raises `PlatformError` unless
  a file such as `LICENSE`, `LICENSE.md` or `COPYING` lies somewhere under
  the directory.

## What krewkit does not do

krewkit has no command line and does not install, upgrade or remove
plugins, clone or update plugin indexes, or read plugin manifests or
install receipts. It offers no helpers for plugin display names, table
output, or reporting new plugins and upgrades after an index refresh.

## Running the tests

Install the `test` extra and run pytest from the project directory.