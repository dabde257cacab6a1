"""Project name validation.

Applies the npm package naming rules to a proposed project name, since the
name becomes both the directory name and the ``name`` field of the generated
``package.json``.  Problems are reported, never raised: the caller decides
whether to abort.

Rules are split the way npm splits them:

* **errors** make a name unusable for any package;
* **warnings** cover names npm still accepts for legacy packages but
  rejects for new ones (capitals, special characters, core module names,
  over-long names).

A name is ``valid`` only when it has neither.

Scoped names (``@scope/pkg``) are checked like npm checks them but are
still rejected: the name is also the directory created below the output
directory and the database name in generated URLs, so it cannot contain a
slash.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from urllib.parse import quote

MAX_NAME_LENGTH = 214

BLACKLISTED_NAMES: frozenset[str] = frozenset({"node_modules", "favicon.ico"})

# Node.js built-in modules (``require('module').builtinModules``).
CORE_MODULE_NAMES: frozenset[str] = frozenset({
    "assert", "async_hooks", "buffer", "child_process", "cluster", "console",
    "constants", "crypto", "dgram", "diagnostics_channel", "dns", "domain",
    "events", "fs", "http", "http2", "https", "inspector", "module", "net",
    "os", "path", "perf_hooks", "process", "punycode", "querystring",
    "readline", "repl", "stream", "string_decoder", "sys", "timers", "tls",
    "trace_events", "tty", "url", "util", "v8", "vm", "wasi",
    "worker_threads", "zlib",
})

_SCOPED_NAME = re.compile(r"^(?:@([^/]+?)/)?([^/]+?)$")
_SPECIAL_CHARS = re.compile(r"[~'!()*]")

# Characters JavaScript's encodeURIComponent leaves untouched.
_URL_SAFE = "-_.!~*'()"


@dataclass(frozen=True)
class NameValidation:
    """Outcome of validating a project name."""

    name: str
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    @property
    def valid(self) -> bool:
        return not self.errors and not self.warnings

    @property
    def problems(self) -> list[str]:
        """Every violation, errors first."""
        return [*self.errors, *self.warnings]


def _url_friendly(part: str) -> bool:
    return quote(part, safe=_URL_SAFE) == part


def validate_project_name(name: str) -> NameValidation:
    """Validate *name* against npm package naming rules.

    Examples::

        validate_project_name("my-app").valid   -> True
        validate_project_name("My App!").valid  -> False
    """
    errors: list[str] = []
    warnings: list[str] = []

    if not name:
        errors.append("name length must be greater than zero")
        return NameValidation(name=name, errors=errors, warnings=warnings)

    if name.startswith("."):
        errors.append("name cannot start with a period")
    if name.startswith("_"):
        errors.append("name cannot start with an underscore")
    if name.strip() != name:
        errors.append("name cannot contain leading or trailing spaces")

    if name.lower() in BLACKLISTED_NAMES:
        errors.append(f"{name} is a blacklisted name")

    if name.lower() in CORE_MODULE_NAMES:
        warnings.append(f"{name} is a core module name")

    if len(name) > MAX_NAME_LENGTH:
        warnings.append(
            f"name can no longer contain more than {MAX_NAME_LENGTH} characters"
        )

    if name.lower() != name:
        warnings.append("name can no longer contain capital letters")

    last_segment = name.split("/")[-1]
    if _SPECIAL_CHARS.search(last_segment):
        warnings.append(
            "name can no longer contain special characters (\"~'!()*\")"
        )

    if "/" in name:
        errors.append("project name cannot contain a slash")

    if not _url_friendly(name):
        match = _SCOPED_NAME.match(name)
        if match and match.group(1) is not None:
            scope, package = match.group(1), match.group(2)
            if package.startswith("."):
                errors.append("name cannot start with a period")
            elif not (_url_friendly(scope) and _url_friendly(package)):
                errors.append("name can only contain URL-friendly characters")
        else:
            errors.append("name can only contain URL-friendly characters")

    return NameValidation(name=name, errors=errors, warnings=warnings)


def sanitize_project_name(name: str) -> str:
    """Best-effort conversion of *name* into a valid project name.

    Lowercases, replaces runs of characters other than ``a-z``, ``0-9`` and
    ``-`` with a single hyphen and trims hyphens from both ends.

    Examples::

        sanitize_project_name("My App!") -> "my-app"
    """
    result = re.sub(r"[^a-z0-9-]+", "-", name.strip().lower())
    result = re.sub(r"-+", "-", result)
    return result.strip("-")
