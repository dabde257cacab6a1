"""Detection of the package manager the tool was launched with.

npm, yarn and pnpm all export ``npm_config_user_agent`` to the scripts they
run (``yarn/1.22.19 npm/? node/v18.17.0 ...``).  The detection is a
best-effort substring match and always returns a value.
"""

from __future__ import annotations

import os
from enum import Enum

USER_AGENT_ENV = "npm_config_user_agent"


class PackageManager(str, Enum):
    NPM = "npm"
    YARN = "yarn"
    PNPM = "pnpm"

    @property
    def install_command(self) -> list[str]:
        """Argument list that installs a project's dependencies."""
        return [self.value, "install"]

    def run_command(self, script: str) -> str:
        """Display form of running a ``package.json`` script."""
        return f"{self.value} run {script}"


def detect_package_manager(user_agent: str | None = None) -> PackageManager:
    """Classify the invoking package manager.

    Args:
        user_agent: The user agent string to inspect.  Read from the
            ``npm_config_user_agent`` environment variable when omitted.

    Returns:
        ``YARN`` if the agent mentions yarn, else ``PNPM`` if it mentions
        pnpm, else ``NPM``.
    """
    if user_agent is None:
        user_agent = os.environ.get(USER_AGENT_ENV, "")

    if "yarn" in user_agent:
        return PackageManager.YARN
    if "pnpm" in user_agent:
        return PackageManager.PNPM
    return PackageManager.NPM
