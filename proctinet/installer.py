"""Installation and configuration of Suricata after a successful login."""

from __future__ import annotations

import argparse
import os
import subprocess
import sys
import time
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from pathlib import Path

from .auth import AuthenticationAborted, UserRecord, authenticate, build_dsn
from .envloader import load_env
from .interfaces import first_interface_name
from .license import save_credentials
from .welcome import render_welcome

DEFAULT_CONFIG_PATH = "/etc/suricata/suricata.yaml"
INTERFACE_PLACEHOLDER = "_IFACE_"
LICENSE_NAME = "licence ABC"
COMMAND_PAUSE = 1.0

Runner = Callable[..., "subprocess.CompletedProcess"]


@dataclass(frozen=True)
class Command:
    """A shell command with a description and an emoji shown while it runs."""

    cmd: str
    description: str
    emoji: str


class InstallAborted(Exception):
    """Raised when the installation cannot or should not go on."""


INSTALL_COMMANDS = (
    Command("apt update", "Updating package lists", "📦"),
    Command("apt upgrade -y", "Upgrading packages", "⬆️"),
    Command(
        "apt -y install libnetfilter-queue-dev libnetfilter-queue1 "
        "libnfnetlink-dev libnfnetlink0 jq",
        "Installing dependencies",
        "🔧",
    ),
    Command("add-apt-repository ppa:oisf/suricata-stable -y", "Adding Suricata repository", "📚"),
    Command("apt install suricata -y", "Installing Suricata", "🛡️"),
    Command("systemctl stop suricata.service", "Stopping Suricata service", "🛑"),
)

FINAL_COMMANDS = (
    Command("suricata-update", "Updating Suricata rules", "🔄"),
    Command("suricata -T -c /etc/suricata/suricata.yaml -v", "Testing configuration", "🧪"),
    Command("systemctl restart suricata.service", "Restarting Suricata service", "♻️"),
    Command("curl http://testmynids.org/uid/index.html", "Testing IDS functionality", "🌐"),
    Command("cat /var/log/suricata/fast.log", "Checking logs", "📋"),
)

CLEAR_LOG_COMMANDS = (
    """sudo su -c 'echo "" > /var/log/suricata/eve.json'""",
    """sudo su -c 'echo "" > /var/log/suricata/fast.log'""",
)


def _run(runner: Runner, args: Sequence[str]) -> str | None:
    """Run *args*; return an error description, or None on success."""
    try:
        result = runner(list(args))
    except OSError as exc:
        return str(exc)
    if result.returncode != 0:
        return f"exit status {result.returncode}"
    return None


def render_config(template: str, interface_name: str) -> str:
    """Put *interface_name* in place of the first interface placeholder."""
    return template.replace(INTERFACE_PLACEHOLDER, interface_name, 1)


def confirm_action(answer: str | None = None) -> bool:
    """Tell whether *answer* (read from stdin if None) is a yes."""
    if answer is None:
        try:
            answer = input()
        except EOFError:
            answer = ""
    return answer.strip().lower() == "y"


def execute_command(
    command: Command,
    confirm: Callable[[], bool] = confirm_action,
    runner: Runner = subprocess.run,
) -> bool:
    """Run *command* in bash; return whether it succeeded.

    On failure the user is asked whether to go on; InstallAborted is raised if not.
    """
    print(f"\n{command.emoji} {command.description}...")
    error = _run(runner, ["bash", "-c", command.cmd])
    if error is not None:
        print(f"❌ Error executing command: {error}")
        print("Would you like to continue anyway? (y/n)")
        if not confirm():
            raise InstallAborted(f"command failed: {command.cmd}")
    time.sleep(COMMAND_PAUSE)
    return error is None


def update_suricata_config(
    template: str,
    interface_name: str | None,
    config_path: str | Path = DEFAULT_CONFIG_PATH,
) -> Path:
    """Write the configuration for *interface_name* to *config_path*."""
    if interface_name is None:
        raise InstallAborted("No wan network interface found")
    target = Path(config_path)
    try:
        target.write_text(render_config(template, interface_name), encoding="utf-8")
    except OSError as exc:
        raise InstallAborted(f"Failed to update Suricata config: {exc}") from exc
    print("✅ Suricata configuration updated successfully! 🎉")
    return target


def list_rule_sources(runner: Runner = subprocess.run) -> None:
    """Show the rule sources known to suricata-update."""
    _run(runner, ["suricata-update", "list-sources"])


def enable_rule_sources(sources: str, runner: Runner = subprocess.run) -> bool:
    """Enable the space-separated rule *sources*; return whether anything ran."""
    sources = sources.strip()
    if not sources:
        return False
    _run(runner, ["bash", "-c", "suricata-update enable-source " + sources])
    return True


def clear_suricata_logs(runner: Runner = subprocess.run) -> list[str]:
    """Empty Suricata's log files; return the commands that succeeded."""
    print("\n🧹 Clearing Suricata log files...")
    cleared = []
    for cmd in CLEAR_LOG_COMMANDS:
        error = _run(runner, ["bash", "-c", cmd])
        if error is not None:
            print(f"❌ Error clearing logs: {error}")
        else:
            print(f"✅ Successfully cleared: {cmd}")
            cleared.append(cmd)
    return cleared


def _fetch_users(dsn: str) -> list[UserRecord]:
    query = "SELECT username, email FROM users_user"
    try:
        result = subprocess.run(
            ["psql", dsn, "-At", "-F", "\t", "-c", query],
            capture_output=True,
            text=True,
            check=False,
        )
    except OSError as exc:
        raise InstallAborted(f"Failed to connect to database: {exc}") from exc
    if result.returncode != 0:
        raise InstallAborted(f"Failed to connect to database: {result.stderr.strip()}")
    users = []
    for line in result.stdout.splitlines():
        if not line:
            continue
        username, _, email = line.partition("\t")
        users.append(UserRecord(username, email))
    return users


def _is_root() -> bool:
    geteuid = getattr(os, "geteuid", None)
    return geteuid is not None and geteuid() == 0


def _read_line() -> str:
    try:
        return input()
    except EOFError:
        return ""


def _write(text: str) -> None:
    sys.stdout.write(text)
    sys.stdout.flush()


def main(argv: Sequence[str] | None = None) -> int:
    """Log in, then install and configure Suricata. Return the exit status."""
    parser = argparse.ArgumentParser(description="Install and configure Suricata.")
    parser.add_argument("--env", default=".env", help="environment file with DB settings")
    parser.add_argument("--template", default="suricata.yaml", help="Suricata config template")
    parser.add_argument("--config-path", default=DEFAULT_CONFIG_PATH)
    args = parser.parse_args(argv)

    if not _is_root():
        print("❌ This script must be run with sudo privileges")
        print("Please run it again with sudo")
        return 1

    try:
        env = load_env(args.env)
        template = Path(args.template).read_text(encoding="utf-8")
    except OSError as exc:
        print(f"❌ {exc}")
        return 1

    loader = render_welcome()
    print("\033[33m\nWelcome to the authentication program!\033[0m")
    try:
        users = _fetch_users(build_dsn(env))
    except InstallAborted as exc:
        loader.stop()
        print(f"\033[31m❌ {exc}\033[0m")
        return 1
    loader.stop()

    try:
        user = authenticate(users, _read_line, _write)
    except AuthenticationAborted:
        return 0
    save_credentials(user.username, user.email, LICENSE_NAME)

    try:
        for command in INSTALL_COMMANDS:
            execute_command(command)
        print("\n📝 Updating Suricata configuration file...")
        update_suricata_config(template, first_interface_name("ethernet"), args.config_path)
        print("\n📜 Listing available rule sources...")
        list_rule_sources()
        for command in FINAL_COMMANDS:
            execute_command(command)
    except InstallAborted as exc:
        print(f"❌ {exc}")
        return 1

    print("\n✅ Suricata installation and configuration complete! 🚀")
    clear_suricata_logs()
    return 0