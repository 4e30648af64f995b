# proctinet

An interactive installer for the ProctiNet anti-botnet solution. It signs
the operator in against the list of known users, installs the Suricata
intrusion detection system and its dependencies with `apt`, writes a
Suricata configuration bound to the machine's Ethernet interface, updates
the rule sets, tests the setup, and then empties the test log files.

## Requirements

- A Debian or Ubuntu host with `bash`, `apt`, `add-apt-repository` and
  `systemctl`
- The PostgreSQL command-line client `psql`, used to read the user list
  (`username` and `email` from the `users_user` table)
- Root privileges. The installer stops at once with exit status 1 when it
  is not run as root.
- Python 3.10 or later

## Installation

```
pip install .
```

## Usage

```
sudo proctinet [--env PATH] [--template PATH] [--config-path PATH]
```

Options:

- `--env`: environment file with the database settings (default `.env`)
- `--template`: Suricata configuration template (default `suricata.yaml`)
- `--config-path`: where the configuration is written
  (default `/etc/suricata/suricata.yaml`)

The installer goes through these steps:

1. Reads the environment file and the template. If either cannot be read,
   it stops with exit status 1.
2. Shows a welcome screen with a spinner while it fetches the user list
   through `psql` (connecting with `sslmode=require`). It then asks for a
   username and an e-mail address, which must match a known user. Type
   `exit` to quit (exit status 0). After a successful sign-in, a
   `license.json` file holding `username`, `email` and `license` is written
   to the current directory.
3. Runs each installation command in `bash`: package update and upgrade,
   dependency install, adding the Suricata repository, installing Suricata,
   and stopping the service. When a command fails, you are asked whether to
   continue. Answer `y` to go on; any other answer stops the installer with
   exit status 1. There is a one-second pause after each command.
4. Writes the configuration from the template, replacing the first
   `_IFACE_` placeholder with the name of the first Ethernet interface
   found. If no Ethernet interface is found, the installer stops.
5. Lists the available rule sources, runs `suricata-update`, tests the
   configuration, restarts the service, fetches a test page with `curl`
   and shows `/var/log/suricata/fast.log`.
6. Empties `/var/log/suricata/eve.json` and `/var/log/suricata/fast.log`.

## Environment file

The database settings are read from a file of `KEY=value` lines. Blank
lines and lines that start with `#` are ignored, lines without `=` are
skipped with a warning, and surrounding whitespace is trimmed from keys
and values.

```
DB_HOST=localhost
DB_USER=user
DB_PASSWORD=password
DB_NAME=proctinet
DB_PORT=5432
```

## Library use

The building blocks can be used on their own:

```python
from proctinet.envloader import parse_env
from proctinet.interfaces import first_interface_name, list_interfaces
from proctinet.installer import render_config

env = parse_env("DB_HOST=localhost\nDB_PORT=5432\n")
iface = first_interface_name("ethernet", list_interfaces(), "linux")
if iface is not None:
    config = render_config("af-packet:\n  - interface: _IFACE_\n", iface)
```

- `proctinet.envloader`: `parse_env`, `load_env`
- `proctinet.interfaces`: `NetworkInterface`, `list_interfaces`,
  `interface_patterns`, `is_matching_interface`, `matching_interfaces`,
  `first_interface_name`
- `proctinet.license`: `LicenseData`, `save_credentials`
- `proctinet.welcome`: `render_welcome`, `Loader`
- `proctinet.auth`: `UserRecord`, `build_dsn`, `is_valid_user`,
  `authenticate`, `AuthenticationAborted`
- `proctinet.installer`: `Command`, `execute_command`,
  `update_suricata_config`, `list_rule_sources`, `enable_rule_sources`,
  `confirm_action`, `clear_suricata_logs`, `InstallAborted`, `main`

## What it does not do

- No Suricata configuration template is shipped with the package; pass
  your own with `--template`.
- The `proctinet` command does not enable extra rule sources. That is
  available only through `enable_rule_sources` when used as a library.
- It does not talk to PostgreSQL directly; it needs the `psql` client.

## Running the tests

```
pip install ".[test]"
pytest
```