"""Handing the generated files over to a configured owner."""

from __future__ import annotations

from certsmaker.config import Config
from certsmaker.shell import execute


def permission_fix_commands(config: Config) -> str:
    """Return the shell script that creates the owner and hands over the output.

    The script is empty when no owner is configured.
    """
    if not config.has_owner():
        return ""
    user, uid, gid, out = config.user, config.uid, config.gid, config.output_dir
    return (
        f"addgroup -g {gid} {user}\n"
        f'adduser -g "" -G {user} -H -D -u {uid} {user}\n'
        f"chown -R {user}:{user} {out}\n"
        f"chmod -R a+r {out}\n"
    )


def fix_permissions(config: Config) -> bool:
    """Run the ownership script; False when there was nothing to do.

    Raises CommandError when the script fails.
    """
    script = permission_fix_commands(config)
    if not script:
        return False
    execute(script)
    return True