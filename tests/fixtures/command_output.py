"""
Sample command output for zpool-summary tests

Mirrors what `zfs get -Hp` and `zpool status` print on a FreeBSD desktop with
a root pool, a data pool and a small boot pool.
"""

from zpool_summary.core.interfaces.command_executor import CommandResult


CAPACITY_OUTPUT = (
    "zroot\tavailable\t500000000000\n"
    "zroot\tused\t500000000000\n"
    "tank\tavailable\t2000000000000\n"
    "tank\tused\t6000000000000\n"
    "bootpool\tavailable\t1500000000\n"
    "bootpool\tused\t500000000\n"
)

HEALTHY_STATUS_OUTPUT = """  pool: bootpool
 state: ONLINE
config:

\tNAME        STATE     READ WRITE CKSUM
\tbootpool    ONLINE       0     0     0
\t  ada0p2    ONLINE       0     0     0

errors: No known data errors

  pool: tank
 state: ONLINE
  scan: scrub repaired 0B in 05:12:41 with 0 errors on Sun Oct 12 05:40:03 2025
config:

\tNAME        STATE     READ WRITE CKSUM
\ttank        ONLINE       0     0     0
\t  mirror-0  ONLINE       0     0     0
\t    ada1    ONLINE       0     0     0
\t    ada2    ONLINE       0     0     0

errors: No known data errors

  pool: zroot
 state: ONLINE
config:

\tNAME        STATE     READ WRITE CKSUM
\tzroot       ONLINE       0     0     0
\t  nvd0p4    ONLINE       0     0     0

errors: No known data errors
"""

DEGRADED_STATUS_OUTPUT = """  pool: tank
 state: DEGRADED
status: One or more devices could not be opened.  Sufficient replicas exist for
\tthe pool to continue functioning in a degraded state.
action: Attach the missing device and online it using 'zpool online'.
config:

\tNAME        STATE     READ WRITE CKSUM
\ttank        DEGRADED     0     0     0
\t  mirror-0  DEGRADED     0     0     0
\t    ada1    ONLINE       0     0     0
\t    ada2    UNAVAIL      0     0     0  cannot open

errors: No known data errors
"""

# `zfs get` and `zpool status` on a machine without pools
NO_POOLS_STATUS_OUTPUT = "no pools available\n"


def ok(stdout: str) -> CommandResult:
    return CommandResult(returncode=0, stdout=stdout, stderr="")


def failed(returncode: int = 1, stderr: str = "") -> CommandResult:
    return CommandResult(returncode=returncode, stdout="", stderr=stderr)


def command_results(capacity: CommandResult, status: CommandResult):
    """side_effect for execute_system answering the zfs and zpool commands."""
    def execute_system(command, *args):
        return capacity if command == "zfs" else status
    return execute_system
