"""Static vocabularies for the completion engine."""

# Marker printed by `docker images` for untagged images
NONE_REPOSITORY = "<none>"
NONE_TAG = "<none>"

SUBCOMMANDS = (
    "attach", "build", "commit", "cp", "create", "events", "exec", "export",
    "history", "images", "import", "info", "inspect", "kill", "load", "login",
    "logout", "logs", "pause", "port", "ps", "pull", "push", "rename",
    "restart", "rm", "rmi", "run", "save", "search", "start", "stats", "stop",
    "tag", "top", "unpause", "version", "wait",
)

GLOBAL_BOOLEAN_OPTIONS = ("--debug", "-D", "--tls", "--tlsverify", "--help", "--version", "-v")

LOG_LEVELS = ("debug", "info", "warn", "error", "fatal")

CAPABILITIES = (
    "ALL", "AUDIT_CONTROL", "AUDIT_WRITE", "AUDIT_READ", "BLOCK_SUSPEND",
    "CHOWN", "DAC_OVERRIDE", "DAC_READ_SEARCH", "FOWNER", "FSETID",
    "IPC_LOCK", "IPC_OWNER", "KILL", "LEASE", "LINUX_IMMUTABLE", "MAC_ADMIN",
    "MAC_OVERRIDE", "MKNOD", "NET_ADMIN", "NET_BIND_SERVICE", "NET_BROADCAST",
    "NET_RAW", "SETFCAP", "SETGID", "SETPCAP", "SETUID", "SYS_ADMIN",
    "SYS_BOOT", "SYS_CHROOT", "SYSLOG", "SYS_MODULE", "SYS_NICE", "SYS_PACCT",
    "SYS_PTRACE", "SYS_RAWIO", "SYS_RESOURCE", "SYS_TIME", "SYS_TTY_CONFIG",
    "WAKE_ALARM",
)

SIGNALS = (
    "SIGCONT", "SIGHUP", "SIGINT", "SIGKILL", "SIGQUIT", "SIGSTOP", "SIGTERM",
    "SIGUSR1", "SIGUSR2",
)

LOG_DRIVERS = ("fluentd", "gelf", "journald", "json-file", "none", "syslog")

# Option keys accepted by --log-opt, per driver. Drivers without an entry take no options.
LOG_DRIVER_OPTIONS = {
    "fluentd": ("fluentd-address", "fluentd-tag"),
    "gelf": ("gelf-address", "gelf-tag"),
    "json-file": ("max-file", "max-size"),
    "syslog": ("syslog-address", "syslog-facility", "syslog-tag"),
}

SYSLOG_FACILITIES = (
    "auth", "authpriv", "cron", "daemon", "ftp", "kern", "local0", "local1",
    "local2", "local3", "local4", "local5", "local6", "local7", "lpr", "mail",
    "news", "syslog", "user", "uucp",
)

EVENT_NAMES = (
    "attach", "commit", "copy", "create", "delete", "destroy", "die",
    "exec_create", "exec_start", "export", "import", "kill", "oom", "pause",
    "pull", "push", "rename", "resize", "restart", "start", "stop", "tag",
    "top", "unpause", "untag",
)

CONTAINER_STATUSES = ("exited", "paused", "restarting", "running")
