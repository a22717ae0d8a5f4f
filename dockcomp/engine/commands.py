"""The subcommand dispatch table."""

from __future__ import annotations

from dockcomp.engine import resolvers as r
from dockcomp.engine.command import Command, GlobalCommand
from dockcomp.engine.constants import CONTAINER_STATUSES, EVENT_NAMES, GLOBAL_BOOLEAN_OPTIONS, SUBCOMMANDS
from dockcomp.engine.tokens import option, switch

HELP_TARGET = "help"


def help_only(name: str) -> Command:
    return Command(name)


# ── run / create ──────────────────────────────────────────


def _run_options():
    """Value-consuming options shared by run and create."""
    return [
        option("--add-host", complete=r.host_address),
        option("--attach", "-a", complete=r.words("stdin", "stdout", "stderr")),
        option("--blkio-weight"),
        option("--cap-add", "--cap-drop", complete=r.capabilities),
        option("--cgroup-parent"),
        option("--cidfile", "--env-file", "--label-file", complete=r.file_paths),
        option("--cpu-period"),
        option("--cpu-quota"),
        option("--cpuset-cpus"),
        option("--cpuset-mems"),
        option("--cpu-shares", "-c"),
        option("--device", "--volume", "-v", complete=r.device_paths),
        option("--dns"),
        option("--dns-search"),
        option("--entrypoint"),
        option("--env", "-e", complete=r.environment_names),
        option("--expose"),
        option("--group-add"),
        option("--hostname", "-h"),
        option("--ipc", complete=r.ipc_namespace),
        option("--label", "-l"),
        option("--link", complete=r.link_target),
        option("--log-driver", complete=r.log_drivers),
        option("--log-opt", complete=r.log_driver_options, assignments={
            "gelf-address": r.words("udp", suffix="://"),
            "syslog-address": r.words("tcp", "udp", "unix", suffix="://"),
            "syslog-facility": r.syslog_facilities,
        }),
        option("--lxc-conf"),
        option("--mac-address"),
        option("--memory", "-m"),
        option("--memory-swap"),
        option("--memory-swappiness"),
        option("--name"),
        option("--net", complete=r.network_mode),
        option("--pid"),
        option("--publish", "-p"),
        option("--restart", complete=r.restart_policy),
        option("--security-opt", complete=r.security_option),
        option("--ulimit"),
        option("--user", "-u"),
        option("--uts"),
        option("--volumes-from", complete=r.all_containers),
        option("--workdir", "-w"),
    ]


def _create_switches():
    return [
        switch("--disable-content-trust=false"),
        switch("--interactive", "-i"),
        switch("--oom-kill-disable"),
        switch("--privileged"),
        switch("--publish-all", "-P"),
        switch("--read-only"),
        switch("--tty", "-t"),
    ]


def _run_command(name: str) -> Command:
    flags = _run_options() + _create_switches()
    if name == "run":
        flags += [switch("--detach", "-d"), switch("--rm"), switch("--sig-proxy")]
    return Command(name, flags=flags, positionals=(r.image_references,))


# ── Table ─────────────────────────────────────────────────


def build_dispatch_table() -> dict[str, Command]:
    """Map every subcommand name, plus "help", to its completion rules."""
    commands = [
        Command(
            "attach",
            flags=[switch("--no-stdin"), switch("--sig-proxy")],
            positionals=(r.running_containers,),
        ),
        Command(
            "build",
            flags=[
                option("--cgroup-parent"), option("--cpuset-cpus"), option("--cpuset-mems"),
                option("--cpu-shares", "-c"), option("--cpu-period"), option("--cpu-quota"),
                option("--memory", "-m"), option("--memory-swap"), option("--ulimit"),
                option("--file", "-f", complete=r.file_paths),
                option("--tag", "-t", complete=r.image_repos_and_tags),
                switch("--force-rm"), switch("--no-cache"), switch("--pull"),
                switch("--quiet", "-q"), switch("--rm"),
            ],
            positionals=(r.directory_paths,),
        ),
        Command(
            "commit",
            flags=[
                option("--author", "-a"), option("--change", "-c"), option("--message", "-m"),
                switch("--pause", "-p"),
            ],
            positionals=(r.all_containers, r.image_repos_and_tags),
        ),
        Command("cp", positionals=(r.copy_source, r.directory_paths)),
        _run_command("create"),
        Command(
            "events",
            flags=[
                option("--filter", "-f", complete=r.words("container", "event", "image", suffix="="), assignments={
                    "container": r.all_containers,
                    "event": r.words(*EVENT_NAMES),
                    "image": r.image_references,
                }),
                option("--since"), option("--until"),
            ],
        ),
        Command(
            "exec",
            flags=[
                option("--user", "-u"),
                switch("--detach", "-d"), switch("--interactive", "-i"),
                switch("--privileged"), switch("--tty", "-t"),
            ],
            positionals=(r.running_containers,),
        ),
        Command("export", positionals=(r.all_containers,)),
        Command(
            "history",
            flags=[switch("--no-trunc"), switch("--quiet", "-q")],
            positionals=(r.image_references,),
        ),
        Command(
            "images",
            flags=[
                option(
                    "--filter", "-f",
                    complete=r.merge(r.words("dangling=true"), r.words("label=", nospace=True)),
                    assignments={"dangling": r.words("true", "false"), "label": r.nothing},
                ),
                switch("--all", "-a"), switch("--digests"), switch("--no-trunc"), switch("--quiet", "-q"),
            ],
            rest=r.image_repos,
        ),
        Command("import", positionals=(r.nothing, r.image_repos_and_tags)),
        help_only("info"),
        Command(
            "inspect",
            flags=[
                option("--format", "-f"),
                option("--type", complete=r.words("image", "container")),
            ],
            rest=r.inspect_target,
        ),
        Command(
            "kill",
            flags=[option("--signal", "-s", complete=r.signals)],
            rest=r.running_containers,
        ),
        Command("load", flags=[option("--input", "-i", complete=r.file_paths)]),
        Command("login", flags=[option("--email", "-e"), option("--password", "-p"), option("--username", "-u")]),
        help_only("logout"),
        Command(
            "logs",
            flags=[
                option("--since"), option("--tail"),
                switch("--follow", "-f"), switch("--timestamps", "-t"),
            ],
            positionals=(r.all_containers,),
        ),
        Command("pause", positionals=(r.pauseable_containers,)),
        Command("port", positionals=(r.all_containers,)),
        Command(
            "ps",
            flags=[
                option("--before", "--since", complete=r.all_containers),
                option("--filter", "-f", complete=r.words("exited", "id", "label", "name", "status", suffix="="),
                       assignments={
                           "id": r.container_ids,
                           "name": r.container_names,
                           "status": r.words(*CONTAINER_STATUSES),
                       }),
                option("--format"), option("-n"),
                switch("--all", "-a"), switch("--latest", "-l"), switch("--no-trunc"),
                switch("--quiet", "-q"), switch("--size", "-s"),
            ],
        ),
        Command("pull", flags=[switch("--all-tags", "-a")], positionals=(r.pullable_images,)),
        Command("push", positionals=(r.image_repos_and_tags,)),
        Command("rename", positionals=(r.all_containers, r.nothing)),
        Command("restart", flags=[option("--time", "-t")], rest=r.all_containers),
        Command(
            "rm",
            flags=[switch("--force", "-f"), switch("--link", "-l"), switch("--volumes", "-v")],
            rest=r.removable_containers,
        ),
        Command("rmi", flags=[switch("--force", "-f"), switch("--no-prune")], rest=r.image_references),
        _run_command("run"),
        Command("save", flags=[option("--output", "-o", complete=r.file_paths)], rest=r.image_references),
        Command("search", flags=[option("--stars", "-s"), switch("--automated"), switch("--no-trunc")]),
        Command(
            "start",
            flags=[switch("--attach", "-a"), switch("--interactive", "-i")],
            rest=r.stopped_containers,
        ),
        Command("stats", flags=[switch("--no-stream")], rest=r.running_containers),
        Command("stop", flags=[option("--time", "-t")], rest=r.running_containers),
        Command("tag", flags=[switch("--force", "-f")], positionals=(r.image_repos_and_tags, r.image_repos_and_tags)),
        Command("top", positionals=(r.running_containers,)),
        Command("unpause", positionals=(r.unpauseable_containers,)),
        help_only("version"),
        Command("wait", rest=r.all_containers),
    ]
    table = {c.name: c for c in commands}
    table[HELP_TARGET] = Command(HELP_TARGET, positionals=(r.words(*SUBCOMMANDS),))
    return table


def global_command(table: dict[str, Command]) -> GlobalCommand:
    """Rules for the words before the subcommand."""
    vocabulary = sorted(table)
    return GlobalCommand(
        "docker",
        flags=[
            option("--config", complete=r.directory_paths),
            option("--host", "-H"),
            option("--log-level", "-l", complete=r.log_levels),
            option("--tlscacert"), option("--tlscert"), option("--tlskey"),
            *(switch(name) for name in GLOBAL_BOOLEAN_OPTIONS if name != "--help"),
        ],
        positionals=(r.words(*vocabulary),),
    )
