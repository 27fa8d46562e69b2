"""
Command Name Tables

Read-only lookup tables used by base-command resolution and statistics:
command categories, known editors, wrapper/privilege prefixes, and which
wrapper options consume a value.
"""

from types import MappingProxyType

# Category definitions (declaration order is the reporting order)
CATEGORY_COMMANDS = MappingProxyType(
    {
        "Git": ("git", "gh", "hub", "tig", "lazygit", "gitui"),
        "Containers": (
            "docker",
            "podman",
            "kubectl",
            "k9s",
            "helm",
            "docker-compose",
            "minikube",
            "kind",
        ),
        "Packages": (
            "npm",
            "yarn",
            "pnpm",
            "pip",
            "pip3",
            "cargo",
            "brew",
            "apt",
            "apt-get",
            "yum",
            "dnf",
            "pacman",
            "go",
        ),
        "Editors": (
            "vim",
            "nvim",
            "nano",
            "emacs",
            "code",
            "cursor",
            "subl",
            "atom",
            "micro",
            "hx",
            "helix",
        ),
        "Navigation": (
            "cd",
            "ls",
            "pwd",
            "tree",
            "z",
            "autojump",
            "j",
            "exa",
            "eza",
            "lsd",
            "ll",
            "la",
        ),
        "Search": ("grep", "rg", "ag", "find", "fd", "fzf", "ack", "locate"),
        "Network": ("ssh", "scp", "curl", "wget", "rsync", "ping", "nc", "netcat", "telnet", "sftp"),
        "Files": (
            "cat",
            "less",
            "head",
            "tail",
            "rm",
            "cp",
            "mv",
            "mkdir",
            "touch",
            "chmod",
            "chown",
            "ln",
            "bat",
        ),
    }
)

# Reverse index: command -> categories containing it
COMMAND_CATEGORIES = MappingProxyType(
    {
        command: tuple(
            category for category, commands in CATEGORY_COMMANDS.items() if command in commands
        )
        for commands in CATEGORY_COMMANDS.values()
        for command in commands
    }
)

EDITOR_COMMANDS = frozenset(
    {"vim", "nvim", "nano", "emacs", "code", "cursor", "subl", "micro", "hx", "helix"}
)

PRIVILEGE_COMMANDS = frozenset({"sudo", "doas"})

WRAPPER_COMMANDS = PRIVILEGE_COMMANDS | frozenset({"time", "nice", "nohup", "strace", "ltrace"})

# Short options that take the next token as their value (e.g. `sudo -u root ls`)
WRAPPER_VALUE_OPTIONS = MappingProxyType(
    {
        "sudo": frozenset({"-u", "-g", "-h", "-p", "-C", "-D", "-R", "-T", "-U", "-r", "-t"}),
        "doas": frozenset({"-u", "-C"}),
        "time": frozenset({"-f", "-o"}),
        "nice": frozenset({"-n"}),
        "strace": frozenset({"-o", "-e", "-p", "-s", "-u", "-E", "-P", "-I"}),
        "ltrace": frozenset({"-o", "-e", "-p", "-s", "-u", "-n", "-a", "-A", "-D", "-F"}),
    }
)
