"""Shell glue: the bash hook and the reply format it reads."""

from dockcomp.engine.candidates import Completion

BASH_SCRIPT = """\
# bash completion for {command}, generated by dockcomp
_dockcomp_{func}() {{
	local cur prev words cword
	_get_comp_words_by_ref -n : cur prev words cword

	local colon=--colon-wordbreak
	[[ $COMP_WORDBREAKS == *:* ]] || colon=--no-colon-wordbreak

	local IFS=$'\\n'
	local reply=( $({program} complete "$colon" --cword "$cword" -- "${{words[@]}}" 2>/dev/null) )
	unset IFS

	local directive="${{reply[0]}}"
	COMPREPLY=( "${{reply[@]:1}}" )

	case ",$directive," in
		*,nospace,*) compopt -o nospace ;;
	esac
	case ",$directive," in
		*,dirnames,*) _filedir -d ;;
		*,filedir,*) _filedir ;;
	esac
	return 0
}}

complete -F _dockcomp_{func} {command}
"""


def bash_script(command: str = "docker", program: str = "dockcomp") -> str:
    """Return the bash hook that delegates ``command`` completion to ``program``."""
    func = "".join(c if c.isalnum() else "_" for c in command)
    return BASH_SCRIPT.format(command=command, func=func, program=program)


def ltrim_colon(texts: list[str], cur: str) -> list[str]:
    """Drop the part of each candidate bash already treats as a separate word.

    With ":" in COMP_WORDBREAKS, bash only replaces the text after the last
    colon of the current word.
    """
    if ":" not in cur:
        return texts
    head = cur[: cur.rfind(":") + 1]
    return [t[len(head):] if t.startswith(head) else t for t in texts]


def directives(completion: Completion) -> str:
    parts = []
    if completion.nospace:
        parts.append("nospace")
    if completion.filedir == "dir":
        parts.append("dirnames")
    elif completion.filedir == "file":
        parts.append("filedir")
    return ",".join(parts) or "default"


def format_reply(completion: Completion, cur: str = "", *, colon_wordbreak: bool = True) -> list[str]:
    """Directive line followed by one candidate per line."""
    texts = completion.texts()
    if colon_wordbreak:
        texts = ltrim_colon(texts, cur)
    return [directives(completion), *texts]
