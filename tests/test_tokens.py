"""Tests for flag descriptors, the token classifier and the line tokenizer."""

from dockcomp.engine import FlagSet, TokenKind, classify_tokens, option, switch, tokenize_line

RUN_FLAGS = FlagSet([
    option("--name"),
    option("--log-opt"),
    option("--memory", "-m"),
    switch("--detach", "-d"),
])


def kinds(words, start=1, flags=RUN_FLAGS):
    return [t.kind for t in classify_tokens(words, start, flags)]


# ── FlagSet ────────────────────────────────────────────────


class TestFlagSet:
    def test_exact_long_and_short(self):
        assert RUN_FLAGS.find("--memory") is RUN_FLAGS.find("-m")

    def test_unknown_flag(self):
        assert RUN_FLAGS.find("--nope") is None

    def test_match_joined_value(self):
        flag, value = RUN_FLAGS.match("--name=web")
        assert "--name" in flag.names
        assert value == "web"

    def test_match_joined_empty_value(self):
        _, value = RUN_FLAGS.match("--name=")
        assert value == ""

    def test_match_plain_has_no_value(self):
        _, value = RUN_FLAGS.match("--name")
        assert value is None

    def test_joined_match_requires_dash(self):
        assert RUN_FLAGS.match("name=web") is None

    def test_from_pattern_alternation(self):
        flags = FlagSet.from_pattern("--tail|-n")
        assert flags.find("--tail") is not None
        assert flags.find("-n") is not None
        assert flags.find("--tails") is None

    def test_from_pattern_extglob(self):
        flags = FlagSet.from_pattern("@(--since|--until)")
        assert flags.find("--until") is not None

    def test_glob_names(self):
        flags = FlagSet.from_pattern("--cpu-*")
        assert flags.find("--cpu-shares") is not None
        assert flags.find("--cpus") is None

    def test_valued_subset(self):
        names = RUN_FLAGS.valued().spellings()
        assert "--name" in names
        assert "--detach" not in names

    def test_spellings_skip_globs(self):
        flags = FlagSet.from_pattern("--cpu-*|--memory")
        assert flags.spellings() == ["--memory"]


# ── Classifier ─────────────────────────────────────────────


class TestClassify:
    def test_flag_consumes_value(self):
        assert kinds(["docker", "run", "--name", "web", "ubuntu"]) == [
            TokenKind.FLAG, TokenKind.VALUE, TokenKind.FREE,
        ]

    def test_split_equals_form(self):
        assert kinds(["docker", "run", "--name", "=", "web", "ubuntu"]) == [
            TokenKind.FLAG, TokenKind.ASSIGN, TokenKind.VALUE, TokenKind.FREE,
        ]

    def test_joined_form(self):
        assert kinds(["docker", "run", "--name=web", "ubuntu"]) == [TokenKind.FLAG_VALUE, TokenKind.FREE]

    def test_boolean_flag_stands_alone(self):
        assert kinds(["docker", "run", "-d", "ubuntu"]) == [TokenKind.FLAG, TokenKind.FREE]

    def test_boolean_flag_with_split_value(self):
        assert kinds(["docker", "run", "--detach", "=", "false", "ubuntu"]) == [
            TokenKind.FLAG, TokenKind.ASSIGN, TokenKind.VALUE, TokenKind.FREE,
        ]

    def test_key_value_option_argument(self):
        words = ["docker", "run", "--log-opt", "syslog-tag", "=", "x", "ubuntu"]
        assert kinds(words) == [
            TokenKind.FLAG, TokenKind.VALUE, TokenKind.ASSIGN, TokenKind.VALUE, TokenKind.FREE,
        ]

    def test_unknown_flag_is_boolean(self):
        assert kinds(["docker", "run", "--whatever", "ubuntu"]) == [TokenKind.FLAG, TokenKind.FREE]

    def test_stop_truncates(self):
        tokens = classify_tokens(["docker", "run", "--name", "web"], 1, RUN_FLAGS, stop=2)
        assert [t.index for t in tokens] == [2]

    def test_tokens_carry_text(self):
        tokens = classify_tokens(["docker", "run", "ubuntu", "ls"], 1, RUN_FLAGS)
        assert [(t.index, t.text) for t in tokens] == [(2, "ubuntu"), (3, "ls")]


# ── Tokenizer ──────────────────────────────────────────────


class TestTokenizeLine:
    def test_trailing_space_starts_new_word(self):
        assert tokenize_line("docker rm ") == (["docker", "rm", ""], 2)

    def test_partial_word(self):
        assert tokenize_line("docker r") == (["docker", "r"], 1)

    def test_equals_is_its_own_word(self):
        words, cword = tokenize_line("docker run --log-opt=syslog-tag=x")
        assert words == ["docker", "run", "--log-opt", "=", "syslog-tag", "=", "x"]
        assert cword == 6

    def test_trailing_equals(self):
        words, _ = tokenize_line("docker ps --filter status=")
        assert words[-2:] == ["status", "="]

    def test_colon_is_not_a_separator(self):
        words, _ = tokenize_line("docker tag myrepo:1.0 ")
        assert words == ["docker", "tag", "myrepo:1.0", ""]

    def test_empty_line(self):
        assert tokenize_line("") == ([""], 0)
