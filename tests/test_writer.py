"""Tests for rendering policies into the mmapplypolicy grammar."""

import io
import textwrap

import pytest

from mmpolicy.policy import (
    ExternalList,
    FileList,
    GroupFilter,
    Policy,
    Rule,
    Show,
    UserFilter,
    format_show,
    render_policy,
    write_policy,
)


def _list_policy(**kwargs) -> Policy:
    policy = Policy.new("list")
    policy.rules.append(Rule.of(FileList(name="files", **kwargs)))
    return policy


class TestRenderPolicy:
    def test_empty_policy_renders_nothing(self):
        assert render_policy(Policy.new("empty")) == ""

    def test_external_list_and_list(self):
        policy = Policy.new("report")
        policy.rules.append(Rule.of(ExternalList(name="report", exec="myscript")))
        policy.rules.append(
            Rule.of(FileList(name="report", directories_plus=True, show=[Show.KB_ALLOCATED]))
        )

        expected = textwrap.dedent(
            """\
            RULE
              EXTERNAL LIST 'report'
              EXEC 'myscript'

            RULE
              LIST 'report'
              DIRECTORIES_PLUS
              SHOW(VARCHAR(KB_ALLOCATED))
            """
        )
        assert render_policy(policy) == expected

    def test_all_clauses(self):
        policy = Policy.new("list")
        policy.rules.append(Rule.of(ExternalList(name="size", exec="")))
        policy.rules.append(
            Rule.of(
                FileList(
                    name="size",
                    directories_plus=True,
                    show=[Show.MODE, Show.NLINK, Show.FILE_SIZE, Show.KB_ALLOCATED],
                    where=UserFilter(id=1000),
                )
            )
        )

        expected = (
            "RULE\n"
            "  EXTERNAL LIST 'size'\n"
            "  EXEC ''\n"
            "\n"
            "RULE\n"
            "  LIST 'size'\n"
            "  DIRECTORIES_PLUS\n"
            "  SHOW(VARCHAR(MODE) || ' ' || VARCHAR(NLINK) || ' ' || "
            "VARCHAR(FILE_SIZE) || ' ' || VARCHAR(KB_ALLOCATED))\n"
            "  WHERE USER_ID = 1000\n"
        )
        assert render_policy(policy) == expected

    def test_labelled_rule_header(self, size_policy):
        text = render_policy(size_policy)
        assert text.splitlines()[4] == "RULE 'size'"

    def test_separators_between_rules_only(self):
        policy = Policy.new("many")
        for index in range(4):
            policy.rules.append(Rule.of(ExternalList(name=f"list{index}", exec="true")))

        text = render_policy(policy)

        assert text.count("\n\n") == 3
        assert not text.startswith("\n")
        assert not text.endswith("\n\n")

    def test_rule_order_is_preserved(self):
        policy = Policy.new("order")
        for name in ("b", "a", "c"):
            policy.rules.append(Rule.of(ExternalList(name=name, exec="")))

        names = [line for line in render_policy(policy).splitlines() if "EXTERNAL LIST" in line]
        assert names == ["  EXTERNAL LIST 'b'", "  EXTERNAL LIST 'a'", "  EXTERNAL LIST 'c'"]

    def test_rendering_is_deterministic(self, size_policy):
        assert render_policy(size_policy) == render_policy(size_policy)


class TestListClauses:
    def test_bare_list(self):
        assert render_policy(_list_policy()) == "RULE\n  LIST 'files'\n"

    def test_directories_plus_only_when_set(self):
        assert "DIRECTORIES_PLUS" not in render_policy(_list_policy(directories_plus=False))
        assert "  DIRECTORIES_PLUS\n" in render_policy(_list_policy(directories_plus=True))

    def test_show_omitted_when_empty(self):
        assert "SHOW" not in render_policy(_list_policy(show=[]))

    def test_show_two_attributes(self):
        text = render_policy(_list_policy(show=[Show.MODE, Show.NLINK]))
        assert "  SHOW(VARCHAR(MODE) || ' ' || VARCHAR(NLINK))\n" in text

    def test_show_keeps_input_order(self):
        assert format_show([Show.NLINK, Show.MODE]) == "VARCHAR(NLINK) || ' ' || VARCHAR(MODE)"

    def test_group_filter(self):
        text = render_policy(_list_policy(where=GroupFilter(id=100)))
        assert text.endswith("  WHERE GROUP_ID = 100\n")

    def test_user_filter(self):
        text = render_policy(_list_policy(where=UserFilter(id=0)))
        assert text.endswith("  WHERE USER_ID = 0\n")

    def test_no_filter(self):
        assert "WHERE" not in render_policy(_list_policy())

    def test_clause_order(self):
        text = render_policy(
            _list_policy(directories_plus=True, show=[Show.MODE], where=GroupFilter(id=5))
        )
        assert text.splitlines() == [
            "RULE",
            "  LIST 'files'",
            "  DIRECTORIES_PLUS",
            "  SHOW(VARCHAR(MODE))",
            "  WHERE GROUP_ID = 5",
        ]


class TestQuoting:
    def test_empty_strings_render_as_empty_quotes(self):
        policy = Policy.new("")
        policy.rules.append(Rule(label="", kind=ExternalList(name="", exec="")))
        assert render_policy(policy) == "RULE ''\n  EXTERNAL LIST ''\n  EXEC ''\n"

    def test_single_quotes_are_not_escaped(self):
        # Known limitation: embedded quotes produce text mmapplypolicy may reject.
        policy = Policy.new("quotes")
        policy.rules.append(Rule(label="it's", kind=ExternalList(name="x", exec="echo 'hi'")))

        text = render_policy(policy)

        assert "RULE 'it's'" in text
        assert "EXEC 'echo 'hi''" in text


class TestWritePolicy:
    def test_writes_to_stream(self, size_policy):
        buffer = io.StringIO()
        write_policy(size_policy, buffer)
        assert buffer.getvalue() == render_policy(size_policy)

    def test_sink_errors_propagate(self, size_policy):
        class FullDisk(io.StringIO):
            def write(self, s):
                raise OSError(28, "No space left on device")

        with pytest.raises(OSError, match="No space left"):
            write_policy(size_policy, FullDisk())
