"""Tests for ContextVar-based parse configuration.

Validates thread isolation, context manager behavior, and that disabled
constructs degrade to plain text.
"""

from threading import Thread

import pytest

from plumas import (
    Paragraph,
    ParseConfig,
    Parser,
    Table,
    get_parse_config,
    parse,
    parse_config_context,
    reset_parse_config,
    set_parse_config,
)


class TestParseConfigDataclass:
    """Test ParseConfig frozen dataclass behavior."""

    def test_default_values(self) -> None:
        """Default config enables every construct."""
        config = ParseConfig()
        assert config.tables_enabled is True
        assert config.strikethrough_enabled is True
        assert config.task_lists_enabled is True
        assert config.footnotes_enabled is True
        assert config.definition_lists_enabled is True
        assert config.group_lists is False
        assert config.blank_line_breaks is False
        assert config.max_nesting_depth == 32

    def test_immutability(self) -> None:
        config = ParseConfig()
        with pytest.raises(AttributeError):
            config.tables_enabled = False  # type: ignore[misc]

    def test_from_dict(self) -> None:
        config = ParseConfig.from_dict({"tables_enabled": False, "max_nesting_depth": 4})
        assert config.tables_enabled is False
        assert config.max_nesting_depth == 4
        assert config.footnotes_enabled is True

    def test_from_dict_ignores_unknown_keys(self) -> None:
        config = ParseConfig.from_dict({"unknown_key": 1, "group_lists": True})
        assert config == ParseConfig(group_lists=True)

    def test_from_empty_dict(self) -> None:
        assert ParseConfig.from_dict({}) == ParseConfig()


class TestContextVarFunctions:
    """Test get/set/reset functions."""

    def teardown_method(self) -> None:
        reset_parse_config()

    def test_default_config(self) -> None:
        assert get_parse_config() == ParseConfig()

    def test_set_and_get(self) -> None:
        set_parse_config(ParseConfig(tables_enabled=False))
        assert get_parse_config().tables_enabled is False

    def test_set_config_used_by_parse(self) -> None:
        set_parse_config(ParseConfig(tables_enabled=False))
        blocks = parse("| a |\n|---|").children
        assert isinstance(blocks[0], Paragraph)

    def test_reset_restores_default(self) -> None:
        set_parse_config(ParseConfig(tables_enabled=False))
        reset_parse_config()
        assert get_parse_config().tables_enabled is True


class TestParseConfigContext:
    """Test parse_config_context context manager."""

    def test_context_sets_config(self) -> None:
        with parse_config_context(ParseConfig(tables_enabled=False)):
            assert get_parse_config().tables_enabled is False
        assert get_parse_config().tables_enabled is True

    def test_parser_reads_context(self) -> None:
        with parse_config_context(ParseConfig(tables_enabled=False)):
            blocks = Parser("| a |\n|---|").parse().children
        assert isinstance(blocks[0], Paragraph)
        assert isinstance(Parser("| a |\n|---|").parse().children[0], Table)

    def test_nested_contexts(self) -> None:
        with parse_config_context(ParseConfig(tables_enabled=False)):
            with parse_config_context(ParseConfig(footnotes_enabled=False)):
                assert get_parse_config().footnotes_enabled is False
                assert get_parse_config().tables_enabled is True
            assert get_parse_config().tables_enabled is False
        assert get_parse_config() == ParseConfig()

    def test_context_restores_on_exception(self) -> None:
        with pytest.raises(ValueError, match="test"):
            with parse_config_context(ParseConfig(tables_enabled=False)):
                raise ValueError("test")
        assert get_parse_config().tables_enabled is True


class TestThreadIsolation:
    """Test thread-local configuration isolation."""

    def test_thread_isolation(self) -> None:
        """Each thread parses with its own config."""
        results: dict[int, type] = {}

        def worker(thread_id: int, config: ParseConfig) -> None:
            set_parse_config(config)
            results[thread_id] = type(Parser("| a |\n|---|").parse().children[0])

        configs = [ParseConfig(tables_enabled=i % 2 == 0) for i in range(4)]
        threads = [Thread(target=worker, args=(i, c)) for i, c in enumerate(configs)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert results == {0: Table, 1: Paragraph, 2: Table, 3: Paragraph}
        assert get_parse_config() == ParseConfig()
