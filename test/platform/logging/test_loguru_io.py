"""
Unit tests for the LoguruIO helpers used by @Logger.io
"""

import pytest

from src.platform.exception.exceptions import MalformedValueError
from src.platform.logging.loguru_io import Logger
from src.platform.logging.loguru_io_utils import (
    mask_sensitive,
    should_mask_keyword,
    truncate_content,
)


@pytest.mark.unit
class TestMaskSensitive:
    @pytest.mark.parametrize(
        'raw,expected',
        [
            ('https://h/api?sig=abc123&x=1', "https://h/api?sig='********'&x=1"),
            ('token: eyJhbGciOi', "token: '********'"),
            ('nothing to hide', 'nothing to hide'),
        ],
    )
    def test_masks_sensitive_pairs(self, raw: str, expected: str) -> None:
        assert mask_sensitive(raw) == expected

    def test_non_string_values_are_returned_unchanged(self) -> None:
        value = {'a': 1}
        assert mask_sensitive(value) is value

    def test_keyword_masking(self) -> None:
        assert should_mask_keyword('password', 'hunter2') == '********'
        assert should_mask_keyword('name', 'orders') == 'orders'

    def test_truncate_content(self) -> None:
        assert truncate_content('x' * 600).endswith('...(truncated)')
        assert truncate_content('short') == 'short'


@pytest.mark.unit
class TestLoggerIo:
    def test_return_value_passes_through(self) -> None:
        @Logger.io
        def add(a: int, b: int) -> int:
            return a + b

        assert add(1, 2) == 3

    def test_exception_is_reraised_once_logged(self) -> None:
        @Logger.io
        def fail() -> None:
            raise MalformedValueError('EventId', 'x')

        with pytest.raises(MalformedValueError) as exc_info:
            fail()
        assert getattr(exc_info.value, '_has_logged', False) is True

    def test_reraise_false_swallows_and_returns_none(self) -> None:
        @Logger.io(reraise=False)
        def fail() -> int:
            raise RuntimeError('boom')

        assert fail() is None
