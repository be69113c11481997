"""
Tests for interlace errors
"""

import pytest

from interlace.errors import (
    ActionValidationError,
    InterlaceError,
    InvalidActionError,
    StoreError,
    StoreShapeError,
)


class TestInterlaceError:
    """Test suite for InterlaceError"""

    def test_code_message_and_cause(self):
        """Test attributes are kept"""
        cause = ValueError("boom")
        error = InterlaceError("SOME_CODE", "Something failed", cause)
        assert error.code == "SOME_CODE"
        assert str(error) == "Something failed"
        assert error.cause is cause

    def test_cause_defaults_to_none(self):
        """Test cause is optional"""
        error = InterlaceError("SOME_CODE", "Something failed")
        assert error.cause is None


class TestHierarchy:
    """Test error subclasses"""

    def test_invalid_action_is_store_error(self):
        """Test InvalidActionError inherits from StoreError"""
        error = InvalidActionError(lambda d, g: None)
        assert isinstance(error, StoreError)
        assert error.code == "INVALID_ACTION"
        assert "middleware" in str(error)

    def test_store_shape_error(self):
        """Test StoreShapeError names the missing capability"""
        error = StoreShapeError("get_state")
        assert error.missing == "get_state"
        assert "get_state" in str(error)

    def test_action_validation_error(self):
        """Test ActionValidationError carries errors"""
        error = ActionValidationError("Invalid action", errors=[{"loc": ("type",)}])
        assert error.code == "ACTION_VALIDATION"
        assert error.errors == [{"loc": ("type",)}]

        with pytest.raises(InterlaceError):
            raise error
