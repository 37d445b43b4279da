"""Tests for notification models."""

import pytest
from pydantic import ValidationError

from run_notifier.models.notification import NotificationMetadata


class TestNotificationMetadata:
    """Tests for NotificationMetadata model."""

    def test_parses_tool_output_by_alias(self) -> None:
        """Reads the camelCase keys printed by notification tools."""
        metadata = NotificationMetadata.model_validate_json(
            '{"activationType": "actionClicked", "activationValue": "Run again"}'
        )

        assert metadata.activation_type == "actionClicked"
        assert metadata.activation_value == "Run again"

    def test_accepts_field_names(self) -> None:
        """Builds from snake_case field names as well as aliases."""
        assert NotificationMetadata(activation_value="Exit tests") == (
            NotificationMetadata.model_validate({"activationValue": "Exit tests"})
        )

    def test_is_frozen(self) -> None:
        """Rejects assignment after construction."""
        metadata = NotificationMetadata(activation_value="Close")

        with pytest.raises(ValidationError):
            metadata.activation_value = "Run again"  # type: ignore[misc]
