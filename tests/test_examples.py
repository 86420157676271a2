"""Tests for the example schemas."""

from datetime import date

import pytest

from schema_forms.config import FormEngineConfig
from schema_forms.controller import FormController
from schema_forms.examples import EXAMPLE_SCHEMAS, list_example_schemas, load_example_schema
from schema_forms.guardrails import check_schema


class TestExampleSchemas:
    """Tests for the bundled example forms."""

    def test_listing(self):
        """Test all seven examples are listed."""
        assert list_example_schemas() == [
            "contact-form",
            "user-registration",
            "agent-update",
            "product-form",
            "address-form",
            "job-application",
            "insurance-quote",
        ]

    @pytest.mark.parametrize("name", list(EXAMPLE_SCHEMAS))
    def test_clean(self, name):
        """Test each example loads without errors or warnings."""
        schema = load_example_schema(name)
        assert schema.id == name
        result = check_schema(schema)
        assert result.errors == []
        assert result.warnings == []

    @pytest.mark.parametrize("name", list(EXAMPLE_SCHEMAS))
    def test_renders(self, name):
        """Test each example can start a session and render."""
        controller = FormController(load_example_schema(name), config=FormEngineConfig())
        assert controller.render()

    def test_fresh_documents(self):
        """Test builders return new documents with today's date."""
        first = EXAMPLE_SCHEMAS["user-registration"]()
        second = EXAMPLE_SCHEMAS["user-registration"]()
        assert first is not second
        assert first["fields"]["dateOfBirth"]["props"]["maxDate"] == date.today()

    def test_unknown_example(self):
        """Test asking for a missing example."""
        with pytest.raises(KeyError):
            load_example_schema("survey")

    def test_agent_type_switch(self):
        """Test the agent form swaps identifiers with the agent type."""
        controller = FormController(load_example_schema("agent-update"), config=FormEngineConfig())
        controller.set_value("agent_type", "Individual")
        assert controller.is_visible("id_number")
        assert not controller.is_visible("kra_pin")

        change = controller.set_value("agent_type", "Business")
        assert change.shown == ["kra_pin"]
        assert change.hidden == ["id_number"]

    def test_discount_switch(self):
        """Test the discount percentage follows the switch."""
        controller = FormController(load_example_schema("product-form"), config=FormEngineConfig())
        assert not controller.is_visible("discountPercentage")
        change = controller.set_value("discountApplied", True)
        assert change.shown == ["discountPercentage"]
        assert change.error is None

        change = controller.set_value("discountPercentage", 95)
        assert change.error == "Discount cannot exceed 90%"
