#!/usr/bin/env python3
"""
Form Session Example

Drives the registration example form end to end: switches the account
type to business and back, fills in the fields, and submits.

Usage:
    python examples/render_form_example.py
    SCHEMA_FORMS_ENABLE_TRACING=true python examples/render_form_example.py
"""

import json
import logging

from schema_forms import FormController, get_config
from schema_forms.examples import load_example_schema


def print_layout(nodes, indent: int = 0) -> None:
    pad = "  " * indent
    for node in nodes:
        data = node.to_dict()
        if data["kind"] == "field":
            error = f"  <- {data['error']}" if data["error"] else ""
            print(f"{pad}- {data['fieldId']} [{data['control']['control']}]{error}")
        else:
            title = data.get("title") or ""
            print(f"{pad}{data['kind']} {title}".rstrip())
            print_layout(node.children, indent + 1)


def main():
    config = get_config()
    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    schema = load_example_schema("user-registration")
    controller = FormController(schema)

    print("=" * 60)
    print(f"{schema.meta.title}: {schema.meta.subtitle}")
    print("=" * 60)

    change = controller.set_value("accountType", "business")
    print(f"\nBusiness account shows: {change.shown}")

    controller.set_value("companyName", "Acme Inc.")
    change = controller.set_value("accountType", "personal")
    print(f"Personal account hides: {change.hidden}")

    result = controller.submit()
    print(f"\nFirst submit accepted: {result.is_valid}")
    for field_name, message in result.error_map().items():
        print(f"  {field_name}: {message}")

    controller.set_value("firstName", "Ada")
    controller.set_value("lastName", "Lovelace")
    controller.set_value("dateOfBirth", "1990-12-10")
    controller.set_value("email", "ada@example.com")
    controller.set_value("password", "Analytical1")
    controller.set_value("confirmPassword", "Analytical1")
    controller.set_value("agreeToTerms", True)

    print("\nLayout:")
    print_layout(controller.render())

    result = controller.submit()
    print(f"\nSecond submit accepted: {result.is_valid}")
    for warning in result.warnings:
        print(f"  warning: {warning}")
    if result.validated_data:
        print(json.dumps(result.validated_data, indent=2, default=str))


if __name__ == "__main__":
    main()
